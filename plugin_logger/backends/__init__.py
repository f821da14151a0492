"""Backends module - Concrete loggers"""

from plugin_logger.backends.console_logger import ConsoleLogger
from plugin_logger.backends.file_logger import FileLogger
from plugin_logger.backends.memory_logger import MemoryLogger

__all__ = ["ConsoleLogger", "FileLogger", "MemoryLogger"]

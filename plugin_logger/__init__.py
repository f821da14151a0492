"""
BSD 3-Clause License

Copyright (c) 2021, 🍀☀🌕🌥 🌊
All rights reserved.

Plugin Logger - A pluggable application logger base
Console, rotating file and in-memory backends share one formatting,
configuration and serialized-write core.
"""

__version__ = "1.0.0"
__author__ = "kcenon"
__email__ = "kcenon@naver.com"

from plugin_logger.core.logger_base import LoggerBase
from plugin_logger.core.locker import SerializedInvoker
from plugin_logger.core.log_entry import LogEntry
from plugin_logger.core.log_level import LogLevel, LogTimeOption
from plugin_logger.core.logger_config import LoggerConfiguration
from plugin_logger.backends import ConsoleLogger, FileLogger, MemoryLogger

from plugin_logger import backends

__all__ = [
    "LoggerBase",
    "SerializedInvoker",
    "LogEntry",
    "LogLevel",
    "LogTimeOption",
    "LoggerConfiguration",
    "ConsoleLogger",
    "FileLogger",
    "MemoryLogger",
    "backends",
]

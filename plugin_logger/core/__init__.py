"""
Core module for the plugin logger

This module contains the fundamental classes:
- LoggerBase: Abstract logger every backend extends
- SerializedInvoker: Mutual-exclusion gate for backend writes
- LogEntry: Formatted log entry
- LogLevel, LogTimeOption: Enumerations
- LoggerConfiguration: Configuration value
"""

from plugin_logger.core.log_entry import LogEntry
from plugin_logger.core.log_level import LogLevel, LogTimeOption
from plugin_logger.core.locker import InvokeResult, SerializedInvoker
from plugin_logger.core.logger_base import LoggerBase
from plugin_logger.core.logger_config import LoggerConfiguration

__all__ = [
    "LoggerBase",
    "SerializedInvoker",
    "InvokeResult",
    "LogEntry",
    "LogLevel",
    "LogTimeOption",
    "LoggerConfiguration",
]

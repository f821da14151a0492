"""
Base logger - the contract every backend extends

Holds configuration, formats entries and exposes the per-level convenience
methods. Backends supply persistence (``log``), location
(``get_local_storage_path``), enumeration (``get_all``) and ``purge``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable, Optional

from plugin_logger.core.log_entry import LogEntry
from plugin_logger.core.log_level import LogLevel, LogTimeOption
from plugin_logger.core.locker import SerializedInvoker
from plugin_logger.core.logger_config import (
    CONFIGURE_DEFAULT_MAX_LOG_FILE_SIZE_KB,
    DEFAULT_LEVEL,
    DEFAULT_LOG_FILE_NAME,
    DEFAULT_MAX_LOG_FILES_COUNT,
    LoggerConfiguration,
)


class LoggerBase(ABC):
    """
    Abstract base class for loggers.

    The convenience methods (``debug`` ... ``fatal``) forward every call to
    ``log`` without checking the configured level. Backends filter inside
    their ``log`` with ``is_enabled`` and serialize their writes with
    ``_locked_invoke``.

    Example:
        class ListLogger(LoggerBase):
            def log(self, level=LogLevel.WARN, tag="tag", message="message", error=None):
                config = self.configuration
                if self.is_enabled(level, config):
                    line = self.create_entry(level, tag, message, error, config).to_line()
                    self._locked_invoke(lambda: self.lines.append(line))
            ...
    """

    def __init__(self, config: Optional[LoggerConfiguration] = None):
        self._config = config or LoggerConfiguration.default()
        self._locker = SerializedInvoker()

    # Configuration

    def configure(
        self,
        time_option: LogTimeOption = LogTimeOption.LOCAL_TIME,
        log_file_name: str = DEFAULT_LOG_FILE_NAME,
        max_log_files_count: int = DEFAULT_MAX_LOG_FILES_COUNT,
        max_log_file_size_kb: int = CONFIGURE_DEFAULT_MAX_LOG_FILE_SIZE_KB,
        level: LogLevel = DEFAULT_LEVEL,
        log_to_console: bool = False,
    ) -> None:
        """
        Replace the whole configuration.

        Args:
            time_option: Clock used to stamp entries
            log_file_name: File name backends persist to
            max_log_files_count: Retention bound for backends
            max_log_file_size_kb: Rotation threshold for backends
            level: Minimum severity persisted
            log_to_console: Echo entries to the console
        """
        self.configure_from(
            LoggerConfiguration(
                log_file_name=log_file_name,
                max_log_files_count=max_log_files_count,
                max_log_file_size_kb=max_log_file_size_kb,
                level=level,
                log_to_console=log_to_console,
                time_option=time_option,
            )
        )

    def configure_from(self, config: LoggerConfiguration) -> None:
        """Install a prepared configuration."""
        if not isinstance(config, LoggerConfiguration):
            raise TypeError("config must be LoggerConfiguration")
        self._config = config

    @property
    def configuration(self) -> LoggerConfiguration:
        """Current configuration."""
        return self._config

    def get_log_file_name(self) -> str:
        return self._config.log_file_name

    def get_log_level(self) -> LogLevel:
        return self._config.level

    def get_log_to_console(self) -> bool:
        return self._config.log_to_console

    def get_time_option(self) -> LogTimeOption:
        return self._config.time_option

    def get_max_log_files_count(self) -> int:
        return self._config.max_log_files_count

    def get_max_log_file_size_kb(self) -> int:
        return self._config.max_log_file_size_kb

    # Formatting and filtering

    def is_enabled(self, level: LogLevel,
                   config: Optional[LoggerConfiguration] = None) -> bool:
        """
        Check level against the configured minimum.

        Args:
            level: Entry severity
            config: Configuration snapshot to check against
                    (default: the current configuration)
        """
        return level >= (config or self._config).level

    def create_entry(
        self,
        level: LogLevel = LogLevel.WARN,
        tag: str = "tag",
        message: str = "message",
        error: Optional[BaseException] = None,
        config: Optional[LoggerConfiguration] = None,
    ) -> LogEntry:
        """Build an entry stamped with the clock of config (default: current)."""
        return LogEntry(
            level=level,
            timestamp=(config or self._config).time_option.now(),
            tag=tag,
            message=message,
            error=error,
        )

    def format_message(
        self,
        level: LogLevel = LogLevel.WARN,
        tag: str = "tag",
        message: str = "message",
        error: Optional[BaseException] = None,
    ) -> str:
        """
        Format one entry.

        Without error: ``"{Level} {yyyy-MM-dd HH:mm:ss.fff} {tag} {message}"``.
        With error the line continues with
        ``" EXCEPTION: {error} STACK TRACE: {traceback}"``.

        Args:
            level: Entry severity
            tag: Free-form tag
            message: Free-form message
            error: Optional exception

        Returns:
            Formatted entry terminated by ``os.linesep``
        """
        return self.create_entry(level, tag, message, error).to_line()

    # Backend contract

    @abstractmethod
    def log(
        self,
        level: LogLevel = LogLevel.WARN,
        tag: str = "tag",
        message: str = "message",
        error: Optional[BaseException] = None,
    ) -> None:
        """
        Persist or emit one entry.

        Args:
            level: Entry severity
            tag: Free-form tag
            message: Free-form message
            error: Optional exception
        """
        raise NotImplementedError

    @abstractmethod
    def get_local_storage_path(self) -> str:
        """Directory where the backend keeps its logs."""
        raise NotImplementedError

    def get_all(self, in_descending_order: bool = True) -> str:
        """
        Read back every persisted entry.

        Args:
            in_descending_order: Newest entries first

        Returns:
            All entries as text; empty when the backend keeps nothing
        """
        return ""

    @abstractmethod
    def purge(self) -> None:
        """Delete all persisted log data."""
        raise NotImplementedError

    # Convenience methods

    def debug(self, tag: str = "tag", message: str = "message",
              error: Optional[BaseException] = None) -> None:
        """Log debug message."""
        self.log(LogLevel.DEBUG, tag, message, error)

    def info(self, tag: str = "tag", message: str = "message",
             error: Optional[BaseException] = None) -> None:
        """Log info message."""
        self.log(LogLevel.INFO, tag, message, error)

    def warn(self, tag: str = "tag", message: str = "message",
             error: Optional[BaseException] = None) -> None:
        """Log warning message."""
        self.log(LogLevel.WARN, tag, message, error)

    def error(self, tag: str = "tag", message: str = "message",
              error: Optional[BaseException] = None) -> None:
        """Log error message."""
        self.log(LogLevel.ERROR, tag, message, error)

    def fatal(self, tag: str = "tag", message: str = "message",
              error: Optional[BaseException] = None) -> None:
        """Log fatal message."""
        self.log(LogLevel.FATAL, tag, message, error)

    # Serialization

    def _locked_invoke(self, action: Callable[[], None]) -> None:
        """Run a backend write under this logger's gate."""
        self._locker.locked_invoke(action)

    @property
    def is_locked(self) -> bool:
        """True while a gated write is running (diagnostics only)."""
        return self._locker.is_locked

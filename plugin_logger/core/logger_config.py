"""
Logger configuration management

A single immutable value replaced as a whole by ``LoggerBase.configure``.
"""

from dataclasses import asdict, dataclass
from typing import Any, Dict

from plugin_logger.core.log_level import LogLevel, LogTimeOption


DEFAULT_LOG_FILE_NAME = "app.log"
DEFAULT_MAX_LOG_FILES_COUNT = 3
# Size used when a logger is constructed without configuration.
DEFAULT_MAX_LOG_FILE_SIZE_KB = 1000
# Size used by a configure() call that omits the argument.
CONFIGURE_DEFAULT_MAX_LOG_FILE_SIZE_KB = 100
DEFAULT_LEVEL = LogLevel.WARN


@dataclass(frozen=True)
class LoggerConfiguration:
    """
    Logger configuration.

    ``max_log_files_count`` and ``max_log_file_size_kb`` are stored for
    backends; the base logger never reads them.
    """

    log_file_name: str = DEFAULT_LOG_FILE_NAME
    max_log_files_count: int = DEFAULT_MAX_LOG_FILES_COUNT
    max_log_file_size_kb: int = DEFAULT_MAX_LOG_FILE_SIZE_KB
    level: LogLevel = DEFAULT_LEVEL
    log_to_console: bool = False
    time_option: LogTimeOption = LogTimeOption.LOCAL_TIME

    def __post_init__(self):
        """Coerce enum fields given by name."""
        if isinstance(self.level, str):
            object.__setattr__(self, "level", LogLevel.from_string(self.level))
        elif not isinstance(self.level, LogLevel):
            object.__setattr__(self, "level", LogLevel(self.level))
        if isinstance(self.time_option, str):
            object.__setattr__(
                self, "time_option", LogTimeOption.from_string(self.time_option)
            )

    @property
    def max_log_file_size_bytes(self) -> int:
        """Rotation threshold in bytes."""
        return self.max_log_file_size_kb * 1024

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert configuration to dictionary.

        Returns:
            Dictionary with enum fields stored by name
        """
        data = asdict(self)
        data["level"] = self.level.name
        data["time_option"] = self.time_option.name
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LoggerConfiguration":
        """
        Create configuration from dictionary.

        Missing keys keep their defaults.

        Args:
            data: Dictionary with configuration data

        Returns:
            New LoggerConfiguration instance

        Raises:
            ValueError: If a level or time option name is unknown, or
                        log_to_console is not a boolean
        """
        defaults = cls()
        return cls(
            log_file_name=data.get("log_file_name", defaults.log_file_name),
            max_log_files_count=int(
                data.get("max_log_files_count", defaults.max_log_files_count)
            ),
            max_log_file_size_kb=int(
                data.get("max_log_file_size_kb", defaults.max_log_file_size_kb)
            ),
            level=data.get("level", defaults.level),
            log_to_console=_parse_bool(
                data.get("log_to_console", defaults.log_to_console)
            ),
            time_option=data.get("time_option", defaults.time_option),
        )

    @classmethod
    def default(cls) -> "LoggerConfiguration":
        """Create default configuration."""
        return cls()

    @classmethod
    def debug_config(cls) -> "LoggerConfiguration":
        """Create configuration for debugging."""
        return cls(
            level=LogLevel.DEBUG,
            log_to_console=True,
        )

    @classmethod
    def production_config(cls) -> "LoggerConfiguration":
        """Create configuration for production."""
        return cls(
            level=LogLevel.WARN,
            log_to_console=False,
            time_option=LogTimeOption.UTC_TIME,
        )


def _parse_bool(value: Any) -> bool:
    """Accept real booleans and the strings "true"/"false" (any case)."""
    if isinstance(value, bool):
        return value
    if isinstance(value, str) and value.strip().lower() in ("true", "false"):
        return value.strip().lower() == "true"
    raise ValueError(f"Invalid boolean: {value!r}")

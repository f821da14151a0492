"""
Log level and time option enumerations

Severity ordering and clock selection shared by every backend.
"""

from datetime import datetime, timezone
from enum import Enum, IntEnum
from typing import Dict


class LogLevel(IntEnum):
    """
    Log level enumeration.

    Ordering defines filtering severity: DEBUG < INFO < WARN < ERROR < FATAL.
    """

    DEBUG = 10
    INFO = 20
    WARN = 30
    ERROR = 40
    FATAL = 50

    def __str__(self) -> str:
        """Label used in formatted entries (e.g. "Warn")."""
        return LEVEL_LABELS[self]

    @classmethod
    def from_string(cls, name: str) -> "LogLevel":
        """
        Parse a member name or entry label ("WARN", "warn", "Warn").

        Raises:
            ValueError: If name matches no level
        """
        key = name.strip().upper()
        if key not in cls.__members__:
            raise ValueError(f"Invalid log level: {name}")
        return cls[key]

    @property
    def color_code(self) -> str:
        """Escape sequence ConsoleLogger puts in front of entries of this level."""
        return LEVEL_COLORS[self]

    @property
    def reset_code(self) -> str:
        """Escape sequence ending a colored entry."""
        return ANSI_RESET


LEVEL_LABELS: Dict[LogLevel, str] = {
    LogLevel.DEBUG: "Debug",
    LogLevel.INFO: "Info",
    LogLevel.WARN: "Warn",
    LogLevel.ERROR: "Error",
    LogLevel.FATAL: "Fatal",
}

ANSI_RESET = "\033[0m"

LEVEL_COLORS: Dict[LogLevel, str] = {
    LogLevel.DEBUG: "\033[36m",
    LogLevel.INFO: "\033[32m",
    LogLevel.WARN: "\033[33m",
    LogLevel.ERROR: "\033[31m",
    LogLevel.FATAL: "\033[1;31m",
}


class LogTimeOption(Enum):
    """Clock used to stamp log entries."""

    LOCAL_TIME = "local"
    UTC_TIME = "utc"

    def now(self) -> datetime:
        """Current time from the selected clock, timezone-aware."""
        if self is LogTimeOption.UTC_TIME:
            return datetime.now(timezone.utc)
        return datetime.now().astimezone()

    @classmethod
    def from_string(cls, option_str: str) -> "LogTimeOption":
        """
        Convert string to LogTimeOption.

        Accepts member names ("UTC_TIME") or values ("utc"), case-insensitive.

        Raises:
            ValueError: If option_str is not valid
        """
        key = option_str.upper()
        if key in cls.__members__:
            return cls[key]
        for option in cls:
            if option.value == option_str.lower():
                return option
        raise ValueError(f"Invalid time option: {option_str}")

"""
Log entry data structure

One formatted log event. Built per call and never retained by the logger.
"""

import os
import traceback
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from plugin_logger.core.log_level import LogLevel


TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S.%f"


@dataclass
class LogEntry:
    """
    Log entry data structure.

    Contains everything that ends up on a formatted line.
    """

    level: LogLevel
    timestamp: datetime
    tag: str = "tag"
    message: str = "message"
    error: Optional[BaseException] = None

    def __post_init__(self):
        """Validate log entry after initialization."""
        if not isinstance(self.level, LogLevel):
            raise TypeError("level must be LogLevel enum")

    @property
    def formatted_timestamp(self) -> str:
        """Timestamp with millisecond precision."""
        return self.timestamp.strftime(TIMESTAMP_FORMAT)[:-3]

    @property
    def error_message(self) -> Optional[str]:
        """Message of the attached error, if any."""
        if self.error is None:
            return None
        return str(self.error)

    @property
    def stack_trace(self) -> Optional[str]:
        """
        Stack trace of the attached error.

        Empty when the error was never raised.
        """
        if self.error is None:
            return None
        tb = self.error.__traceback__
        if tb is None:
            return ""
        return "".join(traceback.format_tb(tb)).rstrip("\n")

    def to_line(self) -> str:
        """
        Render the entry as written by backends.

        Returns:
            Formatted entry terminated by ``os.linesep``
        """
        line = f"{self.level} {self.formatted_timestamp} {self.tag} {self.message}"
        if self.error is not None:
            line += (
                f" EXCEPTION: {self.error_message or ''}"
                f" STACK TRACE: {self.stack_trace or ''}"
            )
        return line + os.linesep

    def __str__(self) -> str:
        """String representation without the line terminator."""
        return self.to_line().rstrip("\r\n")

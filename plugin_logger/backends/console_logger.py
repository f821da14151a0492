"""Console logger with ANSI colors"""

import os
import sys
from typing import Optional

from plugin_logger.core.log_level import LogLevel
from plugin_logger.core.logger_base import LoggerBase
from plugin_logger.core.logger_config import LoggerConfiguration


class ConsoleLogger(LoggerBase):
    """Write entries to a console stream. Keeps nothing to read back."""

    def __init__(
        self,
        config: Optional[LoggerConfiguration] = None,
        stream=None,
        colored: bool = True,
    ):
        """
        Initialize console logger.

        Args:
            config: Initial configuration (default: LoggerConfiguration())
            stream: Output stream (default: sys.stderr)
            colored: Use ANSI color codes
        """
        super().__init__(config)
        self.stream = stream or sys.stderr
        self.colored = colored

    def log(
        self,
        level: LogLevel = LogLevel.WARN,
        tag: str = "tag",
        message: str = "message",
        error: Optional[BaseException] = None,
    ) -> None:
        """Write entry to the stream if its level is enabled."""
        config = self.configuration
        if not self.is_enabled(level, config):
            return

        msg = self.create_entry(level, tag, message, error, config).to_line()
        if self.colored:
            msg = f"{level.color_code}{msg.rstrip(os.linesep)}{level.reset_code}{os.linesep}"
        self._locked_invoke(lambda: self._write(msg))

    def _write(self, msg: str) -> None:
        self.stream.write(msg)
        self.stream.flush()

    def get_local_storage_path(self) -> str:
        return ""

    def purge(self) -> None:
        """Nothing is stored."""

"""In-memory logger"""

import sys
from typing import List, Optional

from plugin_logger.core.log_level import LogLevel
from plugin_logger.core.logger_base import LoggerBase
from plugin_logger.core.logger_config import LoggerConfiguration


class MemoryLogger(LoggerBase):
    """
    Keep formatted entries in a list.

    Useful in tests and for short-lived processes that report their log on
    demand. Entries are kept until ``purge``.
    """

    STORAGE_PATH = ":memory:"

    def __init__(self, config: Optional[LoggerConfiguration] = None, console_stream=None):
        """
        Initialize memory logger.

        Args:
            config: Initial configuration (default: LoggerConfiguration())
            console_stream: Echo stream when log_to_console is set
                            (default: sys.stderr)
        """
        super().__init__(config)
        self.console_stream = console_stream or sys.stderr
        self._entries: List[str] = []

    @property
    def entries(self) -> List[str]:
        """Copy of the stored formatted entries, oldest first."""
        return list(self._entries)

    def log(
        self,
        level: LogLevel = LogLevel.WARN,
        tag: str = "tag",
        message: str = "message",
        error: Optional[BaseException] = None,
    ) -> None:
        """Store entry if its level is enabled."""
        config = self.configuration
        if not self.is_enabled(level, config):
            return

        line = self.create_entry(level, tag, message, error, config).to_line()
        echo = config.log_to_console

        def write():
            self._entries.append(line)
            if echo:
                self.console_stream.write(line)
                self.console_stream.flush()

        self._locked_invoke(write)

    def get_local_storage_path(self) -> str:
        return self.STORAGE_PATH

    def get_all(self, in_descending_order: bool = True) -> str:
        """Stored entries joined, newest first by default."""
        entries = self.entries
        if in_descending_order:
            entries.reverse()
        return "".join(entries)

    def purge(self) -> None:
        """Drop all stored entries."""
        self._locked_invoke(self._entries.clear)

"""
File logger with size-based rotation

Writes to ``<directory>/<log_file_name>``. When the current file reaches
``max_log_file_size_kb`` it becomes ``<name>.1``, older backups shift up,
and at most ``max_log_files_count`` files (current plus backups) are kept.
"""

import glob
import re
import sys
from pathlib import Path
from typing import Dict, List, Optional, Union

from plugin_logger.core.log_level import LEVEL_LABELS, LogLevel
from plugin_logger.core.logger_base import LoggerBase
from plugin_logger.core.logger_config import LoggerConfiguration


# A formatted entry starts with a level label and a timestamp; anything else
# is a continuation line (stack traces).
ENTRY_START = re.compile(
    r"^(?:%s) \d{4}-\d{2}-\d{2} " % "|".join(LEVEL_LABELS.values())
)


class FileLogger(LoggerBase):
    """
    Append entries to a rotating set of plain-text files.

    Thread Safety:
        Writes, rotation and purge run under the logger's gate.
    """

    def __init__(
        self,
        directory: Union[str, Path],
        config: Optional[LoggerConfiguration] = None,
        encoding: str = "utf-8",
        console_stream=None,
    ):
        """
        Initialize file logger.

        Args:
            directory: Directory holding the log files (created on first write)
            config: Initial configuration (default: LoggerConfiguration())
            encoding: File encoding (default: 'utf-8')
            console_stream: Echo stream when log_to_console is set
                            (default: sys.stderr)
        """
        super().__init__(config)
        self.directory = Path(directory)
        self.encoding = encoding
        self.console_stream = console_stream or sys.stderr
        self.rotations = 0
        self._file = None
        self._file_path: Optional[Path] = None

    @property
    def filepath(self) -> Path:
        """Path of the current log file."""
        return self.directory / self.get_log_file_name()

    def backup_path(self, index: int, file_name: Optional[str] = None) -> Path:
        """Path of the backup with the given index (1 is the newest)."""
        return self.directory / f"{file_name or self.get_log_file_name()}.{index}"

    def _backups(self, file_name: str) -> Dict[int, Path]:
        """Existing backups of file_name keyed by numeric suffix."""
        backups = {}
        if not self.directory.is_dir():
            return backups
        for path in self.directory.glob(f"{glob.escape(file_name)}.*"):
            suffix = path.name[len(file_name) + 1:]
            if suffix.isdigit():
                backups[int(suffix)] = path
        return backups

    def _open(self, path: Path):
        """Open the log file for appending."""
        self.directory.mkdir(parents=True, exist_ok=True)
        self._file_path = path
        self._file = open(path, "a", encoding=self.encoding, newline="")

    def _close(self):
        if self._file:
            self._file.close()
            self._file = None
            self._file_path = None

    def _ensure_open(self, path: Path):
        """Reopen when the configured file name changed."""
        if self._file and self._file_path != path:
            self._close()
        if not self._file:
            self._open(path)

    def _should_rotate(self, config: LoggerConfiguration) -> bool:
        """Check if file should be rotated."""
        if not self._file:
            return False
        size = self._file.tell()
        return size > 0 and size >= config.max_log_file_size_bytes

    def _do_rotate(self, config: LoggerConfiguration):
        """Perform file rotation."""
        self._close()
        name = config.log_file_name
        path = self.directory / name
        backup_count = max(config.max_log_files_count - 1, 0)

        # Rotate existing files
        for i in range(backup_count - 1, 0, -1):
            src = self.backup_path(i, name)
            dst = self.backup_path(i + 1, name)
            if src.exists():
                src.replace(dst)

        # Move current to .1, or drop it when no backups are kept
        if path.exists():
            if backup_count > 0:
                path.replace(self.backup_path(1, name))
            else:
                path.unlink()

        # Backups left over from a larger max_log_files_count
        for index, backup in self._backups(name).items():
            if index > backup_count:
                backup.unlink()

        self.rotations += 1
        self._open(path)

    def _write(self, line: str, config: LoggerConfiguration) -> None:
        self._ensure_open(self.directory / config.log_file_name)
        if self._should_rotate(config):
            self._do_rotate(config)
        self._file.write(line)
        self._file.flush()
        if config.log_to_console:
            self.console_stream.write(line)
            self.console_stream.flush()

    def log(
        self,
        level: LogLevel = LogLevel.WARN,
        tag: str = "tag",
        message: str = "message",
        error: Optional[BaseException] = None,
    ) -> None:
        """Append entry to the current file if its level is enabled."""
        config = self.configuration
        if not self.is_enabled(level, config):
            return

        line = self.create_entry(level, tag, message, error, config).to_line()
        self._locked_invoke(lambda: self._write(line, config))

    def get_local_storage_path(self) -> str:
        return str(self.directory)

    def _existing_files(self) -> List[Path]:
        """Log files oldest first: highest backup index down to the current file."""
        name = self.get_log_file_name()
        backups = self._backups(name)
        files = [backups[index] for index in sorted(backups, reverse=True)]
        path = self.directory / name
        if path.exists():
            files.append(path)
        return files

    def _read_entries(self) -> List[str]:
        entries: List[str] = []
        for path in self._existing_files():
            with open(path, "r", encoding=self.encoding, newline="") as f:
                for line in f:
                    if entries and not ENTRY_START.match(line):
                        entries[-1] += line
                    else:
                        entries.append(line)
        return entries

    def get_all(self, in_descending_order: bool = True) -> str:
        """
        Read entries from the current file and its backups.

        Args:
            in_descending_order: Newest entries first

        Returns:
            All entries as text
        """
        result: List[str] = []

        def read():
            if self._file:
                self._file.flush()
            result.extend(self._read_entries())

        self._locked_invoke(read)
        if in_descending_order:
            result.reverse()
        return "".join(result)

    def purge(self) -> None:
        """Delete the current file and every backup."""

        def remove():
            self._close()
            for path in self._existing_files():
                path.unlink()

        self._locked_invoke(remove)

    def close(self):
        """Close file."""
        self._locked_invoke(self._close)

    def __enter__(self) -> "FileLogger":
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        self.close()

"""Tests for the console, memory and file backends"""

import io
import os
import threading

import pytest

from plugin_logger import ConsoleLogger, FileLogger, LogLevel, LoggerConfiguration, MemoryLogger


def raise_and_catch(message):
    try:
        raise RuntimeError(message)
    except RuntimeError as e:
        return e


class TestMemoryLogger:
    """Test MemoryLogger functionality."""

    def test_filters_by_configured_level(self):
        logger = MemoryLogger()
        logger.debug("t", "hidden")
        logger.info("t", "hidden")
        logger.warn("t", "shown")
        logger.fatal("t", "shown too")

        assert len(logger.entries) == 2
        assert logger.entries[0].startswith("Warn ")
        assert logger.entries[1].startswith("Fatal ")

    def test_get_all_ordering(self):
        logger = MemoryLogger()
        logger.configure(level=LogLevel.DEBUG)
        logger.info("t", "first")
        logger.info("t", "second")

        ascending = logger.get_all(in_descending_order=False)
        descending = logger.get_all()

        assert ascending.index("first") < ascending.index("second")
        assert descending.index("second") < descending.index("first")

    def test_purge(self):
        logger = MemoryLogger()
        logger.error("t", "m")
        logger.purge()
        assert logger.entries == []
        assert logger.get_all() == ""

    def test_storage_path(self):
        assert MemoryLogger().get_local_storage_path() == ":memory:"

    def test_console_echo(self):
        stream = io.StringIO()
        logger = MemoryLogger(console_stream=stream)
        logger.warn("t", "quiet")
        assert stream.getvalue() == ""

        logger.configure(log_to_console=True)
        logger.warn("t", "loud")
        assert "t loud" in stream.getvalue()

    def test_write_uses_one_configuration_snapshot(self):
        stream = io.StringIO()

        class ReconfiguringMemoryLogger(MemoryLogger):
            def create_entry(self, *args, **kwargs):
                entry = super().create_entry(*args, **kwargs)
                self.configure(level=LogLevel.FATAL, log_to_console=True)
                return entry

        logger = ReconfiguringMemoryLogger(console_stream=stream)
        logger.warn("t", "m")

        assert len(logger.entries) == 1
        assert stream.getvalue() == ""
        assert logger.get_log_to_console() is True

    def test_concurrent_writes_all_recorded(self):
        logger = MemoryLogger(LoggerConfiguration.debug_config(), console_stream=io.StringIO())

        def worker(n):
            for i in range(50):
                logger.info(f"worker-{n}", str(i))

        threads = [threading.Thread(target=worker, args=(n,)) for n in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join(timeout=10)

        assert len(logger.entries) == 200
        assert logger.is_locked is False


class TestConsoleLogger:
    """Test ConsoleLogger functionality."""

    def test_plain_output(self):
        stream = io.StringIO()
        logger = ConsoleLogger(stream=stream, colored=False)
        logger.error("net", "timeout")

        output = stream.getvalue()
        assert output.startswith("Error ")
        assert output.endswith("net timeout" + os.linesep)

    def test_colored_output(self):
        stream = io.StringIO()
        logger = ConsoleLogger(stream=stream)
        logger.fatal("t", "m")

        output = stream.getvalue()
        assert output.startswith(LogLevel.FATAL.color_code)
        assert LogLevel.FATAL.reset_code in output

    def test_level_filtering(self):
        stream = io.StringIO()
        logger = ConsoleLogger(stream=stream, colored=False)
        logger.info("t", "m")
        assert stream.getvalue() == ""

    def test_nothing_stored(self):
        logger = ConsoleLogger(stream=io.StringIO())
        logger.warn("t", "m")
        logger.purge()
        assert logger.get_all() == ""
        assert logger.get_local_storage_path() == ""

    def test_stream_failure_propagates(self):
        class BrokenStream:
            def write(self, _):
                raise OSError("closed")

            def flush(self):
                pass

        logger = ConsoleLogger(stream=BrokenStream(), colored=False)
        with pytest.raises(OSError):
            logger.warn("t", "m")
        assert logger.is_locked is False


class TestFileLogger:
    """Test FileLogger functionality."""

    def test_writes_to_configured_file(self, tmp_path):
        with FileLogger(tmp_path) as logger:
            logger.warn("io", "written")
            logger.info("io", "filtered")

        path = tmp_path / "app.log"
        assert path.exists()
        content = path.read_text(encoding="utf-8")
        assert "io written" in content
        assert "filtered" not in content
        assert logger.get_local_storage_path() == str(tmp_path)

    def test_creates_directory(self, tmp_path):
        target = tmp_path / "nested" / "logs"
        with FileLogger(target) as logger:
            logger.error("t", "m")
        assert (target / "app.log").exists()

    def test_follows_file_name_change(self, tmp_path):
        with FileLogger(tmp_path) as logger:
            logger.warn("t", "one")
            logger.configure(log_file_name="other.log")
            logger.warn("t", "two")

        assert "one" in (tmp_path / "app.log").read_text(encoding="utf-8")
        assert "two" in (tmp_path / "other.log").read_text(encoding="utf-8")

    def test_get_all_ordering(self, tmp_path):
        with FileLogger(tmp_path) as logger:
            logger.configure(level=LogLevel.DEBUG)
            logger.debug("t", "first")
            logger.info("t", "second")

            ascending = logger.get_all(in_descending_order=False)
            descending = logger.get_all()

        assert ascending.index("first") < ascending.index("second")
        assert descending.index("second") < descending.index("first")

    def test_get_all_keeps_stack_traces_with_their_entry(self, tmp_path):
        with FileLogger(tmp_path) as logger:
            logger.error("t", "failed", raise_and_catch("boom"))
            logger.error("t", "later")

            descending = logger.get_all()

        assert descending.startswith("Error ")
        later = descending.index("later")
        failed = descending.index("failed")
        trace = descending.index("raise_and_catch")
        assert later < failed < trace

    def test_rotation_bounds_file_count(self, tmp_path):
        config = LoggerConfiguration(max_log_files_count=3, max_log_file_size_kb=1)
        with FileLogger(tmp_path, config) as logger:
            for i in range(200):
                logger.warn("rotate", f"entry {i:04d} " + "x" * 40)

            assert logger.rotations > 2
            files = sorted(p.name for p in tmp_path.iterdir())
            assert files == ["app.log", "app.log.1", "app.log.2"]

            for p in tmp_path.iterdir():
                # one entry may push a file past the threshold before rotating
                assert p.stat().st_size < 1024 + 200

            newest_first = logger.get_all()

        assert "entry 0199" in newest_first
        assert "entry 0000" not in newest_first
        assert newest_first.startswith("Warn ")
        assert newest_first.index("entry 0199") < newest_first.index("entry 0198")

    def test_lowering_files_count_removes_extra_backups(self, tmp_path):
        config = LoggerConfiguration(max_log_files_count=3, max_log_file_size_kb=1)
        with FileLogger(tmp_path, config) as logger:
            for i in range(100):
                logger.warn("rotate", f"before {i:04d} " + "x" * 40)
            assert (tmp_path / "app.log.2").exists()

            logger.configure(max_log_files_count=1, max_log_file_size_kb=1)
            for i in range(100):
                logger.warn("rotate", f"after {i:04d} " + "x" * 40)

            history = logger.get_all()

        assert sorted(p.name for p in tmp_path.iterdir()) == ["app.log"]
        assert "before" not in history

    def test_purge_removes_backups_after_gap(self, tmp_path):
        for name in ("app.log", "app.log.2", "app.log.5"):
            (tmp_path / name).write_text("Warn 2024-01-01 00:00:00.000 t m\n", encoding="utf-8")
        (tmp_path / "app.log.old").write_text("keep", encoding="utf-8")

        with FileLogger(tmp_path) as logger:
            assert logger.get_all().count("t m") == 3
            logger.purge()

        assert [p.name for p in tmp_path.iterdir()] == ["app.log.old"]

    def test_write_uses_one_configuration_snapshot(self, tmp_path):
        stream = io.StringIO()

        class ReconfiguringFileLogger(FileLogger):
            def create_entry(self, *args, **kwargs):
                entry = super().create_entry(*args, **kwargs)
                self.configure(log_file_name="other.log", log_to_console=True)
                return entry

        with ReconfiguringFileLogger(tmp_path, console_stream=stream) as logger:
            logger.warn("t", "snapshot")

        assert "snapshot" in (tmp_path / "app.log").read_text(encoding="utf-8")
        assert not (tmp_path / "other.log").exists()
        assert stream.getvalue() == ""

    def test_rotation_without_backups(self, tmp_path):
        config = LoggerConfiguration(max_log_files_count=1, max_log_file_size_kb=1)
        with FileLogger(tmp_path, config) as logger:
            for i in range(100):
                logger.warn("rotate", f"entry {i:04d} " + "x" * 40)

        assert [p.name for p in tmp_path.iterdir()] == ["app.log"]

    def test_purge_removes_all_files(self, tmp_path):
        config = LoggerConfiguration(max_log_file_size_kb=1)
        with FileLogger(tmp_path, config) as logger:
            for i in range(100):
                logger.warn("t", "y" * 50)
            logger.purge()

            assert list(tmp_path.iterdir()) == []
            assert logger.get_all() == ""

            logger.warn("t", "after purge")
            assert "after purge" in logger.get_all()

    def test_console_echo(self, tmp_path):
        stream = io.StringIO()
        with FileLogger(tmp_path, console_stream=stream) as logger:
            logger.configure(log_to_console=True)
            logger.warn("t", "echoed")
        assert "t echoed" in stream.getvalue()

    def test_concurrent_writes_are_whole_lines(self, tmp_path):
        config = LoggerConfiguration.debug_config()
        with FileLogger(tmp_path, config, console_stream=io.StringIO()) as logger:

            def worker(n):
                for i in range(50):
                    logger.info(f"worker-{n}", "z" * 100)

            threads = [threading.Thread(target=worker, args=(n,)) for n in range(4)]
            for t in threads:
                t.start()
            for t in threads:
                t.join(timeout=10)

            lines = logger.get_all().splitlines()

        assert len(lines) == 200
        assert all(line.startswith("Info ") and line.endswith("z" * 100) for line in lines)

"""Tests for logging setup and processing statistics."""

import logging
from unittest.mock import Mock

from pathsplitter.utils import ProcessingLogger, ProcessingStats, configure_logging


class TestProcessingStats:
    """Tests for ProcessingStats."""

    def test_defaults(self):
        stats = ProcessingStats()
        assert stats.change_count == 0
        assert stats.duration_seconds == 0.0

    def test_change_count(self):
        stats = ProcessingStats(paths_separated=2, ids_assigned=5)
        assert stats.change_count == 7

    def test_duration(self):
        stats = ProcessingStats(start_time=10.0, end_time=12.5)
        assert stats.duration_seconds == 2.5


class TestProcessingLogger:
    """Tests for ProcessingLogger statistics tracking."""

    def test_path_events(self):
        """Test counters updated by path events."""
        logger = Mock()
        processing_logger = ProcessingLogger(logger)

        processing_logger.log_path_start("a")
        processing_logger.log_path_separated("a", ["path-1", "path-2"], 1.234)
        processing_logger.log_path_start("b")
        processing_logger.log_path_skipped("b", "single shape")

        stats = processing_logger.stats
        assert stats.paths_examined == 2
        assert stats.paths_separated == 1
        assert stats.shapes_created == 2
        logger.info.assert_called_once()

    def test_path_error(self):
        """Test errors are counted and kept."""
        logger = Mock()
        processing_logger = ProcessingLogger(logger)

        processing_logger.log_path_error(None, ValueError("bad data"), "Traceback...")

        stats = processing_logger.stats
        assert stats.error_count == 1
        assert stats.errors == [("<unnamed>", "bad data")]
        assert logger.error.call_args.kwargs["error_type"] == "ValueError"

    def test_ids_assigned(self):
        """Test identifier counts are summed across tags."""
        processing_logger = ProcessingLogger(Mock())

        processing_logger.log_ids_assigned({"rect": 2, "g": 1})

        assert processing_logger.stats.ids_assigned == 3


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_writes_json_to_log_file(self, tmp_path):
        """Test that events reach the log file as JSON."""
        log_file = tmp_path / "run.log"
        try:
            logger = configure_logging(log_file=log_file, console_level="ERROR")
            logger.info("Path separated", element="icon", shapes=2)

            content = log_file.read_text(encoding="utf-8")
            assert "Path separated" in content
            assert '"element": "icon"' in content
        finally:
            configure_logging()

    def test_no_file_without_log_file(self, tmp_path, monkeypatch):
        """Test that no log file is created unless requested."""
        monkeypatch.chdir(tmp_path)

        configure_logging()

        assert list(tmp_path.iterdir()) == []

    def test_reconfigure_replaces_handlers(self, tmp_path):
        """Test that repeated calls do not stack handlers."""
        root = logging.getLogger()
        configure_logging(log_file=tmp_path / "first.log")
        first_count = len(root.handlers)

        configure_logging(log_file=tmp_path / "second.log")
        assert len(root.handlers) == first_count

        configure_logging()
        assert len(root.handlers) == first_count - 1

    def test_quiet_console_level(self):
        """Test quiet mode raises the console handler to ERROR."""
        root = logging.getLogger()
        before = set(root.handlers)

        configure_logging(console_level="DEBUG", quiet=True)

        added = [h for h in root.handlers if h not in before]
        assert added
        assert all(h.level == logging.ERROR for h in added)
        configure_logging()

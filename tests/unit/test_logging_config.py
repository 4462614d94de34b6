"""Unit tests for logging setup"""

import io
import logging

from src.logging_config import setup_logging


class TestSetupLogging:
    """Console + rotating file handlers"""

    def test_console_only(self):
        stream = io.StringIO()
        assert setup_logging(log_file=None, console_stream=stream) is None

        logging.getLogger("src.test").info("indexed 3 documents")
        logging.getLogger("src.test").debug("hidden")

        assert stream.getvalue() == "INFO: indexed 3 documents\n"

    def test_session_file_created(self, tmp_path):
        session_log = setup_logging(
            log_file=str(tmp_path / "logs" / "search-server.log"),
            console_stream=io.StringIO(),
        )
        logging.getLogger("src.test").debug("detailed message")
        for handler in logging.getLogger().handlers:
            handler.flush()

        assert session_log.parent == tmp_path / "logs"
        assert session_log.name.startswith("search-server_")
        assert "detailed message" in session_log.read_text(encoding="utf-8")

    def test_old_session_logs_removed(self, tmp_path):
        log_dir = tmp_path / "logs"
        log_dir.mkdir()
        for day in range(1, 8):
            (log_dir / f"search-server_2026010{day}_000000.log").write_text("old")

        session_log = setup_logging(log_file=str(log_dir / "search-server.log"), console_stream=io.StringIO())

        remaining = sorted(path.name for path in log_dir.glob("search-server_*.log"))
        assert len(remaining) == 5
        assert session_log.name in remaining
        assert "search-server_20260101_000000.log" not in remaining

    def test_no_duplicate_handlers(self):
        setup_logging(log_file=None, console_stream=io.StringIO())
        setup_logging(log_file=None, console_stream=io.StringIO())
        assert len(logging.getLogger().handlers) == 1

"""
Tests for the logging setup.
"""

import logging

from fuzzy_systems.utils import ColoredFormatter, FuzzyLogger, get_logger, setup_logger


class TestLogger:
    """Handler installation on the fuzzy_systems logger."""

    def test_setup_replaces_handlers(self, tmp_path):
        setup_logger(str(tmp_path), "INFO")
        first = list(logging.getLogger("fuzzy_systems").handlers)
        setup_logger(str(tmp_path), "DEBUG")
        root = logging.getLogger("fuzzy_systems")
        assert len(root.handlers) == 1
        assert root.handlers[0] not in first
        assert root.level == logging.DEBUG

    def test_get_logger_is_singleton(self, tmp_path):
        setup_logger(str(tmp_path), "INFO")
        assert get_logger() is get_logger()
        assert isinstance(get_logger(), FuzzyLogger)

    def test_file_handler(self, tmp_path):
        log = setup_logger(str(tmp_path / "logs"), "INFO", log_to_file=True)
        logging.getLogger("fuzzy_systems.compiler").info("compiled")
        for handler in logging.getLogger("fuzzy_systems").handlers:
            handler.flush()
        assert log.log_file is not None
        assert log.log_file.parent == tmp_path / "logs"
        assert "fuzzy_systems.compiler | compiled" in log.log_file.read_text(encoding="utf-8")
        setup_logger(str(tmp_path), "INFO")

    def test_no_file_by_default(self, tmp_path):
        log = setup_logger(str(tmp_path / "unused"), "INFO")
        assert log.log_file is None
        assert not (tmp_path / "unused").exists()

    def test_colored_formatter_leaves_record_plain(self):
        record = logging.LogRecord("fuzzy_systems", logging.WARNING, __file__, 1, "msg", None, None)
        text = ColoredFormatter("%(levelname)s %(message)s").format(record)
        assert "\033[93m" in text
        assert record.levelname == "WARNING"

    def test_modules_log_through_package_logger(self, tmp_path):
        log = setup_logger(str(tmp_path), "INFO")
        assert log.logger is logging.getLogger(FuzzyLogger.ROOT_NAME)
        assert logging.getLogger("fuzzy_systems.compiler").parent is log.logger
        for name in ("set_level", "debug", "info", "warning", "error"):
            assert not hasattr(log, name)

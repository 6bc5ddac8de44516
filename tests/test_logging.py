"""Tests for logging setup."""

import logging

import pytest
from rich.logging import RichHandler

from snippet_insight.logging_config import ROOT_LOGGER, get_logger, setup_logging


@pytest.fixture(autouse=True)
def restore_logging():
    """Put the root logger back the way pytest configured it."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)
    logging.getLogger(ROOT_LOGGER).setLevel(logging.NOTSET)


class TestSetupLogging:
    @pytest.mark.parametrize(
        "verbosity,level",
        [("quiet", logging.ERROR), ("normal", logging.WARNING), ("verbose", logging.DEBUG)],
    )
    def test_levels(self, verbosity, level):
        assert setup_logging(verbosity).level == level

    def test_unknown_verbosity_falls_back_to_warning(self):
        assert setup_logging("chatty").level == logging.WARNING

    def test_rich_handler_installed(self):
        setup_logging()
        assert any(isinstance(h, RichHandler) for h in logging.getLogger().handlers)

    def test_log_file(self, tmp_path):
        log_file = tmp_path / "run.log"
        setup_logging("verbose", log_file=str(log_file))
        get_logger("api").debug("stage finished")
        for handler in logging.getLogger().handlers:
            handler.flush()
        text = log_file.read_text(encoding="utf-8")
        assert "DEBUG" in text
        assert "snippet_insight.api: stage finished" in text

    def test_repeated_setup_replaces_handlers(self, tmp_path):
        setup_logging("verbose", log_file=str(tmp_path / "run.log"))
        setup_logging("quiet")
        handlers = logging.getLogger().handlers
        assert len(handlers) == 1
        assert isinstance(handlers[0], RichHandler)


class TestGetLogger:
    def test_namespaced(self):
        assert get_logger("scanning.detector").name == "snippet_insight.scanning.detector"

    def test_module_name_kept(self):
        assert get_logger("snippet_insight.api").name == "snippet_insight.api"

    def test_root(self):
        assert get_logger().name == ROOT_LOGGER

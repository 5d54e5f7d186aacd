"""Unit tests for logging setup"""

import logging

import pytest

from fade_proxy.utils.logger import setup_logging


@pytest.fixture
def root_logger():
    logger = logging.getLogger()
    level = logger.level
    yield logger
    for handler in list(logger.handlers):
        if getattr(handler, "_fade_proxy", False):
            logger.removeHandler(handler)
            handler.close()
    logger.setLevel(level)


def _ours(logger):
    return [h for h in logger.handlers if getattr(h, "_fade_proxy", False)]


def test_console_and_file_handlers(root_logger, tmp_path):
    log_file = tmp_path / "logs" / "fade-proxy.log"

    setup_logging(level="debug", log_file=str(log_file))

    assert root_logger.level == logging.DEBUG
    assert len(_ours(root_logger)) == 2
    logging.getLogger("fade_proxy.test").info("Fading: 10 to 100")
    for handler in _ours(root_logger):
        handler.flush()
    assert "Fading: 10 to 100" in log_file.read_text()


def test_repeated_setup_does_not_duplicate_handlers(root_logger, tmp_path):
    setup_logging(level="INFO", log_file=str(tmp_path / "a.log"))
    setup_logging(level="INFO", log_file=str(tmp_path / "b.log"))

    assert len(_ours(root_logger)) == 2


def test_file_logging_can_be_disabled(root_logger):
    setup_logging(level="INFO", log_file="")

    assert [type(h) for h in _ours(root_logger)] == [logging.StreamHandler]

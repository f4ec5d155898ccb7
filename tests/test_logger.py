import logging
from logging.handlers import RotatingFileHandler

from link_scout.logger import LOGGER_NAME, configure, init_logging


def test_init_logging_console_only():
    lg = init_logging(level="DEBUG")
    assert lg.name == LOGGER_NAME
    assert lg.level == logging.DEBUG
    assert len(lg.handlers) == 1
    assert lg.propagate is False


def test_configure_with_file(tmp_path):
    log_file = tmp_path / "crawl.log"
    lg = configure(level="INFO", log_file=log_file, log_format="%(levelname)s %(message)s")
    assert any(isinstance(h, RotatingFileHandler) for h in lg.handlers)

    lg.info("Actively crawling: %s", "https://site.com")
    for handler in lg.handlers:
        handler.flush()
    assert "INFO Actively crawling: https://site.com" in log_file.read_text(encoding="utf-8")


def test_configure_can_append_handlers():
    init_logging()
    lg = configure(replace_handlers=False)
    assert len(lg.handlers) == 2

# File: tests/test_logger.py
import logging

from wiki_watch.logger import configure, init_logging


def test_configure_replaces_handlers():
    lg = configure(level="DEBUG")
    lg = configure(level="WARNING")
    assert lg.name == "WikiWatch"
    assert lg.level == logging.WARNING
    assert len(lg.handlers) == 1
    assert lg.propagate is False
    init_logging()


def test_configure_appends_rotating_file(tmp_path):
    log_file = tmp_path / "logs" / "wiki_watch.log"
    lg = configure(level="INFO", log_file=log_file)
    try:
        lg.info("refresh done")
        for handler in lg.handlers:
            handler.flush()
        assert "refresh done" in log_file.read_text(encoding="utf-8")
        assert len(lg.handlers) == 2
    finally:
        init_logging()

"""Tests for logging setup."""

import logging

from kedit.logs import setup_logging


def test_null_handler_without_env():
    root = setup_logging({})
    assert len(root.handlers) == 1
    assert isinstance(root.handlers[0], logging.NullHandler)


def test_file_handler_from_env(tmp_path):
    path = tmp_path / "kedit.log"
    root = setup_logging({"KEDIT_LOG": str(path), "KEDIT_LOG_LEVEL": "info"})
    try:
        logging.getLogger("kedit.test").info("hello from test")
        for handler in root.handlers:
            handler.flush()
        text = path.read_text(encoding="utf-8")
        assert "hello from test" in text
        assert root.level == logging.INFO
    finally:
        setup_logging({})

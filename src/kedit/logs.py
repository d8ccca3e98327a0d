"""Logging setup.

The terminal belongs to the screen compositor, so log records never go to
stdout or stderr. Set ``KEDIT_LOG`` to a file path to capture them;
``KEDIT_LOG_LEVEL`` picks the level (default ``DEBUG``).
"""

from __future__ import annotations

import logging
import logging.handlers
import os
from collections.abc import Mapping

LOG_ENV = "KEDIT_LOG"
LOG_LEVEL_ENV = "KEDIT_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(env: Mapping[str, str] | None = None) -> logging.Logger:
    env = os.environ if env is None else env
    root = logging.getLogger("kedit")
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()
    root.propagate = False

    path = env.get(LOG_ENV)
    if not path:
        root.addHandler(logging.NullHandler())
        return root

    level = logging.getLevelName(env.get(LOG_LEVEL_ENV, "DEBUG").upper())
    if not isinstance(level, int):
        level = logging.DEBUG
    handler = logging.handlers.RotatingFileHandler(
        path, maxBytes=1024 * 1024, backupCount=3, encoding="utf-8"
    )
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)
    root.setLevel(level)
    root.info("logging to %s at %s", path, logging.getLevelName(level))
    return root

"""Loading rows from disk and writing them back."""

from __future__ import annotations

import errno
import logging
import os
from dataclasses import dataclass

logger = logging.getLogger(__name__)

SAVE_OK = "ok"
SAVE_OPEN_ERROR = "open-error"
SAVE_SHORT_WRITE = "short-write"
SAVE_IO_ERROR = "io-error"


@dataclass(slots=True)
class SaveResult:
    status: str
    message: str
    written: int = 0

    @property
    def ok(self) -> bool:
        return self.status == SAVE_OK


def read_rows(filename: str) -> list[bytes]:
    """Return the lines of ``filename`` with trailing CR/LF bytes removed.

    Raises ``OSError`` when the file cannot be read.
    """
    rows: list[bytes] = []
    with open(filename, "rb") as f:
        for line in f:
            rows.append(line.rstrip(b"\r\n"))
    logger.info("read %d rows from %s", len(rows), filename)
    return rows


def save_file(filename: str, data: bytes, expected_len: int) -> SaveResult:
    try:
        fd = os.open(filename, os.O_RDWR | os.O_CREAT | os.O_TRUNC, 0o644)
    except OSError as exc:
        logger.warning("open for save failed: %s: %s", filename, exc)
        return SaveResult(SAVE_OPEN_ERROR, f"Can't save! file open error {exc.strerror}")

    try:
        written = os.write(fd, data)
    except OSError as exc:
        logger.warning("write failed: %s: %s", filename, exc)
        return SaveResult(
            SAVE_IO_ERROR, f"Can't save! I/O error {os.strerror(exc.errno or errno.EIO)}"
        )
    finally:
        os.close(fd)

    if written != expected_len:
        logger.warning("short write to %s: %d of %d bytes", filename, written, expected_len)
        return SaveResult(
            SAVE_SHORT_WRITE,
            f"wanted to write {expected_len} bytes to file, wrote {written}",
            written,
        )
    logger.info("wrote %d bytes to %s", written, filename)
    return SaveResult(SAVE_OK, f"{written} bytes written to disk", written)

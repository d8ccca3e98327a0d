"""Tests for key decoding."""

import os

import pytest

from kedit.constants import (
    ARROW_DOWN,
    ARROW_LEFT,
    ARROW_RIGHT,
    ARROW_UP,
    DEL_KEY,
    END_KEY,
    ESC,
    HOME_KEY,
    PAGE_DOWN,
    PAGE_UP,
)
from kedit.terminal import read_key


def decode(data: bytes) -> int:
    r, w = os.pipe()
    try:
        os.write(w, data)
        os.close(w)
        return read_key(r)
    finally:
        os.close(r)


@pytest.mark.parametrize(
    "data,expected",
    [
        (b"a", ord("a")),
        (b"\r", 13),
        (b"\x11", 17),
        (b"\x1b[A", ARROW_UP),
        (b"\x1b[B", ARROW_DOWN),
        (b"\x1b[C", ARROW_RIGHT),
        (b"\x1b[D", ARROW_LEFT),
        (b"\x1b[H", HOME_KEY),
        (b"\x1b[F", END_KEY),
        (b"\x1b[1~", HOME_KEY),
        (b"\x1b[3~", DEL_KEY),
        (b"\x1b[4~", END_KEY),
        (b"\x1b[5~", PAGE_UP),
        (b"\x1b[6~", PAGE_DOWN),
        (b"\x1bOH", HOME_KEY),
        (b"\x1bOF", END_KEY),
    ],
)
def test_decode(data, expected):
    assert decode(data) == expected


@pytest.mark.parametrize("data", [b"\x1b", b"\x1b[", b"\x1b[9~", b"\x1b[3", b"\x1b[Z", b"\x1bx1"])
def test_incomplete_or_unknown_is_escape(data):
    assert decode(data) == ESC

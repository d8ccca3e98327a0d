"""Tab expansion and column mapping between a row's raw and display forms."""

from __future__ import annotations

from .constants import HL_NORMAL, KEDIT_TAB_STOP
from .models import Row

TAB_BYTE = 0x09
SPACE_BYTE = 0x20


def render_row(row: Row) -> None:
    """Rebuild ``row.display`` from ``row.raw`` and reset its highlight."""
    tabs = row.raw.count(TAB_BYTE)
    out = bytearray(len(row.raw) + tabs * (KEDIT_TAB_STOP - 1))
    idx = 0
    for c in row.raw:
        if c == TAB_BYTE:
            out[idx] = SPACE_BYTE
            idx += 1
            while idx % KEDIT_TAB_STOP != 0:
                out[idx] = SPACE_BYTE
                idx += 1
        else:
            out[idx] = c
            idx += 1
    row.display = bytes(out[:idx])
    row.hl = [HL_NORMAL] * idx


def cx_to_rx(row: Row, cx: int) -> int:
    rx = 0
    for c in row.raw[: max(0, cx)]:
        if c == TAB_BYTE:
            rx += (KEDIT_TAB_STOP - 1) - (rx % KEDIT_TAB_STOP)
        rx += 1
    return rx


def rx_to_cx(row: Row, rx: int) -> int:
    """Return the raw column whose expansion covers display column ``rx``."""
    cur_rx = 0
    for cx, c in enumerate(row.raw):
        if c == TAB_BYTE:
            cur_rx += (KEDIT_TAB_STOP - 1) - (cur_rx % KEDIT_TAB_STOP)
        cur_rx += 1
        if cur_rx > rx:
            return cx
    return row.size

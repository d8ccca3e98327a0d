"""The line store: every row of the file under edit."""

from __future__ import annotations

import logging

from .models import EditorSyntax, Row
from .render import render_row
from .syntax import select_syntax_highlight, update_syntax

logger = logging.getLogger(__name__)


class LineStore:
    def __init__(self) -> None:
        self.rows: list[Row] = []
        self.syntax: EditorSyntax | None = None
        self.dirty = 0

    @property
    def numrows(self) -> int:
        return len(self.rows)

    def row(self, at: int) -> Row | None:
        if 0 <= at < len(self.rows):
            return self.rows[at]
        return None

    def select_syntax(self, filename: str | None) -> None:
        self.syntax = select_syntax_highlight(filename)
        self.update_all_syntax()

    def update_all_syntax(self) -> None:
        in_comment = False
        for row in self.rows:
            update_syntax(row, self.syntax, in_comment)
            in_comment = row.hl_open_comment

    def update_syntax(self, at: int) -> None:
        """Highlight row ``at`` and every following row whose input changed."""
        start = at
        while 0 <= at < len(self.rows):
            in_comment = at > 0 and self.rows[at - 1].hl_open_comment
            if not update_syntax(self.rows[at], self.syntax, in_comment):
                break
            at += 1
        if at - start > 1:
            logger.debug("comment carry propagated over rows %d-%d", start, at)

    def update_row(self, at: int) -> None:
        render_row(self.rows[at])
        self.update_syntax(at)

    def insert(self, at: int, data: bytes) -> None:
        if at < 0 or at > len(self.rows):
            return
        # Seed the carry with what the row now following the new one last saw,
        # so propagation only runs when the new row changes its input.
        seen = at > 0 and self.rows[at - 1].hl_open_comment
        self.rows.insert(at, Row(raw=bytes(data), hl_open_comment=seen))
        self.update_row(at)
        self.dirty += 1

    def append(self, data: bytes) -> None:
        self.insert(len(self.rows), data)

    def delete(self, at: int) -> None:
        if at < 0 or at >= len(self.rows):
            return
        del self.rows[at]
        # The row that slid into ``at`` now follows a different row.
        self.update_syntax(at)
        self.dirty += 1

    def insert_char(self, at_row: int, at: int, c: int) -> None:
        row = self.row(at_row)
        if row is None:
            return
        if at < 0 or at > row.size:
            at = row.size
        row.raw = row.raw[:at] + bytes((c & 0xFF,)) + row.raw[at:]
        self.update_row(at_row)
        self.dirty += 1

    def delete_char(self, at_row: int, at: int) -> None:
        row = self.row(at_row)
        if row is None or at < 0 or at >= row.size:
            return
        row.raw = row.raw[:at] + row.raw[at + 1 :]
        self.update_row(at_row)
        self.dirty += 1

    def append_to_row(self, at_row: int, data: bytes) -> None:
        row = self.row(at_row)
        if row is None:
            return
        row.raw += data
        self.update_row(at_row)
        self.dirty += 1

    def split_row(self, at_row: int, at: int) -> None:
        """Break row ``at_row`` at raw column ``at``; the tail becomes a new row."""
        row = self.row(at_row)
        if row is None:
            return
        at = max(0, min(at, row.size))
        tail = row.raw[at:]
        row.raw = row.raw[:at]
        self.update_row(at_row)
        self.insert(at_row + 1, tail)

    def join_with_previous(self, at_row: int) -> None:
        if at_row <= 0 or at_row >= len(self.rows):
            return
        self.append_to_row(at_row - 1, self.rows[at_row].raw)
        self.delete(at_row)

    def rows_to_text(self) -> tuple[bytes, int]:
        data = b"".join(row.raw + b"\n" for row in self.rows)
        return data, len(data)

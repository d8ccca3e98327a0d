from __future__ import annotations

import pytest

from kedit.buffer import LineStore


@pytest.fixture
def make_store():
    def _make(rows: list[bytes], filename: str | None = "test.c") -> LineStore:
        store = LineStore()
        store.select_syntax(filename)
        for raw in rows:
            store.append(raw)
        store.dirty = 0
        return store

    return _make

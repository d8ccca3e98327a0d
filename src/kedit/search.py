"""Incremental search with a temporary highlight on the matched row."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING

from .buffer import LineStore
from .constants import ARROW_DOWN, ARROW_LEFT, ARROW_RIGHT, ARROW_UP, ENTER, ESC, HL_MATCH
from .models import EditorConfig
from .render import rx_to_cx

if TYPE_CHECKING:
    from .editor import Editor

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class SearchState:
    last_match: int = -1
    direction: int = 1
    saved_hl_line: int = -1
    saved_hl: list[int] = field(default_factory=list)


@dataclass(slots=True)
class SearchSnapshot:
    cx: int
    cy: int
    coloff: int
    rowoff: int


def restore_highlight(store: LineStore, state: SearchState) -> SearchState:
    row = store.row(state.saved_hl_line)
    if row is not None and len(state.saved_hl) == row.rsize:
        row.hl = list(state.saved_hl)
    return replace(state, saved_hl_line=-1, saved_hl=[])


def find_step(
    store: LineStore, cfg: EditorConfig, state: SearchState, query: bytes, key: int
) -> SearchState:
    """Advance the search by one keypress and return the new search state."""
    state = restore_highlight(store, state)

    if key in (ENTER, ESC):
        return replace(state, last_match=-1, direction=1)
    if key in (ARROW_RIGHT, ARROW_DOWN):
        state.direction = 1
    elif key in (ARROW_LEFT, ARROW_UP):
        state.direction = -1
    else:
        state.last_match = -1
        state.direction = 1

    if state.last_match == -1:
        state.direction = 1
    if not query:
        return state

    current = state.last_match
    for _ in range(store.numrows):
        current += state.direction
        if current == -1:
            current = store.numrows - 1
        elif current == store.numrows:
            current = 0
        row = store.rows[current]
        offset = row.display.find(query)
        if offset == -1:
            continue

        logger.debug("match for %r at row %d col %d", query, current, offset)
        state.last_match = current
        cfg.cy = current
        cfg.cx = rx_to_cx(row, offset)
        # Past the end: the next scroll puts the match on the first screen line.
        cfg.rowoff = store.numrows
        state.saved_hl_line = current
        state.saved_hl = list(row.hl)
        for i in range(offset, min(offset + len(query), row.rsize)):
            row.hl[i] = HL_MATCH
        break
    return state


def find(editor: Editor) -> None:
    cfg = editor.cfg
    saved = SearchSnapshot(cfg.cx, cfg.cy, cfg.coloff, cfg.rowoff)
    state = SearchState()

    def callback(query: bytes, key: int) -> None:
        nonlocal state
        state = find_step(editor.store, cfg, state, query, key)

    query = editor.prompt("Search: %s (Use ESC/Arrows/Enter)", callback)
    if not query:
        cfg.cx = saved.cx
        cfg.cy = saved.cy
        cfg.coloff = saved.coloff
        cfg.rowoff = saved.rowoff

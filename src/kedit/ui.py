from __future__ import annotations

import os
import time
from typing import TYPE_CHECKING

from .buffer import LineStore
from .constants import (
    ANSI_CLEAR_LINE,
    ANSI_CURSOR_HOME,
    ANSI_DEFAULT_FG,
    ANSI_HIDE_CURSOR,
    ANSI_INVERT_ON,
    ANSI_RESET,
    ANSI_SHOW_CURSOR,
    HL_NORMAL,
    KEDIT_STATUS_TIMEOUT,
    KEDIT_VERSION,
)
from .models import EditorConfig
from .render import cx_to_rx
from .syntax import syntax_to_color

if TYPE_CHECKING:
    from .editor import Editor


def scroll(cfg: EditorConfig, store: LineStore) -> None:
    """Move the viewport so the cursor is visible."""
    row = store.row(cfg.cy)
    cfg.rx = cx_to_rx(row, cfg.cx) if row is not None else 0

    if cfg.cy < cfg.rowoff:
        cfg.rowoff = cfg.cy
    if cfg.cy >= cfg.rowoff + cfg.screenrows:
        cfg.rowoff = cfg.cy - cfg.screenrows + 1
    if cfg.rx < cfg.coloff:
        cfg.coloff = cfg.rx
    if cfg.rx >= cfg.coloff + cfg.screencols:
        cfg.coloff = cfg.rx - cfg.screencols + 1


def _is_control(c: int) -> bool:
    return c < 32 or c == 127


def draw_welcome(cfg: EditorConfig, ab: bytearray) -> None:
    welcome = f"Kedit editor -- version {KEDIT_VERSION}".encode()
    welcome = welcome[: cfg.screencols]
    padding = (cfg.screencols - len(welcome)) // 2
    if padding:
        ab += b"~"
        padding -= 1
    if padding > 0:
        ab += b" " * padding
    ab += welcome


def draw_rows(cfg: EditorConfig, store: LineStore, ab: bytearray) -> None:
    for y in range(cfg.screenrows):
        filerow = cfg.rowoff + y
        row = store.row(filerow)
        if row is None:
            if store.numrows == 0 and y == cfg.screenrows // 3:
                draw_welcome(cfg, ab)
            else:
                ab += b"~"
            ab += ANSI_CLEAR_LINE
            ab += b"\r\n"
            continue

        chars = row.display[cfg.coloff : cfg.coloff + cfg.screencols]
        hl = row.hl[cfg.coloff : cfg.coloff + cfg.screencols]
        current_color = -1
        for c, h in zip(chars, hl):
            if _is_control(c):
                sym = ord("@") + c if c <= 26 else ord("?")
                ab += ANSI_INVERT_ON
                ab.append(sym)
                ab += ANSI_RESET
                if current_color != -1:
                    ab += b"\x1b[%dm" % current_color
            elif h == HL_NORMAL:
                if current_color != -1:
                    ab += ANSI_DEFAULT_FG
                    current_color = -1
                ab.append(c)
            else:
                color = syntax_to_color(h)
                if color != current_color:
                    ab += b"\x1b[%dm" % color
                    current_color = color
                ab.append(c)
        ab += ANSI_DEFAULT_FG
        ab += ANSI_CLEAR_LINE
        ab += b"\r\n"


def draw_status_bar(cfg: EditorConfig, store: LineStore, ab: bytearray) -> None:
    ab += ANSI_INVERT_ON
    filename = cfg.filename or "[No Name]"
    modified = "(modified)" if store.dirty else ""
    status = f"{filename:.20} - {store.numrows} lines {modified}".encode(errors="replace")
    filetype = store.syntax.filetype if store.syntax is not None else "no ft"
    rstatus = f"{filetype} | {cfg.cy + 1}/{store.numrows}".encode()

    status = status[: cfg.screencols]
    ab += status
    fill = len(status)
    while fill < cfg.screencols:
        if cfg.screencols - fill == len(rstatus):
            ab += rstatus
            break
        ab += b" "
        fill += 1
    ab += ANSI_RESET
    ab += b"\r\n"


def draw_message_bar(cfg: EditorConfig, ab: bytearray, now: float) -> None:
    ab += ANSI_CLEAR_LINE
    if cfg.statusmsg and now - cfg.statusmsg_time < KEDIT_STATUS_TIMEOUT:
        ab += cfg.statusmsg.encode(errors="replace")[: cfg.screencols]


def compose(cfg: EditorConfig, store: LineStore, now: float | None = None) -> bytes:
    """Build the escape-sequence stream that redraws the whole screen."""
    if now is None:
        now = time.time()
    ab = bytearray()
    ab += ANSI_HIDE_CURSOR
    ab += ANSI_CURSOR_HOME
    draw_rows(cfg, store, ab)
    draw_status_bar(cfg, store, ab)
    draw_message_bar(cfg, ab, now)
    ab += b"\x1b[%d;%dH" % (cfg.cy - cfg.rowoff + 1, cfg.rx - cfg.coloff + 1)
    ab += ANSI_SHOW_CURSOR
    return bytes(ab)


def refresh_screen(editor: Editor) -> None:
    scroll(editor.cfg, editor.store)
    os.write(editor.stdout_fd, compose(editor.cfg, editor.store))

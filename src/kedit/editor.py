from __future__ import annotations

import errno
import logging
import os
import signal
import sys
import time
from typing import Callable, Final

from .buffer import LineStore
from .constants import (
    ARROW_DOWN,
    ARROW_LEFT,
    ARROW_RIGHT,
    ARROW_UP,
    BACKSPACE,
    CTRL_A,
    CTRL_C,
    CTRL_E,
    CTRL_F,
    CTRL_H,
    CTRL_L,
    CTRL_Q,
    CTRL_S,
    DEL_KEY,
    END_KEY,
    ENTER,
    ESC,
    HOME_KEY,
    KEDIT_QUERY_LEN,
    KEDIT_QUIT_TIMES,
    PAGE_DOWN,
    PAGE_UP,
)
from .fileio import read_rows, save_file
from .logs import setup_logging
from .models import EditorConfig
from .search import find
from .terminal import RawMode, get_window_size, read_key
from .ui import refresh_screen

logger = logging.getLogger(__name__)

STDIN_FD: Final[int] = 0
STDOUT_FD: Final[int] = 1

HELP_MESSAGE = "HELP: Ctrl-S = save | Ctrl-Q = quit | Ctrl-F = find"


class Editor:
    def __init__(
        self,
        stdin_fd: int = STDIN_FD,
        stdout_fd: int = STDOUT_FD,
        window_size: tuple[int, int] | None = None,
    ) -> None:
        self.cfg = EditorConfig()
        self.store = LineStore()
        self.quit_times = KEDIT_QUIT_TIMES
        self.stdin_fd = stdin_fd
        self.stdout_fd = stdout_fd
        self.update_window_size(window_size)

    def update_window_size(self, window_size: tuple[int, int] | None = None) -> None:
        if window_size is None:
            try:
                window_size = get_window_size(self.stdin_fd, self.stdout_fd)
            except OSError as exc:
                raise OSError(exc.errno, "Unable to query screen size") from exc
        rows, cols = window_size
        self.cfg.screenrows = max(1, rows - 2)
        self.cfg.screencols = max(1, cols)

    def handle_sigwinch(self, _signum: int, _frame) -> None:
        self.update_window_size()
        self.refresh_screen()

    def set_status_message(self, fmt: str, *args: object) -> None:
        self.cfg.statusmsg = fmt % args if args else fmt
        self.cfg.statusmsg_time = time.time()

    @property
    def dirty(self) -> bool:
        return bool(self.store.dirty)

    def open_file(self, filename: str) -> None:
        self.cfg.filename = filename
        self.store.select_syntax(filename)
        try:
            rows = read_rows(filename)
        except FileNotFoundError:
            self.set_status_message("New file: %s", filename)
            return
        except OSError as exc:
            logger.warning("cannot open %s: %s", filename, exc)
            self.cfg.filename = None
            self.store.select_syntax(None)
            self.set_status_message("Can't open %s: %s", filename, exc.strerror)
            return
        for raw in rows:
            self.store.append(raw)
        self.store.dirty = 0

    def save(self) -> bool:
        if not self.cfg.filename:
            name = self.prompt("Save as: %s (ESC to cancel)")
            if not name:
                self.set_status_message("Save aborted")
                return False
            self.cfg.filename = os.fsdecode(name)
            self.store.select_syntax(self.cfg.filename)

        data, length = self.store.rows_to_text()
        result = save_file(self.cfg.filename, data, length)
        self.set_status_message(result.message)
        if result.ok:
            self.store.dirty = 0
        return result.ok

    def refresh_screen(self) -> None:
        refresh_screen(self)

    def find(self) -> None:
        find(self)

    def prompt(
        self, fmt: str, callback: Callable[[bytes, int], None] | None = None
    ) -> bytes | None:
        """Read a line of input on the message bar.

        Returns ``None`` when the user cancels with ESC. ``callback`` sees the
        current input and the key after every keypress.
        """
        buf = bytearray()
        while True:
            self.set_status_message(fmt, buf.decode("latin-1"))
            self.refresh_screen()

            c = read_key(self.stdin_fd)
            if c in (DEL_KEY, CTRL_H, BACKSPACE):
                if buf:
                    del buf[-1]
            elif c == ESC:
                self.set_status_message("")
                if callback is not None:
                    callback(bytes(buf), c)
                return None
            elif c == ENTER:
                if buf:
                    self.set_status_message("")
                    if callback is not None:
                        callback(bytes(buf), c)
                    return bytes(buf)
            elif 32 <= c <= 126 and len(buf) < KEDIT_QUERY_LEN:
                buf.append(c)

            if callback is not None:
                callback(bytes(buf), c)

    def insert_char(self, c: int) -> None:
        if self.cfg.cy == self.store.numrows:
            self.store.append(b"")
        self.store.insert_char(self.cfg.cy, self.cfg.cx, c)
        self.cfg.cx += 1

    def insert_newline(self) -> None:
        if self.cfg.cx == 0:
            self.store.insert(self.cfg.cy, b"")
        else:
            self.store.split_row(self.cfg.cy, self.cfg.cx)
        self.cfg.cy += 1
        self.cfg.cx = 0

    def del_char(self) -> None:
        cfg = self.cfg
        if cfg.cy == self.store.numrows:
            return
        if cfg.cx == 0 and cfg.cy == 0:
            return
        if cfg.cx > 0:
            self.store.delete_char(cfg.cy, cfg.cx - 1)
            cfg.cx -= 1
        else:
            cfg.cx = self.store.rows[cfg.cy - 1].size
            self.store.join_with_previous(cfg.cy)
            cfg.cy -= 1

    def move_cursor(self, key: int) -> None:
        cfg = self.cfg
        row = self.store.row(cfg.cy)

        if key == ARROW_LEFT:
            if cfg.cx != 0:
                cfg.cx -= 1
            elif cfg.cy > 0:
                cfg.cy -= 1
                cfg.cx = self.store.rows[cfg.cy].size
        elif key == ARROW_RIGHT:
            if row is not None:
                if cfg.cx < row.size:
                    cfg.cx += 1
                elif cfg.cx == row.size:
                    cfg.cy += 1
                    cfg.cx = 0
        elif key == ARROW_UP:
            if cfg.cy != 0:
                cfg.cy -= 1
        elif key == ARROW_DOWN:
            if cfg.cy < self.store.numrows:
                cfg.cy += 1

        row = self.store.row(cfg.cy)
        rowlen = row.size if row is not None else 0
        if cfg.cx > rowlen:
            cfg.cx = rowlen

    def page(self, key: int) -> None:
        cfg = self.cfg
        if key == PAGE_UP:
            cfg.cy = cfg.rowoff
            direction = ARROW_UP
        else:
            cfg.cy = min(cfg.rowoff + cfg.screenrows - 1, self.store.numrows)
            direction = ARROW_DOWN
        for _ in range(cfg.screenrows):
            self.move_cursor(direction)

    def handle_key(self, c: int) -> None:
        if c == ENTER:
            self.insert_newline()
        elif c == CTRL_Q:
            if self.dirty and self.quit_times:
                self.set_status_message(
                    "WARNING!!! File has unsaved changes. Press Ctrl-Q %d more times to quit.",
                    self.quit_times,
                )
                self.quit_times -= 1
                return
            logger.info("quit")
            raise SystemExit(0)
        elif c == CTRL_S:
            self.save()
        elif c == CTRL_F:
            self.find()
        elif c in (HOME_KEY, CTRL_A):
            self.cfg.cx = 0
        elif c in (END_KEY, CTRL_E):
            row = self.store.row(self.cfg.cy)
            if row is not None:
                self.cfg.cx = row.size
        elif c in (BACKSPACE, CTRL_H, DEL_KEY):
            if c == DEL_KEY:
                self.move_cursor(ARROW_RIGHT)
            self.del_char()
        elif c in (PAGE_UP, PAGE_DOWN):
            self.page(c)
        elif c in (ARROW_UP, ARROW_DOWN, ARROW_LEFT, ARROW_RIGHT):
            self.move_cursor(c)
        elif c in (CTRL_C, CTRL_L, ESC):
            pass
        else:
            self.insert_char(c)

        self.quit_times = KEDIT_QUIT_TIMES

    def process_keypress(self) -> None:
        self.handle_key(read_key(self.stdin_fd))


def run(argv: list[str] | None = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) > 1:
        print("Usage: kedit [filename]", file=sys.stderr)
        return 1
    if not os.isatty(STDIN_FD) or not os.isatty(STDOUT_FD):
        print("kedit: stdin/stdout must be a tty", file=sys.stderr)
        return 1

    setup_logging()
    try:
        editor = Editor()
    except OSError as exc:
        print(f"kedit: {exc.strerror}", file=sys.stderr)
        return 1

    editor.set_status_message(HELP_MESSAGE)
    if args:
        editor.open_file(args[0])

    signal.signal(signal.SIGWINCH, editor.handle_sigwinch)
    try:
        with RawMode(STDIN_FD):
            while True:
                editor.refresh_screen()
                editor.process_keypress()
    except OSError as exc:
        if exc.errno == errno.ENOTTY:
            print("kedit: stdin is not a tty", file=sys.stderr)
            return 1
        raise
    except SystemExit as exc:
        os.write(STDOUT_FD, b"\x1b[2J\x1b[H")
        if isinstance(exc.code, int):
            return exc.code
        return 0


def main() -> None:
    sys.exit(run())

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class EditorSyntax:
    filetype: str
    filematch: tuple[str, ...]
    keywords: tuple[str, ...]
    singleline_comment_start: bytes
    multiline_comment_start: bytes
    multiline_comment_end: bytes
    flags: int


@dataclass(slots=True)
class Row:
    raw: bytes
    display: bytes = b""
    hl: list[int] = field(default_factory=list)
    hl_open_comment: bool = False

    @property
    def size(self) -> int:
        return len(self.raw)

    @property
    def rsize(self) -> int:
        return len(self.display)


@dataclass(slots=True)
class EditorConfig:
    cx: int = 0
    cy: int = 0
    rx: int = 0
    rowoff: int = 0
    coloff: int = 0
    screenrows: int = 0
    screencols: int = 0
    filename: str | None = None
    statusmsg: str = ""
    statusmsg_time: float = 0.0

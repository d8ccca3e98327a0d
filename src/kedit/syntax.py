from __future__ import annotations

import logging

from .constants import (
    C_HL_EXTENSIONS,
    C_HL_KEYWORDS,
    GO_HL_EXTENSIONS,
    GO_HL_KEYWORDS,
    HL_COMMENT,
    HL_HIGHLIGHT_NUMBERS,
    HL_HIGHLIGHT_STRINGS,
    HL_KEYWORD1,
    HL_KEYWORD2,
    HL_MATCH,
    HL_MLCOMMENT,
    HL_NORMAL,
    HL_NUMBER,
    HL_STRING,
)
from .models import EditorSyntax, Row

logger = logging.getLogger(__name__)

HLDB: tuple[EditorSyntax, ...] = (
    EditorSyntax(
        filetype="c",
        filematch=C_HL_EXTENSIONS,
        keywords=C_HL_KEYWORDS,
        singleline_comment_start=b"//",
        multiline_comment_start=b"/*",
        multiline_comment_end=b"*/",
        flags=HL_HIGHLIGHT_STRINGS | HL_HIGHLIGHT_NUMBERS,
    ),
    EditorSyntax(
        filetype="go",
        filematch=GO_HL_EXTENSIONS,
        keywords=GO_HL_KEYWORDS,
        singleline_comment_start=b"//",
        multiline_comment_start=b"/*",
        multiline_comment_end=b"*/",
        flags=HL_HIGHLIGHT_STRINGS | HL_HIGHLIGHT_NUMBERS,
    ),
)

SEPARATORS = frozenset(b",.()+-/*=~%<>[]; \t\n\r\v\f\x00")
QUOTES = (ord('"'), ord("'"))
BACKSLASH = ord("\\")
DOT = ord(".")


def is_separator(c: int) -> bool:
    return c in SEPARATORS


def _is_digit(c: int) -> bool:
    return 0x30 <= c <= 0x39


def _keyword_tokens(syntax: EditorSyntax) -> list[tuple[bytes, int]]:
    tokens = []
    for kw in syntax.keywords:
        if kw.endswith("|"):
            tokens.append((kw[:-1].encode(), HL_KEYWORD2))
        else:
            tokens.append((kw.encode(), HL_KEYWORD1))
    return tokens


def syntax_to_color(hl: int) -> int:
    if hl in (HL_COMMENT, HL_MLCOMMENT):
        return 36
    if hl == HL_KEYWORD1:
        return 33
    if hl == HL_KEYWORD2:
        return 32
    if hl == HL_STRING:
        return 35
    if hl == HL_NUMBER:
        return 31
    if hl == HL_MATCH:
        return 34
    return 37


def select_syntax_highlight(filename: str | None) -> EditorSyntax | None:
    if not filename:
        return None
    for syntax in HLDB:
        for suffix in syntax.filematch:
            if filename.endswith(suffix):
                logger.debug("filetype %s selected for %s", syntax.filetype, filename)
                return syntax
    return None


def update_syntax(row: Row, syntax: EditorSyntax | None, in_comment_before: bool) -> bool:
    """Classify every display byte of ``row``.

    ``in_comment_before`` is the comment carry of the previous row. The carry
    at the end of this row is stored in ``row.hl_open_comment``; the return
    value tells whether it changed, in which case the next row is stale.
    """
    hl = [HL_NORMAL] * row.rsize
    row.hl = hl
    if syntax is None:
        changed = row.hl_open_comment
        row.hl_open_comment = False
        return changed

    p = row.display
    n = len(p)
    scs = syntax.singleline_comment_start
    mcs = syntax.multiline_comment_start
    mce = syntax.multiline_comment_end
    strings = bool(syntax.flags & HL_HIGHLIGHT_STRINGS)
    numbers = bool(syntax.flags & HL_HIGHLIGHT_NUMBERS)
    keywords = _keyword_tokens(syntax)

    prev_sep = True
    in_comment = in_comment_before
    in_string = 0
    i = 0
    while i < n:
        c = p[i]

        if not in_string and not in_comment and scs and p.startswith(scs, i):
            for h in range(i, n):
                hl[h] = HL_COMMENT
            break

        if not in_string and mcs and mce:
            if in_comment:
                hl[i] = HL_MLCOMMENT
                if p.startswith(mce, i):
                    for h in range(i, i + len(mce)):
                        hl[h] = HL_MLCOMMENT
                    i += len(mce)
                    in_comment = False
                    prev_sep = True
                    continue
                i += 1
                continue
            if p.startswith(mcs, i):
                for h in range(i, i + len(mcs)):
                    hl[h] = HL_MLCOMMENT
                i += len(mcs)
                in_comment = True
                continue

        if strings:
            if in_string:
                hl[i] = HL_STRING
                if c == BACKSLASH and i + 1 < n:
                    hl[i + 1] = HL_STRING
                    i += 2
                    continue
                if c == in_string:
                    in_string = 0
                prev_sep = True
                i += 1
                continue
            if c in QUOTES:
                in_string = c
                hl[i] = HL_STRING
                i += 1
                continue

        if numbers:
            prev_hl = hl[i - 1] if i > 0 else HL_NORMAL
            if (_is_digit(c) and (prev_sep or prev_hl == HL_NUMBER)) or (
                c == DOT and prev_hl == HL_NUMBER
            ):
                hl[i] = HL_NUMBER
                prev_sep = False
                i += 1
                continue

        if prev_sep:
            matched = False
            for token, mark in keywords:
                klen = len(token)
                if p.startswith(token, i) and (i + klen == n or is_separator(p[i + klen])):
                    for h in range(i, i + klen):
                        hl[h] = mark
                    i += klen
                    matched = True
                    break
            if matched:
                prev_sep = False
                continue

        prev_sep = is_separator(c)
        i += 1

    changed = row.hl_open_comment != in_comment
    row.hl_open_comment = in_comment
    return changed

"""Tests for the highlighter and its comment-carry propagation."""

from kedit.constants import (
    HL_COMMENT,
    HL_KEYWORD1,
    HL_KEYWORD2,
    HL_MLCOMMENT,
    HL_NORMAL,
    HL_NUMBER,
    HL_STRING,
)
from kedit.models import Row
from kedit.render import render_row
from kedit.syntax import (
    is_separator,
    select_syntax_highlight,
    syntax_to_color,
    update_syntax,
)

C_SYNTAX = select_syntax_highlight("main.c")


def highlight(raw: bytes, in_comment: bool = False) -> Row:
    row = Row(raw=raw)
    render_row(row)
    update_syntax(row, C_SYNTAX, in_comment)
    return row


class TestSelectSyntax:
    def test_c_suffixes(self):
        for name in ("a.c", "a.h", "dir/a.cpp"):
            assert select_syntax_highlight(name).filetype == "c"

    def test_go_suffix(self):
        assert select_syntax_highlight("main.go").filetype == "go"

    def test_no_match(self):
        assert select_syntax_highlight("notes.txt") is None
        assert select_syntax_highlight("a.c.bak") is None
        assert select_syntax_highlight(None) is None
        assert select_syntax_highlight("") is None


class TestKeywords:
    def test_keyword_needs_trailing_separator(self):
        row = highlight(b"interval")
        assert row.hl == [HL_NORMAL] * 8

    def test_secondary_keyword(self):
        row = highlight(b"int x")
        assert row.hl[:3] == [HL_KEYWORD2] * 3
        assert row.hl[3:] == [HL_NORMAL, HL_NORMAL]

    def test_primary_keyword(self):
        row = highlight(b"if (x)")
        assert row.hl[:2] == [HL_KEYWORD1] * 2
        assert row.hl[2:] == [HL_NORMAL] * 4

    def test_keyword_at_end_of_row(self):
        row = highlight(b"x = NULL")
        assert row.hl[4:] == [HL_KEYWORD1] * 4

    def test_keyword_needs_leading_separator(self):
        row = highlight(b"xint y")
        assert HL_KEYWORD2 not in row.hl

    def test_keyword_after_tab(self):
        row = highlight(b"\treturn;")
        assert row.hl[8:14] == [HL_KEYWORD1] * 6


class TestLiterals:
    def test_string_with_escaped_quote(self):
        row = highlight(b'x = "a\\"b";')
        assert row.hl[:4] == [HL_NORMAL] * 4
        assert row.hl[4:10] == [HL_STRING] * 6
        assert row.hl[10] == HL_NORMAL

    def test_single_quoted(self):
        row = highlight(b"c = 'x';")
        assert row.hl[4:7] == [HL_STRING] * 3

    def test_decimal_number(self):
        row = highlight(b"x = 12.5;")
        assert row.hl[4:8] == [HL_NUMBER] * 4
        assert row.hl[8] == HL_NORMAL

    def test_multiple_decimal_points_accepted(self):
        row = highlight(b"1.2.3")
        assert row.hl == [HL_NUMBER] * 5

    def test_digit_inside_identifier(self):
        row = highlight(b"a1")
        assert row.hl == [HL_NORMAL, HL_NORMAL]


class TestComments:
    def test_single_line_comment(self):
        row = highlight(b"x; // int")
        assert row.hl[:3] == [HL_NORMAL] * 3
        assert row.hl[3:] == [HL_COMMENT] * 6

    def test_comment_markers_inside_string(self):
        row = highlight(b'"/* // */"')
        assert row.hl == [HL_STRING] * 10
        assert row.hl_open_comment is False

    def test_block_comment_opens_carry(self):
        row = highlight(b"x /* a")
        assert row.hl[2:] == [HL_MLCOMMENT] * 4
        assert row.hl_open_comment is True

    def test_block_comment_closed_on_same_row(self):
        row = highlight(b"/* a */ int")
        assert row.hl[:7] == [HL_MLCOMMENT] * 7
        assert row.hl[8:] == [HL_KEYWORD2] * 3
        assert row.hl_open_comment is False

    def test_byte_after_end_marker_is_classified(self):
        row = highlight(b"/*a*/1")
        assert row.hl[:5] == [HL_MLCOMMENT] * 5
        assert row.hl[5] == HL_NUMBER

    def test_carried_comment(self):
        row = highlight(b"still // here", in_comment=True)
        assert row.hl == [HL_MLCOMMENT] * 13
        assert row.hl_open_comment is True

    def test_return_value_reports_carry_change(self):
        row = Row(raw=b"/* open")
        render_row(row)
        assert update_syntax(row, C_SYNTAX, False) is True
        assert update_syntax(row, C_SYNTAX, False) is False

    def test_without_syntax_everything_is_normal(self):
        row = Row(raw=b"int /* x", hl_open_comment=True)
        render_row(row)
        assert update_syntax(row, None, True) is True
        assert row.hl == [HL_NORMAL] * 8
        assert row.hl_open_comment is False


class TestHelpers:
    def test_separators(self):
        for c in b" ,.()+-/*=~%<>[];\t":
            assert is_separator(c)
        for c in b"az_09":
            assert not is_separator(c)

    def test_colors(self):
        assert syntax_to_color(HL_COMMENT) == 36
        assert syntax_to_color(HL_MLCOMMENT) == 36
        assert syntax_to_color(HL_KEYWORD1) == 33
        assert syntax_to_color(HL_KEYWORD2) == 32
        assert syntax_to_color(HL_NORMAL) == 37


class TestPropagation:
    def test_block_comment_spans_rows(self, make_store):
        store = make_store([b"/* start", b"middle", b"end */ code"])
        assert store.rows[0].hl == [HL_MLCOMMENT] * 8
        assert store.rows[1].hl == [HL_MLCOMMENT] * 6
        assert store.rows[2].hl[:6] == [HL_MLCOMMENT] * 6
        assert store.rows[2].hl[6:] == [HL_NORMAL] * 5
        assert [r.hl_open_comment for r in store.rows] == [True, True, False]

    def test_opening_comment_rehighlights_following_rows(self, make_store):
        store = make_store([b"", b"middle", b"more", b"end */", b"after"])
        assert all(h == HL_NORMAL for r in store.rows for h in r.hl)
        sentinel = [99] * 5
        store.rows[4].hl = list(sentinel)

        store.append_to_row(0, b"/*")

        for r in store.rows[:4]:
            assert r.hl == [HL_MLCOMMENT] * r.rsize
        # Row 3 closes the comment, so its carry is unchanged and row 4 is
        # never touched.
        assert store.rows[4].hl == sentinel

    def test_closing_comment_restores_following_rows(self, make_store):
        store = make_store([b"/*", b"middle", b"more"])
        assert store.rows[2].hl == [HL_MLCOMMENT] * 4

        store.delete_char(0, 1)

        assert store.rows[0].hl == [HL_NORMAL]
        assert store.rows[1].hl == [HL_NORMAL] * 6
        assert store.rows[2].hl == [HL_NORMAL] * 4

    def test_every_row_keeps_length_invariant(self, make_store):
        store = make_store([b"\t/* a", b"\tb\t", b"c */\t\"s\"", b"12\t// x"])
        store.insert_char(1, 0, ord("\t"))
        store.split_row(2, 3)
        for r in store.rows:
            assert len(r.hl) == len(r.display)

from __future__ import annotations

KEDIT_VERSION = "0.1.0"
KEDIT_TAB_STOP = 8
KEDIT_QUERY_LEN = 256
KEDIT_QUIT_TIMES = 3
KEDIT_STATUS_TIMEOUT = 5

# Syntax highlight types.
HL_NORMAL = 0
HL_COMMENT = 1
HL_MLCOMMENT = 2
HL_KEYWORD1 = 3
HL_KEYWORD2 = 4
HL_STRING = 5
HL_NUMBER = 6
HL_MATCH = 7

HL_HIGHLIGHT_STRINGS = 1 << 0
HL_HIGHLIGHT_NUMBERS = 1 << 1

# Key actions.
CTRL_A = 1
CTRL_C = 3
CTRL_E = 5
CTRL_F = 6
CTRL_H = 8
CTRL_L = 12
ENTER = 13
CTRL_Q = 17
CTRL_S = 19
ESC = 27
BACKSPACE = 127

ARROW_LEFT = 1000
ARROW_RIGHT = 1001
ARROW_UP = 1002
ARROW_DOWN = 1003
DEL_KEY = 1004
HOME_KEY = 1005
END_KEY = 1006
PAGE_UP = 1007
PAGE_DOWN = 1008

# VT100 sequences used by the compositor.
ANSI_HIDE_CURSOR = b"\x1b[?25l"
ANSI_SHOW_CURSOR = b"\x1b[?25h"
ANSI_CURSOR_HOME = b"\x1b[H"
ANSI_CLEAR_LINE = b"\x1b[K"
ANSI_INVERT_ON = b"\x1b[7m"
ANSI_RESET = b"\x1b[m"
ANSI_DEFAULT_FG = b"\x1b[39m"

C_HL_EXTENSIONS = (".c", ".h", ".cpp", ".hpp", ".cc")
C_HL_KEYWORDS = (
    # C keywords.
    "auto",
    "break",
    "case",
    "continue",
    "default",
    "do",
    "else",
    "enum",
    "extern",
    "for",
    "goto",
    "if",
    "register",
    "return",
    "sizeof",
    "static",
    "struct",
    "switch",
    "typedef",
    "union",
    "volatile",
    "while",
    "NULL",
    # C++ keywords.
    "class",
    "delete",
    "false",
    "namespace",
    "new",
    "nullptr",
    "private",
    "protected",
    "public",
    "template",
    "this",
    "throw",
    "true",
    "try",
    "virtual",
    # C types (secondary class).
    "int|",
    "long|",
    "double|",
    "float|",
    "char|",
    "unsigned|",
    "signed|",
    "void|",
    "short|",
    "const|",
    "bool|",
)

GO_HL_EXTENSIONS = (".go",)
GO_HL_KEYWORDS = (
    "break",
    "case",
    "chan",
    "const",
    "continue",
    "default",
    "defer",
    "else",
    "fallthrough",
    "for",
    "func",
    "go",
    "goto",
    "if",
    "import",
    "interface",
    "map",
    "package",
    "range",
    "return",
    "select",
    "struct",
    "switch",
    "type",
    "var",
    "nil",
    "true",
    "false",
    # Builtin types (secondary class).
    "bool|",
    "byte|",
    "complex64|",
    "complex128|",
    "error|",
    "float32|",
    "float64|",
    "int|",
    "int8|",
    "int16|",
    "int32|",
    "int64|",
    "rune|",
    "string|",
    "uint|",
    "uint8|",
    "uint16|",
    "uint32|",
    "uint64|",
    "uintptr|",
)

"""Constants shared by the encoder and decoder."""

import re

# Indentation
DEFAULT_INDENT = 2

# Encoder defaults
DEFAULT_MIN_ROWS_TO_TABULAR = 2
DEFAULT_MAX_PREVIEW_ITEMS = 200

# Escaping
BACKSLASH = "\\"
COMMA = ","
COLON = ":"
NEWLINE = "\n"
DEFAULT_ESCAPE_STYLE = "backslash"
ESCAPE_STYLES = ("backslash", "newline")

# Escape order matters: backslash first so later escapes are not doubled.
BACKSLASH_ESCAPES = (
    (BACKSLASH, BACKSLASH + BACKSLASH),
    (COMMA, BACKSLASH + COMMA),
    (COLON, BACKSLASH + COLON),
    (NEWLINE, BACKSLASH + "n"),
)
NEWLINE_ESCAPES = ((NEWLINE, BACKSLASH + "n"),)

# Literals
TRUE_LITERAL = "true"
FALSE_LITERAL = "false"
NULL_LITERAL = "null"

# Table blocks
TABLE_NAME = "items"
TABLE_HEADER_PREFIX = TABLE_NAME + "["
TABLE_HEADER_PATTERN = re.compile(r"^items\[(\d+)\]\{([^}]*)\}:$")

# Key lines
KEY_CHARS_PATTERN = re.compile(r"[^A-Za-z0-9_\-.]")
KEY_LINE_PATTERN = re.compile(r"^([A-Za-z0-9_.\-]+):(\s*(.*))?$")

# Scalars
INTEGER_PATTERN = re.compile(r"^[+-]?[0-9]+$")
FLOAT_PATTERN = re.compile(r"^[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?$")
INLINE_WHITESPACE_PATTERN = re.compile(r"[^\S\n]+")
EDGE_WHITESPACE_PATTERN = re.compile(r"\A[^\S\n]+|[^\S\n]+\Z")
LINE_SPLIT_PATTERN = re.compile(r"\r?\n")

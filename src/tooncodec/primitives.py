"""Scalar rendering, escaping and coercion shared by the encoder and decoder."""

from typing import Iterable, List, Optional

from .constants import (
    BACKSLASH,
    BACKSLASH_ESCAPES,
    COMMA,
    EDGE_WHITESPACE_PATTERN,
    FALSE_LITERAL,
    FLOAT_PATTERN,
    INLINE_WHITESPACE_PATTERN,
    INTEGER_PATTERN,
    KEY_CHARS_PATTERN,
    NEWLINE_ESCAPES,
    NULL_LITERAL,
    TABLE_NAME,
    TRUE_LITERAL,
)
from .types import EscapeStyle, JsonPrimitive

# Decoding table for the backslash style: escaped character -> literal
_BACKSLASH_UNESCAPES = {"n": "\n", ":": ":", ",": ",", "\\": "\\"}


def sanitize_key(key: str) -> str:
    """Strip a key to ``[A-Za-z0-9_.-]`` and lowercase it.

    This is lossy: ``"User Name"`` and ``"username"`` both become ``"username"``.
    """
    return KEY_CHARS_PATTERN.sub("", key).lower()


def encode_key(key: str, sanitize: bool = True) -> str:
    return sanitize_key(key) if sanitize else key


def collapse_whitespace(text: str) -> str:
    """Collapse runs of whitespace other than newlines to one space and trim.

    Newlines at either end are kept; they are escaped like any other newline.
    """
    return trim_inline_whitespace(INLINE_WHITESPACE_PATTERN.sub(" ", text))


def trim_inline_whitespace(text: str) -> str:
    """Trim whitespace other than newlines from both ends."""
    return EDGE_WHITESPACE_PATTERN.sub("", text)


def escape_string(text: str, escape_style: EscapeStyle = "backslash") -> str:
    """Escape the characters that carry meaning in the notation.

    Args:
        text: Raw string
        escape_style: Escape rule set

    Returns:
        Escaped string
    """
    escapes = BACKSLASH_ESCAPES if escape_style == "backslash" else NEWLINE_ESCAPES
    for raw, escaped in escapes:
        text = text.replace(raw, escaped)
    return text


def unescape_string(text: str, escape_style: EscapeStyle = "backslash") -> str:
    """Reverse escape_string() in a single left-to-right pass.

    Unknown escapes and a trailing lone backslash are kept as written.
    """
    if escape_style != "backslash":
        return text.replace(BACKSLASH + "n", "\n")

    if BACKSLASH not in text:
        return text

    result: List[str] = []
    i = 0
    length = len(text)
    while i < length:
        char = text[i]
        if char == BACKSLASH and i + 1 < length and text[i + 1] in _BACKSLASH_UNESCAPES:
            result.append(_BACKSLASH_UNESCAPES[text[i + 1]])
            i += 2
            continue
        result.append(char)
        i += 1
    return "".join(result)


def encode_primitive(value: JsonPrimitive, escape_style: EscapeStyle = "backslash") -> str:
    """Render a scalar as an inline value.

    Args:
        value: Primitive value
        escape_style: Escape rule set for strings

    Returns:
        Inline text, empty for None
    """
    if value is None:
        return ""

    if isinstance(value, bool):
        return TRUE_LITERAL if value else FALSE_LITERAL

    if isinstance(value, (int, float)):
        return str(value)

    return escape_string(collapse_whitespace(str(value)), escape_style)


def split_escaped(row: str, escape_style: EscapeStyle = "backslash") -> List[str]:
    """Split a table row on commas that are not escaped.

    Escape sequences are kept verbatim in the returned cells; callers
    unescape each cell afterwards.
    """
    if escape_style != "backslash":
        return row.split(COMMA)

    cells: List[str] = []
    current: List[str] = []
    i = 0
    length = len(row)
    while i < length:
        char = row[i]
        if char == BACKSLASH and i + 1 < length:
            current.append(row[i : i + 2])
            i += 2
            continue
        if char == COMMA:
            cells.append("".join(current))
            current = []
        else:
            current.append(char)
        i += 1
    cells.append("".join(current))
    return cells


def coerce_scalar(text: str, coerce: bool = True) -> JsonPrimitive:
    """Convert unescaped text into a typed scalar.

    Only whitespace other than newlines is trimmed, so unescaped newlines at
    either end survive.

    Args:
        text: Unescaped value text
        coerce: When False the trimmed text is returned unchanged

    Returns:
        None, bool, int, float, or the string itself
    """
    text = trim_inline_whitespace(text)
    if not coerce:
        return text

    if text == "":
        return None

    lowered = text.lower()
    if lowered == TRUE_LITERAL:
        return True
    if lowered == FALSE_LITERAL:
        return False
    if lowered == NULL_LITERAL:
        return None

    if INTEGER_PATTERN.fullmatch(text):
        return int(text)

    if FLOAT_PATTERN.fullmatch(text):
        return float(text)

    return text


def format_header(length: int, fields: Optional[Iterable[str]] = None) -> str:
    """Format a table block header.

    Args:
        length: Number of records in the sequence (not the number written)
        fields: Field names in column order

    Returns:
        Header line such as ``items[2]{id,name}:``
    """
    fields_str = COMMA.join(fields) if fields else ""
    return f"{TABLE_NAME}[{length}]{{{fields_str}}}:"


def join_encoded_values(values: List[str]) -> str:
    """Join already-escaped cells into a table row."""
    return COMMA.join(values)

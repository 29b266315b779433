"""Core decoding functionality.

The decoder walks the input line by line, keeping a stack of open
containers and a parallel stack of the indentation at which each
container's children are expected. A dedent closes containers until the
line fits. Table blocks are collected as placeholders and replaced with
their rows once every line has been read.
"""

from typing import Any, Dict, List, Optional, Union

from .constants import (
    DEFAULT_ESCAPE_STYLE,
    DEFAULT_INDENT,
    ESCAPE_STYLES,
    KEY_LINE_PATTERN,
    LINE_SPLIT_PATTERN,
    TABLE_HEADER_PATTERN,
    TABLE_HEADER_PREFIX,
)
from .primitives import coerce_scalar, split_escaped, unescape_string
from .types import DecodeOptions, JsonArray, JsonObject, JsonValue, ResolvedDecodeOptions


class ToonError(Exception):
    """Base class for codec errors."""


class ToonDecodeError(ToonError):
    """Raised when input text cannot be decoded.

    Attributes:
        indent: Indentation (in spaces) of the offending line
        line: Content of the offending line, without indentation
        line_number: 1-based line number in the input
    """

    def __init__(self, message: str, indent: int = 0, line: str = "", line_number: int = 0) -> None:
        super().__init__(message)
        self.indent = indent
        self.line = line
        self.line_number = line_number


class _Table:
    """Table block being accumulated."""

    __slots__ = ("count", "fields", "header_indent", "rows")

    def __init__(self, count: int, fields: List[str], header_indent: int) -> None:
        self.count = count
        self.fields = fields
        self.header_indent = header_indent
        self.rows: List[JsonObject] = []


class _Block:
    """Container opened by a ``key:`` line or the document root.

    Its kind is set by the first child: a key line makes it a mapping, a
    table header makes it a sequence. A table header after key lines turns
    the mapping into a sequence of single-key dicts followed by the table.
    """

    __slots__ = ("kind", "entries", "items")

    PENDING = "pending"
    MAPPING = "mapping"
    SEQUENCE = "sequence"

    def __init__(self) -> None:
        self.kind = self.PENDING
        self.entries: Dict[str, Any] = {}
        self.items: List[Any] = []

    def set(self, key: str, value: Any) -> None:
        if self.kind == self.PENDING:
            self.kind = self.MAPPING
        if self.kind == self.MAPPING:
            self.entries[key] = value
        else:
            self.items.append({key: value})

    def add_table(self, table: _Table) -> None:
        if self.kind == self.MAPPING:
            self.items = [{key: value} for key, value in self.entries.items()]
            self.entries = {}
        self.kind = self.SEQUENCE
        self.items.append(table)


_Container = Union[_Block, _Table]


def decode(text: str, options: Optional[DecodeOptions] = None) -> Union[JsonObject, JsonArray]:
    """Decode compact notation into a Python value.

    Args:
        text: Encoded text
        options: Optional decoding options

    Returns:
        A dict, or a list of dicts when the document is a single table block

    Raises:
        ToonDecodeError: If a line matches no grammar rule
    """
    resolved = resolve_options(options)
    root = _Block()
    stack: List[_Container] = [root]
    indent_stack: List[int] = [0]

    for line_number, raw_line in enumerate(LINE_SPLIT_PATTERN.split(text), start=1):
        if raw_line.strip() == "":
            continue

        content = raw_line.lstrip(" ")
        indent = len(raw_line) - len(content)

        # Dedent closes nested blocks
        while len(stack) > 1 and indent < indent_stack[-1]:
            stack.pop()
            indent_stack.pop()

        header = TABLE_HEADER_PATTERN.match(content.rstrip())
        if header:
            if isinstance(stack[-1], _Table):
                stack.pop()
                indent_stack.pop()
            parent = stack[-1]
            fields = [field.strip() for field in header.group(2).split(",") if field.strip()]
            table = _Table(int(header.group(1)), fields, indent)
            parent.add_table(table)
            stack.append(table)
            indent_stack.append(indent)
            continue

        top = stack[-1]
        if isinstance(top, _Table):
            # Rows follow the first row's indentation once it is known
            if not top.rows and indent > top.header_indent:
                indent_stack[-1] = indent
            top.rows.append(_parse_row(content.strip(), top.fields, resolved))
            continue

        if content.startswith(TABLE_HEADER_PREFIX):
            raise ToonDecodeError(
                f"Malformed table header at line {line_number}, indent {indent}: {content}",
                indent,
                content,
                line_number,
            )

        match = KEY_LINE_PATTERN.match(content)
        if match:
            key, separator, value = match.group(1), match.group(2), match.group(3)
            if not separator:
                block = _Block()
                top.set(key, block)
                stack.append(block)
                indent_stack.append(indent + resolved.indent)
            else:
                top.set(key, coerce_scalar(unescape_string(value, resolved.escapeStyle), resolved.coerceScalarTypes))
            continue

        raise ToonDecodeError(
            f"Malformed line {line_number} at indent {indent}: {content}",
            indent,
            content,
            line_number,
        )

    return _finalize(root)


def _parse_row(row: str, fields: List[str], options: ResolvedDecodeOptions) -> JsonObject:
    cells = split_escaped(row, options.escapeStyle)
    record: JsonObject = {}
    for index, field in enumerate(fields):
        cell = cells[index] if index < len(cells) else ""
        record[field] = coerce_scalar(unescape_string(cell, options.escapeStyle), options.coerceScalarTypes)
    return record


def _finalize(node: Any) -> JsonValue:
    """Replace placeholders with plain dicts and lists."""
    if isinstance(node, _Table):
        return node.rows

    if isinstance(node, _Block):
        if node.kind == _Block.SEQUENCE:
            if len(node.items) == 1 and isinstance(node.items[0], _Table):
                return node.items[0].rows
            return [_finalize(item) for item in node.items]
        return {key: _finalize(value) for key, value in node.entries.items()}

    if isinstance(node, dict):
        return {key: _finalize(value) for key, value in node.items()}

    return node


def resolve_options(options: Optional[DecodeOptions]) -> ResolvedDecodeOptions:
    """Resolve decoding options with defaults.

    Args:
        options: Optional user-provided options

    Returns:
        Resolved options with defaults applied

    Raises:
        ValueError: If an option has the wrong type or is out of range
    """
    if options is None:
        return ResolvedDecodeOptions()

    indent = options.get("indent", DEFAULT_INDENT)
    escape_style = options.get("escapeStyle", DEFAULT_ESCAPE_STYLE)
    coerce_scalar_types = options.get("coerceScalarTypes", True)

    if not isinstance(indent, int) or isinstance(indent, bool):
        raise ValueError(f"indent must be an integer, got {indent!r}")
    if not isinstance(coerce_scalar_types, bool):
        raise ValueError(f"coerceScalarTypes must be a boolean, got {coerce_scalar_types!r}")

    if indent < 1:
        raise ValueError(f"indent must be >= 1, got {indent}")
    if escape_style not in ESCAPE_STYLES:
        raise ValueError(f"Unknown escapeStyle {escape_style!r}, expected one of {ESCAPE_STYLES}")

    return ResolvedDecodeOptions(
        indent=indent,
        coerce_scalar_types=coerce_scalar_types,
        escape_style=escape_style,
    )

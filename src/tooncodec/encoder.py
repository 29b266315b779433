"""Core encoding functionality."""

from typing import Any, Optional

from .constants import (
    DEFAULT_ESCAPE_STYLE,
    DEFAULT_INDENT,
    DEFAULT_MAX_PREVIEW_ITEMS,
    DEFAULT_MIN_ROWS_TO_TABULAR,
    ESCAPE_STYLES,
)
from .encoders import encode_value
from .normalize import looks_like_json, normalize_value, parse_json_text
from .primitives import encode_primitive
from .types import EncodeOptions, ResolvedEncodeOptions
from .writer import LineWriter


def encode(value: Any, options: Optional[EncodeOptions] = None) -> str:
    """Encode a value into compact notation.

    Strings that look like JSON (``{`` or ``[`` after trimming) are parsed
    first. When parsing fails the string is encoded as a single scalar.

    Args:
        value: The value to encode
        options: Optional encoding options

    Returns:
        Encoded text
    """
    resolved_options = resolve_options(options)

    if isinstance(value, str):
        if looks_like_json(value):
            parsed = parse_json_text(value)
            if parsed is not None:
                value = parsed
            else:
                return encode_primitive(value, resolved_options.escapeStyle)
        else:
            return encode_primitive(value, resolved_options.escapeStyle)

    normalized = normalize_value(value)
    writer = LineWriter(resolved_options.indent)
    encode_value(normalized, resolved_options, writer, 0)
    return writer.to_string()


def resolve_options(options: Optional[EncodeOptions]) -> ResolvedEncodeOptions:
    """Resolve encoding options with defaults.

    Args:
        options: Optional user-provided options

    Returns:
        Resolved options with defaults applied

    Raises:
        ValueError: If an option has the wrong type or is out of range
    """
    if options is None:
        return ResolvedEncodeOptions()

    indent = options.get("indent", DEFAULT_INDENT)
    min_rows = options.get("minRowsToTabular", DEFAULT_MIN_ROWS_TO_TABULAR)
    max_preview = options.get("maxPreviewItems", DEFAULT_MAX_PREVIEW_ITEMS)
    escape_style = options.get("escapeStyle", DEFAULT_ESCAPE_STYLE)
    sanitize_keys = options.get("sanitizeKeys", True)

    for name, number in (("indent", indent), ("minRowsToTabular", min_rows), ("maxPreviewItems", max_preview)):
        if not isinstance(number, int) or isinstance(number, bool):
            raise ValueError(f"{name} must be an integer, got {number!r}")
    if not isinstance(sanitize_keys, bool):
        raise ValueError(f"sanitizeKeys must be a boolean, got {sanitize_keys!r}")

    if indent < 1:
        raise ValueError(f"indent must be >= 1, got {indent}")
    if min_rows < 1:
        raise ValueError(f"minRowsToTabular must be >= 1, got {min_rows}")
    if max_preview < 0:
        raise ValueError(f"maxPreviewItems must be >= 0, got {max_preview}")
    if escape_style not in ESCAPE_STYLES:
        raise ValueError(f"Unknown escapeStyle {escape_style!r}, expected one of {ESCAPE_STYLES}")

    return ResolvedEncodeOptions(
        indent=indent,
        min_rows_to_tabular=min_rows,
        max_preview_items=max_preview,
        escape_style=escape_style,
        sanitize_keys=sanitize_keys,
    )

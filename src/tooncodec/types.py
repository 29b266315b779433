"""Type definitions for tooncodec."""

from typing import Any, Dict, List, Literal, TypedDict, Union

# JSON-compatible types
JsonPrimitive = Union[str, int, float, bool, None]
JsonObject = Dict[str, Any]
JsonArray = List[Any]
JsonValue = Union[JsonPrimitive, JsonArray, JsonObject]

# Escape style
EscapeStyle = Literal["backslash", "newline"]


class EncodeOptions(TypedDict, total=False):
    """Options for encoding.

    Attributes:
        indent: Number of spaces per indentation level (default: 2)
        minRowsToTabular: Minimum sequence length before tabular rendering (default: 2)
        maxPreviewItems: Maximum number of rows written in a table block (default: 200)
        escapeStyle: Escaping rule set for inline scalars (default: 'backslash')
        sanitizeKeys: Strip keys to [A-Za-z0-9_.-] and lowercase them (default: True)
    """

    indent: int
    minRowsToTabular: int
    maxPreviewItems: int
    escapeStyle: EscapeStyle
    sanitizeKeys: bool


class DecodeOptions(TypedDict, total=False):
    """Options for decoding.

    Attributes:
        indent: Number of spaces per indentation level (default: 2)
        coerceScalarTypes: Convert textual scalars to bool/int/float/None (default: True)
        escapeStyle: Escaping rule set used by the encoder (default: 'backslash')
    """

    indent: int
    coerceScalarTypes: bool
    escapeStyle: EscapeStyle


class ResolvedEncodeOptions:
    """Resolved encoding options with defaults applied."""

    __slots__ = ("indent", "minRowsToTabular", "maxPreviewItems", "escapeStyle", "sanitizeKeys")

    def __init__(
        self,
        indent: int = 2,
        min_rows_to_tabular: int = 2,
        max_preview_items: int = 200,
        escape_style: EscapeStyle = "backslash",
        sanitize_keys: bool = True,
    ) -> None:
        object.__setattr__(self, "indent", indent)
        object.__setattr__(self, "minRowsToTabular", min_rows_to_tabular)
        object.__setattr__(self, "maxPreviewItems", max_preview_items)
        object.__setattr__(self, "escapeStyle", escape_style)
        object.__setattr__(self, "sanitizeKeys", sanitize_keys)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is read-only")


class ResolvedDecodeOptions:
    """Resolved decoding options with defaults applied."""

    __slots__ = ("indent", "coerceScalarTypes", "escapeStyle")

    def __init__(
        self,
        indent: int = 2,
        coerce_scalar_types: bool = True,
        escape_style: EscapeStyle = "backslash",
    ) -> None:
        object.__setattr__(self, "indent", indent)
        object.__setattr__(self, "coerceScalarTypes", coerce_scalar_types)
        object.__setattr__(self, "escapeStyle", escape_style)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is read-only")


class SizeEstimate(TypedDict):
    """Result of estimate_size()."""

    word_count: int
    char_count: int
    approximate_token_count: int


# Depth type for tracking indentation level
Depth = int

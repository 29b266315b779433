"""Encoders for different value types."""

from typing import List, Optional

from .normalize import (
    is_array_of_objects,
    is_json_array,
    is_json_object,
    is_json_primitive,
)
from .primitives import encode_key, encode_primitive, format_header, join_encoded_values
from .types import Depth, JsonArray, JsonObject, JsonValue, ResolvedEncodeOptions
from .writer import LineWriter


def encode_value(value: JsonValue, options: ResolvedEncodeOptions, writer: LineWriter, depth: Depth = 0) -> None:
    """Encode a value.

    Args:
        value: Normalized JSON value
        options: Resolved encoding options
        writer: Line writer for output
        depth: Current indentation depth
    """
    if is_json_primitive(value):
        writer.push(depth, encode_primitive(value, options.escapeStyle))
    elif is_json_array(value):
        encode_array(value, options, writer, depth)
    elif is_json_object(value):
        encode_object(value, options, writer, depth)


def encode_object(obj: JsonObject, options: ResolvedEncodeOptions, writer: LineWriter, depth: Depth) -> None:
    """Encode an object, one line per key in insertion order.

    Args:
        obj: Dictionary object
        options: Resolved encoding options
        writer: Line writer for output
        depth: Current indentation depth
    """
    for key, value in obj.items():
        encode_key_value_pair(key, value, options, writer, depth)


def encode_key_value_pair(
    key: str, value: JsonValue, options: ResolvedEncodeOptions, writer: LineWriter, depth: Depth
) -> None:
    """Encode a key-value pair.

    Scalars go on the key line. Composite values open a block one level deeper.

    Args:
        key: Key name
        value: Value to encode
        options: Resolved encoding options
        writer: Line writer for output
        depth: Current indentation depth
    """
    encoded_key = encode_key(key, options.sanitizeKeys)
    if is_json_primitive(value):
        writer.push(depth, f"{encoded_key}: {encode_primitive(value, options.escapeStyle)}")
        return

    writer.push(depth, f"{encoded_key}:")
    encode_value(value, options, writer, depth + 1)


def encode_array(arr: JsonArray, options: ResolvedEncodeOptions, writer: LineWriter, depth: Depth) -> None:
    """Encode an array.

    Args:
        arr: List array
        options: Resolved encoding options
        writer: Line writer for output
        depth: Current indentation depth
    """
    # Handle empty array
    if not arr:
        writer.push(depth, format_header(0))
        return

    fields = detect_tabular_header(arr, options)
    if fields is not None:
        encode_array_of_objects_as_tabular(arr, fields, options, writer, depth)
    else:
        encode_array_as_list_items(arr, options, writer, depth)


def detect_tabular_header(arr: JsonArray, options: ResolvedEncodeOptions) -> Optional[List[str]]:
    """Detect if array can use tabular format and return header keys.

    The array qualifies when it has at least ``minRowsToTabular`` items, every
    item is an object with the same keys in the same order as the first, and
    every value is a primitive.

    Args:
        arr: Array to check
        options: Resolved encoding options

    Returns:
        List of keys if tabular, None otherwise
    """
    if len(arr) < options.minRowsToTabular or not is_array_of_objects(arr):
        return None

    # Get keys from first object
    first_keys = list(arr[0].keys())
    if not first_keys:
        return None

    for obj in arr:
        if list(obj.keys()) != first_keys:
            return None
        if not all(is_json_primitive(value) for value in obj.values()):
            return None

    return first_keys


def encode_array_of_objects_as_tabular(
    arr: List[JsonObject],
    fields: List[str],
    options: ResolvedEncodeOptions,
    writer: LineWriter,
    depth: Depth,
) -> None:
    """Encode array of uniform objects in tabular format.

    The header declares the full length; at most ``maxPreviewItems`` rows are
    written.

    Args:
        arr: Array of uniform objects
        fields: Field names for header
        options: Resolved encoding options
        writer: Line writer for output
        depth: Current indentation depth
    """
    header_fields = [encode_key(field, options.sanitizeKeys) for field in fields]
    writer.push(depth, format_header(len(arr), header_fields))

    for obj in arr[: options.maxPreviewItems]:
        row_values = [encode_primitive(obj.get(field), options.escapeStyle) for field in fields]
        writer.push(depth + 1, join_encoded_values(row_values))


def encode_array_as_list_items(arr: JsonArray, options: ResolvedEncodeOptions, writer: LineWriter, depth: Depth) -> None:
    """Encode a non-uniform array, one element per line.

    Args:
        arr: Mixed array
        options: Resolved encoding options
        writer: Line writer for output
        depth: Current indentation depth
    """
    for item in arr:
        if is_json_primitive(item):
            writer.push(depth, encode_primitive(item, options.escapeStyle))
        else:
            encode_value(item, options, writer, depth + 1)

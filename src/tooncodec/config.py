"""Centralized configuration for tooncodec."""

import os
from pathlib import Path
from typing import Any, Dict, Tuple, Union

import yaml

from .constants import (
    DEFAULT_ESCAPE_STYLE,
    DEFAULT_MAX_PREVIEW_ITEMS,
    DEFAULT_MIN_ROWS_TO_TABULAR,
    ESCAPE_STYLES,
)
from .types import DecodeOptions, EncodeOptions


def _parse_bool(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


class Config:
    """
    Codec defaults with environment variable overrides.

    These values are only read by the Toon facade and the command line;
    encode() and decode() take their options explicitly.
    """

    # ========================================================================
    # Encoder
    # ========================================================================
    MIN_ROWS_TO_TABULAR: int = int(
        os.getenv("TOON_MIN_ROWS_TO_TABULAR", str(DEFAULT_MIN_ROWS_TO_TABULAR))
    )
    MAX_PREVIEW_ITEMS: int = int(
        os.getenv("TOON_MAX_PREVIEW_ITEMS", str(DEFAULT_MAX_PREVIEW_ITEMS))
    )
    ESCAPE_STYLE: str = os.getenv("TOON_ESCAPE_STYLE", DEFAULT_ESCAPE_STYLE)
    SANITIZE_KEYS: bool = _parse_bool(os.getenv("TOON_SANITIZE_KEYS", "true"))

    # ========================================================================
    # Decoder
    # ========================================================================
    COERCE_SCALAR_TYPES: bool = _parse_bool(os.getenv("TOON_COERCE_SCALAR_TYPES", "true"))

    @classmethod
    def validate(cls) -> bool:
        """
        Validate configuration consistency.

        Returns:
            True if validation passes

        Raises:
            ValueError: If validation fails
        """
        errors = []

        if cls.MIN_ROWS_TO_TABULAR < 1:
            errors.append(f"MIN_ROWS_TO_TABULAR must be >= 1, got {cls.MIN_ROWS_TO_TABULAR}")
        if cls.MAX_PREVIEW_ITEMS < 0:
            errors.append(f"MAX_PREVIEW_ITEMS must be >= 0, got {cls.MAX_PREVIEW_ITEMS}")
        if cls.ESCAPE_STYLE not in ESCAPE_STYLES:
            errors.append(f"ESCAPE_STYLE must be one of {ESCAPE_STYLES}, got {cls.ESCAPE_STYLE!r}")

        if errors:
            raise ValueError(f"Config validation failed: {'; '.join(errors)}")

        return True

    @classmethod
    def encode_options(cls) -> EncodeOptions:
        return {
            "minRowsToTabular": cls.MIN_ROWS_TO_TABULAR,
            "maxPreviewItems": cls.MAX_PREVIEW_ITEMS,
            "escapeStyle": cls.ESCAPE_STYLE,
            "sanitizeKeys": cls.SANITIZE_KEYS,
        }

    @classmethod
    def decode_options(cls) -> DecodeOptions:
        return {
            "coerceScalarTypes": cls.COERCE_SCALAR_TYPES,
            "escapeStyle": cls.ESCAPE_STYLE,
        }


# config file key -> (option name, applies to encoder, applies to decoder)
_FILE_KEYS: Dict[str, Tuple[str, bool, bool]] = {
    "min_rows_to_tabular": ("minRowsToTabular", True, False),
    "max_preview_items": ("maxPreviewItems", True, False),
    "escape_style": ("escapeStyle", True, True),
    "sanitize_keys": ("sanitizeKeys", True, False),
    "coerce_scalar_types": ("coerceScalarTypes", False, True),
}


def load_config_file(path: Union[str, Path]) -> Tuple[EncodeOptions, DecodeOptions]:
    """
    Load codec options from a YAML file layered over Config defaults.

    The file holds a mapping with snake_case keys, for example::

        min_rows_to_tabular: 2
        max_preview_items: 200
        escape_style: backslash
        coerce_scalar_types: true

    Unknown keys are ignored.

    Args:
        path: Path to the YAML file

    Returns:
        (encode options, decode options)

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file is not a YAML mapping
    """
    with open(path, encoding="utf-8") as f:
        try:
            data: Any = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError(f"Config file {path} must contain a mapping, got {type(data).__name__}")

    encode_options = Config.encode_options()
    decode_options = Config.decode_options()
    for file_key, (option, for_encoder, for_decoder) in _FILE_KEYS.items():
        if file_key not in data:
            continue
        if for_encoder:
            encode_options[option] = data[file_key]
        if for_decoder:
            decode_options[option] = data[file_key]

    return encode_options, decode_options

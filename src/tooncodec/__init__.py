"""
tooncodec - compact, line-oriented notation for structured data

Encodes maps, sequences and scalars into an indentation-based text format
that renders uniform record lists as tables, and decodes it back. Meant for
embedding structured data in text with fewer tokens than JSON.
"""

from .config import Config, load_config_file
from .decoder import ToonDecodeError, ToonError, decode
from .encoder import encode
from .estimate import estimate_size
from .toon import Toon
from .types import DecodeOptions, EncodeOptions, EscapeStyle, SizeEstimate

__version__ = "0.1.0"
__all__ = [
    "encode",
    "decode",
    "estimate_size",
    "Toon",
    "ToonError",
    "ToonDecodeError",
    "Config",
    "load_config_file",
    "EncodeOptions",
    "DecodeOptions",
    "EscapeStyle",
    "SizeEstimate",
]

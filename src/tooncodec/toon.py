"""Facade bundling encoder and decoder options."""

from typing import Any, Optional, Union

from loguru import logger

from .config import Config
from .decoder import decode
from .decoder import resolve_options as resolve_decode_options
from .encoder import encode
from .encoder import resolve_options as resolve_encode_options
from .estimate import estimate_size
from .types import DecodeOptions, EncodeOptions, JsonArray, JsonObject, SizeEstimate


class Toon:
    """
    Encoder/decoder pair configured once.

    Options default to Config. They are validated on construction and never
    change afterwards, so one instance can be shared between threads.
    """

    def __init__(
        self,
        encode_options: Optional[EncodeOptions] = None,
        decode_options: Optional[DecodeOptions] = None,
    ) -> None:
        self._encode_options: EncodeOptions = dict(
            Config.encode_options() if encode_options is None else encode_options
        )
        self._decode_options: DecodeOptions = dict(
            Config.decode_options() if decode_options is None else decode_options
        )
        # Fail fast on bad options
        resolve_encode_options(self._encode_options)
        resolve_decode_options(self._decode_options)

    def encode(self, value: Any) -> str:
        """Encode a value; see tooncodec.encode()."""
        text = encode(value, self._encode_options)
        logger.debug(f"Encoded {type(value).__name__} into {len(text)} chars")
        return text

    def convert(self, value: Any) -> str:
        """Alias of encode()."""
        return self.encode(value)

    def decode(self, text: str) -> Union[JsonObject, JsonArray]:
        """Decode text; see tooncodec.decode()."""
        result = decode(text, self._decode_options)
        logger.debug(f"Decoded {len(text)} chars into {type(result).__name__}")
        return result

    def estimate_tokens(self, text: str) -> SizeEstimate:
        """Approximate token count of text; see tooncodec.estimate_size()."""
        return estimate_size(text)

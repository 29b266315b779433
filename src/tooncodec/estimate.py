"""Rough size estimate for encoded text."""

import math

from .types import SizeEstimate


def estimate_size(text: str) -> SizeEstimate:
    """Estimate the token count of a piece of text.

    This is a heuristic, not a tokenizer: ``ceil(words * 0.75 + chars / 50)``
    with a floor of 1. Use it to compare encodings, not to budget exactly.

    Args:
        text: Text to measure

    Returns:
        Word count, character count and approximate token count
    """
    word_count = len(text.split())
    char_count = len(text)
    tokens = max(1, math.ceil(word_count * 0.75 + char_count / 50))
    return {
        "word_count": word_count,
        "char_count": char_count,
        "approximate_token_count": tokens,
    }

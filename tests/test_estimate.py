"""Tests for the size estimate heuristic."""

from tooncodec import encode, estimate_size


def test_short_text():
    assert estimate_size("hello world") == {
        "word_count": 2,
        "char_count": 11,
        "approximate_token_count": 2,
    }


def test_empty_text_has_floor_of_one():
    result = estimate_size("")
    assert result["word_count"] == 0
    assert result["char_count"] == 0
    assert result["approximate_token_count"] == 1


def test_formula():
    text = "a " * 100
    # ceil(100 * 0.75 + 200 / 50) = 79
    assert estimate_size(text)["approximate_token_count"] == 79


def test_table_is_smaller_than_json():
    import json

    records = [{"id": i, "name": f"user{i}", "active": i % 2 == 0} for i in range(20)]
    compact = estimate_size(encode(records))["approximate_token_count"]
    verbose = estimate_size(json.dumps(records, indent=2))["approximate_token_count"]
    assert compact < verbose

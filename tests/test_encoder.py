"""Tests for encoding."""

from dataclasses import dataclass

import pytest
from pydantic import BaseModel

from tooncodec import encode
from tooncodec.encoder import resolve_options
from tooncodec.encoders import detect_tabular_header


class TestObjects:
    """Mappings render one line per key."""

    def test_end_to_end_example(self, tasks_document, tasks_text):
        assert encode(tasks_document) == tasks_text

    def test_key_order_is_preserved(self):
        assert encode({"b": 1, "a": 2, "c": 3}) == "b: 1\na: 2\nc: 3"

    def test_nested_objects_are_indented(self):
        data = {"a": {"b": {"c": 1}}, "d": 2}
        assert encode(data) == "a:\n  b:\n    c: 1\nd: 2"

    def test_null_value_renders_empty(self):
        assert encode({"k": None}) == "k: "

    def test_scalar_types(self):
        data = {"s": "text", "i": 42, "f": 3.5, "t": True, "n": False}
        assert encode(data) == "s: text\ni: 42\nf: 3.5\nt: true\nn: false"

    def test_integer_valued_float_keeps_fraction(self):
        assert encode({"f": 1.0}) == "f: 1.0"


class TestKeySanitization:
    """Keys are stripped and lowercased."""

    def test_spaces_stripped_and_case_folded(self):
        assert encode({"User Name": "x"}) == "username: x"

    def test_allowed_punctuation_kept(self):
        assert encode({"a.b-c_d": 1}) == "a.b-c_d: 1"

    def test_colliding_keys_keep_both_lines(self):
        assert encode({"Name": "a", "name": "b"}) == "name: a\nname: b"

    def test_table_fields_are_sanitized(self):
        data = [{"First Name": "a"}, {"First Name": "b"}]
        assert encode(data).splitlines()[0] == "items[2]{firstname}:"

    def test_sanitization_can_be_disabled(self):
        assert encode({"User Name": 1}, {"sanitizeKeys": False}) == "User Name: 1"


class TestEscaping:
    """Strings are whitespace-collapsed then escaped."""

    def test_special_characters_escaped(self):
        assert encode({"note": "a,b:c\\d"}) == "note: a\\,b\\:c\\\\d"

    def test_newline_escaped(self):
        assert encode({"s": "line1\nline2"}) == "s: line1\\nline2"

    def test_whitespace_collapsed(self):
        assert encode({"s": "  a   b\t c  "}) == "s: a b c"

    def test_escaped_cells_in_table(self):
        data = [{"v": "x,y"}, {"v": "p:q"}]
        assert encode(data) == "items[2]{v}:\n  x\\,y\n  p\\:q"

    def test_newline_style_only_escapes_newlines(self):
        assert encode({"s": "a,b\nc"}, {"escapeStyle": "newline"}) == "s: a,b\\nc"


class TestArrays:
    """Sequences render as tables or one element per line."""

    def test_uniform_records_render_as_table(self):
        data = [{"id": 1, "name": "Sagar"}, {"id": 2, "name": "Vikas"}]
        assert encode(data) == "items[2]{id,name}:\n  1,Sagar\n  2,Vikas"

    def test_fields_follow_first_record_order(self):
        data = [{"b": 1, "a": 2}, {"b": 3, "a": 4}]
        assert encode(data).splitlines()[0] == "items[2]{b,a}:"

    def test_below_min_rows_is_not_tabular(self):
        assert encode([{"id": 1}]) == "  id: 1"

    def test_min_rows_option(self):
        assert encode([{"id": 1}], {"minRowsToTabular": 1}) == "items[1]{id}:\n  1"

    def test_mismatched_keys_render_as_list(self):
        assert encode([{"a": 1}, {"b": 2}]) == "  a: 1\n  b: 2"

    def test_different_key_order_is_not_uniform(self):
        assert "items[" not in encode([{"a": 1, "b": 2}, {"b": 3, "a": 4}])

    def test_nested_values_disable_table(self):
        assert encode([{"a": [1]}, {"a": [2]}]) == "  a:\n    1\n  a:\n    2"

    def test_scalar_list_under_key(self):
        assert encode({"tags": ["x", "y"]}) == "tags:\n  x\n  y"

    def test_null_cell_renders_empty(self):
        data = [{"a": None, "b": 1}, {"a": "x", "b": None}]
        assert encode(data) == "items[2]{a,b}:\n  ,1\n  x,"

    def test_empty_array_at_root(self):
        assert encode([]) == "items[0]{}:"

    def test_empty_array_under_key(self):
        assert encode({"a": []}) == "a:\n  items[0]{}:"

    def test_tabular_detection_helpers(self):
        options = resolve_options(None)
        assert detect_tabular_header([{"x": 1}, {"x": 2}], options) == ["x"]
        assert detect_tabular_header([{}, {}], options) is None
        assert detect_tabular_header([{"x": 1}, 2], options) is None


class TestTruncation:
    """Table blocks write at most maxPreviewItems rows."""

    def test_header_keeps_full_count(self):
        data = [{"id": i} for i in range(5)]
        lines = encode(data, {"maxPreviewItems": 3}).splitlines()

        assert lines[0] == "items[5]{id}:"
        assert lines[1:] == ["  0", "  1", "  2"]

    def test_zero_preview_items_writes_header_only(self):
        data = [{"id": 1}, {"id": 2}]
        assert encode(data, {"maxPreviewItems": 0}) == "items[2]{id}:"


class TestInputKinds:
    """encode() accepts JSON text, scalars and host objects."""

    def test_json_object_text_is_parsed(self):
        assert encode('  {"a": 1, "b": [{"x": 1}, {"x": 2}]}') == "a: 1\nb:\n  items[2]{x}:\n    1\n    2"

    def test_json_array_text_is_parsed(self):
        assert encode('[{"id": 1}, {"id": 2}]') == "items[2]{id}:\n  1\n  2"

    def test_invalid_json_falls_back_to_scalar(self):
        assert encode("{not json") == "{not json"

    def test_plain_text_is_escaped(self):
        assert encode("plain, text: here") == "plain\\, text\\: here"

    def test_scalars(self):
        assert encode(42) == "42"
        assert encode(None) == ""
        assert encode(True) == "true"
        assert encode(2.5) == "2.5"

    def test_pydantic_models(self):
        class Task(BaseModel):
            id: int
            title: str

        data = [Task(id=1, title="a"), Task(id=2, title="b")]
        assert encode(data) == "items[2]{id,title}:\n  1,a\n  2,b"

    def test_dataclasses(self):
        @dataclass
        class Point:
            x: int
            y: int

        assert encode({"points": [Point(1, 2), Point(3, 4)]}) == "points:\n  items[2]{x,y}:\n    1,2\n    3,4"

    def test_tuples_are_sequences(self):
        assert encode({"t": (1, 2)}) == "t:\n  1\n  2"


class TestOptions:
    """Option resolution."""

    def test_defaults(self):
        options = resolve_options(None)
        assert options.minRowsToTabular == 2
        assert options.maxPreviewItems == 200
        assert options.escapeStyle == "backslash"
        assert options.indent == 2

    def test_resolved_options_are_read_only(self):
        options = resolve_options({"maxPreviewItems": 5})
        with pytest.raises(AttributeError):
            options.maxPreviewItems = 10

    def test_custom_indent(self):
        assert encode({"a": {"b": 1}}, {"indent": 4}) == "a:\n    b: 1"

    @pytest.mark.parametrize(
        "options",
        [
            {"minRowsToTabular": 0},
            {"maxPreviewItems": -1},
            {"indent": 0},
            {"escapeStyle": "quotes"},
            {"minRowsToTabular": "abc"},
            {"maxPreviewItems": 1.5},
            {"indent": True},
            {"sanitizeKeys": "yes"},
        ],
    )
    def test_invalid_options_raise(self, options):
        with pytest.raises(ValueError):
            encode({"a": 1}, options)

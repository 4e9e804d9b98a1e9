"""Tests for JSON helpers."""

from edgecli_sdk._internal.jsonutil import parse_if_json, to_json_pretty


class TestParseIfJson:
    """Tests for parse_if_json."""

    def test_parses_object(self):
        assert parse_if_json('{"a": 1}') == {"a": 1}

    def test_parses_scalars(self):
        assert parse_if_json("42") == 42
        assert parse_if_json("null") is None

    def test_returns_raw_string_when_not_json(self):
        assert parse_if_json("not json") == "not json"

    def test_decodes_bytes(self):
        assert parse_if_json(b'[1, 2]') == [1, 2]

    def test_passes_through_non_strings(self):
        value = {"already": "parsed"}
        assert parse_if_json(value) is value


class TestToJsonPretty:
    """Tests for to_json_pretty."""

    def test_two_space_indent(self):
        assert to_json_pretty({"a": 1}) == '{\n  "a": 1\n}'

    def test_non_serializable_values_use_str(self):
        assert to_json_pretty(ValueError("boom")) == '"boom"'

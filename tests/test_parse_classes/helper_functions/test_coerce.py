"""test_coerce.py
Test the per-field coercion helpers used by the resume normalizer.
"""
import pytest

from resume_tailor.parse_classes.resume_normalizer.helpers.coerce import (
    get_field,
    to_optional_text,
    to_text,
    to_text_list,
    to_trimmed_text,
)


class TestToText:

    @pytest.mark.parametrize("value,expected", [
        (None, ""),
        ("abc", "abc"),
        (True, "true"),
        (False, "false"),
        (5, "5"),
        (5.0, "5"),
        (2.5, "2.5"),
        ([1, "a"], '[1, "a"]'),
        ({"k": "v"}, '{"k": "v"}'),
    ])
    def test_coercion_table(self, value, expected):
        assert to_text(value) == expected

    def test_trimmed_and_optional(self):
        assert to_trimmed_text("  x  ") == "x"
        assert to_optional_text("   ") is None
        assert to_optional_text(None) is None
        assert to_optional_text(" NYC ") == "NYC"


class TestToTextList:

    def test_non_list_becomes_empty(self):
        assert to_text_list("Python, SQL") == []
        assert to_text_list(None) == []
        assert to_text_list({"a": 1}) == []

    def test_elements_coerced_and_empties_dropped(self):
        assert to_text_list(["Python", None, "", 3, True]) == ["Python", "3", "true"]

    def test_elements_are_not_trimmed(self):
        assert to_text_list(["  SQL "]) == ["  SQL "]


class TestGetField:

    def test_mapping_lookup(self):
        assert get_field({"a": 1}, "a") == 1
        assert get_field({"a": 1}, "b") is None

    @pytest.mark.parametrize("obj", [None, "text", 42, ["a"]])
    def test_non_mapping_returns_none(self, obj):
        assert get_field(obj, "a") is None

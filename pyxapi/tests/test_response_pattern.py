"""
Tests for character strings and correct response patterns.
"""

import pytest

from pyxapi.activities.definitions import ResponsePattern, response_pattern_for, true_false_pattern
from pyxapi.character_string import CharacterString
from pyxapi.errors import InvalidArgumentError, NullArgumentError


class TestCharacterString:
    def test_value_required(self):
        with pytest.raises(NullArgumentError):
            CharacterString(None)

    def test_empty_value_rejected(self):
        with pytest.raises(InvalidArgumentError):
            CharacterString("")

    def test_match_is_case_insensitive_by_default(self):
        assert CharacterString("Paris").match("paris")
        assert not CharacterString("Paris").match("paris", case_matters=True)

    def test_items_split_on_delimiter(self):
        assert CharacterString("a[,]b[,]c").items == ("a", "b", "c")
        assert CharacterString("single").items == ("single",)

    def test_sequence_match_ignores_order_unless_order_matters(self):
        cs = CharacterString("a[,]b[,]c")
        assert cs.match(["c", "a", "b"])
        assert not cs.match(["c", "a", "b"], order_matters=True)
        assert cs.match(["a", "b", "c"], order_matters=True)

    def test_sequence_match_is_multiset(self):
        cs = CharacterString("a[,]a[,]b")
        assert cs.match(["a", "b", "a"])
        assert not cs.match(["a", "b", "b"])
        assert not cs.match(["a", "b"])


class TestResponsePattern:
    def test_single_string_match(self):
        pattern = response_pattern_for("likert_3")
        assert pattern.match("likert_3")
        assert pattern.match("LIKERT_3")
        assert not pattern.match("likert_2")

    def test_case_matters(self):
        pattern = response_pattern_for("likert_3", case_matters=True)
        assert pattern.match("likert_3")
        assert not pattern.match("LIKERT_3")

    def test_boolean_shortcut(self):
        pattern = true_false_pattern(True)
        assert pattern.match("true")
        assert pattern.match("TRUE")
        assert not pattern.match("false")
        assert pattern.case_matters is False
        assert pattern.order_matters is None
        assert pattern.character_strings == (CharacterString("true"),)
        assert true_false_pattern(False).character_strings == (CharacterString("false"),)

    def test_flags_default_to_unspecified(self):
        pattern = response_pattern_for("x")
        assert pattern.case_matters is None
        assert pattern.order_matters is None

    def test_shortcuts_normalize_to_canonical_form(self):
        canonical = ResponsePattern((CharacterString("x"),), True, False)
        assert response_pattern_for("x", True, False) == canonical
        assert response_pattern_for(CharacterString("x"), True, False) == canonical

    def test_any_character_string_may_match(self):
        pattern = ResponsePattern([CharacterString("foo"), CharacterString("bar")])
        assert pattern.match("BAR")
        assert pattern.match("foo")
        assert not pattern.match("baz")

    def test_sequence_match(self):
        pattern = ResponsePattern([CharacterString("a[,]b")], order_matters=True)
        assert pattern.match(["a", "b"])
        assert not pattern.match(["b", "a"])
        assert ResponsePattern([CharacterString("a[,]b")]).match(iter(["b", "a"]))

    def test_character_strings_stored_as_tuple(self):
        pattern = ResponsePattern([CharacterString("a")])
        assert isinstance(pattern.character_strings, tuple)

    def test_null_and_empty_rejected(self):
        with pytest.raises(NullArgumentError):
            ResponsePattern(None)
        with pytest.raises(InvalidArgumentError):
            ResponsePattern([])
        with pytest.raises(NullArgumentError):
            response_pattern_for(None)
        with pytest.raises(InvalidArgumentError):
            response_pattern_for("")

    def test_items_must_be_character_strings(self):
        with pytest.raises(InvalidArgumentError):
            ResponsePattern(["plain"])
        with pytest.raises(InvalidArgumentError):
            ResponsePattern("plain")

    def test_flags_must_be_bool(self):
        with pytest.raises(InvalidArgumentError):
            response_pattern_for("x", case_matters="yes")

    def test_pattern_strings(self):
        assert response_pattern_for("x").to_pattern_strings() == ["x"]
        pattern = response_pattern_for("x", case_matters=True, order_matters=False)
        assert pattern.to_pattern_strings() == ["{case_matters=true}{order_matters=false}x"]
        assert str(pattern) == '["{case_matters=true}{order_matters=false}x"]'

"""
Unit tests for validation rule objects.
"""

import unittest
from types import SimpleNamespace

from pyxapi.errors import InvalidArgumentError, NullArgumentError
from pyxapi.validation_rules import (
    AbsoluteIriRule,
    FiniteRule,
    MaximumRule,
    MinimumRule,
    MinItemsRule,
    NonEmptyStringRule,
    NotNullRule,
    PatternRule,
    TypeCheckRule,
    apply_rules,
)


class TestValidationRules(unittest.TestCase):
    """Test each rule's accept/reject behaviour and error classification"""

    def test_not_null_rule(self):
        rule = NotNullRule("name")
        rule.check("anything")
        with self.assertRaises(NullArgumentError) as ctx:
            rule.check(None)
        self.assertEqual(ctx.exception.param_name, "name")

    def test_optional_rule_skips_none(self):
        NonEmptyStringRule("name", is_required=False).check(None)
        MinItemsRule("scale", is_required=False).check(None)

    def test_type_check_rule(self):
        rule = TypeCheckRule("age", int)
        rule.check(3)
        with self.assertRaises(InvalidArgumentError) as ctx:
            rule.check("3")
        self.assertIn("must be int, got str", str(ctx.exception))

    def test_type_check_rule_rejects_bool_for_numbers(self):
        with self.assertRaises(InvalidArgumentError):
            TypeCheckRule("scaled", (int, float)).check(True)
        TypeCheckRule("flag", bool).check(False)

    def test_non_empty_string_rule(self):
        rule = NonEmptyStringRule("name")
        rule.check("x")
        with self.assertRaises(InvalidArgumentError) as ctx:
            rule.check("")
        self.assertIn("required and cannot be empty", str(ctx.exception))

    def test_min_items_rule(self):
        rule = MinItemsRule("scale")
        rule.check([1])
        with self.assertRaises(InvalidArgumentError) as ctx:
            rule.check([])
        self.assertIn("at least 1 item", str(ctx.exception))
        with self.assertRaises(NullArgumentError):
            rule.check(None)

    def test_minimum_and_maximum_rules(self):
        MinimumRule("scaled", -1).check(-1)
        MaximumRule("scaled", 1).check(1)
        with self.assertRaises(InvalidArgumentError) as ctx:
            MinimumRule("scaled", -1).check(-2)
        self.assertIn("must be >= -1, got -2", str(ctx.exception))
        with self.assertRaises(InvalidArgumentError):
            MaximumRule("scaled", 1).check(1.5)

    def test_finite_rule(self):
        rule = FiniteRule("raw")
        rule.check(3)
        rule.check(2.5)
        for value in (float("nan"), float("inf"), float("-inf")):
            with self.subTest(value=value):
                with self.assertRaises(InvalidArgumentError) as ctx:
                    rule.check(value)
                self.assertIn("must be a finite number", str(ctx.exception))
        FiniteRule("raw", is_required=False).check(None)

    def test_pattern_rule(self):
        rule = PatternRule("sha1sum", r"[0-9a-f]{40}")
        rule.check("a" * 40)
        with self.assertRaises(InvalidArgumentError) as ctx:
            rule.check("a" * 39)
        self.assertIn("must match pattern", str(ctx.exception))

    def test_absolute_iri_rule(self):
        rule = AbsoluteIriRule("id")
        rule.check("http://example.com/a")
        rule.check("urn:uuid:fd41c918-b88b-4b20-a0a5-a4c32391aaa0")
        with self.assertRaises(InvalidArgumentError):
            rule.check("/relative/path")
        with self.assertRaises(InvalidArgumentError):
            rule.check(42)

    def test_apply_rules_checks_in_order(self):
        target = SimpleNamespace(name=None, description=None)
        with self.assertRaises(NullArgumentError) as ctx:
            apply_rules(target, [NotNullRule("name"), NotNullRule("description")])
        self.assertEqual(ctx.exception.param_name, "name")

    def test_error_message_names_parameter(self):
        with self.assertRaises(InvalidArgumentError) as ctx:
            NonEmptyStringRule("value").check("")
        self.assertTrue(str(ctx.exception).startswith("value: "))


if __name__ == "__main__":
    unittest.main()

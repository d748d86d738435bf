"""
Validation rule objects applied when xAPI values are constructed.

Each rule represents one constraint on one constructor argument and knows
which error to raise when the constraint is violated. Error messages are
loaded from ``validation_rules.json`` so that wording stays in one place.
"""

from __future__ import annotations

import json
import math
import re
from abc import ABC, abstractmethod
from collections.abc import Iterable
from pathlib import Path
from typing import Any

from .errors import InvalidArgumentError, NullArgumentError
from .utils import is_absolute_iri


class ValidationRule(ABC):
    """Base class for all validation rules"""

    # Class-level cache for loaded string templates
    _string_templates: dict[str, dict[str, Any]] = {}

    def __init__(self, field_name: str, is_required: bool = True):
        """
        Initialize a validation rule.

        Args:
            field_name: Name of the constructor argument being validated
            is_required: Whether None is rejected (True) or skips the rule (False)
        """
        self.field_name = field_name
        self.is_required = is_required

    @classmethod
    def _load_string_templates(cls) -> dict[str, Any]:
        """
        Load message templates from the JSON file next to this module.
        Results are cached to avoid repeated file I/O.
        """
        if not cls._string_templates:
            template_file = Path(__file__).parent / "validation_rules.json"
            with open(template_file, "r", encoding="utf-8") as f:
                cls._string_templates.update(json.load(f))
        return cls._string_templates

    def get_string(self, key: str, **format_params) -> str:
        """
        Get a message template for this rule and format it.

        Args:
            key: The template key to retrieve (e.g. 'error_message')
            **format_params: Parameters to format into the template

        Returns:
            The formatted string
        """
        templates = self._load_string_templates()
        class_name = self.__class__.__name__

        if class_name not in templates:
            raise KeyError(f"No string templates found for {class_name}")

        rule_templates = templates[class_name]

        if key not in rule_templates:
            raise KeyError(f"Key '{key}' not found in templates for {class_name}")

        return rule_templates[key].format(**format_params)

    def get_template_params(self, value: Any) -> dict[str, Any]:
        """Parameters for the error message template."""
        return {"value": value}

    @abstractmethod
    def is_violated(self, value: Any) -> bool:
        """Return True if a non-None value breaks this rule."""

    def check(self, value: Any) -> None:
        """
        Validate a value, raising on violation.

        Raises:
            NullArgumentError: value is None and the rule is required
            InvalidArgumentError: value is present but breaks the rule
        """
        if value is None:
            if self.is_required:
                raise NullArgumentError(self.field_name, self.get_null_message())
            return
        if self.is_violated(value):
            message = self.get_string("error_message", **self.get_template_params(value))
            raise InvalidArgumentError(self.field_name, message)

    def get_null_message(self) -> str:
        templates = self._load_string_templates()
        return templates["NotNullRule"]["error_message"]


class NotNullRule(ValidationRule):
    """Only rejects None"""

    def is_violated(self, value: Any) -> bool:
        return False


class TypeCheckRule(ValidationRule):
    """Validates that a value is an instance of one of the expected types"""

    def __init__(self, field_name: str, expected_type: type | tuple[type, ...], is_required: bool = True):
        super().__init__(field_name, is_required)
        self.expected_types = expected_type if isinstance(expected_type, tuple) else (expected_type,)

    def is_violated(self, value: Any) -> bool:
        # bool is a subclass of int but never a valid number here
        if isinstance(value, bool) and bool not in self.expected_types:
            return True
        return not isinstance(value, self.expected_types)

    def get_template_params(self, value: Any) -> dict[str, Any]:
        return {
            "expected_type": " or ".join(t.__name__ for t in self.expected_types),
            "actual_type": type(value).__name__,
        }


class NonEmptyStringRule(ValidationRule):
    """Validates that a string is not empty"""

    def is_violated(self, value: Any) -> bool:
        return not isinstance(value, str) or not value


class MinItemsRule(ValidationRule):
    """Validates minimum collection length"""

    def __init__(self, field_name: str, min_items: int = 1, is_required: bool = True):
        super().__init__(field_name, is_required)
        self.min_items = min_items

    def is_violated(self, value: Any) -> bool:
        return len(value) < self.min_items

    def get_template_params(self, value: Any) -> dict[str, Any]:
        return {"min_items": self.min_items}


class FiniteRule(ValidationRule):
    """Rejects NaN and infinite floats"""

    def is_violated(self, value: Any) -> bool:
        return isinstance(value, float) and not math.isfinite(value)


class MinimumRule(ValidationRule):
    """Validates minimum numeric value"""

    def __init__(self, field_name: str, minimum: float, is_required: bool = True):
        super().__init__(field_name, is_required)
        self.minimum = minimum

    def is_violated(self, value: Any) -> bool:
        return value < self.minimum

    def get_template_params(self, value: Any) -> dict[str, Any]:
        return {"minimum": self.minimum, "value": value}


class MaximumRule(ValidationRule):
    """Validates maximum numeric value"""

    def __init__(self, field_name: str, maximum: float, is_required: bool = True):
        super().__init__(field_name, is_required)
        self.maximum = maximum

    def is_violated(self, value: Any) -> bool:
        return value > self.maximum

    def get_template_params(self, value: Any) -> dict[str, Any]:
        return {"maximum": self.maximum, "value": value}


class PatternRule(ValidationRule):
    """Validates that a string matches a regex pattern"""

    def __init__(self, field_name: str, pattern: str, is_required: bool = True):
        super().__init__(field_name, is_required)
        self.pattern = pattern
        self._regex = re.compile(pattern)

    def is_violated(self, value: Any) -> bool:
        return not isinstance(value, str) or self._regex.fullmatch(value) is None

    def get_template_params(self, value: Any) -> dict[str, Any]:
        return {"pattern": self.pattern, "value": value}


class AbsoluteIriRule(ValidationRule):
    """Validates that a string is an absolute IRI"""

    def is_violated(self, value: Any) -> bool:
        return not is_absolute_iri(value)


def apply_rules(instance: Any, rules: Iterable[ValidationRule]) -> None:
    """Check each rule against the attribute of ``instance`` it names, in order."""
    for rule in rules:
        rule.check(getattr(instance, rule.field_name))

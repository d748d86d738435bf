"""
Character strings: the building blocks of correct response patterns.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass
from typing import ClassVar

from .validation_rules import NonEmptyStringRule, ValidationRule, apply_rules

# xAPI delimiter between items of a multi-item response
ITEM_DELIMITER = "[,]"


def _normalize(text: str, case_matters: bool | None) -> str:
    return text if case_matters else text.casefold()


@dataclass(frozen=True)
class CharacterString:
    """A validated, non-empty response string.

    Multi-item responses (choices, sequences) are stored as a single value
    whose items are separated by ``[,]``.
    """

    value: str

    VALIDATION_RULES: ClassVar[tuple[ValidationRule, ...]] = (NonEmptyStringRule("value"),)

    def __post_init__(self):
        apply_rules(self, self.VALIDATION_RULES)

    @property
    def items(self) -> tuple[str, ...]:
        """The delimited items of this string (a single item if there is no delimiter)."""
        return tuple(self.value.split(ITEM_DELIMITER))

    def match(self, candidate: str | Iterable[str], case_matters: bool | None = None, order_matters: bool | None = None) -> bool:
        """
        Check a learner response against this string.

        Args:
            candidate: A single response, or a sequence of response items
            case_matters: Compare case-sensitively only when True
            order_matters: For sequences, compare in order only when True;
                otherwise items are compared as a multiset

        Returns:
            True if the candidate matches
        """
        if isinstance(candidate, str):
            return _normalize(candidate, case_matters) == _normalize(self.value, case_matters)

        expected = [_normalize(item, case_matters) for item in self.items]
        actual = [_normalize(item, case_matters) for item in candidate]
        if order_matters:
            return actual == expected
        return Counter(actual) == Counter(expected)

    def __str__(self) -> str:
        return self.value

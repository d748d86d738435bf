"""
Correct response patterns for interaction activities.

The correct responses pattern holds an array of character strings. A
learner's response is considered correct if it matches any of them. Where a
character string is a delimited list, the response is only correct if all
of the items in that list match.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import ClassVar

from ...character_string import CharacterString
from ...errors import InvalidArgumentError, NullArgumentError
from ...utils import lower_bool
from ...validation_rules import MinItemsRule, TypeCheckRule, ValidationRule, apply_rules


@dataclass(frozen=True)
class ResponsePattern:
    """An exhaustive list of correct responses plus matching flags.

    ``case_matters`` and ``order_matters`` are None when unspecified, which
    is distinct from False.
    """

    character_strings: tuple[CharacterString, ...]
    case_matters: bool | None = None
    order_matters: bool | None = None

    VALIDATION_RULES: ClassVar[tuple[ValidationRule, ...]] = (
        MinItemsRule("character_strings"),
        TypeCheckRule("case_matters", bool, is_required=False),
        TypeCheckRule("order_matters", bool, is_required=False),
    )

    def __post_init__(self):
        if isinstance(self.character_strings, (str, CharacterString)):
            raise InvalidArgumentError("character_strings", "expected a sequence; use response_pattern_for() for a single item")
        if self.character_strings is not None:
            object.__setattr__(self, "character_strings", tuple(self.character_strings))
        apply_rules(self, self.VALIDATION_RULES)
        for i, item in enumerate(self.character_strings):
            if not isinstance(item, CharacterString):
                raise InvalidArgumentError(
                    "character_strings",
                    f"character_strings[{i}] must be a CharacterString instance, got {type(item).__name__}",
                )

    def match(self, candidate: str | Iterable[str]) -> bool:
        """Return True if the response matches any of the character strings."""
        if not isinstance(candidate, str):
            candidate = list(candidate)
        return any(cs.match(candidate, self.case_matters, self.order_matters) for cs in self.character_strings)

    def to_pattern_strings(self) -> list[str]:
        """Render the xAPI ``correctResponsesPattern`` array, with flag prefixes when set."""
        prefix = ""
        if self.case_matters is not None:
            prefix += f"{{case_matters={lower_bool(self.case_matters)}}}"
        if self.order_matters is not None:
            prefix += f"{{order_matters={lower_bool(self.order_matters)}}}"
        return [f"{prefix}{cs.value}" for cs in self.character_strings]

    def __str__(self) -> str:
        return "[" + ", ".join(f'"{s}"' for s in self.to_pattern_strings()) + "]"


def response_pattern_for(
    item: str | CharacterString,
    case_matters: bool | None = None,
    order_matters: bool | None = None,
) -> ResponsePattern:
    """Create a response pattern with a single correct response."""
    if item is None:
        raise NullArgumentError("item")
    character_string = item if isinstance(item, CharacterString) else CharacterString(item)
    return ResponsePattern((character_string,), case_matters, order_matters)


def true_false_pattern(correct: bool) -> ResponsePattern:
    """Create the pattern for a true/false interaction.

    The response token is lowercase and matched case-insensitively.
    """
    return ResponsePattern((CharacterString(lower_bool(correct)),), case_matters=False)

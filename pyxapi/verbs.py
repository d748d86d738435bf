"""
Verbs: the action an Actor performed.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import ClassVar

from .languages import LanguageMap
from .validation_rules import AbsoluteIriRule, NotNullRule, ValidationRule, apply_rules

ADL_VERB_BASE = "http://adlnet.gov/expapi/verbs/"


@dataclass(frozen=True)
class Verb:
    """An IRI identifying the action plus its human-readable display."""

    id: str
    display: LanguageMap

    VALIDATION_RULES: ClassVar[tuple[ValidationRule, ...]] = (
        AbsoluteIriRule("id"),
        NotNullRule("display"),
    )

    def __post_init__(self):
        apply_rules(self, self.VALIDATION_RULES)
        object.__setattr__(self, "display", LanguageMap.coerce(self.display, "display"))


def adl_verb(name: str, display: str | Mapping[str, str] | None = None) -> Verb:
    """Build a verb from the ADL vocabulary, e.g. ``adl_verb("completed")``."""
    if display is None:
        display = name
    if isinstance(display, str):
        display = LanguageMap.english_us(display)
    return Verb(f"{ADL_VERB_BASE}{name}", display)


ANSWERED = adl_verb("answered")
ATTEMPTED = adl_verb("attempted")
COMPLETED = adl_verb("completed")
EXPERIENCED = adl_verb("experienced")
FAILED = adl_verb("failed")
INITIALIZED = adl_verb("initialized")
PASSED = adl_verb("passed")
PROGRESSED = adl_verb("progressed")
TERMINATED = adl_verb("terminated")
VOIDED = adl_verb("voided")

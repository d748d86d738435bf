"""
Activities: the most common Statement object.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from ..validation_rules import AbsoluteIriRule, TypeCheckRule, ValidationRule, apply_rules
from .definitions.base import ActivityDefinition


@dataclass(frozen=True)
class Activity:
    """An activity identified by an IRI, optionally carrying its definition."""

    id: str
    definition: ActivityDefinition | None = None

    VALIDATION_RULES: ClassVar[tuple[ValidationRule, ...]] = (
        AbsoluteIriRule("id"),
        TypeCheckRule("definition", ActivityDefinition, is_required=False),
    )

    def __post_init__(self):
        apply_rules(self, self.VALIDATION_RULES)

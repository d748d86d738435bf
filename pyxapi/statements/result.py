"""
Results: the measured outcome of a Statement.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from typing import ClassVar

from ..errors import InvalidArgumentError
from ..extensions import Extensions
from ..validation_rules import FiniteRule, MaximumRule, MinimumRule, TypeCheckRule, ValidationRule, apply_rules

NUMBER = (int, float)


@dataclass(frozen=True)
class Score:
    """A score in one or more of the scaled/raw/min/max forms.

    ``scaled`` is required and lies in [-1, 1]. ``raw``, ``min`` and ``max``
    are optional; the serializer only emits them when all three are set.
    """

    scaled: float
    raw: float | None = None
    min: float | None = None
    max: float | None = None

    VALIDATION_RULES: ClassVar[tuple[ValidationRule, ...]] = (
        TypeCheckRule("scaled", NUMBER),
        FiniteRule("scaled"),
        MinimumRule("scaled", -1),
        MaximumRule("scaled", 1),
        TypeCheckRule("raw", NUMBER, is_required=False),
        FiniteRule("raw", is_required=False),
        TypeCheckRule("min", NUMBER, is_required=False),
        FiniteRule("min", is_required=False),
        TypeCheckRule("max", NUMBER, is_required=False),
        FiniteRule("max", is_required=False),
    )

    def __post_init__(self):
        apply_rules(self, self.VALIDATION_RULES)
        if self.min is not None and self.max is not None:
            if self.min > self.max:
                raise InvalidArgumentError("min", f"must be <= max ({self.max}), got {self.min}")
            if self.raw is not None and not self.min <= self.raw <= self.max:
                raise InvalidArgumentError("raw", f"must lie between min ({self.min}) and max ({self.max}), got {self.raw}")

    @property
    def is_complete(self) -> bool:
        """True when raw, min and max are all present."""
        return self.raw is not None and self.min is not None and self.max is not None


@dataclass(frozen=True)
class Result:
    """An optional set of outcome fields; each is None when unknown."""

    score: Score | None = None
    success: bool | None = None
    completion: bool | None = None
    response: str | None = None
    duration: timedelta | None = None
    extensions: Extensions | None = None

    VALIDATION_RULES: ClassVar[tuple[ValidationRule, ...]] = (
        TypeCheckRule("score", Score, is_required=False),
        TypeCheckRule("success", bool, is_required=False),
        TypeCheckRule("completion", bool, is_required=False),
        TypeCheckRule("response", str, is_required=False),
        TypeCheckRule("duration", timedelta, is_required=False),
    )

    def __post_init__(self):
        apply_rules(self, self.VALIDATION_RULES)
        if self.duration is not None and self.duration < timedelta(0):
            raise InvalidArgumentError("duration", "cannot be negative")
        object.__setattr__(self, "extensions", Extensions.coerce(self.extensions))

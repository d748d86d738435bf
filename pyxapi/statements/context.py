"""
Contexts: information that gives a Statement meaning beyond actor/verb/object.
"""

from __future__ import annotations

import uuid
from collections.abc import Iterable
from dataclasses import dataclass, fields
from typing import ClassVar

from ..activities.activity import Activity
from ..actors import Agent, Group
from ..errors import InvalidArgumentError
from ..extensions import Extensions
from ..languages import LANGUAGE_TAG_PATTERN
from ..validation_rules import NonEmptyStringRule, PatternRule, TypeCheckRule, ValidationRule, apply_rules
from .statement_ref import StatementRef, coerce_uuid


def _activity_list(value: Iterable[Activity] | None, param_name: str) -> tuple[Activity, ...] | None:
    if value is None:
        return None
    if isinstance(value, Activity):
        raise InvalidArgumentError(param_name, "expected a sequence of Activity")
    activities = tuple(value)
    if not activities:
        raise InvalidArgumentError(param_name, "cannot be empty; omit the argument instead")
    for i, activity in enumerate(activities):
        if not isinstance(activity, Activity):
            raise InvalidArgumentError(param_name, f"{param_name}[{i}] must be an Activity instance, got {type(activity).__name__}")
    return activities


@dataclass(frozen=True)
class ContextActivities:
    """Activities related to the Statement's object, grouped by relationship."""

    parent: tuple[Activity, ...] | None = None
    grouping: tuple[Activity, ...] | None = None
    category: tuple[Activity, ...] | None = None
    other: tuple[Activity, ...] | None = None

    def __post_init__(self):
        for f in fields(self):
            object.__setattr__(self, f.name, _activity_list(getattr(self, f.name), f.name))


@dataclass(frozen=True)
class Context:
    """Optional contextual information for a Statement."""

    registration: uuid.UUID | None = None
    instructor: Agent | Group | None = None
    team: Agent | Group | None = None
    context_activities: ContextActivities | None = None
    revision: str | None = None
    platform: str | None = None
    language: str | None = None
    statement: StatementRef | None = None
    extensions: Extensions | None = None

    VALIDATION_RULES: ClassVar[tuple[ValidationRule, ...]] = (
        TypeCheckRule("instructor", (Agent, Group), is_required=False),
        TypeCheckRule("team", (Agent, Group), is_required=False),
        TypeCheckRule("context_activities", ContextActivities, is_required=False),
        NonEmptyStringRule("revision", is_required=False),
        NonEmptyStringRule("platform", is_required=False),
        PatternRule("language", LANGUAGE_TAG_PATTERN.pattern, is_required=False),
        TypeCheckRule("statement", StatementRef, is_required=False),
    )

    def __post_init__(self):
        object.__setattr__(self, "registration", coerce_uuid(self.registration, "registration", is_required=False))
        apply_rules(self, self.VALIDATION_RULES)
        object.__setattr__(self, "extensions", Extensions.coerce(self.extensions))

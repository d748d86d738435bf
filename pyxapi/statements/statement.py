"""
Statements: who did what to what, with optional result, context and timestamp.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from datetime import datetime
from typing import ClassVar

from ..activities.activity import Activity
from ..actors import Actor, Agent, Group
from ..errors import InvalidArgumentError
from ..validation_rules import NotNullRule, TypeCheckRule, ValidationRule, apply_rules
from ..verbs import Verb
from .context import Context
from .result import Result
from .statement_ref import StatementRef, coerce_uuid

# Sub-statements are not modelled
StatementObject = Activity | Agent | Group | StatementRef


@dataclass(frozen=True)
class Statement:
    """The atomic record of an experience."""

    id: uuid.UUID
    actor: Actor
    verb: Verb
    object: StatementObject
    result: Result | None = None
    context: Context | None = None
    timestamp: datetime | None = None

    VALIDATION_RULES: ClassVar[tuple[ValidationRule, ...]] = (
        TypeCheckRule("actor", (Agent, Group)),
        TypeCheckRule("verb", Verb),
        NotNullRule("object"),
        TypeCheckRule("result", Result, is_required=False),
        TypeCheckRule("context", Context, is_required=False),
        TypeCheckRule("timestamp", datetime, is_required=False),
    )

    def __post_init__(self):
        object.__setattr__(self, "id", coerce_uuid(self.id, "id"))
        apply_rules(self, self.VALIDATION_RULES)
        if self.timestamp is not None and self.timestamp.utcoffset() is None:
            raise InvalidArgumentError("timestamp", "must be timezone-aware")
        if self.context is not None and not isinstance(self.object, Activity):
            if self.context.revision is not None or self.context.platform is not None:
                raise InvalidArgumentError("context", "revision and platform are only allowed when the object is an Activity")

    @classmethod
    def new(
        cls,
        actor: Actor,
        verb: Verb,
        object: StatementObject,
        result: Result | None = None,
        context: Context | None = None,
        timestamp: datetime | None = None,
    ) -> Statement:
        """Create a statement with a freshly generated id."""
        return cls(uuid.uuid4(), actor, verb, object, result, context, timestamp)

"""
Actors: the "who" of a Statement.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar

from .errors import InvalidArgumentError
from .identifiers import IFI_TYPES, InverseFunctionalIdentifier
from .validation_rules import NonEmptyStringRule, TypeCheckRule, ValidationRule, apply_rules


@dataclass(frozen=True)
class Agent:
    """An individual identified by exactly one IFI."""

    ifi: InverseFunctionalIdentifier
    name: str | None = None

    VALIDATION_RULES: ClassVar[tuple[ValidationRule, ...]] = (
        TypeCheckRule("ifi", IFI_TYPES),
        NonEmptyStringRule("name", is_required=False),
    )

    def __post_init__(self):
        apply_rules(self, self.VALIDATION_RULES)


@dataclass(frozen=True)
class Group:
    """A collection of Agents.

    An identified group carries an IFI and may list members; an anonymous
    group has no IFI and must list at least one member.
    """

    members: tuple[Agent, ...] = ()
    name: str | None = None
    ifi: InverseFunctionalIdentifier | None = field(default=None, kw_only=True)

    VALIDATION_RULES: ClassVar[tuple[ValidationRule, ...]] = (
        NonEmptyStringRule("name", is_required=False),
        TypeCheckRule("ifi", IFI_TYPES, is_required=False),
    )

    def __post_init__(self):
        if self.members is None:
            object.__setattr__(self, "members", ())
        object.__setattr__(self, "members", tuple(self.members))
        apply_rules(self, self.VALIDATION_RULES)
        for i, member in enumerate(self.members):
            if not isinstance(member, Agent):
                raise InvalidArgumentError("members", f"members[{i}] must be an Agent instance, got {type(member).__name__}")
        if self.ifi is None and not self.members:
            raise InvalidArgumentError("members", "an anonymous group must have at least one member")

    @property
    def is_anonymous(self) -> bool:
        return self.ifi is None


Actor = Agent | Group

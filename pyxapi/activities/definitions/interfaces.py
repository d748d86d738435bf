"""
Capability interfaces for activity definitions.

Code that only needs to read a definition should type against these
protocols rather than the concrete dataclasses. Reading through the
interface yields exactly the values of the concrete type.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from ...extensions import Extensions
from ...languages import LanguageMap
from .base import Interaction, InteractionComponent
from .response_pattern import ResponsePattern


@runtime_checkable
class ActivityDefinitionInterface(Protocol):
    @property
    def name(self) -> LanguageMap: ...

    @property
    def description(self) -> LanguageMap: ...

    @property
    def type(self) -> str | None: ...

    @property
    def more_info(self) -> str | None: ...

    @property
    def extensions(self) -> Extensions | None: ...


@runtime_checkable
class InteractionDefinitionInterface(ActivityDefinitionInterface, Protocol):
    @property
    def interaction_type(self) -> Interaction: ...

    @property
    def correct_responses_pattern(self) -> ResponsePattern: ...


@runtime_checkable
class LikertInteractionInterface(InteractionDefinitionInterface, Protocol):
    """A Likert interaction: a correct responses pattern over an ordered scale."""

    @property
    def scale(self) -> tuple[InteractionComponent, ...]: ...

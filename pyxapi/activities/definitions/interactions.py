"""
Concrete interaction activity definitions, one per xAPI interaction type.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from .base import Interaction, InteractionActivityDefinition, InteractionComponent


@dataclass(frozen=True)
class TrueFalseInteractionActivityDefinition(InteractionActivityDefinition):
    """An interaction with two possible responses: true or false."""

    INTERACTION_TYPE: ClassVar[Interaction] = Interaction.TRUE_FALSE


@dataclass(frozen=True)
class ChoiceInteractionActivityDefinition(InteractionActivityDefinition):
    """An interaction with a number of choices from which the learner selects."""

    choices: tuple[InteractionComponent, ...]

    INTERACTION_TYPE: ClassVar[Interaction] = Interaction.CHOICE
    COMPONENT_FIELDS = (("choices", "choices"),)


@dataclass(frozen=True)
class FillInInteractionActivityDefinition(InteractionActivityDefinition):
    """An interaction which requires the learner to supply a short response."""

    INTERACTION_TYPE: ClassVar[Interaction] = Interaction.FILL_IN


@dataclass(frozen=True)
class LongFillInInteractionActivityDefinition(InteractionActivityDefinition):
    """An interaction which requires the learner to supply a longer free-text response."""

    INTERACTION_TYPE: ClassVar[Interaction] = Interaction.LONG_FILL_IN


@dataclass(frozen=True)
class LikertInteractionActivityDefinition(InteractionActivityDefinition):
    """An interaction which asks the learner to select from a discrete set of
    choices on a scale.

    Args:
        name: Human readable name
        description: Human readable description
        correct_responses_pattern: The correct response(s)
        scale: The ordered options of the scale; at least one
        more_info: IRL to a document about the activity (optional)
        extensions: Non-empty extensions; leave as None for no extensions
    """

    scale: tuple[InteractionComponent, ...]

    INTERACTION_TYPE: ClassVar[Interaction] = Interaction.LIKERT
    COMPONENT_FIELDS = (("scale", "scale"),)


@dataclass(frozen=True)
class MatchingInteractionActivityDefinition(InteractionActivityDefinition):
    """An interaction where the learner matches items in one set (source) to
    items in another (target)."""

    source: tuple[InteractionComponent, ...]
    target: tuple[InteractionComponent, ...]

    INTERACTION_TYPE: ClassVar[Interaction] = Interaction.MATCHING
    COMPONENT_FIELDS = (("source", "source"), ("target", "target"))


@dataclass(frozen=True)
class PerformanceInteractionActivityDefinition(InteractionActivityDefinition):
    """An interaction that requires the learner to perform a task with multiple steps."""

    steps: tuple[InteractionComponent, ...]

    INTERACTION_TYPE: ClassVar[Interaction] = Interaction.PERFORMANCE
    COMPONENT_FIELDS = (("steps", "steps"),)


@dataclass(frozen=True)
class SequencingInteractionActivityDefinition(InteractionActivityDefinition):
    """An interaction where the learner orders items."""

    choices: tuple[InteractionComponent, ...]

    INTERACTION_TYPE: ClassVar[Interaction] = Interaction.SEQUENCING
    COMPONENT_FIELDS = (("choices", "choices"),)


@dataclass(frozen=True)
class NumericInteractionActivityDefinition(InteractionActivityDefinition):
    """An interaction with a numerical response."""

    INTERACTION_TYPE: ClassVar[Interaction] = Interaction.NUMERIC


@dataclass(frozen=True)
class OtherInteractionActivityDefinition(InteractionActivityDefinition):
    INTERACTION_TYPE: ClassVar[Interaction] = Interaction.OTHER

"""Activity definitions, interaction types and correct response patterns."""

from .base import CMI_INTERACTION, ActivityDefinition, Interaction, InteractionActivityDefinition, InteractionComponent
from .interactions import (
    ChoiceInteractionActivityDefinition,
    FillInInteractionActivityDefinition,
    LikertInteractionActivityDefinition,
    LongFillInInteractionActivityDefinition,
    MatchingInteractionActivityDefinition,
    NumericInteractionActivityDefinition,
    OtherInteractionActivityDefinition,
    PerformanceInteractionActivityDefinition,
    SequencingInteractionActivityDefinition,
    TrueFalseInteractionActivityDefinition,
)
from .interfaces import ActivityDefinitionInterface, InteractionDefinitionInterface, LikertInteractionInterface
from .response_pattern import ResponsePattern, response_pattern_for, true_false_pattern

__all__ = [
    "CMI_INTERACTION",
    "ActivityDefinition",
    "ActivityDefinitionInterface",
    "ChoiceInteractionActivityDefinition",
    "FillInInteractionActivityDefinition",
    "Interaction",
    "InteractionActivityDefinition",
    "InteractionComponent",
    "InteractionDefinitionInterface",
    "LikertInteractionActivityDefinition",
    "LikertInteractionInterface",
    "LongFillInInteractionActivityDefinition",
    "MatchingInteractionActivityDefinition",
    "NumericInteractionActivityDefinition",
    "OtherInteractionActivityDefinition",
    "PerformanceInteractionActivityDefinition",
    "ResponsePattern",
    "SequencingInteractionActivityDefinition",
    "TrueFalseInteractionActivityDefinition",
    "response_pattern_for",
    "true_false_pattern",
]

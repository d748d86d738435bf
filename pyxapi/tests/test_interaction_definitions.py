"""
Tests for the base activity definition and the interaction definition family.
"""

import pytest

from pyxapi.activities.definitions import (
    CMI_INTERACTION,
    ActivityDefinition,
    ActivityDefinitionInterface,
    ChoiceInteractionActivityDefinition,
    FillInInteractionActivityDefinition,
    Interaction,
    InteractionComponent,
    InteractionDefinitionInterface,
    LikertInteractionInterface,
    LongFillInInteractionActivityDefinition,
    MatchingInteractionActivityDefinition,
    NumericInteractionActivityDefinition,
    OtherInteractionActivityDefinition,
    PerformanceInteractionActivityDefinition,
    SequencingInteractionActivityDefinition,
    TrueFalseInteractionActivityDefinition,
    response_pattern_for,
    true_false_pattern,
)
from pyxapi.errors import InvalidArgumentError, NullArgumentError
from pyxapi.languages import LanguageMap

NAME = LanguageMap.english_us("Question")
DESCRIPTION = LanguageMap.english_us("Answer the question")


def components(*ids):
    return [InteractionComponent(i, LanguageMap.english_us(i.title())) for i in ids]


class TestActivityDefinition:
    def test_minimal(self):
        definition = ActivityDefinition(NAME, DESCRIPTION)
        assert definition.type is None
        assert definition.more_info is None
        assert definition.extensions is None

    def test_type_and_more_info(self):
        definition = ActivityDefinition(
            NAME, DESCRIPTION, type="http://adlnet.gov/expapi/activities/course", more_info="http://example.com/more"
        )
        assert definition.type == "http://adlnet.gov/expapi/activities/course"
        assert isinstance(definition, ActivityDefinitionInterface)
        assert not isinstance(definition, InteractionDefinitionInterface)

    def test_plain_mappings_are_coerced(self):
        definition = ActivityDefinition({"en-US": "Question"}, {"en-US": "Answer"})
        assert isinstance(definition.name, LanguageMap)

    def test_invalid(self):
        with pytest.raises(NullArgumentError):
            ActivityDefinition(None, DESCRIPTION)
        with pytest.raises(NullArgumentError):
            ActivityDefinition(NAME, None)
        with pytest.raises(InvalidArgumentError):
            ActivityDefinition(NAME, DESCRIPTION, more_info="more")
        with pytest.raises(InvalidArgumentError):
            ActivityDefinition(NAME, DESCRIPTION, extensions={})


class TestInteractions:
    @pytest.mark.parametrize(
        "cls, interaction_type",
        [
            (FillInInteractionActivityDefinition, Interaction.FILL_IN),
            (LongFillInInteractionActivityDefinition, Interaction.LONG_FILL_IN),
            (NumericInteractionActivityDefinition, Interaction.NUMERIC),
            (OtherInteractionActivityDefinition, Interaction.OTHER),
        ],
    )
    def test_pattern_only_interactions(self, cls, interaction_type):
        definition = cls(NAME, DESCRIPTION, response_pattern_for("42"))
        assert definition.interaction_type == interaction_type
        assert definition.type == CMI_INTERACTION
        assert definition.components() == []
        assert isinstance(definition, InteractionDefinitionInterface)
        assert not isinstance(definition, LikertInteractionInterface)

    def test_true_false(self):
        definition = TrueFalseInteractionActivityDefinition(NAME, DESCRIPTION, true_false_pattern(True))
        assert definition.interaction_type == Interaction.TRUE_FALSE
        assert definition.correct_responses_pattern.match("TRUE")

    def test_choice(self):
        choices = components("golf", "tetris")
        definition = ChoiceInteractionActivityDefinition(NAME, DESCRIPTION, response_pattern_for("golf[,]tetris"), choices)
        assert definition.choices == tuple(choices)
        assert definition.components() == [("choices", tuple(choices))]

    def test_sequencing(self):
        choices = components("tim", "ben", "ells")
        definition = SequencingInteractionActivityDefinition(
            NAME, DESCRIPTION, response_pattern_for("tim[,]ben[,]ells", order_matters=True), choices
        )
        assert definition.interaction_type == Interaction.SEQUENCING
        assert definition.correct_responses_pattern.match(["tim", "ben", "ells"])
        assert not definition.correct_responses_pattern.match(["ben", "tim", "ells"])

    def test_performance(self):
        definition = PerformanceInteractionActivityDefinition(
            NAME, DESCRIPTION, response_pattern_for("pong[.]1:[,]dg[.]:10"), components("pong", "dg")
        )
        assert [c.id for c in definition.steps] == ["pong", "dg"]

    def test_matching_requires_both_lists(self):
        source = components("ben", "chris")
        target = components("1", "2")
        definition = MatchingInteractionActivityDefinition(NAME, DESCRIPTION, response_pattern_for("ben[.]1"), source, target)
        assert [key for key, _ in definition.components()] == ["source", "target"]

        with pytest.raises(NullArgumentError) as exc_info:
            MatchingInteractionActivityDefinition(NAME, DESCRIPTION, response_pattern_for("ben[.]1"), source, None)
        assert exc_info.value.param_name == "target"

        with pytest.raises(InvalidArgumentError) as exc_info:
            MatchingInteractionActivityDefinition(NAME, DESCRIPTION, response_pattern_for("ben[.]1"), [], target)
        assert exc_info.value.param_name == "source"

    def test_pattern_must_be_response_pattern(self):
        with pytest.raises(InvalidArgumentError):
            FillInInteractionActivityDefinition(NAME, DESCRIPTION, "42")

    def test_interaction_component(self):
        component = InteractionComponent("likert_0", {"en-US": "It's OK"})
        assert isinstance(component.description, LanguageMap)
        with pytest.raises(InvalidArgumentError):
            InteractionComponent("", LanguageMap.english_us("x"))
        with pytest.raises(NullArgumentError):
            InteractionComponent("likert_0", None)

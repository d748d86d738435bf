"""
Activity definitions: metadata describing an Activity.

The base definition carries the name/description/type/moreInfo/extensions
shared by every activity. Interaction definitions (cmi.interaction) add a
correct responses pattern and, depending on the interaction type, one or
more lists of interaction components.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar

from ...errors import InvalidArgumentError, NullArgumentError
from ...extensions import Extensions
from ...languages import LanguageMap
from ...validation_rules import (
    AbsoluteIriRule,
    MinItemsRule,
    NonEmptyStringRule,
    NotNullRule,
    TypeCheckRule,
    ValidationRule,
    apply_rules,
)
from .response_pattern import ResponsePattern

CMI_INTERACTION = "http://adlnet.gov/expapi/activities/cmi.interaction"


class Interaction(Enum):
    """Interaction types defined by xAPI (from SCORM 2004 cmi.interactions)."""

    TRUE_FALSE = "true-false"
    CHOICE = "choice"
    FILL_IN = "fill-in"
    LONG_FILL_IN = "long-fill-in"
    MATCHING = "matching"
    PERFORMANCE = "performance"
    SEQUENCING = "sequencing"
    LIKERT = "likert"
    NUMERIC = "numeric"
    OTHER = "other"


@dataclass(frozen=True)
class InteractionComponent:
    """One option of an interaction: an id plus its description."""

    id: str
    description: LanguageMap

    VALIDATION_RULES: ClassVar[tuple[ValidationRule, ...]] = (
        NonEmptyStringRule("id"),
        NotNullRule("description"),
    )

    def __post_init__(self):
        apply_rules(self, self.VALIDATION_RULES)
        object.__setattr__(self, "description", LanguageMap.coerce(self.description, "description"))


@dataclass(frozen=True)
class ActivityDefinition:
    """Metadata for an Activity.

    Args:
        name: Human readable name
        description: Human readable description
        type: IRI of the activity type (optional)
        more_info: IRL to a document about the activity (optional)
        extensions: Non-empty extensions; leave as None for no extensions
    """

    name: LanguageMap
    description: LanguageMap
    type: str | None = field(default=None, kw_only=True)
    more_info: str | None = field(default=None, kw_only=True)
    extensions: Extensions | None = field(default=None, kw_only=True)

    VALIDATION_RULES: ClassVar[tuple[ValidationRule, ...]] = (
        NotNullRule("name"),
        NotNullRule("description"),
        AbsoluteIriRule("type", is_required=False),
        AbsoluteIriRule("more_info", is_required=False),
    )

    def __post_init__(self):
        apply_rules(self, ActivityDefinition.VALIDATION_RULES)
        object.__setattr__(self, "name", LanguageMap.coerce(self.name, "name"))
        object.__setattr__(self, "description", LanguageMap.coerce(self.description, "description"))
        object.__setattr__(self, "extensions", Extensions.coerce(self.extensions))


@dataclass(frozen=True)
class InteractionActivityDefinition(ActivityDefinition):
    """Base for cmi.interaction definitions. Use one of the concrete subclasses.

    ``type`` is fixed to the cmi.interaction IRI and ``interaction_type`` is
    fixed per subclass; neither can be passed by the caller.
    """

    correct_responses_pattern: ResponsePattern
    type: str = field(default=CMI_INTERACTION, init=False)

    INTERACTION_TYPE: ClassVar[Interaction]

    # (attribute name, JSON key) of the component lists this interaction carries
    COMPONENT_FIELDS: ClassVar[tuple[tuple[str, str], ...]] = ()

    INTERACTION_RULES: ClassVar[tuple[ValidationRule, ...]] = (TypeCheckRule("correct_responses_pattern", ResponsePattern),)

    def __post_init__(self):
        super().__post_init__()
        apply_rules(self, InteractionActivityDefinition.INTERACTION_RULES)
        for attribute, _ in self.COMPONENT_FIELDS:
            self._validate_components(attribute)

    def _validate_components(self, attribute: str) -> None:
        components = getattr(self, attribute)
        if components is None:
            raise NullArgumentError(attribute)
        if isinstance(components, (str, InteractionComponent)):
            raise InvalidArgumentError(attribute, "expected a sequence of InteractionComponent")
        components = tuple(components)
        MinItemsRule(attribute).check(components)
        for i, component in enumerate(components):
            if not isinstance(component, InteractionComponent):
                raise InvalidArgumentError(
                    attribute,
                    f"{attribute}[{i}] must be an InteractionComponent instance, got {type(component).__name__}",
                )
        object.__setattr__(self, attribute, components)

    @property
    def interaction_type(self) -> Interaction:
        return self.INTERACTION_TYPE

    def components(self) -> list[tuple[str, tuple[InteractionComponent, ...]]]:
        """The component lists of this interaction as (JSON key, components) pairs."""
        return [(key, getattr(self, attribute)) for attribute, key in self.COMPONENT_FIELDS]

"""pyxapi

Immutable, construction-validated value types for the Experience API
(xAPI) data model, and a serializer that renders them as xAPI JSON.
"""

__version__ = "1.0.0"

from .activities import Activity
from .activities.definitions import (
    ActivityDefinition,
    Interaction,
    InteractionComponent,
    LikertInteractionActivityDefinition,
    ResponsePattern,
    response_pattern_for,
    true_false_pattern,
)
from .actors import Actor, Agent, Group
from .character_string import CharacterString
from .config import SerializerConfig
from .errors import ArgumentValidationError, InvalidArgumentError, NullArgumentError, UnsupportedVariantError
from .extensions import Extensions
from .identifiers import Account, InverseFunctionalIdentifier, Mailbox, MailboxSha1Sum, OpenID
from .languages import LanguageMap
from .statements import Context, ContextActivities, Result, Score, Statement, StatementRef
from .verbs import Verb

__all__ = [
    "Account",
    "Activity",
    "ActivityDefinition",
    "Actor",
    "Agent",
    "ArgumentValidationError",
    "CharacterString",
    "Context",
    "ContextActivities",
    "Extensions",
    "Group",
    "Interaction",
    "InteractionComponent",
    "InvalidArgumentError",
    "InverseFunctionalIdentifier",
    "LanguageMap",
    "LikertInteractionActivityDefinition",
    "Mailbox",
    "MailboxSha1Sum",
    "NullArgumentError",
    "OpenID",
    "ResponsePattern",
    "Result",
    "Score",
    "SerializerConfig",
    "Statement",
    "StatementRef",
    "UnsupportedVariantError",
    "Verb",
    "response_pattern_for",
    "true_false_pattern",
]

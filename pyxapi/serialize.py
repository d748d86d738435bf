"""
Convert xAPI values to JSON strings.

There is one public function per entity kind. Each takes an already
validated value (and optionally a SerializerConfig) and returns a JSON
string. Optional fields that are None are left out of the output rather
than written as null. Key order follows the xAPI specification examples.
"""

from __future__ import annotations

from typing import Any

from .activities.activity import Activity
from .activities.definitions.base import ActivityDefinition, InteractionActivityDefinition, InteractionComponent
from .activities.definitions.response_pattern import ResponsePattern
from .actors import Agent, Group
from .config import SerializerConfig
from .errors import UnsupportedVariantError
from .extensions import Extensions
from .identifiers import Account, InverseFunctionalIdentifier, Mailbox, MailboxSha1Sum, OpenID
from .languages import LanguageMap
from .statements.context import Context, ContextActivities
from .statements.result import Result, Score
from .statements.statement import Statement
from .statements.statement_ref import StatementRef
from .utils import format_duration, format_timestamp
from .verbs import Verb


def _config(config: SerializerConfig | None) -> SerializerConfig:
    return config if config is not None else SerializerConfig()


# ---------------------------------------------------------------------------
# Payload builders: value -> JSON-ready dict/list/str
# ---------------------------------------------------------------------------


def _language_map_data(language_map: LanguageMap) -> dict[str, str]:
    return dict(language_map)


def _extensions_data(extensions: Extensions) -> dict[str, Any]:
    return dict(extensions)


def _verb_data(verb: Verb) -> dict[str, Any]:
    return {"id": verb.id, "display": _language_map_data(verb.display)}


def _ifi_entry(ifi: InverseFunctionalIdentifier) -> tuple[str, Any]:
    """Return the (key, value) pair an IFI contributes to an actor object."""
    match ifi:
        case Mailbox():
            return "mbox", ifi.iri
        case MailboxSha1Sum():
            return "mbox_sha1sum", ifi.sha1sum
        case OpenID():
            return "openid", ifi.uri
        case Account():
            return "account", {"homePage": ifi.home_page, "name": ifi.name}
        case _:
            raise UnsupportedVariantError(f"Not a valid IFI: {type(ifi).__name__}")


def _actor_data(actor: Agent | Group) -> dict[str, Any]:
    match actor:
        case Agent():
            output: dict[str, Any] = {"objectType": "Agent"}
            if actor.name is not None:
                output["name"] = actor.name
            key, value = _ifi_entry(actor.ifi)
            output[key] = value
            return output
        case Group():
            output = {"objectType": "Group"}
            if actor.name is not None:
                output["name"] = actor.name
            if actor.ifi is not None:
                key, value = _ifi_entry(actor.ifi)
                output[key] = value
            if actor.members:
                output["member"] = [_actor_data(member) for member in actor.members]
            return output
        case _:
            raise UnsupportedVariantError(f"Not a valid actor: {type(actor).__name__}")


def _interaction_component_data(component: InteractionComponent) -> dict[str, Any]:
    return {"id": component.id, "description": _language_map_data(component.description)}


def _activity_definition_data(definition: ActivityDefinition) -> dict[str, Any]:
    output: dict[str, Any] = {
        "name": _language_map_data(definition.name),
        "description": _language_map_data(definition.description),
    }
    if definition.type is not None:
        output["type"] = definition.type
    if definition.more_info is not None:
        output["moreInfo"] = definition.more_info

    if isinstance(definition, InteractionActivityDefinition):
        output["interactionType"] = definition.interaction_type.value
        output["correctResponsesPattern"] = definition.correct_responses_pattern.to_pattern_strings()
        for key, components in definition.components():
            output[key] = [_interaction_component_data(component) for component in components]

    if definition.extensions is not None:
        output["extensions"] = _extensions_data(definition.extensions)
    return output


def _activity_data(activity: Activity) -> dict[str, Any]:
    output: dict[str, Any] = {"objectType": "Activity", "id": activity.id}
    if activity.definition is not None:
        output["definition"] = _activity_definition_data(activity.definition)
    return output


def _short_activity_data(activity: Activity) -> dict[str, Any]:
    """An activity reduced to its id, as used inside context activities."""
    return {"id": activity.id}


def _statement_ref_data(ref: StatementRef) -> dict[str, Any]:
    return {"objectType": "StatementRef", "id": str(ref.id)}


def _object_data(obj: Any) -> dict[str, Any]:
    match obj:
        case Activity():
            return _activity_data(obj)
        case Agent() | Group():
            return _actor_data(obj)
        case StatementRef():
            return _statement_ref_data(obj)
        case _:
            raise UnsupportedVariantError(f"Statement objects of type {type(obj).__name__} are not implemented")


def _score_data(score: Score) -> dict[str, Any]:
    # raw/min/max are all-or-nothing
    if score.is_complete:
        return {"scaled": score.scaled, "raw": score.raw, "min": score.min, "max": score.max}
    return {"scaled": score.scaled}


def _result_data(result: Result) -> dict[str, Any]:
    output: dict[str, Any] = {}
    if result.score is not None:
        output["score"] = _score_data(result.score)
    if result.success is not None:
        output["success"] = result.success
    if result.completion is not None:
        output["completion"] = result.completion
    if result.response is not None:
        output["response"] = result.response
    if result.duration is not None:
        output["duration"] = format_duration(result.duration)
    if result.extensions is not None:
        output["extensions"] = _extensions_data(result.extensions)
    return output


def _context_activities_data(activities: ContextActivities) -> dict[str, Any]:
    output: dict[str, Any] = {}
    for key in ("parent", "grouping", "category", "other"):
        group = getattr(activities, key)
        if group is not None:
            output[key] = [_short_activity_data(activity) for activity in group]
    return output


def _context_data(context: Context) -> dict[str, Any]:
    output: dict[str, Any] = {}
    if context.registration is not None:
        output["registration"] = str(context.registration)
    if context.instructor is not None:
        output["instructor"] = _actor_data(context.instructor)
    if context.team is not None:
        output["team"] = _actor_data(context.team)
    if context.context_activities is not None:
        output["contextActivities"] = _context_activities_data(context.context_activities)
    if context.revision is not None:
        output["revision"] = context.revision
    if context.platform is not None:
        output["platform"] = context.platform
    if context.language is not None:
        output["language"] = context.language
    if context.statement is not None:
        output["statement"] = _statement_ref_data(context.statement)
    if context.extensions is not None:
        output["extensions"] = _extensions_data(context.extensions)
    return output


def _statement_data(statement: Statement, config: SerializerConfig) -> dict[str, Any]:
    output: dict[str, Any] = {
        "id": str(statement.id),
        "actor": _actor_data(statement.actor),
        "verb": _verb_data(statement.verb),
        "object": _object_data(statement.object),
    }
    if statement.result is not None:
        output["result"] = _result_data(statement.result)
    if statement.context is not None:
        output["context"] = _context_data(statement.context)
    if statement.timestamp is not None:
        output["timestamp"] = format_timestamp(statement.timestamp, config.timestamp_utc_designator)
    return output


# ---------------------------------------------------------------------------
# Public API: value -> JSON string
# ---------------------------------------------------------------------------


def language_map(value: LanguageMap, config: SerializerConfig | None = None) -> str:
    """Convert a language map to a JSON string."""
    return _config(config).dumps(_language_map_data(value))


def extensions(value: Extensions, config: SerializerConfig | None = None) -> str:
    """Convert extensions to a JSON string."""
    return _config(config).dumps(_extensions_data(value))


def verb(value: Verb, config: SerializerConfig | None = None) -> str:
    """Convert a verb to a JSON string."""
    return _config(config).dumps(_verb_data(value))


def ifi(value: InverseFunctionalIdentifier, config: SerializerConfig | None = None) -> str:
    """Convert an inverse functional identifier to a JSON string.

    Only the identifier's value is rendered: a string for mailbox, hash and
    openID, an object for an account.
    """
    _, payload = _ifi_entry(value)
    return _config(config).dumps(payload)


def actor(value: Agent | Group, config: SerializerConfig | None = None) -> str:
    """Convert an actor to a JSON string."""
    return _config(config).dumps(_actor_data(value))


def response_pattern(value: ResponsePattern, config: SerializerConfig | None = None) -> str:
    """Convert a response pattern to its correctResponsesPattern JSON array."""
    return _config(config).dumps(value.to_pattern_strings())


def interaction_component(value: InteractionComponent, config: SerializerConfig | None = None) -> str:
    return _config(config).dumps(_interaction_component_data(value))


def activity_definition(value: ActivityDefinition, config: SerializerConfig | None = None) -> str:
    """Convert an activity definition (including interaction fields) to a JSON string."""
    return _config(config).dumps(_activity_definition_data(value))


def activity(value: Activity, config: SerializerConfig | None = None) -> str:
    """Convert an activity to a JSON string."""
    return _config(config).dumps(_activity_data(value))


def statement_ref(value: StatementRef, config: SerializerConfig | None = None) -> str:
    return _config(config).dumps(_statement_ref_data(value))


def statement_object(value: Any, config: SerializerConfig | None = None) -> str:
    """Convert a statement object to a JSON string.

    Raises:
        UnsupportedVariantError: for objects outside Activity, Agent, Group
            and StatementRef
    """
    return _config(config).dumps(_object_data(value))


def score(value: Score, config: SerializerConfig | None = None) -> str:
    """Convert a score to a JSON string."""
    return _config(config).dumps(_score_data(value))


def result(value: Result, config: SerializerConfig | None = None) -> str:
    """Convert a result to a JSON string."""
    return _config(config).dumps(_result_data(value))


def context_activities(value: ContextActivities, config: SerializerConfig | None = None) -> str:
    """Convert context activities to a JSON string."""
    return _config(config).dumps(_context_activities_data(value))


def context(value: Context, config: SerializerConfig | None = None) -> str:
    """Convert a context to a JSON string."""
    return _config(config).dumps(_context_data(value))


def statement(value: Statement, config: SerializerConfig | None = None) -> str:
    """Convert a statement to a JSON string."""
    config = _config(config)
    return config.dumps(_statement_data(value, config))

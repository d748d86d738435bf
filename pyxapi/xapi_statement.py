import logging
import uuid
from datetime import datetime, timezone

import click

from . import serialize
from .activities import Activity
from .activities.definitions import ActivityDefinition
from .actors import Agent
from .config import SerializerConfig
from .errors import ArgumentValidationError
from .identifiers import Account, Mailbox, MailboxSha1Sum, OpenID
from .languages import LanguageMap
from .statements import Context, Result, Score, Statement
from .utils import is_absolute_iri
from .verbs import ADL_VERB_BASE, Verb

logger = logging.getLogger(__name__)


def _build_ifi(mbox, mbox_sha1sum, openid, account_homepage, account_name):
    given = [v for v in (mbox, mbox_sha1sum, openid, account_homepage or account_name) if v]
    if len(given) != 1:
        raise click.UsageError("Give exactly one of --mbox, --mbox-sha1sum, --openid or --account-homepage/--account-name")
    if mbox:
        return Mailbox(mbox)
    if mbox_sha1sum:
        return MailboxSha1Sum(mbox_sha1sum)
    if openid:
        return OpenID(openid)
    return Account(account_homepage, account_name)


def _build_verb(verb, verb_display, language):
    verb_id = verb if is_absolute_iri(verb) else f"{ADL_VERB_BASE}{verb}"
    display = verb_display or verb_id.rstrip("/").rsplit("/", 1)[-1]
    return Verb(verb_id, LanguageMap({language: display}, "display"))


def _build_activity(activity, activity_name, activity_description, language):
    if activity_name is None and activity_description is None:
        return Activity(activity)
    definition = ActivityDefinition(
        LanguageMap({language: activity_name or activity}, "name"),
        LanguageMap({language: activity_description or activity_name or activity}, "description"),
    )
    return Activity(activity, definition)


def _build_result(scaled, raw, minimum, maximum, success):
    if scaled is None and any(v is not None for v in (raw, minimum, maximum)):
        raise click.UsageError("--raw, --min and --max need --scaled")
    if scaled is None and success is None:
        return None
    score = Score(scaled, raw, minimum, maximum) if scaled is not None else None
    return Result(score=score, success=success)


def _build_context(registration):
    if registration is None:
        return None
    return Context(registration=registration)


def _parse_timestamp(timestamp, now):
    if now:
        return datetime.now(timezone.utc)
    if timestamp is None:
        return None
    try:
        return datetime.fromisoformat(timestamp)
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="--timestamp") from e


@click.command()
@click.option("--config", "-c", default=None, type=click.Path(exists=True, resolve_path=True))
@click.option("--statement-id", default=None, type=str, help="Statement UUID (generated when omitted)")
@click.option("--actor-name", default=None, type=str)
@click.option("--mbox", default=None, type=str)
@click.option("--mbox-sha1sum", default=None, type=str)
@click.option("--openid", default=None, type=str)
@click.option("--account-homepage", default=None, type=str)
@click.option("--account-name", default=None, type=str)
@click.option("--verb", "-v", "verb", required=True, type=str, help="Verb IRI or ADL verb name, e.g. 'completed'")
@click.option("--verb-display", default=None, type=str)
@click.option("--activity", "-a", required=True, type=str, help="Activity IRI")
@click.option("--activity-name", default=None, type=str)
@click.option("--activity-description", default=None, type=str)
@click.option("--scaled", default=None, type=float)
@click.option("--raw", default=None, type=float)
@click.option("--min", "minimum", default=None, type=float)
@click.option("--max", "maximum", default=None, type=float)
@click.option("--success/--failure", default=None)
@click.option("--registration", default=None, type=str)
@click.option("--timestamp", default=None, type=str, help="ISO 8601 timestamp with offset")
@click.option("--now", is_flag=True, default=False, help="Stamp the statement with the current UTC time")
@click.option("--verbose", is_flag=True, default=False)
@click.argument("output", default="-", type=click.File("w"))
def xapi_statement(
    config,
    statement_id,
    actor_name,
    mbox,
    mbox_sha1sum,
    openid,
    account_homepage,
    account_name,
    verb,
    verb_display,
    activity,
    activity_name,
    activity_description,
    scaled,
    raw,
    minimum,
    maximum,
    success,
    registration,
    timestamp,
    now,
    verbose,
    output,
):
    """Build one xAPI statement from the command line and write it as JSON."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG)

    if config is not None:
        config = SerializerConfig.from_file(config)
        logger.debug("Loaded serializer config %s", config.to_dict())
    else:
        config = SerializerConfig()

    language = config.default_language
    try:
        statement = Statement(
            statement_id or uuid.uuid4(),
            Agent(_build_ifi(mbox, mbox_sha1sum, openid, account_homepage, account_name), actor_name),
            _build_verb(verb, verb_display, language),
            _build_activity(activity, activity_name, activity_description, language),
            result=_build_result(scaled, raw, minimum, maximum, success),
            timestamp=_parse_timestamp(timestamp, now),
            context=_build_context(registration),
        )
    except ArgumentValidationError as e:
        raise click.UsageError(str(e)) from e

    logger.debug("Built statement %s", statement.id)
    output.write(serialize.statement(statement, config))
    output.write("\n")

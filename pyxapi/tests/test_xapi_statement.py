import json

from click.testing import CliRunner

from pyxapi.xapi_statement import xapi_statement

STATEMENT_ID = "fd41c918-b88b-4b20-a0a5-a4c32391aaa0"


def invoke(*args):
    return CliRunner().invoke(xapi_statement, list(args))


def test_minimal_statement():
    result = invoke(
        "--statement-id", STATEMENT_ID,
        "--mbox", "learner@example.com",
        "--verb", "completed",
        "--activity", "http://example.com/activities/1",
    )
    assert result.exit_code == 0, result.output
    statement = json.loads(result.output)
    assert list(statement) == ["id", "actor", "verb", "object"]
    assert statement["id"] == STATEMENT_ID
    assert statement["actor"] == {"objectType": "Agent", "mbox": "mailto:learner@example.com"}
    assert statement["verb"] == {
        "id": "http://adlnet.gov/expapi/verbs/completed",
        "display": {"en-US": "completed"},
    }
    assert statement["object"] == {"objectType": "Activity", "id": "http://example.com/activities/1"}


def test_full_statement():
    result = invoke(
        "--account-homepage", "http://example.com",
        "--account-name", "learner-1",
        "--actor-name", "Learner",
        "--verb", "http://example.com/verbs/scored",
        "--activity", "http://example.com/activities/quiz",
        "--activity-name", "Quiz",
        "--scaled", "0.5",
        "--raw", "5",
        "--min", "0",
        "--max", "10",
        "--success",
        "--registration", STATEMENT_ID,
        "--timestamp", "2018-06-01T17:30:45+00:00",
    )
    assert result.exit_code == 0, result.output
    statement = json.loads(result.output)
    assert statement["actor"]["name"] == "Learner"
    assert statement["actor"]["account"] == {"homePage": "http://example.com", "name": "learner-1"}
    assert statement["verb"]["display"] == {"en-US": "scored"}
    assert statement["object"]["definition"]["name"] == {"en-US": "Quiz"}
    assert statement["result"]["score"] == {"scaled": 0.5, "raw": 5, "min": 0, "max": 10}
    assert statement["result"]["success"] is True
    assert statement["context"] == {"registration": STATEMENT_ID}
    assert statement["timestamp"] == "2018-06-01T17:30:45.000Z"


def test_generated_id():
    result = invoke("--openid", "http://example.com/me", "-v", "attempted", "-a", "http://example.com/a")
    assert result.exit_code == 0, result.output
    assert len(json.loads(result.output)["id"]) == 36


def test_missing_identifier():
    result = invoke("--verb", "completed", "--activity", "http://example.com/a")
    assert result.exit_code == 2
    assert "exactly one" in result.output


def test_two_identifiers():
    result = invoke("--mbox", "a@example.com", "--openid", "http://example.com/me", "-v", "completed", "-a", "http://example.com/a")
    assert result.exit_code == 2


def test_scaled_out_of_range():
    result = invoke("--mbox", "a@example.com", "-v", "completed", "-a", "http://example.com/a", "--scaled", "2")
    assert result.exit_code == 2
    assert "scaled" in result.output


def test_raw_without_scaled():
    result = invoke("--mbox", "a@example.com", "-v", "completed", "-a", "http://example.com/a", "--raw", "2")
    assert result.exit_code == 2


def test_naive_timestamp_rejected():
    result = invoke(
        "--mbox", "a@example.com", "-v", "completed", "-a", "http://example.com/a", "--timestamp", "2018-06-01T17:30:45"
    )
    assert result.exit_code == 2


def test_bad_timestamp():
    result = invoke("--mbox", "a@example.com", "-v", "completed", "-a", "http://example.com/a", "--timestamp", "yesterday")
    assert result.exit_code == 2


def test_config_file(tmp_path):
    config_path = tmp_path / "config.json"
    config_path.write_text(json.dumps({"indent": 2, "default_language": "fr-FR"}))
    result = invoke(
        "--config", str(config_path),
        "--statement-id", STATEMENT_ID,
        "--mbox", "a@example.com",
        "-v", "completed",
        "--verb-display", "terminé",
        "-a", "http://example.com/a",
    )
    assert result.exit_code == 0, result.output
    assert result.output.startswith('{\n  "id"')
    assert json.loads(result.output)["verb"]["display"] == {"fr-FR": "terminé"}


def test_output_file(tmp_path):
    out = tmp_path / "statement.json"
    result = invoke("--mbox", "a@example.com", "-v", "completed", "-a", "http://example.com/a", str(out))
    assert result.exit_code == 0, result.output
    assert json.loads(out.read_text())["actor"]["mbox"] == "mailto:a@example.com"

import json

import pytest
from click.testing import CliRunner

from jsonguard.cli import cli
from jsonguard.cli.validate import validate


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    for var in ("JSONGUARD_CONFIG", "JSONGUARD_MAX_DEPTH", "JSONGUARD_BIGINT_MODE", "JSONGUARD_DEBUG"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def schema_file(tmp_path):
    schema = {
        "type": "object",
        "properties": {"name": {"type": "string"}, "age": {"type": "integer", "minimum": 0}},
        "required": ["name"],
        "additionalProperties": False,
    }
    path = tmp_path / "schema.json"
    path.write_text(json.dumps(schema))
    return path


def write_json(tmp_path, name, data):
    path = tmp_path / name
    path.write_text(json.dumps(data))
    return path


def test_valid_instance(runner, schema_file, tmp_path):
    instance = write_json(tmp_path, "ok.json", {"name": "Ada", "age": 36})

    result = runner.invoke(validate, [str(schema_file), str(instance)])

    assert result.exit_code == 0
    assert "valid" in result.output


def test_invalid_instance(runner, schema_file, tmp_path):
    instance = write_json(tmp_path, "bad.json", {"age": -1, "extra": True})

    result = runner.invoke(validate, [str(schema_file), str(instance)])

    assert result.exit_code == 1
    assert "Found 3 validation error(s)" in result.output
    assert "/age: Number must be at least 0." in result.output
    assert "Required properties missing: name" in result.output
    assert "extra" in result.output


def test_json_output(runner, schema_file, tmp_path):
    instance = write_json(tmp_path, "bad.json", {"name": 1})

    result = runner.invoke(validate, [str(schema_file), str(instance), "--json-output"])

    assert result.exit_code == 1
    payload = json.loads(result.output)
    assert payload["status"] == "ok"
    assert payload["result"]["valid"] is False
    assert payload["result"]["errors"] == [
        {
            "pointer": "/name",
            "kind": "type_mismatch",
            "message": "The data must be a(n) string.",
            "context": {"type": "string"},
        }
    ]


def test_yaml_documents(runner, tmp_path):
    schema = tmp_path / "schema.yaml"
    schema.write_text("type: array\nitems:\n  type: integer\n")
    instance = tmp_path / "data.yml"
    instance.write_text("- 1\n- 2\n")

    result = runner.invoke(validate, [str(schema), str(instance)])

    assert result.exit_code == 0


def test_max_depth_option(runner, tmp_path):
    schema = write_json(tmp_path, "schema.json", {"properties": {"child": {"$ref": "#"}}})
    data = {}
    for _ in range(5):
        data = {"child": data}
    instance = write_json(tmp_path, "data.json", data)

    result = runner.invoke(validate, [str(schema), str(instance), "--max-depth", "2"])
    assert result.exit_code == 1
    assert "Maximum validation depth of 2 exceeded" in result.output

    result = runner.invoke(validate, [str(schema), str(instance)])
    assert result.exit_code == 0


def test_bigint_mode_option(runner, tmp_path):
    schema = write_json(tmp_path, "schema.json", {"type": "string"})
    instance = write_json(tmp_path, "data.json", "98249283749234923498293171823948729348710298")

    assert runner.invoke(validate, [str(schema), str(instance)]).exit_code == 1
    result = runner.invoke(validate, [str(schema), str(instance), "--bigint-mode", "string_valid"])
    assert result.exit_code == 0


def test_config_file_option(runner, tmp_path):
    schema = write_json(tmp_path, "schema.json", {"type": "string"})
    instance = write_json(tmp_path, "data.json", "98249283749234923498293171823948729348710298")
    config = tmp_path / "jsonguard.yaml"
    config.write_text("bigint_mode: string_valid\n")

    result = runner.invoke(validate, [str(schema), str(instance), "--config", str(config)])

    assert result.exit_code == 0


def test_invalid_schema_file(runner, tmp_path):
    schema = tmp_path / "schema.json"
    schema.write_text("not json")
    instance = write_json(tmp_path, "data.json", {})

    result = runner.invoke(validate, [str(schema), str(instance)])

    assert result.exit_code != 0
    assert "Failed to parse JSON" in result.output


def test_structural_failure(runner, tmp_path):
    schema = write_json(tmp_path, "schema.json", "just a string")
    instance = write_json(tmp_path, "data.json", {})

    result = runner.invoke(validate, [str(schema), str(instance)])

    assert result.exit_code != 0
    assert "The schema should be an object" in result.output


def test_group_help(runner):
    result = runner.invoke(cli, [])

    assert result.exit_code == 0
    assert "validate" in result.output


def test_yaml_instance_with_integer_key(runner, tmp_path):
    schema = write_json(tmp_path, "schema.json", {"additionalProperties": False})
    instance = tmp_path / "data.yaml"
    instance.write_text("1: a\n")

    result = runner.invoke(validate, [str(schema), str(instance)])

    assert result.exit_code != 0
    assert "mapping keys must be strings" in result.output


def test_yaml_instance_with_date(runner, tmp_path):
    schema = write_json(tmp_path, "schema.json", {"type": "string", "format": "date"})
    instance = tmp_path / "data.yaml"
    instance.write_text("2020-01-01\n")

    result = runner.invoke(validate, [str(schema), str(instance)])

    assert result.exit_code == 0
    assert "valid" in result.output


def test_json_output_for_structural_failure(runner, tmp_path):
    schema = write_json(tmp_path, "schema.json", {"properties": {"child": {"$ref": "#"}}})
    instance = write_json(tmp_path, "data.json", {"child": {"child": {}}})

    result = runner.invoke(
        validate, [str(schema), str(instance), "--max-depth", "1", "--json-output"]
    )

    assert result.exit_code != 0
    assert '"status": "error"' in result.output
    assert '"type": "MaximumDepthExceededError"' in result.output
    assert '"pointer": "/child/child"' in result.output
    assert "traceback" not in result.output

"""Tests for validation options, the options loader and document loaders."""

import json

import pytest

from jsonguard import BigintMode, InvalidOptionError, Reference, ValidationOptions, passes
from jsonguard.config import load_options
from jsonguard.loaders import load_document, load_document_from_file, load_schema_from_file


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Isolate tests from the caller's environment and working directory."""
    for var in ("JSONGUARD_CONFIG", "JSONGUARD_MAX_DEPTH", "JSONGUARD_BIGINT_MODE"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)


class TestValidationOptions:
    """Test the ValidationOptions model."""

    def test_defaults(self):
        options = ValidationOptions()

        assert options.max_depth == 10
        assert options.bigint_mode is BigintMode.STRING_INVALID

    def test_frozen(self):
        with pytest.raises(Exception):
            ValidationOptions().max_depth = 5

    def test_coerce(self):
        options = ValidationOptions(max_depth=3)

        assert ValidationOptions.coerce(options) is options
        assert ValidationOptions.coerce(None) == ValidationOptions()
        assert ValidationOptions.coerce({"bigint_mode": "string_valid"}).bigint_mode is BigintMode.STRING_VALID
        assert ValidationOptions.coerce(options, max_depth=7).max_depth == 7
        assert ValidationOptions.coerce(options, max_depth=None) is options

    @pytest.mark.parametrize(
        "options",
        [{"max_depth": -1}, {"max_depth": "deep"}, {"bigint_mode": 3}, {"other": 1}, "max_depth=3"],
    )
    def test_coerce_rejects_invalid(self, options):
        with pytest.raises(InvalidOptionError):
            ValidationOptions.coerce(options)

    def test_invalid_option_is_a_value_error(self):
        with pytest.raises(ValueError):
            ValidationOptions.coerce({"max_depth": -5})


class TestLoadOptions:
    """Test loading options from files and the environment."""

    def test_defaults_without_config(self):
        assert load_options() == ValidationOptions()

    def test_explicit_config_file(self, tmp_path):
        config = tmp_path / "custom.yaml"
        config.write_text("max_depth: 25\nbigint_mode: string_valid\n")

        options = load_options(config)

        assert options.max_depth == 25
        assert options.bigint_mode is BigintMode.STRING_VALID

    def test_default_config_in_working_directory(self, tmp_path):
        (tmp_path / "jsonguard.yaml").write_text("max_depth: 4\n")

        assert load_options().max_depth == 4

    def test_config_from_env_var(self, tmp_path, monkeypatch):
        config = tmp_path / "elsewhere.yml"
        config.write_text("max_depth: 6\n")
        monkeypatch.setenv("JSONGUARD_CONFIG", str(config))

        assert load_options().max_depth == 6

    def test_env_overrides_file(self, tmp_path, monkeypatch):
        config = tmp_path / "custom.yaml"
        config.write_text("max_depth: 25\n")
        monkeypatch.setenv("JSONGUARD_MAX_DEPTH", "30")
        monkeypatch.setenv("JSONGUARD_BIGINT_MODE", "string_valid")

        options = load_options(config)

        assert options.max_depth == 30
        assert options.bigint_mode is BigintMode.STRING_VALID

    def test_empty_config_file(self, tmp_path):
        config = tmp_path / "empty.yaml"
        config.write_text("")

        assert load_options(config) == ValidationOptions()

    def test_missing_config_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_options(tmp_path / "missing.yaml")

    def test_invalid_config_values(self, tmp_path):
        config = tmp_path / "bad.yaml"
        config.write_text("bigint_mode: sometimes\n")

        with pytest.raises(InvalidOptionError):
            load_options(config)

    def test_config_must_be_mapping(self, tmp_path):
        config = tmp_path / "list.yaml"
        config.write_text("- 1\n- 2\n")

        with pytest.raises(InvalidOptionError):
            load_options(config)


class TestLoaders:
    """Test document loaders."""

    def test_load_json_and_yaml(self):
        assert load_document('{"a": [1, 2]}', format="json") == {"a": [1, 2]}
        assert load_document("a:\n  - 1\n  - 2\n") == {"a": [1, 2]}

    def test_json_keeps_big_integers(self):
        assert load_document("[123456789012345678901234567890]", format="json") == [
            123456789012345678901234567890
        ]

    def test_parse_errors(self):
        with pytest.raises(ValueError, match="Failed to parse JSON"):
            load_document("{", format="json")
        with pytest.raises(ValueError, match="Failed to parse YAML"):
            load_document("a: [", format="yaml")
        with pytest.raises(ValueError, match="Unsupported format"):
            load_document("", format="toml")

    def test_yaml_dates_stay_strings(self):
        """Test that unquoted YAML dates decode as JSON strings."""
        data = load_document("when: 2020-01-01\nat: 2020-01-01T10:00:00Z\n")

        assert data == {"when": "2020-01-01", "at": "2020-01-01T10:00:00Z"}
        assert passes(data["when"], {"type": "string", "format": "date"})

    @pytest.mark.parametrize("content", ["1: a\n", "a:\n  true: b\n", "~: c\n"])
    def test_yaml_non_string_keys_rejected(self, content):
        """Test that YAML mapping keys must be strings."""
        with pytest.raises(ValueError, match="mapping keys must be strings"):
            load_document(content)

    def test_yaml_keeps_other_scalars(self):
        assert load_document("a: 1\nb: 1.5\nc: true\nd: null\ne: '1'\n") == {
            "a": 1,
            "b": 1.5,
            "c": True,
            "d": None,
            "e": "1",
        }

    def test_load_from_file(self, tmp_path):
        path = tmp_path / "data.json"
        path.write_text(json.dumps({"x": 1}))

        assert load_document_from_file(path) == {"x": 1}

    def test_unsupported_extension(self, tmp_path):
        path = tmp_path / "data.txt"
        path.write_text("{}")

        with pytest.raises(ValueError, match="Unsupported file extension"):
            load_document_from_file(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_document_from_file(tmp_path / "nope.json")

    def test_load_schema_resolves_references(self, tmp_path):
        path = tmp_path / "schema.yaml"
        path.write_text(
            "definitions:\n"
            "  name:\n"
            "    type: string\n"
            "properties:\n"
            "  first:\n"
            "    $ref: '#/definitions/name'\n"
        )

        schema = load_schema_from_file(path)

        assert isinstance(schema["properties"]["first"], Reference)
        assert schema["properties"]["first"].resolve() == {"type": "string"}

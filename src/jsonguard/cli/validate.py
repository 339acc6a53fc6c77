from pathlib import Path
from typing import List, Optional

import click

from jsonguard.cli.utils import configure_logging, output_error, output_result
from jsonguard.config import load_options
from jsonguard.core import Validator
from jsonguard.errors import ValidationError
from jsonguard.loaders import load_document_from_file, load_schema_from_file
from jsonguard.models import BigintMode, ValidationOptions


def format_validation_errors(errors: List[ValidationError]) -> str:
    """Format validation errors for human-readable output"""
    if not errors:
        return "valid"

    output = [f"Found {len(errors)} validation error(s):"]
    for error in errors:
        output.append(f"  ✗ {error}")
    return "\n".join(output)


@click.command(name="validate")
@click.argument("schema", type=click.Path(dir_okay=False, path_type=Path))
@click.argument("instance", type=click.Path(dir_okay=False, path_type=Path))
@click.option("--max-depth", type=int, help="Maximum recursion depth")
@click.option(
    "--bigint-mode",
    type=click.Choice([mode.value for mode in BigintMode]),
    help="How the string type treats big integers decoded as strings",
)
@click.option("--config", "config_path", type=click.Path(dir_okay=False, path_type=Path),
              help="Path to a jsonguard.yaml config file")
@click.option("--json-output", is_flag=True, help="Output in JSON format")
@click.option("--debug", is_flag=True, help="Show detailed debug information")
def validate(
    schema: Path,
    instance: Path,
    max_depth: Optional[int],
    bigint_mode: Optional[str],
    config_path: Optional[Path],
    json_output: bool,
    debug: bool,
) -> None:
    """Validate an INSTANCE document against a SCHEMA document.

    Both files may be JSON or YAML. The exit code is 0 when the instance is
    valid and 1 when it is not.

    Examples:
        jsonguard validate schema.json data.json
        jsonguard validate schema.yaml data.yaml --json-output
        jsonguard validate schema.json data.json --max-depth 20
    """
    configure_logging(debug)

    try:
        options = ValidationOptions.coerce(
            load_options(config_path), max_depth=max_depth, bigint_mode=bigint_mode
        )
        schema_node = load_schema_from_file(schema)
        data = load_document_from_file(instance)
        errors = Validator(data, schema_node, options).evaluate()
    except Exception as e:
        output_error(e, json_output, debug)
        return

    if json_output:
        output_result(
            {"valid": not errors, "errors": [error.to_dict() for error in errors]},
            json_output,
        )
    else:
        output_result(format_validation_errors(errors))

    if errors:
        raise click.exceptions.Exit(1)

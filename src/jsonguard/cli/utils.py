import json
import logging
import os
import traceback
from typing import Any, Dict

import click

from jsonguard.exceptions import (
    InvalidSchemaError,
    MaximumDepthExceededError,
    ReferenceResolutionError,
)


def get_env_flag(env_var: str, default: bool = False) -> bool:
    """Read an on/off switch such as ``JSONGUARD_DEBUG`` from the environment.

    "1", "true" and "yes" (any case) switch it on; an unset or empty variable
    falls back to ``default``.
    """
    value = os.environ.get(env_var, "").lower()
    return value in ("1", "true", "yes") if value else default


def configure_logging(debug: bool = False) -> None:
    """Configure logging for all modules.

    Args:
        debug: Whether to enable debug logging
    """
    if not debug:
        debug = get_env_flag("JSONGUARD_DEBUG")

    log_level = logging.DEBUG if debug else logging.WARNING

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # Remove any existing handlers to avoid duplicate messages
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setLevel(log_level)
    formatter = logging.Formatter("%(levelname)s:%(name)s:%(message)s")
    handler.setFormatter(formatter)
    root_logger.addHandler(handler)

    logging.getLogger("jsonguard").setLevel(log_level)


def output_result(result: Any, json_output: bool = False) -> None:
    """Print a validation report, wrapped in a status envelope for JSON.

    Args:
        result: The result to output
        json_output: Whether to output in JSON format
    """
    if json_output:
        click.echo(json.dumps({"status": "ok", "result": result}, indent=2, default=str))
    else:
        click.echo(result)


def format_error(error: Exception, debug: bool = False) -> Dict[str, Any]:
    """Describe a loading or structural failure for output.

    Structural failures carry the pointer of the schema location or value
    they were raised at; reference failures carry the offending ``$ref``.

    Args:
        error: The exception that stopped validation
        debug: Whether to add the traceback

    Returns:
        Dict with the message, the failure type and any location details
    """
    error_info: Dict[str, Any] = {"error": str(error), "type": type(error).__name__}

    if isinstance(error, (InvalidSchemaError, MaximumDepthExceededError)) and error.pointer:
        error_info["pointer"] = error.pointer
    if isinstance(error, ReferenceResolutionError):
        error_info["ref"] = error.ref
    if debug:
        error_info["traceback"] = traceback.format_exc()

    return error_info


def output_error(error: Exception, json_output: bool = False, debug: bool = False) -> None:
    """Report a failure that stopped validation and abort the command.

    Args:
        error: The exception that stopped validation
        json_output: Whether to output in JSON format
        debug: Whether to include the traceback
    """
    error_info = format_error(error, debug)

    if json_output:
        click.echo(json.dumps({"status": "error", **error_info}, indent=2))
    else:
        click.echo(f"Error: {error_info['error']}", err=True)
        if "pointer" in error_info:
            click.echo(f"  at: {error_info['pointer']}", err=True)
        if "traceback" in error_info:
            click.echo(error_info["traceback"], err=True)

    raise click.Abort()

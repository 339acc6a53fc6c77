"""Document loading utilities for jsonguard."""

import json
from pathlib import Path
from typing import Any, Union

import yaml

from .references import resolve_references

TIMESTAMP_TAG = "tag:yaml.org,2002:timestamp"


class JsonValueLoader(yaml.SafeLoader):
    """SafeLoader restricted to the JSON value model.

    Unquoted dates stay strings, and mapping keys must be strings.
    """

    def construct_mapping(self, node, deep=False):
        mapping = super().construct_mapping(node, deep=deep)
        for key in mapping:
            if not isinstance(key, str):
                raise yaml.constructor.ConstructorError(
                    None,
                    None,
                    f"mapping keys must be strings, found {key!r}",
                    node.start_mark,
                )
        return mapping


JsonValueLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag != TIMESTAMP_TAG]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


def load_document(content: str, format: str = "yaml") -> Any:
    """Load a schema or instance document from string content.

    Args:
        content: Document content as string
        format: Format of the content ('yaml' or 'json')

    Returns:
        The decoded document

    Raises:
        ValueError: If format is not supported or parsing fails
    """
    if format == "yaml":
        try:
            return yaml.load(content, Loader=JsonValueLoader)
        except yaml.YAMLError as e:
            raise ValueError(f"Failed to parse YAML: {e}")
    elif format == "json":
        try:
            return json.loads(content)
        except json.JSONDecodeError as e:
            raise ValueError(f"Failed to parse JSON: {e}")
    else:
        raise ValueError(f"Unsupported format: {format}. Use 'yaml' or 'json'")


def load_document_from_file(path: Union[str, Path]) -> Any:
    """Load a document from a YAML or JSON file.

    Args:
        path: Path to the file

    Returns:
        The decoded document

    Raises:
        FileNotFoundError: If file doesn't exist
        ValueError: If file format is not supported or parsing fails
    """
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")

    # Determine format from extension
    if path.suffix.lower() in [".yaml", ".yml"]:
        format = "yaml"
    elif path.suffix.lower() == ".json":
        format = "json"
    else:
        raise ValueError(f"Unsupported file extension: {path.suffix}. Use .yaml, .yml, or .json")

    content = path.read_text(encoding="utf-8")
    return load_document(content, format=format)


def load_schema_from_file(path: Union[str, Path]) -> Any:
    """Load a schema file and turn its ``$ref`` nodes into references.

    Args:
        path: Path to the schema file

    Returns:
        Root schema node, ready to hand to a Validator

    Raises:
        FileNotFoundError: If file doesn't exist
        ValueError: If file format is not supported or parsing fails
    """
    return resolve_references(load_document_from_file(path))

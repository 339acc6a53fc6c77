"""Local ``$ref`` handling.

``resolve_references`` walks a schema document and replaces every
``{"$ref": ...}`` found in a schema position with a lazy ``Reference``. The
validator calls ``Reference.resolve()`` once when it is handed such a node.

Only fragment references into the same document are supported
(``#`` and ``#/definitions/name``). Fetching remote documents is left to the
caller.

Example:
    >>> schema = resolve_references({
    ...     "definitions": {"name": {"type": "string"}},
    ...     "properties": {"first": {"$ref": "#/definitions/name"}},
    ... })
    >>> schema["properties"]["first"].resolve()
    {'type': 'string'}
"""

from __future__ import annotations

import logging
from typing import Any
from urllib.parse import unquote

from .exceptions import ReferenceResolutionError
from .pointer import Pointer

logger = logging.getLogger(__name__)

# Keywords whose value is a single schema
SCHEMA_KEYWORDS = frozenset({"additionalItems", "additionalProperties", "not"})
# Keywords whose value is a list of schemas
SCHEMA_LIST_KEYWORDS = frozenset({"allOf", "anyOf", "oneOf"})
# Keywords whose value maps names to schemas
SCHEMA_MAP_KEYWORDS = frozenset({"definitions", "properties", "patternProperties"})


class Reference:
    """A deferred schema node pointing somewhere in its document."""

    def __init__(self, ref: str, resolver: SchemaResolver):
        self.ref = ref
        self._resolver = resolver
        self._target: Any = None
        self._resolved = False

    def resolve(self) -> Any:
        """Return the concrete schema node this reference points to.

        Chains of references are followed. The result is cached, so repeated
        calls return the same node.

        Raises:
            ReferenceResolutionError: If the reference is not a local
                fragment, does not point anywhere, or only leads to
                other references in a cycle
        """
        if self._resolved:
            return self._target

        seen: list[str] = []
        node: Any = self
        while isinstance(node, Reference):
            if node.ref in seen:
                raise ReferenceResolutionError(
                    self.ref, f"reference cycle {' -> '.join(seen + [node.ref])}"
                )
            seen.append(node.ref)
            node = self._resolver.lookup(node.ref)

        self._target = node
        self._resolved = True
        return node

    def __repr__(self) -> str:
        return f"Reference({self.ref!r})"


class SchemaResolver:
    """Resolves local references within one schema document."""

    def __init__(self, document: Any):
        self.document = document
        self._nodes: dict[str, Any] = {}
        self.root = self._transform(document)
        self._nodes[""] = self.root

    def lookup(self, ref: str) -> Any:
        """Return the node at ``ref`` without following further references.

        The pointer is walked through the original document, so ``$ref``
        nodes along the way are plain objects, as JSON Pointer requires.
        """
        if not ref.startswith("#"):
            raise ReferenceResolutionError(ref, "only local '#' references are supported")

        fragment = unquote(ref[1:])
        if fragment in self._nodes:
            return self._nodes[fragment]

        try:
            pointer = Pointer.parse(fragment)
        except ValueError as e:
            raise ReferenceResolutionError(ref, str(e)) from e

        node = self.document
        for segment in pointer.segments:
            if isinstance(node, dict) and segment in node:
                node = node[segment]
            elif isinstance(node, list) and str(segment).isdigit() and int(segment) < len(node):
                node = node[int(segment)]
            else:
                raise ReferenceResolutionError(ref, f"no node at segment '{segment}'")

        logger.debug(f"Looked up reference {ref}")
        self._nodes[fragment] = self._transform(node)
        return self._nodes[fragment]

    def _transform(self, schema: Any) -> Any:
        if not isinstance(schema, dict):
            return schema

        ref = schema.get("$ref")
        if isinstance(ref, str):
            return Reference(ref, self)

        result: dict[str, Any] = {}
        for keyword, parameter in schema.items():
            if keyword in SCHEMA_KEYWORDS:
                result[keyword] = self._transform(parameter)
            elif keyword in SCHEMA_LIST_KEYWORDS and isinstance(parameter, list):
                result[keyword] = [self._transform(s) for s in parameter]
            elif keyword in SCHEMA_MAP_KEYWORDS and isinstance(parameter, dict):
                result[keyword] = {k: self._transform(s) for k, s in parameter.items()}
            elif keyword == "items":
                if isinstance(parameter, list):
                    result[keyword] = [self._transform(s) for s in parameter]
                else:
                    result[keyword] = self._transform(parameter)
            elif keyword == "dependencies" and isinstance(parameter, dict):
                # list-valued dependencies are property names, not schemas
                result[keyword] = {
                    k: self._transform(s) if isinstance(s, dict) else s
                    for k, s in parameter.items()
                }
            else:
                result[keyword] = parameter
        return result


def resolve_references(document: Any) -> Any:
    """Return a copy of ``document`` with every ``$ref`` made a ``Reference``.

    Args:
        document: A decoded schema document

    Returns:
        The transformed root schema node
    """
    return SchemaResolver(document).root

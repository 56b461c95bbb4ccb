from __future__ import annotations

from dataclasses import dataclass
from typing import TypeVar, cast
from urllib.parse import unquote, urldefrag

from .errors import ResolutionError
from .openapi import OpenAPIDocument

NodeT = TypeVar("NodeT")


@dataclass(frozen=True)
class SchemaResolver:
    """Resolves local ``$ref`` pointers against the document root.

    Only one level is followed per call. A reference whose target is itself a
    reference is returned as-is; callers that need the final node call
    ``resolve`` again.

    Example:
        >>> resolver = SchemaResolver({"components": {"schemas": {"Pet": {"type": "object"}}}})
        >>> resolver.resolve({"$ref": "#/components/schemas/Pet"})
        {'type': 'object'}
    """

    document: OpenAPIDocument

    def resolve(self, node: NodeT) -> NodeT:
        """Return the node ``node`` points at, or ``node`` itself when it has no ``$ref``.

        Raises:
            ResolutionError: If the reference does not resolve within the document
        """
        if not isinstance(node, dict):
            return node
        ref = node.get("$ref")
        if ref is None:
            return node
        if not isinstance(ref, str):
            raise ResolutionError(repr(ref), "$ref must be a string")
        return cast(NodeT, resolve_pointer(self.document, ref))


def resolve_pointer(document: OpenAPIDocument, ref: str) -> object:
    """Resolve a local JSON pointer reference (``#/a/b``) within a document.

    Raises:
        ResolutionError: If the reference is external or the pointer is dangling
    """
    location, fragment = urldefrag(ref)
    if location:
        raise ResolutionError(ref, "external references are not supported")
    if fragment == "":
        return document
    if not fragment.startswith("/"):
        raise ResolutionError(ref, "fragment must be a JSON pointer")
    current: object = document
    for part in fragment[1:].split("/"):
        key = unquote(part).replace("~1", "/").replace("~0", "~")
        if isinstance(current, dict) and key in current:
            current = current[key]
        elif isinstance(current, list) and key.isdigit() and int(key) < len(current):
            current = current[int(key)]
        else:
            raise ResolutionError(ref)
    return current

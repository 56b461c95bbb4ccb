from __future__ import annotations

import re
from http import HTTPStatus

from .openapi import OperationObject

_IDENTIFIER_RE = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")
_WORD_RE = re.compile(r"[A-Za-z0-9]+")
# characters that end a JS string literal unless escaped
_LINE_TERMINATORS = {"\n": "\\n", "\r": "\\r", "\u2028": "\\u2028", "\u2029": "\\u2029"}


def capitalize(text: str) -> str:
    """Uppercase the first character and leave the rest untouched.

    Example:
        >>> capitalize("getMovies")
        'GetMovies'
    """
    return text[:1].upper() + text[1:]


def class_case(text: str) -> str:
    """Convert a phrase to PascalCase, lowercasing every word first.

    Example:
        >>> class_case("Non-Authoritative Information")
        'NonAuthoritativeInformation'
        >>> class_case("OK")
        'Ok'
    """
    return "".join(capitalize(word.lower()) for word in _WORD_RE.findall(text))


def status_phrase(status: str) -> str:
    """Return the reason phrase for a status code, e.g. ``"200"`` -> ``"OK"``.

    Codes without a registered phrase (``"2XX"``, ``"299"``) fall back to
    ``"Status <code>"`` so the generated name stays unique and readable.
    """
    if status.isdigit():
        try:
            return HTTPStatus(int(status)).phrase
        except ValueError:
            pass
    return f"Status {status}"


def is_identifier(name: str) -> bool:
    """Check whether ``name`` can be written as a bare JS property name."""
    return bool(_IDENTIFIER_RE.match(name))


def js_string(value: str) -> str:
    """Render ``value`` as a single-quoted JS string literal."""
    escaped = value.replace("\\", "\\\\").replace("'", "\\'")
    for char, escape in _LINE_TERMINATORS.items():
        escaped = escaped.replace(char, escape)
    return f"'{escaped}'"


def property_key(name: str) -> str:
    return name if is_identifier(name) else js_string(name)


def generate_operation_id(path: str, method: str, operation: OperationObject) -> str:
    """Default operation id policy.

    The document's own ``operationId`` wins. Otherwise the id is the lowercase
    method followed by every path segment in PascalCase, with ``{param}``
    placeholders contributing the capitalized parameter name.

    Example:
        >>> generate_operation_id("/movies/{id}/quotes", "get", {})
        'getMoviesIdQuotes'
    """
    operation_id = operation.get("operationId")
    if isinstance(operation_id, str) and operation_id:
        return operation_id
    words = _WORD_RE.findall(path)
    return method.lower() + "".join(capitalize(word) for word in words)

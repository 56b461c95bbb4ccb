"""Intermediate representation of the operations in an OpenAPI document.

The extractor flattens ``paths`` into a list of ``OperationIR`` records in
document order. Both generators consume that list; neither walks ``paths``
on its own.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, cast

from .errors import NoSuccessResponseError
from .naming import generate_operation_id
from .openapi import (
    OpenAPIDocument,
    OperationObject,
    ParameterObject,
    PathItemObject,
    RequestBodyObject,
    ResponseObject,
    SchemaObject,
)
from .resolver import SchemaResolver

HTTP_METHODS = frozenset({"get", "put", "post", "delete", "options", "head", "patch", "trace"})

OperationIdFunction = Callable[[str, str, OperationObject], str]


@dataclass(frozen=True)
class ParameterIR:
    """A request parameter.

    Attributes:
        name: The parameter name
        location: Where the parameter is sent ("path", "query", "header", "cookie")
        required: The document's ``required`` flag, ``None`` when omitted
        schema: The parameter's schema, if specified
    """

    name: str
    location: str
    required: bool | None
    schema: SchemaObject | None


@dataclass(frozen=True)
class OperationIR:
    """One (path, method) pair of the document.

    Attributes:
        path: The URL path template (e.g., "/users/{id}")
        method: The HTTP method, lowercase
        operation_id: Identifier produced by the operation id function
        parameters: Path-level and operation-level parameters, merged
        request_body: The raw request body object, if any
        responses: Status code to response object, in document order
    """

    path: str
    method: str
    operation_id: str
    parameters: list[ParameterIR]
    request_body: RequestBodyObject | None
    responses: dict[str, ResponseObject]

    @property
    def success_statuses(self) -> list[str]:
        return [status for status in self.responses if status.startswith("2")]


def extract_operations(
    document: OpenAPIDocument,
    operation_id: OperationIdFunction = generate_operation_id,
    resolver: SchemaResolver | None = None,
) -> list[OperationIR]:
    """Flatten ``document["paths"]`` into operations, keeping document order.

    Args:
        document: The OpenAPI document
        operation_id: ``(path, method, operation) -> id`` policy
        resolver: Resolver used for ``$ref`` parameters; built from ``document`` when omitted

    Returns:
        One OperationIR per (path, method) pair
    """
    resolver = resolver or SchemaResolver(document)
    operations: list[OperationIR] = []
    for path, item in cast(dict[str, PathItemObject], document.get("paths") or {}).items():
        operations.extend(_build_path_operations(path, item, operation_id, resolver))
    return operations


def _build_path_operations(
    path: str,
    item: PathItemObject,
    operation_id: OperationIdFunction,
    resolver: SchemaResolver,
) -> Iterable[OperationIR]:
    common_params = cast(list[ParameterObject], item.get("parameters") or [])
    for method, value in item.items():
        if method not in HTTP_METHODS:
            continue
        operation = cast(OperationObject, value)
        parameters = _merge_parameters(
            common_params,
            cast(list[ParameterObject], operation.get("parameters") or []),
            resolver,
        )
        yield OperationIR(
            path=path,
            method=method,
            operation_id=operation_id(path, method, operation),
            parameters=parameters,
            request_body=operation.get("requestBody"),
            responses=_responses(operation),
        )


def _responses(operation: OperationObject) -> dict[str, ResponseObject]:
    # YAML loads unquoted status codes as ints
    return {str(status): response for status, response in (operation.get("responses") or {}).items()}


def _merge_parameters(
    common: list[ParameterObject],
    specific: list[ParameterObject],
    resolver: SchemaResolver,
) -> list[ParameterIR]:
    """Merge path-level and operation-level parameters.

    Operation-level parameters override path-level parameters with the
    same name and location.
    """
    merged: dict[tuple[str, str], ParameterObject] = {}
    for param in common + specific:
        param = resolver.resolve(param)
        name = param.get("name")
        location = param.get("in")
        if not name or not location:
            continue
        merged[(name, location)] = param
    return [_build_parameter(param) for param in merged.values()]


def _build_parameter(param: ParameterObject) -> ParameterIR:
    required = param.get("required")
    return ParameterIR(
        name=param.get("name", ""),
        location=param.get("in", ""),
        required=required if isinstance(required, bool) else None,
        schema=param.get("schema"),
    )


def require_success_responses(operations: list[OperationIR]) -> None:
    """Check that every operation describes at least one 2xx response.

    Raises:
        NoSuccessResponseError: For the first operation without one
    """
    for operation in operations:
        if not operation.success_statuses:
            raise NoSuccessResponseError(operation.operation_id)

from __future__ import annotations

from dataclasses import dataclass
from typing import cast

from ..ir import OperationIR, require_success_responses
from ..naming import capitalize, class_case, status_phrase
from ..openapi import RequestBodyObject, ResponseObject
from ..resolver import SchemaResolver
from .emitter import INDENT, ContentShape, TypeEmitter

NO_CONTENT_STATUS = "204"
NO_VALUE_TYPE = "undefined"


@dataclass
class TypesOutput:
    code: str


def generate_types(
    operations: list[OperationIR],
    name: str,
    resolver: SchemaResolver,
) -> TypesOutput:
    """Generate the ``.d.ts`` document for ``operations``.

    Per operation this writes a ``<Id>Request`` interface, one response
    declaration per 2xx status, and a method signature in the exported
    ``<Name>`` interface that closes the document.

    Raises:
        NoSuccessResponseError: If any operation lacks a 2xx response
        ResolutionError: If a ``$ref`` does not resolve
        UnsupportedSchemaTypeError: If a body is neither an object nor an array
    """
    require_success_responses(operations)
    emitter = TypeEmitter(resolver)
    declarations: list[str] = []
    signatures: list[str] = []

    for operation in operations:
        request_name = f"{capitalize(operation.operation_id)}Request"
        declarations.extend(_emit_request(request_name, operation, emitter))
        response_types = [
            _emit_response(operation, status, declarations, emitter) for status in operation.success_statuses
        ]
        response_type = " | ".join(response_types)
        signatures.append(f"{INDENT}{operation.operation_id}(req: {request_name}): Promise<{response_type}>;")

    lines = declarations
    lines.append(f"export interface {capitalize(name)} {{")
    lines.extend(signatures)
    lines.append("}")
    return TypesOutput(code="\n".join(lines) + "\n")


def response_type_name(operation_id: str, status: str) -> str:
    """Name of the declaration for one success status.

    Example:
        >>> response_type_name("getItem", "200")
        'GetItemResponseOk'
    """
    return f"{capitalize(operation_id)}Response{class_case(status_phrase(status))}"


def _emit_request(request_name: str, operation: OperationIR, emitter: TypeEmitter) -> list[str]:
    fields: list[str] = []
    seen: set[str] = set()
    for parameter in operation.parameters:
        emitter.emit_property(fields, parameter.name, parameter.schema, seen, parameter.required)
    if operation.request_body:
        request_body = cast(RequestBodyObject, emitter.resolver.resolve(operation.request_body))
        shape = emitter.emit_content(request_body.get("content"), seen)
        fields.extend(shape.lines)
    return _interface(request_name, fields)


def _emit_response(
    operation: OperationIR,
    status: str,
    declarations: list[str],
    emitter: TypeEmitter,
) -> str:
    # fetch bodies of 204 responses are empty, so there is nothing to declare
    if status == NO_CONTENT_STATUS:
        return NO_VALUE_TYPE
    type_name = response_type_name(operation.operation_id, status)
    response = cast(ResponseObject, emitter.resolver.resolve(operation.responses[status]) or {})
    shape: ContentShape = emitter.emit_content(response.get("content"), set(), allow_scalar_items=True)
    if shape.scalar is not None:
        declarations.extend([f"type {type_name} = {shape.scalar};", ""])
    else:
        declarations.extend(_interface(type_name, shape.lines))
    if shape.is_array:
        return f"Array<{type_name}>"
    return type_name


def _interface(name: str, fields: list[str]) -> list[str]:
    return [f"interface {name} {{", *fields, "}", ""]

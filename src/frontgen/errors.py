from __future__ import annotations


class FrontgenError(Exception):
    """Base error for frontgen."""


class SpecError(FrontgenError):
    """Raised when an OpenAPI document cannot be loaded or translated."""


class ResolutionError(SpecError):
    """Raised when a $ref does not point at an existing node."""

    def __init__(self, ref: str, reason: str | None = None) -> None:
        message = f"Unresolvable $ref: {ref}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)
        self.ref = ref


class NoSuccessResponseError(SpecError):
    """Raised when an operation does not describe any 2xx response."""

    def __init__(self, operation_id: str) -> None:
        super().__init__(f"Could not find a 200 level response for {operation_id}")
        self.operation_id = operation_id


class UnsupportedSchemaTypeError(SpecError):
    """Raised when a body schema is neither an object nor an array."""

    def __init__(self, schema_type: object) -> None:
        super().__init__(f"Type {schema_type} not supported")
        self.schema_type = schema_type

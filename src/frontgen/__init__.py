from .errors import (
    FrontgenError,
    NoSuccessResponseError,
    ResolutionError,
    SpecError,
    UnsupportedSchemaTypeError,
)
from .generation import GenerationProfile, TypeEmitter, generate_client, generate_types, ts_type
from .generator import GeneratedSources, OutputSpec, generate_files, process_openapi
from .ir import OperationIR, ParameterIR, extract_operations
from .loader import load_openapi
from .naming import generate_operation_id
from .resolver import SchemaResolver

__all__ = [
    "FrontgenError",
    "SpecError",
    "ResolutionError",
    "NoSuccessResponseError",
    "UnsupportedSchemaTypeError",
    "GenerationProfile",
    "TypeEmitter",
    "generate_client",
    "generate_types",
    "ts_type",
    "GeneratedSources",
    "OutputSpec",
    "generate_files",
    "process_openapi",
    "OperationIR",
    "ParameterIR",
    "extract_operations",
    "load_openapi",
    "generate_operation_id",
    "SchemaResolver",
]

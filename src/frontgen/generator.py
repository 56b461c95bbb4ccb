from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from .generation import GenerationProfile, generate_client, generate_types
from .ir import OperationIdFunction, extract_operations
from .naming import generate_operation_id
from .openapi import OpenAPIDocument
from .resolver import SchemaResolver

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GeneratedSources:
    types: str
    implementation: str


@dataclass(frozen=True)
class OutputSpec:
    name: str
    output_dir: Path


def process_openapi(
    document: OpenAPIDocument,
    name: str,
    url: str,
    language: str | GenerationProfile = "ts",
    operation_id: OperationIdFunction = generate_operation_id,
) -> GeneratedSources:
    """Translate an OpenAPI document into a types document and a client module.

    Args:
        document: The OpenAPI document; ``$ref``s are resolved against it
        name: Base name, capitalized to form the exported interface
        url: Base URL embedded in the client module
        language: ``"ts"``, ``"js"`` or a ready GenerationProfile
        operation_id: ``(path, method, operation) -> id`` policy

    Returns:
        Both generated sources. Nothing is returned if any operation fails.
    """
    profile = language if isinstance(language, GenerationProfile) else GenerationProfile.from_language(language)
    resolver = SchemaResolver(document)
    operations = extract_operations(document, operation_id, resolver)
    logger.debug("Generating %s client for %d operations", profile.language, len(operations))
    return GeneratedSources(
        types=generate_types(operations, name, resolver).code,
        implementation=generate_client(operations, name, url, profile).code,
    )


def generate_files(
    spec: OutputSpec,
    sources: GeneratedSources,
    profile: GenerationProfile,
) -> list[Path]:
    spec.output_dir.mkdir(parents=True, exist_ok=True)
    types_path = spec.output_dir / f"{spec.name}-types.d.ts"
    implementation_path = spec.output_dir / f"{spec.name}{profile.extension}"

    types_path.write_text(sources.types, encoding="utf-8")
    implementation_path.write_text(sources.implementation, encoding="utf-8")
    logger.info("Wrote %s and %s", types_path, implementation_path)

    return [types_path, implementation_path]

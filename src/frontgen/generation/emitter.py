"""Schema to TypeScript emission.

``ts_type`` maps primitive JSON Schema types; ``TypeEmitter`` writes interface
fields for object schemas and unpacks JSON request and response bodies.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping, cast

from ..errors import UnsupportedSchemaTypeError
from ..naming import property_key
from ..openapi import MediaTypeObject, SchemaObject
from ..resolver import SchemaResolver

INDENT = "  "
JSON_MEDIA_TYPE = "application/json"
ANY_TYPE = "any"
PRIMITIVE_TYPES = frozenset({"string", "integer", "number", "boolean"})


def ts_type(schema_type: object) -> str:
    """Map a JSON Schema primitive type name to a TypeScript type.

    ``integer`` and ``number`` both become ``number``. Every other value,
    ``None`` and ``object`` included, falls back to ``any``.

    Example:
        >>> ts_type("integer")
        'number'
        >>> ts_type(None)
        'any'
    """
    if schema_type == "string":
        return "string"
    if schema_type == "integer":
        return "number"
    if schema_type == "number":
        return "number"
    if schema_type == "boolean":
        return "boolean"
    return ANY_TYPE


@dataclass
class ContentShape:
    """What ``TypeEmitter.emit_content`` found in a body.

    Attributes:
        lines: Field declarations, already indented
        is_array: The body is a JSON array of ``lines``-shaped objects or of ``scalar``
        scalar: TypeScript type of the array items when they are primitives
    """

    lines: list[str] = field(default_factory=list)
    is_array: bool = False
    scalar: str | None = None


@dataclass
class TypeEmitter:
    """Writes TypeScript interface fields for OpenAPI schemas.

    Every emit call takes a ``seen`` set of property names. Names are added to
    it as they are written and a name already present is skipped, so the
    first writer wins when parameters and body fields share a declaration.

    Example:
        >>> emitter = TypeEmitter(SchemaResolver({}))
        >>> lines: list[str] = []
        >>> emitter.emit_property(lines, "id", {"type": "integer"}, set(), required=True)
        >>> lines
        ['  id: number;']
    """

    resolver: SchemaResolver

    def emit_property(
        self,
        lines: list[str],
        name: str,
        schema: SchemaObject | None,
        seen: set[str],
        required: bool | None = True,
    ) -> None:
        """Append ``name[?]: Type;`` unless ``name`` was already emitted.

        ``required=None`` means the document did not say and is written as
        required; only an explicit ``False`` produces an optional field.
        """
        if name in seen:
            return
        seen.add(name)
        schema = self.resolver.resolve(schema) or {}
        optional = "?" if required is False else ""
        lines.append(f"{INDENT}{property_key(name)}{optional}: {self.property_type(schema)};")

    def property_type(self, schema: SchemaObject) -> str:
        schema_type = schema.get("type")
        if schema_type == "array":
            items = self.resolver.resolve(schema.get("items")) or {}
            return f"Array<{ts_type(items.get('type'))}>"
        return ts_type(schema_type)

    def emit_object_properties(
        self,
        lines: list[str],
        schema: SchemaObject,
        seen: set[str],
    ) -> None:
        """Emit one field per property of an object schema.

        Raises:
            UnsupportedSchemaTypeError: If the resolved schema is not an object
        """
        schema = self.resolver.resolve(schema)
        schema_type = schema.get("type")
        if schema_type != "object":
            raise UnsupportedSchemaTypeError(schema_type)
        required_names = schema.get("required")
        properties = cast(dict[str, SchemaObject], schema.get("properties") or {})
        for prop_name, prop_schema in properties.items():
            required = None if required_names is None else prop_name in required_names
            self.emit_property(lines, prop_name, prop_schema, seen, required)

    def emit_content(
        self,
        content: Mapping[str, MediaTypeObject] | None,
        seen: set[str],
        allow_scalar_items: bool = False,
    ) -> ContentShape:
        """Emit the fields of the JSON body described by ``content``.

        Only the first ``application/json*`` entry is considered. A missing
        body, or a schema with neither ``type`` nor ``$ref``, produces an
        empty shape.

        Args:
            content: Media type map of a request body or response
            seen: Names already emitted into the same declaration
            allow_scalar_items: Accept arrays of primitives (responses only)

        Raises:
            UnsupportedSchemaTypeError: If the body is neither an object nor an array
        """
        shape = ContentShape()
        media = _json_media(content)
        if media is None:
            return shape
        schema = media.get("schema")
        if not isinstance(schema, dict) or ("type" not in schema and "$ref" not in schema):
            return shape

        schema = self.resolver.resolve(schema)
        if schema.get("type") == "array":
            shape.is_array = True
            items = self.resolver.resolve(schema.get("items")) or {}
            item_type = items.get("type")
            if allow_scalar_items and item_type in PRIMITIVE_TYPES:
                shape.scalar = ts_type(item_type)
                return shape
            self.emit_object_properties(shape.lines, items, seen)
        else:
            self.emit_object_properties(shape.lines, schema, seen)
        return shape


def _json_media(content: Mapping[str, MediaTypeObject] | None) -> MediaTypeObject | None:
    # Non-JSON media types are not supported and are skipped.
    if not content:
        return None
    for content_type, media in content.items():
        if content_type.startswith(JSON_MEDIA_TYPE):
            return media if isinstance(media, dict) else None
    return None

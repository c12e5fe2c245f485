"""Generate JSON Schema documents from Python data classes."""

from sotischema.annotations import (
    Default,
    Description,
    JsonKey,
    JsonSchema,
    constructor_based,
    field_based,
    soti_schema,
)
from sotischema.core.errors import (
    MissingPrimaryConstructorError,
    RedirectionLookupFailedError,
    SchemaGenerationError,
    TypeResolutionError,
    UnsupportedDefaultValueTypeError,
    UnsupportedShapeError,
)
from sotischema.core.generator import JsonSchemaGenerator, generate_schema

__all__ = [
    "Default",
    "Description",
    "JsonKey",
    "JsonSchema",
    "JsonSchemaGenerator",
    "MissingPrimaryConstructorError",
    "RedirectionLookupFailedError",
    "SchemaGenerationError",
    "TypeResolutionError",
    "UnsupportedDefaultValueTypeError",
    "UnsupportedShapeError",
    "constructor_based",
    "field_based",
    "generate_schema",
    "soti_schema",
]

"""Core schema engine types and errors."""

from sotischema.core.errors import (
    MissingPrimaryConstructorError,
    RedirectionLookupFailedError,
    SchemaEmissionError,
    SchemaGenerationError,
    TypeResolutionError,
    UnsupportedDefaultValueTypeError,
    UnsupportedShapeError,
)
from sotischema.core.types import (
    MISSING,
    MemberInfo,
    PropertyDescriptor,
    ShapeKind,
    TypeDescriptor,
    TypeGraph,
    TypeKind,
)

__all__ = [
    "MISSING",
    "MemberInfo",
    "MissingPrimaryConstructorError",
    "PropertyDescriptor",
    "RedirectionLookupFailedError",
    "SchemaEmissionError",
    "SchemaGenerationError",
    "ShapeKind",
    "TypeDescriptor",
    "TypeGraph",
    "TypeKind",
    "TypeResolutionError",
    "UnsupportedDefaultValueTypeError",
    "UnsupportedShapeError",
]

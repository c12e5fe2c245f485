"""Errors raised while generating a schema for one declaration."""

from __future__ import annotations


class SchemaGenerationError(Exception):
    """Authoring error that aborts generation for a single declaration."""

    kind = "generation_error"

    def __init__(self, message: str, *, declaration: str | None = None) -> None:
        self.message = message
        self.declaration = declaration
        super().__init__(self.__str__())

    def __str__(self) -> str:
        if self.declaration:
            return f"{self.declaration}: {self.message}"
        return self.message


class UnsupportedShapeError(SchemaGenerationError):
    """Complex type is neither field-based nor constructor-based."""

    kind = "unsupported_shape"


class MissingPrimaryConstructorError(SchemaGenerationError):
    """Constructor-based type defines no primary constructor."""

    kind = "missing_primary_constructor"


class UnsupportedDefaultValueTypeError(SchemaGenerationError):
    """Default literal cannot be coerced to the property's kind."""

    kind = "unsupported_default_value_type"


class RedirectionLookupFailedError(SchemaGenerationError):
    """Schema-holding declaration does not name a usable output constant."""

    kind = "redirection_lookup_failed"


class SchemaEmissionError(SchemaGenerationError):
    """Generated schema cannot be written in the requested output type."""

    kind = "unsupported_output_type"


class TypeResolutionError(SchemaGenerationError):
    """Type hints of a data class cannot be evaluated."""

    kind = "unresolved_type_hint"

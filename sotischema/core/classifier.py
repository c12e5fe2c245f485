"""Map a type descriptor to its JSON Schema fragment."""

from __future__ import annotations

from typing import Callable

from sotischema.core.types import TypeDescriptor, TypeKind

ExpandComplex = Callable[[TypeDescriptor, frozenset], dict]


def classify(
    descriptor: TypeDescriptor,
    in_progress: frozenset,
    expand_complex: ExpandComplex,
) -> dict:
    """Return a fresh schema node for `descriptor`.

    Complex types are handed to `expand_complex` together with the set of type
    names currently being expanded. Anything unrecognized renders as a plain
    object; the classifier itself never raises.
    """

    kind = descriptor.kind
    if kind is TypeKind.STRING:
        return {"type": "string"}
    if kind is TypeKind.INTEGER:
        return {"type": "integer"}
    if kind is TypeKind.NUMBER:
        return {"type": "number"}
    if kind is TypeKind.BOOLEAN:
        return {"type": "boolean"}
    if kind is TypeKind.DATE_TIME:
        return {"type": "string", "format": "date-time"}
    if kind is TypeKind.URI:
        return {"type": "string", "format": "uri"}
    if kind is TypeKind.ENUM:
        return {"type": "string", "enum": list(descriptor.enum_values)}

    if kind is TypeKind.SEQUENCE and descriptor.element is not None:
        return {
            "type": "array",
            "items": classify(descriptor.element, in_progress, expand_complex),
        }
    if kind is TypeKind.MAPPING and descriptor.element is not None:
        return {
            "type": "object",
            "additionalProperties": classify(
                descriptor.element, in_progress, expand_complex
            ),
        }

    if kind is TypeKind.COMPLEX:
        return expand_complex(descriptor, in_progress)

    return {"type": "object"}

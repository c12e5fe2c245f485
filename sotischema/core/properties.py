"""Normalize field-based and constructor-based data classes into properties."""

from __future__ import annotations

import re

from sotischema.annotations import Default, Description, JsonKey, find_marker
from sotischema.core.errors import MissingPrimaryConstructorError, UnsupportedShapeError
from sotischema.core.types import (
    MISSING,
    MemberInfo,
    PropertyDescriptor,
    ShapeKind,
    TypeDescriptor,
    TypeGraph,
)

_COMMENT_MARKER = re.compile(r"^\s*#+:?\s?")


def extract_properties(
    descriptor: TypeDescriptor,
    shape: ShapeKind | None,
    type_graph: TypeGraph,
) -> list[PropertyDescriptor]:
    """Return the ordered properties of a complex type."""

    if shape is ShapeKind.FIELD_BASED:
        return _field_properties(type_graph.fields(descriptor))
    if shape is ShapeKind.CONSTRUCTOR_BASED:
        members = type_graph.primary_constructor(descriptor)
        if members is None:
            raise MissingPrimaryConstructorError(
                "No primary constructor found for constructor-based class.",
                declaration=descriptor.name,
            )
        return _constructor_properties(members)
    raise UnsupportedShapeError(
        "Unsupported data class shape. Use @dataclass / @field_based or "
        "@constructor_based.",
        declaration=descriptor.name,
    )


def _field_properties(members: list[MemberInfo]) -> list[PropertyDescriptor]:
    properties = []
    for member in members:
        if member.static or not member.public:
            continue

        json_key = find_marker(member.annotations, JsonKey)
        if json_key is not None and not (
            json_key.include_from_json and json_key.include_to_json
        ):
            continue

        properties.append(
            PropertyDescriptor(
                name=member.name,
                type=member.type,
                required=member.final and not member.type.nullable,
                default=json_key.default_value if json_key is not None else MISSING,
                description=resolve_description(member),
            )
        )
    return properties


def _constructor_properties(members: list[MemberInfo]) -> list[PropertyDescriptor]:
    properties = []
    for member in members:
        default = find_marker(member.annotations, Default)
        properties.append(
            PropertyDescriptor(
                name=member.name,
                type=member.type,
                required=member.required,
                default=default.value if default is not None else MISSING,
                description=resolve_description(member),
            )
        )
    return properties


def resolve_description(member: MemberInfo) -> str | None:
    """Return the member description: annotation first, then doc comment."""

    description = find_marker(member.annotations, Description)
    if description is not None:
        return description.value

    if member.doc_comment:
        text = strip_doc_comment(member.doc_comment)
        if text:
            return text
    return None


def strip_doc_comment(raw: str) -> str:
    """Drop comment markers from each line and join the remaining text."""

    lines = (_COMMENT_MARKER.sub("", line).strip() for line in raw.splitlines())
    return " ".join(line for line in lines if line)

"""End-to-end schema generation over Python data classes."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Annotated, Any, ClassVar, Final

import pytest
from pydantic import HttpUrl

from sotischema import (
    Default,
    Description,
    JsonKey,
    JsonSchemaGenerator,
    MissingPrimaryConstructorError,
    UnsupportedDefaultValueTypeError,
    UnsupportedShapeError,
    constructor_based,
    field_based,
    generate_schema,
)

SCHEMA_URI = "https://json-schema.org/draft/2020-12/schema"


@constructor_based
class Person:
    def __init__(
        self,
        name: str,
        #: The age of the person in years.
        age: Annotated[int, Default(0)] = 0,
        hobbies: Annotated[list[str], Default([])] = (),
    ) -> None:
        self.name = name
        self.age = age
        self.hobbies = list(hobbies)


@dataclass(frozen=True)
class Contact:
    name: str
    nickname: str | None = None


class Color(Enum):
    RED = "r"
    GREEN = "g"
    BLUE = "b"


@dataclass
class Kitchen:
    label: str
    count: int
    ratio: float
    enabled: bool
    created_at: datetime
    homepage: HttpUrl
    color: Color
    tags: set[str]
    scores: dict[str, float]
    by_id: dict[int, str]
    extra: Any


@dataclass
class Address:
    street: str


@dataclass
class Company:
    billing: Address
    shipping: Address
    offices: list[Address] = field(default_factory=list)


@dataclass
class TreeNode:
    label: str
    children: list[TreeNode] = field(default_factory=list)


@dataclass
class Author:
    name: str
    books: list[Book] = field(default_factory=list)


@dataclass
class Book:
    title: str
    author: Author | None = None


@dataclass
class Forest:
    root: TreeNode
    spare: TreeNode | None = None


@dataclass
class Entry:
    #: Shown in listings.
    title: Annotated[str, Description("Display title.")]
    summary: str
    """Short summary of the entry."""
    retries: Annotated[int, JsonKey(default_value=3)] = 3
    token: Annotated[str, JsonKey(include_from_json=False)] = ""
    _cache: dict = field(default_factory=dict)
    registry: ClassVar[dict] = {}


@field_based
class Settings:
    host: Final[str]
    port: int


@constructor_based
class BadDefault:
    def __init__(self, address: Annotated[Address, Default("Main St")] = None) -> None:
        self.address = address


@constructor_based
class NoInit:
    pass


class Plain:
    value: int


@dataclass
class HoldsPlain:
    plain: Plain


def _dumps(schema: dict) -> str:
    return json.dumps(schema, separators=(",", ":"))


def test_constructor_based_person_end_to_end() -> None:
    expected = {
        "$schema": SCHEMA_URI,
        "type": "object",
        "properties": {
            "name": {"type": "string"},
            "age": {
                "type": "integer",
                "description": "The age of the person in years.",
                "default": 0,
            },
            "hobbies": {"type": "array", "items": {"type": "string"}, "default": []},
        },
        "required": ["name"],
        "$defs": {},
    }
    assert _dumps(generate_schema(Person)) == _dumps(expected)


def test_generation_is_idempotent() -> None:
    generator = JsonSchemaGenerator()
    assert _dumps(generator.generate_schema(Company)) == _dumps(
        generator.generate_schema(Company)
    )


def test_required_set_from_frozen_non_nullable_fields() -> None:
    schema = generate_schema(Contact)
    assert schema["required"] == ["name"]
    assert schema["properties"]["nickname"] == {"type": "string"}


def test_required_omitted_when_nothing_required() -> None:
    schema = generate_schema(Address)
    assert "required" not in schema


def test_primitive_and_container_mapping() -> None:
    props = generate_schema(Kitchen)["properties"]
    assert props["label"] == {"type": "string"}
    assert props["count"] == {"type": "integer"}
    assert props["ratio"] == {"type": "number"}
    assert props["enabled"] == {"type": "boolean"}
    assert props["created_at"] == {"type": "string", "format": "date-time"}
    assert props["homepage"] == {"type": "string", "format": "uri"}
    assert props["color"] == {"type": "string", "enum": ["RED", "GREEN", "BLUE"]}
    assert props["tags"] == {"type": "array", "items": {"type": "string"}}
    assert props["scores"] == {"type": "object", "additionalProperties": {"type": "number"}}
    assert props["by_id"] == {"type": "object"}
    assert props["extra"] == {"type": "object"}


def test_reused_type_is_defined_once() -> None:
    schema = generate_schema(Company)
    ref = {"$ref": "#/$defs/Address"}
    assert schema["properties"]["billing"] == ref
    assert schema["properties"]["shipping"] == ref
    assert schema["properties"]["offices"] == {"type": "array", "items": ref}
    assert list(schema["$defs"]) == ["Address"]
    assert schema["$defs"]["Address"] == {
        "type": "object",
        "properties": {"street": {"type": "string"}},
    }


def test_direct_self_reference_stays_at_root() -> None:
    schema = generate_schema(TreeNode)
    assert schema["properties"]["children"] == {
        "type": "array",
        "items": {"$ref": "#/$defs/TreeNode"},
    }
    assert schema["$defs"] == {}


def test_indirect_cycle_through_root() -> None:
    schema = generate_schema(Author)
    assert schema["properties"]["books"]["items"] == {"$ref": "#/$defs/Book"}
    assert list(schema["$defs"]) == ["Book"]
    assert schema["$defs"]["Book"]["properties"]["author"] == {"$ref": "#/$defs/Author"}


def test_cycle_below_root_is_defined_once() -> None:
    schema = generate_schema(Forest)
    assert schema["properties"]["root"] == {"$ref": "#/$defs/TreeNode"}
    assert schema["properties"]["spare"] == {"$ref": "#/$defs/TreeNode"}
    assert list(schema["$defs"]) == ["TreeNode"]
    assert schema["$defs"]["TreeNode"]["properties"]["children"]["items"] == {
        "$ref": "#/$defs/TreeNode"
    }


def test_field_annotations_and_docs() -> None:
    schema = generate_schema(Entry)
    props = schema["properties"]
    assert list(props) == ["title", "summary", "retries"]
    assert props["title"]["description"] == "Display title."
    assert props["summary"]["description"] == "Short summary of the entry."
    assert props["retries"] == {"type": "integer", "default": 3}


def test_field_based_plain_class_uses_final_marker() -> None:
    schema = generate_schema(Settings)
    assert schema["required"] == ["host"]
    assert list(schema["properties"]) == ["host", "port"]


def test_unsupported_default_on_complex_property() -> None:
    with pytest.raises(UnsupportedDefaultValueTypeError, match="address"):
        generate_schema(BadDefault)


def test_missing_primary_constructor() -> None:
    with pytest.raises(MissingPrimaryConstructorError, match="NoInit"):
        generate_schema(NoInit)


def test_unsupported_shape_root_and_nested() -> None:
    with pytest.raises(UnsupportedShapeError, match="Plain"):
        generate_schema(Plain)
    with pytest.raises(UnsupportedShapeError, match="Plain"):
        generate_schema(HoldsPlain)


def test_non_complex_root_is_rejected() -> None:
    with pytest.raises(UnsupportedShapeError):
        generate_schema(int)


def test_failed_run_does_not_leak_into_next_run() -> None:
    generator = JsonSchemaGenerator()
    with pytest.raises(UnsupportedShapeError):
        generator.generate_schema(HoldsPlain)
    assert generator.generate_schema(Address)["$defs"] == {}

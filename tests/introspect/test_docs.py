"""Tests for documentation-comment lookup and the reflection type graph."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Annotated, ClassVar, Final

import pytest

from sotischema.annotations import Default, JsonKey, constructor_based, field_based
from sotischema.core.errors import TypeResolutionError
from sotischema.core.types import TypeKind
from sotischema.introspect import PythonTypeGraph
from sotischema.introspect.docs import attribute_docs, parameter_docs
from sotischema.introspect.graph import primary_init


@dataclass(frozen=True)
class Base:
    #: Identifier shared by all records.
    id: str


@dataclass(frozen=True)
class Record(Base):
    #: First line of the comment.
    #: Second line.
    name: str = ""
    # Plain comments are not documentation.
    note: str = ""
    count: int = 0
    """Number of items."""


@constructor_based
class Widget:
    def __init__(
        self,
        #: Widget label.
        label: str,
        size: Annotated[int, Default(1)] = 1,
        *args: int,
        #: Keyword-only flag.
        visible: bool = True,
        **kwargs: str,
    ) -> None:
        self.label = label


@constructor_based
@dataclass
class Generated:
    #: Documented through the field.
    title: str
    pages: int = 0


class Child(Widget):
    pass


@field_based
class Bare:
    enabled: Final[bool]
    label: Annotated[str, JsonKey(include_to_json=False)]
    limit: ClassVar[int] = 3


def _passthrough(func):
    return func


@constructor_based
class Gadget:
    @_passthrough
    #: Builds a gadget.
    def __init__(self, name: str) -> None:
        self.name = name


@dataclass
class Dangling:
    target: NotDefinedAnywhere  # noqa: F821


@constructor_based
class DanglingInit:
    def __init__(self, target: NotDefinedAnywhere) -> None:  # noqa: F821
        self.target = target


def test_attribute_docs_read_comments_and_docstrings() -> None:
    docs = attribute_docs(Record)
    assert docs["id"] == "#: Identifier shared by all records."
    assert docs["name"] == "#: First line of the comment.\n#: Second line."
    assert docs["count"] == "Number of items."
    assert "note" not in docs


def test_parameter_docs_from_init_source() -> None:
    docs = parameter_docs(Widget, Widget.__init__)
    assert docs == {"label": "#: Widget label.", "visible": "#: Keyword-only flag."}


def test_parameter_docs_fall_back_to_field_docs_for_generated_init() -> None:
    docs = parameter_docs(Generated, Generated.__init__)
    assert docs["title"] == "#: Documented through the field."


def test_docs_missing_for_dynamic_classes() -> None:
    dynamic = type("Dynamic", (), {"__annotations__": {"x": int}})
    assert attribute_docs(dynamic) == {}


def test_fields_follow_dataclass_order_and_frozen_flag() -> None:
    graph = PythonTypeGraph()
    members = graph.fields(graph.describe(Record))
    assert [member.name for member in members] == ["id", "name", "note", "count"]
    assert all(member.final for member in members)
    assert members[1].doc_comment == "#: First line of the comment.\n#: Second line."


def test_fields_of_plain_field_based_class() -> None:
    graph = PythonTypeGraph()
    enabled, label, limit = graph.fields(graph.describe(Bare))
    assert enabled.final and not label.final
    assert isinstance(label.annotations[0], JsonKey)
    assert limit.static


def test_primary_constructor_members() -> None:
    graph = PythonTypeGraph()
    members = graph.primary_constructor(graph.describe(Widget))
    assert [member.name for member in members] == ["label", "size", "visible"]
    assert [member.required for member in members] == [True, False, False]
    assert members[1].annotations == (Default(1),)
    assert members[2].type.kind is TypeKind.BOOLEAN


def test_primary_constructor_of_dataclass_and_subclass() -> None:
    graph = PythonTypeGraph()
    members = graph.primary_constructor(graph.describe(Generated))
    assert [(member.name, member.required) for member in members] == [
        ("title", True),
        ("pages", False),
    ]
    assert primary_init(Child) is Widget.__init__


def test_primary_init_missing() -> None:
    class Empty:
        pass

    assert primary_init(Empty) is None


def test_method_comment_is_not_a_parameter_doc() -> None:
    assert parameter_docs(Gadget, Gadget.__init__) == {}

    graph = PythonTypeGraph()
    (member,) = graph.primary_constructor(graph.describe(Gadget))
    assert member.name == "name"
    assert member.doc_comment is None


def test_unresolvable_field_hint_raises_type_resolution_error() -> None:
    graph = PythonTypeGraph()
    with pytest.raises(TypeResolutionError, match="NotDefinedAnywhere") as excinfo:
        graph.fields(graph.describe(Dangling))
    assert excinfo.value.kind == "unresolved_type_hint"
    assert excinfo.value.declaration == "Dangling"


def test_unresolvable_parameter_hint_raises_type_resolution_error() -> None:
    graph = PythonTypeGraph()
    with pytest.raises(TypeResolutionError, match="DanglingInit.__init__"):
        graph.primary_constructor(graph.describe(DanglingInit))

"""Structural type views consumed by the schema engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Protocol


class _Missing:
    """Marker for an absent default value."""

    _instance: _Missing | None = None

    def __new__(cls) -> _Missing:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Any = _Missing()


class TypeKind(str, Enum):
    """JSON Schema category of a described type."""

    STRING = "string"
    INTEGER = "integer"
    NUMBER = "number"
    BOOLEAN = "boolean"
    DATE_TIME = "date_time"
    URI = "uri"
    ENUM = "enum"
    SEQUENCE = "sequence"
    MAPPING = "mapping"
    COMPLEX = "complex"
    ANY = "any"


class ShapeKind(str, Enum):
    """Source-level pattern a complex type follows."""

    FIELD_BASED = "field_based"
    CONSTRUCTOR_BASED = "constructor_based"
    UNSUPPORTED = "unsupported"


@dataclass(frozen=True, eq=False)
class TypeDescriptor:
    """Read-only handle to one type in the host type graph.

    Two descriptors compare equal when they carry the same type name, which
    is what cycle detection and `$defs` memoization key on.
    """

    kind: TypeKind
    name: str
    nullable: bool = False
    element: TypeDescriptor | None = None
    enum_values: tuple[str, ...] = ()
    shape: ShapeKind | None = None
    source: Any = field(default=None, repr=False)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TypeDescriptor):
            return NotImplemented
        return self.name == other.name

    def __hash__(self) -> int:
        return hash(self.name)


@dataclass(frozen=True)
class MemberInfo:
    """Raw view of a declared field or constructor parameter."""

    name: str
    type: TypeDescriptor
    public: bool = True
    static: bool = False
    final: bool = False
    required: bool = False
    annotations: tuple[Any, ...] = ()
    doc_comment: str | None = None


@dataclass(frozen=True)
class PropertyDescriptor:
    """Normalized property of a complex type."""

    name: str
    type: TypeDescriptor
    required: bool
    default: Any = MISSING
    description: str | None = None

    @property
    def has_default(self) -> bool:
        return self.default is not MISSING


class TypeGraph(Protocol):
    """Provider of type descriptors and member views for a host type system."""

    def describe(self, hint: Any) -> TypeDescriptor:
        """Return the descriptor for a host type."""

        raise NotImplementedError

    def fields(self, descriptor: TypeDescriptor) -> list[MemberInfo]:
        """Return declared instance fields in declaration order."""

        raise NotImplementedError

    def primary_constructor(self, descriptor: TypeDescriptor) -> list[MemberInfo] | None:
        """Return primary constructor parameters, or None when there is none."""

        raise NotImplementedError

"""Describe Python type hints as engine type descriptors."""

from __future__ import annotations

import collections
import collections.abc as abc
import dataclasses
import types
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Annotated, Any, ClassVar, Final, TypeVar, Union, get_args, get_origin

from pydantic import AnyHttpUrl, AnyUrl, FileUrl, HttpUrl

from sotischema.annotations import SHAPE_ATTR
from sotischema.core.types import ShapeKind, TypeDescriptor, TypeKind

_NUMBER_TYPES = (float, Decimal)
_URI_TYPES = (AnyUrl, AnyHttpUrl, HttpUrl, FileUrl)
_SEQUENCE_TYPES = {
    list,
    tuple,
    set,
    frozenset,
    collections.deque,
    abc.Sequence,
    abc.MutableSequence,
    abc.Set,
    abc.MutableSet,
    abc.Collection,
    abc.Iterable,
}
_MAPPING_TYPES = {
    dict,
    collections.OrderedDict,
    collections.defaultdict,
    abc.Mapping,
    abc.MutableMapping,
}
_UNION_TYPES = (Union, types.UnionType)


@dataclass(frozen=True)
class UnwrappedHint:
    """A hint with its Annotated / Final / ClassVar / Optional wrappers peeled."""

    hint: Any
    metadata: tuple[Any, ...] = ()
    nullable: bool = False
    final: bool = False
    static: bool = False


def unwrap_hint(hint: Any) -> UnwrappedHint:
    """Peel qualifier wrappers off a resolved type hint."""

    metadata: list[Any] = []
    nullable = final = static = False
    while True:
        origin = get_origin(hint)
        args = get_args(hint)
        if origin is Annotated:
            metadata.extend(hint.__metadata__)
            hint = args[0]
        elif origin is Final or hint is Final:
            final = True
            hint = args[0] if args else Any
        elif origin is ClassVar or hint is ClassVar:
            static = True
            hint = args[0] if args else Any
        elif origin in _UNION_TYPES and type(None) in args:
            remaining = [arg for arg in args if arg is not type(None)]
            if len(remaining) != 1:
                break
            nullable = True
            hint = remaining[0]
        else:
            break
    return UnwrappedHint(
        hint=hint,
        metadata=tuple(metadata),
        nullable=nullable,
        final=final,
        static=static,
    )


def identify_shape(cls: type) -> ShapeKind:
    """Return the data-class shape a class declares."""

    shape = getattr(cls, SHAPE_ATTR, None)
    if isinstance(shape, ShapeKind):
        return shape
    if dataclasses.is_dataclass(cls):
        return ShapeKind.FIELD_BASED
    return ShapeKind.UNSUPPORTED


def _hint_name(hint: Any) -> str:
    return getattr(hint, "__name__", None) or repr(hint)


def describe_hint(hint: Any) -> TypeDescriptor:
    """Return the descriptor for a resolved type hint."""

    unwrapped = unwrap_hint(hint)
    return _describe(unwrapped.hint, unwrapped.nullable)


def _describe(hint: Any, nullable: bool) -> TypeDescriptor:
    name = _hint_name(hint)

    def leaf(kind: TypeKind, **extra: Any) -> TypeDescriptor:
        return TypeDescriptor(kind=kind, name=name, nullable=nullable, **extra)

    if hint is str:
        return leaf(TypeKind.STRING)
    if hint is int:
        return leaf(TypeKind.INTEGER)
    if hint in _NUMBER_TYPES:
        return leaf(TypeKind.NUMBER)
    if hint is bool:
        return leaf(TypeKind.BOOLEAN)
    if hint is datetime:
        return leaf(TypeKind.DATE_TIME)
    if isinstance(hint, type) and issubclass(hint, _URI_TYPES):
        return leaf(TypeKind.URI)
    if isinstance(hint, type) and issubclass(hint, Enum):
        return leaf(TypeKind.ENUM, enum_values=tuple(member.name for member in hint))

    origin = get_origin(hint) or hint
    args = get_args(hint)

    if origin in _SEQUENCE_TYPES:
        item = args[0] if args else Any
        return leaf(TypeKind.SEQUENCE, element=describe_hint(item))

    if origin in _MAPPING_TYPES:
        if args and unwrap_hint(args[0]).hint is not str:
            return leaf(TypeKind.ANY)
        value = args[1] if len(args) > 1 else Any
        return leaf(TypeKind.MAPPING, element=describe_hint(value))

    if (
        isinstance(origin, type)
        and origin not in (object, Any)
        and origin is not type(None)
        and not isinstance(hint, TypeVar)
    ):
        return TypeDescriptor(
            kind=TypeKind.COMPLEX,
            name=origin.__name__,
            nullable=nullable,
            shape=identify_shape(origin),
            source=origin,
        )

    return leaf(TypeKind.ANY)

"""Markers users attach to data classes to steer schema generation.

Field and parameter markers are attached with ``typing.Annotated``::

    @constructor_based
    class Person:
        def __init__(
            self,
            name: str,
            #: The age of the person in years.
            age: Annotated[int, Default(0)] = 0,
        ) -> None:
            ...

Class-level markers are decorators (``soti_schema``, ``field_based``,
``constructor_based``) and the ``JsonSchema`` class attribute that names the
generated constant.
"""

from __future__ import annotations

import importlib
from dataclasses import dataclass
from typing import Any

from sotischema.config import generated_module_name
from sotischema.core.types import MISSING, ShapeKind

SCHEMA_FLAG = "__soti_schema__"
SHAPE_ATTR = "__soti_shape__"


@dataclass(frozen=True)
class Description:
    """Explicit property description; wins over documentation comments."""

    value: str


@dataclass(frozen=True)
class Default:
    """Default value of a constructor parameter."""

    value: Any


@dataclass(frozen=True)
class JsonKey:
    """Per-field serialization directive for field-based data classes."""

    include_from_json: bool = True
    include_to_json: bool = True
    default_value: Any = MISSING


class JsonSchema:
    """Class attribute naming the constant that holds the generated schema.

    Reading the attribute from the class loads that constant from the
    generated sibling module.
    """

    def __init__(self, target: str, *, output: type = dict) -> None:
        self.target = target
        self.output = output
        self.owner: type | None = None
        self.attribute: str | None = None

    def __set_name__(self, owner: type, name: str) -> None:
        self.owner = owner
        self.attribute = name

    def __get__(self, instance: object, owner: type | None = None) -> Any:
        owner = owner or type(instance)
        module_name = generated_module_name(owner.__module__)
        try:
            module = importlib.import_module(module_name)
        except ImportError as exc:
            raise AttributeError(
                f"{owner.__name__}.{self.attribute}: generated module "
                f"{module_name!r} is not available ({exc})"
            ) from exc
        try:
            return getattr(module, self.target)
        except AttributeError as exc:
            raise AttributeError(
                f"{owner.__name__}.{self.attribute}: {module_name!r} defines no "
                f"constant {self.target!r}; regenerate the schema module"
            ) from exc

    def __repr__(self) -> str:
        return f"JsonSchema({self.target!r}, output={self.output.__name__})"


def soti_schema(cls: type) -> type:
    """Mark a class for schema discovery."""

    if not isinstance(cls, type):
        raise TypeError(f"Generator cannot target `{getattr(cls, '__name__', cls)!r}`.")
    setattr(cls, SCHEMA_FLAG, True)
    return cls


def _mark_shape(cls: type, shape: ShapeKind) -> type:
    if not isinstance(cls, type):
        raise TypeError(f"Generator cannot target `{getattr(cls, '__name__', cls)!r}`.")
    setattr(cls, SHAPE_ATTR, shape)
    return cls


def field_based(cls: type) -> type:
    """Declare that a class's annotated fields are its properties."""

    return _mark_shape(cls, ShapeKind.FIELD_BASED)


def constructor_based(cls: type) -> type:
    """Declare that a class's ``__init__`` parameters are its properties."""

    return _mark_shape(cls, ShapeKind.CONSTRUCTOR_BASED)


def find_marker(annotations: tuple[Any, ...], marker_type: type) -> Any:
    """Return the first annotation of `marker_type`, or None."""

    for item in annotations:
        if isinstance(item, marker_type):
            return item
    return None

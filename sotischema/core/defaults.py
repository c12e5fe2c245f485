"""Default-value coercion into JSON literals."""

from __future__ import annotations

from typing import Any

from sotischema.core.errors import UnsupportedDefaultValueTypeError
from sotischema.core.types import PropertyDescriptor, TypeKind


class _NotLiteral(Exception):
    pass


def _literal(value: Any) -> Any:
    """Convert a nested default element to a JSON literal."""

    if value is None or isinstance(value, (bool, int, float, str)):
        return value
    if isinstance(value, (list, tuple)):
        return [_literal(item) for item in value]
    if isinstance(value, (set, frozenset)):
        return [_literal(item) for item in _sorted_members(value)]
    if isinstance(value, dict):
        return _literal_mapping(value)
    raise _NotLiteral(type(value).__name__)


def _literal_mapping(value: dict) -> dict:
    out = {}
    for key, item in value.items():
        if not isinstance(key, str):
            raise _NotLiteral(type(key).__name__)
        out[key] = _literal(item)
    return out


def _sorted_members(value: set | frozenset) -> list:
    return sorted(value, key=lambda item: (type(item).__name__, repr(item)))


def _coerce(kind: TypeKind, value: Any) -> Any:
    if kind is TypeKind.STRING and isinstance(value, str):
        return value
    if kind is TypeKind.INTEGER and isinstance(value, int) and not isinstance(value, bool):
        return value
    if (
        kind is TypeKind.NUMBER
        and isinstance(value, (int, float))
        and not isinstance(value, bool)
    ):
        return float(value)
    if kind is TypeKind.BOOLEAN and isinstance(value, bool):
        return value
    if kind is TypeKind.SEQUENCE and isinstance(value, (list, tuple, set, frozenset)):
        return _literal(value)
    if kind is TypeKind.MAPPING and isinstance(value, dict):
        return _literal_mapping(value)
    raise _NotLiteral(type(value).__name__)


def coerce_default(prop: PropertyDescriptor, *, owner: str | None = None) -> Any:
    """Return the JSON literal for a property's declared default.

    Raises UnsupportedDefaultValueTypeError when the property's kind has no
    literal form or the declared value does not fit it.
    """

    value = prop.default
    if value is None and prop.type.nullable:
        return None
    try:
        return _coerce(prop.type.kind, value)
    except _NotLiteral as exc:
        raise UnsupportedDefaultValueTypeError(
            f"Unsupported default value type for property `{prop.name}` "
            f"({prop.type.name} declared, got {exc}).",
            declaration=owner,
        ) from None

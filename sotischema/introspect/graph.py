"""Type-graph provider backed by Python runtime reflection."""

from __future__ import annotations

import dataclasses
import inspect
import typing
from typing import Any

from sotischema.core.errors import TypeResolutionError
from sotischema.core.types import MemberInfo, TypeDescriptor
from sotischema.introspect.describe import describe_hint, unwrap_hint
from sotischema.introspect.docs import attribute_docs, parameter_docs

_VARIADIC = (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD)


def _resolve_hints(obj: Any, owner: type) -> dict[str, Any]:
    try:
        return typing.get_type_hints(obj, include_extras=True)
    except (NameError, TypeError, AttributeError) as exc:
        raise TypeResolutionError(
            f"Cannot resolve type hints of `{obj.__qualname__}`: {exc}",
            declaration=owner.__name__,
        ) from exc


def _declared_field_names(cls: type) -> list[str]:
    if dataclasses.is_dataclass(cls):
        return [field.name for field in dataclasses.fields(cls)]
    names: list[str] = []
    for klass in reversed(cls.__mro__):
        if klass is object:
            continue
        for name in inspect.get_annotations(klass):
            if name not in names:
                names.append(name)
    return names


def primary_init(cls: type) -> Any:
    """Return the nearest user-level ``__init__`` of `cls`, or None."""

    for klass in cls.__mro__:
        if klass is object:
            return None
        init = vars(klass).get("__init__")
        if init is not None:
            return init if inspect.isfunction(init) else None
    return None


class PythonTypeGraph:
    """Describe classes and their members through ``typing`` and ``inspect``."""

    def describe(self, hint: Any) -> TypeDescriptor:
        """Return the descriptor for a type hint or class."""

        return describe_hint(hint)

    def _member(
        self,
        name: str,
        hint: Any,
        *,
        final: bool = False,
        required: bool = False,
        doc_comment: str | None = None,
    ) -> MemberInfo:
        unwrapped = unwrap_hint(hint)
        return MemberInfo(
            name=name,
            type=describe_hint(hint),
            public=not name.startswith("_"),
            static=unwrapped.static,
            final=final or unwrapped.final,
            required=required,
            annotations=unwrapped.metadata,
            doc_comment=doc_comment,
        )

    def fields(self, descriptor: TypeDescriptor) -> list[MemberInfo]:
        """Return instance fields of a field-based class in declaration order.

        A field counts as final when its class is a frozen dataclass or its
        annotation is ``Final[...]``.
        """

        cls = descriptor.source
        hints = _resolve_hints(cls, cls)
        docs = attribute_docs(cls)
        params = getattr(cls, "__dataclass_params__", None)
        frozen = bool(params is not None and params.frozen)

        return [
            self._member(
                name,
                hints.get(name, Any),
                final=frozen,
                doc_comment=docs.get(name),
            )
            for name in _declared_field_names(cls)
        ]

    def primary_constructor(self, descriptor: TypeDescriptor) -> list[MemberInfo] | None:
        """Return the ``__init__`` parameters of a class, excluding ``self``."""

        cls = descriptor.source
        init = primary_init(cls)
        if init is None:
            return None

        parameters = list(inspect.signature(init).parameters.values())[1:]
        parameters = [param for param in parameters if param.kind not in _VARIADIC]

        hints = _resolve_hints(cls, cls) if dataclasses.is_dataclass(cls) else {}
        if any(param.name not in hints for param in parameters):
            hints = {**hints, **_resolve_hints(init, cls)}
        docs = parameter_docs(cls, init)

        return [
            self._member(
                param.name,
                hints.get(param.name, Any),
                required=param.default is inspect.Parameter.empty,
                doc_comment=docs.get(param.name),
            )
            for param in parameters
        ]

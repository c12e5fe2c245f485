"""Find schema-holding declarations and resolve their output names."""

from __future__ import annotations

import importlib
import importlib.util
import inspect
import keyword
import sys
from dataclasses import dataclass
from pathlib import Path
from types import ModuleType

from sotischema.annotations import SCHEMA_FLAG, JsonSchema
from sotischema.core.errors import RedirectionLookupFailedError


@dataclass(frozen=True)
class Declaration:
    """One ``JsonSchema`` attribute on a ``@soti_schema`` class."""

    cls: type
    attribute: str
    marker: JsonSchema

    @property
    def label(self) -> str:
        return f"{self.cls.__name__}.{self.attribute}"


def load_module(target: str) -> ModuleType:
    """Import a module from a dotted name or a ``.py`` file path.

    File modules are registered in ``sys.modules`` under their stem so that
    postponed annotations, source lookups and the generated sibling module
    resolve. A stem already bound to a module from another file is refused.
    """

    path = Path(target)
    if path.suffix != ".py":
        return importlib.import_module(target)

    name = path.stem
    existing = sys.modules.get(name)
    if existing is not None and not _same_file(existing, path):
        raise ImportError(
            f"Cannot load {target} as module {name!r}: the name is already bound to {existing!r}"
        )
    spec = importlib.util.spec_from_file_location(name, path)
    if spec is None or spec.loader is None:
        raise ImportError(f"Cannot load module from {target}")
    module = importlib.util.module_from_spec(spec)
    sys.modules[name] = module
    try:
        spec.loader.exec_module(module)
    except BaseException:
        sys.modules.pop(name, None)
        raise
    return module


def _same_file(module: ModuleType, path: Path) -> bool:
    location = getattr(module, "__file__", None)
    return location is not None and Path(location).resolve() == path.resolve()


def discover_declarations(module: ModuleType) -> list[Declaration]:
    """Return declarations defined in `module`, in source order."""

    declarations = []
    for _, cls in inspect.getmembers(module, inspect.isclass):
        if cls.__module__ != module.__name__ or not vars(cls).get(SCHEMA_FLAG):
            continue
        for attribute, value in vars(cls).items():
            if isinstance(value, JsonSchema):
                declarations.append(Declaration(cls, attribute, value))
    declarations.sort(key=_source_line)
    return declarations


def _source_line(declaration: Declaration) -> tuple[int, str]:
    try:
        line = inspect.getsourcelines(declaration.cls)[1]
    except (OSError, TypeError):
        line = 0
    return line, declaration.label


def resolve_target_name(declaration: Declaration) -> str:
    """Return the constant name the generated schema is exposed under."""

    target = declaration.marker.target
    if not isinstance(target, str) or not target.isidentifier() or keyword.iskeyword(target):
        raise RedirectionLookupFailedError(
            f"Failed to extract redirected variable name for {declaration.attribute}: "
            f"{target!r} is not a valid identifier.",
            declaration=declaration.cls.__name__,
        )
    return target

"""JSON Schema synthesis over a type graph."""

from __future__ import annotations

from typing import Any

from sotischema.config import JSON_SCHEMA_URI
from sotischema.core.classifier import classify
from sotischema.core.defaults import coerce_default
from sotischema.core.errors import UnsupportedShapeError
from sotischema.core.properties import extract_properties
from sotischema.core.types import TypeDescriptor, TypeGraph, TypeKind
from sotischema.introspect import PythonTypeGraph


def _ref(name: str) -> dict:
    return {"$ref": f"#/$defs/{name}"}


class _GenerationSession:
    """State for one generation run.

    `definitions` holds finalized subschemas keyed by type name; the active
    expansion path travels separately through the recursion.
    """

    def __init__(self, type_graph: TypeGraph) -> None:
        self.type_graph = type_graph
        self.definitions: dict[str, dict] = {}

    def root_schema(self, root: TypeDescriptor) -> dict:
        return self._complex_schema(root, frozenset(), is_root=True)

    def _expand(self, descriptor: TypeDescriptor, in_progress: frozenset) -> dict:
        return self._complex_schema(descriptor, in_progress, is_root=False)

    def _complex_schema(
        self,
        descriptor: TypeDescriptor,
        in_progress: frozenset,
        *,
        is_root: bool,
    ) -> dict:
        name = descriptor.name
        if not is_root and name in self.definitions:
            return _ref(name)
        if name in in_progress:
            return _ref(name)

        path = in_progress | {name}
        properties = extract_properties(descriptor, descriptor.shape, self.type_graph)

        schema_properties: dict[str, Any] = {}
        required: list[str] = []
        for prop in properties:
            node = classify(prop.type, path, self._expand)
            if prop.description is not None:
                node["description"] = prop.description
            if prop.has_default:
                node["default"] = coerce_default(prop, owner=name)
            schema_properties[prop.name] = node
            if prop.required:
                required.append(prop.name)

        schema: dict[str, Any] = {"type": "object", "properties": schema_properties}
        if required:
            schema["required"] = required

        if is_root:
            return schema
        self.definitions[name] = schema
        return _ref(name)


class JsonSchemaGenerator:
    """Generate JSON Schema documents from data-class declarations.

    Every call to `generate_schema` runs in its own session, so one instance
    may serve concurrent callers.
    """

    def __init__(self, type_graph: TypeGraph | None = None) -> None:
        self.type_graph = type_graph or PythonTypeGraph()

    def generate_schema(self, root: Any) -> dict:
        """Return the schema document for `root` (a class or TypeDescriptor)."""

        descriptor = root if isinstance(root, TypeDescriptor) else self.type_graph.describe(root)
        if descriptor.kind is not TypeKind.COMPLEX:
            raise UnsupportedShapeError(
                f"Root type must be a data class, got {descriptor.kind.value}.",
                declaration=descriptor.name,
            )

        session = _GenerationSession(self.type_graph)
        body = session.root_schema(descriptor)
        return {"$schema": JSON_SCHEMA_URI, **body, "$defs": session.definitions}


def generate_schema(root: Any, *, type_graph: TypeGraph | None = None) -> dict:
    """Generate the schema document for a single root type."""

    return JsonSchemaGenerator(type_graph).generate_schema(root)

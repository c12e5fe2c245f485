"""Discovery, redirection and emission around the schema engine."""

from sotischema.build.discover import (
    Declaration,
    discover_declarations,
    load_module,
    resolve_target_name,
)
from sotischema.build.emit import render_constant, render_module
from sotischema.build.pipeline import (
    GeneratedModule,
    default_output_path,
    generate_module,
    write_generated_module,
)
from sotischema.build.report import DeclarationResult, GenerationReport, classify_exception

__all__ = [
    "Declaration",
    "DeclarationResult",
    "GeneratedModule",
    "GenerationReport",
    "classify_exception",
    "default_output_path",
    "discover_declarations",
    "generate_module",
    "load_module",
    "render_constant",
    "render_module",
    "resolve_target_name",
    "write_generated_module",
]

"""Generate the schema module for every declaration in a source module."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from types import ModuleType
from typing import Protocol

from sotischema.build.discover import discover_declarations, resolve_target_name
from sotischema.build.emit import render_constant, render_module
from sotischema.build.report import DeclarationResult, GenerationReport, classify_exception
from sotischema.config import generated_suffix
from sotischema.core.generator import JsonSchemaGenerator
from sotischema.trace import new_event


class EventSink(Protocol):
    def append(self, event: dict) -> None: ...


@dataclass(frozen=True)
class GeneratedModule:
    """Rendered source plus the per-declaration report."""

    source: str
    report: GenerationReport


def generate_module(
    module: ModuleType,
    *,
    generator: JsonSchemaGenerator | None = None,
    trace: EventSink | None = None,
) -> GeneratedModule:
    """Generate every declaration of `module`.

    A failing declaration is recorded in the report and left out of the
    rendered source; the remaining declarations are still generated.
    """

    generator = generator or JsonSchemaGenerator()
    report = GenerationReport(module=module.__name__)
    constants: list[str] = []

    for declaration in discover_declarations(module):
        if trace is not None:
            trace.append(new_event("start", "generate declaration", declaration=declaration.label))
        try:
            target = resolve_target_name(declaration)
            schema = generator.generate_schema(declaration.cls)
            constants.append(render_constant(target, declaration.marker.output, schema))
        except Exception as exc:  # noqa: BLE001 - per-declaration fault isolation
            kind, message = classify_exception(exc, declaration.label)
            report.results.append(
                DeclarationResult(
                    declaration=declaration.label,
                    ok=False,
                    error_kind=kind,
                    message=message,
                )
            )
            if trace is not None:
                trace.append(
                    new_event(
                        "failed",
                        message,
                        declaration=declaration.label,
                        data={"error_kind": kind},
                    )
                )
            continue

        report.results.append(
            DeclarationResult(declaration=declaration.label, target=target, ok=True)
        )
        if trace is not None:
            trace.append(
                new_event(
                    "generated",
                    f"wrote constant {target}",
                    declaration=declaration.label,
                    data={"defs": sorted(schema["$defs"])},
                )
            )

    return GeneratedModule(source=render_module(module.__name__, constants), report=report)


def default_output_path(module: ModuleType) -> Path:
    """Return the sibling path of the generated module for `module`."""

    source = Path(module.__file__ or f"{module.__name__}.py")
    return source.with_name(f"{source.stem}{generated_suffix()}.py")


def write_generated_module(
    module: ModuleType,
    out_path: str | Path | None = None,
    *,
    generator: JsonSchemaGenerator | None = None,
    trace: EventSink | None = None,
) -> GeneratedModule:
    """Generate `module` and write the result when anything was generated."""

    generated = generate_module(module, generator=generator, trace=trace)
    path = Path(out_path) if out_path else default_output_path(module)
    if any(result.ok for result in generated.report.results):
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(generated.source, encoding="utf-8")
        generated.report.output_path = str(path)
    return generated

"""Structured per-declaration results of a generation run."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from sotischema.core.errors import SchemaGenerationError

UNEXPECTED_ERROR = "unexpected_error"


class DeclarationResult(BaseModel):
    """Outcome of generating one schema declaration."""

    model_config = ConfigDict(extra="forbid")

    declaration: str = Field(min_length=1)
    target: str | None = None
    ok: bool
    error_kind: str | None = None
    message: str | None = None


class GenerationReport(BaseModel):
    """All declaration outcomes for one source module."""

    model_config = ConfigDict(extra="forbid")

    module: str
    output_path: str | None = None
    results: list[DeclarationResult] = Field(default_factory=list)

    @property
    def failures(self) -> list[DeclarationResult]:
        return [result for result in self.results if not result.ok]

    @property
    def ok(self) -> bool:
        return not self.failures


def classify_exception(exc: Exception, declaration: str) -> tuple[str, str]:
    """Return the error kind and message recorded for a failed declaration.

    Errors outside the generation hierarchy (for example a ``NameError`` from
    a user module) are reported as ``unexpected_error``.
    """

    if isinstance(exc, SchemaGenerationError):
        return exc.kind, str(exc)
    return UNEXPECTED_ERROR, f"{declaration}: {type(exc).__name__}: {exc}"

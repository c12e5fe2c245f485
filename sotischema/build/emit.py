"""Render generated schemas as Python source."""

from __future__ import annotations

import json
import pprint

from sotischema.config import GENERATED_HEADER
from sotischema.core.errors import SchemaEmissionError


def render_constant(name: str, output: type, schema: dict) -> str:
    """Return one ``NAME = ...`` assignment for a generated schema."""

    if output is str:
        text = json.dumps(schema, ensure_ascii=False, separators=(",", ":"))
        return f"{name} = {text!r}\n"
    if output is dict:
        literal = pprint.pformat(schema, indent=1, width=88, sort_dicts=False)
        return f"{name} = {literal}\n"
    raise SchemaEmissionError(
        f"Failed to generate schema for {name}. Only str or dict outputs are supported."
    )


def render_module(source_module: str, constants: list[str]) -> str:
    """Return the full text of a generated schema module."""

    lines = [
        GENERATED_HEADER,
        f'"""JSON Schemas generated from {source_module}."""',
        "",
    ]
    body = "\n".join(constants)
    return "\n".join(lines) + "\n" + body

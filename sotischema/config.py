"""Generation settings shared by the build layer and the CLI."""

from __future__ import annotations

import os

JSON_SCHEMA_URI = "https://json-schema.org/draft/2020-12/schema"
DEFAULT_GENERATED_SUFFIX = "_schema"
GENERATED_HEADER = "# GENERATED CODE - DO NOT MODIFY BY HAND"


def generated_suffix() -> str:
    """Return the module-name suffix used for generated schema modules.

    The writer and the ``JsonSchema`` attribute both read it here, so a
    ``SOTISCHEMA_SUFFIX`` override applies to both sides.
    """

    return os.getenv("SOTISCHEMA_SUFFIX") or DEFAULT_GENERATED_SUFFIX


def generated_module_name(module_name: str) -> str:
    """Return the dotted name of the generated module for a source module."""

    return f"{module_name}{generated_suffix()}"

"""Shared fixtures for sotischema tests."""

from __future__ import annotations

import sys
import textwrap
from pathlib import Path

import pytest

MODELS_SOURCE = '''
from __future__ import annotations

from dataclasses import dataclass
from typing import Annotated, ClassVar

from sotischema import Default, JsonSchema, constructor_based, soti_schema


@soti_schema
@dataclass(frozen=True)
class Pet:
    #: Name the pet answers to.
    name: str
    schema: ClassVar[dict] = JsonSchema("PET_SCHEMA")
    schema_text: ClassVar[str] = JsonSchema("PET_SCHEMA_TEXT", output=str)


@soti_schema
@constructor_based
class Owner:
    def __init__(
        self,
        pets: list[Pet],
        nickname: Annotated[str, Default("")] = "",
    ) -> None:
        self.pets = pets
        self.nickname = nickname

    json_schema: ClassVar[dict] = JsonSchema("OWNER_SCHEMA")


class Undecorated:
    schema: ClassVar[dict] = JsonSchema("UNDECORATED_SCHEMA")


@soti_schema
class Broken:
    schema: ClassVar[dict] = JsonSchema("BROKEN_SCHEMA")


@soti_schema
@dataclass
class BadName:
    x: int
    schema: ClassVar[dict] = JsonSchema("not valid")
'''


@pytest.fixture
def write_module(tmp_path: Path):
    """Write a source module under tmp_path and unload it after the test."""

    created: list[str] = []

    def _write(stem: str, source: str = MODELS_SOURCE) -> Path:
        path = tmp_path / f"{stem}.py"
        path.write_text(textwrap.dedent(source), encoding="utf-8")
        created.append(stem)
        return path

    yield _write

    for stem in created:
        for name in list(sys.modules):
            if name == stem or name.startswith(f"{stem}_"):
                sys.modules.pop(name, None)

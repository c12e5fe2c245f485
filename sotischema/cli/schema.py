"""CLI entrypoint that prints the JSON Schema of a single class."""

from __future__ import annotations

import argparse
import json
from pathlib import Path

from sotischema.build import load_module
from sotischema.core.generator import generate_schema


def resolve_class(target: str) -> type:
    """Resolve ``module:ClassName`` (module may be a dotted name or a .py path)."""

    module_ref, sep, class_name = target.rpartition(":")
    if not sep or not module_ref or not class_name:
        raise ValueError(f"Expected <module>:<ClassName>, got {target!r}")
    module = load_module(module_ref)
    try:
        cls = getattr(module, class_name)
    except AttributeError:
        raise ValueError(f"{module.__name__} has no class {class_name!r}") from None
    if not isinstance(cls, type):
        raise ValueError(f"{target} is not a class")
    return cls


def main(argv: list[str] | None = None) -> int:
    """Print or write the schema for one class."""

    parser = argparse.ArgumentParser(description="Print the JSON Schema of a data class.")
    parser.add_argument("target", help="Class reference as <module>:<ClassName>.")
    parser.add_argument("--out", help="Write the schema to this path instead of stdout.")
    parser.add_argument(
        "--indent",
        type=int,
        default=2,
        help="JSON indentation (default: 2; 0 for compact output).",
    )
    args = parser.parse_args(argv)

    try:
        schema = generate_schema(resolve_class(args.target))
    except Exception as exc:  # noqa: BLE001 - CLI boundary
        print(f"ERROR: {exc}")
        return 1

    if args.indent > 0:
        text = json.dumps(schema, indent=args.indent, ensure_ascii=False)
    else:
        text = json.dumps(schema, ensure_ascii=False, separators=(",", ":"))

    if args.out:
        out_path = Path(args.out)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_text(text + "\n", encoding="utf-8")
        print(f"OK: {args.target}")
    else:
        print(text)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

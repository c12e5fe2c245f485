"""CLI entrypoint that writes the generated schema module for a source module."""

from __future__ import annotations

import argparse
from pathlib import Path

from sotischema.build import load_module, write_generated_module
from sotischema.trace import SafeTraceLogger, new_event


def main(argv: list[str] | None = None) -> int:
    """Run schema module generation from the command line."""

    parser = argparse.ArgumentParser(
        description="Generate JSON Schema constants for @soti_schema classes."
    )
    parser.add_argument("module", help="Dotted module name or path to a .py file.")
    parser.add_argument(
        "--out",
        help=(
            "Output path for the generated module "
            "(default: <module><suffix>.py beside the source, where the suffix "
            "is $SOTISCHEMA_SUFFIX or _schema)."
        ),
    )
    parser.add_argument("--report", help="Optional path for a JSON generation report.")
    parser.add_argument("--trace-path", help="Optional JSONL trace output path.")
    parser.add_argument(
        "--print",
        dest="print_source",
        action="store_true",
        help="Print the generated module source to stdout.",
    )
    args = parser.parse_args(argv)
    trace_logger = SafeTraceLogger(args.trace_path) if args.trace_path else None

    try:
        module = load_module(args.module)
        generated = write_generated_module(module, args.out, trace=trace_logger)
    except Exception as exc:  # noqa: BLE001 - CLI boundary
        print(f"ERROR: {exc}")
        if trace_logger is not None:
            trace_logger.close()
        return 1

    report = generated.report
    if trace_logger is not None:
        trace_logger.append(
            new_event(
                "final",
                "generation finished",
                data={"module": report.module, "out": report.output_path},
            )
        )
        trace_logger.close()

    if args.report:
        report_path = Path(args.report)
        report_path.parent.mkdir(parents=True, exist_ok=True)
        report_path.write_text(report.model_dump_json(indent=2), encoding="utf-8")
    if args.print_source:
        print(generated.source)

    if not report.results:
        print(f"WARNING: no schema declarations found in {report.module}")
    for result in report.results:
        if result.ok:
            print(f"OK: {result.declaration} -> {result.target}")
        else:
            print(f"ERROR: {result.message}")
    return 0 if report.ok else 1


if __name__ == "__main__":
    raise SystemExit(main())

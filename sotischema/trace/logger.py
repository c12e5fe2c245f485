"""JSONL trace of schema generation runs."""

from __future__ import annotations

import json
from pathlib import Path


class TraceLogger:
    """Writes one line per generation event to a ``.jsonl`` file.

    The file is opened for appending, so several ``sotischema-generate`` runs
    can share one trace.
    """

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self._fh = self.path.open("a", encoding="utf-8")

    def append(self, event: dict) -> None:
        line = json.dumps(event, ensure_ascii=False, separators=(",", ":"))
        self._fh.write(line + "\n")

    def close(self) -> None:
        self._fh.close()


class SafeTraceLogger:
    """Trace for the CLI: an unwritable trace file never fails generation.

    I/O errors are reported once as a ``WARNING:`` line and further events
    are dropped.
    """

    def __init__(self, path: str | Path) -> None:
        self._logger: TraceLogger | None = None
        try:
            self._logger = TraceLogger(path)
        except OSError as exc:
            print(f"WARNING: generation trace disabled: {exc}")

    def append(self, event: dict) -> None:
        if self._logger is None:
            return
        try:
            self._logger.append(event)
        except OSError as exc:
            self._logger = None
            print(f"WARNING: generation trace failed: {exc}")

    def close(self) -> None:
        if self._logger is None:
            return
        try:
            self._logger.close()
        except OSError as exc:
            print(f"WARNING: generation trace close failed: {exc}")

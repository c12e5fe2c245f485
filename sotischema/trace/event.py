"""Events recorded while generating schema modules.

Each event names the declaration it concerns (`Class.attribute`), or None
for run-level events such as `final`.
"""

from __future__ import annotations

from datetime import datetime, timezone
from uuid import uuid4

EVENT_KINDS = ("start", "generated", "failed", "final", "note")


def _utc_iso_z_now() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


def new_event(
    kind: str,
    message: str,
    *,
    declaration: str | None = None,
    data: dict | None = None,
) -> dict:
    """Build a generation event; `kind` must be one of EVENT_KINDS."""

    if kind not in EVENT_KINDS:
        raise ValueError(f"Unknown trace event kind: {kind}")
    return {
        "event_id": uuid4().hex,
        "ts": _utc_iso_z_now(),
        "kind": kind,
        "message": message,
        "declaration": declaration,
        "data": data,
    }

"""Trace logging helpers for schema generation runs."""

from sotischema.trace.event import new_event
from sotischema.trace.logger import SafeTraceLogger, TraceLogger

__all__ = ["SafeTraceLogger", "TraceLogger", "new_event"]

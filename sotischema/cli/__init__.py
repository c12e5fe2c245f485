"""CLI package for sotischema tools."""

__all__ = ["generate", "schema"]

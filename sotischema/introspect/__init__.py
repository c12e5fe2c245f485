"""Python reflection provider for the schema engine."""

from sotischema.introspect.describe import describe_hint, identify_shape, unwrap_hint
from sotischema.introspect.graph import PythonTypeGraph

__all__ = ["PythonTypeGraph", "describe_hint", "identify_shape", "unwrap_hint"]

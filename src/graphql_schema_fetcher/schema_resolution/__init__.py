"""Schema resolution exports."""

from .introspection_writer import write_introspection_result
from .schema_resolver import NO_ENDPOINT_MESSAGE, fetch_configured_schema, fetch_schema

__all__ = [
    "NO_ENDPOINT_MESSAGE",
    "fetch_configured_schema",
    "fetch_schema",
    "write_introspection_result",
]

"""Introspection query exports."""

from .local_schema import build_executable_schema, introspect_schema_source
from .query_template import INTROSPECTION_DOCUMENT, INTROSPECTION_QUERY

__all__ = [
    "INTROSPECTION_DOCUMENT",
    "INTROSPECTION_QUERY",
    "build_executable_schema",
    "introspect_schema_source",
]

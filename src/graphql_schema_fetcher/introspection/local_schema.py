"""Introspection of schemas built locally from SDL text."""

from __future__ import annotations

from typing import Any

from graphql import GraphQLError, GraphQLSchema, build_schema, graphql

from graphql_schema_fetcher.resolution_errors import GraphQLExecutionError, SchemaParseError

from .query_template import INTROSPECTION_QUERY


def build_executable_schema(schema_source: str) -> GraphQLSchema:
    """Build an in-memory schema from Schema Definition Language text."""
    try:
        return build_schema(schema_source)
    except (GraphQLError, TypeError) as exc:
        raise SchemaParseError(str(exc)) from exc


async def introspect_schema_source(schema_source: str) -> dict[str, Any]:
    """Execute the introspection query against SDL text and return `__schema`.

    Raises:
      SchemaParseError: If the SDL cannot be built into a schema.
      GraphQLExecutionError: If executing the introspection query reports errors.
    """
    schema = build_executable_schema(schema_source)
    result = await graphql(schema, INTROSPECTION_QUERY)
    if result.errors:
        raise GraphQLExecutionError.from_errors(result.errors)
    if not result.data:
        raise GraphQLExecutionError("Introspection of local schema returned no data.")
    return result.data["__schema"]

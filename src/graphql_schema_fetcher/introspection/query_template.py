"""Fixed introspection query sent to live endpoints and executed locally."""

from __future__ import annotations

from graphql import DocumentNode, get_introspection_query, parse

INTROSPECTION_QUERY: str = get_introspection_query(descriptions=True)
INTROSPECTION_DOCUMENT: DocumentNode = parse(INTROSPECTION_QUERY)

"""Remote HTTP introspection fetcher."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from graphql_schema_fetcher.introspection import INTROSPECTION_DOCUMENT
from graphql_schema_fetcher.resolution_errors import GraphQLExecutionError

from .graphql_link import GraphQLLink, HttpGraphQLLink

_LOGGER = logging.getLogger(__name__)


def merge_headers(headers: Iterable[Mapping[str, str]] | None) -> dict[str, str]:
    """Merge header mappings in order; later entries win on key collisions."""
    merged: dict[str, str] = {}
    for mapping in headers or ():
        merged.update(mapping)
    return merged


async def fetch_schema_from_url(
    url: str,
    headers: Iterable[Mapping[str, str]] | None = None,
    *,
    link: GraphQLLink | None = None,
) -> Any:
    """Run the introspection query against a live endpoint and return `__schema`.

    Errors reported by the endpoint are raised even when partial data is present.
    """
    request_headers = merge_headers(headers)
    active_link = link or HttpGraphQLLink(url)
    _LOGGER.debug("Fetching schema from %s with %d header(s)", url, len(request_headers))
    response = await active_link.execute(INTROSPECTION_DOCUMENT, headers=request_headers)
    if response.errors:
        raise GraphQLExecutionError.from_errors(response.errors)
    if not response.data or response.data.get("__schema") is None:
        raise GraphQLExecutionError(f"Introspection response from {url} did not contain a schema")
    return response.data["__schema"]

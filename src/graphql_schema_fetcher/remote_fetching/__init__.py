"""Remote schema fetching exports."""

from .endpoint_fetcher import fetch_schema_from_url, merge_headers
from .graphql_link import GraphQLLink, GraphQLResponse, HttpGraphQLLink, LinkFactory
from .registry_fetcher import (
    REGISTRY_ERROR_MESSAGE,
    SCHEMA_QUERY,
    fetch_schema_from_registry,
    fetch_schema_from_registry_settings,
    service_id_from_api_key,
)

__all__ = [
    "GraphQLLink",
    "GraphQLResponse",
    "HttpGraphQLLink",
    "LinkFactory",
    "REGISTRY_ERROR_MESSAGE",
    "SCHEMA_QUERY",
    "fetch_schema_from_registry",
    "fetch_schema_from_registry_settings",
    "fetch_schema_from_url",
    "merge_headers",
    "service_id_from_api_key",
]

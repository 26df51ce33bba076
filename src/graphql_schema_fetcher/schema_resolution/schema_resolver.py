"""Schema resolution dispatch service."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from graphql_schema_fetcher.configuration.runtime_settings import (
    EndpointConfig,
    FetchConfiguration,
)
from graphql_schema_fetcher.local_documents import from_file
from graphql_schema_fetcher.remote_fetching import (
    HttpGraphQLLink,
    LinkFactory,
    fetch_schema_from_registry_settings,
    fetch_schema_from_url,
)
from graphql_schema_fetcher.resolution_errors import ConfigError

_LOGGER = logging.getLogger(__name__)

NO_ENDPOINT_MESSAGE = "No endpoint provided when fetching schema"


async def fetch_schema(
    endpoint: EndpointConfig, *, link_factory: LinkFactory | None = None
) -> Any:
    """Resolve the endpoint's schema from a local file or a live endpoint.

    An existing filesystem entry always wins over a network request.
    """
    url = endpoint.url
    if not url:
        raise ConfigError(NO_ENDPOINT_MESSAGE)
    if Path(url).exists():
        _LOGGER.debug("Resolving schema from local file %s", url)
        return await from_file(url)

    create_link = link_factory or HttpGraphQLLink
    _LOGGER.debug("Resolving schema from remote endpoint %s", url)
    return await fetch_schema_from_url(url, endpoint.headers, link=create_link(url))


async def fetch_configured_schema(
    configuration: FetchConfiguration, *, link_factory: LinkFactory | None = None
) -> Any:
    """Resolve the schema described by a loaded configuration file."""
    if configuration.endpoint is not None and configuration.endpoint.url:
        return await fetch_schema(configuration.endpoint, link_factory=link_factory)
    if configuration.registry is not None:
        settings = configuration.registry
        link = link_factory(settings.url) if link_factory else None
        return await fetch_schema_from_registry_settings(settings, link=link)
    raise ConfigError(NO_ENDPOINT_MESSAGE)

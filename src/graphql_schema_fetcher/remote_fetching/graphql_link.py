"""HTTP link used to execute one GraphQL document against one endpoint."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any, Protocol

import aiohttp
from gql import Client
from gql.transport.aiohttp import AIOHTTPTransport
from gql.transport.exceptions import TransportError, TransportQueryError
from graphql import DocumentNode

from graphql_schema_fetcher.resolution_errors import SchemaFetchError

_LOGGER = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 30


@dataclass(frozen=True)
class GraphQLResponse:
    """Data and errors returned by one GraphQL execution."""

    data: Mapping[str, Any] | None
    errors: tuple[Mapping[str, Any], ...] = ()


class GraphQLLink(Protocol):  # pylint: disable=too-few-public-methods
    """Protocol implemented by both real and fake links."""

    async def execute(
        self,
        document: DocumentNode,
        *,
        variables: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> GraphQLResponse: ...


LinkFactory = Callable[[str], GraphQLLink]


class HttpGraphQLLink:  # pylint: disable=too-few-public-methods
    """Real link implementation using the gql client over aiohttp."""

    def __init__(self, url: str, *, timeout_seconds: int = DEFAULT_TIMEOUT_SECONDS) -> None:
        self._url = url
        self._timeout_seconds = timeout_seconds

    async def execute(
        self,
        document: DocumentNode,
        *,
        variables: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> GraphQLResponse:
        transport = AIOHTTPTransport(
            url=self._url,
            headers=dict(headers or {}),
            timeout=self._timeout_seconds,
        )
        client = Client(
            transport=transport,
            fetch_schema_from_transport=False,
            execute_timeout=self._timeout_seconds,
        )
        _LOGGER.debug("Executing GraphQL document against %s", self._url)
        try:
            async with client as session:
                data = await session.execute(
                    document,
                    variable_values=dict(variables) if variables else None,
                )
        except TransportQueryError as exc:
            return GraphQLResponse(data=exc.data, errors=tuple(exc.errors or ()))
        except (TransportError, aiohttp.ClientError, TimeoutError) as exc:
            raise SchemaFetchError(f"Unable to reach GraphQL endpoint {self._url}: {exc}") from exc
        return GraphQLResponse(data=data)

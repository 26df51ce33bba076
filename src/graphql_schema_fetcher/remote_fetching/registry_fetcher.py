"""Schema registry fetcher."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from graphql import DocumentNode, parse

from graphql_schema_fetcher.configuration.runtime_settings import (
    DEFAULT_REGISTRY_TAG,
    DEFAULT_REGISTRY_URL,
    RegistrySettings,
)
from graphql_schema_fetcher.resolution_errors import ConfigError, RegistryError

from .graphql_link import GraphQLLink, HttpGraphQLLink

_LOGGER = logging.getLogger(__name__)

REGISTRY_ERROR_MESSAGE = "Unable to get schema from schema registry"

SCHEMA_QUERY = """
query GetSchemaByTag($id: ID!, $tag: String!) {
  service(id: $id) {
    schema(tag: $tag) {
      __schema: introspection {
        queryType {
          name
        }
        mutationType {
          name
        }
        subscriptionType {
          name
        }
        types(filter: { includeBuiltInTypes: true }) {
          ...IntrospectionFullType
        }
        directives {
          name
          description
          locations
          args {
            ...IntrospectionInputValue
          }
        }
      }
    }
  }
}

fragment IntrospectionFullType on IntrospectionType {
  kind
  name
  description
  fields {
    name
    description
    args {
      ...IntrospectionInputValue
    }
    type {
      ...IntrospectionTypeRef
    }
    isDeprecated
    deprecationReason
  }
  inputFields {
    ...IntrospectionInputValue
  }
  interfaces {
    ...IntrospectionTypeRef
  }
  enumValues(includeDeprecated: true) {
    name
    description
    isDeprecated
    deprecationReason
  }
  possibleTypes {
    ...IntrospectionTypeRef
  }
}

fragment IntrospectionInputValue on IntrospectionInputValue {
  name
  description
  type {
    ...IntrospectionTypeRef
  }
  defaultValue
}

fragment IntrospectionTypeRef on IntrospectionType {
  kind
  name
  ofType {
    kind
    name
    ofType {
      kind
      name
      ofType {
        kind
        name
        ofType {
          kind
          name
          ofType {
            kind
            name
            ofType {
              kind
              name
              ofType {
                kind
                name
              }
            }
          }
        }
      }
    }
  }
}
"""

SCHEMA_QUERY_DOCUMENT: DocumentNode = parse(SCHEMA_QUERY)


def service_id_from_api_key(api_key: str) -> str:
    """Return the registry service identifier encoded in `service:<id>:<secret>` keys."""
    parts = api_key.split(":")
    if len(parts) < 2 or not parts[1]:
        raise ConfigError("API key does not contain a registry service identifier.")
    return parts[1]


async def fetch_schema_from_registry(
    api_key: str,
    *,
    url: str = DEFAULT_REGISTRY_URL,
    tag: str = DEFAULT_REGISTRY_TAG,
    link: GraphQLLink | None = None,
) -> Any:
    """Query the schema registry for the schema tagged `tag` and return `__schema`.

    Registry error messages are not forwarded; every missing-schema outcome
    raises the same `RegistryError`.
    """
    variables = {"id": service_id_from_api_key(api_key), "tag": tag}
    active_link = link or HttpGraphQLLink(url)
    _LOGGER.debug("Fetching schema tag '%s' for service '%s'", tag, variables["id"])
    response = await active_link.execute(
        SCHEMA_QUERY_DOCUMENT,
        variables=variables,
        headers={"x-api-key": api_key},
    )
    if response.errors:
        _LOGGER.debug("Schema registry reported %d error(s)", len(response.errors))

    schema = _registry_schema(response.data)
    if schema is None:
        raise RegistryError(REGISTRY_ERROR_MESSAGE)
    return schema


async def fetch_schema_from_registry_settings(
    settings: RegistrySettings, *, link: GraphQLLink | None = None
) -> Any:
    """Fetch the registry schema described by loaded registry settings."""
    return await fetch_schema_from_registry(
        settings.api_key, url=settings.url, tag=settings.tag, link=link
    )


def _registry_schema(data: Mapping[str, Any] | None) -> Any:
    node: Any = data
    for key in ("service", "schema", "__schema"):
        if not isinstance(node, Mapping):
            return None
        node = node.get(key)
    return node

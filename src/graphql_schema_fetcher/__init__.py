"""GraphQL schema acquisition from local files, live endpoints, and schema registries."""

import logging

from .configuration import EndpointConfig, RegistrySettings, load_configuration
from .local_documents import from_file
from .remote_fetching import fetch_schema_from_registry, fetch_schema_from_url
from .resolution_errors import (
    ConfigError,
    FileReadError,
    GraphQLExecutionError,
    RegistryError,
    SchemaFetchError,
    SchemaParseError,
    SchemaResolutionError,
    UnsupportedFormatError,
)
from .schema_resolution import fetch_configured_schema, fetch_schema, write_introspection_result

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "ConfigError",
    "EndpointConfig",
    "FileReadError",
    "GraphQLExecutionError",
    "RegistryError",
    "RegistrySettings",
    "SchemaFetchError",
    "SchemaParseError",
    "SchemaResolutionError",
    "UnsupportedFormatError",
    "fetch_configured_schema",
    "fetch_schema",
    "fetch_schema_from_registry",
    "fetch_schema_from_url",
    "from_file",
    "load_configuration",
    "write_introspection_result",
]

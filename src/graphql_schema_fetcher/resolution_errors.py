"""Error kinds raised while resolving a GraphQL schema."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any


class SchemaResolutionError(Exception):
    """Base class for every schema resolution failure."""


class ConfigError(SchemaResolutionError):
    """Raised when the endpoint configuration is missing or malformed."""


class FileReadError(SchemaResolutionError):
    """Raised when a local schema file cannot be read."""


class SchemaParseError(SchemaResolutionError):
    """Raised when local schema contents cannot be parsed."""


class UnsupportedFormatError(SchemaParseError):
    """Raised when a local file suffix maps to no known source format."""


class GraphQLExecutionError(SchemaResolutionError):
    """Raised when an introspection execution reports errors."""

    @classmethod
    def from_errors(cls, errors: Iterable[Any]) -> GraphQLExecutionError:
        """Join every error message with newlines."""
        return cls("\n".join(_error_message(error) for error in errors))


class RegistryError(SchemaResolutionError):
    """Raised when the schema registry does not return a schema."""


class SchemaFetchError(SchemaResolutionError):
    """Raised when a GraphQL endpoint cannot be reached."""


def _error_message(error: Any) -> str:
    if isinstance(error, Mapping):
        return str(error.get("message", error))
    message = getattr(error, "message", None)
    return str(message) if message is not None else str(error)

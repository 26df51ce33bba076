"""Configuration domain entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

DEFAULT_REGISTRY_URL = "https://engine-graphql.apollographql.com/api/graphql"
DEFAULT_REGISTRY_TAG = "current"


@dataclass(frozen=True)
class EndpointConfig:
    """Where and how to reach a schema.

    `url` may be a filesystem path, an HTTP(S) URL, or absent.
    """

    url: str | None
    headers: tuple[Mapping[str, str], ...] = ()


@dataclass(frozen=True)
class RegistrySettings:
    """Schema registry connectivity configuration."""

    api_key: str
    url: str = DEFAULT_REGISTRY_URL
    tag: str = DEFAULT_REGISTRY_TAG


@dataclass(frozen=True)
class FetchConfiguration:
    """Top-level configuration aggregate."""

    path: Path
    endpoint: EndpointConfig | None
    registry: RegistrySettings | None

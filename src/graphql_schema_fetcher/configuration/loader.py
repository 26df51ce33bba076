"""Configuration loader service."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

import yaml

from graphql_schema_fetcher.resolution_errors import ConfigError

from .runtime_settings import (
    DEFAULT_REGISTRY_TAG,
    DEFAULT_REGISTRY_URL,
    EndpointConfig,
    FetchConfiguration,
    RegistrySettings,
)

_REMOTE_SCHEMES = ("http://", "https://")


def load_configuration(config_path: Path | str) -> FetchConfiguration:
    """Load and validate the schema fetch configuration file."""
    path = Path(config_path)
    if not path.exists():
        raise ConfigError(f"Configuration file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigError("Configuration root must be a mapping.")

    endpoint_section = parsed.get("endpoint")
    registry_section = parsed.get("registry")
    if endpoint_section is None and registry_section is None:
        raise ConfigError("Configuration requires an 'endpoint' or 'registry' section.")

    endpoint = (
        None
        if endpoint_section is None
        else _parse_endpoint_section(endpoint_section, path.parent)
    )
    registry = None if registry_section is None else _parse_registry_section(registry_section)

    return FetchConfiguration(path=path, endpoint=endpoint, registry=registry)


def _parse_endpoint_section(value: Any, base_path: Path) -> EndpointConfig:
    if isinstance(value, str):
        url = _require_non_empty_string(value, "endpoint")
        return EndpointConfig(url=_resolve_url(base_path, url))
    section = _require_mapping(value, "endpoint")
    url = _optional_string(section.get("url"), "endpoint.url")
    headers = _normalize_headers(section.get("headers"))
    return EndpointConfig(
        url=_resolve_url(base_path, url) if url else None,
        headers=headers,
    )


def _parse_registry_section(value: Any) -> RegistrySettings:
    section = _require_mapping(value, "registry")
    api_key = _require_non_empty_string(section.get("api_key"), "registry.api_key")
    url = _require_non_empty_string(section.get("url", DEFAULT_REGISTRY_URL), "registry.url")
    tag = _require_non_empty_string(section.get("tag", DEFAULT_REGISTRY_TAG), "registry.tag")
    return RegistrySettings(api_key=api_key, url=url, tag=tag)


def _normalize_headers(value: Any) -> tuple[Mapping[str, str], ...]:
    if value is None:
        return ()
    if isinstance(value, Mapping):
        return (_normalize_header_mapping(value),)
    if isinstance(value, Sequence) and not isinstance(value, str):
        return tuple(_normalize_header_mapping(item) for item in value)
    raise ConfigError("endpoint.headers must be a mapping or list of mappings.")


def _normalize_header_mapping(value: Any) -> Mapping[str, str]:
    if not isinstance(value, Mapping):
        raise ConfigError("endpoint.headers entries must be mappings.")
    normalized: dict[str, str] = {}
    for key, header_value in value.items():
        if not isinstance(key, str) or not isinstance(header_value, str):
            raise ConfigError("endpoint.headers keys and values must be strings.")
        normalized[key] = header_value
    return normalized


def _resolve_url(base_path: Path, raw_url: str) -> str:
    """Resolve relative schema file paths against the configuration directory."""
    if raw_url.lower().startswith(_REMOTE_SCHEMES):
        return raw_url
    candidate = Path(raw_url)
    if candidate.is_absolute():
        return raw_url
    relative = (base_path / candidate).resolve()
    return str(relative) if relative.exists() else raw_url


def _require_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ConfigError(f"Configuration section '{section_name}' must be a mapping.")
    return value


def _require_non_empty_string(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise ConfigError(f"{field_name} must be a string.")
    stripped = value.strip()
    if not stripped:
        raise ConfigError(f"{field_name} must not be empty.")
    return stripped


def _optional_string(value: Any, field_name: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigError(f"{field_name} must be a string.")
    stripped = value.strip()
    return stripped or None

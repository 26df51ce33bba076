"""Configuration domain exports."""

from .loader import load_configuration
from .runtime_settings import (
    DEFAULT_REGISTRY_TAG,
    DEFAULT_REGISTRY_URL,
    EndpointConfig,
    FetchConfiguration,
    RegistrySettings,
)

__all__ = [
    "DEFAULT_REGISTRY_TAG",
    "DEFAULT_REGISTRY_URL",
    "EndpointConfig",
    "FetchConfiguration",
    "RegistrySettings",
    "load_configuration",
]

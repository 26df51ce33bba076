"""Shapes of JSON introspection dumps accepted from local files."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class IntrospectionEnvelope:
    """A full introspection response: `{"data": {"__schema": ...}}`."""

    schema: Any


@dataclass(frozen=True)
class SchemaWrapper:
    """An introspection result without the response envelope: `{"__schema": ...}`."""

    schema: Any


@dataclass(frozen=True)
class RawSchema:
    """A bare `__schema` payload, returned unmodified."""

    schema: Any


IntrospectionPayload = IntrospectionEnvelope | SchemaWrapper | RawSchema


def decode_introspection_payload(parsed: Any) -> IntrospectionPayload:
    """Classify parsed JSON into the first matching payload shape."""
    if isinstance(parsed, Mapping):
        data = parsed.get("data")
        if isinstance(data, Mapping) and "__schema" in data:
            return IntrospectionEnvelope(schema=data["__schema"])
        if "__schema" in parsed:
            return SchemaWrapper(schema=parsed["__schema"])
    return RawSchema(schema=parsed)

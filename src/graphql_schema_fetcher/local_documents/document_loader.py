"""Local-document loading service."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from graphql_schema_fetcher.introspection import introspect_schema_source
from graphql_schema_fetcher.resolution_errors import (
    FileReadError,
    GraphQLExecutionError,
    SchemaParseError,
)

from .embedded_documents import extract_document_from_javascript
from .introspection_payloads import decode_introspection_payload
from .source_formats import SourceFormat, resolve_source_format

_LOGGER = logging.getLogger(__name__)


async def from_file(file: Path | str) -> Any:
    """Load an introspection `__schema` value from a local schema file.

    Args:
      file: Path to a JSON introspection dump, an SDL file, or a JS/TS source
        file with an embedded `gql` document.

    Returns:
      The `__schema` payload, or the parsed JSON value itself for bare dumps.

    Raises:
      FileReadError: If the file cannot be read.
      UnsupportedFormatError: If the file suffix is not a known schema format.
      SchemaParseError: If the contents cannot be parsed.
      GraphQLExecutionError: If introspecting a locally built schema fails.
    """
    path = Path(file)
    try:
        contents = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise FileReadError(f"Unable to read file {file}. {exc}") from exc

    source_format = resolve_source_format(path)
    _LOGGER.debug("Loading %s schema document from %s", source_format.value, path)
    try:
        match source_format:
            case SourceFormat.JSON:
                return _load_json_document(contents)
            case SourceFormat.SDL:
                return await introspect_schema_source(contents)
            case SourceFormat.EMBEDDED:
                return await introspect_schema_source(_extract_embedded_document(contents))
    except SchemaParseError as exc:
        raise SchemaParseError(f"Unable to read file {file}. {exc}") from exc
    except GraphQLExecutionError as exc:
        raise GraphQLExecutionError(f"Unable to read file {file}. {exc}") from exc


def _load_json_document(contents: str) -> Any:
    try:
        parsed = json.loads(contents)
    except json.JSONDecodeError as exc:
        raise SchemaParseError(f"Invalid JSON introspection result: {exc}") from exc
    return decode_introspection_payload(parsed).schema


def _extract_embedded_document(contents: str) -> str:
    document = extract_document_from_javascript(contents)
    if document is None:
        raise SchemaParseError("No embedded gql document found.")
    return document

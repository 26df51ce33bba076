"""Source format resolution tests."""

from __future__ import annotations

import pytest
from graphql_schema_fetcher.local_documents.source_formats import (
    SourceFormat,
    resolve_source_format,
)
from graphql_schema_fetcher.resolution_errors import SchemaParseError, UnsupportedFormatError


@pytest.mark.parametrize(
    ("file_name", "expected"),
    [
        ("schema.json", SourceFormat.JSON),
        ("schema.graphql", SourceFormat.SDL),
        ("schema.graphqls", SourceFormat.SDL),
        ("schema.gql", SourceFormat.SDL),
        ("src/typeDefs.ts", SourceFormat.EMBEDDED),
        ("src/typeDefs.tsx", SourceFormat.EMBEDDED),
        ("src/typeDefs.js", SourceFormat.EMBEDDED),
        ("src/typeDefs.jsx", SourceFormat.EMBEDDED),
    ],
)
def test_resolves_known_suffixes(file_name: str, expected: SourceFormat) -> None:
    assert resolve_source_format(file_name) is expected


@pytest.mark.parametrize("file_name", ["schema.yaml", "schema.JSON", "schema"])
def test_unknown_suffix_raises_unsupported_format_error(file_name: str) -> None:
    with pytest.raises(UnsupportedFormatError, match="Unsupported schema file extension"):
        resolve_source_format(file_name)


def test_unsupported_format_error_is_a_parse_error() -> None:
    with pytest.raises(SchemaParseError):
        resolve_source_format("schema.xml")

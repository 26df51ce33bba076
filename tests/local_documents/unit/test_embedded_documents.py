"""Embedded GraphQL document extraction tests."""

from __future__ import annotations

from graphql_schema_fetcher.local_documents.embedded_documents import (
    extract_document_from_javascript,
)


def test_extracts_single_gql_literal() -> None:
    source = 'export const typeDefs = gql`\n  type Query { hello: String }\n`;\n'

    assert extract_document_from_javascript(source) == "\n  type Query { hello: String }\n"


def test_joins_multiple_literals_with_newlines() -> None:
    source = (
        "const a = gql`type Query { a: String }`;\n"
        "const b = gql `type Extra { b: Int }`;\n"
    )

    assert (
        extract_document_from_javascript(source)
        == "type Query { a: String }\ntype Extra { b: Int }"
    )


def test_strips_template_interpolations() -> None:
    source = "const doc = gql`type Query { ${fields} ok: Boolean }`;"

    assert extract_document_from_javascript(source) == "type Query {  ok: Boolean }"


def test_returns_none_when_no_literal_is_present() -> None:
    assert extract_document_from_javascript("const x = `type Query { a: String }`;") is None


def test_supports_custom_tag_names() -> None:
    source = "const doc = graphql`type Query { a: String }`;"

    assert extract_document_from_javascript(source, tag_name="graphql") == (
        "type Query { a: String }"
    )

"""Extraction of GraphQL documents embedded in JavaScript and TypeScript sources."""

from __future__ import annotations

import re

DEFAULT_TAG_NAME = "gql"

_INTERPOLATION = re.compile(r"\$\{[^}]*\}")


def extract_document_from_javascript(
    source: str, *, tag_name: str = DEFAULT_TAG_NAME
) -> str | None:
    """Return every tagged template literal joined by newlines, or None if there is none.

    `${...}` interpolations are dropped from each literal.
    """
    pattern = re.compile(rf"{re.escape(tag_name)}\s*`([^`]*)`", re.MULTILINE)
    documents = [_INTERPOLATION.sub("", match.group(1)) for match in pattern.finditer(source)]
    document = "\n".join(documents)
    return document or None

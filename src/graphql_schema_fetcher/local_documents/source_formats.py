"""Local schema file formats."""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from graphql_schema_fetcher.resolution_errors import UnsupportedFormatError


class SourceFormat(Enum):
    """Kind of schema document stored in a local file."""

    JSON = "json"
    SDL = "sdl"
    EMBEDDED = "embedded"


_FORMAT_BY_SUFFIX: dict[str, SourceFormat] = {
    ".json": SourceFormat.JSON,
    ".graphql": SourceFormat.SDL,
    ".graphqls": SourceFormat.SDL,
    ".gql": SourceFormat.SDL,
    ".ts": SourceFormat.EMBEDDED,
    ".tsx": SourceFormat.EMBEDDED,
    ".js": SourceFormat.EMBEDDED,
    ".jsx": SourceFormat.EMBEDDED,
}

SUPPORTED_SUFFIXES: tuple[str, ...] = tuple(_FORMAT_BY_SUFFIX)


def resolve_source_format(path: Path | str) -> SourceFormat:
    """Return the source format for a file path based on its suffix."""
    suffix = Path(path).suffix
    try:
        return _FORMAT_BY_SUFFIX[suffix]
    except KeyError:
        supported = ", ".join(SUPPORTED_SUFFIXES)
        raise UnsupportedFormatError(
            f"Unsupported schema file extension '{suffix}' for {path}. Expected one of: {supported}"
        ) from None

"""Boundary tests for local_documents internal dependencies."""

from __future__ import annotations

from pathlib import Path


def _project_root() -> Path:
    return Path(__file__).resolve().parents[3]


def test_local_loader_does_not_import_network_modules() -> None:
    local_dir = _project_root() / "src" / "graphql_schema_fetcher" / "local_documents"
    forbidden_import_fragments = (
        "graphql_schema_fetcher.remote_fetching",
        "gql.transport",
        "aiohttp",
    )

    for module_path in sorted(local_dir.glob("*.py")):
        text = module_path.read_text(encoding="utf-8")
        for fragment in forbidden_import_fragments:
            assert fragment not in text, f"Forbidden dependency in {module_path}: {fragment}"

"""Introspection result writer."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any


def write_introspection_result(schema: Any, output_path: Path | str) -> Path:
    """Write `{"__schema": schema}` as JSON to the requested output path.

    Args:
      schema: The introspection `__schema` payload.
      output_path: Destination file path; parent directories are created.

    Returns:
      The resolved destination path.

    Raises:
      OSError: If writing the file fails.
    """
    destination = Path(output_path)
    destination.parent.mkdir(parents=True, exist_ok=True)
    destination.write_text(
        json.dumps({"__schema": schema}, indent=2, ensure_ascii=False) + "\n",
        encoding="utf-8",
    )
    return destination.resolve()

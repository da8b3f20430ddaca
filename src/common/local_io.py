"""Local file I/O utilities."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


def write_json_snapshot(payload: Any, path: str | Path) -> Path:
    """
    Write a JSON document, replacing whatever was at `path` before.

    Missing parent directories are created. The document is written to a
    temporary sibling first and moved into place, so readers see either the
    previous snapshot or the new one. Any OSError propagates to the caller.

    Args:
        payload: JSON-serializable object (list or dict)
        path: Destination file path

    Returns:
        Path to the written file.
    """
    filepath = Path(path)
    filepath.parent.mkdir(parents=True, exist_ok=True)

    tmp_path = filepath.with_name(f".{filepath.name}.tmp")
    with tmp_path.open("w", encoding="utf-8") as f:
        json.dump(payload, f, indent=2, ensure_ascii=False)
        f.write("\n")
    os.replace(tmp_path, filepath)

    logger.info("Wrote snapshot to %s", filepath)
    return filepath

"""JSON utilities with Path support."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


def _json_default(obj: Any) -> Any:
    """JSON serializer for types not supported by default.

    Handles:
    - pathlib.Path -> str
    - pydantic models -> dict (by wire alias)
    """
    if isinstance(obj, Path):
        return str(obj)

    model_dump = getattr(obj, "model_dump", None)
    if callable(model_dump):
        return model_dump(by_alias=True, mode="json")

    return str(obj)


def dumps(obj: Any, *, indent: int | None = None) -> str:
    """Serialize object to a JSON string."""
    return json.dumps(obj, indent=indent, ensure_ascii=False, default=_json_default)


def read_json(path: str | Path) -> dict[str, Any]:
    """Read and parse JSON file.

    Args:
        path: Input file path

    Returns:
        Parsed JSON as dictionary
    """
    data: Any = json.loads(Path(path).read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError(f"Expected JSON object, got {type(data).__name__}")
    return data

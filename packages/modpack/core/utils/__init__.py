"""Shared utilities for modpack."""

from modpack.core.utils.json import read_json
from modpack.core.utils.style import symbol

__all__ = [
    "read_json",
    "symbol",
]

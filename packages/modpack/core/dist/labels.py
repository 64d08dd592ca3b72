"""Decoding of structured label values."""

from __future__ import annotations

import logging
from typing import Protocol, TypeVar

from pydantic import TypeAdapter, ValidationError

from modpack.core.errors import LabelDecodeError, LabelNotFoundError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Labeled(Protocol):
    """Anything that exposes string labels by name."""

    def label(self, name: str) -> str | None:
        """Return the raw label value, or None/"" if the label is not set."""
        ...


def get_label(labeled: Labeled, name: str, target: type[T]) -> T | None:
    """Decode a JSON label into ``target``.

    Args:
        labeled: Label source (usually a Package)
        name: Label name
        target: Type to decode into (model class or typing alias)

    Returns:
        Decoded value, or None if the label is not set

    Raises:
        LabelDecodeError: If the label is set but cannot be decoded
    """
    # Transport errors from the label source propagate as-is
    raw = labeled.label(name)
    if not raw:
        logger.debug(f"Label {name} not set")
        return None

    try:
        return TypeAdapter(target).validate_json(raw)
    except ValidationError as e:
        raise LabelDecodeError(name, str(e)) from e


def require_label(labeled: Labeled, name: str, target: type[T]) -> T:
    """Decode a JSON label that must be present.

    Raises:
        LabelNotFoundError: If the label is not set
        LabelDecodeError: If the label is set but cannot be decoded
    """
    value = get_label(labeled, name, target)
    if value is None:
        raise LabelNotFoundError(name)
    return value

"""Deferred access to layer content."""

from __future__ import annotations

from collections.abc import Callable
from typing import BinaryIO, Protocol


class Blob(Protocol):
    """Re-openable source of layer content."""

    def open(self) -> BinaryIO:
        """Open a fresh stream over the content. Caller closes it."""
        ...


class OpenerBlob:
    """Blob backed by a zero-argument opener.

    Nothing is read until ``open()`` is called, and every call invokes the
    opener again. Streams are not cached or tracked.
    """

    def __init__(self, opener: Callable[[], BinaryIO]) -> None:
        self._opener = opener

    def open(self) -> BinaryIO:
        return self._opener()

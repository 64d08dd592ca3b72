"""In-memory package for tests and examples."""

from __future__ import annotations

from io import BytesIO
from typing import BinaryIO

from modpack.core.errors import LayerNotFoundError


class FakePackage:
    """
    In-memory Package implementation.

    Labels and layers live in dicts. Every ``get_layer`` call is counted so
    tests can assert when (and how often) layer content is read.

    Example:
        >>> pkg = FakePackage(labels={"a": "1"}, layers={"sha256:aaa": b"tar"})
        >>> pkg.label("a")
        '1'
        >>> pkg.get_layer("sha256:aaa").read()
        b'tar'
    """

    def __init__(
        self,
        labels: dict[str, str] | None = None,
        layers: dict[str, bytes] | None = None,
        layer_error: Exception | None = None,
        label_error: Exception | None = None,
    ) -> None:
        """Initialize FakePackage.

        Args:
            labels: Label name to raw value
            layers: Diff ID to layer bytes
            layer_error: If set, every get_layer call raises it
            label_error: If set, every label call raises it
        """
        self.labels = dict(labels or {})
        self.layers = dict(layers or {})
        self.layer_error = layer_error
        self.label_error = label_error
        self.layer_calls: list[str] = []

    def label(self, name: str) -> str | None:
        if self.label_error is not None:
            raise self.label_error
        return self.labels.get(name)

    def get_layer(self, diff_id: str) -> BinaryIO:
        self.layer_calls.append(diff_id)
        if self.layer_error is not None:
            raise self.layer_error
        if diff_id not in self.layers:
            raise LayerNotFoundError(diff_id)
        return BytesIO(self.layers[diff_id])

"""Build modules: a descriptor bound to its layer blob."""

from __future__ import annotations

from dataclasses import dataclass
from typing import BinaryIO, Protocol

from modpack.core.buildpack.blob import Blob
from modpack.core.dist.models import BuildpackDescriptor, ExtensionDescriptor, ModuleDescriptor


class BuildModule(Protocol):
    """Installable module extracted from a package."""

    @property
    def descriptor(self) -> ModuleDescriptor: ...

    def open(self) -> BinaryIO:
        """Open the module's layer content. Caller closes the stream."""
        ...


@dataclass(frozen=True)
class Buildpack:
    """Buildpack with lazily opened layer content."""

    descriptor: BuildpackDescriptor
    blob: Blob

    def open(self) -> BinaryIO:
        return self.blob.open()


@dataclass(frozen=True)
class Extension:
    """Image extension with lazily opened layer content."""

    descriptor: ExtensionDescriptor
    blob: Blob

    def open(self) -> BinaryIO:
        return self.blob.open()


def from_blob(descriptor: ModuleDescriptor, blob: Blob) -> BuildModule:
    """Bind a descriptor and blob into the matching module variant.

    Raises:
        TypeError: If the descriptor is neither a buildpack nor an extension
    """
    if isinstance(descriptor, BuildpackDescriptor):
        return Buildpack(descriptor=descriptor, blob=blob)
    if isinstance(descriptor, ExtensionDescriptor):
        return Extension(descriptor=descriptor, blob=blob)
    raise TypeError(f"Unsupported module descriptor: {type(descriptor).__name__}")

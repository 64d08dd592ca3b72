"""Package abstraction: labels plus content-addressed layers.

Example:
    >>> from modpack.core.image import LayoutPackage
    >>> pkg = LayoutPackage("./out/my-buildpack")
    >>> raw = pkg.label("io.buildpacks.buildpack.layers")
    >>> with pkg.get_layer("sha256:...") as layer:
    ...     data = layer.read()
"""

from .impl_fake import FakePackage
from .impl_layout import LayoutPackage
from .models import Descriptor, ImageConfig, ImageIndex, ImageManifest
from .protocols import Package

__all__ = [
    # Protocols
    "Package",
    # Implementations
    "FakePackage",
    "LayoutPackage",
    # OCI documents
    "Descriptor",
    "ImageConfig",
    "ImageIndex",
    "ImageManifest",
]

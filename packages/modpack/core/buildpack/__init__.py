"""Extraction of buildpacks and extensions from module packages.

Example:
    >>> from modpack.core.buildpack import extract_buildpacks
    >>> from modpack.core.image import LayoutPackage
    >>> main, deps = extract_buildpacks(LayoutPackage("./my-buildpack"))
    >>> with main.open() as layer:
    ...     data = layer.read()
"""

from modpack.core.buildpack.blob import Blob, OpenerBlob
from modpack.core.buildpack.metadata import METADATA_LABEL, Metadata
from modpack.core.buildpack.module import Buildpack, BuildModule, Extension, from_blob
from modpack.core.buildpack.package import (
    LayerOpener,
    extract_all_extensions,
    extract_buildpacks,
    extract_extensions,
)

__all__ = [
    # Extraction
    "extract_buildpacks",
    "extract_extensions",
    "extract_all_extensions",
    # Modules
    "BuildModule",
    "Buildpack",
    "Extension",
    "from_blob",
    # Blobs
    "Blob",
    "OpenerBlob",
    "LayerOpener",
    # Metadata
    "METADATA_LABEL",
    "Metadata",
]

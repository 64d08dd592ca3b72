"""Decomposition of a module package into its build modules.

A package carries two labels: the metadata label naming the main module, and
the layer index mapping every bundled module to the layer that holds it.
Extraction only reads those labels. Layers are opened later, on demand,
through each module's blob.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import BinaryIO

from modpack.core.buildpack.blob import OpenerBlob
from modpack.core.buildpack.metadata import METADATA_LABEL, Metadata
from modpack.core.buildpack.module import BuildModule, from_blob
from modpack.core.dist.labels import require_label
from modpack.core.dist.models import (
    BUILDPACK_LAYERS_LABEL,
    BuildpackDescriptor,
    ExtensionDescriptor,
    ModuleInfo,
    ModuleLayers,
)
from modpack.core.errors import LayerOpenError
from modpack.core.image.protocols import Package

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LayerOpener:
    """Opens one module's layer from its package.

    Holds its own copy of the digest and module name so each module's blob
    stays bound to its own layer.
    """

    package: Package
    diff_id: str
    kind: str
    module: str

    def __call__(self) -> BinaryIO:
        logger.debug(f"Opening {self.kind} {self.module} layer {self.diff_id}")
        try:
            return self.package.get_layer(self.diff_id)
        except Exception as e:
            raise LayerOpenError(self.kind, self.module, self.diff_id, str(e)) from e


def extract_buildpacks(pkg: Package) -> tuple[BuildModule | None, list[BuildModule]]:
    """Extract the main buildpack and its dependencies from a package.

    Args:
        pkg: Package to decompose

    Returns:
        Tuple of (main buildpack or None if no entry matches the metadata,
        dependency buildpacks in layer index order)

    Raises:
        LabelNotFoundError: If the metadata or layer index label is missing
        LabelDecodeError: If either label cannot be decoded
    """
    md = require_label(pkg, METADATA_LABEL, Metadata)
    pkg_layers = require_label(pkg, BUILDPACK_LAYERS_LABEL, ModuleLayers)
    main_info = md.module_info

    main_bp: BuildModule | None = None
    dep_bps: list[BuildModule] = []

    for bp_id, versions in pkg_layers.items():
        for bp_version, bp_info in versions.items():
            desc = BuildpackDescriptor(
                api=bp_info.api,
                info=ModuleInfo(
                    id=bp_id,
                    version=bp_version,
                    homepage=bp_info.homepage,
                    name=bp_info.name,
                ),
                stacks=bp_info.stacks,
                order=bp_info.order,
            )
            blob = OpenerBlob(
                LayerOpener(
                    package=pkg,
                    diff_id=bp_info.layer_diff_id,
                    kind=desc.kind,
                    module=desc.info.full_name(),
                )
            )

            if desc.info.match(main_info):
                if main_bp is not None:
                    logger.warning(f"Multiple layer entries match main buildpack {main_info}")
                main_bp = from_blob(desc, blob)
            else:
                dep_bps.append(from_blob(desc, blob))

    if main_bp is None:
        logger.warning(f"No layer entry matches main buildpack {main_info}")

    logger.debug(f"Extracted main buildpack {main_info} with {len(dep_bps)} dependencies")
    return main_bp, dep_bps


def extract_all_extensions(pkg: Package) -> list[BuildModule]:
    """Extract every extension listed in a package's layer index.

    Args:
        pkg: Package to decompose

    Returns:
        Extensions in layer index order

    Raises:
        LabelNotFoundError: If the layer index label is missing
        LabelDecodeError: If the layer index label cannot be decoded
    """
    pkg_layers = require_label(pkg, BUILDPACK_LAYERS_LABEL, ModuleLayers)

    extensions: list[BuildModule] = []
    for ext_id, versions in pkg_layers.items():
        for ext_version, ext_info in versions.items():
            desc = ExtensionDescriptor(
                api=ext_info.api,
                info=ModuleInfo(
                    id=ext_id,
                    version=ext_version,
                    homepage=ext_info.homepage,
                    name=ext_info.name,
                ),
            )
            blob = OpenerBlob(
                LayerOpener(
                    package=pkg,
                    diff_id=ext_info.layer_diff_id,
                    kind=desc.kind,
                    module=desc.info.full_name(),
                )
            )
            extensions.append(from_blob(desc, blob))

    logger.debug(f"Extracted {len(extensions)} extensions")
    return extensions


def extract_extensions(pkg: Package) -> BuildModule | None:
    """Extract the extension delivered by a package.

    A package is expected to carry a single extension. When the layer index
    lists several, the last one in index order is returned; use
    ``extract_all_extensions`` to get all of them.

    Returns:
        The extension, or None if the layer index is empty

    Raises:
        LabelNotFoundError: If the layer index label is missing
        LabelDecodeError: If the layer index label cannot be decoded
    """
    extensions = extract_all_extensions(pkg)
    if not extensions:
        return None
    if len(extensions) > 1:
        names = ", ".join(ext.descriptor.info.full_name() for ext in extensions)
        logger.warning(f"Package contains {len(extensions)} extensions ({names}); using the last")
    return extensions[-1]

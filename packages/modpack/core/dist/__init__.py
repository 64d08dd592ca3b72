"""Distribution formats: label documents and module descriptors."""

from modpack.core.dist.labels import Labeled, get_label, require_label
from modpack.core.dist.models import (
    BUILDPACK_LAYERS_LABEL,
    BuildpackDescriptor,
    ExtensionDescriptor,
    ModuleDescriptor,
    ModuleInfo,
    ModuleLayerInfo,
    ModuleLayers,
    ModuleRef,
    Order,
    OrderEntry,
    Stack,
)

__all__ = [
    # Labels
    "BUILDPACK_LAYERS_LABEL",
    "Labeled",
    "get_label",
    "require_label",
    # Models
    "BuildpackDescriptor",
    "ExtensionDescriptor",
    "ModuleDescriptor",
    "ModuleInfo",
    "ModuleLayerInfo",
    "ModuleLayers",
    "ModuleRef",
    "Order",
    "OrderEntry",
    "Stack",
]

"""Distribution models for build modules.

These mirror the JSON documents stored in package labels. Field names follow
Python conventions; wire names are kept as aliases where they differ.

Label writers are loose about ``null``: a null field, list or map reads as
its empty default rather than failing the whole label.
"""

from __future__ import annotations

from typing import Annotated, Any, ClassVar

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, model_validator

BUILDPACK_LAYERS_LABEL = "io.buildpacks.buildpack.layers"


def _none_as_empty_map(v: Any) -> Any:
    return {} if v is None else v


class DistModel(BaseModel):
    """Base for immutable label documents."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        # null document or null field -> field defaults
        if data is None:
            return {}
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data


class ModuleInfo(DistModel):
    """Identity of a build module."""

    id: str = ""
    version: str = ""
    homepage: str = ""
    name: str = ""

    def match(self, other: ModuleInfo) -> bool:
        """Return True if both refer to the same module (same id and version)."""
        return self.id == other.id and self.version == other.version

    def full_name(self) -> str:
        """Return ``id@version``, or just ``id`` when there is no version."""
        if self.version:
            return f"{self.id}@{self.version}"
        return self.id

    def __str__(self) -> str:
        return self.full_name()


class Stack(DistModel):
    """Stack a buildpack declares support for."""

    id: str = ""
    mixins: tuple[str, ...] = ()


class ModuleRef(ModuleInfo):
    """Reference to a module within an order group."""

    optional: bool = False


class OrderEntry(DistModel):
    """One group of an order definition."""

    group: tuple[ModuleRef, ...] = ()


Order = tuple[OrderEntry, ...]


class ModuleLayerInfo(DistModel):
    """Per-version entry of the layer index label."""

    api: str = ""
    stacks: tuple[Stack, ...] = ()
    order: Order = ()
    layer_diff_id: str = Field(default="", alias="layerDiffID")
    homepage: str = ""
    name: str = ""


# module ID -> module version -> layer info
ModuleLayers = Annotated[
    dict[str, Annotated[dict[str, ModuleLayerInfo], BeforeValidator(_none_as_empty_map)]],
    BeforeValidator(_none_as_empty_map),
]


class ModuleDescriptor(DistModel):
    """Fields shared by every module descriptor."""

    kind: ClassVar[str] = "module"

    api: str = ""
    info: ModuleInfo

    def escaped_id(self) -> str:
        """Module ID made safe for use as a path component."""
        return self.info.id.replace("/", "_")


class BuildpackDescriptor(ModuleDescriptor):
    """Descriptor of a buildpack."""

    kind: ClassVar[str] = "buildpack"

    stacks: tuple[Stack, ...] = ()
    order: Order = ()


class ExtensionDescriptor(ModuleDescriptor):
    """Descriptor of an image extension."""

    kind: ClassVar[str] = "extension"

"""Models for the OCI image layout documents a package is read from."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

MEDIA_TYPE_OCI_INDEX = "application/vnd.oci.image.index.v1+json"
MEDIA_TYPE_DOCKER_MANIFEST_LIST = "application/vnd.docker.distribution.manifest.list.v2+json"
INDEX_MEDIA_TYPES = frozenset({MEDIA_TYPE_OCI_INDEX, MEDIA_TYPE_DOCKER_MANIFEST_LIST})

REF_NAME_ANNOTATION = "org.opencontainers.image.ref.name"


class OCIModel(BaseModel):
    """Base for OCI documents; unknown fields are ignored."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class Descriptor(OCIModel):
    """Content descriptor pointing at a blob."""

    media_type: str = Field(default="", alias="mediaType")
    digest: str
    size: int = 0
    annotations: dict[str, str] = Field(default_factory=dict)

    @field_validator("annotations", mode="before")
    @classmethod
    def _none_as_empty(cls, v: Any) -> Any:
        return {} if v is None else v

    @property
    def ref_name(self) -> str | None:
        return self.annotations.get(REF_NAME_ANNOTATION)

    @property
    def is_index(self) -> bool:
        return self.media_type in INDEX_MEDIA_TYPES

    @property
    def is_gzip(self) -> bool:
        return self.media_type.endswith("gzip")


class ImageIndex(OCIModel):
    """``index.json`` or a nested image index."""

    schema_version: int = Field(default=2, alias="schemaVersion")
    manifests: list[Descriptor] = Field(default_factory=list)


class ImageManifest(OCIModel):
    """Image manifest: config blob plus ordered layers."""

    config: Descriptor
    layers: list[Descriptor] = Field(default_factory=list)


class RootFS(OCIModel):
    type: str = "layers"
    diff_ids: list[str] = Field(default_factory=list)


class ContainerConfig(OCIModel):
    labels: dict[str, str] = Field(default_factory=dict, alias="Labels")

    @field_validator("labels", mode="before")
    @classmethod
    def _none_as_empty(cls, v: Any) -> Any:
        return {} if v is None else v


class ImageConfig(OCIModel):
    """Image configuration blob (only the parts a package needs)."""

    config: ContainerConfig = Field(default_factory=ContainerConfig)
    rootfs: RootFS = Field(default_factory=RootFS)

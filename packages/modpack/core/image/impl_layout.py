"""Package backed by an OCI image layout directory."""

from __future__ import annotations

import gzip
import logging
from pathlib import Path
import re
from typing import BinaryIO, TypeVar

from pydantic import BaseModel, ValidationError

from modpack.core.errors import LayerNotFoundError, LayoutError
from modpack.core.image.models import Descriptor, ImageConfig, ImageIndex, ImageManifest
from modpack.core.utils.style import symbol

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)

_DIGEST_RE = re.compile(r"^(?P<alg>[a-z0-9]+(?:[+._-][a-z0-9]+)*):(?P<hex>[a-zA-Z0-9=_-]+)$")


class LayoutPackage:
    """
    Package read from an OCI image layout on disk.

    The layout's index, manifest and config are parsed on construction.
    Layer blobs are only opened by ``get_layer``; gzip layers are
    decompressed on the fly so the stream content matches its diff ID.

    Example:
        >>> pkg = LayoutPackage("./out/my-buildpack", tag="latest")
        >>> pkg.label("io.buildpacks.buildpackage.metadata")
    """

    def __init__(self, root: str | Path, tag: str | None = None) -> None:
        """Initialize LayoutPackage.

        Args:
            root: Layout directory (contains index.json and blobs/)
            tag: Ref name to select from the index; first manifest if None

        Raises:
            LayoutError: If the layout is missing, malformed or has no
                manifest matching ``tag``
        """
        self.root = Path(root)
        self.tag = tag

        index = self._read_model(self.root / "index.json", ImageIndex)
        manifest_desc = self._select_manifest(index, tag)
        self.manifest = self._read_model(self.blob_path(manifest_desc.digest), ImageManifest)
        self.config = self._read_model(self.blob_path(self.manifest.config.digest), ImageConfig)

        diff_ids = self.config.rootfs.diff_ids
        if len(diff_ids) != len(self.manifest.layers):
            raise LayoutError(
                f"{self.root}: config lists {len(diff_ids)} diffIDs "
                f"but manifest has {len(self.manifest.layers)} layers"
            )
        self._layers: dict[str, Descriptor] = dict(zip(diff_ids, self.manifest.layers))

        logger.debug(
            f"Loaded layout {self.root} (manifest {manifest_desc.digest}, "
            f"{len(self._layers)} layers)"
        )

    def label(self, name: str) -> str | None:
        return self.config.config.labels.get(name)

    def get_layer(self, diff_id: str) -> BinaryIO:
        desc = self._layers.get(diff_id)
        if desc is None:
            raise LayerNotFoundError(diff_id)

        path = self.blob_path(desc.digest)
        if desc.is_gzip:
            return gzip.open(path, "rb")  # type: ignore[return-value]
        return path.open("rb")

    def blob_path(self, digest: str) -> Path:
        """Path of a blob in the layout.

        Raises:
            LayoutError: If the digest is not well formed
        """
        m = _DIGEST_RE.match(digest)
        if m is None:
            raise LayoutError(f"invalid digest {symbol(digest)}")
        return self.root / "blobs" / m.group("alg") / m.group("hex")

    def _select_manifest(self, index: ImageIndex, tag: str | None) -> Descriptor:
        candidates = index.manifests
        if tag is not None:
            candidates = [d for d in candidates if d.ref_name == tag]
        if not candidates:
            wanted = f" with ref name {symbol(tag)}" if tag is not None else ""
            raise LayoutError(f"{self.root}: no manifest{wanted} in index")

        desc = candidates[0]
        # Multi-platform image: use the first platform manifest
        while desc.is_index:
            nested = self._read_model(self.blob_path(desc.digest), ImageIndex)
            if not nested.manifests:
                raise LayoutError(f"{self.root}: image index {symbol(desc.digest)} is empty")
            desc = nested.manifests[0]
        return desc

    def _read_model(self, path: Path, model_cls: type[M]) -> M:
        try:
            data = path.read_bytes()
        except FileNotFoundError as e:
            raise LayoutError(f"missing layout file {path}") from e
        try:
            return model_cls.model_validate_json(data)
        except (ValidationError, UnicodeDecodeError) as e:
            raise LayoutError(f"invalid {model_cls.__name__} in {path}: {e}") from e

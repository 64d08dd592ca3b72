"""Shared pytest fixtures for modpack tests."""

from __future__ import annotations

from collections.abc import Callable
import gzip
import hashlib
import json
import logging
from pathlib import Path
from typing import Any

import pytest

from modpack.core.buildpack import METADATA_LABEL
from modpack.core.dist import BUILDPACK_LAYERS_LABEL
from modpack.core.image import FakePackage

# ============================================================================
# Logging Fixtures
# ============================================================================


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Undo configure_logging() calls made by a test."""
    root = logging.getLogger()
    level = root.level
    yield
    for handler in root.handlers[:]:
        # pytest's capture handlers subclass these; leave them alone
        if type(handler) in (logging.StreamHandler, logging.FileHandler):
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)


# ============================================================================
# Label Helpers
# ============================================================================


def layers_label(entries: dict[str, dict[str, dict[str, Any]]]) -> str:
    """Serialize a layer index (id -> version -> info) to its label value."""
    return json.dumps(entries)


def metadata_label(module_id: str, version: str, **extra: Any) -> str:
    """Serialize package metadata naming the main module."""
    return json.dumps({"id": module_id, "version": version, **extra})


def digest(data: bytes) -> str:
    return "sha256:" + hashlib.sha256(data).hexdigest()


# ============================================================================
# Package Fixtures
# ============================================================================


@pytest.fixture
def layer_index() -> dict[str, dict[str, dict[str, Any]]]:
    """Layer index with a main buildpack and one dependency."""
    return {
        "buildpack/a": {
            "1.0": {
                "api": "0.9",
                "layerDiffID": "sha256:aaa",
                "homepage": "https://example.com/a",
                "name": "Buildpack A",
                "order": [{"group": [{"id": "buildpack/b", "version": "2.0"}]}],
            }
        },
        "buildpack/b": {
            "2.0": {
                "api": "0.9",
                "layerDiffID": "sha256:bbb",
                "stacks": [{"id": "io.buildpacks.stacks.jammy", "mixins": ["build:git"]}],
            }
        },
    }


@pytest.fixture
def buildpack_package(layer_index: dict[str, Any]) -> FakePackage:
    """Package delivering buildpack/a@1.0 with buildpack/b@2.0 bundled."""
    return FakePackage(
        labels={
            METADATA_LABEL: metadata_label("buildpack/a", "1.0"),
            BUILDPACK_LAYERS_LABEL: layers_label(layer_index),
        },
        layers={"sha256:aaa": b"layer-a", "sha256:bbb": b"layer-b"},
    )


# ============================================================================
# OCI Layout Fixtures
# ============================================================================


@pytest.fixture
def layout_factory(tmp_path: Path) -> Callable[..., Path]:
    """Factory writing an OCI image layout to disk.

    Layers are given as uncompressed bytes; the returned layout stores them
    gzip-compressed unless ``compress=False``.
    """

    def _write_blob(root: Path, data: bytes) -> str:
        d = digest(data)
        path = root / "blobs" / "sha256" / d.split(":", 1)[1]
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data)
        return d

    def _factory(
        labels: dict[str, str],
        layers: list[bytes],
        tag: str = "latest",
        compress: bool = True,
        name: str = "layout",
    ) -> Path:
        root = tmp_path / name
        root.mkdir()
        (root / "oci-layout").write_text(json.dumps({"imageLayoutVersion": "1.0.0"}))

        layer_descs = []
        for data in layers:
            stored = gzip.compress(data) if compress else data
            media_type = "application/vnd.oci.image.layer.v1.tar" + ("+gzip" if compress else "")
            layer_descs.append(
                {"mediaType": media_type, "digest": _write_blob(root, stored), "size": len(stored)}
            )

        config = json.dumps(
            {
                "architecture": "amd64",
                "os": "linux",
                "config": {"Labels": labels},
                "rootfs": {"type": "layers", "diff_ids": [digest(data) for data in layers]},
            }
        ).encode()
        config_digest = _write_blob(root, config)

        manifest = json.dumps(
            {
                "schemaVersion": 2,
                "mediaType": "application/vnd.oci.image.manifest.v1+json",
                "config": {
                    "mediaType": "application/vnd.oci.image.config.v1+json",
                    "digest": config_digest,
                    "size": len(config),
                },
                "layers": layer_descs,
            }
        ).encode()
        manifest_digest = _write_blob(root, manifest)

        index = {
            "schemaVersion": 2,
            "manifests": [
                {
                    "mediaType": "application/vnd.oci.image.manifest.v1+json",
                    "digest": manifest_digest,
                    "size": len(manifest),
                    "annotations": {"org.opencontainers.image.ref.name": tag},
                }
            ],
        }
        (root / "index.json").write_text(json.dumps(index))
        return root

    return _factory


@pytest.fixture
def buildpack_layout(layout_factory: Callable[..., Path]) -> Path:
    """On-disk layout delivering buildpack/a@1.0 with buildpack/b@2.0 bundled."""
    layer_a = b"layer-a-content"
    layer_b = b"layer-b-content"
    index = {
        "buildpack/a": {"1.0": {"api": "0.9", "layerDiffID": digest(layer_a)}},
        "buildpack/b": {"2.0": {"api": "0.8", "layerDiffID": digest(layer_b), "name": "B"}},
    }
    return layout_factory(
        labels={
            METADATA_LABEL: metadata_label("buildpack/a", "1.0"),
            BUILDPACK_LAYERS_LABEL: layers_label(index),
        },
        layers=[layer_a, layer_b],
    )

"""Tests for distribution models."""

from pydantic import TypeAdapter, ValidationError
import pytest

from modpack.core.buildpack import Metadata
from modpack.core.dist import (
    BuildpackDescriptor,
    ExtensionDescriptor,
    ModuleInfo,
    ModuleLayerInfo,
    ModuleLayers,
    OrderEntry,
)


class TestModuleInfo:
    """Tests for ModuleInfo identity helpers."""

    def test_full_name_with_version(self):
        """Test full name joins id and version."""
        assert ModuleInfo(id="buildpack/a", version="1.0").full_name() == "buildpack/a@1.0"

    def test_full_name_without_version(self):
        """Test full name is the bare id when version is empty."""
        assert ModuleInfo(id="buildpack/a").full_name() == "buildpack/a"

    def test_match_ignores_homepage_and_name(self):
        """Test match compares id and version only."""
        a = ModuleInfo(id="buildpack/a", version="1.0", name="A", homepage="https://a")
        b = ModuleInfo(id="buildpack/a", version="1.0")
        assert a.match(b)
        assert b.match(a)

    def test_match_rejects_other_version(self):
        """Test different versions do not match."""
        a = ModuleInfo(id="buildpack/a", version="1.0")
        assert not a.match(ModuleInfo(id="buildpack/a", version="1.1"))
        assert not a.match(ModuleInfo(id="buildpack/b", version="1.0"))

    def test_is_hashable_and_comparable(self):
        """Test equal infos compare and hash equal."""
        a = ModuleInfo(id="x", version="1")
        b = ModuleInfo(id="x", version="1")
        assert a == b
        assert len({a, b}) == 1

    def test_is_frozen(self):
        """Test ModuleInfo cannot be mutated."""
        info = ModuleInfo(id="x", version="1")
        with pytest.raises(ValidationError):
            info.version = "2"  # type: ignore[misc]

    def test_metadata_without_id_is_empty_identity(self):
        """Test metadata lacking an id decodes to an empty identity."""
        md = Metadata.model_validate_json('{"version": "1.0", "stacks": null}')
        assert md.module_info == ModuleInfo(version="1.0")
        assert md.stacks == ()


class TestModuleLayerInfo:
    """Tests for layer index entries."""

    def test_parses_wire_names(self):
        """Test layerDiffID alias and nested order/stacks parse."""
        info = ModuleLayerInfo.model_validate(
            {
                "api": "0.9",
                "layerDiffID": "sha256:aaa",
                "stacks": [{"id": "stack", "mixins": ["m1"]}],
                "order": [{"group": [{"id": "dep", "version": "1", "optional": True}]}],
            }
        )
        assert info.layer_diff_id == "sha256:aaa"
        assert info.stacks[0].mixins == ("m1",)
        assert info.order[0].group[0].optional is True
        assert info.order[0].group[0].full_name() == "dep@1"

    def test_null_collections_become_empty(self):
        """Test null stacks/order are treated as empty."""
        info = ModuleLayerInfo.model_validate(
            {"api": "0.9", "layerDiffID": "sha256:aaa", "stacks": None, "order": None}
        )
        assert info.stacks == ()
        assert info.order == ()

    def test_null_group_becomes_empty(self):
        """Test an order entry with a null group parses."""
        assert OrderEntry.model_validate({"group": None}).group == ()

    def test_null_scalars_become_empty(self):
        """Test null api and layerDiffID read as empty strings."""
        info = ModuleLayerInfo.model_validate_json(
            '{"api": null, "layerDiffID": null, "homepage": null, "name": "x"}'
        )
        assert info.api == ""
        assert info.layer_diff_id == ""
        assert info.homepage == ""
        assert info.name == "x"

    def test_null_entry_becomes_empty(self):
        """Test a null version entry reads as an entry with defaults."""
        layers = TypeAdapter(ModuleLayers).validate_json('{"bp": {"1": null}}')
        assert layers["bp"]["1"] == ModuleLayerInfo()

    def test_null_version_map_becomes_empty(self):
        """Test a module whose version map is null has no versions."""
        layers = TypeAdapter(ModuleLayers).validate_json(
            '{"ext/a": null, "ext/b": {"1": {"layerDiffID": "sha256:b"}}}'
        )
        assert layers["ext/a"] == {}
        assert layers["ext/b"]["1"].layer_diff_id == "sha256:b"

    def test_null_index_becomes_empty(self):
        """Test a null layer index decodes as an empty index."""
        assert TypeAdapter(ModuleLayers).validate_json("null") == {}

    def test_wrong_type_still_rejected(self):
        """Test non-null values of the wrong type are not coerced."""
        with pytest.raises(ValidationError):
            ModuleLayerInfo.model_validate({"api": ["0.9"]})

    def test_unknown_fields_ignored(self):
        """Test unknown wire fields are ignored."""
        info = ModuleLayerInfo.model_validate({"layerDiffID": "sha256:a", "targets": []})
        assert info.layer_diff_id == "sha256:a"


class TestDescriptors:
    """Tests for module descriptors."""

    def test_kinds(self):
        """Test each descriptor variant reports its kind."""
        info = ModuleInfo(id="x", version="1")
        assert BuildpackDescriptor(info=info).kind == "buildpack"
        assert ExtensionDescriptor(info=info).kind == "extension"

    def test_escaped_id(self):
        """Test slashes in the id are replaced."""
        desc = BuildpackDescriptor(info=ModuleInfo(id="paketo-buildpacks/node", version="1"))
        assert desc.escaped_id() == "paketo-buildpacks_node"

    def test_extension_has_no_order_fields(self):
        """Test extension descriptors carry only api and identity."""
        assert set(ExtensionDescriptor.model_fields) == {"api", "info"}

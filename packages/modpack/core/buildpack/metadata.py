"""Package metadata label."""

from __future__ import annotations

from modpack.core.dist.models import ModuleInfo, Stack

METADATA_LABEL = "io.buildpacks.buildpackage.metadata"


class Metadata(ModuleInfo):
    """Identity of the module a package was built to deliver.

    The module identity fields are inlined on the wire next to ``stacks``.
    """

    stacks: tuple[Stack, ...] = ()

    @property
    def module_info(self) -> ModuleInfo:
        """Main module identity without the package-level fields."""
        return ModuleInfo(id=self.id, version=self.version, homepage=self.homepage, name=self.name)

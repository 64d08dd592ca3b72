"""Exceptions raised while decomposing a module package."""

from __future__ import annotations

from modpack.core.utils.style import symbol


class ModpackError(Exception):
    """Base exception for modpack errors."""

    pass


class LabelNotFoundError(ModpackError):
    """Raised when a required label is absent from a package.

    Attributes:
        label: Name of the missing label.
    """

    def __init__(self, label: str) -> None:
        self.label = label
        super().__init__(f"could not find label {symbol(label)}")


class LabelDecodeError(ModpackError):
    """Raised when a label is present but its value cannot be decoded.

    Attributes:
        label: Name of the malformed label.
    """

    def __init__(self, label: str, reason: str) -> None:
        self.label = label
        super().__init__(f"unmarshalling label {symbol(label)}: {reason}")


class LayerOpenError(ModpackError):
    """Raised when a module's layer cannot be opened from its package.

    Only raised when a module's blob is opened, never during extraction.

    Attributes:
        kind: Module kind ("buildpack" or "extension").
        module: Full name (id@version) of the module.
        diff_id: Digest of the layer that failed to open.
    """

    def __init__(self, kind: str, module: str, diff_id: str, reason: str = "") -> None:
        self.kind = kind
        self.module = module
        self.diff_id = diff_id
        message = f"extracting {kind} {symbol(module)} layer (diffID {symbol(diff_id)})"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class LayoutError(ModpackError):
    """Raised when an OCI image layout on disk is missing or malformed."""

    pass


class LayerNotFoundError(ModpackError, KeyError):
    """Raised when a package holds no layer with the requested diff ID.

    Attributes:
        diff_id: The diff ID that was not found.
    """

    def __init__(self, diff_id: str) -> None:
        self.diff_id = diff_id
        super().__init__(f"layer with diffID {symbol(diff_id)} not found")

    def __str__(self) -> str:
        # KeyError repr-quotes its argument
        return str(self.args[0])

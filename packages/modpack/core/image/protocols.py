"""Protocol for module packages."""

from typing import BinaryIO, Protocol


class Package(Protocol):
    """
    Image-like artifact holding labels and content-addressed layers.

    Implementations may be backed by an OCI layout, a daemon, a registry
    or memory. Thread safety for concurrent reads is up to the implementation.
    """

    def label(self, name: str) -> str | None:
        """
        Read a label value.

        Args:
            name: Label name

        Returns:
            Raw label value, or None if the label is not set

        Raises:
            OSError: On failure reading the package
        """
        ...

    def get_layer(self, diff_id: str) -> BinaryIO:
        """
        Open an uncompressed layer stream by diff ID.

        Each call returns a new stream that the caller must close.

        Args:
            diff_id: Layer diff ID (e.g. "sha256:...")

        Returns:
            Readable binary stream over the layer tar

        Raises:
            LayerNotFoundError: If no layer has this diff ID
            OSError: On read failure
        """
        ...

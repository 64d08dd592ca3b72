"""Formatting helpers for user-facing messages."""


def symbol(value: str) -> str:
    """Quote an identifier (label name, module name, digest) for messages.

    Example:
        >>> symbol("io.buildpacks.buildpack.layers")
        "'io.buildpacks.buildpack.layers'"
    """
    return f"'{value}'"

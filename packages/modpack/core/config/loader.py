"""Configuration loading utilities with JSON and YAML support."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

import yaml

from modpack.core.config.models import AppConfig
from modpack.core.utils.json import read_json
from modpack.core.utils.logging import configure_logging as _configure_logging

logger = logging.getLogger(__name__)

ENV_LOG_LEVEL = "MODPACK_LOG_LEVEL"
ENV_TAG = "MODPACK_TAG"


def detect_format(file_path: Path | str) -> str:
    """Detect config file format from extension.

    Args:
        file_path: Path to config file

    Returns:
        Format string: "json" or "yaml"

    Raises:
        ValueError: If format cannot be determined

    Example:
        >>> detect_format("modpack.json")
        'json'
        >>> detect_format("modpack.yml")
        'yaml'
    """
    suffix = Path(file_path).suffix.lower()

    if suffix == ".json":
        return "json"
    elif suffix in [".yaml", ".yml"]:
        return "yaml"
    else:
        raise ValueError(f"Unsupported config format: {suffix}")


def load_config(path: str | Path) -> dict[str, Any]:
    """Load and return raw configuration dictionary.

    Args:
        path: Path to config file (.json, .yaml, or .yml)

    Returns:
        Raw configuration dictionary

    Raises:
        FileNotFoundError: If config file does not exist
        ValueError: If format is not supported or file content is invalid
    """
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"Config file does not exist: {path}")

    fmt = detect_format(path)

    if fmt == "json":
        try:
            return read_json(path)
        except ValueError as e:
            raise ValueError(f"Invalid JSON in {path}: {e}") from e

    try:
        with path.open("r", encoding="utf-8") as f:
            content = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {path}: {e}") from e
    # safe_load returns None for empty files
    if content is None:
        return {}
    if not isinstance(content, dict):
        raise ValueError(f"Invalid YAML in {path}: expected a mapping")
    return content


def load_app_config(path: str | Path | None = None) -> AppConfig:
    """Load and validate application configuration.

    A missing file at the default path yields defaults; an explicitly given
    path must exist. Environment variables override file values.

    Args:
        path: Path to app config file (.json, .yaml, or .yml)

    Returns:
        Validated AppConfig instance

    Raises:
        FileNotFoundError: If an explicit path does not exist
        ValidationError: If config is invalid
    """
    if path is None:
        path = AppConfig.default_path()
        raw_config = load_config(path) if path.exists() else {}
    else:
        raw_config = load_config(path)

    return AppConfig.model_validate(_apply_env_overrides(raw_config))


def configure_logging(config: AppConfig | None = None) -> None:
    """Configure Python logging from app config.

    Args:
        config: AppConfig instance (loads default if None)
    """
    if config is None:
        config = load_app_config()

    _configure_logging(
        level=config.logging.level,
        format_string=config.logging.format,
        filename=config.logging.filename,
        structured=config.logging.structured,
    )


def _apply_env_overrides(raw_config: dict[str, Any]) -> dict[str, Any]:
    """Return raw config with environment overrides merged in."""
    merged = dict(raw_config)

    log_level = os.getenv(ENV_LOG_LEVEL)
    if log_level:
        logger.debug(f"Using log level from {ENV_LOG_LEVEL}")
        merged["logging"] = {**(merged.get("logging") or {}), "level": log_level.upper()}

    tag = os.getenv(ENV_TAG)
    if tag:
        logger.debug(f"Using tag from {ENV_TAG}")
        merged["default_tag"] = tag

    return merged

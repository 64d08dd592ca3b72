"""Command-line interface for modpack.

Inspects and unpacks the build modules bundled in a package stored as an
OCI image layout.
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
import shutil
import sys
from typing import Any

from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from modpack.core.buildpack import (
    BuildModule,
    extract_all_extensions,
    extract_buildpacks,
)
from modpack.core.config.loader import configure_logging, load_app_config
from modpack.core.config.models import AppConfig
from modpack.core.errors import ModpackError
from modpack.core.image import LayoutPackage, Package
from modpack.core.utils.json import dumps
from modpack.core.utils.logging import get_logger
from modpack.core.utils.style import symbol

console = Console()
err_console = Console(stderr=True)
logger = logging.getLogger(__name__)


def collect_modules(pkg: Package, extensions: bool = False) -> list[tuple[str, BuildModule]]:
    """Extract modules from a package, tagged with their role.

    Args:
        pkg: Package to read
        extensions: Extract extensions instead of buildpacks

    Returns:
        List of (role, module) pairs; main buildpack first
    """
    if extensions:
        return [("extension", ext) for ext in extract_all_extensions(pkg)]

    main_bp, dep_bps = extract_buildpacks(pkg)
    modules: list[tuple[str, BuildModule]] = []
    if main_bp is not None:
        modules.append(("main", main_bp))
    modules.extend(("dependency", bp) for bp in dep_bps)
    return modules


def _module_summary(role: str, module: BuildModule) -> dict[str, Any]:
    desc = module.descriptor
    return {
        "role": role,
        "kind": desc.kind,
        "id": desc.info.id,
        "version": desc.info.version,
        "api": desc.api,
        "name": desc.info.name,
        "homepage": desc.info.homepage,
    }


def run_inspect(args: argparse.Namespace, app_config: AppConfig) -> int:
    """Print the modules contained in a package.

    Returns:
        Exit code (0 for success)
    """
    pkg = LayoutPackage(args.layout, tag=args.tag or app_config.default_tag)
    modules = collect_modules(pkg, extensions=args.extensions)
    summaries = [_module_summary(role, module) for role, module in modules]

    if args.json:
        # Plain print keeps the JSON free of console markup
        print(dumps(summaries, indent=2))
        return 0

    table = Table(title=str(args.layout))
    for column in ("Role", "ID", "Version", "API", "Name"):
        table.add_column(column)
    for s in summaries:
        table.add_row(s["role"], s["id"], s["version"], s["api"], s["name"])
    console.print(table)
    return 0


def _output_name(module: BuildModule) -> str:
    desc = module.descriptor
    version = desc.info.version.replace("/", "_")
    return f"{desc.escaped_id()}@{version}.tar"


def run_extract(args: argparse.Namespace, app_config: AppConfig) -> int:
    """Write each module's layer to ``<output>/<escaped-id>@<version>.tar``.

    Returns:
        Exit code (0 for success)

    Raises:
        ModpackError: If two modules map to the same output file
    """
    pkg = LayoutPackage(args.layout, tag=args.tag or app_config.default_tag)
    log = get_logger(__name__, package=str(args.layout))

    # Escaping can merge distinct ids; refuse before writing anything
    planned: dict[str, BuildModule] = {}
    modules = collect_modules(pkg, extensions=args.extensions)
    for _, module in modules:
        filename = _output_name(module)
        other = planned.setdefault(filename, module)
        if other is not module:
            raise ModpackError(
                f"modules {symbol(other.descriptor.info.full_name())} and "
                f"{symbol(module.descriptor.info.full_name())} both map to {symbol(filename)}"
            )

    output_dir = Path(args.output)
    output_dir.mkdir(parents=True, exist_ok=True)

    for role, module in modules:
        desc = module.descriptor
        dest = output_dir / _output_name(module)
        log.info(f"Writing {role} {desc.kind} {desc.info.full_name()} to {dest}")
        with module.open() as src, dest.open("wb") as dst:
            shutil.copyfileobj(src, dst)
        console.print(f"[green]✅ {desc.info.full_name()}[/green] → {escape(str(dest))}")

    return 0


def build_arg_parser() -> argparse.ArgumentParser:
    """Build argument parser for CLI."""
    p = argparse.ArgumentParser(
        prog="modpack",
        description="modpack - inspect and unpack buildpack packages",
    )
    p.add_argument(
        "--config",
        default=None,
        help="Path to app config (.json/.yaml; default: modpack.yaml if present)",
    )
    p.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Override configured log level",
    )
    sub = p.add_subparsers(dest="cmd", required=True)

    inspect = sub.add_parser("inspect", help="List modules in a package")
    inspect.add_argument("layout", help="Path to OCI image layout directory")
    inspect.add_argument("--tag", default=None, help="Ref name to select from the index")
    inspect.add_argument(
        "--extensions", action="store_true", help="List extensions instead of buildpacks"
    )
    inspect.add_argument("--json", action="store_true", help="Print JSON instead of a table")

    extract = sub.add_parser("extract", help="Write module layers to a directory")
    extract.add_argument("layout", help="Path to OCI image layout directory")
    extract.add_argument("output", help="Output directory")
    extract.add_argument("--tag", default=None, help="Ref name to select from the index")
    extract.add_argument(
        "--extensions", action="store_true", help="Extract extensions instead of buildpacks"
    )

    return p


_COMMANDS = {
    "inspect": run_inspect,
    "extract": run_extract,
}


def main(argv: list[str] | None = None) -> int:
    """Main entry point for CLI."""
    args = build_arg_parser().parse_args(argv)

    try:
        app_config = load_app_config(args.config)
    except (OSError, ValueError, ValidationError) as e:
        err_console.print(
            f"[red]ERROR: Failed to load config: {escape(str(e))}[/red]", soft_wrap=True
        )
        return 1

    if args.log_level:
        app_config.logging.level = args.log_level
    configure_logging(app_config)

    try:
        return _COMMANDS[args.cmd](args, app_config)
    except (ModpackError, OSError) as e:
        logger.debug("Command failed", exc_info=True)
        err_console.print(f"[red]ERROR: {escape(str(e))}[/red]", soft_wrap=True)
        return 1


if __name__ == "__main__":
    sys.exit(main())

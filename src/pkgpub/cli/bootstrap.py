"""Shared console bootstrap for CLI commands.

Builds a console-mode `Application`, registers and boots every referenced
package, and converts load/config failures into `typer.BadParameter`.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Sequence

import typer

from pkgpub.config import CONFIG_FILE_NAME, ConfigError, load_host_paths
from pkgpub.host.application import Application
from pkgpub.host.loader import PackageLoadError, load_package_ref


def boot_console_application(
    refs: Sequence[str],
    *,
    config: Optional[str],
    base_dir: Optional[str],
) -> tuple[Application, list[str]]:
    """Return the booted application and the registered package names (in order)."""
    config_path = Path(config) if config else Path(base_dir or ".") / CONFIG_FILE_NAME
    try:
        paths = load_host_paths(config_path, base_dir=Path(base_dir) if base_dir else None)
    except ConfigError as e:
        raise typer.BadParameter(str(e), param_hint="--config") from e

    app = Application(paths, console=True)
    app.discover_migrations()
    names: list[str] = []
    for ref in refs:
        try:
            package = load_package_ref(ref)
        except PackageLoadError as e:
            raise typer.BadParameter(str(e), param_hint="PACKAGES") from e
        names.append(app.register_package(package).name)
    app.boot()
    return app, names


def select_paths(app: Application, names: Sequence[str], tag: Optional[str]) -> dict[Path, Path]:
    """Union of each package's mappings, optionally narrowed to one group tag."""
    selected: dict[Path, Path] = {}
    for name in names:
        selected.update(app.paths_to_publish(package=name, group=tag))
    return selected

"""Core data model for package publishing.

- `ResourceKind` enumerates the resource families a package can ship.
- `HostPaths` carries the host application's base directories (injected, never
  looked up globally).
- `PathTemplate` pairs a package source location with a destination template
  whose `%s` slots are filled at publish time.

This module must not import host/publish/cli.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any


class ResourceKind(str, Enum):
    CONFIG = "config"
    MIGRATIONS = "migrations"
    SEEDS = "seeds"
    VIEWS = "views"
    TRANSLATIONS = "translations"
    ASSETS = "assets"
    ROUTES = "routes"


# Source extension of the host language; stubs are published under it.
SOURCE_EXTENSION = ".py"

STUB_SUFFIX = ".stub"

# Default source-tree layout relative to a package root.
_SOURCE_LAYOUT: dict[ResourceKind, str] = {
    ResourceKind.MIGRATIONS: "database/migrations",
    ResourceKind.SEEDS: "database/seeds",
    ResourceKind.CONFIG: "config",
    ResourceKind.VIEWS: "resources/views",
    ResourceKind.TRANSLATIONS: "resources/lang",
    ResourceKind.ASSETS: "public/assets",
    ResourceKind.ROUTES: "http/routes" + SOURCE_EXTENSION,
}


def _as_path(value: Any, *, where: str) -> Path:
    if isinstance(value, Path):
        return value
    if not isinstance(value, str):
        raise ValueError(f"{where}: expected str or Path, got {type(value).__name__}")
    if not value.strip():
        raise ValueError(f"{where}: must be a non-empty path")
    return Path(value)


@dataclass(frozen=True)
class HostPaths:
    """Base directories of the host application.

    `config`, `database` and `public` default to subdirectories of `base`.
    """

    base: Path
    config: Path | None = None
    database: Path | None = None
    public: Path | None = None

    def __post_init__(self) -> None:
        base = _as_path(self.base, where="HostPaths.base")
        object.__setattr__(self, "base", base)
        for attr in ("config", "database", "public"):
            value = getattr(self, attr)
            resolved = base / attr if value is None else _as_path(value, where=f"HostPaths.{attr}")
            object.__setattr__(self, attr, resolved)


@dataclass(frozen=True)
class PathTemplate:
    """Source location plus destination template (`None` when not publishable)."""

    source: Path
    dest: str | None = None

    def render(self, *args: str) -> Path:
        if self.dest is None:
            raise ValueError(f"{self.source}: resource has no publish destination")
        return Path(self.dest % tuple(args))


def _template(base: Path, *parts: str) -> str:
    # `%` in a host directory must survive the later `%`-formatting.
    escaped = Path(str(base).replace("%", "%%"))
    return str(escaped.joinpath(*parts))


def configure_paths(package_root: str | Path, host_paths: HostPaths) -> dict[ResourceKind, PathTemplate]:
    """Derive the fixed template set for a package rooted at `package_root`.

    Pure: no filesystem access.
    """
    root = Path(package_root)
    dests: dict[ResourceKind, str | None] = {
        ResourceKind.MIGRATIONS: _template(host_paths.database, "migrations", "%s_%s"),
        ResourceKind.SEEDS: _template(host_paths.database, "seeds", "%s"),
        ResourceKind.CONFIG: _template(host_paths.config, "%s"),
        ResourceKind.VIEWS: _template(host_paths.base, "resources", "views", "vendor", "%s"),
        ResourceKind.TRANSLATIONS: _template(host_paths.base, "resources", "lang", "%s"),
        ResourceKind.ASSETS: _template(host_paths.public, "vendor", "%s"),
        ResourceKind.ROUTES: None,
    }
    return {kind: PathTemplate(source=root / _SOURCE_LAYOUT[kind], dest=dests[kind]) for kind in ResourceKind}

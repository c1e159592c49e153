"""Reference host application.

Implements the `pkgpub.core.Host` hooks in-process:
- publish registries keyed by package and by group
- a namespaced config store fed from package config modules
- view/translation namespace tables
- route files executed against a `Router`
- the set of migration classes the host already knows

Packages are driven through `register_package()` then `boot()`.
"""

from __future__ import annotations

import runpy
import types
from pathlib import Path
from typing import Any, Iterable, Mapping

from pkgpub.core.contract import PublishablePackage
from pkgpub.core.model import SOURCE_EXTENSION, HostPaths
from pkgpub.core.naming import class_from_file
from pkgpub.core.publisher import PackagePublisher, PublishSet
from pkgpub.host.routing import Router
from pkgpub.logging import get_logger

_log = get_logger("host")


def _public_names(namespace: Mapping[str, Any]) -> dict[str, Any]:
    return {
        k: v
        for k, v in namespace.items()
        if not k.startswith("_") and not isinstance(v, types.ModuleType)
    }


class Application:
    def __init__(
        self,
        paths: HostPaths,
        *,
        console: bool = False,
        routes_cached: bool = False,
        defined_migrations: Iterable[str] = (),
    ) -> None:
        self.paths = paths
        self.console = console
        self.routes_cached = routes_cached
        self.defined_migrations: set[str] = set(defined_migrations)

        self.config: dict[str, dict[str, Any]] = {}
        self.view_namespaces: dict[str, list[Path]] = {}
        self.translation_namespaces: dict[str, list[Path]] = {}
        self.router = Router()

        self.package_publishes: dict[str, PublishSet] = {}
        self.group_publishes: dict[str, PublishSet] = {}

        self._packages: list[tuple[PublishablePackage, PackagePublisher]] = []
        self._booted = False
        self._scanned_extensions: set[str] = set()

    # ---- Host hooks ----

    def running_in_console(self) -> bool:
        return self.console

    def routes_are_cached(self) -> bool:
        return self.routes_cached

    def migration_defined(self, class_name: str) -> bool:
        return class_name in self.defined_migrations

    def publishes(self, paths: Mapping[Path, Path], group: str | None = None, *, package: str | None = None) -> None:
        mapping = {Path(src): Path(dest) for src, dest in paths.items()}
        if package is not None:
            self.package_publishes.setdefault(package, {}).update(mapping)
        if group is not None:
            self.group_publishes.setdefault(group, {}).update(mapping)

    def discover_migrations(self, *extensions: str) -> set[str]:
        """Add the classes declared by migrations already in the host tree.

        Scans files ending in any of `extensions` (default `SOURCE_EXTENSION`).
        Once a scan has run, packages registered with another extension
        trigger a scan for theirs.
        """
        extensions = extensions or (SOURCE_EXTENSION,)
        self._scanned_extensions.update(extensions)
        migrations_dir = self.paths.database / "migrations"
        found: set[str] = set()
        if migrations_dir.is_dir():
            candidates = {p for ext in extensions for p in migrations_dir.glob("*" + ext) if p.is_file()}
            for path in sorted(candidates):
                class_name = class_from_file(path)
                if class_name is not None:
                    found.add(class_name)
        self.defined_migrations.update(found)
        return found

    def merge_config_from(self, path: Path, namespace: str) -> None:
        """Merge a package config module under `namespace`; existing host values win."""
        p = Path(path)
        if not p.is_file():
            _log.debug("config %s missing; nothing merged into %r", p, namespace)
            return
        package_values = _public_names(runpy.run_path(str(p)))
        self.config[namespace] = {**package_values, **self.config.get(namespace, {})}

    def load_views_from(self, path: Path, namespace: str) -> None:
        self.view_namespaces.setdefault(namespace, []).append(Path(path))

    def load_translations_from(self, path: Path, namespace: str) -> None:
        self.translation_namespaces.setdefault(namespace, []).append(Path(path))

    def load_routes_from(self, path: Path) -> None:
        p = Path(path)
        if not p.is_file():
            _log.debug("routes file %s missing; nothing loaded", p)
            return
        runpy.run_path(str(p), init_globals={"router": self.router})

    # ---- lookups ----

    def config_get(self, key: str, default: Any = None) -> Any:
        """Dotted lookup: `config_get("blog.per_page")`."""
        namespace, _, rest = key.partition(".")
        value: Any = self.config.get(namespace, _MISSING)
        for part in rest.split(".") if rest else []:
            if not isinstance(value, dict):
                return default
            value = value.get(part, _MISSING)
        return default if value is _MISSING else value

    def paths_to_publish(self, package: str | None = None, group: str | None = None) -> PublishSet:
        """Select registered mappings by package, group, both (intersection) or neither (all)."""
        if package is not None and group is not None:
            by_package = self.package_publishes.get(package, {})
            by_group = self.group_publishes.get(group, {})
            return {src: dest for src, dest in by_package.items() if src in by_group}
        if package is not None:
            return dict(self.package_publishes.get(package, {}))
        if group is not None:
            return dict(self.group_publishes.get(group, {}))
        merged: PublishSet = {}
        for mapping in self.package_publishes.values():
            merged.update(mapping)
        for mapping in self.group_publishes.values():
            merged.update(mapping)
        return merged

    # ---- lifecycle ----

    def register_package(self, package: PublishablePackage, **publisher_options: Any) -> PackagePublisher:
        publisher = PackagePublisher(package.name, package.root, self, **publisher_options)
        if self._scanned_extensions and publisher.extension not in self._scanned_extensions:
            self.discover_migrations(publisher.extension)
        package.register(publisher)
        self._packages.append((package, publisher))
        _log.debug("registered package %s", publisher.name)
        if self._booted:
            package.boot(publisher)
        return publisher

    def boot(self) -> None:
        if self._booted:
            return
        for package, publisher in self._packages:
            package.boot(publisher)
        self._booted = True

    def publisher_for(self, name: str) -> PackagePublisher:
        for _, publisher in self._packages:
            if publisher.name == name:
                return publisher
        raise KeyError(f"package not registered: {name!r}")

    @property
    def package_names(self) -> list[str]:
        return [publisher.name for _, publisher in self._packages]


_MISSING = object()

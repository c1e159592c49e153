"""Package publisher: turns a package's resource tree into host publish mappings.

Every `publish_*` operation builds a fresh `PublishSet` (source -> destination)
and hands it to the host. Console-only operations do nothing outside a console
context. Nothing here raises on missing inputs: an absent source directory or
file simply contributes no candidates.

Migration destinations carry a `YYYY_MM_DD_HHMMSS` prefix read from the clock
per candidate. Within one call the prefixes strictly increase: a reading that
is not later than the previous stamp becomes that stamp plus one second, so
publish order becomes migration order.
"""

from __future__ import annotations

from datetime import datetime, timedelta
from pathlib import Path
from typing import Callable, Iterable, Mapping

from pkgpub.core.contract import Host
from pkgpub.core.model import SOURCE_EXTENSION, STUB_SUFFIX, PathTemplate, ResourceKind, configure_paths
from pkgpub.core.naming import build_file_name, class_from_file, normalize_file_name, prepare_migration_file
from pkgpub.logging import get_logger

PublishSet = dict[Path, Path]

MIGRATION_TIMESTAMP_FORMAT = "%Y_%m_%d_%H%M%S"

_log = get_logger("publisher")


class PackagePublisher:
    """Publishes and loads the resources of one package into a host.

    Methods return the publisher itself so calls can be chained:

        publisher.publish_config().publish_migrations().load_views()
    """

    def __init__(
        self,
        name: str,
        root: str | Path,
        host: Host,
        *,
        extension: str = SOURCE_EXTENSION,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        if not isinstance(name, str) or not name.strip():
            raise ValueError("PackagePublisher.name: must be a non-empty string")
        self.name = name.strip()
        self.host = host
        self.extension = extension
        self._clock = clock
        self.paths: dict[ResourceKind, PathTemplate] = {}
        self.setup(root)

    def setup(self, root: str | Path) -> "PackagePublisher":
        """(Re)derive the template set from the package root."""
        self.root = Path(root)
        self.paths = configure_paths(self.root, self.host.paths)
        return self

    # ---- publishing ----

    def publish_config(self, files: Iterable[str] | None = None) -> "PackagePublisher":
        if self.host.running_in_console():
            paths = self._collect(ResourceKind.CONFIG, files)
            self.host.publishes(paths, "config", package=self.name)
        return self

    def publish_seeds(self, files: Iterable[str] | None = None) -> "PackagePublisher":
        if self.host.running_in_console():
            paths = self._collect(ResourceKind.SEEDS, files)
            self.host.publishes(paths, "seeds", package=self.name)
        return self

    def publish_migrations(self, files: Iterable[str] | None = None) -> "PackagePublisher":
        if not self.host.running_in_console():
            return self

        paths: PublishSet = {}
        last: datetime | None = None
        for source in self.build_files(ResourceKind.MIGRATIONS, files):
            if not source.is_file():
                _log.debug("%s: migration source %s missing; skipped", self.name, source)
                continue
            class_name = class_from_file(source)
            if class_name is not None and self.host.migration_defined(class_name):
                _log.debug("%s: migration class %s already defined; skipped", self.name, class_name)
                continue
            last = self._next_stamp(last)
            stamp = last.strftime(MIGRATION_TIMESTAMP_FORMAT)
            name = prepare_migration_file(source, self.extension)
            paths[source] = self.build_dest_path(ResourceKind.MIGRATIONS, stamp, name)

        self.host.publishes(paths, "migrations", package=self.name)
        return self

    def publish_views(self) -> "PackagePublisher":
        if self.host.running_in_console():
            self._publish_directory(ResourceKind.VIEWS, "views")
        return self

    def publish_assets(self) -> "PackagePublisher":
        if self.host.running_in_console():
            self._publish_directory(ResourceKind.ASSETS, "public")
        return self

    def publish(self, paths: Mapping[str | Path, str | Path], group: str | None = None) -> "PackagePublisher":
        """Register an arbitrary source -> destination mapping."""
        mapping = {Path(src): Path(dest) for src, dest in paths.items()}
        self.host.publishes(mapping, group, package=self.name)
        return self

    # ---- loading ----

    def merge_config(self, file: str | None = None) -> "PackagePublisher":
        if not file:
            file = self.name
        source = self.paths[ResourceKind.CONFIG].source / build_file_name(file, self.extension)
        self.host.merge_config_from(source, self.name)
        return self

    def load_views(self) -> "PackagePublisher":
        self.host.load_views_from(self.paths[ResourceKind.VIEWS].source, self.name)
        return self

    def load_translations(self) -> "PackagePublisher":
        self.host.load_translations_from(self.paths[ResourceKind.TRANSLATIONS].source, self.name)
        return self

    def load_routes(self) -> "PackagePublisher":
        if not self.host.routes_are_cached():
            self.host.load_routes_from(self.paths[ResourceKind.ROUTES].source)
        return self

    # ---- path helpers ----

    def build_dest_path(self, kind: ResourceKind, *args: str) -> Path:
        return self.paths[kind].render(*args)

    def build_files(self, kind: ResourceKind, files: Iterable[str] | str | Path | None = None) -> list[Path]:
        """Resolve candidate sources: explicit names, else every stub in the source dir."""
        source_dir = self.paths[kind].source
        if isinstance(files, (str, Path)):
            files = [files]
        names = list(files or [])
        if names:
            return [source_dir / build_file_name(name, self.extension) for name in names]
        if not source_dir.is_dir():
            return []
        return sorted(p for p in source_dir.glob("*" + STUB_SUFFIX) if p.is_file())

    def _next_stamp(self, last: datetime | None) -> datetime:
        now = self._clock().replace(microsecond=0)
        if last is not None and now <= last:
            now = last + timedelta(seconds=1)
        return now

    def _collect(self, kind: ResourceKind, files: Iterable[str] | None) -> PublishSet:
        paths: PublishSet = {}
        for source in self.build_files(kind, files):
            if not source.is_file():
                _log.debug("%s: %s source %s missing; skipped", self.name, kind.value, source)
                continue
            dest = self.build_dest_path(kind, normalize_file_name(source, self.extension))
            if dest.exists():
                _log.debug("%s: %s already exists; skipped", self.name, dest)
                continue
            paths[source] = dest
        return paths

    def _publish_directory(self, kind: ResourceKind, group: str) -> None:
        dest = self.build_dest_path(kind, self.name)
        if dest.exists():
            _log.debug("%s: %s already exists; skipped", self.name, dest)
            return
        self.host.publishes({self.paths[kind].source: dest}, group, package=self.name)

    def __repr__(self) -> str:
        return f"PackagePublisher(name={self.name!r}, root={str(self.root)!r})"


__all__ = ["MIGRATION_TIMESTAMP_FORMAT", "PackagePublisher", "PublishSet"]

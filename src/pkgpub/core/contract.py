"""Interfaces between a publishing package and its host application.

`Host` lists the hooks a `PackagePublisher` consumes. `PublishablePackage` is
what a package exposes so the host bootstrap can drive it.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Mapping, Protocol, runtime_checkable

from pkgpub.core.model import HostPaths

if TYPE_CHECKING:  # pragma: no cover
    from pkgpub.core.publisher import PackagePublisher


@runtime_checkable
class Host(Protocol):
    paths: HostPaths

    def running_in_console(self) -> bool: ...

    def routes_are_cached(self) -> bool: ...

    def publishes(self, paths: Mapping[Path, Path], group: str | None = None, *, package: str | None = None) -> None: ...

    def merge_config_from(self, path: Path, namespace: str) -> None: ...

    def load_views_from(self, path: Path, namespace: str) -> None: ...

    def load_translations_from(self, path: Path, namespace: str) -> None: ...

    def load_routes_from(self, path: Path) -> None: ...

    def migration_defined(self, class_name: str) -> bool: ...


@runtime_checkable
class PublishablePackage(Protocol):
    name: str
    root: Path

    def register(self, publisher: "PackagePublisher") -> None: ...

    def boot(self, publisher: "PackagePublisher") -> None: ...


__all__ = ["Host", "PublishablePackage"]

"""Materialize registered publish mappings on disk.

A mapping entry is either a file (copied to the destination path) or a
directory (its tree is copied under the destination). Existing destination
files are left alone unless `force=True`; missing sources are skipped.
"""

from __future__ import annotations

import hashlib
import shutil
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

from pkgpub.logging import get_logger

_log = get_logger("publish")


@dataclass(frozen=True)
class PublishedItem:
    source: Path
    destination: Path
    kind: str  # "file" | "directory"
    sha256: str


def sha256_file(path: Path) -> str:
    """Return hex-encoded sha256 for a file on disk."""
    p = Path(path)
    h = hashlib.sha256()
    with p.open("rb") as f:
        for chunk in iter(lambda: f.read(1024 * 1024), b""):
            h.update(chunk)
    return h.hexdigest()


def _copy_file(source: Path, destination: Path, *, kind: str, force: bool) -> PublishedItem | None:
    if destination.exists() and not force:
        _log.debug("%s exists; not overwritten", destination)
        return None
    destination.parent.mkdir(parents=True, exist_ok=True)
    shutil.copy2(source, destination)
    _log.info("copied %s -> %s", source, destination)
    return PublishedItem(source=source, destination=destination, kind=kind, sha256=sha256_file(destination))


def copy_published(paths: Mapping[Path, Path], *, force: bool = False) -> list[PublishedItem]:
    """Copy every source -> destination pair and return what was written."""
    items: list[PublishedItem] = []
    for source, destination in sorted(paths.items()):
        src = Path(source)
        dest = Path(destination)
        if src.is_file():
            item = _copy_file(src, dest, kind="file", force=force)
            if item is not None:
                items.append(item)
        elif src.is_dir():
            for child in sorted(p for p in src.rglob("*") if p.is_file()):
                item = _copy_file(child, dest / child.relative_to(src), kind="directory", force=force)
                if item is not None:
                    items.append(item)
        else:
            _log.warning("source %s does not exist; skipped", src)
    return items


__all__ = ["PublishedItem", "copy_published", "sha256_file"]

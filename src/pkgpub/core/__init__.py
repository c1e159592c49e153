"""pkgpub core: data model, naming rules and the package publisher.

This package must not import host/publish/cli to avoid circular dependencies.
"""

from __future__ import annotations

from .contract import Host, PublishablePackage
from .model import SOURCE_EXTENSION, STUB_SUFFIX, HostPaths, PathTemplate, ResourceKind, configure_paths
from .naming import (
    add_extension,
    build_file_name,
    class_from_file,
    class_from_source,
    normalize_file_name,
    prepare_migration_file,
    strip_migration_prefix,
    strip_stub_suffix,
)
from .publisher import MIGRATION_TIMESTAMP_FORMAT, PackagePublisher, PublishSet

__all__ = [
    "Host",
    "PublishablePackage",
    "HostPaths",
    "PathTemplate",
    "ResourceKind",
    "SOURCE_EXTENSION",
    "STUB_SUFFIX",
    "configure_paths",
    "add_extension",
    "build_file_name",
    "class_from_file",
    "class_from_source",
    "normalize_file_name",
    "prepare_migration_file",
    "strip_migration_prefix",
    "strip_stub_suffix",
    "MIGRATION_TIMESTAMP_FORMAT",
    "PackagePublisher",
    "PublishSet",
]

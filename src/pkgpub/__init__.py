"""pkgpub: publish package resources into a host application.

A package hands its root directory to a `PackagePublisher`; the publisher maps
config, migration, seed, view, translation and asset sources onto the host's
directory tree and registers those mappings with the host.
"""

from __future__ import annotations

from pkgpub.core import HostPaths, PackagePublisher, PublishablePackage, ResourceKind

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "HostPaths",
    "PackagePublisher",
    "PublishablePackage",
    "ResourceKind",
]

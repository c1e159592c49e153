"""Reference host: application registries, routing and package loading."""

from __future__ import annotations

from .application import Application
from .loader import PackageLoadError, load_package_ref
from .routing import Route, Router

__all__ = [
    "Application",
    "PackageLoadError",
    "Route",
    "Router",
    "load_package_ref",
]

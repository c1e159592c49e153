"""Resolve `module:attr` references to publishable package objects."""

from __future__ import annotations

import importlib
import inspect

from pkgpub.core.contract import PublishablePackage


class PackageLoadError(ValueError):
    """Raised when a package reference cannot be resolved."""


def _parse_package_ref(ref: str) -> tuple[str, str]:
    """Parse 'module:attr'."""
    if ":" not in ref:
        raise PackageLoadError(f"{ref!r}: expected format module:attr")
    module_name, attr = ref.split(":", 1)
    module_name = module_name.strip()
    attr = attr.strip()
    if not module_name or not attr:
        raise PackageLoadError(f"{ref!r}: expected format module:attr")
    return module_name, attr


def load_package_ref(ref: str) -> PublishablePackage:
    """Import `module:attr`; a class is instantiated without arguments."""
    module_name, attr = _parse_package_ref(ref)
    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise PackageLoadError(f"{ref!r}: cannot import {module_name!r}: {e}") from e

    obj = module
    for part in attr.split("."):
        try:
            obj = getattr(obj, part)
        except AttributeError as e:
            raise PackageLoadError(f"{ref!r}: {module_name!r} has no attribute {attr!r}") from e

    if inspect.isclass(obj):
        obj = obj()

    if not isinstance(obj, PublishablePackage):
        raise PackageLoadError(f"{ref!r}: {type(obj).__name__} is not a publishable package")
    return obj


__all__ = ["PackageLoadError", "load_package_ref"]

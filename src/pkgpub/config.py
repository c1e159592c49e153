"""Host directory configuration (`pkgpub.json`).

Schema (all keys optional):
{
  "base": ".",
  "config": "config",
  "database": "database",
  "public": "public"
}

Relative entries resolve against the directory holding the file. A missing file
yields the defaults rooted at that directory.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pkgpub.core.model import HostPaths

CONFIG_FILE_NAME = "pkgpub.json"

_KEYS = ("base", "config", "database", "public")


class ConfigError(ValueError):
    """Raised when the host configuration file cannot be used."""


def _resolve_config_path(config_path: Path) -> Path:
    config_path = Path(config_path).expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILE_NAME).resolve()
    return config_path.resolve()


def _as_dir(value: Any, *, key: str, anchor: Path) -> Path | None:
    if value is None:
        return None
    if not isinstance(value, str) or not value.strip():
        raise ConfigError(f"{CONFIG_FILE_NAME}.{key}: expected a non-empty string")
    p = Path(value).expanduser()
    return p if p.is_absolute() else anchor / p


def load_host_paths(config_path: Path, *, base_dir: Path | None = None) -> HostPaths:
    """Load host directories; `base_dir` overrides the anchor for relative entries."""
    config_file = _resolve_config_path(config_path)
    anchor = Path(base_dir).resolve() if base_dir is not None else config_file.parent

    data: Any = {}
    if config_file.exists():
        text = config_file.read_text(encoding="utf-8")
        if text.strip():
            try:
                data = json.loads(text)
            except json.JSONDecodeError as e:
                raise ConfigError(f"Failed to parse {config_file.name}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"{config_file.name} must contain a JSON object at the root")

    unknown = sorted(k for k in data if k not in _KEYS)
    if unknown:
        raise ConfigError(f"{config_file.name}: unknown keys: {unknown}")

    values = {key: _as_dir(data.get(key), key=key, anchor=anchor) for key in _KEYS}
    base = values.pop("base") or anchor
    return HostPaths(base=base, **values)


def write_host_paths(paths: HostPaths, config_path: Path) -> None:
    p = Path(config_path)
    p.parent.mkdir(parents=True, exist_ok=True)
    obj = {key: str(getattr(paths, key)) for key in _KEYS}
    p.write_text(json.dumps(obj, indent=2, sort_keys=True) + "\n", encoding="utf-8")


__all__ = ["CONFIG_FILE_NAME", "ConfigError", "load_host_paths", "write_host_paths"]

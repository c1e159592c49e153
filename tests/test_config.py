from __future__ import annotations

import json
from pathlib import Path

import pytest

from conftest import write_text
from pkgpub.config import ConfigError, load_host_paths, write_host_paths
from pkgpub.core.model import HostPaths


def test_missing_config_uses_defaults_rooted_at_config_dir(tmp_path: Path) -> None:
    paths = load_host_paths(tmp_path)
    assert paths.base == tmp_path.resolve()
    assert paths.config == tmp_path.resolve() / "config"
    assert paths.public == tmp_path.resolve() / "public"


def test_relative_entries_resolve_against_file_dir(tmp_path: Path) -> None:
    write_text(tmp_path / "pkgpub.json", json.dumps({"public": "web", "database": "/srv/db"}))
    paths = load_host_paths(tmp_path / "pkgpub.json")
    root = tmp_path.resolve()
    assert paths.base == root
    assert paths.public == root / "web"
    assert paths.database == Path("/srv/db")
    assert paths.config == root / "config"


def test_base_dir_override(tmp_path: Path) -> None:
    write_text(tmp_path / "conf" / "pkgpub.json", json.dumps({"config": "settings"}))
    app_root = tmp_path / "app"
    paths = load_host_paths(tmp_path / "conf" / "pkgpub.json", base_dir=app_root)
    assert paths.base == app_root.resolve()
    assert paths.config == app_root.resolve() / "settings"


@pytest.mark.parametrize(
    ("content", "message"),
    [
        ("[1, 2]", "must contain a JSON object"),
        ("{not json", "Failed to parse"),
        ('{"public": 3}', r"pkgpub\.json\.public: expected a non-empty string"),
        ('{"assets": "x"}', r"unknown keys: \['assets'\]"),
    ],
)
def test_invalid_config_raises(tmp_path: Path, content: str, message: str) -> None:
    write_text(tmp_path / "pkgpub.json", content)
    with pytest.raises(ConfigError, match=message):
        load_host_paths(tmp_path)


def test_written_config_loads_back(tmp_path: Path) -> None:
    original = HostPaths(base=tmp_path.resolve(), public=tmp_path.resolve() / "web")
    write_host_paths(original, tmp_path / "pkgpub.json")
    assert load_host_paths(tmp_path) == original

"""Quickcheck workspace: register -> publish -> republish -> compare.

This workspace is self-contained (no repo-level assets required). It writes a
small demo package under `workspaces/00_quickcheck_publish/outputs/vendor/demo/`,
publishes it into `outputs/app/` through a console-mode `Application`, runs
the publish a second time (which must copy nothing), and writes a JSON report
plus the CSV ledger.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pkgpub.core.model import HostPaths
from pkgpub.host.application import Application
from pkgpub.publish.copy import copy_published
from pkgpub.publish.ledger import read_ledger, write_ledger


class DemoPackage:
    name = "demo"

    def __init__(self, root: Path) -> None:
        self.root = root

    def register(self, publisher) -> None:
        publisher.publish_config().publish_migrations().publish_views()

    def boot(self, publisher) -> None:
        publisher.merge_config().load_views()


def _write_text(path: Path, text: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")


def _write_json(path: Path, obj: Any) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(obj, indent=2, sort_keys=True) + "\n", encoding="utf-8")


def _fixture_package(root: Path) -> None:
    _write_text(root / "config" / "demo.stub", "GREETING = 'hello'\n")
    _write_text(root / "config" / "demo.py", "GREETING = 'hello'\n")
    _write_text(
        root / "database" / "migrations" / "0001_create_demo_table.stub",
        "class CreateDemoTable:\n    def up(self, schema):\n        schema.create('demo')\n",
    )
    _write_text(root / "resources" / "views" / "index.html", "<p>{{ greeting }}</p>\n")


def _publish_once(pkg_root: Path, app_root: Path) -> tuple[Application, int]:
    app = Application(HostPaths(base=app_root), console=True)
    app.discover_migrations()
    app.register_package(DemoPackage(pkg_root))
    app.boot()
    items = copy_published(app.paths_to_publish(package="demo"))
    write_ledger(items, app_root.parent / "ledger.csv")
    return app, len(items)


def main() -> None:
    here = Path(__file__).resolve().parent
    outputs = here / "outputs"
    outputs.mkdir(parents=True, exist_ok=True)

    pkg_root = outputs / "vendor" / "demo"
    app_root = outputs / "app"
    _fixture_package(pkg_root)

    app, first = _publish_once(pkg_root, app_root)
    _, second = _publish_once(pkg_root, app_root)

    report = {
        "package_root": str(pkg_root),
        "app_root": str(app_root),
        "first_run_copied": first,
        "second_run_copied": second,
        "merged_config": app.config.get("demo", {}),
        "ledger_rows": int(len(read_ledger(outputs / "ledger.csv"))),
    }
    _write_json(outputs / "publish_report.json", report)

    if first == 0 or second != 0:
        raise SystemExit("publish quickcheck failed; see outputs/publish_report.json")


if __name__ == "__main__":
    main()

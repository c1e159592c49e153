"""`pkgpub publish` command.

Copies every mapping registered by the referenced packages (optionally one
group tag) into the host tree and can append the copies to a CSV ledger.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import typer

from pkgpub.cli.bootstrap import boot_console_application, select_paths
from pkgpub.publish.copy import copy_published
from pkgpub.publish.ledger import write_ledger


def register(app: typer.Typer) -> None:
    @app.command("publish")
    def publish(
        packages: List[str] = typer.Argument(..., help="Package references (module:attr)."),
        tag: Optional[str] = typer.Option(None, "--tag", help="Only publish mappings registered under this group."),
        force: bool = typer.Option(False, "--force", help="Overwrite files that already exist."),
        ledger: Optional[str] = typer.Option(None, "--ledger", help="Append copied files to this CSV ledger."),
        config: Optional[str] = typer.Option(None, "--config", help="Path to pkgpub.json."),
        base_dir: Optional[str] = typer.Option(None, "--base-dir", help="Host application root."),
    ) -> None:
        """Publish package resources into the host application."""
        application, names = boot_console_application(packages, config=config, base_dir=base_dir)
        selected = select_paths(application, names, tag)

        items = copy_published(selected, force=force)
        if ledger:
            write_ledger(items, Path(ledger), group=tag)

        typer.echo(f"Published {len(items)} file(s).")

"""`pkgpub plan` command.

Registers and boots packages in console mode and prints the mappings that
`pkgpub publish` would copy, one `source -> destination` line each.
"""

from __future__ import annotations

from typing import List, Optional

import typer

from pkgpub.cli.bootstrap import boot_console_application, select_paths


def register(app: typer.Typer) -> None:
    @app.command("plan")
    def plan(
        packages: List[str] = typer.Argument(..., help="Package references (module:attr)."),
        tag: Optional[str] = typer.Option(None, "--tag", help="Only mappings registered under this group."),
        config: Optional[str] = typer.Option(None, "--config", help="Path to pkgpub.json."),
        base_dir: Optional[str] = typer.Option(None, "--base-dir", help="Host application root."),
    ) -> None:
        """Show what would be published."""
        application, names = boot_console_application(packages, config=config, base_dir=base_dir)
        selected = select_paths(application, names, tag)
        if not selected:
            typer.echo("Nothing to publish.")
            return
        for source, destination in sorted(selected.items()):
            typer.echo(f"{source} -> {destination}")

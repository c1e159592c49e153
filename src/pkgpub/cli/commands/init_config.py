"""`pkgpub init` command: write a default `pkgpub.json`."""

from __future__ import annotations

from pathlib import Path

import typer

from pkgpub.config import CONFIG_FILE_NAME, write_host_paths
from pkgpub.core.model import HostPaths


def register(app: typer.Typer) -> None:
    @app.command("init")
    def init(
        base_dir: str = typer.Option(".", "--base-dir", help="Host application root."),
        force: bool = typer.Option(False, "--force", help="Overwrite an existing pkgpub.json."),
    ) -> None:
        """Write pkgpub.json with the default host directories."""
        root = Path(base_dir).resolve()
        out = root / CONFIG_FILE_NAME
        if out.exists() and not force:
            raise typer.BadParameter(f"{out} already exists (use --force)", param_hint="--base-dir")
        write_host_paths(HostPaths(base=root), out)
        typer.echo(str(out))

"""pkgpub CLI entrypoint."""

from __future__ import annotations

import typer

from pkgpub.logging import configure_logging

app = typer.Typer(
    name="pkgpub",
    add_completion=False,
    no_args_is_help=True,
    help="Publish package resources into a host application.",
)


@app.callback()
def _callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    """pkgpub CLI."""
    configure_logging(verbose=verbose)


@app.command("version")
def version() -> None:
    """Print the installed pkgpub version."""
    from pkgpub import __version__

    typer.echo(__version__)


def _register_commands() -> None:
    """Register CLI subcommands."""
    from pkgpub.cli.commands import init_config as init_config_cmd
    from pkgpub.cli.commands import plan as plan_cmd
    from pkgpub.cli.commands import publish as publish_cmd

    init_config_cmd.register(app)
    plan_cmd.register(app)
    publish_cmd.register(app)


_register_commands()

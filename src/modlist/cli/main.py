"""modlist CLI entrypoint.

Typer application; subcommands live in `modlist.cli.commands` and register
themselves on `app`.
"""

from __future__ import annotations

import logging

import typer

app = typer.Typer(
    name="modlist",
    add_completion=False,
    no_args_is_help=True,
    help="Inspect the static mod registry.",
)


@app.callback()
def _callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    """modlist CLI."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        )


@app.command("version")
def version() -> None:
    """Print the installed modlist version."""
    from modlist import __version__

    typer.echo(__version__)


def _register_commands() -> None:
    """Register CLI subcommands.

    Importing these modules must remain lightweight so `modlist --help` is fast.
    """
    from modlist.cli.commands import list_mods as list_mods_cmd
    from modlist.cli.commands import validate_data as validate_data_cmd

    list_mods_cmd.register(app)
    validate_data_cmd.register(app)


_register_commands()

"""Main CLI application entry point.

Defines the Typer application and global options.
"""

import logging
from typing import Annotated

import typer
from rich.logging import RichHandler

from jpikit import __version__
from jpikit.cli.commands import check, info, init
from jpikit.utils.formatting import err_console

# Create main Typer app
app = typer.Typer(
    name="jpikit",
    help="Packaging checks for Jenkins plugins.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"jpikit version {__version__}")
        raise typer.Exit()


def _configure_logging(verbose: bool) -> None:
    """Route debug logging through Rich when --verbose is given."""
    if not verbose:
        return
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


@app.callback()
def main(
    ctx: typer.Context,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable verbose output.",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Suppress non-essential output.",
        ),
    ] = False,
) -> None:
    """jpikit - Packaging checks for Jenkins plugins.

    Verify that compiled class directories can be merged into a
    single plugin archive, and manage the plugin's packaging settings.
    """
    _configure_logging(verbose)
    # Store options in context for subcommands
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet


# Register commands
app.add_typer(check.app, name="check")
app.add_typer(init.app, name="init")
app.add_typer(info.app, name="info")


if __name__ == "__main__":
    app()

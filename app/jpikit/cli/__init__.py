"""CLI package for jpikit.

This package contains the Typer application and all subcommands.
"""

from jpikit.cli.main import app

__all__ = ["app"]

"""CLI commands for jpikit.

This package contains all subcommand implementations.
"""

from jpikit.cli.commands import check, info, init

__all__ = ["check", "info", "init"]

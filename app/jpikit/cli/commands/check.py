"""Check command implementation.

Verifies that compiled class directories can be merged into one
plugin archive and writes the manifest of discovered paths.
"""

import json
from enum import Enum
from pathlib import Path
from typing import Annotated

import typer

from jpikit.core.config import require_config
from jpikit.core.paths import get_project_config_path, resolve_project_path
from jpikit.utils.formatting import (
    console,
    create_entry_table,
    print_error,
    print_info,
    print_success,
)
from jpikit.verification.checker import OverlapChecker
from jpikit.verification.errors import OverlapError
from jpikit.verification.models import EntryKind, OverlapScan

app = typer.Typer(
    help="Check classes directories for overlapping sources.",
    invoke_without_command=True,
)


class OutputFormat(str, Enum):
    """Output format options."""

    TABLE = "table"
    JSON = "json"


@app.callback(invoke_without_command=True)
def check_overlapping_sources(
    ctx: typer.Context,
    classes_dirs: Annotated[
        list[Path] | None,
        typer.Argument(
            help="Classes directories to check, in merge order.",
            show_default=False,
        ),
    ] = None,
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Manifest file listing discovered paths.",
        ),
    ] = None,
    config_path: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Project config file (default: ./jpikit.toml).",
        ),
    ] = None,
    output_format: Annotated[
        OutputFormat,
        typer.Option(
            "--format",
            "-f",
            help="Output format: table or json.",
            case_sensitive=False,
        ),
    ] = OutputFormat.TABLE,
) -> None:
    """Check classes directories for overlapping Sezpoz files and plugin descriptors.

    Directories given on the command line are used as-is. Anything not
    given is taken from the [verification] section of jpikit.toml.

    Examples:
        jpikit check                                   # Use jpikit.toml
        jpikit check build/java build/groovy -o discovered.txt
        jpikit check --format json                     # Print entries as JSON
    """
    # Skip if a subcommand is being invoked
    if ctx.invoked_subcommand is not None:
        return

    dirs, output_file = _resolve_inputs(classes_dirs, output, config_path)
    checker = OverlapChecker(dirs, output_file)

    try:
        result = checker.validate()
    except OverlapError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    if output_format == OutputFormat.JSON:
        _print_json(result)
        return

    quiet = bool(ctx.obj and ctx.obj.get("quiet"))
    if result.entries and not quiet:
        _print_table(result)
    print_success(f"No overlapping sources in {len(dirs)} classes directories.")
    if not quiet:
        print_info(f"Manifest written to {output_file}")


def _resolve_inputs(
    classes_dirs: list[Path] | None,
    output: Path | None,
    config_path: Path | None,
) -> tuple[list[Path], Path]:
    """Fill in missing inputs from the project config.

    Args:
        classes_dirs: Directories given on the command line.
        output: Manifest path given on the command line.
        config_path: Explicit config file, if any.

    Returns:
        Tuple of (classes directories, manifest path).
    """
    if classes_dirs and output is not None:
        return list(classes_dirs), output

    path = config_path or get_project_config_path()
    config = require_config(path)
    base_dir = path.resolve().parent

    if classes_dirs:
        dirs = list(classes_dirs)
    else:
        dirs = [resolve_project_path(d, base_dir) for d in config.verification.classes_dirs]
    output_file = output or resolve_project_path(config.verification.output_file, base_dir)
    return dirs, output_file


def _print_table(result: OverlapScan) -> None:
    """Display discovered entries as a Rich table."""
    table = create_entry_table()
    for entry in result.entries:
        style = "descriptor" if entry.kind == EntryKind.PLUGIN_DESCRIPTOR else "annotation"
        table.add_row(f"[{style}]{entry.kind.value}[/]", entry.path, entry.root)
    console.print(table)


def _print_json(result: OverlapScan) -> None:
    """Print discovered entries as JSON."""
    data = [
        {
            "path": entry.path,
            "key": entry.key,
            "root": entry.root,
            "kind": entry.kind.value,
            "is_file": entry.is_file,
        }
        for entry in result.entries
    ]
    typer.echo(json.dumps(data, indent=2))

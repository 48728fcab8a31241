"""Info command implementation.

Shows the resolved plugin packaging settings.
"""

from pathlib import Path
from typing import Annotated

import typer
from rich.table import Table

from jpikit.core.config import require_config
from jpikit.models.extension import PluginExtension
from jpikit.utils.formatting import console

app = typer.Typer(
    help="Show resolved plugin settings.",
    invoke_without_command=True,
)


@app.callback(invoke_without_command=True)
def show_info(
    ctx: typer.Context,
    config_path: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Project config file (default: ./jpikit.toml).",
        ),
    ] = None,
) -> None:
    """Show the plugin settings after defaults and deprecated names are applied."""
    if ctx.invoked_subcommand is not None:
        return

    config = require_config(config_path)
    _print_extension(config.plugin)

    console.print("\n[bold_header]Overlap check[/]")
    for classes_dir in config.verification.classes_dirs:
        console.print(f"  classes dir: {classes_dir}")
    console.print(f"  output file: {config.verification.output_file}")


def _print_extension(extension: PluginExtension) -> None:
    """Display the extension settings as a two-column table."""
    table = Table(title="Plugin Settings", show_header=False, border_style="border")
    table.add_column("Setting", style="header", no_wrap=True)
    table.add_column("Value", style="text")

    rows: list[tuple[str, str]] = [
        ("Project", extension.project_name),
        ("Plugin id", extension.plugin_id),
        ("Display name", extension.display_name),
        ("Archive", extension.archive_name),
        ("URL", extension.url or "-"),
        ("Jenkins version", extension.jenkins_version or "-"),
        ("Compatible since", extension.compatible_since_version or "-"),
        ("Sandboxed", str(extension.sandboxed).lower()),
        ("Plugin-first class loader", str(extension.plugin_first_class_loader).lower()),
        ("Masked classes", extension.mask_classes or "-"),
        ("Generate tests", str(extension.generate_tests).lower()),
        ("Repository", extension.repo_url),
        ("Snapshot repository", extension.snapshot_repo_url),
    ]
    for dev in extension.developers:
        rows.append(("Developer", f"{dev.id} ({dev.name or '-'})"))
    for lic in extension.licenses:
        rows.append(("License", lic.name))

    for setting, value in rows:
        table.add_row(setting, value)
    console.print(table)

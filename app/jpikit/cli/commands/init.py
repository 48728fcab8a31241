"""Init command implementation.

Creates a jpikit.toml with default packaging settings.
"""

from pathlib import Path
from typing import Annotated

import typer

from jpikit.core.config import ConfigError, config_exists, save_config
from jpikit.core.paths import get_project_config_path
from jpikit.models.extension import PluginExtension, ProjectConfig, VerificationConfig
from jpikit.utils.formatting import print_error, print_info, print_success, print_warning

app = typer.Typer(
    help="Create a jpikit.toml for the current project.",
    invoke_without_command=True,
)


@app.callback(invoke_without_command=True)
def init_config(
    ctx: typer.Context,
    name: Annotated[
        str | None,
        typer.Option(
            "--name",
            "-n",
            help="Project name (default: name of the project directory).",
        ),
    ] = None,
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Output path for the config file.",
        ),
    ] = None,
    force: Annotated[
        bool,
        typer.Option(
            "--force",
            "-f",
            help="Overwrite an existing config file.",
        ),
    ] = False,
) -> None:
    """Initialize a new jpikit.toml.

    The plugin id defaults to the project name without a trailing
    "-plugin", and the overlap check reads build/classes/java/main.

    Examples:
        jpikit init                         # Create ./jpikit.toml
        jpikit init --name git-plugin       # Set the project name
        jpikit init --force                 # Overwrite existing config
    """
    # Skip if a subcommand is being invoked
    if ctx.invoked_subcommand is not None:
        return

    output_path = output or get_project_config_path()

    if config_exists(output_path):
        if not force:
            print_error(f"Config already exists: {output_path}")
            print_info("Use --force to overwrite or specify a different path with --output.")
            raise typer.Exit(code=1)
        print_warning(f"Overwriting existing config: {output_path}")

    project_name = name or output_path.resolve().parent.name
    config = ProjectConfig(
        plugin=PluginExtension(project_name=project_name),
        verification=VerificationConfig(),
    )

    try:
        saved_path = save_config(config, output_path)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    print_success(f"Config created: {saved_path}")
    print_info(f"Plugin id: {config.plugin.plugin_id}")

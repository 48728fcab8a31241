"""Project configuration file I/O.

This module provides functions for loading and saving jpikit.toml
in TOML format with proper validation using Pydantic models.
"""

import os
import tomllib
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Any

import tomli_w
from pydantic import ValidationError

from jpikit.core.paths import get_project_config_path
from jpikit.models.extension import ProjectConfig


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigNotFoundError(ConfigError):
    """Raised when the configuration file is not found."""


class ConfigParseError(ConfigError):
    """Raised when the configuration file cannot be parsed."""


class ConfigValidationError(ConfigError):
    """Raised when the configuration content is invalid."""


def load_config(path: Path | None = None) -> ProjectConfig:
    """Load and validate a project configuration from a TOML file.

    When the [plugin] section does not name the project, the name of
    the directory holding the file is used.

    Args:
        path: Path to the config file. If None, uses ./jpikit.toml.

    Returns:
        Validated ProjectConfig object.

    Raises:
        ConfigNotFoundError: If the file doesn't exist.
        ConfigParseError: If the TOML syntax is invalid.
        ConfigValidationError: If the content doesn't match the schema.
    """
    config_path = path or get_project_config_path()

    if not config_path.exists():
        raise ConfigNotFoundError(f"Config not found: {config_path}")

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(f"Invalid TOML syntax: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read config: {e}") from e

    plugin = data.setdefault("plugin", {})
    if isinstance(plugin, dict):
        plugin.setdefault("project_name", config_path.resolve().parent.name)

    try:
        return ProjectConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigValidationError(f"Invalid config content: {e}") from e


def save_config(config: ProjectConfig, path: Path | None = None) -> Path:
    """Save a project configuration to a TOML file.

    The file is written atomically through a temporary file in the same
    directory. Unset optional values are omitted.

    Args:
        config: The ProjectConfig object to save.
        path: Path to save to. If None, uses ./jpikit.toml.

    Returns:
        Path where the config was saved.

    Raises:
        ConfigError: If the file cannot be written.
    """
    config_path = path or get_project_config_path()
    data = _config_to_dict(config)

    tmp_path: Path | None = None
    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)
        with NamedTemporaryFile(
            mode="wb",
            dir=config_path.parent,
            delete=False,
            suffix=".tmp",
        ) as f:
            tmp_path = Path(f.name)
            tomli_w.dump(data, f)
        os.replace(tmp_path, config_path)
    except OSError as e:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise ConfigError(f"Failed to write config: {e}") from e

    return config_path


def config_exists(path: Path | None = None) -> bool:
    """Check if a configuration file exists.

    Args:
        path: Path to check. If None, uses ./jpikit.toml.

    Returns:
        True if the file exists, False otherwise.
    """
    config_path = path or get_project_config_path()
    return config_path.exists()


def require_config(config_path: Path | None = None) -> ProjectConfig:
    """Load the configuration or exit with a helpful error message.

    Args:
        config_path: Optional custom config path.

    Returns:
        Loaded and validated ProjectConfig.

    Raises:
        typer.Exit: If the configuration cannot be loaded.
    """
    import typer

    from jpikit.utils.formatting import print_error, print_info

    path = config_path or get_project_config_path()
    try:
        return load_config(path)
    except ConfigNotFoundError as e:
        print_error(f"Config not found: {path}")
        print_info("Run 'jpikit init' to create one.")
        raise typer.Exit(code=1) from e
    except ConfigError as e:
        print_error(f"Failed to load config: {e}")
        raise typer.Exit(code=1) from e


def _config_to_dict(config: ProjectConfig) -> dict[str, Any]:
    """Convert a ProjectConfig to a dictionary suitable for TOML serialization.

    TOML has no null, so None values are dropped.
    """
    return config.model_dump(mode="json", exclude_none=True)

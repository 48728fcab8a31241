"""Path management for jpikit.

Project settings live in jpikit.toml next to the build. User-level
preferences follow the XDG Base Directory Specification:

- Config: ~/.config/jpikit/
"""

import os
from pathlib import Path

# Application identifier for directory naming
APP_NAME = "jpikit"

DEFAULT_CONFIG_FILENAME = "jpikit.toml"


def get_config_dir() -> Path:
    """Get the user configuration directory path.

    Returns:
        Path to ~/.config/jpikit/ (or XDG_CONFIG_HOME/jpikit/).
    """
    base = os.environ.get("XDG_CONFIG_HOME")
    if base:
        return Path(base) / APP_NAME
    return Path.home() / ".config" / APP_NAME


def get_user_theme_path() -> Path:
    """Get the user theme override path.

    Returns:
        Path to ~/.config/jpikit/theme.toml.
    """
    return get_config_dir() / "theme.toml"


def get_project_config_path(project_dir: Path | None = None) -> Path:
    """Get the project configuration file path.

    Args:
        project_dir: Project directory. Defaults to the current directory.

    Returns:
        Path to <project_dir>/jpikit.toml.
    """
    return (project_dir or Path.cwd()) / DEFAULT_CONFIG_FILENAME


def resolve_project_path(path: str | Path, base_dir: Path) -> Path:
    """Resolve a configured path against the directory of its config file.

    Args:
        path: Path as written in the configuration.
        base_dir: Directory containing the configuration file.

    Returns:
        The path unchanged if absolute, otherwise joined onto base_dir.
    """
    candidate = Path(path).expanduser()
    if candidate.is_absolute():
        return candidate
    return base_dir / candidate

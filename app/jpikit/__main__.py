"""Allow running as ``python -m jpikit``."""

from jpikit.cli.main import app

app()

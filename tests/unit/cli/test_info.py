"""Unit tests for the info command."""

from pathlib import Path

from jpikit.cli.main import app
from typer.testing import CliRunner

runner = CliRunner()


class TestInfo:
    """Tests for jpikit info."""

    def test_shows_resolved_settings(self, tmp_path: Path) -> None:
        """Derived identifiers and deprecated settings are resolved."""
        config_path = tmp_path / "jpikit.toml"
        config_path.write_text(
            '[plugin]\nproject_name = "acme-plugin"\ncore_version = "2.222"\n'
            '[[plugin.developers]]\nid = "jdoe"\n'
        )

        result = runner.invoke(app, ["info", "-c", str(config_path)])

        assert result.exit_code == 0
        assert "Plugin Settings" in result.output
        assert "acme.hpi" in result.output
        assert "2.222" in result.output
        assert "jdoe" in result.output

    def test_missing_config(self, tmp_path: Path) -> None:
        """A missing config exits with an error."""
        result = runner.invoke(app, ["info", "-c", str(tmp_path / "jpikit.toml")])

        assert result.exit_code == 1

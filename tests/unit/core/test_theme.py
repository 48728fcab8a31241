"""Unit tests for console theme loading."""

from pathlib import Path

import pytest
from jpikit.core.theme import ThemeColors, get_rich_theme, load_theme
from pydantic import ValidationError


class TestThemeColors:
    """Tests for ThemeColors validation."""

    def test_defaults_valid(self) -> None:
        """Default colors are valid hex codes."""
        colors = ThemeColors()
        assert colors.error.startswith("#")

    def test_short_hex_accepted(self) -> None:
        """#RGB colors are accepted."""
        assert ThemeColors(info="#abc").info == "#abc"

    @pytest.mark.parametrize("value", ["red", "#12", "#zzzzzz"])
    def test_invalid_color_rejected(self, value: str) -> None:
        """Values that are not hex colors are rejected."""
        with pytest.raises(ValidationError):
            ThemeColors(info=value)


class TestLoadTheme:
    """Tests for load_theme function."""

    def test_missing_file_uses_defaults(self, tmp_path: Path) -> None:
        """No override file means default colors."""
        assert load_theme(tmp_path / "theme.toml") == ThemeColors()

    def test_user_override(self, tmp_path: Path) -> None:
        """Colors from the override file replace defaults."""
        theme_path = tmp_path / "theme.toml"
        theme_path.write_text('[colors]\nsuccess = "#00ff00"\n')

        colors = load_theme(theme_path)

        assert colors.success == "#00ff00"
        assert colors.error == ThemeColors().error

    def test_invalid_override_falls_back(self, tmp_path: Path) -> None:
        """An invalid override falls back to defaults."""
        theme_path = tmp_path / "theme.toml"
        theme_path.write_text('[colors]\nsuccess = "green"\n')

        assert load_theme(theme_path) == ThemeColors()

    def test_unparseable_override_falls_back(self, tmp_path: Path) -> None:
        """Broken TOML falls back to defaults."""
        theme_path = tmp_path / "theme.toml"
        theme_path.write_text("[colors")

        assert load_theme(theme_path) == ThemeColors()


class TestGetRichTheme:
    """Tests for get_rich_theme function."""

    def test_styles_present(self) -> None:
        """The Rich theme defines the styles used by the CLI."""
        theme = get_rich_theme(ThemeColors())

        for name in ("info", "warning", "error", "success", "annotation", "descriptor"):
            assert name in theme.styles

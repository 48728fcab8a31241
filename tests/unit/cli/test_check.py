"""Unit tests for the check command."""

import json
import os
from pathlib import Path

from jpikit.cli.main import app
from typer.testing import CliRunner

runner = CliRunner()


def _annotation(root: Path, name: str) -> str:
    return os.path.abspath(root / "META-INF" / "annotations" / name)


class TestCheckWithOptions:
    """Tests for jpikit check with directories given on the command line."""

    def test_disjoint_dirs_write_manifest(self, make_classes_dir, output_file: Path) -> None:
        """Disjoint directories pass and the manifest is written."""
        dir_a = make_classes_dir("a", annotations=["Foo.sz"])
        dir_b = make_classes_dir("b", annotations=["Bar.sz"])

        result = runner.invoke(
            app, ["check", str(dir_a), str(dir_b), "-o", str(output_file)]
        )

        assert result.exit_code == 0
        assert "No overlapping sources" in result.output
        assert output_file.read_text(encoding="utf-8").splitlines() == [
            _annotation(dir_a, "Foo.sz"),
            _annotation(dir_b, "Bar.sz"),
        ]

    def test_table_output(self, make_classes_dir, output_file: Path) -> None:
        """Discovered entries are shown in a table."""
        root = make_classes_dir("a", annotations=["Foo.sz"])

        result = runner.invoke(app, ["check", str(root), "-o", str(output_file)])

        assert result.exit_code == 0
        assert "Discovered Entries" in result.output

    def test_json_output(self, make_classes_dir, output_file: Path) -> None:
        """--format json prints entries as JSON."""
        root = make_classes_dir("a", annotations=["Foo.sz"], plugin=True)

        result = runner.invoke(
            app, ["check", str(root), "-o", str(output_file), "--format", "json"]
        )

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert [item["kind"] for item in data] == ["annotation_index", "plugin_descriptor"]
        assert data[0]["path"] == _annotation(root, "Foo.sz")
        assert data[0]["key"] == "Foo.sz"

    def test_collision_exits_with_error(self, make_classes_dir, output_file: Path) -> None:
        """An overlapping Sezpoz file fails the command and writes nothing."""
        dir_a = make_classes_dir("a", annotations=["Foo.sz"])
        dir_b = make_classes_dir("b", annotations=["Foo.sz"])

        result = runner.invoke(
            app, ["check", str(dir_a), str(dir_b), "-o", str(output_file)]
        )

        assert result.exit_code == 1
        assert "Foo.sz" in result.output
        assert "Sezpoz" in result.output
        assert not output_file.exists()

    def test_multiple_plugins_exit_with_error(self, make_classes_dir, output_file: Path) -> None:
        """Two plugin descriptors fail the command and write nothing."""
        dir_a = make_classes_dir("a", plugin=True)
        dir_b = make_classes_dir("b", plugin=True)

        result = runner.invoke(
            app, ["check", str(dir_a), str(dir_b), "-o", str(output_file)]
        )

        assert result.exit_code == 1
        assert "multiple" in result.output
        assert not output_file.exists()

    def test_options_before_directories(self, make_classes_dir, output_file: Path) -> None:
        """Options may precede the positional directories."""
        dir_a = make_classes_dir("a", annotations=["Foo.sz"])
        dir_b = make_classes_dir("b", annotations=["Bar.sz"])

        result = runner.invoke(app, ["check", "-o", str(output_file), str(dir_a), str(dir_b)])

        assert result.exit_code == 0
        assert [Path(line).name for line in output_file.read_text().splitlines()] == [
            "Foo.sz",
            "Bar.sz",
        ]

    def test_directory_order_is_kept(self, make_classes_dir, output_file: Path) -> None:
        """Directories are scanned in the order they are given."""
        dir_a = make_classes_dir("a", annotations=["Foo.sz"])
        dir_b = make_classes_dir("b", annotations=["Bar.sz"])

        result = runner.invoke(app, ["check", str(dir_b), str(dir_a), "-o", str(output_file)])

        assert result.exit_code == 0
        assert output_file.read_text(encoding="utf-8").splitlines() == [
            _annotation(dir_b, "Bar.sz"),
            _annotation(dir_a, "Foo.sz"),
        ]

    def test_quiet_suppresses_table(self, make_classes_dir, output_file: Path) -> None:
        """--quiet hides the entry table."""
        root = make_classes_dir("a", annotations=["Foo.sz"])

        result = runner.invoke(app, ["-q", "check", str(root), "-o", str(output_file)])

        assert result.exit_code == 0
        assert "Discovered Entries" not in result.output
        assert output_file.exists()


class TestCheckWithConfig:
    """Tests for jpikit check reading inputs from jpikit.toml."""

    def test_inputs_from_config(self, make_classes_dir, tmp_path: Path, monkeypatch) -> None:
        """Classes directories and output resolve relative to the config file."""
        make_classes_dir("build/classes/java/main", annotations=["Foo.sz"])
        make_classes_dir("build/classes/groovy/main", annotations=["Bar.sz"])
        (tmp_path / "jpikit.toml").write_text(
            "[plugin]\n"
            'project_name = "demo-plugin"\n'
            "[verification]\n"
            'classes_dirs = ["build/classes/java/main", "build/classes/groovy/main"]\n'
            'output_file = "build/discovered.txt"\n'
        )
        monkeypatch.chdir(tmp_path)

        result = runner.invoke(app, ["check"])

        assert result.exit_code == 0
        lines = (tmp_path / "build" / "discovered.txt").read_text(encoding="utf-8").splitlines()
        assert [Path(line).name for line in lines] == ["Foo.sz", "Bar.sz"]

    def test_explicit_config_path(self, make_classes_dir, tmp_path: Path) -> None:
        """--config points at a config outside the working directory."""
        make_classes_dir("project/build/classes/java/main", annotations=["Foo.sz"])
        config_path = tmp_path / "project" / "jpikit.toml"
        config_path.write_text('[plugin]\nproject_name = "demo"\n')

        result = runner.invoke(app, ["check", "--config", str(config_path)])

        assert result.exit_code == 0
        assert (tmp_path / "project" / "build" / "check-overlap" / "discovered.txt").exists()

    def test_command_line_output_overrides_config(
        self, make_classes_dir, tmp_path: Path
    ) -> None:
        """An explicit --output wins over the configured output file."""
        make_classes_dir("build/classes/java/main", annotations=["Foo.sz"])
        config_path = tmp_path / "jpikit.toml"
        config_path.write_text('[plugin]\nproject_name = "demo"\n')
        output = tmp_path / "custom.txt"

        result = runner.invoke(app, ["check", "-c", str(config_path), "-o", str(output)])

        assert result.exit_code == 0
        assert output.exists()

    def test_directories_without_output_use_config(
        self, make_classes_dir, tmp_path: Path, monkeypatch
    ) -> None:
        """Positional directories with no --output take the output file from config."""
        root = make_classes_dir("custom", annotations=["Foo.sz"])
        (tmp_path / "jpikit.toml").write_text(
            '[plugin]\nproject_name = "demo"\n[verification]\noutput_file = "out/found.txt"\n'
        )
        monkeypatch.chdir(tmp_path)

        result = runner.invoke(app, ["check", str(root)])

        assert result.exit_code == 0
        lines = (tmp_path / "out" / "found.txt").read_text(encoding="utf-8").splitlines()
        assert lines == [_annotation(root, "Foo.sz")]

    def test_missing_config_exits(self, tmp_path: Path, monkeypatch) -> None:
        """Without directories or a config, the command fails with a hint."""
        monkeypatch.chdir(tmp_path)

        result = runner.invoke(app, ["check"])

        assert result.exit_code == 1
        assert "jpikit init" in result.output

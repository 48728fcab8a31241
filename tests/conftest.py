"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

from collections.abc import Callable, Iterable
from pathlib import Path

import pytest

ClassesDirFactory = Callable[..., Path]


@pytest.fixture
def make_classes_dir(tmp_path: Path) -> ClassesDirFactory:
    """Factory creating a compiled classes directory under tmp_path.

    Usage: make_classes_dir("java", annotations=["Foo.sz"], plugin=True)
    """

    def _make(
        name: str,
        annotations: Iterable[str] = (),
        plugin: bool = False,
        plugin_content: str = "org.example.PluginImpl\n",
    ) -> Path:
        root = tmp_path / name
        root.mkdir(parents=True, exist_ok=True)
        annotation_names = list(annotations)
        if annotation_names:
            annotations_dir = root / "META-INF" / "annotations"
            annotations_dir.mkdir(parents=True, exist_ok=True)
            for annotation in annotation_names:
                (annotations_dir / annotation).write_bytes(b"\xac\xed\x00\x05")
        if plugin:
            services = root / "META-INF" / "services"
            services.mkdir(parents=True, exist_ok=True)
            (services / "hudson.Plugin").write_text(plugin_content)
        return root

    return _make


@pytest.fixture
def output_file(tmp_path: Path) -> Path:
    """Manifest destination inside a not-yet-existing build directory."""
    return tmp_path / "build" / "check-overlap" / "discovered.txt"

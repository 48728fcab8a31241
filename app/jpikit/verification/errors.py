"""Exceptions raised by the overlap checker."""

from collections.abc import Sequence
from pathlib import Path


class OverlapError(Exception):
    """Base exception for overlap verification failures."""


class SezpozCollisionError(OverlapError):
    """Raised when two classes directories contain the same annotation index."""

    def __init__(self, name: str, first_root: str, root: str) -> None:
        self.name = name
        self.first_root = first_root
        self.root = root
        super().__init__(f"Found overlapping Sezpoz file: {name}. Use joint compilation!")


class PluginMultiplicityError(OverlapError):
    """Raised when more than one classes directory declares a plugin implementation."""

    def __init__(self, candidates: Sequence[str]) -> None:
        self.candidates = tuple(candidates)
        implementations = ", ".join(self.candidates)
        super().__init__(
            "Found multiple directories containing Jenkins plugin implementations "
            f"('{implementations}'). Use joint compilation to work around this problem."
        )


class ManifestWriteError(OverlapError):
    """Raised when the discovered-paths manifest cannot be written."""

    def __init__(self, destination: Path, cause: OSError) -> None:
        self.destination = destination
        super().__init__(f"Failed to write to {destination}: {cause}")

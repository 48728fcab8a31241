"""Verification domain models for overlap detection.

This module defines the entries discovered while scanning compiled
class directories and the tagged outcomes of a scan: either the
ordered list of manifest entries, or the conflict that blocks merging
the directories into a single plugin archive.
"""

from dataclasses import dataclass
from enum import Enum

# Relative locations inspected inside every classes directory
ANNOTATIONS_DIR = "META-INF/annotations"
PLUGIN_DESCRIPTOR = "META-INF/services/hudson.Plugin"


class EntryKind(str, Enum):
    """Category of a discovered entry.

    Attributes:
        ANNOTATION_INDEX: Sezpoz index under META-INF/annotations.
        PLUGIN_DESCRIPTOR: The hudson.Plugin service registration file.
    """

    ANNOTATION_INDEX = "annotation_index"
    PLUGIN_DESCRIPTOR = "plugin_descriptor"


@dataclass(frozen=True, slots=True)
class DiscoveredEntry:
    """A path found under one of the inspected subdirectories.

    Attributes:
        path: Absolute filesystem path of the entry.
        key: Name used for collision comparison (file name relative to
            the scanned subdirectory).
        root: Classes directory the entry was found in.
        kind: Whether this is an annotation index or plugin descriptor.
        is_file: True if the entry is a regular file.
    """

    path: str
    key: str
    root: str
    kind: EntryKind
    is_file: bool = True

    def __post_init__(self) -> None:
        """Validate entry data after initialization."""
        if not self.path:
            msg = "Path cannot be empty"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class OverlapScan:
    """Successful scan: every discovered entry, in manifest order.

    Annotation entries come first (root order, then name order within
    a root), followed by the plugin descriptor if one was found.
    """

    entries: tuple[DiscoveredEntry, ...]

    @property
    def paths(self) -> list[str]:
        """Absolute paths as they appear in the manifest."""
        return [entry.path for entry in self.entries]


@dataclass(frozen=True, slots=True)
class SezpozCollision:
    """Two classes directories produced an annotation index with the same name.

    Attributes:
        name: File name of the colliding index.
        first_root: Directory that registered the name first.
        root: Directory in which the duplicate was found.
    """

    name: str
    first_root: str
    root: str


@dataclass(frozen=True, slots=True)
class PluginMultiplicity:
    """More than one classes directory declares a plugin implementation.

    Attributes:
        candidates: Absolute descriptor paths, in root order.
    """

    candidates: tuple[str, ...]


ScanOutcome = OverlapScan | SezpozCollision | PluginMultiplicity

"""Overlap checker for compiled class directories.

Before several classes directories are merged into one plugin archive,
each one is inspected for Sezpoz annotation indexes and for the
hudson.Plugin service descriptor. Two indexes with the same name would
silently overwrite each other in the merged archive, and two plugin
descriptors mean the sources were compiled separately when they must
be compiled jointly. Either case aborts the check before any output is
written.
"""

import logging
import os
from collections.abc import Callable, Iterable, Iterator
from pathlib import Path

from jpikit.verification.errors import PluginMultiplicityError, SezpozCollisionError
from jpikit.verification.manifest import write_manifest
from jpikit.verification.models import (
    ANNOTATIONS_DIR,
    PLUGIN_DESCRIPTOR,
    DiscoveredEntry,
    EntryKind,
    OverlapScan,
    PluginMultiplicity,
    ScanOutcome,
    SezpozCollision,
)

logger = logging.getLogger(__name__)


class OverlapChecker:
    """Detects layout conflicts among compiled class directories.

    Args:
        classes_dirs: Classes directories in the order they are merged.
            The order decides which directory is reported first in a
            collision, so it is never sorted.
        output_file: Manifest file written on success.
    """

    def __init__(self, classes_dirs: Iterable[Path], output_file: Path) -> None:
        self._classes_dirs = tuple(Path(d) for d in classes_dirs)
        self._output_file = Path(output_file)

    @property
    def classes_dirs(self) -> tuple[Path, ...]:
        """Classes directories in merge order."""
        return self._classes_dirs

    @property
    def output_file(self) -> Path:
        """Manifest destination."""
        return self._output_file

    def scan(self) -> ScanOutcome:
        """Inspect every classes directory without touching the output file.

        Returns:
            OverlapScan with all entries in manifest order, or the first
            SezpozCollision encountered, or PluginMultiplicity when more
            than one directory holds a plugin descriptor.
        """
        discovered: list[DiscoveredEntry] = []
        registry: dict[str, str] = {}

        for classes_dir in self._classes_dirs:
            root = os.path.abspath(classes_dir)
            for entry in self._list_annotations(classes_dir, root):
                discovered.append(entry)
                if not entry.is_file:
                    continue
                if entry.key in registry:
                    first_root = registry[entry.key]
                    return SezpozCollision(name=entry.key, first_root=first_root, root=root)
                registry[entry.key] = root

        descriptors: list[DiscoveredEntry] = []
        for classes_dir in self._classes_dirs:
            plugin = classes_dir / PLUGIN_DESCRIPTOR
            if _check_path(plugin, Path.exists):
                descriptors.append(
                    DiscoveredEntry(
                        path=os.path.abspath(plugin),
                        key=plugin.name,
                        root=os.path.abspath(classes_dir),
                        kind=EntryKind.PLUGIN_DESCRIPTOR,
                        is_file=_check_path(plugin, Path.is_file),
                    )
                )

        if len(descriptors) > 1:
            return PluginMultiplicity(candidates=tuple(d.path for d in descriptors))

        discovered.extend(descriptors)
        return OverlapScan(entries=tuple(discovered))

    def validate(self) -> OverlapScan:
        """Check the classes directories and write the manifest.

        All checks complete before the output file is opened, so a
        failed check never creates or modifies the manifest.

        Returns:
            The successful scan whose paths were written.

        Raises:
            SezpozCollisionError: If two directories share an annotation index name.
            PluginMultiplicityError: If more than one directory declares a plugin.
            ManifestWriteError: If the manifest cannot be written.
        """
        outcome = self.scan()

        if isinstance(outcome, SezpozCollision):
            logger.debug(
                "Sezpoz file %s found in %s and %s", outcome.name, outcome.first_root, outcome.root
            )
            raise SezpozCollisionError(outcome.name, outcome.first_root, outcome.root)
        if isinstance(outcome, PluginMultiplicity):
            raise PluginMultiplicityError(outcome.candidates)

        write_manifest(outcome.paths, self._output_file)
        logger.info(
            "Checked %d classes directories, %d entries written to %s",
            len(self._classes_dirs),
            len(outcome.entries),
            self._output_file,
        )
        return outcome

    @staticmethod
    def _list_annotations(classes_dir: Path, root: str) -> Iterator[DiscoveredEntry]:
        """Yield the entries of a directory's META-INF/annotations.

        A missing or unreadable annotations directory yields nothing.
        Names are sorted so the manifest is reproducible across
        filesystems.

        Args:
            classes_dir: Classes directory to inspect.
            root: Absolute form of classes_dir.

        Yields:
            DiscoveredEntry for every name in the annotations directory.
        """
        annotations_dir = classes_dir / ANNOTATIONS_DIR
        if not _check_path(annotations_dir, Path.is_dir):
            return

        try:
            names = sorted(child.name for child in annotations_dir.iterdir())
        except OSError:
            logger.warning("Cannot list annotations directory: %s", annotations_dir)
            return

        for name in names:
            path = annotations_dir / name
            yield DiscoveredEntry(
                path=os.path.abspath(path),
                key=name,
                root=root,
                kind=EntryKind.ANNOTATION_INDEX,
                is_file=_check_path(path, Path.is_file),
            )


def _check_path(path: Path, test: Callable[[Path], bool]) -> bool:
    """Apply a Path predicate, treating a path that cannot be stat'ed as absent."""
    try:
        return test(path)
    except OSError:
        logger.warning("Cannot access %s", path)
        return False

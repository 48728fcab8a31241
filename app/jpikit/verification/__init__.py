"""Overlap verification module.

This module checks compiled class directories for conflicting Sezpoz
annotation indexes and plugin descriptors, and writes the manifest of
discovered paths consumed by the packaging step.
"""

from jpikit.verification.checker import OverlapChecker
from jpikit.verification.errors import (
    ManifestWriteError,
    OverlapError,
    PluginMultiplicityError,
    SezpozCollisionError,
)
from jpikit.verification.manifest import read_manifest, write_manifest
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

__all__ = [
    "ANNOTATIONS_DIR",
    "PLUGIN_DESCRIPTOR",
    "DiscoveredEntry",
    "EntryKind",
    "ManifestWriteError",
    "OverlapChecker",
    "OverlapError",
    "OverlapScan",
    "PluginMultiplicity",
    "PluginMultiplicityError",
    "ScanOutcome",
    "SezpozCollision",
    "SezpozCollisionError",
    "read_manifest",
    "write_manifest",
]

"""Discovered-paths manifest I/O.

The manifest is a UTF-8 text file listing one absolute path per line.
The packaging step reads it to decide which files to include.
"""

import logging
import os
import stat
from collections.abc import Iterable
from pathlib import Path
from tempfile import NamedTemporaryFile

from jpikit.verification.errors import ManifestWriteError

logger = logging.getLogger(__name__)


def write_manifest(paths: Iterable[str], destination: Path) -> Path:
    """Write discovered paths to the manifest file.

    The file is written atomically by first writing to a temporary file
    in the same directory and then using os.replace() for atomic rename,
    so a failed write never leaves a truncated manifest behind and a
    manifest from an earlier run stays untouched.

    Args:
        paths: Absolute paths in manifest order.
        destination: Manifest file to create or replace.

    Returns:
        Path where the manifest was written.

    Raises:
        ManifestWriteError: If the file cannot be written.
    """
    tmp_path: Path | None = None
    try:
        destination.parent.mkdir(parents=True, exist_ok=True)
        with NamedTemporaryFile(
            mode="w",
            encoding="utf-8",
            newline="\n",
            dir=destination.parent,
            delete=False,
            suffix=".tmp",
        ) as f:
            tmp_path = Path(f.name)
            for path in paths:
                f.write(f"{path}\n")
        os.chmod(tmp_path, _target_mode(destination))
        os.replace(tmp_path, destination)
    except OSError as e:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise ManifestWriteError(destination, e) from e

    logger.debug("Wrote manifest %s", destination)
    return destination


def _target_mode(destination: Path) -> int:
    """Permission bits the manifest should end up with.

    An existing manifest keeps its mode. A new one gets the umask
    default, the same as a file opened for writing.
    """
    try:
        return stat.S_IMODE(destination.stat().st_mode)
    except FileNotFoundError:
        pass
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


def read_manifest(path: Path) -> list[str]:
    """Read the paths listed in a manifest file.

    Args:
        path: Manifest file written by write_manifest().

    Returns:
        Listed paths in file order. Blank lines are ignored.
    """
    text = path.read_text(encoding="utf-8")
    return [line for line in text.split("\n") if line]

"""Classification of paths into files, directories, or nothing.

Every kind-guarded operation asks the classifier first. Results are never
cached because the filesystem can change between calls.
"""

import os
import stat
from pathlib import Path

from sandboxfs.filesystem.models import EntryKind


def classify(path: str | Path) -> EntryKind:
    """Determine what exists at a path.

    Symbolic links are followed, so a link to a directory is a DIRECTORY
    and a dangling link is ABSENT.

    Args:
        path: Path to classify.

    Returns:
        ABSENT if nothing exists, DIRECTORY for a directory, FILE for
        any other existing entry.
    """
    try:
        mode = os.stat(path).st_mode
    except (OSError, ValueError):
        # ValueError: the OS cannot represent the path (embedded NUL)
        return EntryKind.ABSENT

    if stat.S_ISDIR(mode):
        return EntryKind.DIRECTORY
    return EntryKind.FILE


def exists(path: str | Path) -> bool:
    """Check whether anything exists at a path."""
    return classify(path) is not EntryKind.ABSENT

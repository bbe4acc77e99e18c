"""Search of the storage roots for a file by name.

Roots are searched in a fixed order (documents, resources, library, temp).
Within a root the traversal is an explicit stack walk that visits every
reachable entry once; there is no ordering guarantee between entries of
the same root, so callers must not rely on which of several equally named
files in one root is returned.
"""

import os
from collections.abc import Iterator

from sandboxfs.filesystem.diagnostics import DiagnosticsGate
from sandboxfs.filesystem.models import RootSet


class RecursiveLocator:
    """Finds the first file with a given name across the storage roots.

    Args:
        roots: Roots to search.
        gate: Diagnostics gate for progress and error messages.
    """

    def __init__(self, roots: RootSet, gate: DiagnosticsGate | None = None) -> None:
        self._roots = roots
        self._gate = gate or DiagnosticsGate()

    def find_path(self, filename: str) -> str | None:
        """Find a file by exact base name.

        Args:
            filename: Base name to look for (e.g., "example.txt").

        Returns:
            Path of the first matching file, or None if no root contains one.
        """
        if not filename:
            self._gate.error("Could not find file: empty file name")
            return None

        for name, root in self._roots.search_order():
            self._gate.info("Searching %s directory for file: '%s'", name.value, filename)
            for path in self.iter_files(root):
                if os.path.basename(path) == filename:
                    self._gate.info("File found at path: '%s'", path)
                    return path

        self._gate.error("Could not find file: '%s' (not found in any root)", filename)
        return None

    def iter_files(self, root: str) -> Iterator[str]:
        """Yield every non-directory entry below a root.

        Symbolic links to directories are neither descended into nor
        yielded, so the walk cannot cycle. Missing roots and
        unreadable directories are skipped.

        Args:
            root: Directory to walk.

        Yields:
            Paths of files (and other non-directory entries) under ``root``.
        """
        stack: list[str] = [root]

        while stack:
            current = stack.pop()
            try:
                with os.scandir(current) as it:
                    entries = list(it)
            except OSError as e:
                self._gate.info("Skipping unreadable directory: '%s' (%s)", current, e)
                continue

            for entry in entries:
                try:
                    if entry.is_dir(follow_symlinks=False):
                        stack.append(entry.path)
                    elif not entry.is_dir():
                        yield entry.path
                except OSError as e:
                    self._gate.info("Skipping entry: '%s' (%s)", entry.path, e)

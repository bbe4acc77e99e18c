"""Kind-guarded file and directory operations.

Every operation classifies its target before acting. When the target's kind
disagrees with the operation and the policy is TypeCheck.ENFORCE, the call
fails without touching the filesystem. Failures never raise: they are
logged at error level, recorded in ``last_failure``, and reported through
the return value (False, None or 0).

Directory copies and moves are shallow: only the immediate children of the
source are transferred, and moves are a copy followed by removal of the
originals with no rollback.
"""

import errno
import functools
import os
import shutil
from collections.abc import Callable
from pathlib import Path
from typing import Any, TypeVar

from sandboxfs.filesystem.classifier import classify
from sandboxfs.filesystem.diagnostics import DiagnosticsGate
from sandboxfs.filesystem.models import EntryKind, FailureReason, OperationFailure, TypeCheck

# Names never transferred by directory copies and moves
_SPECIAL_NAMES: frozenset[str] = frozenset({".", ".."})

# Prefix of resource-fork artifacts (e.g., "._photo.jpg")
RESOURCE_FORK_PREFIX = "._"

R = TypeVar("R")


def is_transferable(name: str) -> bool:
    """Check whether a directory entry is included in copies and moves.

    Hidden files (a single leading dot) are included; "." and ".." and
    resource-fork artifacts are not.

    Args:
        name: Base name of the entry.

    Returns:
        True if the entry is copied or moved with its directory.
    """
    return name not in _SPECIAL_NAMES and not name.startswith(RESOURCE_FORK_PREFIX)


def normalize_component(name: str) -> str | None:
    """Reduce a name to a single path component.

    Leading separators are stripped, so "/Sub" and "Sub" are the same name.

    Args:
        name: Name supplied by the caller.

    Returns:
        The normalized name, or None if it is empty, "." or "..", or still
        contains a separator.
    """
    normalized = name.lstrip("/" + os.sep)
    if not normalized or normalized in _SPECIAL_NAMES:
        return None
    if "/" in normalized or os.sep in normalized:
        return None
    return normalized


def tracked_operation(method: Callable[..., R]) -> Callable[..., R]:
    """Clear ``last_failure`` at the start of a public operation."""

    @functools.wraps(method)
    def wrapper(self: "EntryOperations", *args: Any, **kwargs: Any) -> R:
        self.last_failure = None
        return method(self, *args, **kwargs)

    return wrapper


class EntryOperations:
    """Create, copy, move, rename, delete and read entries by path.

    Attributes:
        last_failure: Failure recorded by the most recent public call,
            or None if it completed cleanly.
        _gate: Diagnostics gate deciding which messages are emitted.
    """

    def __init__(self, gate: DiagnosticsGate | None = None) -> None:
        """Initialize the operations.

        Args:
            gate: Diagnostics gate. Defaults to a gate with debug mode off.
        """
        self._gate = gate or DiagnosticsGate()
        self.last_failure: OperationFailure | None = None

    # === Directories ===

    @tracked_operation
    def create_directory(self, path: str | Path) -> bool:
        """Create a directory and any missing parents.

        Args:
            path: Directory to create.

        Returns:
            True if the directory exists afterwards, including when it
            already existed.
        """
        target = Path(path)
        kind = classify(target)

        if kind is EntryKind.DIRECTORY:
            self._gate.info("Directory already exists: '%s'", target)
            return True
        if kind is EntryKind.FILE:
            return self._fail(
                "create directory", target, FailureReason.KIND_MISMATCH, "path is a file"
            )

        self._gate.info("Creating directory: '%s'", target)
        try:
            target.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            return self._fail("create directory", target, FailureReason.HOST_FAILURE, str(e))
        return True

    @tracked_operation
    def create_subdirectory(self, name: str, parent: str | Path) -> bool:
        """Create a directory named ``name`` inside ``parent``.

        Args:
            name: Subdirectory name. A leading separator is ignored.
            parent: Existing directory to create it in.

        Returns:
            True if the subdirectory exists afterwards.
        """
        parent_path = Path(parent)
        if not self._check_kind(
            "create subdirectory", parent_path, EntryKind.DIRECTORY, TypeCheck.ENFORCE
        ):
            return False

        component = normalize_component(name)
        if component is None:
            return self._fail(
                "create subdirectory",
                parent_path,
                FailureReason.INVALID_ARGUMENT,
                f"not a single path component: {name!r}",
            )

        return self.create_directory(parent_path / component)

    @tracked_operation
    def copy_directory(
        self,
        source: str | Path,
        destination: str | Path,
        type_check: TypeCheck = TypeCheck.ENFORCE,
    ) -> bool:
        """Copy the immediate children of a directory into another.

        The destination is created if absent. Entries named "." or ".."
        and resource-fork artifacts ("._*") are skipped.

        Args:
            source: Directory whose children are copied.
            destination: Directory receiving the copies.
            type_check: Whether a non-directory source is refused.

        Returns:
            True if every transferable child was copied.
        """
        return self._copy_children("copy directory", source, destination, type_check) is not None

    @tracked_operation
    def move_directory(
        self,
        source: str | Path,
        destination: str | Path,
        type_check: TypeCheck = TypeCheck.ENFORCE,
    ) -> bool:
        """Move the immediate children of a directory into another.

        The children are copied first and then removed from the source.
        The source directory itself remains, holding only the entries that
        were skipped. If removal fails after a successful copy the copies
        stay in place, the failure is logged as a partial completion, and
        the call still returns True.

        Args:
            source: Directory whose children are moved.
            destination: Directory receiving the children.
            type_check: Whether a non-directory source is refused.

        Returns:
            True if every transferable child was copied.
        """
        copied = self._copy_children("move directory", source, destination, type_check)
        if copied is None:
            return False

        for entry in copied:
            self._remove_original("move directory", entry)
        return True

    @tracked_operation
    def rename_directory(
        self,
        path: str | Path,
        new_name: str,
        type_check: TypeCheck = TypeCheck.ENFORCE,
    ) -> bool:
        """Rename a directory by moving its contents to a new sibling.

        A sibling named ``new_name`` is created, the contents are moved
        into it, and the original is removed.

        Args:
            path: Directory to rename.
            new_name: New base name. A leading separator is ignored.
            type_check: Whether a non-directory path is refused.

        Returns:
            True if the contents now live under the new name.
        """
        source = Path(path)
        if not self._check_kind("rename directory", source, EntryKind.DIRECTORY, type_check):
            return False

        component = normalize_component(new_name)
        if component is None:
            return self._fail(
                "rename directory",
                source,
                FailureReason.INVALID_ARGUMENT,
                f"not a single path component: {new_name!r}",
            )

        target = source.parent / component
        if target == source:
            self._gate.info("Directory already named '%s'", component)
            return True
        if classify(target) is EntryKind.FILE:
            return self._fail(
                "rename directory", target, FailureReason.KIND_MISMATCH, "target is a file"
            )

        self._gate.info("Renaming directory: '%s' to '%s'", source, target)
        if not self.create_directory(target):
            return False
        if not self.move_directory(source, target, type_check):
            return False

        if classify(source) is not EntryKind.ABSENT:
            self._remove_original("rename directory", source)
        return True

    @tracked_operation
    def delete_directory(
        self,
        path: str | Path,
        type_check: TypeCheck = TypeCheck.ENFORCE,
    ) -> bool:
        """Delete a directory and everything under it.

        Args:
            path: Directory to delete.
            type_check: Whether a non-directory path is refused.

        Returns:
            True if the entry was removed.
        """
        return self._delete("delete directory", Path(path), EntryKind.DIRECTORY, type_check)

    # === Files ===

    @tracked_operation
    def copy_file(
        self,
        path: str | Path,
        destination: str | Path,
        type_check: TypeCheck = TypeCheck.ENFORCE,
    ) -> bool:
        """Copy a file into a directory, keeping its base name.

        Args:
            path: File to copy.
            destination: Directory receiving the copy. Created if absent.
            type_check: Whether a directory source is refused.

        Returns:
            True if the copy was written.
        """
        return self._copy_file("copy file", Path(path), Path(destination), type_check) is not None

    @tracked_operation
    def move_file(
        self,
        path: str | Path,
        destination: str | Path,
        type_check: TypeCheck = TypeCheck.ENFORCE,
    ) -> bool:
        """Move a file into a directory, keeping its base name.

        The source is removed after a successful copy. A failed removal is
        logged as a partial completion and the call still returns True.

        Args:
            path: File to move.
            destination: Directory receiving the file. Created if absent.
            type_check: Whether a directory source is refused.

        Returns:
            True if the file was copied to the destination.
        """
        source = Path(path)
        if self._copy_file("move file", source, Path(destination), type_check) is None:
            return False

        self._remove_original("move file", source)
        return True

    @tracked_operation
    def delete_file(
        self,
        path: str | Path,
        type_check: TypeCheck = TypeCheck.ENFORCE,
    ) -> bool:
        """Delete a single file.

        Args:
            path: File to delete.
            type_check: Whether a directory path is refused.

        Returns:
            True if the entry was removed.
        """
        return self._delete("delete file", Path(path), EntryKind.FILE, type_check)

    @tracked_operation
    def get_path_for_file(self, name: str, directory: str | Path) -> str | None:
        """Build the path of a file inside a directory.

        Only the directory is checked; the file itself may not exist.

        Args:
            name: File name. A leading separator is ignored.
            directory: Existing directory.

        Returns:
            The joined path, or None if ``directory`` is not a directory or
            ``name`` is not a single path component.
        """
        directory_path = Path(directory)
        if not self._check_kind(
            "get path for file", directory_path, EntryKind.DIRECTORY, TypeCheck.ENFORCE
        ):
            return None

        component = normalize_component(name)
        if component is None:
            return self._fail_none(
                "get path for file",
                directory_path,
                FailureReason.INVALID_ARGUMENT,
                f"not a single path component: {name!r}",
            )
        return str(directory_path / component)

    @tracked_operation
    def number_of_files(self, directory: str | Path) -> int:
        """Count the immediate children of a directory.

        Args:
            directory: Directory to count.

        Returns:
            Number of entries, or 0 on failure.
        """
        directory_path = Path(directory)
        if not self._check_kind(
            "count files", directory_path, EntryKind.DIRECTORY, TypeCheck.ENFORCE
        ):
            return 0
        try:
            return len(os.listdir(directory_path))
        except OSError as e:
            self._fail("count files", directory_path, FailureReason.HOST_FAILURE, str(e))
            return 0

    @tracked_operation
    def retrieve_data(self, path: str | Path) -> bytes | None:
        """Read the full contents of a file.

        Args:
            path: File to read.

        Returns:
            The file's bytes (b"" for an empty file), or None if the file
            does not exist, is a directory, or cannot be read.
        """
        source = Path(path)
        if not self._check_kind("retrieve data", source, EntryKind.FILE, TypeCheck.ENFORCE):
            return None
        try:
            return source.read_bytes()
        except OSError as e:
            self._fail("retrieve data", source, FailureReason.HOST_FAILURE, str(e))
            return None

    # === Private helpers ===

    def _check_kind(
        self,
        operation: str,
        path: Path,
        required: EntryKind,
        type_check: TypeCheck,
    ) -> bool:
        """Apply the kind guard to a path.

        A missing path always fails. A kind mismatch fails unless the
        policy is TypeCheck.IGNORE.
        """
        kind = classify(path)
        if kind is EntryKind.ABSENT:
            return self._fail(
                operation, path, FailureReason.NOT_FOUND, f"{required.value} does not exist"
            )
        if kind is not required and type_check is TypeCheck.ENFORCE:
            return self._fail(
                operation,
                path,
                FailureReason.KIND_MISMATCH,
                f"expected a {required.value}, found a {kind.value}",
            )
        return True

    def _ensure_destination(self, operation: str, destination: Path) -> bool:
        """Create a destination directory unless it already exists."""
        kind = classify(destination)
        if kind is EntryKind.DIRECTORY:
            return True
        if kind is EntryKind.FILE:
            return self._fail(
                operation,
                destination,
                FailureReason.KIND_MISMATCH,
                "destination is not a directory",
            )

        self._gate.info("Creating destination directory: '%s'", destination)
        try:
            destination.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            return self._fail(operation, destination, FailureReason.HOST_FAILURE, str(e))
        return True

    def _copy_children(
        self,
        operation: str,
        source: str | Path,
        destination: str | Path,
        type_check: TypeCheck,
    ) -> list[Path] | None:
        """Copy the transferable children of ``source`` into ``destination``.

        Returns:
            The source entries that were copied, or None on failure.
        """
        src = Path(source)
        dst = Path(destination)
        if not self._check_kind(operation, src, EntryKind.DIRECTORY, type_check):
            return None
        if classify(dst) is EntryKind.FILE:
            return self._fail_none(
                operation, dst, FailureReason.KIND_MISMATCH, "destination is not a directory"
            )
        if _is_same_or_nested(src, dst):
            return self._fail_none(
                operation, dst, FailureReason.INVALID_ARGUMENT, "destination is inside the source"
            )

        self._gate.info("Copying contents of directory: '%s' to '%s'", src, dst)
        if not self._ensure_destination(operation, dst):
            return None

        try:
            if classify(src) is EntryKind.DIRECTORY:
                entries = sorted(p for p in src.iterdir() if is_transferable(p.name))
            else:
                # Only reachable with TypeCheck.IGNORE: the file is the sole entry
                entries = [src]

            for entry in entries:
                _copy_entry(entry, dst / entry.name)
        except OSError as e:
            return self._fail_none(operation, src, FailureReason.HOST_FAILURE, str(e))

        return entries

    def _copy_file(
        self,
        operation: str,
        source: Path,
        destination: Path,
        type_check: TypeCheck,
    ) -> Path | None:
        """Copy ``source`` into the ``destination`` directory.

        Returns:
            Path of the written copy, or None on failure.
        """
        if not self._check_kind(operation, source, EntryKind.FILE, type_check):
            return None
        if not os.access(source, os.R_OK):
            return self._fail_none(
                operation, source, FailureReason.HOST_FAILURE, "permission denied reading source"
            )
        # Only reachable with TypeCheck.IGNORE: a directory copied into its own subtree
        if classify(source) is EntryKind.DIRECTORY and _is_same_or_nested(source, destination):
            return self._fail_none(
                operation,
                destination,
                FailureReason.INVALID_ARGUMENT,
                "destination is inside the source",
            )
        if not self._ensure_destination(operation, destination):
            return None

        target = destination / source.name
        self._gate.info("Copying file: '%s' to '%s'", source, target)
        try:
            _copy_entry(source, target)
        except OSError as e:
            return self._fail_none(operation, source, FailureReason.HOST_FAILURE, str(e))
        return target

    def _delete(
        self,
        operation: str,
        path: Path,
        required: EntryKind,
        type_check: TypeCheck,
    ) -> bool:
        if not self._check_kind(operation, path, required, type_check):
            return False

        self._gate.info("Deleting %s: '%s'", required.value, path)
        try:
            _remove_entry(path)
        except OSError as e:
            return self._fail(operation, path, FailureReason.HOST_FAILURE, str(e))
        return True

    def _remove_original(self, operation: str, path: Path) -> None:
        """Remove a source entry after it has been copied.

        A failure here leaves the copy in place and is recorded as a
        partial completion.
        """
        try:
            _remove_entry(path)
        except OSError as e:
            self._fail(
                operation,
                path,
                FailureReason.PARTIAL_COMPLETION,
                f"copied, but could not remove the original: {e}",
            )

    def _fail(self, operation: str, path: Path, reason: FailureReason, detail: str) -> bool:
        """Record and log a failure.

        Returns:
            Always False, so callers can ``return self._fail(...)``.
        """
        self.last_failure = OperationFailure(
            operation=operation,
            path=str(path),
            reason=reason,
            detail=detail,
        )
        self._gate.error("Could not %s: '%s' (%s: %s)", operation, path, reason.value, detail)
        return False

    def _fail_none(self, operation: str, path: Path, reason: FailureReason, detail: str) -> None:
        self._fail(operation, path, reason, detail)
        return None


def _is_same_or_nested(source: Path, destination: Path) -> bool:
    """Check whether ``destination`` is ``source`` or lies inside it."""
    src = source.resolve()
    dst = destination.resolve()
    return dst == src or src in dst.parents


def _copy_entry(source: Path, target: Path) -> None:
    """Copy a file or a whole directory tree to ``target``.

    Existing targets are overwritten (directories are merged).

    Raises:
        OSError: If the copy fails.
    """
    if source.is_dir():
        shutil.copytree(source, target, symlinks=True, dirs_exist_ok=True)
        return

    if target.is_dir() and not target.is_symlink():
        msg = "Cannot overwrite a directory with a file"
        raise IsADirectoryError(errno.EISDIR, msg, str(target))
    shutil.copy2(source, target)


def _remove_entry(path: Path) -> None:
    """Remove a file, symlink or directory tree.

    Raises:
        OSError: If the removal fails.
    """
    # Directories (but not symlinks to directories)
    if path.is_dir() and not path.is_symlink():
        shutil.rmtree(path)
        return
    path.unlink()

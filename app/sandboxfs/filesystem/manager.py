"""The storage component applications construct.

StorageManager resolves the four storage roots once, owns the debug mode
of its diagnostics, and offers every kind-guarded entry operation plus the
find-and-* conveniences that locate a file by name before acting on it.
"""

from pathlib import Path

from sandboxfs.core.config import StorageConfig
from sandboxfs.filesystem.classifier import classify, exists
from sandboxfs.filesystem.diagnostics import DiagnosticsGate
from sandboxfs.filesystem.locator import RecursiveLocator
from sandboxfs.filesystem.models import EntryKind, FailureReason, OperationFailure, RootSet
from sandboxfs.filesystem.operations import EntryOperations, tracked_operation
from sandboxfs.filesystem.roots import resolve_roots


class StorageManager(EntryOperations):
    """File management over an application's private storage roots.

    Construction fails with RootResolutionError if a root cannot be
    resolved; every other failure is reported through return values.

    Example::

        manager = StorageManager()
        manager.copy_file(Path(manager.resources_directory) / "example.txt",
                          manager.documents_directory)
    """

    def __init__(
        self,
        config: StorageConfig | None = None,
        *,
        roots: RootSet | None = None,
    ) -> None:
        """Initialize the manager.

        Args:
            config: Storage configuration. If None, uses the defaults.
            roots: Pre-resolved roots. If None, roots are resolved from config.

        Raises:
            RootResolutionError: If a root cannot be resolved.
        """
        config = config or StorageConfig()
        super().__init__(DiagnosticsGate(debug=config.debug))
        self._roots = roots or resolve_roots(config)
        self._locator = RecursiveLocator(self._roots, self._gate)

    # === Roots ===

    @property
    def roots(self) -> RootSet:
        """The four storage roots."""
        return self._roots

    @property
    def documents_directory(self) -> str:
        """Path of the documents root."""
        return self._roots.documents

    @property
    def resources_directory(self) -> str:
        """Path of the resources root."""
        return self._roots.resources

    @property
    def library_directory(self) -> str:
        """Path of the library root."""
        return self._roots.library

    @property
    def temp_directory(self) -> str:
        """Path of the temp root."""
        return self._roots.temp

    def ensure_roots(self) -> bool:
        """Create the writable roots (documents, library, temp) if missing.

        The resources root is read-only and is never created.

        Returns:
            True if all three writable roots exist afterwards.
        """
        failure: OperationFailure | None = None
        for path in (self._roots.documents, self._roots.library, self._roots.temp):
            if not self.create_directory(path):
                failure = self.last_failure
        self.last_failure = failure
        return failure is None

    # === Diagnostics ===

    @property
    def debug_mode(self) -> bool:
        """Whether informational messages are emitted."""
        return self._gate.debug

    def set_debug_mode(self, enabled: bool) -> None:
        """Turn informational messages on or off.

        Error messages are emitted regardless of this setting.
        """
        self._gate.set_debug_mode(enabled)

    # === Classification ===

    def classify(self, path: str | Path) -> EntryKind:
        """Determine whether a path is a file, a directory, or absent."""
        return classify(path)

    def exists(self, path: str | Path) -> bool:
        """Check whether anything exists at a path."""
        return exists(path)

    # === Search ===

    @tracked_operation
    def find_path(self, filename: str) -> str | None:
        """Find a file by exact base name across all roots.

        Roots are searched in the order documents, resources, library,
        temp; the first match wins.

        Args:
            filename: Base name to look for.

        Returns:
            Path of the first match, or None if no root contains the file.
        """
        path = self._locator.find_path(filename)
        if path is None:
            self.last_failure = OperationFailure(
                operation="find file",
                path=filename,
                reason=FailureReason.NOT_FOUND,
                detail="not found in any root",
            )
        return path

    def find_and_copy_file(self, filename: str, destination: str | Path) -> bool:
        """Find a file by name and copy it into ``destination``.

        Returns:
            False without copying if the file is not found. The miss is
            recorded as the "find file" failure.
        """
        path = self.find_path(filename)
        if path is None:
            return False
        return self.copy_file(path, destination)

    def find_and_move_file(self, filename: str, destination: str | Path) -> bool:
        """Find a file by name and move it into ``destination``.

        Returns:
            False without moving if the file is not found. The miss is
            recorded as the "find file" failure.
        """
        path = self.find_path(filename)
        if path is None:
            return False
        return self.move_file(path, destination)

    def find_and_delete_file(self, filename: str) -> bool:
        """Find a file by name and delete it.

        Returns:
            False without deleting if the file is not found. The miss is
            recorded as the "find file" failure.
        """
        path = self.find_path(filename)
        if path is None:
            return False
        return self.delete_file(path)

"""Storage operations over an application's private file roots.

This module provides root resolution, path classification, kind-guarded
entry operations, recursive lookup by name, and the StorageManager that
combines them.
"""

from sandboxfs.filesystem.classifier import classify, exists
from sandboxfs.filesystem.diagnostics import DiagnosticsGate, should_emit
from sandboxfs.filesystem.locator import RecursiveLocator
from sandboxfs.filesystem.manager import StorageManager
from sandboxfs.filesystem.models import (
    EntryKind,
    FailureReason,
    OperationFailure,
    RootName,
    RootSet,
    TypeCheck,
)
from sandboxfs.filesystem.operations import RESOURCE_FORK_PREFIX, EntryOperations
from sandboxfs.filesystem.roots import RootResolutionError, resolve_roots

__all__ = [
    "RESOURCE_FORK_PREFIX",
    "DiagnosticsGate",
    "EntryKind",
    "EntryOperations",
    "FailureReason",
    "OperationFailure",
    "RecursiveLocator",
    "RootName",
    "RootResolutionError",
    "RootSet",
    "StorageManager",
    "TypeCheck",
    "classify",
    "exists",
    "resolve_roots",
    "should_emit",
]

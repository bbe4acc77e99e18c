"""Filesystem domain models for storage operations.

This module defines the core data structures shared by every storage
operation: the set of root locations, the kind of an entry on disk, the
kind-guard policy, and the record of a failed operation.
"""

import os
from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum


class RootName(str, Enum):
    """Name of a standard storage root.

    Attributes:
        DOCUMENTS: User-facing documents of the application.
        RESOURCES: Read-only data bundled with the application.
        LIBRARY: Application support data that is not user-facing.
        TEMP: Scratch space that may be purged between runs.
    """

    DOCUMENTS = "documents"
    RESOURCES = "resources"
    LIBRARY = "library"
    TEMP = "temp"


class EntryKind(str, Enum):
    """Kind of the entry found at a path.

    Attributes:
        FILE: Any existing entry that is not a directory.
        DIRECTORY: A directory (symlinks to directories included).
        ABSENT: Nothing exists at the path.
    """

    FILE = "file"
    DIRECTORY = "directory"
    ABSENT = "absent"


class TypeCheck(str, Enum):
    """Kind-guard policy of a single operation.

    Attributes:
        ENFORCE: Fail without touching the filesystem when the entry's
            kind differs from the kind the operation expects.
        IGNORE: Proceed with the operation whatever the entry's kind.
    """

    ENFORCE = "enforce"
    IGNORE = "ignore"


class FailureReason(str, Enum):
    """Why a storage operation failed.

    Attributes:
        KIND_MISMATCH: The entry is a file where a directory was required,
            or the reverse.
        NOT_FOUND: The target path or lookup name does not exist.
        HOST_FAILURE: The underlying filesystem call raised an error.
        PARTIAL_COMPLETION: A move copied its entries but could not
            remove the originals.
        INVALID_ARGUMENT: A name or destination is unusable for the operation.
    """

    KIND_MISMATCH = "kind_mismatch"
    NOT_FOUND = "not_found"
    HOST_FAILURE = "host_failure"
    PARTIAL_COMPLETION = "partial_completion"
    INVALID_ARGUMENT = "invalid_argument"


@dataclass(frozen=True, slots=True)
class OperationFailure:
    """Record of a failed storage operation.

    Attributes:
        operation: Human-readable operation name (e.g., "copy file").
        path: Path the failure relates to.
        reason: Failure classification.
        detail: Message describing the failure.
    """

    operation: str
    path: str
    reason: FailureReason
    detail: str


@dataclass(frozen=True, slots=True)
class RootSet:
    """The four storage roots of one application.

    Attributes:
        documents: Absolute path of the documents root.
        resources: Absolute path of the resources root.
        library: Absolute path of the library root.
        temp: Absolute path of the temp root.
    """

    documents: str
    resources: str
    library: str
    temp: str

    def __post_init__(self) -> None:
        """Validate the roots after initialization."""
        paths = self.as_dict()
        for name, path in paths.items():
            if not path:
                msg = f"Root '{name}' cannot be empty"
                raise ValueError(msg)
            if not os.path.isabs(path):
                msg = f"Root '{name}' must be an absolute path, got {path!r}"
                raise ValueError(msg)
        if len(set(paths.values())) != len(paths):
            msg = f"Roots must be distinct, got {paths}"
            raise ValueError(msg)

    def as_dict(self) -> dict[str, str]:
        """Return the roots keyed by root name, in search order."""
        return {name.value: path for name, path in self.search_order()}

    def search_order(self) -> Iterator[tuple[RootName, str]]:
        """Yield (name, path) pairs in the order roots are searched.

        Documents comes first since it is the most likely to hold
        user-relevant files.
        """
        yield RootName.DOCUMENTS, self.documents
        yield RootName.RESOURCES, self.resources
        yield RootName.LIBRARY, self.library
        yield RootName.TEMP, self.temp

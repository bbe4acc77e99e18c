"""sandboxfs - file operations over an application's private storage roots.

The :class:`~sandboxfs.filesystem.manager.StorageManager` is the entry point:
it resolves the documents, resources, library and temp roots once and offers
kind-guarded create, copy, move, rename, delete, find and read operations.
"""

__version__ = "0.1.0"

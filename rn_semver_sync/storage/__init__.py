"""Project file storage for rn-semver-sync."""

from .interface import FileStore
from .local import LocalFileStore

__all__ = ["FileStore", "LocalFileStore"]

"""
Project file store interface.

Defines the abstract interface through which the core reads and rewrites the
manifest and platform files, so the same logic runs against a real project
tree or a temporary one in tests.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path


class FileStore(ABC):
    """Abstract text file store rooted at a project directory."""

    @abstractmethod
    async def read_text(self, path: str | Path) -> str:
        """Load the whole content of a text file.

        Args:
            path: File path, relative to the project root or absolute

        Returns:
            The decoded file content

        Raises:
            FileNotFoundError: If the file does not exist
        """
        ...

    @abstractmethod
    async def write_text(self, path: str | Path, content: str) -> Path:
        """Replace the whole content of a text file and return its full path."""
        ...

    @abstractmethod
    def resolve(self, pattern: str | Path) -> Path | None:
        """Resolve a path or glob pattern to a single existing file.

        Returns the first match in sorted order, or None when nothing matches.
        """
        ...

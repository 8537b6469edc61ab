"""
Local filesystem file store.

Reads and rewrites project files in place with whole-file operations. There
is no locking; a run assumes it is the only writer of the project tree.
"""

from __future__ import annotations

import glob
from pathlib import Path

import aiofiles

from .interface import FileStore


class LocalFileStore(FileStore):
    """Local filesystem store rooted at a project directory."""

    def __init__(self, base_path: Path | str | None = None, encoding: str = "utf-8") -> None:
        """Initialize local storage.

        Args:
            base_path: Project root that relative paths are resolved against.
                Defaults to the current working directory.
            encoding: Text encoding of the project files
        """
        self.base_path = Path(base_path or Path.cwd()).resolve()
        self.encoding = encoding

    def _get_full_path(self, path: str | Path) -> Path:
        """Get full filesystem path for a project-relative path."""
        candidate = Path(path).expanduser()
        if candidate.is_absolute():
            return candidate
        return self.base_path / candidate

    async def read_text(self, path: str | Path) -> str:
        """Load text content from the filesystem."""
        full_path = self._get_full_path(path)

        if not full_path.is_file():
            raise FileNotFoundError(f"File not found: {full_path}")

        # newline="" keeps CRLF project files byte-for-byte intact on rewrite
        async with aiofiles.open(full_path, "r", encoding=self.encoding, newline="") as f:
            return await f.read()

    async def write_text(self, path: str | Path, content: str) -> Path:
        """Write text content to the filesystem."""
        full_path = self._get_full_path(path)

        async with aiofiles.open(full_path, "w", encoding=self.encoding, newline="") as f:
            await f.write(content)

        return full_path

    def resolve(self, pattern: str | Path) -> Path | None:
        """Resolve a path or glob pattern to its first matching file."""
        full_pattern = str(self._get_full_path(pattern))
        matches = sorted(
            Path(match) for match in glob.glob(full_pattern, recursive=True) if Path(match).is_file()
        )
        return matches[0] if matches else None

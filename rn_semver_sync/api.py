"""
Convenience entry points for library consumers.

Each call builds a fresh VersionManager, so no state is shared between runs.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from .core.config import SyncOptions
from .core.types import VersionType
from .models.version import SyncResult
from .services.sync import VersionManager
from .storage import LocalFileStore


def _manager(options: SyncOptions | None, project_root: str | Path | None, overrides: dict[str, Any]) -> VersionManager:
    options = (options or SyncOptions()).merged(**overrides)
    return VersionManager(options, LocalFileStore(project_root))


async def sync_versions(
    options: SyncOptions | None = None,
    project_root: str | Path | None = None,
    **overrides: Any,
) -> SyncResult:
    """Sync the current package.json version to the iOS and Android projects.

    Args:
        options: Run options, defaults apply when omitted
        project_root: Directory the configured paths are relative to
        **overrides: Individual SyncOptions fields applied over ``options``

    Returns:
        SyncResult of the run
    """
    return await _manager(options, project_root, overrides).sync_versions()


async def increment_version(
    version_type: VersionType | str,
    options: SyncOptions | None = None,
    project_root: str | Path | None = None,
    **overrides: Any,
) -> SyncResult:
    """Increment the package.json version and sync it to the platforms."""
    return await _manager(options, project_root, overrides).increment_version(version_type)


async def increment_patch(options: SyncOptions | None = None, **kwargs: Any) -> SyncResult:
    return await increment_version(VersionType.PATCH, options, **kwargs)


async def increment_minor(options: SyncOptions | None = None, **kwargs: Any) -> SyncResult:
    return await increment_version(VersionType.MINOR, options, **kwargs)


async def increment_major(options: SyncOptions | None = None, **kwargs: Any) -> SyncResult:
    return await increment_version(VersionType.MAJOR, options, **kwargs)

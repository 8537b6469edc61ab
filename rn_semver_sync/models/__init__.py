"""Data models for rn-semver-sync."""

from .version import BuildInfo, PlatformUpdateResult, SyncResult, VersionInfo

__all__ = [
    "BuildInfo",
    "PlatformUpdateResult",
    "SyncResult",
    "VersionInfo",
]

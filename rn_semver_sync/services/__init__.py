"""Services package for rn-semver-sync."""

from .platforms import AndroidUpdater, IOSUpdater, PlatformUpdater
from .sync import BuildNumberReconciler, VersionManager

__all__ = [
    "AndroidUpdater",
    "IOSUpdater",
    "PlatformUpdater",
    "BuildNumberReconciler",
    "VersionManager",
]

"""
rn-semver-sync: semantic version and build number sync for React Native projects.

Keeps the version in package.json, the iOS project file and the Android build
file aligned following SemVer 2.0.0, and derives the next build number from
the highest one found across the platforms.
"""

__version__ = "1.0.0"

from .api import increment_major, increment_minor, increment_patch, increment_version, sync_versions
from .core.config import PlatformConfig, SyncOptions
from .core.semver import compare_versions, format_version, is_valid_semver, parse_version
from .core.types import BuildSource, Platform, VersionType
from .models.version import BuildInfo, PlatformUpdateResult, SyncResult, VersionInfo
from .services.platforms import update_android_version, update_ios_version
from .services.sync import VersionManager

__all__ = [
    "__version__",
    "increment_major",
    "increment_minor",
    "increment_patch",
    "increment_version",
    "sync_versions",
    "PlatformConfig",
    "SyncOptions",
    "compare_versions",
    "format_version",
    "is_valid_semver",
    "parse_version",
    "BuildSource",
    "Platform",
    "VersionType",
    "BuildInfo",
    "PlatformUpdateResult",
    "SyncResult",
    "VersionInfo",
    "update_android_version",
    "update_ios_version",
    "VersionManager",
]

"""
Core type definitions for rn-semver-sync.

Enumerations shared by the models, the updaters and the orchestrator.
"""

from __future__ import annotations

from enum import Enum


class VersionType(str, Enum):
    """Unit of a semantic version increment."""

    MAJOR = "major"
    MINOR = "minor"
    PATCH = "patch"


class Platform(str, Enum):
    """Mobile platform whose project file carries a version and build number."""

    IOS = "ios"
    ANDROID = "android"

    @property
    def label(self) -> str:
        """Human-readable platform name used in error entries."""
        return "iOS" if self is Platform.IOS else "Android"


class BuildSource(str, Enum):
    """Where a reconciled build number came from."""

    IOS = "ios"
    ANDROID = "android"
    MANUAL = "manual"


# Fixed processing order for platforms, independent of how they were requested.
PLATFORM_ORDER: tuple[Platform, ...] = (Platform.IOS, Platform.ANDROID)

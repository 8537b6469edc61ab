"""
Custom exception hierarchy for rn-semver-sync.

All exceptions inherit from SemverSyncError so that the orchestrator can turn
any failure into a result value at its boundary. Engine errors (invalid
version, invalid increment type) abort a whole run; manifest and platform
errors are scoped to the file they concern.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class SemverSyncError(Exception):
    """Base exception for all rn-semver-sync errors."""

    message: str
    context: dict[str, Any] = field(default_factory=dict)
    cause: Exception | None = None

    def __str__(self) -> str:
        ctx = f" | context: {self.context}" if self.context else ""
        cause = f" | caused by: {self.cause}" if self.cause else ""
        return f"{self.message}{ctx}{cause}"


@dataclass
class InvalidVersionError(SemverSyncError):
    """Raised when a string does not follow the SemVer 2.0.0 grammar."""

    version: str = ""

    @classmethod
    def for_version(cls, version: str) -> InvalidVersionError:
        return cls(message=f"Invalid semantic version: {version}", version=version)


@dataclass
class InvalidVersionTypeError(SemverSyncError):
    """Raised when an increment unit is not one of major, minor or patch."""

    version_type: str = ""

    @classmethod
    def for_type(cls, version_type: object) -> InvalidVersionTypeError:
        return cls(message=f"Invalid version type: {version_type}", version_type=str(version_type))


@dataclass
class ManifestError(SemverSyncError):
    """Raised when the package manifest cannot be used."""

    path: str = ""


@dataclass
class ManifestUnreadableError(ManifestError):
    """Raised when the manifest cannot be read, decoded or lacks a version."""


@dataclass
class ManifestUnwritableError(ManifestError):
    """Raised when the updated manifest cannot be written back."""


@dataclass
class PlatformError(SemverSyncError):
    """Raised when a platform project file cannot be updated.

    Never escapes an updater: it is converted into a failed
    PlatformUpdateResult for the platform concerned.
    """

    platform: str = ""
    path: str = ""


@dataclass
class PlatformFileNotFoundError(PlatformError):
    """Raised when a platform file path or pattern matches nothing."""


@dataclass
class PlatformFileUnwritableError(PlatformError):
    """Raised when a patched platform file cannot be written back."""

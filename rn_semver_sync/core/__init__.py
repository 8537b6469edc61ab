"""Core infrastructure components for rn-semver-sync."""

from .config import Config, PlatformConfig, SyncOptions, get_config
from .exceptions import (
    InvalidVersionError,
    InvalidVersionTypeError,
    ManifestError,
    ManifestUnreadableError,
    ManifestUnwritableError,
    PlatformError,
    PlatformFileNotFoundError,
    PlatformFileUnwritableError,
    SemverSyncError,
)
from .logging import get_logger, setup_logging
from .types import BuildSource, Platform, VersionType

__all__ = [
    "Config",
    "PlatformConfig",
    "SyncOptions",
    "get_config",
    "InvalidVersionError",
    "InvalidVersionTypeError",
    "ManifestError",
    "ManifestUnreadableError",
    "ManifestUnwritableError",
    "PlatformError",
    "PlatformFileNotFoundError",
    "PlatformFileUnwritableError",
    "SemverSyncError",
    "get_logger",
    "setup_logging",
    "BuildSource",
    "Platform",
    "VersionType",
]

"""Platform updaters for iOS and Android project files."""

from .service import (
    AndroidUpdater,
    IOSUpdater,
    PlatformUpdater,
    get_updater,
    update_android_version,
    update_ios_version,
)

__all__ = [
    "AndroidUpdater",
    "IOSUpdater",
    "PlatformUpdater",
    "get_updater",
    "update_android_version",
    "update_ios_version",
]

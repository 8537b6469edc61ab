"""
Platform Updaters.

Pattern-based rewrite of the version and build number fields in the iOS
``project.pbxproj`` and the Android ``build.gradle`` files. The files are not
parsed: two field patterns are matched and every occurrence is replaced,
leaving all other content untouched.
"""

from __future__ import annotations

import re
from abc import ABC
from pathlib import Path

from ...core.config import DEFAULT_ANDROID_GRADLE_PATH, DEFAULT_IOS_PROJECT_PATH
from ...core.exceptions import (
    PlatformFileNotFoundError,
    PlatformFileUnwritableError,
    SemverSyncError,
)
from ...core.logging import get_logger
from ...core.types import Platform
from ...models.version import PlatformUpdateResult
from ...storage import FileStore, LocalFileStore

logger = get_logger(__name__)


class PlatformUpdater(ABC):
    """Base class for updaters of one platform's project file.

    Subclasses declare the field patterns. Group ``value`` captures the
    current field value, group ``prefix`` everything before it that must be
    written back unchanged.
    """

    platform: Platform
    default_path: str
    file_description: str
    version_pattern: re.Pattern[str]
    build_pattern: re.Pattern[str]
    version_template: str = "{prefix}{value}"
    build_template: str = "{prefix}{value}"

    def __init__(self, store: FileStore | None = None) -> None:
        """Initialize the updater.

        Args:
            store: File store the project files are read from and written to
        """
        self.store = store or LocalFileStore()

    def locate(self, path: str | None = None) -> Path | None:
        """Resolve the configured path or glob pattern to the project file."""
        return self.store.resolve(path or self.default_path)

    def extract_version(self, content: str) -> str | None:
        """Get the first version field value in ``content``."""
        match = self.version_pattern.search(content)
        return match["value"] if match else None

    def extract_build_number(self, content: str) -> int | None:
        """Get the first build number field value in ``content``."""
        match = self.build_pattern.search(content)
        return int(match["value"]) if match else None

    def apply(self, content: str, version: str, build_number: int) -> str:
        """Rewrite every version and build number field in ``content``."""
        content = self.version_pattern.sub(
            lambda m: self.version_template.format(prefix=m["prefix"], value=version), content
        )
        return self.build_pattern.sub(
            lambda m: self.build_template.format(prefix=m["prefix"], value=build_number), content
        )

    async def read_build_number(self, path: str | None = None) -> int | None:
        """Read the current build number, or None if the file is absent or unreadable."""
        project_file = self.locate(path)
        if project_file is None:
            return None
        try:
            content = await self.store.read_text(project_file)
            return self.extract_build_number(content)
        except (OSError, UnicodeDecodeError, ValueError) as e:
            logger.debug("Skipping unreadable project file", platform=self.platform.value, error=str(e))
            return None

    async def update_platform_version(
        self, version: str, build_number: int, path: str | None = None
    ) -> PlatformUpdateResult:
        """Write ``version`` and ``build_number`` into the platform project file.

        Never raises: missing files, I/O errors, pattern errors and any
        other failure are reported as a failed result.

        Args:
            version: Version string to write into the version field
            build_number: Build number to write into the build field
            path: Path or glob pattern of the project file

        Returns:
            PlatformUpdateResult describing the previous and new values
        """
        search_path = path or self.default_path
        try:
            project_file = self.locate(search_path)
            if project_file is None:
                raise PlatformFileNotFoundError(
                    message=f"{self.file_description} not found at: {search_path}",
                    platform=self.platform.value,
                    path=search_path,
                )

            content = await self.store.read_text(project_file)
            previous_version = self.extract_version(content)
            previous_build_number = self.extract_build_number(content)

            try:
                await self.store.write_text(project_file, self.apply(content, version, build_number))
            except OSError as e:
                raise PlatformFileUnwritableError(
                    message=f"Failed to write {self.file_description} at {project_file}: {e.strerror or e}",
                    platform=self.platform.value,
                    path=str(project_file),
                ) from e

        except (SemverSyncError, OSError, UnicodeDecodeError, re.error) as e:
            logger.warning("Platform update failed", platform=self.platform.value, error=str(e))
            return PlatformUpdateResult.fail(self.platform, version, build_number, e)
        except Exception as e:
            logger.exception("Unexpected error during platform update", platform=self.platform.value)
            return PlatformUpdateResult.fail(self.platform, version, build_number, e)

        logger.debug(
            "Platform file updated",
            platform=self.platform.value,
            path=str(project_file),
            version=version,
            build_number=build_number,
        )
        return PlatformUpdateResult(
            success=True,
            platform=self.platform,
            previous_version=previous_version,
            new_version=version,
            previous_build_number=previous_build_number,
            new_build_number=build_number,
        )


class IOSUpdater(PlatformUpdater):
    """Updates MARKETING_VERSION and CURRENT_PROJECT_VERSION in project.pbxproj.

    Both fields usually appear once per build configuration (Debug, Release)
    and all of them are rewritten.
    """

    platform = Platform.IOS
    default_path = DEFAULT_IOS_PROJECT_PATH
    file_description = "iOS project file"
    version_pattern = re.compile(r"(?P<prefix>MARKETING_VERSION = )(?P<value>[^;]+);")
    build_pattern = re.compile(r"(?P<prefix>CURRENT_PROJECT_VERSION = )(?P<value>\d+);")
    version_template = "{prefix}{value};"
    build_template = "{prefix}{value};"


class AndroidUpdater(PlatformUpdater):
    """Updates versionName and versionCode in app/build.gradle."""

    platform = Platform.ANDROID
    default_path = DEFAULT_ANDROID_GRADLE_PATH
    file_description = "Android build.gradle"
    version_pattern = re.compile(r'(?P<prefix>versionName\s+)"(?P<value>[^"]+)"')
    build_pattern = re.compile(r"(?P<prefix>versionCode\s+)(?P<value>\d+)")
    version_template = '{prefix}"{value}"'


UPDATERS: dict[Platform, type[PlatformUpdater]] = {
    Platform.IOS: IOSUpdater,
    Platform.ANDROID: AndroidUpdater,
}


def get_updater(platform: Platform | str, store: FileStore | None = None) -> PlatformUpdater:
    """Create the updater for ``platform``."""
    return UPDATERS[Platform(platform)](store)


async def update_ios_version(
    version: str, build_number: int, project_path: str | None = None, store: FileStore | None = None
) -> PlatformUpdateResult:
    """Update the iOS project version and build number."""
    return await IOSUpdater(store).update_platform_version(version, build_number, project_path)


async def update_android_version(
    version: str, build_number: int, gradle_path: str | None = None, store: FileStore | None = None
) -> PlatformUpdateResult:
    """Update the Android app version and build number."""
    return await AndroidUpdater(store).update_platform_version(version, build_number, gradle_path)

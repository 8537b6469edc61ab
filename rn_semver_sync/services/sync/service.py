"""
Sync Service.

Reads the authoritative version from package.json, reconciles the next build
number across the platform files and propagates both to every requested
platform. Both entry points always return a SyncResult; callers branch on
``success`` instead of catching exceptions.
"""

from __future__ import annotations

import asyncio
import json
import uuid
from typing import Any

from ...core.config import SyncOptions
from ...core.exceptions import (
    InvalidVersionError,
    ManifestUnreadableError,
    ManifestUnwritableError,
    SemverSyncError,
)
from ...core.logging import bound_context, get_logger, progress_method
from ...core.semver import coerce_version, increment_version, is_valid_semver, parse_version
from ...core.types import BuildSource, Platform, VersionType
from ...models.version import BuildInfo, PlatformUpdateResult, SyncResult
from ...storage import FileStore, LocalFileStore
from ..platforms import PlatformUpdater, get_updater

logger = get_logger(__name__)


def _new_run_id() -> str:
    return uuid.uuid4().hex[:8]


class BuildNumberReconciler:
    """Decides the build number written to every platform of a run.

    The highest build number found across the requested platform files wins;
    on a tie the platform checked first (iOS) is the source. Missing or
    unreadable files count as "no build number" and are not errors.
    """

    def __init__(self, options: SyncOptions, updaters: dict[Platform, PlatformUpdater]) -> None:
        """Initialize the reconciler.

        Args:
            options: Options of the current run
            updaters: Updaters of the requested platforms, in processing order
        """
        self.options = options
        self.updaters = updaters

    async def discover(self) -> tuple[int, BuildSource]:
        """Find the highest existing build number and the platform holding it.

        Returns:
            The maximum build number (0 when none was found) and its source
        """
        max_build_number = 0
        source = BuildSource.MANUAL

        for platform, updater in self.updaters.items():
            build_number = await updater.read_build_number(self.options.path_for(platform))
            logger.debug("Build number discovered", platform=platform.value, build_number=build_number)
            if build_number is not None and build_number > max_build_number:
                max_build_number = build_number
                source = BuildSource(platform.value)

        return max_build_number, source

    async def reconcile(self) -> BuildInfo:
        """Compute the BuildInfo for this run."""
        max_build_number, source = await self.discover()
        previous = max_build_number or None

        if self.options.custom_build_number is not None:
            return BuildInfo(
                build_number=self.options.custom_build_number,
                previous_build_number=previous,
                source=BuildSource.MANUAL,
            )

        if self.options.increment_build_number:
            build_number = max_build_number + 1
        else:
            build_number = max_build_number or 1

        return BuildInfo(build_number=build_number, previous_build_number=previous, source=source)


class VersionManager:
    """Keeps package.json, the iOS project and the Android build file in sync.

    This service:
    1. Reads and validates the manifest version
    2. Reconciles the next build number
    3. Patches each requested platform file
    4. Aggregates the per-platform outcomes
    """

    def __init__(self, options: SyncOptions | None = None, store: FileStore | None = None) -> None:
        """Initialize the version manager.

        Args:
            options: Run options, defaults apply when omitted
            store: File store for the project tree, the current directory by default
        """
        self.options = options or SyncOptions()
        self.store = store or LocalFileStore()
        self.updaters = {
            platform: get_updater(platform, self.store) for platform in self.options.platforms
        }
        self._progress = progress_method(logger, self.options.verbose)

    async def _load_manifest(self) -> dict[str, Any]:
        path = self.options.config.manifest_path
        try:
            data = json.loads(await self.store.read_text(path))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            raise ManifestUnreadableError(
                message=f"Failed to read package.json: {e}", path=path
            ) from e

        if not isinstance(data, dict):
            raise ManifestUnreadableError(
                message=f"Failed to read package.json: expected a JSON object in {path}", path=path
            )
        return data

    async def get_package_version(self) -> str:
        """Get the current version from package.json.

        Raises:
            ManifestUnreadableError: If the manifest cannot be read or has no version
            InvalidVersionError: If validation is enabled and the version is not SemVer
        """
        data = await self._load_manifest()
        version = data.get("version")
        if not isinstance(version, str):
            raise ManifestUnreadableError(
                message="Failed to read package.json: missing \"version\" field",
                path=self.options.config.manifest_path,
            )

        if self.options.validate_semver and not is_valid_semver(version):
            raise InvalidVersionError(
                message=f"Invalid semantic version in package.json: {version}", version=version
            )
        return version

    async def set_package_version(self, version: str) -> None:
        """Write ``version`` into package.json, keeping every other field.

        Raises:
            ManifestUnreadableError: If the manifest cannot be read back
            ManifestUnwritableError: If the manifest cannot be written
        """
        path = self.options.config.manifest_path
        data = await self._load_manifest()
        data["version"] = version
        try:
            await self.store.write_text(path, json.dumps(data, indent=2, ensure_ascii=False) + "\n")
        except OSError as e:
            raise ManifestUnwritableError(
                message=f"Failed to write package.json: {e}", path=path
            ) from e

    async def get_next_build_number(self) -> BuildInfo:
        """Reconcile the build number for the requested platforms."""
        return await BuildNumberReconciler(self.options, self.updaters).reconcile()

    async def _update_platforms(self, version: str, build_number: int) -> list[PlatformUpdateResult]:
        # Platforms share no state; gather keeps results in request order
        return list(
            await asyncio.gather(
                *(
                    updater.update_platform_version(version, build_number, self.options.path_for(platform))
                    for platform, updater in self.updaters.items()
                )
            )
        )

    async def sync_versions(self) -> SyncResult:
        """Sync the current package.json version to all requested platforms.

        Returns:
            SyncResult with the version, the build number and one entry per platform
        """
        with bound_context(run_id=_new_run_id()):
            return await self._sync()

    async def _sync(self) -> SyncResult:
        try:
            version = await self.get_package_version()
            version_info = parse_version(version) if self.options.validate_semver else coerce_version(version)

            build_info = await self.get_next_build_number()
            self._progress(
                "Build number reconciled",
                build_number=build_info.build_number,
                previous=build_info.previous_build_number,
                source=build_info.source.value,
            )

            platform_results = await self._update_platforms(version, build_info.build_number)

        except SemverSyncError as e:
            logger.error("Version sync failed", error=str(e))
            return SyncResult.failed(str(e))
        except Exception as e:
            logger.exception("Unexpected error during version sync")
            return SyncResult.failed(str(e) or type(e).__name__)

        errors = [
            f"{result.platform.label}: {result.error}"
            for result in platform_results
            if not result.success and result.error
        ]
        for result in platform_results:
            self._progress(
                "Platform synced" if result.success else "Platform failed",
                platform=result.platform.value,
                version=result.new_version,
                previous_version=result.previous_version,
                build_number=result.new_build_number,
            )

        return SyncResult(
            success=all(result.success for result in platform_results),
            version=version_info,
            build=build_info,
            platforms=platform_results,
            errors=errors,
        )

    async def increment_version(self, version_type: VersionType | str) -> SyncResult:
        """Increment the package.json version and sync it to all requested platforms.

        Args:
            version_type: major, minor or patch

        Returns:
            SyncResult of the follow-up sync, or a failed result when the
            manifest could not be incremented
        """
        with bound_context(run_id=_new_run_id()):
            try:
                current_version = await self.get_package_version()
                new_version = increment_version(current_version, version_type)
                await self.set_package_version(new_version)
            except SemverSyncError as e:
                logger.error("Version increment failed", error=str(e))
                return SyncResult.failed(str(e))
            except Exception as e:
                logger.exception("Unexpected error during version increment")
                return SyncResult.failed(str(e) or type(e).__name__)

            self._progress("Manifest version incremented", previous=current_version, version=new_version)
            return await self._sync()

"""
Version and build data models.

Value objects produced by one sync run: the parsed manifest version, the
reconciled build number, the outcome of each platform file patch and the
aggregate result handed back to the caller.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from ..core.types import BuildSource, Platform


class VersionInfo(BaseModel):
    """A semantic version split into its components."""

    version: str = Field(description="Canonical version string")
    major: int = Field(ge=0, description="Major version number")
    minor: int = Field(ge=0, description="Minor version number")
    patch: int = Field(ge=0, description="Patch version number")
    prerelease: str | None = Field(default=None, description="Pre-release identifiers")
    build_metadata: str | None = Field(default=None, description="Build metadata identifiers")

    model_config = {"frozen": True}

    @property
    def is_prerelease(self) -> bool:
        return self.prerelease is not None

    @classmethod
    def zero(cls) -> VersionInfo:
        """Placeholder version reported when a run fails before parsing."""
        return cls(version="0.0.0", major=0, minor=0, patch=0)


class BuildInfo(BaseModel):
    """Build number chosen for all platforms of one run."""

    build_number: int = Field(ge=0, description="Build number to write")
    previous_build_number: int | None = Field(
        default=None, ge=0, description="Highest build number found before the run"
    )
    source: BuildSource = Field(description="Platform the previous build number came from")

    model_config = {"frozen": True}


class PlatformUpdateResult(BaseModel):
    """Effect of patching a single platform file."""

    success: bool
    platform: Platform
    previous_version: str | None = None
    new_version: str
    previous_build_number: int | None = None
    new_build_number: int
    error: str | None = None
    error_type: str | None = Field(default=None, description="Exception class behind a failure")

    model_config = {"frozen": True}

    @classmethod
    def fail(
        cls, platform: Platform, version: str, build_number: int, error: Exception
    ) -> PlatformUpdateResult:
        """Create a failed result from the error that stopped the update."""
        return cls(
            success=False,
            platform=platform,
            new_version=version,
            new_build_number=build_number,
            error=str(error),
            error_type=type(error).__name__,
        )


class SyncResult(BaseModel):
    """Aggregate outcome of one orchestration run."""

    success: bool
    version: VersionInfo
    build: BuildInfo
    platforms: list[PlatformUpdateResult] = Field(default_factory=list)
    errors: list[str] = Field(default_factory=list)

    @classmethod
    def failed(cls, error: str) -> SyncResult:
        """Create a result for a run that stopped before any platform file was written."""
        return cls(
            success=False,
            version=VersionInfo.zero(),
            build=BuildInfo(build_number=0, source=BuildSource.MANUAL),
            errors=[error],
        )

    def get_platform(self, platform: Platform | str) -> PlatformUpdateResult | None:
        """Get the update result for a platform."""
        for result in self.platforms:
            if result.platform == platform:
                return result
        return None

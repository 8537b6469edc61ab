"""
Configuration management for rn-semver-sync.

Provides type-safe, immutable configuration for one sync run with documented
defaults and environment variable overrides for the command-line entry point.
"""

from __future__ import annotations

import os
from functools import lru_cache
from typing import Any, Literal

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

from .types import PLATFORM_ORDER, Platform

# Load .env file if it exists (looks in cwd and parent directories)
load_dotenv()

DEFAULT_MANIFEST_PATH = "./package.json"
DEFAULT_IOS_PROJECT_PATH = "./ios/*.xcodeproj/project.pbxproj"
DEFAULT_ANDROID_GRADLE_PATH = "./android/app/build.gradle"


class PlatformConfig(BaseModel):
    """Locations of the files kept in sync, relative to the project root."""

    manifest_path: str = Field(
        default=DEFAULT_MANIFEST_PATH, description="Path to the package.json manifest"
    )
    ios_project_path: str = Field(
        default=DEFAULT_IOS_PROJECT_PATH,
        description="Path or glob pattern of the iOS project.pbxproj file",
    )
    android_gradle_path: str = Field(
        default=DEFAULT_ANDROID_GRADLE_PATH, description="Path to the Android build.gradle file"
    )

    model_config = {"frozen": True}


class SyncOptions(BaseModel):
    """Behavior flags for a single sync or increment run."""

    config: PlatformConfig = Field(default_factory=PlatformConfig)
    validate_semver: bool = Field(default=True, description="Reject non-SemVer manifest versions")
    increment_build_number: bool = Field(
        default=True, description="Write the highest discovered build number plus one"
    )
    custom_build_number: int | None = Field(
        default=None, ge=0, description="Explicit build number, overrides discovery"
    )
    platforms: list[Platform] = Field(
        default_factory=lambda: list(PLATFORM_ORDER), description="Platforms to update"
    )
    verbose: bool = Field(default=False, description="Verbose logging")

    model_config = {"frozen": True}

    @field_validator("platforms")
    @classmethod
    def _normalize_platforms(cls, value: list[Platform]) -> list[Platform]:
        # iOS is always processed before Android, duplicates collapse
        return [platform for platform in PLATFORM_ORDER if platform in value]

    def merged(self, **overrides: Any) -> SyncOptions:
        """Return new options with ``overrides`` applied over these values.

        A ``config`` override may be a PlatformConfig or a mapping of path
        fields, which is merged over the current paths.
        """
        if not overrides:
            return self
        data = self.model_dump()
        config = overrides.pop("config", None)
        if isinstance(config, PlatformConfig):
            data["config"] = config.model_dump()
        elif config:
            data["config"].update(config)
        data.update(overrides)
        return SyncOptions.model_validate(data)

    def path_for(self, platform: Platform) -> str:
        """Get the configured project file path or pattern of ``platform``."""
        if platform is Platform.IOS:
            return self.config.ios_project_path
        return self.config.android_gradle_path


class Config(BaseModel):
    """Root configuration for the rn-semver command."""

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="WARNING", description="Logging level"
    )
    sync: SyncOptions = Field(default_factory=SyncOptions)

    model_config = {"extra": "ignore", "frozen": True}

    @classmethod
    def from_env(cls) -> Config:
        """Create configuration from environment variables."""
        paths = PlatformConfig(
            manifest_path=os.environ.get("RN_SEMVER_MANIFEST_PATH", DEFAULT_MANIFEST_PATH),
            ios_project_path=os.environ.get("RN_SEMVER_IOS_PROJECT_PATH", DEFAULT_IOS_PROJECT_PATH),
            android_gradle_path=os.environ.get(
                "RN_SEMVER_ANDROID_GRADLE_PATH", DEFAULT_ANDROID_GRADLE_PATH
            ),
        )
        platforms = os.environ.get("RN_SEMVER_PLATFORMS", "ios,android")
        return cls(
            log_level=os.environ.get("RN_SEMVER_LOG_LEVEL", "WARNING").upper(),  # type: ignore
            sync=SyncOptions(
                config=paths,
                platforms=[p.strip().lower() for p in platforms.split(",") if p.strip()],
            ),
        )


@lru_cache(maxsize=1)
def get_config() -> Config:
    """Get cached configuration instance."""
    return Config.from_env()

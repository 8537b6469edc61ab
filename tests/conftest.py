"""Test configuration for rn-semver-sync."""

import json
import tempfile
from pathlib import Path
from types import SimpleNamespace

import pytest

PBXPROJ_TEMPLATE = """// !$*UTF8*$!
{{
	objects = {{
		13B07F941A680F5B00A75B9A /* Debug */ = {{
			isa = XCBuildConfiguration;
			buildSettings = {{
				ASSETCATALOG_COMPILER_APPICON_NAME = AppIcon;
				CURRENT_PROJECT_VERSION = {build};
				INFOPLIST_FILE = MyApp/Info.plist;
				MARKETING_VERSION = {version};
				PRODUCT_NAME = MyApp;
			}};
			name = Debug;
		}};
		13B07F951A680F5B00A75B9A /* Release */ = {{
			isa = XCBuildConfiguration;
			buildSettings = {{
				ASSETCATALOG_COMPILER_APPICON_NAME = AppIcon;
				CURRENT_PROJECT_VERSION = {build};
				INFOPLIST_FILE = MyApp/Info.plist;
				MARKETING_VERSION = {version};
				PRODUCT_NAME = MyApp;
			}};
			name = Release;
		}};
	}};
}}
"""

GRADLE_TEMPLATE = """apply plugin: "com.android.application"

android {{
    compileSdkVersion rootProject.ext.compileSdkVersion

    defaultConfig {{
        applicationId "com.myapp"
        minSdkVersion rootProject.ext.minSdkVersion
        targetSdkVersion rootProject.ext.targetSdkVersion
        versionCode {build}
        versionName "{version}"
    }}
}}
"""

IOS_PROJECT_FILE = Path("ios/MyApp.xcodeproj/project.pbxproj")
ANDROID_GRADLE_FILE = Path("android/app/build.gradle")


def write_manifest(root: Path, version: str) -> Path:
    """Write a package.json with ``version`` under ``root``."""
    path = root / "package.json"
    manifest = {
        "name": "MyApp",
        "version": version,
        "private": True,
        "scripts": {"start": "react-native start"},
    }
    path.write_text(json.dumps(manifest, indent=2) + "\n", encoding="utf-8")
    return path


def write_ios_project(root: Path, version: str = "1.0", build: int = 1) -> Path:
    """Write a project.pbxproj with Debug and Release configurations."""
    path = root / IOS_PROJECT_FILE
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(PBXPROJ_TEMPLATE.format(version=version, build=build), encoding="utf-8")
    return path


def write_android_gradle(root: Path, version: str = "1.0", build: int = 1) -> Path:
    """Write an app/build.gradle with a defaultConfig block."""
    path = root / ANDROID_GRADLE_FILE
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(GRADLE_TEMPLATE.format(version=version, build=build), encoding="utf-8")
    return path


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests.

    Yields:
        Path: A Path object pointing to the temporary directory.
            The directory is automatically cleaned up after the test.
    """
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def project(temp_dir):
    """Create a React Native project tree for testing.

    The manifest holds 1.0.0, the iOS project build number 5 and the
    Android build number 3.

    Returns:
        Path: The project root.
    """
    write_manifest(temp_dir, "1.0.0")
    write_ios_project(temp_dir, version="0.9.0", build=5)
    write_android_gradle(temp_dir, version="0.9.0", build=3)
    return temp_dir


@pytest.fixture
def store(project):
    """Create a file store rooted at the sample project.

    Returns:
        LocalFileStore: A store resolving paths against the project root.
    """
    from rn_semver_sync.storage import LocalFileStore
    return LocalFileStore(project)


@pytest.fixture
def project_files():
    """Writers for the sample project files.

    Returns:
        SimpleNamespace: ``manifest``, ``ios`` and ``android`` writer functions
            taking the project root as first argument.
    """
    return SimpleNamespace(
        manifest=write_manifest,
        ios=write_ios_project,
        android=write_android_gradle,
    )

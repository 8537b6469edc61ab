"""Unit tests for the iOS and Android platform updaters."""

from pathlib import Path

import pytest

from rn_semver_sync.core.types import Platform
from rn_semver_sync.services.platforms import (
    AndroidUpdater,
    IOSUpdater,
    get_updater,
    update_android_version,
    update_ios_version,
)
from rn_semver_sync.storage import FileStore, LocalFileStore

IOS_PROJECT_FILE = Path("ios/MyApp.xcodeproj/project.pbxproj")
ANDROID_GRADLE_FILE = Path("android/app/build.gradle")


class ReadOnlyStore(LocalFileStore):
    """Local store whose writes always fail."""

    async def write_text(self, path, content):
        raise PermissionError(13, "Permission denied", str(path))


class TestFieldPatterns:
    """Tests for pattern-based field extraction and rewrite."""

    def test_ios_rewrites_every_configuration(self):
        content = (
            "CURRENT_PROJECT_VERSION = 5;\nMARKETING_VERSION = 0.9.0;\n"
            "CURRENT_PROJECT_VERSION = 7;\nMARKETING_VERSION = 0.9.1;\n"
        )
        updater = IOSUpdater()

        assert updater.extract_version(content) == "0.9.0"
        assert updater.extract_build_number(content) == 5

        patched = updater.apply(content, "1.2.0", 8)
        assert patched.count("MARKETING_VERSION = 1.2.0;") == 2
        assert patched.count("CURRENT_PROJECT_VERSION = 8;") == 2
        assert "0.9" not in patched

    def test_android_keeps_indentation_and_spacing(self):
        content = '        versionCode   3\n        versionName  "0.9.0"\n'
        patched = AndroidUpdater().apply(content, "1.0.0", 4)
        assert patched == '        versionCode   4\n        versionName  "1.0.0"\n'

    def test_android_extracts_first_match(self):
        content = 'versionCode 3\nversionName "0.9.0"\nversionCode 9\nversionName "2.0.0"\n'
        updater = AndroidUpdater()
        assert updater.extract_version(content) == "0.9.0"
        assert updater.extract_build_number(content) == 3

    def test_replacement_is_literal(self):
        patched = IOSUpdater().apply("MARKETING_VERSION = 1.0;", r"1.0.0-\1+{x}", 1)
        assert patched == r"MARKETING_VERSION = 1.0.0-\1+{x};"

    def test_missing_fields(self):
        updater = IOSUpdater()
        assert updater.extract_version("// empty") is None
        assert updater.extract_build_number("// empty") is None
        assert updater.apply("// empty", "1.0.0", 1) == "// empty"

    def test_get_updater(self):
        assert isinstance(get_updater("ios"), IOSUpdater)
        assert isinstance(get_updater(Platform.ANDROID), AndroidUpdater)


@pytest.mark.asyncio
class TestIOSUpdater:
    """Tests for updating the iOS project file."""

    async def test_update_with_default_glob(self, project, store):
        result = await IOSUpdater(store).update_platform_version("1.0.0", 6)

        assert result.success
        assert result.platform == Platform.IOS
        assert result.previous_version == "0.9.0"
        assert result.previous_build_number == 5
        assert result.new_version == "1.0.0"
        assert result.new_build_number == 6
        assert result.error is None

        content = (project / IOS_PROJECT_FILE).read_text(encoding="utf-8")
        assert content.count("MARKETING_VERSION = 1.0.0;") == 2
        assert content.count("CURRENT_PROJECT_VERSION = 6;") == 2
        assert "PRODUCT_NAME = MyApp;" in content

    async def test_other_content_untouched(self, project, store):
        original = (project / IOS_PROJECT_FILE).read_text(encoding="utf-8")
        await IOSUpdater(store).update_platform_version("0.9.0", 5)
        assert (project / IOS_PROJECT_FILE).read_text(encoding="utf-8") == original

    async def test_missing_project_file(self, temp_dir):
        result = await update_ios_version("1.0.0", 6, store=LocalFileStore(temp_dir))

        assert not result.success
        assert result.error == "iOS project file not found at: ./ios/*.xcodeproj/project.pbxproj"
        assert result.error_type == "PlatformFileNotFoundError"
        assert result.new_version == "1.0.0"
        assert result.new_build_number == 6

    async def test_no_previous_fields(self, temp_dir):
        path = temp_dir / "project.pbxproj"
        path.write_text("// !$*UTF8*$!\n{}\n", encoding="utf-8")

        result = await update_ios_version("1.0.0", 1, "project.pbxproj", store=LocalFileStore(temp_dir))

        assert result.success
        assert result.previous_version is None
        assert result.previous_build_number is None

    async def test_unwritable_file(self, project):
        result = await IOSUpdater(ReadOnlyStore(project)).update_platform_version("1.0.0", 6)

        assert not result.success
        assert result.error_type == "PlatformFileUnwritableError"
        assert "Permission denied" in result.error

    async def test_read_build_number(self, store):
        assert await IOSUpdater(store).read_build_number() == 5
        assert await IOSUpdater(store).read_build_number("ios/Missing.xcodeproj/project.pbxproj") is None


@pytest.mark.asyncio
class TestAndroidUpdater:
    """Tests for updating the Android build file."""

    async def test_update(self, project, store):
        result = await update_android_version("1.0.0", 6, store=store)

        assert result.success
        assert result.platform == Platform.ANDROID
        assert result.previous_version == "0.9.0"
        assert result.previous_build_number == 3

        content = (project / ANDROID_GRADLE_FILE).read_text(encoding="utf-8")
        assert "versionCode 6\n" in content
        assert 'versionName "1.0.0"\n' in content
        assert "minSdkVersion rootProject.ext.minSdkVersion" in content

    async def test_missing_gradle_file(self, temp_dir):
        result = await AndroidUpdater(LocalFileStore(temp_dir)).update_platform_version("1.0.0", 2)

        assert not result.success
        assert result.error == "Android build.gradle not found at: ./android/app/build.gradle"
        assert result.error_type == "PlatformFileNotFoundError"

    async def test_undecodable_file_reported(self, temp_dir):
        path = temp_dir / Path("build.gradle")
        path.write_bytes(b"versionCode 1\n\xff\xfe\xfa")

        result = await AndroidUpdater(LocalFileStore(temp_dir)).update_platform_version(
            "1.0.0", 2, "build.gradle"
        )

        assert not result.success
        assert result.error_type == "UnicodeDecodeError"

    async def test_read_build_number_skips_unreadable(self, temp_dir):
        (temp_dir / "build.gradle").write_bytes(b"\xff\xfe\xfa")
        updater = AndroidUpdater(LocalFileStore(temp_dir))
        assert await updater.read_build_number("build.gradle") is None

    async def test_oversized_build_number_reported(self, temp_dir):
        original = "versionCode " + "9" * 5000 + '\nversionName "1.0"\n'
        (temp_dir / "build.gradle").write_text(original, encoding="utf-8")
        updater = AndroidUpdater(LocalFileStore(temp_dir))

        result = await updater.update_platform_version("1.0.0", 2, "build.gradle")

        assert not result.success
        assert result.error_type == "ValueError"
        assert result.new_build_number == 2
        assert (temp_dir / "build.gradle").read_text(encoding="utf-8") == original
        assert await updater.read_build_number("build.gradle") is None

    async def test_custom_store(self, temp_dir):
        """Test that updaters only talk to the store they are given."""

        class MemoryStore(FileStore):
            def __init__(self):
                self.files = {"app.gradle": 'versionCode 41\nversionName "3.0.0"\n'}

            async def read_text(self, path):
                return self.files[str(path)]

            async def write_text(self, path, content):
                self.files[str(path)] = content
                return Path(path)

            def resolve(self, pattern):
                return Path(pattern) if str(pattern) in self.files else None

        memory = MemoryStore()
        result = await AndroidUpdater(memory).update_platform_version("3.1.0", 42, "app.gradle")

        assert result.success
        assert memory.files["app.gradle"] == 'versionCode 42\nversionName "3.1.0"\n'

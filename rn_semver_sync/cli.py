"""
rn-semver CLI.

Command-line interface for incrementing and syncing React Native app versions.
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .core.config import get_config
from .core.logging import setup_logging
from .core.types import Platform, VersionType
from .models.version import SyncResult
from .services.sync import VersionManager
from .storage import LocalFileStore

app = typer.Typer(
    name="rn-semver",
    help="Semantic version and build number sync for React Native iOS and Android projects",
    add_completion=False,
    no_args_is_help=True,
)

console = Console()

VERBOSE = typer.Option(False, "--verbose", "-v", help="Enable verbose logging")
IOS_ONLY = typer.Option(False, "--ios-only", help="Update iOS only")
ANDROID_ONLY = typer.Option(False, "--android-only", help="Update Android only")
BUILD_NUMBER = typer.Option(
    None, "--build-number", "-b", min=0, help="Use this build number instead of the discovered one"
)
NO_BUILD_INCREMENT = typer.Option(
    False, "--no-build-increment", help="Keep the highest existing build number"
)
NO_VALIDATE = typer.Option(False, "--no-validate", help="Accept non-SemVer versions in package.json")
MANIFEST = typer.Option(None, "--manifest", help="Path to package.json")
IOS_PROJECT = typer.Option(None, "--ios-project", help="Path or glob of the iOS project.pbxproj")
ANDROID_GRADLE = typer.Option(None, "--android-gradle", help="Path to android/app/build.gradle")
PROJECT_ROOT = typer.Option(
    Path("."), "--root", "-C", help="Project root", file_okay=False, resolve_path=True
)


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        from . import __version__
        console.print(f"rn-semver v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """rn-semver: keep package.json, iOS and Android versions in sync (SemVer 2.0.0)."""
    pass


def _build_manager(
    root: Path,
    verbose: bool,
    ios_only: bool,
    android_only: bool,
    build_number: int | None,
    no_build_increment: bool,
    no_validate: bool,
    manifest: str | None,
    ios_project: str | None,
    android_gradle: str | None,
) -> VersionManager:
    config = get_config()
    setup_logging(config, verbose=verbose)

    platforms = list(config.sync.platforms)
    if ios_only:
        platforms = [Platform.IOS]
    if android_only:
        platforms = [Platform.ANDROID]

    paths = {
        key: value
        for key, value in (
            ("manifest_path", manifest),
            ("ios_project_path", ios_project),
            ("android_gradle_path", android_gradle),
        )
        if value
    }
    options = config.sync.merged(
        config=paths,
        platforms=platforms,
        verbose=verbose,
        custom_build_number=build_number,
        increment_build_number=not no_build_increment,
        validate_semver=not no_validate,
    )
    return VersionManager(options, LocalFileStore(root))


def display_result(result: SyncResult) -> None:
    """Print a run summary and exit non-zero when anything failed."""
    if not result.success:
        console.print("\n[bold red]✗ Version sync failed![/bold red]")
        for error in result.errors:
            console.print(f"  [red]{escape(error)}[/red]")
        raise typer.Exit(1)

    console.print("\n[bold green]✓ Version sync complete![/bold green]\n")

    table = Table(title=f"Version {result.version.version} · Build {result.build.build_number}")
    table.add_column("Platform", style="cyan")
    table.add_column("Version", style="green")
    table.add_column("Build", style="blue")

    for platform in result.platforms:
        previous_version = f" (was {platform.previous_version})" if platform.previous_version else ""
        previous_build = (
            f" (was {platform.previous_build_number})" if platform.previous_build_number is not None else ""
        )
        table.add_row(
            platform.platform.label,
            f"{platform.new_version}{previous_version}",
            f"{platform.new_build_number}{previous_build}",
        )

    console.print(table)
    console.print(f"\nBuild number source: {result.build.source.value}")


def _increment(version_type: VersionType, manager: VersionManager) -> None:
    console.print(f"[blue]Incrementing {version_type.value} version...[/blue]")
    display_result(asyncio.run(manager.increment_version(version_type)))


@app.command()
def patch(
    root: Path = PROJECT_ROOT,
    verbose: bool = VERBOSE,
    ios_only: bool = IOS_ONLY,
    android_only: bool = ANDROID_ONLY,
    build_number: Optional[int] = BUILD_NUMBER,
    no_build_increment: bool = NO_BUILD_INCREMENT,
    no_validate: bool = NO_VALIDATE,
    manifest: Optional[str] = MANIFEST,
    ios_project: Optional[str] = IOS_PROJECT,
    android_gradle: Optional[str] = ANDROID_GRADLE,
) -> None:
    """Increment patch version (1.0.0 → 1.0.1) and sync platforms."""
    _increment(
        VersionType.PATCH,
        _build_manager(root, verbose, ios_only, android_only, build_number, no_build_increment,
                       no_validate, manifest, ios_project, android_gradle),
    )


@app.command()
def minor(
    root: Path = PROJECT_ROOT,
    verbose: bool = VERBOSE,
    ios_only: bool = IOS_ONLY,
    android_only: bool = ANDROID_ONLY,
    build_number: Optional[int] = BUILD_NUMBER,
    no_build_increment: bool = NO_BUILD_INCREMENT,
    no_validate: bool = NO_VALIDATE,
    manifest: Optional[str] = MANIFEST,
    ios_project: Optional[str] = IOS_PROJECT,
    android_gradle: Optional[str] = ANDROID_GRADLE,
) -> None:
    """Increment minor version (1.0.1 → 1.1.0) and sync platforms."""
    _increment(
        VersionType.MINOR,
        _build_manager(root, verbose, ios_only, android_only, build_number, no_build_increment,
                       no_validate, manifest, ios_project, android_gradle),
    )


@app.command()
def major(
    root: Path = PROJECT_ROOT,
    verbose: bool = VERBOSE,
    ios_only: bool = IOS_ONLY,
    android_only: bool = ANDROID_ONLY,
    build_number: Optional[int] = BUILD_NUMBER,
    no_build_increment: bool = NO_BUILD_INCREMENT,
    no_validate: bool = NO_VALIDATE,
    manifest: Optional[str] = MANIFEST,
    ios_project: Optional[str] = IOS_PROJECT,
    android_gradle: Optional[str] = ANDROID_GRADLE,
) -> None:
    """Increment major version (1.1.0 → 2.0.0) and sync platforms."""
    _increment(
        VersionType.MAJOR,
        _build_manager(root, verbose, ios_only, android_only, build_number, no_build_increment,
                       no_validate, manifest, ios_project, android_gradle),
    )


@app.command()
def sync(
    root: Path = PROJECT_ROOT,
    verbose: bool = VERBOSE,
    ios_only: bool = IOS_ONLY,
    android_only: bool = ANDROID_ONLY,
    build_number: Optional[int] = BUILD_NUMBER,
    no_build_increment: bool = NO_BUILD_INCREMENT,
    no_validate: bool = NO_VALIDATE,
    manifest: Optional[str] = MANIFEST,
    ios_project: Optional[str] = IOS_PROJECT,
    android_gradle: Optional[str] = ANDROID_GRADLE,
) -> None:
    """Sync the current package.json version to the platforms."""
    manager = _build_manager(root, verbose, ios_only, android_only, build_number, no_build_increment,
                             no_validate, manifest, ios_project, android_gradle)
    console.print("[blue]Syncing current version to platforms...[/blue]")
    display_result(asyncio.run(manager.sync_versions()))


if __name__ == "__main__":
    app()

"""
Semantic versioning utilities following the SemVer 2.0.0 grammar.

Pure functions over version strings and VersionInfo values. Ordering of
pre-release versions uses plain string comparison of the whole pre-release
part, not the per-identifier precedence rules of SemVer 2.0.0: ``1.0.0-alpha.10``
sorts before ``1.0.0-alpha.2``.
"""

from __future__ import annotations

import re

from ..models.version import VersionInfo
from .exceptions import InvalidVersionError, InvalidVersionTypeError
from .types import VersionType

_NUMERIC = r"0|[1-9][0-9]*"
_PRERELEASE_ID = rf"(?:{_NUMERIC}|[0-9]*[a-zA-Z-][0-9a-zA-Z-]*)"
_BUILD_ID = r"[0-9a-zA-Z-]+"

SEMVER_PATTERN = re.compile(
    rf"(?P<major>{_NUMERIC})\.(?P<minor>{_NUMERIC})\.(?P<patch>{_NUMERIC})"
    rf"(?:-(?P<prerelease>{_PRERELEASE_ID}(?:\.{_PRERELEASE_ID})*))?"
    rf"(?:\+(?P<build_metadata>{_BUILD_ID}(?:\.{_BUILD_ID})*))?"
)

_LEADING_NUMBERS = re.compile(r"\s*v?([0-9]+)(?:\.([0-9]+))?(?:\.([0-9]+))?")


def is_valid_semver(version: str) -> bool:
    """Check whether ``version`` matches the SemVer 2.0.0 grammar exactly."""
    return isinstance(version, str) and SEMVER_PATTERN.fullmatch(version) is not None


def parse_version(version: str) -> VersionInfo:
    """Parse a semantic version string into its components.

    Raises:
        InvalidVersionError: If the string is not a valid semantic version.
    """
    match = SEMVER_PATTERN.fullmatch(version) if isinstance(version, str) else None
    if match is None:
        raise InvalidVersionError.for_version(version)

    return VersionInfo(
        version=version,
        major=int(match["major"]),
        minor=int(match["minor"]),
        patch=int(match["patch"]),
        prerelease=match["prerelease"],
        build_metadata=match["build_metadata"],
    )


def coerce_version(version: str) -> VersionInfo:
    """Build a VersionInfo for a string that may not be valid SemVer.

    Valid versions parse normally. Anything else keeps its original string
    and takes its numbers from the leading ``MAJOR[.MINOR[.PATCH]]`` digits,
    with missing parts set to 0.
    """
    if is_valid_semver(version):
        return parse_version(version)

    match = _LEADING_NUMBERS.match(version)
    numbers = [int(part) if part else 0 for part in match.groups()] if match else [0, 0, 0]
    return VersionInfo(version=version, major=numbers[0], minor=numbers[1], patch=numbers[2])


def _sign(a: object, b: object) -> int:
    return (a > b) - (a < b)  # type: ignore[operator]


def compare_versions(v1: str, v2: str) -> int:
    """Compare two semantic version strings.

    Returns:
        -1 if ``v1`` sorts before ``v2``, 0 if they are equal, 1 otherwise.
        Build metadata never affects the order.

    Raises:
        InvalidVersionError: If either string is not a valid semantic version.
    """
    a = parse_version(v1)
    b = parse_version(v2)

    for left, right in ((a.major, b.major), (a.minor, b.minor), (a.patch, b.patch)):
        if left != right:
            return _sign(left, right)

    # A pre-release sorts before its release
    if a.prerelease is not None and b.prerelease is None:
        return -1
    if a.prerelease is None and b.prerelease is not None:
        return 1
    if a.prerelease is not None and b.prerelease is not None:
        return _sign(a.prerelease, b.prerelease)
    return 0


def increment_version(version: str, version_type: VersionType | str) -> str:
    """Increment a semantic version, dropping pre-release and build metadata.

    Raises:
        InvalidVersionError: If ``version`` is not a valid semantic version.
        InvalidVersionTypeError: If ``version_type`` is not major, minor or patch.
    """
    parsed = parse_version(version)
    try:
        unit = VersionType(version_type)
    except ValueError:
        raise InvalidVersionTypeError.for_type(version_type) from None

    if unit is VersionType.MAJOR:
        return f"{parsed.major + 1}.0.0"
    if unit is VersionType.MINOR:
        return f"{parsed.major}.{parsed.minor + 1}.0"
    return f"{parsed.major}.{parsed.minor}.{parsed.patch + 1}"


def format_version(info: VersionInfo) -> str:
    """Render a VersionInfo back to its string form."""
    version = f"{info.major}.{info.minor}.{info.patch}"
    if info.prerelease:
        version += f"-{info.prerelease}"
    if info.build_metadata:
        version += f"+{info.build_metadata}"
    return version

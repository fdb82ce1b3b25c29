"""Update package version parsing and comparison.

Update packages are named ``ezvit.<FROM>-<TO>.upd``, for example
``ezvit.11.02.185-11.02.186.upd``. Cumulative packages carry only the
target version (``ezvit.11.02.186.upd``).
"""

from packaging.version import InvalidVersion, Version

from medoc_check.constants import (
    PREVIOUS_VERSION_SENTINEL,
    UPDATE_PACKAGE_EXTENSION,
    UPDATE_PACKAGE_PREFIX,
)
from medoc_check.domain.types import VersionInfo


def _strip_affixes(token: str) -> str:
    if token.lower().startswith(UPDATE_PACKAGE_PREFIX):
        token = token[len(UPDATE_PACKAGE_PREFIX) :]
    if token.lower().endswith(UPDATE_PACKAGE_EXTENSION):
        token = token[: -len(UPDATE_PACKAGE_EXTENSION)]
    return token.strip()


def parse_version_string(token: str) -> VersionInfo:
    """Split an update package token into from/to versions.

    No numeric validation is done: malformed fragments pass through
    trimmed but otherwise untouched.

    Examples:
        >>> parse_version_string("ezvit.11.02.185-11.02.186.upd")
        VersionInfo(from_version='11.02.185', to_version='11.02.186')
        >>> parse_version_string("ezvit.11.02.186.upd")
        VersionInfo(from_version='previous', to_version='11.02.186')

    Args:
        token: Raw version token from the planner trigger line

    Returns:
        VersionInfo with from/to versions

    """
    core = _strip_affixes(token.strip())

    left, hyphen, right = core.partition("-")
    if not hyphen:
        return VersionInfo(PREVIOUS_VERSION_SENTINEL, core)
    return VersionInfo(left.strip(), right.strip())


def compare_versions(version1: str, version2: str) -> int | None:
    """Compare two dotted version strings.

    Returns -1 if version1 < version2, 0 if equal, 1 if version1 > version2,
    or None when either side is not a version at all (e.g. the
    ``previous`` sentinel).
    """
    v1_clean = version1.strip().lower()
    v2_clean = version2.strip().lower()

    if v1_clean == v2_clean:
        return 0

    try:
        v1 = Version(v1_clean)
        v2 = Version(v2_clean)
    except InvalidVersion:
        return None

    if v1 < v2:
        return -1
    if v1 > v2:
        return 1
    return 0

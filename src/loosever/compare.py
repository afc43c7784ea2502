# SPDX-License-Identifier: MIT
"""Version precedence.

Order: major, then minor, then patch, then pre-release.
A version without pre-release ranks above the same triplet with one
(1.0.0-alpha < 1.0.0). Pre-release strings compare as plain strings, so
"alpha.10" < "alpha.2". Build metadata is ignored.
"""

from __future__ import annotations

from typing import Union

from .parser import parse_version
from .version import Version


def _compare_prerelease(pre1: str, pre2: str) -> int:
    """Compare two pre-release strings, empty meaning "no pre-release".

    Returns:
        -1 if pre1 < pre2
        0 if pre1 == pre2
        1 if pre1 > pre2
    """
    if pre1 == pre2:
        return 0
    if not pre1:
        return 1  # Release > pre-release
    if not pre2:
        return -1  # Pre-release < release
    return -1 if pre1 < pre2 else 1


def compare_versions(version1: Union[str, Version], version2: Union[str, Version]) -> int:
    """Compare two versions.

    Args:
        version1: First version (string or Version object)
        version2: Second version (string or Version object)

    Returns:
        -1 if version1 < version2
        0 if version1 == version2
        1 if version1 > version2

    Raises:
        InvalidVersionError: If either version string is invalid

    Examples:
        >>> compare_versions("2.0.0", "1.9.9")
        1
        >>> compare_versions("0.2-alpha", "0.2-beta")
        -1
        >>> compare_versions("1.2.3+a", "1.2.3+b")
        0
    """
    v1 = parse_version(version1) if isinstance(version1, str) else version1
    v2 = parse_version(version2) if isinstance(version2, str) else version2

    for attr in ("major", "minor", "patch"):
        val1 = getattr(v1, attr)
        val2 = getattr(v2, attr)
        if val1 != val2:
            return -1 if val1 < val2 else 1

    return _compare_prerelease(v1.prerelease, v2.prerelease)


def version_key(version: Union[str, Version]) -> tuple:
    """Return a sort key for a version, consistent with compare_versions.

    Examples:
        >>> sorted(["1.0.0", "2.0.0", "1.0.0-alpha"], key=version_key)
        ['1.0.0-alpha', '1.0.0', '2.0.0']
    """
    v = parse_version(version) if isinstance(version, str) else version

    # (1, "") sorts after every (0, prerelease)
    prerelease_key = (0, v.prerelease) if v.prerelease else (1, "")
    return (v.major, v.minor, v.patch, prerelease_key)

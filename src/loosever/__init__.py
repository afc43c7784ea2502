# SPDX-License-Identifier: MIT
"""Tolerant semantic version parsing, validation and comparison.

This package provides an immutable Version value type that can be built from
raw numbers or parsed from loosely formatted text ("v1.2", "release-1.12.1").
Build metadata is carried and rendered but never affects equality or order.

Example:
    >>> from loosever import Version, parse_version, compare_versions
    >>>
    >>> version = parse_version("v1.2.3-alpha.1+20230113000000")
    >>> version.patch
    3
    >>> version.prerelease
    'alpha.1'
    >>>
    >>> parse_version("1.7") > Version(1, 6, 3)
    True
    >>>
    >>> compare_versions("1.0.0", "2.0.0")
    -1
"""

__version__ = "0.1.0"

from .version import (
    Version,
    Prerelease,
    BuildMetadata,
    InvalidVersionError,
    format_version,
    validate_version,
    IDENTIFIER_PATTERN,
)
from .parser import (
    parse_version,
    is_valid_version,
)
from .compare import (
    compare_versions,
    version_key,
)

__all__ = [
    # Value type
    "Version",
    "Prerelease",
    "BuildMetadata",
    "InvalidVersionError",
    "format_version",
    "validate_version",
    "IDENTIFIER_PATTERN",
    # Parsing
    "parse_version",
    "is_valid_version",
    # Comparison
    "compare_versions",
    "version_key",
]

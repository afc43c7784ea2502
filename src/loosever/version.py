# SPDX-License-Identifier: MIT
"""Semantic version value type.

A Version holds MAJOR.MINOR.PATCH plus optional pre-release and build metadata:
- Pre-release: 1.2.3-alpha, 1.2.3-alpha.1, 1.2.3-rc.2
- Build metadata: 1.2.3+build.123, 1.2.3+20230113000000

Every construction path runs validate_version(), so an existing Version always
satisfies its invariants.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Union

SEPARATOR = "."

# Allowed characters for pre-release and build metadata text (ASCII only)
IDENTIFIER_PATTERN = re.compile(r"[0-9A-Za-z.-]*")
_INVALID_CHARACTER = re.compile(r"[^0-9A-Za-z.-]")


class InvalidVersionError(Exception):
    """Raised when a version violates semantic versioning rules."""

    def __init__(self, version: str, message: str = ""):
        self.version = version
        self.message = message or f"Invalid semantic version: {version}"
        super().__init__(self.message)


@dataclass(frozen=True, slots=True)
class Prerelease:
    """Tags a positional argument of Version.of() as pre-release text."""

    value: str


@dataclass(frozen=True, slots=True)
class BuildMetadata:
    """Tags a positional argument of Version.of() as build metadata text."""

    value: str


def format_version(
    major: object,
    minor: object,
    patch: object,
    prerelease: object = "",
    build_metadata: object = "",
) -> str:
    """Render version fields in canonical form.

    Accepts any field values, valid or not, so that error messages can show
    the rejected version.

    Examples:
        >>> format_version(1, 2, 3)
        '1.2.3'
        >>> format_version(1, 2, 3, "beta", "20230113000000")
        '1.2.3-beta+20230113000000'
    """
    text = f"{major}{SEPARATOR}{minor}{SEPARATOR}{patch}"
    if prerelease:
        text += f"-{prerelease}"
    if build_metadata:
        text += f"+{build_metadata}"
    return text


def validate_version(
    major: int,
    minor: int,
    patch: int,
    prerelease: str = "",
    build_metadata: str = "",
) -> None:
    """Check version fields against the semantic versioning invariants.

    Args:
        major: Major version number
        minor: Minor version number
        patch: Patch version number
        prerelease: Pre-release text, empty if none
        build_metadata: Build metadata text, empty if none

    Raises:
        InvalidVersionError: If any field breaks a rule. The message names the
            rule and shows the canonical rendering of the rejected version.
    """
    rendered = format_version(major, minor, patch, prerelease, build_metadata)

    def fail(reason: str) -> InvalidVersionError:
        return InvalidVersionError(rendered, f"in version {rendered}: {reason}")

    for name, number in (("major", major), ("minor", minor), ("patch", patch)):
        # bool is an int subclass but never a version number
        if not isinstance(number, int) or isinstance(number, bool):
            raise fail(f"{name} version must be an integer, got {type(number).__name__}")

    if not major and not minor and not patch:
        raise fail("version cannot be null")

    for name, number in (("major", major), ("minor", minor), ("patch", patch)):
        if number < 0:
            raise fail(f"{name} version must be >= 0")

    for label, text in (("prerelease version", prerelease), ("build metadata", build_metadata)):
        if not isinstance(text, str):
            raise fail(f"{label} must be a string, got {type(text).__name__}")
        if IDENTIFIER_PATTERN.fullmatch(text):
            continue
        bad = _INVALID_CHARACTER.search(text)
        if bad:
            raise fail(f"{label} contains invalid character '{bad.group()}'")


@dataclass(frozen=True, slots=True, order=False)
class Version:
    """An immutable, validated semantic version.

    Attributes:
        major: Major version number (breaking changes)
        minor: Minor version number (new features, backward compatible)
        patch: Patch version number (bug fixes, backward compatible)
        prerelease: Pre-release text (e.g., "alpha.1", "rc.2"), empty if none
        build_metadata: Build metadata (e.g., "20230113000000"), empty if none.
            Informational only: ignored by ==, hash() and ordering.

    Examples:
        >>> Version(1, 2, 3, prerelease="alpha.1")
        Version(major=1, minor=2, patch=3, prerelease='alpha.1', build_metadata='')
        >>> Version(1, 2, 3, build_metadata="a") == Version(1, 2, 3, build_metadata="b")
        True
    """

    major: int
    minor: int
    patch: int
    prerelease: str = ""
    build_metadata: str = field(default="", compare=False)

    def __post_init__(self) -> None:
        validate_version(self.major, self.minor, self.patch, self.prerelease, self.build_metadata)

    @classmethod
    def of(
        cls,
        major: int,
        minor: int,
        patch: int,
        *tags: Union[Prerelease, BuildMetadata],
    ) -> Version:
        """Build a version from raw numbers plus tagged optional fields.

        Tags may be given in any order; at most one of each kind.

        Examples:
            >>> str(Version.of(1, 2, 3, BuildMetadata("b1"), Prerelease("rc")))
            '1.2.3-rc+b1'

        Raises:
            TypeError: If a tag is not a Prerelease/BuildMetadata or repeats.
            InvalidVersionError: If the resulting version is invalid.
        """
        options: dict[str, str] = {}
        for tag in tags:
            if isinstance(tag, Prerelease):
                key = "prerelease"
            elif isinstance(tag, BuildMetadata):
                key = "build_metadata"
            else:
                raise TypeError(
                    f"Expected Prerelease or BuildMetadata, got {type(tag).__name__}"
                )
            if key in options:
                raise TypeError(f"{type(tag).__name__} given more than once")
            options[key] = tag.value
        return cls(major, minor, patch, **options)

    @classmethod
    def parse(cls, text: str) -> Version:
        """Parse a version string. See loosever.parser.parse_version."""
        from .parser import parse_version

        return parse_version(text)

    def __str__(self) -> str:
        """Return the canonical string representation of the version."""
        return format_version(
            self.major, self.minor, self.patch, self.prerelease, self.build_metadata
        )

    def _compare(self, other: Version) -> int:
        from .compare import compare_versions

        return compare_versions(self, other)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._compare(other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._compare(other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._compare(other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._compare(other) >= 0

    @property
    def is_prerelease(self) -> bool:
        """Return True if this is a pre-release version."""
        return bool(self.prerelease)

    @property
    def base_version(self) -> str:
        """Return the base version without pre-release or build metadata."""
        return f"{self.major}.{self.minor}.{self.patch}"

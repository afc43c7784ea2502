# SPDX-License-Identifier: MIT
"""Tolerant semantic version parsing.

The parser is lenient about where a version starts and how many numeric
components it has, and strict about everything it does extract:
- Any prefix before the first digit is dropped: "v1.2.3", "release-1.2.3"
- Minor and patch may be omitted: "1.7" is 1.7.0, "1" is 1.0.0
- Text after the numeric part that is not "-prerelease" or "+build" is ignored

Pre-release and build metadata text is taken verbatim and checked by the
validator when the Version is built.
"""

from __future__ import annotations

from .version import SEPARATOR, InvalidVersionError, Version

_DIGITS = frozenset("0123456789")


def _is_digit(text: str, index: int) -> bool:
    return index < len(text) and text[index] in _DIGITS


def _read_number(text: str, start: int, component: str) -> tuple[int, int]:
    """Read the digit run at ``start``.

    Returns the number and the index of its last digit.
    """
    end = start
    while _is_digit(text, end):
        end += 1
    if end == start:
        raise InvalidVersionError(
            text, f"in version {text}: failed to parse {component} version number"
        )
    return int(text[start:end]), end - 1


def _continues(text: str, pos: int) -> bool:
    # A separator sits at pos + 1 only when a digit follows it at pos + 2
    return pos + 1 < len(text) and _is_digit(text, pos + 2)


def parse_version(version_string: str) -> Version:
    """Parse a version string into a Version object.

    Args:
        version_string: Text containing a version, optionally prefixed
            ([prefix]MAJOR[.MINOR[.PATCH]][-prerelease][+build])

    Returns:
        A validated Version

    Raises:
        InvalidVersionError: If no major number is found, a component
            separator is not ".", or the result breaks a version invariant

    Examples:
        >>> parse_version("v1.2.3")
        Version(major=1, minor=2, patch=3, prerelease='', build_metadata='')

        >>> parse_version("1.7")
        Version(major=1, minor=7, patch=0, prerelease='', build_metadata='')

        >>> str(parse_version("release-1.12.1-alpha.3.foo+buildnum19483824028"))
        '1.12.1-alpha.3.foo+buildnum19483824028'
    """
    if not isinstance(version_string, str):
        raise InvalidVersionError(
            str(version_string),
            f"in version {version_string}: version must be a string, "
            f"got {type(version_string).__name__}",
        )

    text = version_string
    pos = 0
    while pos < len(text) and text[pos] not in _DIGITS:
        pos += 1

    numbers = [0, 0, 0]
    numbers[0], pos = _read_number(text, pos, "major")
    for index, component in ((1, "minor"), (2, "patch")):
        if not _continues(text, pos):
            break
        pos += 1
        if text[pos] != SEPARATOR:
            raise InvalidVersionError(text, f"in version {text}: invalid separator")
        numbers[index], pos = _read_number(text, pos + 1, component)

    pos += 1
    prerelease = ""
    build_metadata = ""

    if text[pos : pos + 1] == "-":
        end = text.find("+", pos + 1)
        if end == -1:
            end = len(text)
        prerelease = text[pos + 1 : end]
        pos = end

    if text[pos : pos + 1] == "+":
        build_metadata = text[pos + 1 :]

    major, minor, patch = numbers
    try:
        return Version(major, minor, patch, prerelease, build_metadata)
    except InvalidVersionError as e:
        raise InvalidVersionError(text, f"{e.message} (parsed from {text!r})") from e


def is_valid_version(version_string: str) -> bool:
    """Check if a string parses as a valid version.

    Examples:
        >>> is_valid_version("v1.2.3-rc.1")
        True
        >>> is_valid_version("1,2,3")
        False
        >>> is_valid_version("0.0.0")
        False
    """
    try:
        parse_version(version_string)
    except InvalidVersionError:
        return False
    return True

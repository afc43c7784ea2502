# SPDX-License-Identifier: MIT
"""Property-based tests for the Version value type.

These tests verify that:
- Raw construction keeps the given fields and rejects null/negative triplets
- Pre-release and build metadata outside [0-9A-Za-z.-] are rejected
- Canonical text parses back to an equal version
- Ordering is a total order consistent with equality and version_key
"""

from __future__ import annotations

import pytest
from hypothesis import assume, given, settings, strategies as st

from loosever import (
    InvalidVersionError,
    Version,
    compare_versions,
    parse_version,
    version_key,
)


# =============================================================================
# Strategies for generating test data
# =============================================================================

numbers = st.integers(min_value=0, max_value=10**6)

identifier_text = st.from_regex(r"[0-9A-Za-z.-]{0,12}", fullmatch=True)

# At least one character outside the allowed set
illegal_text = st.builds(
    lambda head, bad, tail: head + bad + tail,
    identifier_text,
    st.sampled_from(list("$_+ !/~@é\n")),
    identifier_text,
)


@st.composite
def triplets(draw):
    """Generate a non-null (major, minor, patch) triplet."""
    triplet = (draw(numbers), draw(numbers), draw(numbers))
    assume(any(triplet))
    return triplet


@st.composite
def versions(draw):
    """Generate a valid Version."""
    major, minor, patch = draw(triplets())
    return Version(
        major,
        minor,
        patch,
        prerelease=draw(identifier_text),
        build_metadata=draw(identifier_text),
    )


# =============================================================================
# Property-Based Tests
# =============================================================================


class TestConstructionProperties:
    """Properties of raw construction and validation."""

    @given(triplet=triplets())
    @settings(max_examples=100)
    def test_raw_construction_keeps_fields(self, triplet):
        """Raw construction stores the numbers and leaves tags empty."""
        v = Version(*triplet)
        assert (v.major, v.minor, v.patch) == triplet
        assert v.prerelease == ""
        assert v.build_metadata == ""

    @given(
        triplet=st.tuples(
            st.integers(max_value=10**6),
            st.integers(max_value=10**6),
            st.integers(max_value=10**6),
        )
    )
    @settings(max_examples=100)
    def test_negative_components_rejected(self, triplet):
        """Any negative component is rejected."""
        assume(min(triplet) < 0)
        with pytest.raises(InvalidVersionError):
            Version(*triplet)

    @given(triplet=triplets(), text=illegal_text)
    @settings(max_examples=100)
    def test_illegal_prerelease_rejected(self, triplet, text):
        """Pre-release text with an illegal character is rejected."""
        with pytest.raises(InvalidVersionError):
            Version(*triplet, prerelease=text)

    @given(triplet=triplets(), text=illegal_text)
    @settings(max_examples=100)
    def test_illegal_build_metadata_rejected(self, triplet, text):
        """Build metadata with an illegal character is rejected."""
        with pytest.raises(InvalidVersionError):
            Version(*triplet, build_metadata=text)


class TestRoundTripProperties:
    """Properties of formatting and parsing together."""

    @given(v=versions())
    @settings(max_examples=100)
    def test_parse_of_str_is_equal(self, v):
        """parse_version(str(v)) equals v and keeps the build metadata."""
        reparsed = parse_version(str(v))
        assert reparsed == v
        assert reparsed.build_metadata == v.build_metadata

    @given(v=versions(), prefix=st.from_regex(r"[A-Za-z_ -]{0,8}", fullmatch=True))
    @settings(max_examples=100)
    def test_non_digit_prefix_ignored(self, v, prefix):
        """A non-digit prefix does not change the parsed version."""
        assert parse_version(prefix + str(v)) == v


class TestOrderingProperties:
    """Properties of the comparison operators."""

    @given(a=versions(), b=versions())
    @settings(max_examples=100)
    def test_exactly_one_relation_holds(self, a, b):
        """Exactly one of a < b, a == b, a > b holds."""
        assert [a < b, a == b, a > b].count(True) == 1

    @given(a=versions(), b=versions())
    @settings(max_examples=100)
    def test_antisymmetry(self, a, b):
        """compare_versions(a, b) is the negation of compare_versions(b, a)."""
        assert compare_versions(a, b) == -compare_versions(b, a)

    @given(a=versions(), b=versions())
    @settings(max_examples=100)
    def test_operators_agree_with_compare(self, a, b):
        """All operators derive from the same three-way comparison."""
        result = compare_versions(a, b)
        assert (a < b) == (result < 0)
        assert (a <= b) == (result <= 0)
        assert (a > b) == (result > 0)
        assert (a >= b) == (result >= 0)

    @given(a=versions(), b=versions())
    @settings(max_examples=100)
    def test_version_key_agrees_with_compare(self, a, b):
        """version_key orders versions the same way as compare_versions."""
        key_a, key_b = version_key(a), version_key(b)
        expected = (key_a > key_b) - (key_a < key_b)
        assert compare_versions(a, b) == expected

    @given(triplet=triplets(), pre=identifier_text, build1=identifier_text, build2=identifier_text)
    @settings(max_examples=100)
    def test_build_metadata_never_matters(self, triplet, pre, build1, build2):
        """Versions differing only in build metadata are equal and unordered."""
        a = Version(*triplet, prerelease=pre, build_metadata=build1)
        b = Version(*triplet, prerelease=pre, build_metadata=build2)
        assert a == b
        assert hash(a) == hash(b)
        assert not a < b and not a > b

# SPDX-License-Identifier: MIT
"""Unit tests for the Version and SimpleVersion types."""

from dataclasses import FrozenInstanceError

import pytest

from vernum import (
    InvalidVersion,
    InvalidVersionError,
    SimpleVersion,
    Version,
    is_valid_version,
    parse_version,
)


class TestVersionConstruction:
    """Tests for building Version objects."""

    def test_basic_version(self):
        """Test a plain dotted version."""
        v = Version("1.2.3")
        assert v.text == "1.2.3"
        assert str(v) == "1.2.3"
        assert repr(v) == "Version('1.2.3')"

    def test_full_alphabet(self):
        """Test a version using every kind of allowed character."""
        assert str(Version("1:2.0~rc1+dfsg-1ubuntu2")) == "1:2.0~rc1+dfsg-1ubuntu2"

    def test_empty_version(self):
        """Test that the empty string is a valid version."""
        assert Version("") == Version("")

    def test_leading_zero_allowed(self):
        """Test that leading zeros are not checked at construction."""
        assert Version("1.02").text == "1.02"

    @pytest.mark.parametrize("text", ["1.0_beta", "1.0A", "1 2", "é", "v1.0!", "1.0\n"])
    def test_invalid_characters(self, text):
        """Test that characters outside the alphabet are rejected."""
        with pytest.raises(InvalidVersionError) as exc_info:
            Version(text)
        assert exc_info.value.kind is InvalidVersion.INVALID_CHARACTER
        assert exc_info.value.version == text

    def test_non_string_input(self):
        """Test that non-string input raises error."""
        with pytest.raises(InvalidVersionError):
            Version(123)  # type: ignore

    def test_none_input(self):
        """Test that None input raises error."""
        with pytest.raises(InvalidVersionError):
            parse_version(None)  # type: ignore

    def test_is_valid_version(self):
        """Test the boolean validity check."""
        assert is_valid_version("1.0~rc1") is True
        assert is_valid_version("1.0-RC1") is False
        assert is_valid_version(1.0) is False  # type: ignore


class TestVersionOrdering:
    """Tests for Version comparison operators."""

    def test_reference_orderings(self):
        """Test the reference orderings."""
        assert Version("1.2") < Version("1.2.0")
        assert Version("1.3.1") > Version("1.1.3")
        assert Version("1.1~rc1") < Version("1.1")
        assert Version("1.1-fix1") > Version("1.1")

    def test_operators(self):
        """Test all the rich comparison operators."""
        low, high = Version("1.0"), Version("1.1")
        assert low < high
        assert low <= high
        assert high > low
        assert high >= low
        assert low != high
        assert low <= Version("1.0")
        assert low >= Version("1.0")

    def test_not_comparable_with_strings(self):
        """Test that Version does not compare with plain strings."""
        assert Version("1.0") != "1.0"
        with pytest.raises(TypeError):
            Version("1.0") < "2.0"  # noqa: B015

    def test_sorting(self):
        """Test sorting Version objects."""
        versions = [Version("1.0-1"), Version("1.0~beta"), Version("1.0"), Version("0.9")]
        assert [str(v) for v in sorted(versions)] == ["0.9", "1.0~beta", "1.0", "1.0-1"]

    def test_epoch(self):
        """Test the epoch accessor and its effect on ordering."""
        assert Version("2:1.0").epoch == 2
        assert Version("1.0").epoch == 0
        assert Version("1:1.0") > Version("2.0")
        assert Version("0:1.0") == Version("1.0")


class TestVersionEquality:
    """Tests for Version equality and hashing."""

    def test_equality_follows_ordering(self):
        """Test that versions differing only in leading zeros are equal."""
        assert Version("1.01") == Version("1.1")
        assert Version("1.0") != Version("1")

    def test_hash_agrees_with_equality(self):
        """Test that equal versions hash equally."""
        assert hash(Version("1.01")) == hash(Version("1.1"))
        assert hash(Version("0:2.0")) == hash(Version("2.0"))

    def test_usable_in_sets(self):
        """Test that equal versions collapse in a set."""
        versions = {Version("1.1"), Version("1.01"), Version("1.001"), Version("1.2")}
        assert len(versions) == 2

    def test_trailing_hyphen_is_distinct(self):
        """Test that a trailing hyphen makes a greater, separately hashed version."""
        assert Version("1.1-") != Version("1.1")
        assert Version("1.1-") > Version("1.1")
        assert len({Version("1.1-"), Version("1.1")}) == 2

    def test_frozen(self):
        """Test that Version is immutable."""
        v = Version("1.0")
        with pytest.raises(FrozenInstanceError):
            v.text = "2.0"  # type: ignore


class TestSimpleVersion:
    """Tests for SimpleVersion."""

    def test_fields(self):
        """Test reading the numeric fields."""
        assert SimpleVersion("1.20.3").fields == (1, 20, 3)
        assert SimpleVersion("0").fields == (0,)

    def test_is_a_version(self):
        """Test that SimpleVersion orders alongside Version."""
        assert isinstance(SimpleVersion("1.2"), Version)
        assert SimpleVersion("1.2") == Version("1.2")
        assert SimpleVersion("1.2") < Version("1.2.1")
        assert SimpleVersion("1.9") < SimpleVersion("1.10")

    @pytest.mark.parametrize("text", ["1.0~rc1", "1a", "1-1", "1:1", ".1", "1..2", "1.", ""])
    def test_not_simple(self, text):
        """Test that anything but non-empty dotted numbers is rejected."""
        with pytest.raises(InvalidVersionError) as exc_info:
            SimpleVersion(text)
        assert exc_info.value.kind is InvalidVersion.INVALID_CHARACTER

    @pytest.mark.parametrize("text", ["1.02", "01", "1.2.00"])
    def test_leading_zero(self, text):
        """Test that numeric fields may not start with a zero."""
        with pytest.raises(InvalidVersionError) as exc_info:
            SimpleVersion(text)
        assert exc_info.value.kind is InvalidVersion.LEADING_ZERO

    def test_invalid_character_checked_first(self):
        """Test that characters outside the version alphabet are reported."""
        with pytest.raises(InvalidVersionError) as exc_info:
            SimpleVersion("1.0_1")
        assert exc_info.value.kind is InvalidVersion.INVALID_CHARACTER

"""Tests for version precedence."""

from __future__ import annotations

from itertools import combinations

import pytest

from semver_py.core.identifiers import NumericIdentifier, TextIdentifier, parse_identifiers
from semver_py.core.precedence import (
    Ordering,
    compare,
    compare_identifiers,
    compare_pre,
    compare_sequences,
    equals,
    greater_than,
)
from semver_py.core.version import Version


def v(text: str) -> Version:
    return Version.parse(text)


class TestCompareIdentifiers:
    """Tests for compare_identifiers()."""

    def test_numeric_compared_numerically(self):
        """2 sorts before 11."""
        assert compare_identifiers(NumericIdentifier(2), NumericIdentifier(11)) == -1
        assert compare_identifiers(NumericIdentifier(11), NumericIdentifier(2)) == 1

    def test_text_compared_ascii(self):
        """Text identifiers use ASCII order, so upper case sorts first."""
        assert compare_identifiers(TextIdentifier("alpha"), TextIdentifier("beta")) == -1
        assert compare_identifiers(TextIdentifier("RC"), TextIdentifier("rc")) == -1

    def test_numeric_below_text(self):
        """Numeric identifiers always have lower precedence than text."""
        assert compare_identifiers(NumericIdentifier(999), TextIdentifier("a")) == -1
        assert compare_identifiers(TextIdentifier("a"), NumericIdentifier(0)) == 1

    def test_equal(self):
        assert compare_identifiers(NumericIdentifier(1), NumericIdentifier(1)) == 0
        assert compare_identifiers(TextIdentifier("x"), TextIdentifier("x")) == 0


class TestCompareSequences:
    """Tests for compare_sequences() and compare_pre()."""

    def test_first_difference_decides(self):
        a = parse_identifiers("alpha.1.z")
        b = parse_identifiers("alpha.2.a")
        assert compare_sequences(a, b) == -1

    def test_longer_wins_on_common_prefix(self):
        """Unequal lengths are compared without indexing past the shorter."""
        short = parse_identifiers("alpha")
        long = parse_identifiers("alpha.1")
        assert compare_sequences(short, long) == -1
        assert compare_sequences(long, short) == 1

    def test_empty_pre_is_highest(self):
        """A final release outranks any pre-release."""
        assert compare_pre((), parse_identifiers("rc.1")) == 1
        assert compare_pre(parse_identifiers("rc.1"), ()) == -1
        assert compare_pre((), ()) == 0


class TestSemverOrdering:
    """Operators follow SemVer 2.0.0 precedence."""

    def test_chain_is_strictly_ascending(self, precedence_chain: list[Version]):
        """Every earlier version is lower than every later one."""
        for low, high in combinations(precedence_chain, 2):
            assert low < high
            assert high > low
            assert low <= high
            assert high >= low
            assert low != high

    def test_sorting_restores_chain(self, precedence_chain: list[Version]):
        assert sorted(reversed(precedence_chain)) == precedence_chain

    @pytest.mark.parametrize(
        ("low", "high"),
        [
            ("1.0.0", "2.0.0"),
            ("2.0.0", "2.1.0"),
            ("2.1.0", "2.1.1"),
            ("1.9.9", "1.10.0"),
            ("1.0.0-alpha", "1.0.0"),
            ("1.0.0-beta.2", "1.0.0-beta.11"),
            ("1.0.0-rc.1", "1.0.0"),
            ("1.0.0-rc.1", "1.0.1-alpha"),
        ],
    )
    def test_pairs(self, low: str, high: str):
        assert v(low) < v(high)
        assert compare(v(low), v(high)) == -1
        assert compare(v(high), v(low)) == 1

    def test_core_decides_before_prerelease(self):
        """A higher core wins even when both sides are pre-releases."""
        assert greater_than(v("2.0.0-alpha"), v("1.0.0-rc.9"))
        assert not greater_than(v("1.0.0-rc.9"), v("2.0.0-alpha"))


class TestEquality:
    """Equality ignores build metadata."""

    def test_build_ignored(self):
        a, b = v("1.0.0+build1"), v("1.0.0+build2")

        assert a == b
        assert equals(a, b)
        assert compare(a, b) == 0
        assert not a < b
        assert not a > b
        assert a <= b
        assert a >= b

    def test_hash_matches_equality(self):
        assert hash(v("1.0.0-rc.1+a")) == hash(v("1.0.0-rc.1+b"))
        assert len({v("1.0.0+a"), v("1.0.0+b"), v("1.0.0")}) == 1

    def test_prerelease_variant_matters(self):
        """A numeric identifier never equals a text one."""
        numeric = Version(1, 0, 0, pre=(NumericIdentifier(1),))
        text = Version(1, 0, 0, pre=(TextIdentifier("1a"),))
        assert numeric != text
        assert numeric < text

    def test_not_equal_to_other_types(self):
        assert Version(1, 0, 0) != "1.0.0"

    def test_ordering_against_other_types_raises(self):
        with pytest.raises(TypeError):
            Version(1, 0, 0) < "2.0.0"  # noqa: B015


class TestCompatOrdering:
    """Ordering.COMPAT reproduces the older asymmetric greater_than."""

    def test_different_cores_both_prerelease(self):
        """With pre-releases on both sides a different core is never greater."""
        high, low = v("2.0.0-rc.1"), v("1.0.0-rc.1")

        assert greater_than(high, low)
        assert not greater_than(high, low, Ordering.COMPAT)
        assert not greater_than(low, high, Ordering.COMPAT)

    def test_equal_cores_compare_prerelease(self):
        assert greater_than(v("1.0.0-rc.2"), v("1.0.0-rc.1"), Ordering.COMPAT)
        assert not greater_than(v("1.0.0-rc.1"), v("1.0.0-rc.2"), Ordering.COMPAT)

    def test_single_prerelease_uses_semver(self):
        """Only the both-pre-release case differs from SEMVER."""
        assert greater_than(v("2.0.0"), v("1.0.0-rc.1"), Ordering.COMPAT)
        assert greater_than(v("1.0.0"), v("1.0.0-rc.1"), Ordering.COMPAT)
        assert not greater_than(v("1.0.0-rc.1"), v("1.0.0"), Ordering.COMPAT)

    def test_compare_is_not_antisymmetric(self):
        """Neither side is greater, yet they are not equal."""
        a, b = v("2.0.0-rc.1"), v("1.0.0-rc.1")

        assert compare(a, b, Ordering.COMPAT) == -1
        assert compare(b, a, Ordering.COMPAT) == -1
        assert compare(a, a, Ordering.COMPAT) == 0

    def test_operators_ignore_compat(self):
        """Rich comparisons always use the SemVer order."""
        assert v("2.0.0-rc.1") > v("1.0.0-rc.1")

    def test_ordering_from_string(self):
        assert Ordering("compat") is Ordering.COMPAT
        assert str(Ordering.SEMVER) == "semver"

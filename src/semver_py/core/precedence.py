"""Version precedence.

Implements SemVer 2.0.0 ordering: the core triple is compared first,
a release outranks any of its pre-releases, and pre-release identifier
sequences are compared position by position. Build metadata never takes
part.

Two ordering modes exist. ``Ordering.SEMVER`` is the total order above.
``Ordering.COMPAT`` reproduces an older ``greater_than`` that, when both
sides carry a pre-release, only answers True for equal cores. It is not
a total order and is never used by the comparison operators.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any

from semver_py.core.identifiers import NumericIdentifier, TextIdentifier

if TYPE_CHECKING:
    from collections.abc import Sequence

    from semver_py.core.identifiers import Identifier
    from semver_py.core.version import Version


class Ordering(str, Enum):
    """How ``greater_than`` treats two pre-release versions."""

    SEMVER = "semver"
    COMPAT = "compat"

    def __str__(self) -> str:
        return self.value


def _sign(a: Any, b: Any) -> int:
    return (a > b) - (a < b)


def compare_identifiers(a: Identifier, b: Identifier) -> int:
    """Compare two identifiers, returning -1, 0 or 1.

    Numeric identifiers always have lower precedence than text ones.
    """
    match a, b:
        case NumericIdentifier(value=x), NumericIdentifier(value=y):
            return _sign(x, y)
        case TextIdentifier(value=x), TextIdentifier(value=y):
            return _sign(x, y)
        case NumericIdentifier(), TextIdentifier():
            return -1
        case TextIdentifier(), NumericIdentifier():
            return 1
    raise TypeError(f"Cannot compare identifiers {a!r} and {b!r}")


def compare_sequences(a: Sequence[Identifier], b: Sequence[Identifier]) -> int:
    """Compare two non-empty pre-release sequences position by position.

    When one sequence is a prefix of the other the longer one wins.
    """
    for left, right in zip(a, b):
        result = compare_identifiers(left, right)
        if result:
            return result
    return _sign(len(a), len(b))


def compare_pre(a: Sequence[Identifier], b: Sequence[Identifier]) -> int:
    """Compare pre-release sections where empty means a final release."""
    if not a and not b:
        return 0
    if not a:
        return 1
    if not b:
        return -1
    return compare_sequences(a, b)


def compare(a: Version, b: Version, ordering: Ordering = Ordering.SEMVER) -> int:
    """Return -1, 0 or 1 as ``a`` sorts before, with, or after ``b``.

    Under ``Ordering.COMPAT`` the result is derived from ``equals`` and
    ``greater_than`` alone, so two pre-releases with different cores
    always report -1.
    """
    if ordering is Ordering.COMPAT:
        if equals(a, b):
            return 0
        return 1 if greater_than(a, b, ordering) else -1
    return _sign(a.core, b.core) or compare_pre(a.pre, b.pre)


def equals(a: Version, b: Version) -> bool:
    """Equal cores and equal pre-release sequences; build is ignored."""
    return a.core == b.core and tuple(a.pre) == tuple(b.pre)


def greater_than(a: Version, b: Version, ordering: Ordering = Ordering.SEMVER) -> bool:
    """Return True when ``a`` has higher precedence than ``b``."""
    if ordering is Ordering.COMPAT and a.pre and b.pre:
        return a.core == b.core and compare_sequences(a.pre, b.pre) > 0
    return (_sign(a.core, b.core) or compare_pre(a.pre, b.pre)) > 0

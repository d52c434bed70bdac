"""Contract for range rules evaluated against versions.

Range syntax (``^1.2.3``, ``>=1.0.0 <2.0.0``) is parsed and evaluated
elsewhere. This module only describes what such a rule must provide and
offers the lookups a resolver needs on top of it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Iterable

    from semver_py.core.version import Version


@runtime_checkable
class RangeRule(Protocol):
    """Anything that can say whether a version falls inside it."""

    def is_satisfied_by(self, version: Version) -> bool: ...


def satisfies(version: Version, rule: RangeRule) -> bool:
    return rule.is_satisfied_by(version)


def filter_satisfying(versions: Iterable[Version], rule: RangeRule) -> list[Version]:
    """Return the versions accepted by ``rule``, in input order."""
    return [v for v in versions if rule.is_satisfied_by(v)]


def max_satisfying(versions: Iterable[Version], rule: RangeRule) -> Version | None:
    """Return the highest version accepted by ``rule``, or None."""
    return max(filter_satisfying(versions, rule), default=None)


def min_satisfying(versions: Iterable[Version], rule: RangeRule) -> Version | None:
    """Return the lowest version accepted by ``rule``, or None."""
    return min(filter_satisfying(versions, rule), default=None)

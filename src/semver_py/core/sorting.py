"""Helpers for picking and ordering several versions at once."""

from __future__ import annotations

from typing import TYPE_CHECKING

from semver_py.core.parser import coerce
from semver_py.core.precedence import Ordering

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from semver_py.core.version import Version

    VersionLike = Version | str | Sequence[int]


def max_version(*versions: VersionLike) -> Version:
    """Return the highest of the given versions.

    Raises:
        ValueError: If no versions are given
    """
    if not versions:
        raise ValueError("max_version() requires at least one version")
    return max(coerce(v) for v in versions)


def min_version(*versions: VersionLike) -> Version:
    """Return the lowest of the given versions.

    Raises:
        ValueError: If no versions are given
    """
    if not versions:
        raise ValueError("min_version() requires at least one version")
    return min(coerce(v) for v in versions)


def sort_versions(
    versions: Iterable[VersionLike],
    *,
    reverse: bool = False,
    ordering: Ordering = Ordering.SEMVER,
) -> list[Version]:
    """Sort versions by precedence.

    The sort is stable, so versions differing only in build metadata keep
    their input order.

    Raises:
        ValueError: If ``ordering`` is ``Ordering.COMPAT``, which is not a
            total order and would make the result depend on input order
    """
    if ordering is not Ordering.SEMVER:
        raise ValueError(f"sort_versions() needs a total order, got ordering={ordering}")
    return sorted((coerce(v) for v in versions), reverse=reverse)

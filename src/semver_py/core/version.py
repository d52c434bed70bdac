"""Semantic version value type.

``Version`` is an immutable MAJOR.MINOR.PATCH triple with optional
pre-release and build identifier sequences. Comparison operators follow
SemVer 2.0.0 precedence; build metadata is carried along but ignored by
equality, hashing and ordering.

Derived versions are always new values:

    >>> v = Version.parse("1.2.3-rc.1+build.7")
    >>> str(v.next_pre())
    '1.2.3-rc.2'
    >>> str(v.next_major())
    '2.0.0'
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import TYPE_CHECKING

from semver_py.core import precedence
from semver_py.core.identifiers import (
    NumericIdentifier,
    TextIdentifier,
    format_identifiers,
    next_identifiers,
    parse_identifiers,
)
from semver_py.core.precedence import Ordering

if TYPE_CHECKING:
    from collections.abc import Sequence

    from semver_py.core.identifiers import Identifier
    from semver_py.core.rules import RangeRule


class BumpType(str, Enum):
    """Kind of version increment."""

    MAJOR = "major"
    MINOR = "minor"
    PATCH = "patch"
    PRE = "pre"
    BUILD = "build"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, eq=False, repr=False)
class Version:
    """A semantic version.

    Attributes:
        major: Major version number
        minor: Minor version number
        patch: Patch version number
        pre: Pre-release identifiers, empty for a final release
        build: Build metadata identifiers, informational only
    """

    major: int
    minor: int = 0
    patch: int = 0
    pre: tuple[Identifier, ...] = field(default=())
    build: tuple[Identifier, ...] = field(default=())

    def __post_init__(self) -> None:
        for name in ("major", "minor", "patch"):
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool):
                raise TypeError(f"{name} must be an int, got {value!r}")
            if value < 0:
                raise ValueError(f"{name} must be non-negative, got {value}")
        # Accept lists from callers but store tuples so values stay hashable
        for name in ("pre", "build"):
            identifiers = tuple(getattr(self, name))
            for identifier in identifiers:
                if not isinstance(identifier, NumericIdentifier | TextIdentifier):
                    raise TypeError(f"{name} must hold identifiers, got {identifier!r}")
            object.__setattr__(self, name, identifiers)

    @classmethod
    def parse(cls, text: str) -> Version:
        """Parse a version string. See ``semver_py.core.parser.parse``."""
        from semver_py.core.parser import parse

        return parse(text)

    @classmethod
    def from_components(cls, values: Sequence[int]) -> Version:
        """Build a version from integers. See ``semver_py.core.parser.from_components``."""
        from semver_py.core.parser import from_components

        return from_components(values)

    # Properties

    @property
    def core(self) -> tuple[int, int, int]:
        return (self.major, self.minor, self.patch)

    @property
    def is_prerelease(self) -> bool:
        return bool(self.pre)

    @property
    def is_stable(self) -> bool:
        """True for 1.0.0 and later final releases."""
        return self.major >= 1 and not self.pre

    def to_tuple(self) -> tuple[int, int, int, str | None, str | None]:
        return (
            self.major,
            self.minor,
            self.patch,
            format_identifiers(self.pre) or None,
            format_identifiers(self.build) or None,
        )

    # Rendering

    def __str__(self) -> str:
        text = f"{self.major}.{self.minor}.{self.patch}"
        if self.pre:
            text += f"-{format_identifiers(self.pre)}"
        if self.build:
            text += f"+{format_identifiers(self.build)}"
        return text

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self)!r})"

    # Comparison

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return precedence.equals(self, other)

    def __hash__(self) -> int:
        return hash((self.core, self.pre))

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return precedence.greater_than(other, self)

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return not precedence.greater_than(self, other)

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return precedence.greater_than(self, other)

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return not precedence.greater_than(other, self)

    def compare(self, other: Version, ordering: Ordering = Ordering.SEMVER) -> int:
        """Return -1, 0 or 1. See ``semver_py.core.precedence.compare``."""
        return precedence.compare(self, other, ordering)

    def greater_than(self, other: Version, ordering: Ordering = Ordering.SEMVER) -> bool:
        return precedence.greater_than(self, other, ordering)

    def satisfies(self, rule: RangeRule) -> bool:
        """Check this version against an externally defined range rule."""
        return rule.is_satisfied_by(self)

    # Derived versions

    def next_major(self) -> Version:
        return Version(self.major + 1, 0, 0)

    def next_minor(self) -> Version:
        return Version(self.major, self.minor + 1, 0)

    def next_patch(self) -> Version:
        return Version(self.major, self.minor, self.patch + 1)

    def next_pre(self) -> Version:
        """Increment the last numeric pre-release identifier and drop build.

        Raises:
            NoNumericIdentifierError: If the pre-release has no numeric identifier
        """
        return replace(self, pre=next_identifiers(self.pre), build=())

    def next_build(self) -> Version:
        """Increment the last numeric build identifier.

        Raises:
            NoNumericIdentifierError: If the build metadata has no numeric identifier
        """
        return replace(self, build=next_identifiers(self.build))

    def start_pre(self, token: str = "rc") -> Version:
        """Move to the next pre-release.

        A final release becomes the first ``token`` pre-release of the next
        patch (``1.2.3`` -> ``1.2.4-rc.1``); a pre-release is incremented
        with ``next_pre``.
        """
        if self.pre:
            return self.next_pre()
        return self.next_patch().with_pre(f"{token}.1")

    def bump(self, bump_type: BumpType) -> Version:
        match bump_type:
            case BumpType.MAJOR:
                return self.next_major()
            case BumpType.MINOR:
                return self.next_minor()
            case BumpType.PATCH:
                return self.next_patch()
            case BumpType.PRE:
                return self.next_pre()
            case BumpType.BUILD:
                return self.next_build()
        raise ValueError(f"Unknown bump type: {bump_type!r}")

    def finalize(self) -> Version:
        """Drop pre-release and build metadata."""
        return Version(self.major, self.minor, self.patch)

    def with_major(self, major: int) -> Version:
        return replace(self, major=major)

    def with_minor(self, minor: int) -> Version:
        return replace(self, minor=minor)

    def with_patch(self, patch: int) -> Version:
        return replace(self, patch=patch)

    def with_pre(self, pre: str, build: str | None = None) -> Version:
        """Replace pre-release and build metadata.

        Both sections are re-parsed; unsupported characters are stripped.
        Omitting ``build`` clears it.
        """
        return replace(self, pre=parse_identifiers(pre), build=parse_identifiers(build))

    def with_build(self, build: str) -> Version:
        return replace(self, build=parse_identifiers(build))

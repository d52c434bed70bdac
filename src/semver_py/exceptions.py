"""Exception hierarchy for semver-py.

All errors raised by this package derive from SemverPyError so callers
can catch everything from the library with a single except clause.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

    from semver_py.core.identifiers import Identifier


class SemverPyError(Exception):
    """Base class for all semver-py errors."""


# Version errors


class VersionError(SemverPyError):
    """Base class for errors about version values."""


class VersionFormatError(VersionError, ValueError):
    """Raised when text does not match MAJOR.MINOR.PATCH[-PRE][+BUILD]."""

    def __init__(self, value: str, reason: str | None = None) -> None:
        self.value = value
        self.reason = reason
        message = f"Invalid semantic version: {value!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class NoNumericIdentifierError(VersionError):
    """Raised when a pre-release or build sequence has nothing to increment."""

    def __init__(self, identifiers: Sequence[Identifier]) -> None:
        self.identifiers = tuple(identifiers)
        rendered = ".".join(str(i) for i in self.identifiers) or "<empty>"
        super().__init__(f"No numeric identifier to increment in {rendered!r}")


# Configuration errors


class ConfigError(SemverPyError):
    """Base class for configuration errors."""


class ConfigValidationError(ConfigError):
    """Raised when configuration fails validation."""

"""semver-py: SemVer 2.0.0 version parsing, precedence and bumping."""

from __future__ import annotations

from semver_py.core import (
    BumpType,
    Identifier,
    NumericIdentifier,
    Ordering,
    RangeRule,
    TextIdentifier,
    Version,
    compare,
    from_components,
    is_valid,
    max_version,
    min_version,
    parse,
    satisfies,
    sort_versions,
)
from semver_py.exceptions import (
    NoNumericIdentifierError,
    SemverPyError,
    VersionError,
    VersionFormatError,
)

__version__ = "0.1.0"

__all__ = [
    "BumpType",
    "Identifier",
    "NoNumericIdentifierError",
    "NumericIdentifier",
    "Ordering",
    "RangeRule",
    "SemverPyError",
    "TextIdentifier",
    "Version",
    "VersionError",
    "VersionFormatError",
    "__version__",
    "compare",
    "from_components",
    "is_valid",
    "max_version",
    "min_version",
    "parse",
    "satisfies",
    "sort_versions",
]

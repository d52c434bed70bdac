"""Core version model for semver-py.

This module contains the fundamental building blocks:
- Identifier model for pre-release and build metadata
- Version parsing and rendering (SemVer 2.0.0 grammar)
- Precedence comparison
- Derived versions (bumps, pre-release and build replacement)
"""

from __future__ import annotations

from semver_py.core.identifiers import (
    Identifier,
    NumericIdentifier,
    TextIdentifier,
    next_identifiers,
    parse_identifiers,
)
from semver_py.core.parser import coerce, from_components, is_valid, parse
from semver_py.core.precedence import (
    Ordering,
    compare,
    compare_identifiers,
    compare_sequences,
    equals,
    greater_than,
)
from semver_py.core.rules import (
    RangeRule,
    filter_satisfying,
    max_satisfying,
    min_satisfying,
    satisfies,
)
from semver_py.core.sorting import max_version, min_version, sort_versions
from semver_py.core.version import BumpType, Version

__all__ = [
    # Version
    "BumpType",
    # Identifiers
    "Identifier",
    "NumericIdentifier",
    # Precedence
    "Ordering",
    # Rules
    "RangeRule",
    "TextIdentifier",
    "Version",
    "coerce",
    "compare",
    "compare_identifiers",
    "compare_sequences",
    "equals",
    "filter_satisfying",
    # Parsing
    "from_components",
    "greater_than",
    "is_valid",
    "max_satisfying",
    # Sorting
    "max_version",
    "min_satisfying",
    "min_version",
    "next_identifiers",
    "parse",
    "parse_identifiers",
    "satisfies",
    "sort_versions",
]

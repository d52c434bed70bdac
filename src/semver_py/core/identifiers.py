"""Pre-release and build identifiers.

A pre-release or build section is a dot-separated list of identifiers.
Each one is either numeric (compared as an integer) or text (compared
as ASCII). The two variants are frozen dataclasses joined in the
``Identifier`` union so every consumer can ``match`` on them.
"""

from __future__ import annotations

import string
from dataclasses import dataclass
from typing import TYPE_CHECKING, TypeAlias

from semver_py.exceptions import NoNumericIdentifierError

if TYPE_CHECKING:
    from collections.abc import Iterable

ALLOWED_CHARACTERS = frozenset(string.ascii_letters + string.digits + "-")


@dataclass(frozen=True, slots=True)
class NumericIdentifier:
    """Identifier made only of digits, e.g. the ``1`` in ``rc.1``."""

    value: int

    def __post_init__(self) -> None:
        if not isinstance(self.value, int) or isinstance(self.value, bool):
            raise TypeError(f"Numeric identifier must be an int, got {self.value!r}")
        if self.value < 0:
            raise ValueError(f"Numeric identifier must be non-negative, got {self.value}")

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True, slots=True)
class TextIdentifier:
    """Identifier containing at least one non-digit, e.g. ``alpha``."""

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise TypeError(f"Text identifier must be a str, got {self.value!r}")
        if not self.value or not ALLOWED_CHARACTERS.issuperset(self.value):
            raise ValueError(
                f"Text identifier must be a non-empty run of [0-9A-Za-z-], got {self.value!r}"
            )
        if self.value.isdigit():
            raise ValueError(f"Digits-only identifier {self.value!r} must be a NumericIdentifier")

    def __str__(self) -> str:
        return self.value


Identifier: TypeAlias = NumericIdentifier | TextIdentifier


def sanitize(segment: str) -> str:
    """Strip every character outside ``[0-9A-Za-z-]``."""
    return "".join(ch for ch in segment if ch in ALLOWED_CHARACTERS)


def classify(segment: str) -> Identifier:
    """Turn a sanitized, non-empty segment into an identifier."""
    if segment.isascii() and segment.isdigit():
        return NumericIdentifier(int(segment))
    return TextIdentifier(segment)


def parse_identifiers(text: str | None) -> tuple[Identifier, ...]:
    """Split a pre-release or build section into identifiers.

    Segments are sanitized before classification and empty segments are
    dropped, so ``"be!ta..1"`` becomes ``(TextIdentifier("beta"),
    NumericIdentifier(1))``. ``None`` and ``""`` give an empty tuple.
    """
    if not text:
        return ()
    identifiers: list[Identifier] = []
    for segment in text.split("."):
        cleaned = sanitize(segment)
        if cleaned:
            identifiers.append(classify(cleaned))
    return tuple(identifiers)


def format_identifiers(identifiers: Iterable[Identifier]) -> str:
    return ".".join(str(identifier) for identifier in identifiers)


def next_identifiers(identifiers: tuple[Identifier, ...]) -> tuple[Identifier, ...]:
    """Increment the last numeric identifier, leaving the rest untouched.

    Raises:
        NoNumericIdentifierError: If no identifier is numeric
    """
    for index in range(len(identifiers) - 1, -1, -1):
        match identifiers[index]:
            case NumericIdentifier(value=value):
                bumped = NumericIdentifier(value + 1)
                return (*identifiers[:index], bumped, *identifiers[index + 1 :])
            case TextIdentifier():
                continue
    raise NoNumericIdentifierError(identifiers)

"""Parsing of version text and integer components.

The grammar accepted by ``parse`` is::

    version  := number "." number "." number ["-" section] ["+" section]
    number   := DIGIT+
    section  := (ALNUM | "-" | ".")+

Letters are accepted in either case. Sections are split into identifiers
by ``parse_identifiers``, which silently strips unsupported characters
and drops empty segments.
"""

from __future__ import annotations

import logging
import string
from collections.abc import Sequence
from typing import NoReturn

from semver_py.core.identifiers import parse_identifiers
from semver_py.core.version import Version
from semver_py.exceptions import VersionFormatError

logger = logging.getLogger(__name__)

DIGITS = frozenset(string.digits)
SECTION_CHARACTERS = frozenset(string.ascii_letters + string.digits + "-.")


class _Scanner:
    """Cursor over the input text used by ``parse``."""

    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0

    def at_end(self) -> bool:
        return self.pos >= len(self.text)

    def peek(self) -> str:
        return "" if self.at_end() else self.text[self.pos]

    def accept(self, char: str) -> bool:
        if self.peek() == char:
            self.pos += 1
            return True
        return False

    def expect(self, char: str, what: str) -> None:
        if not self.accept(char):
            self.fail(f"expected '{char}' after {what}")

    def take_while(self, allowed: frozenset[str]) -> str:
        start = self.pos
        while not self.at_end() and self.text[self.pos] in allowed:
            self.pos += 1
        return self.text[start : self.pos]

    def number(self, name: str) -> int:
        digits = self.take_while(DIGITS)
        if not digits:
            self.fail(f"{name} must be a decimal number")
        return int(digits)

    def section(self, name: str) -> str:
        chars = self.take_while(SECTION_CHARACTERS)
        if not chars:
            self.fail(f"{name} must not be empty")
        return chars

    def fail(self, reason: str) -> NoReturn:
        logger.debug("Rejected version %r at offset %d: %s", self.text, self.pos, reason)
        raise VersionFormatError(self.text, f"{reason} at offset {self.pos}")


def parse(text: str) -> Version:
    """Parse ``MAJOR.MINOR.PATCH[-PRERELEASE][+BUILD]`` into a Version.

    Args:
        text: Version string, e.g. ``"1.2.3-rc.1+build.5"``

    Returns:
        Parsed Version

    Raises:
        VersionFormatError: If the text does not match the grammar
    """
    if not isinstance(text, str):
        raise TypeError(f"Expected str, got {type(text).__name__}")

    scanner = _Scanner(text)
    major = scanner.number("major")
    scanner.expect(".", "major")
    minor = scanner.number("minor")
    scanner.expect(".", "minor")
    patch = scanner.number("patch")

    pre = ""
    build = ""
    if scanner.accept("-"):
        pre = scanner.section("pre-release")
    if scanner.accept("+"):
        build = scanner.section("build metadata")
    if not scanner.at_end():
        scanner.fail(f"unexpected character {scanner.peek()!r}")

    return Version(
        major,
        minor,
        patch,
        pre=parse_identifiers(pre),
        build=parse_identifiers(build),
    )


def is_valid(text: str) -> bool:
    """Return True if ``text`` is a parseable version string."""
    try:
        parse(text)
    except (VersionFormatError, TypeError):
        return False
    return True


def from_components(values: Sequence[int]) -> Version:
    """Build a Version from up to three integers.

    Negative values are made positive, missing components are zero and
    extra components are ignored, so ``[-1, 2]`` gives ``1.2.0``.
    """
    parts = [abs(int(value)) for value in values[:3]]
    parts.extend([0] * (3 - len(parts)))
    major, minor, patch = parts
    return Version(major, minor, patch)


def coerce(value: Version | str | Sequence[int]) -> Version:
    """Accept a Version, a version string, or integer components."""
    if isinstance(value, Version):
        return value
    if isinstance(value, str):
        return parse(value)
    if isinstance(value, Sequence) and not isinstance(value, bytes | bytearray):
        return from_components(value)
    raise TypeError(f"Expected Version, str or sequence of int, got {type(value).__name__}")

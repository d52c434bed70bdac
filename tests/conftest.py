"""Shared fixtures for semver-py tests."""

from __future__ import annotations

import pytest

from semver_py.core.version import Version


@pytest.fixture
def precedence_chain() -> list[Version]:
    """Versions in strictly ascending SemVer precedence."""
    return [
        Version.parse(text)
        for text in (
            "1.0.0-alpha",
            "1.0.0-alpha.1",
            "1.0.0-alpha.beta",
            "1.0.0-beta",
            "1.0.0-beta.2",
            "1.0.0-beta.11",
            "1.0.0-rc.1",
            "1.0.0",
            "2.0.0",
            "2.1.0",
            "2.1.1",
        )
    ]


class StartsWithRule:
    """Minimal range rule: matches versions sharing a major number."""

    def __init__(self, major: int) -> None:
        self.major = major

    def is_satisfied_by(self, version: Version) -> bool:
        return version.major == self.major and not version.pre


@pytest.fixture
def major_one_rule() -> StartsWithRule:
    return StartsWithRule(1)

"""Configuration management for semver-py."""

from __future__ import annotations

from semver_py.config.models import SemverPyConfig

__all__ = [
    "SemverPyConfig",
]

"""Pydantic models for semver-py configuration.

Settings are plain values supplied by the caller, typically the
``[tool.semver-py]`` table their own tooling has already read:

    config = SemverPyConfig.from_mapping({"ordering": "compat", "pre_token": "beta"})
    config.greater_than(a, b)
    config.start_pre(version)

The library never reads files itself.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from semver_py.core import precedence
from semver_py.core.identifiers import sanitize
from semver_py.core.precedence import Ordering
from semver_py.exceptions import ConfigValidationError

if TYPE_CHECKING:
    from semver_py.core.version import Version


class SemverPyConfig(BaseModel):
    """Root configuration model."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    ordering: Ordering = Field(
        default=Ordering.SEMVER,
        description="Precedence mode used by compare and greater_than",
    )
    pre_token: str = Field(
        default="rc",
        description="Identifier used when starting a new pre-release",
    )

    @field_validator("pre_token")
    @classmethod
    def _validate_pre_token(cls, value: str) -> str:
        if not value or sanitize(value) != value or value.isdigit():
            raise ValueError("pre_token must be a non-numeric run of [0-9A-Za-z-]")
        return value

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> SemverPyConfig:
        """Validate a settings table.

        Raises:
            ConfigValidationError: If the table has unknown keys or bad values
        """
        try:
            return cls.model_validate(dict(data))
        except ValidationError as e:
            raise ConfigValidationError(f"Invalid semver-py settings:\n{e}") from e

    def compare(self, a: Version, b: Version) -> int:
        return precedence.compare(a, b, self.ordering)

    def greater_than(self, a: Version, b: Version) -> bool:
        return precedence.greater_than(a, b, self.ordering)

    def start_pre(self, version: Version) -> Version:
        """``Version.start_pre`` with the configured token."""
        return version.start_pre(self.pre_token)

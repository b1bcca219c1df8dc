"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults live here, ``elapsed.toml`` only carries
overrides.  An empty (or missing) file is a valid configuration.
"""

from __future__ import annotations

from pydantic import BaseModel, field_validator

from elapsed.domain.formats import FormatMode


class SinceConfig(BaseModel):
    """[since] section."""

    model_config = {"frozen": True}

    format: FormatMode = FormatMode.DEFAULT
    utc_today: bool = True

    @field_validator("format", mode="before")
    @classmethod
    def _accept_aliases(cls, value: object) -> object:
        if isinstance(value, str):
            return FormatMode.parse(value)
        return value

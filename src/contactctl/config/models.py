"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, contactctl.toml only contains
overrides. An empty file (or none at all) reproduces the reference bounds.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, model_validator

from contactctl.domain.predicates import Predicate, in_between

# --- contactctl.toml sections ---


class LengthBounds(BaseModel):
    """Inclusive length bounds for one name field."""

    model_config = {"frozen": True}

    min_length: int = Field(default=1, ge=0)
    max_length: int = Field(default=10, ge=0)

    @model_validator(mode="after")
    def _check_order(self) -> LengthBounds:
        if self.min_length > self.max_length:
            msg = f"min_length ({self.min_length}) exceeds max_length ({self.max_length})"
            raise ValueError(msg)
        return self

    def predicate(self) -> Predicate:
        return in_between(self.min_length, self.max_length)


class LastNameBounds(LengthBounds):
    """Bounds for the last name, which allows longer text by default."""

    max_length: int = Field(default=15, ge=0)


class NamesConfig(BaseModel):
    """[names] section with one sub-table per name field."""

    model_config = {"frozen": True}

    first: LengthBounds = Field(default_factory=LengthBounds)
    middle: LengthBounds = Field(default_factory=LengthBounds)
    last: LastNameBounds = Field(default_factory=LastNameBounds)


class EmailConfig(BaseModel):
    """[email] section."""

    model_config = {"frozen": True}

    predicate: Literal["format", "non_empty"] = "format"


class VerificationConfig(BaseModel):
    """[verification] section."""

    model_config = {"frozen": True}

    check: Literal["non_empty", "reject_all"] = "non_empty"
    failure_reason: str = "Test implementation"

"""Email variants — a closed union discriminated by ``state``.

Every email built from user input starts as :class:`UnverifiedEmail`.
:class:`VerifiedEmail` is terminal and is produced only by
:func:`contactctl.domain.lifecycle.verify_email`.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Annotated, Literal

from pydantic import BaseModel, Field

from contactctl.domain.fields import field_of


class EmailState(StrEnum):
    """The ``state`` tag of each email variant."""

    UNVERIFIED = "unverified"
    VERIFIED = "verified"


class UnverifiedEmail(BaseModel):
    """An address that passed the format predicate but has not been verified."""

    model_config = {"frozen": True}

    state: Literal[EmailState.UNVERIFIED] = EmailState.UNVERIFIED
    address: str

    @classmethod
    def of(cls, address: str) -> UnverifiedEmail:
        return cls(address=address)

    def __str__(self) -> str:
        return f"Unverified:[{self.address}]"


class VerifiedEmail(BaseModel):
    """An address that passed a verification check."""

    model_config = {"frozen": True}

    state: Literal[EmailState.VERIFIED] = EmailState.VERIFIED
    address: str

    def __str__(self) -> str:
        return f"Verified:[{self.address}]"


Email = Annotated[UnverifiedEmail | VerifiedEmail, Field(discriminator="state")]

email_of = field_of(UnverifiedEmail.of)

"""Domain error values.

These are returned inside :class:`~contactctl.domain.result.Err`, never raised.
Each carries a stable ``code`` so outer layers can map it to a distinct
user-facing message.
"""

from __future__ import annotations

from typing import ClassVar

from pydantic import BaseModel


class ContactInitFailed(BaseModel):
    """One or more required fields failed validation.

    Carries the original raw inputs for diagnostics.
    """

    model_config = {"frozen": True}

    code: ClassVar[str] = "CONTACT_INIT_FAILED"

    first_name: str
    last_name: str
    middle_name: str | None = None
    email: str

    @property
    def message(self) -> str:
        middle = f"middle-name: {self.middle_name}, " if self.middle_name is not None else ""
        return (
            "Contact initialization failed: "
            f"first-name: {self.first_name}, last-name: {self.last_name}, "
            f"{middle}email: {self.email}"
        )

    def __str__(self) -> str:
        return self.message


class EmailVerificationFailed(BaseModel):
    """The verification check rejected an unverified email."""

    model_config = {"frozen": True}

    code: ClassVar[str] = "EMAIL_VERIFICATION_FAILED"

    reason: str

    @property
    def message(self) -> str:
        return f"Email verification failed: {self.reason}"

    def __str__(self) -> str:
        return self.message


class EmailAlreadyVerified(BaseModel):
    """A verification was attempted on an already verified email."""

    model_config = {"frozen": True}

    code: ClassVar[str] = "EMAIL_ALREADY_VERIFIED"

    address: str

    @property
    def message(self) -> str:
        return f"Email already verified: {self.address}"

    def __str__(self) -> str:
        return self.message


type VerificationError = EmailVerificationFailed | EmailAlreadyVerified
type ContactError = ContactInitFailed | EmailVerificationFailed | EmailAlreadyVerified

"""Email verification lifecycle and contact verification.

Lifecycle:
- ``unverified`` is the initial state of every email built from input.
- ``verified`` is terminal. Verifying it again is an error, not a no-op.

The transition is enforced by the Email union itself: only
:func:`verify_email` turns an :class:`UnverifiedEmail` into a
:class:`VerifiedEmail`.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import assert_never

from contactctl.domain.checks import STUB_FAILURE_REASON, VerificationCheck
from contactctl.domain.contact import Contact, RawContact
from contactctl.domain.email import Email, UnverifiedEmail, VerifiedEmail
from contactctl.domain.errors import (
    ContactError,
    ContactInitFailed,
    EmailAlreadyVerified,
    EmailVerificationFailed,
    VerificationError,
)
from contactctl.domain.result import Err, Ok, Result, from_optional


def verify_email(
    check: VerificationCheck,
    email: Email,
    *,
    reason: str = STUB_FAILURE_REASON,
) -> Result[VerifiedEmail, VerificationError]:
    """Advance *email* to the verified state.

    Args:
        check: Predicate consulted only for unverified emails.
        email: The email to verify. Never mutated.
        reason: Failure reason reported when *check* rejects the email.
    """
    match email:
        case UnverifiedEmail():
            if check(email):
                return Ok(VerifiedEmail(address=email.address))
            return Err(EmailVerificationFailed(reason=reason))
        case VerifiedEmail():
            return Err(EmailAlreadyVerified(address=email.address))
        case _:
            assert_never(email)


def require_contact(
    contact: Contact | None,
    raw: RawContact,
) -> Result[Contact, ContactInitFailed]:
    """Lift an absent contact into :class:`ContactInitFailed` carrying *raw*."""
    return from_optional(
        contact,
        lambda: ContactInitFailed(
            first_name=raw.first_name,
            last_name=raw.last_name,
            middle_name=raw.middle_name,
            email=raw.email,
        ),
    )


def verify_contact(
    check: VerificationCheck,
    *,
    reason: str = STUB_FAILURE_REASON,
) -> Callable[[Contact], Result[Contact, VerificationError]]:
    """Build ``contact -> Result`` that verifies the contact's email.

    On success the returned contact is a copy with only the email replaced;
    the input contact stays valid. Lifecycle errors pass through unwrapped.
    """

    def _verify(contact: Contact) -> Result[Contact, VerificationError]:
        return verify_email(check, contact.email, reason=reason).map(
            lambda verified: contact.model_copy(update={"email": verified})
        )

    return _verify


def verify_entity(
    check: VerificationCheck,
    raw: RawContact,
    *,
    reason: str = STUB_FAILURE_REASON,
) -> Callable[[Contact | None], Result[Contact, ContactError]]:
    """Build ``contact-or-absent -> Result``: require the contact, then verify it."""

    def _run(contact: Contact | None) -> Result[Contact, ContactError]:
        return require_contact(contact, raw).and_then(verify_contact(check, reason=reason))

    return _run

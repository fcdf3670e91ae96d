"""Verification checks — swappable ``UnverifiedEmail -> bool`` callables.

Only stubs live here. A real check (e.g. a mail-confirmation round trip)
belongs outside the domain layer and can be passed in wherever a
:data:`VerificationCheck` is accepted.
"""

from __future__ import annotations

from collections.abc import Callable

from contactctl.domain.email import UnverifiedEmail

type VerificationCheck = Callable[[UnverifiedEmail], bool]

STUB_FAILURE_REASON = "Test implementation"


def non_empty_check(email: UnverifiedEmail) -> bool:
    """Stub check: any non-empty address verifies."""
    return email.address != ""


def reject_all_check(email: UnverifiedEmail) -> bool:
    """Stub check: nothing verifies."""
    return False


VERIFICATION_CHECKS: dict[str, VerificationCheck] = {
    "non_empty": non_empty_check,
    "reject_all": reject_all_check,
}

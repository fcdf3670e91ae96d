"""ContactService — validate, assemble, and verify contacts from raw input.

Pipeline:
1. Validate each raw field with its configured predicate (independently).
2. Assemble: with-middle-name arity when a middle name was given,
   without-middle-name arity otherwise.
3. (verify only) Lift an absent contact into ``CONTACT_INIT_FAILED``,
   then run the email lifecycle transition.
4. Map the outcome onto a ServiceResult.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import structlog

from contactctl.domain.checks import VERIFICATION_CHECKS, VerificationCheck
from contactctl.domain.contact import (
    Contact,
    RawContact,
    assemble,
    assemble_without_middle_name,
)
from contactctl.domain.email import email_of
from contactctl.domain.errors import ContactError, ContactInitFailed
from contactctl.domain.fields import first_name_of, last_name_of, middle_name_of
from contactctl.domain.lifecycle import require_contact, verify_entity
from contactctl.domain.predicates import Predicate, non_empty, should_be_email
from contactctl.domain.result import Err, Ok
from contactctl.services.base import BaseService
from contactctl.services.contracts import ContactData, InitFailedDetail, dump_validated
from contactctl.services.result import ServiceResult

if TYPE_CHECKING:
    from contactctl.config.settings import ContactSettings

logger = logging.getLogger(__name__)

EMAIL_PREDICATES: dict[str, Predicate] = {
    "format": should_be_email,
    "non_empty": non_empty,
}


class ContactService(BaseService):
    """Runs the contact pipeline with predicates and checks from settings.

    Args:
        settings: Resolved settings supplying bounds, email predicate and check.
        check: Optional verification check overriding the configured one,
            e.g. a real mail-confirmation call.
    """

    def __init__(
        self,
        settings: ContactSettings,
        *,
        check: VerificationCheck | None = None,
    ) -> None:
        super().__init__(settings)
        self._check = check or VERIFICATION_CHECKS[settings.verification.check]

    def assemble(
        self,
        first_name: str,
        last_name: str,
        email: str,
        *,
        middle_name: str | None = None,
    ) -> ServiceResult:
        """Validate and assemble a contact without verifying it."""
        op = "assemble_contact"
        raw = RawContact(
            first_name=first_name,
            last_name=last_name,
            middle_name=middle_name,
            email=email,
        )
        with structlog.contextvars.bound_contextvars(op=op):
            contact, invalid = self._build(raw)
            match require_contact(contact, raw):
                case Ok(value=assembled):
                    logger.debug("Assembled contact %s", assembled.full_name)
                    return self._success(op, assembled)
                case Err(error=error):
                    return self._failure(op, error, invalid)

    def verify(
        self,
        first_name: str,
        last_name: str,
        email: str,
        *,
        middle_name: str | None = None,
    ) -> ServiceResult:
        """Validate, assemble, and verify a contact's email."""
        op = "verify_contact"
        raw = RawContact(
            first_name=first_name,
            last_name=last_name,
            middle_name=middle_name,
            email=email,
        )
        run = verify_entity(
            self._check,
            raw,
            reason=self._settings.verification.failure_reason,
        )
        with structlog.contextvars.bound_contextvars(op=op):
            contact, invalid = self._build(raw)
            match run(contact):
                case Ok(value=verified):
                    logger.debug("Verified contact email %s", verified.email.address)
                    return self._success(op, verified)
                case Err(error=error):
                    return self._failure(op, error, invalid)

    # ── Helpers ───────────────────────────────────────────────────────

    def _build(self, raw: RawContact) -> tuple[Contact | None, list[str]]:
        """Validate every field, then assemble. Returns the contact and rejected field names."""
        names = self._settings.names
        first = first_name_of(names.first.predicate())(raw.first_name)
        last = last_name_of(names.last.predicate())(raw.last_name)
        address = email_of(EMAIL_PREDICATES[self._settings.email.predicate])(raw.email)

        checked: dict[str, object] = {"first_name": first, "last_name": last, "email": address}
        if raw.middle_name is None:
            contact = assemble_without_middle_name(first, last, address)
        else:
            middle = middle_name_of(names.middle.predicate())(raw.middle_name)
            checked["middle_name"] = middle
            contact = assemble(first, last, middle, address)

        invalid = [name for name, value in checked.items() if value is None]
        if invalid:
            logger.info("Rejected contact fields: %s", ", ".join(invalid))
        return contact, invalid

    def _meta(self) -> dict[str, Any]:
        return {
            "email_predicate": self._settings.email.predicate,
            "check": getattr(self._check, "__name__", repr(self._check)),
        }

    def _success(self, op: str, contact: Contact) -> ServiceResult:
        data = dump_validated(
            ContactData,
            {
                "first_name": contact.first_name.text,
                "middle_name": contact.middle_name.text if contact.middle_name else None,
                "last_name": contact.last_name.text,
                "full_name": contact.full_name,
                "email": contact.email.address,
                "email_state": contact.email.state,
            },
        )
        return ServiceResult(ok=True, op=op, data=data, meta=self._meta())

    def _failure(self, op: str, error: ContactError, invalid: list[str]) -> ServiceResult:
        logger.info("%s failed: %s", op, error.message)
        detail: dict[str, Any]
        if isinstance(error, ContactInitFailed):
            detail = dump_validated(
                InitFailedDetail,
                {**error.model_dump(), "invalid_fields": invalid},
            )
        else:
            detail = error.model_dump()
        return ServiceResult.failure(
            op,
            error.code,
            error.message,
            detail=detail,
            meta=self._meta(),
        )

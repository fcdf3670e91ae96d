"""Contact entity and the all-or-nothing assembler.

Fields are validated independently of one another; assembly then makes a
single check that every required field is present. A contact therefore
exists only when all of its required fields validated.

Two assembler arities are exposed: with and without a middle name.
Passing an absent middle name to the with-middle-name arity yields an
absent contact, it does not fall back to the other arity.
"""

from __future__ import annotations

from pydantic import BaseModel

from contactctl.domain.email import Email
from contactctl.domain.fields import FirstName, LastName, MiddleName


class Contact(BaseModel):
    """A well-formed contact."""

    model_config = {"frozen": True}

    first_name: FirstName
    middle_name: MiddleName | None = None
    last_name: LastName
    email: Email

    @property
    def full_name(self) -> str:
        parts = [self.first_name.text]
        if self.middle_name is not None:
            parts.append(self.middle_name.text)
        parts.append(self.last_name.text)
        return " ".join(parts)


class RawContact(BaseModel):
    """Raw, unvalidated contact input kept for diagnostics."""

    model_config = {"frozen": True}

    first_name: str
    last_name: str
    middle_name: str | None = None
    email: str


def contact_with_middle_name_of(
    first_name: FirstName,
    last_name: LastName,
    middle_name: MiddleName,
    email: Email,
) -> Contact:
    return Contact(
        first_name=first_name,
        middle_name=middle_name,
        last_name=last_name,
        email=email,
    )


def contact_without_middle_name_of(
    first_name: FirstName,
    last_name: LastName,
    email: Email,
) -> Contact:
    return Contact(first_name=first_name, last_name=last_name, email=email)


def assemble(
    first_name: FirstName | None,
    last_name: LastName | None,
    middle_name: MiddleName | None,
    email: Email | None,
) -> Contact | None:
    """Combine four present-or-absent fields into a present-or-absent contact.

    Returns None if ANY input is absent, including the middle name.
    """
    if first_name is None or last_name is None or middle_name is None or email is None:
        return None
    return contact_with_middle_name_of(first_name, last_name, middle_name, email)


def assemble_without_middle_name(
    first_name: FirstName | None,
    last_name: LastName | None,
    email: Email | None,
) -> Contact | None:
    """Combine three present-or-absent fields into a contact with no middle name."""
    if first_name is None or last_name is None or email is None:
        return None
    return contact_without_middle_name_of(first_name, last_name, email)

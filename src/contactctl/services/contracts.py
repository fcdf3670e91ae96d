"""Typed payload contracts for service results.

These models validate payload shapes before they leave the service layer
so renderer and JSON consumers can rely on the keys.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel

from contactctl.domain.email import EmailState


def dump_validated[T: BaseModel](model_cls: type[T], data: dict[str, Any]) -> dict[str, Any]:
    """Validate *data* against *model_cls* and return a normalized payload dict."""
    model = model_cls.model_validate(data)
    return model.model_dump(mode="python")


class ContactData(BaseModel):
    """Payload contract for ``assemble_contact`` and ``verify_contact``."""

    first_name: str
    middle_name: str | None = None
    last_name: str
    full_name: str
    email: str
    email_state: EmailState


class InitFailedDetail(BaseModel):
    """Error detail contract for ``CONTACT_INIT_FAILED``."""

    first_name: str
    last_name: str
    middle_name: str | None = None
    email: str
    invalid_fields: list[str]

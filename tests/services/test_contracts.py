"""Tests for service payload contracts."""

import pytest
from pydantic import ValidationError

from contactctl.services.contracts import ContactData, InitFailedDetail, dump_validated


class TestContactData:
    def test_valid_payload(self) -> None:
        data = dump_validated(
            ContactData,
            {
                "first_name": "Richard",
                "last_name": "Chuo",
                "full_name": "Richard Chuo",
                "email": "test@example.com",
                "email_state": "verified",
            },
        )
        assert data["middle_name"] is None
        assert data["email_state"] == "verified"

    def test_unknown_state_rejected(self) -> None:
        with pytest.raises(ValidationError):
            dump_validated(
                ContactData,
                {
                    "first_name": "R",
                    "last_name": "C",
                    "full_name": "R C",
                    "email": "x",
                    "email_state": "pending",
                },
            )


class TestInitFailedDetail:
    def test_requires_invalid_fields(self) -> None:
        with pytest.raises(ValidationError):
            dump_validated(InitFailedDetail, {"first_name": "R", "last_name": "", "email": "x"})

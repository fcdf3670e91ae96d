"""Tests for the email variants."""

import pytest
from pydantic import TypeAdapter

from contactctl.domain.email import Email, EmailState, UnverifiedEmail, VerifiedEmail


class TestEmailVariants:
    def test_unverified_str(self) -> None:
        assert str(UnverifiedEmail(address="a@b.c")) == "Unverified:[a@b.c]"

    def test_verified_str(self) -> None:
        assert str(VerifiedEmail(address="a@b.c")) == "Verified:[a@b.c]"

    def test_state_tags(self) -> None:
        assert UnverifiedEmail(address="a@b.c").state is EmailState.UNVERIFIED
        assert VerifiedEmail(address="a@b.c").state is EmailState.VERIFIED
        assert {s.value for s in EmailState} == {"unverified", "verified"}

    def test_state_serializes_as_plain_string(self) -> None:
        assert VerifiedEmail(address="a@b.c").model_dump(mode="json")["state"] == "verified"

    def test_variants_not_equal(self) -> None:
        assert UnverifiedEmail(address="a@b.c") != VerifiedEmail(address="a@b.c")

    def test_frozen(self) -> None:
        email = UnverifiedEmail(address="a@b.c")
        with pytest.raises(Exception):
            email.address = "x@y.z"  # type: ignore[misc]


class TestDiscriminatedUnion:
    def test_dispatch_on_state(self) -> None:
        adapter = TypeAdapter(Email)
        email = adapter.validate_python({"state": "unverified", "address": "a@b.c"})
        assert isinstance(email, UnverifiedEmail)

    def test_unknown_state_rejected(self) -> None:
        adapter = TypeAdapter(Email)
        with pytest.raises(Exception):
            adapter.validate_python({"state": "bounced", "address": "a@b.c"})

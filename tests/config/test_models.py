"""Tests for configuration section models."""

import pytest
from pydantic import ValidationError

from contactctl.config.models import (
    EmailConfig,
    LengthBounds,
    NamesConfig,
    VerificationConfig,
)


class TestDefaults:
    def test_name_bounds(self) -> None:
        names = NamesConfig()
        assert (names.first.min_length, names.first.max_length) == (1, 10)
        assert (names.middle.min_length, names.middle.max_length) == (1, 10)
        assert (names.last.min_length, names.last.max_length) == (1, 15)

    def test_email_and_verification(self) -> None:
        assert EmailConfig().predicate == "format"
        assert VerificationConfig().check == "non_empty"
        assert VerificationConfig().failure_reason == "Test implementation"

    def test_partial_last_name_override_keeps_its_max(self) -> None:
        names = NamesConfig.model_validate({"last": {"min_length": 2}})
        assert (names.last.min_length, names.last.max_length) == (2, 15)

    def test_partial_first_name_override_keeps_its_max(self) -> None:
        names = NamesConfig.model_validate({"first": {"min_length": 2}})
        assert names.first.max_length == 10
        assert names.last.max_length == 15


class TestLengthBounds:
    def test_predicate_uses_bounds(self) -> None:
        pred = LengthBounds(min_length=2, max_length=3).predicate()
        assert not pred("a")
        assert pred("ab")
        assert not pred("abcd")

    def test_inverted_bounds_rejected(self) -> None:
        with pytest.raises(ValidationError):
            LengthBounds(min_length=5, max_length=2)

    def test_negative_rejected(self) -> None:
        with pytest.raises(ValidationError):
            LengthBounds(min_length=-1)


class TestLiterals:
    def test_unknown_email_predicate_rejected(self) -> None:
        with pytest.raises(ValidationError):
            EmailConfig(predicate="strict")  # type: ignore[arg-type]

    def test_unknown_check_rejected(self) -> None:
        with pytest.raises(ValidationError):
            VerificationConfig(check="smtp")  # type: ignore[arg-type]

"""Tests for string predicates."""

import pytest

from contactctl.domain.predicates import in_between, non_empty, should_be_email


class TestInBetween:
    @pytest.mark.parametrize("text", ["a", "abcde", "abcdefghij"])
    def test_accepts_within_bounds(self, text: str) -> None:
        assert in_between(1, 10)(text)

    @pytest.mark.parametrize("text", ["", "abcdefghijk"])
    def test_rejects_outside_bounds(self, text: str) -> None:
        assert not in_between(1, 10)(text)

    def test_zero_minimum_accepts_empty(self) -> None:
        assert in_between(0, 3)("")

    def test_inverted_bounds_rejected(self) -> None:
        with pytest.raises(ValueError, match="exceeds"):
            in_between(5, 1)


class TestNonEmpty:
    def test_empty(self) -> None:
        assert not non_empty("")

    def test_whitespace_counts(self) -> None:
        assert non_empty(" ")


class TestShouldBeEmail:
    @pytest.mark.parametrize("text", ["test@example.com", "a.b+c@mail.example.org"])
    def test_valid(self, text: str) -> None:
        assert should_be_email(text)

    @pytest.mark.parametrize("text", ["", "test", "test@", "@example.com", "a b@c.d", "a@b"])
    def test_invalid(self, text: str) -> None:
        assert not should_be_email(text)

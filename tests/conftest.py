"""Shared pytest fixtures for contactctl tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

from contactctl.config.settings import ContactSettings
from contactctl.domain.contact import Contact
from contactctl.domain.email import UnverifiedEmail
from contactctl.domain.fields import FirstName, LastName, MiddleName


@pytest.fixture(autouse=True)
def _isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep config discovery away from any contactctl.toml or env outside the test."""
    monkeypatch.delenv("CONTACTCTL_CONFIG", raising=False)
    for name in (
        "CONTACTCTL_JSON_OUTPUT",
        "CONTACTCTL_QUIET",
        "CONTACTCTL_VERBOSE",
        "CONTACTCTL_LOG_JSON",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def settings(tmp_path: Path) -> ContactSettings:
    """Default settings with no TOML file."""
    return ContactSettings.from_cli(start=tmp_path)


@pytest.fixture
def contact() -> Contact:
    """The reference contact with an unverified email."""
    return Contact(
        first_name=FirstName(text="Richard"),
        middle_name=MiddleName(text="Andrew"),
        last_name=LastName(text="Chuo"),
        email=UnverifiedEmail(address="test@example.com"),
    )

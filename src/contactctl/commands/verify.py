"""Command: assemble a contact and verify its email."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from contactctl.commands._base import ContactCommand
from contactctl.domain.checks import VERIFICATION_CHECKS

if TYPE_CHECKING:
    from contactctl.commands._context import AppContext


@click.command(
    cls=ContactCommand,
    examples="""\
  contactctl verify Richard Chuo test@example.com --middle Andrew
  contactctl verify Richard Chuo test@example.com --check reject_all
  contactctl --json verify Richard "" test@example.com""",
)
@click.argument("first_name")
@click.argument("last_name")
@click.argument("email")
@click.option("--middle", "middle_name", default=None, help="Middle name (validated when given).")
@click.option(
    "--check",
    "check_name",
    type=click.Choice(sorted(VERIFICATION_CHECKS)),
    default=None,
    help="Verification check to run (overrides [verification] check).",
)
@click.pass_obj
def verify(
    app: AppContext,
    first_name: str,
    last_name: str,
    email: str,
    middle_name: str | None,
    check_name: str | None,
) -> None:
    """Assemble a contact from FIRST_NAME, LAST_NAME and EMAIL, then verify the email."""
    from contactctl.services.contact import ContactService

    check = VERIFICATION_CHECKS[check_name] if check_name else None
    result = ContactService(app.settings, check=check).verify(
        first_name, last_name, email, middle_name=middle_name
    )
    app.emit(result)

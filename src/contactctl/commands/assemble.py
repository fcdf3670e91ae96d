"""Command: validate raw fields and assemble a contact."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from contactctl.commands._base import ContactCommand

if TYPE_CHECKING:
    from contactctl.commands._context import AppContext


@click.command(
    cls=ContactCommand,
    examples="""\
  contactctl assemble Richard Chuo test@example.com
  contactctl assemble Richard Chuo test@example.com --middle Andrew
  contactctl --json assemble Richard Chuo test@example.com""",
)
@click.argument("first_name")
@click.argument("last_name")
@click.argument("email")
@click.option("--middle", "middle_name", default=None, help="Middle name (validated when given).")
@click.pass_obj
def assemble(
    app: AppContext,
    first_name: str,
    last_name: str,
    email: str,
    middle_name: str | None,
) -> None:
    """Validate FIRST_NAME, LAST_NAME and EMAIL and assemble a contact."""
    from contactctl.services.contact import ContactService

    result = ContactService(app.settings).assemble(
        first_name, last_name, email, middle_name=middle_name
    )
    app.emit(result)

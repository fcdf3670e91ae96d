"""Subcommand modules for contactctl.

Provides register_commands() which uses deferred imports to keep
``contactctl --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from contactctl.commands.assemble import assemble
    from contactctl.commands.verify import verify

    cli.add_command(assemble)
    cli.add_command(verify)

"""Rich Console factory and theme for contactctl output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract. In non-TTY environments
(tests, pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

from contactctl.domain.email import EmailState

CONTACT_THEME = Theme(
    {
        "contact.ok": "bold green",
        "contact.error": "bold red",
        "contact.warning": "bold yellow",
        "contact.op": "bold cyan",
        "contact.key": "dim",
        "contact.name": "bold",
        "contact.email.unverified": "yellow",
        "contact.email.verified": "green",
    }
)

_EMAIL_STYLES: dict[str, str] = {
    EmailState.UNVERIFIED: "contact.email.unverified",
    EmailState.VERIFIED: "contact.email.verified",
}


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes (used in tests).
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=CONTACT_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 100,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_email_state(state: str) -> str:
    """Return the Rich style name for an email lifecycle state."""
    return _EMAIL_STYLES.get(state, "")

"""Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO). The caller
extracts the rendered text via ``get_output(console)``.

Successful results carry contact data and render as a panel; failures
render as a single error line.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.panel import Panel
from rich.text import Text

from contactctl.output.console import create_console, get_output, style_for_email_state

if TYPE_CHECKING:
    from rich.console import Console

    from contactctl.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        _render_contact(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    label = Text("OK", style="contact.ok")
    op = Text(f"  {result.op}", style="contact.op")
    console.print(label, op)


def _render_meta(console: Console, result: ServiceResult) -> None:
    if not result.meta:
        return
    console.print(Text("  meta:", style="dim"))
    for k, v in result.meta.items():
        console.print(f"    {k}: {v}", markup=False)


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="contact.error")
    op = Text(f"  {result.op}", style="contact.op")
    console.print(label, op, Text(" — "), Text(msg), sep="", soft_wrap=True)

    if verbose and err:
        console.print(Text(f"  code: {err.code}", style="dim"))
    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {v}", markup=False)


# ── Contact renderer ──────────────────────────────────────────────────


def _render_contact(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render assemble/verify results as a panel."""
    _status_line(console, result)
    d = result.data
    state = str(d.get("email_state", ""))

    body = Text()
    for key in ("first_name", "middle_name", "last_name"):
        val = d.get(key)
        if val is not None:
            body.append(f"{key.replace('_', ' ')}: ", style="contact.key")
            body.append(f"{val}\n", style="contact.name")
    body.append("email: ", style="contact.key")
    body.append(f"{d.get('email', '')} ({state})", style=style_for_email_state(state))

    console.print(Panel(body, title=str(d.get("full_name", "")), expand=False))
    if verbose:
        _render_meta(console, result)


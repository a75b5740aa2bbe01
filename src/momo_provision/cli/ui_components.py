"""CLI UI components (Rich).

Keeps visual details out of the command functions so `register-id` and
`doctor` share the same panels and tables.
"""

from __future__ import annotations

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from momo_provision.core.domain.models import RegisterIdResult, RunState


def print_banner(console: Console) -> None:
    """Print the welcome banner (skipped in non-interactive runs)."""

    title = Text("MoMo Provision", style="bold cyan")
    subtitle = Text("Sandbox API user registration", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_checks_table(title: str) -> Table:
    table = Table(title=title)
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")
    return table


_STATE_STYLES = {
    RunState.COMPLETED: ("Registered", "green"),
    RunState.REGISTRATION_FAILED: ("Registration failed", "red"),
    RunState.ABORTED: ("Aborted", "yellow"),
}


def build_result_panel(result: RegisterIdResult) -> Panel:
    """Summary panel shown at the end of `register-id`."""

    label, style = _STATE_STYLES[result.state]
    body = Text()
    if result.product:
        body.append(f"Product: {result.product.label()}\n")
    if result.client_id:
        body.append(f"Client ID: {result.client_id}\n")
    if result.callback_uri is not None:
        body.append(f"Callback URI: {result.callback_uri or '(empty)'}\n")
    for name, value in result.written.items():
        body.append(f"{name}={value}\n", style="dim")
    if not body.plain:
        body.append("Nothing was changed.")
    return Panel(body, title=Text(label, style=f"bold {style}"), border_style=style)

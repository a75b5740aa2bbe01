"""Operator I/O.

`ConsolePrompter` asks through typer (click prompts) and prints through a
rich `Console`. `NonInteractivePrompter` answers every question with its
default, for `--no-interaction` runs and piped stdin.
"""

from __future__ import annotations

import typer
from rich.console import Console
from rich.markup import escape

from momo_provision.core.interfaces.ports import Prompter


class _ConsoleOutput:
    def __init__(self, console: Console | None = None) -> None:
        self._console = console or Console()

    def info(self, message: str) -> None:
        self._console.print(message, style="green", markup=False, highlight=False)

    def comment(self, message: str) -> None:
        self._console.print(message, style="yellow", markup=False, highlight=False)

    def line(self, message: str) -> None:
        self._console.print(message, highlight=False)


class ConsolePrompter(_ConsoleOutput, Prompter):
    def ask(self, prompt: str, default: str | None = None) -> str:
        value = typer.prompt(prompt, default=default, show_default=bool(default))
        return str(value).strip()

    def confirm(self, prompt: str, default: bool = False) -> bool:
        return typer.confirm(prompt, default=default)


class NonInteractivePrompter(_ConsoleOutput, Prompter):
    def ask(self, prompt: str, default: str | None = None) -> str:
        value = default or ""
        self._console.print(f"{escape(prompt)} [dim]{escape(value)}[/dim]", highlight=False)
        return value

    def confirm(self, prompt: str, default: bool = False) -> bool:
        self._console.print(f"{escape(prompt)} [dim]{'yes' if default else 'no'}[/dim]", highlight=False)
        return default

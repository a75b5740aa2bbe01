"""Runs sibling CLI commands by name.

The follow-up `request-secret` step is a separate command; the workflow
only knows its name and options. Commands are looked up on the root click
group, so any command mounted on the CLI (or a plugin group) can be chained.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

import click
from rich.console import Console

from momo_provision.core.interfaces.ports import CommandDispatcher

logger = logging.getLogger(__name__)


def build_cli_args(params: Mapping[str, Any]) -> list[str]:
    """`{"id": "x", "force": True, "product": None}` -> `["--id", "x", "--force"]`."""

    args: list[str] = []
    for key, value in params.items():
        flag = f"--{key.replace('_', '-')}"
        if value is None or value is False:
            continue
        if value is True:
            args.append(flag)
        else:
            args.extend([flag, str(value)])
    return args


class ClickCommandDispatcher(CommandDispatcher):
    def __init__(self, group: click.Group, *, console: Console | None = None) -> None:
        self._group = group
        self._console = console or Console()

    def invoke(self, name: str, params: Mapping[str, Any]) -> int:
        with click.Context(self._group) as ctx:
            command = self._group.get_command(ctx, name)
        if command is None:
            logger.warning("command %r is not registered", name)
            self._console.print(f"[yellow]Command '{name}' is not available; run it separately.[/yellow]")
            return 1

        args = build_cli_args(params)
        logger.debug("invoking %s %s", name, args)
        try:
            rv = command.main(args=args, prog_name=name, standalone_mode=False)
        except click.exceptions.Exit as exc:
            return exc.exit_code
        return rv if isinstance(rv, int) else 0

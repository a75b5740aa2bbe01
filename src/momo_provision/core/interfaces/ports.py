"""Contracts the registration workflow depends on.

Why Protocol:
- Structural contracts (duck typing) without rigid inheritance.
- Concrete adapters (`.env` store, typer prompts, httpx client) stay
  swappable, so the workflow runs against in-memory fakes in tests.
"""

from __future__ import annotations

from typing import Any, Mapping, Protocol, runtime_checkable

from momo_provision.core.domain.models import RegistrationOutcome


@runtime_checkable
class ConfigStore(Protocol):
    """Read/write access to configuration keyed by environment variable name."""

    def get(self, name: str) -> str | None:
        ...

    def set(self, name: str, value: str) -> None:
        """Apply to the live configuration and, when enabled, the durable store."""

        ...

    def update(self, values: Mapping[str, str]) -> None:
        """Like `set` for several keys, committed to the durable store at once."""

        ...


@runtime_checkable
class Prompter(Protocol):
    """Interactive I/O with the operator."""

    def ask(self, prompt: str, default: str | None = None) -> str:
        ...

    def confirm(self, prompt: str, default: bool = False) -> bool:
        ...

    def info(self, message: str) -> None:
        ...

    def comment(self, message: str) -> None:
        ...

    def line(self, message: str) -> None:
        """Raw output line (rich markup allowed)."""

        ...


@runtime_checkable
class Registrar(Protocol):
    """Submits a client id + callback to the provisioning API."""

    def register(self, identifier: str, callback_uri: str, endpoint: str) -> RegistrationOutcome:
        ...


@runtime_checkable
class CommandDispatcher(Protocol):
    """Runs another named command (e.g. `request-secret`)."""

    def invoke(self, name: str, params: Mapping[str, Any]) -> int:
        ...

from __future__ import annotations

from typing import Any, Iterable, Mapping

import pytest

from momo_provision.core.config import ENVIRONMENT_ENV_VAR, REGISTER_ID_URL_ENV_VAR
from momo_provision.core.domain.models import RegistrationOutcome, Success

REGISTER_URL = "https://sandbox.example/v1_0/apiuser"


class ScriptedPrompter:
    """Answers prompts from a script; `None` (or running out) accepts the default."""

    def __init__(self, answers: Iterable[str | None] = (), confirms: Iterable[bool] = ()) -> None:
        self.answers = list(answers)
        self.confirms = list(confirms)
        self.asked: list[tuple[str, str | None]] = []
        self.confirmed: list[str] = []
        self.lines: list[str] = []

    def ask(self, prompt: str, default: str | None = None) -> str:
        self.asked.append((prompt, default))
        answer = self.answers.pop(0) if self.answers else None
        if answer is None:
            return default or ""
        return answer

    def confirm(self, prompt: str, default: bool = False) -> bool:
        self.confirmed.append(prompt)
        return self.confirms.pop(0) if self.confirms else default

    def info(self, message: str) -> None:
        self.lines.append(message)

    def comment(self, message: str) -> None:
        self.lines.append(message)

    def line(self, message: str) -> None:
        self.lines.append(message)

    @property
    def output(self) -> str:
        return "\n".join(self.lines)


class MemoryConfigStore:
    def __init__(self, values: Mapping[str, str] | None = None) -> None:
        self.values: dict[str, str] = {REGISTER_ID_URL_ENV_VAR: REGISTER_URL, ENVIRONMENT_ENV_VAR: "sandbox"}
        self.values.update(values or {})
        self.writes: dict[str, str] = {}
        self.updates: list[dict[str, str]] = []

    def get(self, name: str) -> str | None:
        return self.values.get(name) or None

    def set(self, name: str, value: str) -> None:
        self.update({name: value})

    def update(self, values: Mapping[str, str]) -> None:
        self.updates.append(dict(values))
        self.values.update(values)
        self.writes.update(values)


class StubRegistrar:
    def __init__(self, outcome: RegistrationOutcome | None = None) -> None:
        self.outcome = outcome or Success(status_code=201, reason_phrase="Created")
        self.calls: list[tuple[str, str, str]] = []

    def register(self, identifier: str, callback_uri: str, endpoint: str) -> RegistrationOutcome:
        self.calls.append((identifier, callback_uri, endpoint))
        return self.outcome


class RecordingDispatcher:
    def __init__(self) -> None:
        self.calls: list[tuple[str, dict[str, Any]]] = []

    def invoke(self, name: str, params: Mapping[str, Any]) -> int:
        self.calls.append((name, dict(params)))
        return 0


@pytest.fixture
def prompter() -> ScriptedPrompter:
    return ScriptedPrompter()


@pytest.fixture
def config() -> MemoryConfigStore:
    return MemoryConfigStore()


@pytest.fixture
def dispatcher() -> RecordingDispatcher:
    return RecordingDispatcher()

"""Domain models (Pydantic v2).

These describe *what* a registration attempt produces, not *how* the
request is made. The outcome is a tagged union on `kind` so callers can
match on it without knowing about HTTP exceptions.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

from momo_provision.core.domain.product import Product


class Success(BaseModel):
    """The API accepted the registration."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["success"] = "success"
    status_code: int = Field(..., description="HTTP status code (2xx).")
    reason_phrase: str = Field(default="", description="HTTP reason phrase.")

    @property
    def ok(self) -> bool:
        return True


class ClientRejected(BaseModel):
    """4xx response: the request was refused (bad id, bad key, duplicate...)."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["client_rejected"] = "client_rejected"
    status_code: int
    reason_phrase: str = ""
    body: str = Field(default="", description="Raw response body for diagnosis.")

    @property
    def ok(self) -> bool:
        return False


class ServerFailure(BaseModel):
    """5xx response."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["server_failure"] = "server_failure"
    status_code: int
    reason_phrase: str = ""
    body: str = ""

    @property
    def ok(self) -> bool:
        return False


class TransportFailure(BaseModel):
    """No response was received (DNS, refused connection, timeout...)."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["transport_failure"] = "transport_failure"
    message: str

    @property
    def ok(self) -> bool:
        return False


RegistrationOutcome = Annotated[
    Union[Success, ClientRejected, ServerFailure, TransportFailure],
    Field(discriminator="kind"),
]


class RunState(str, Enum):
    """Terminal states of a `register-id` run."""

    ABORTED = "aborted"
    REGISTRATION_FAILED = "registration_failed"
    COMPLETED = "completed"


class RegisterIdResult(BaseModel):
    """Summary of one run, returned by the pipeline for the CLI and tests."""

    state: RunState
    product: Product | None = None
    client_id: str | None = None
    callback_uri: str | None = None
    outcome: RegistrationOutcome | None = None
    written: dict[str, str] = Field(
        default_factory=dict,
        description="Configuration entries written, keyed by environment variable name.",
    )
    follow_up_invoked: bool = False

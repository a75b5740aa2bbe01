"""`register-id` workflow.

Sequences the run: environment guard, product selection, client id and
callback resolution, registration, write-back of the two product entries
and the optional `request-secret` follow-up. All I/O goes through the
ports in `core.interfaces`, so the CLI only wires adapters together.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from rich.markup import escape

from momo_provision.core.config import (
    ENVIRONMENT_ENV_VAR,
    PRODUCT_ENV_VAR,
    REGISTER_ID_URL_ENV_VAR,
    is_protected_environment,
)
from momo_provision.core.domain.models import (
    ClientRejected,
    RegisterIdResult,
    RegistrationOutcome,
    RunState,
    ServerFailure,
    Success,
    TransportFailure,
)
from momo_provision.core.domain.product import Product
from momo_provision.core.errors import ConfigError
from momo_provision.core.interfaces.ports import CommandDispatcher, ConfigStore, Prompter, Registrar
from momo_provision.core.services.callback import CallbackResolver
from momo_provision.core.services.identifier import IdentifierResolver

logger = logging.getLogger(__name__)

REQUEST_SECRET_COMMAND = "request-secret"


@dataclass
class RegisterIdRequest:
    """Options of one `register-id` run."""

    client_id: str | None = None
    callback_uri: str | None = None
    product: Product | None = None
    force: bool = False
    max_attempts: int | None = None


def report_outcome(prompter: Prompter, outcome: RegistrationOutcome) -> None:
    """Print the status line (and body for failures) of a registration attempt."""

    if isinstance(outcome, TransportFailure):
        prompter.line(f"\n[red]{escape(outcome.message)}[/red]")
        return

    color = {
        Success: "green",
        ClientRejected: "yellow",
        ServerFailure: "red",
    }[type(outcome)]
    prompter.line(f"\nStatus: [{color}]{outcome.status_code} {escape(outcome.reason_phrase)}[/{color}]")
    if not isinstance(outcome, Success):
        prompter.line(f"\nBody: [{color}]{escape(outcome.body)}[/{color}]\n")


class RegisterIdPipeline:
    """Registers a client id for a product and writes it back to the config."""

    def __init__(
        self,
        *,
        config: ConfigStore,
        prompter: Prompter,
        registrar: Registrar,
        dispatcher: CommandDispatcher | None = None,
    ) -> None:
        self._config = config
        self._prompter = prompter
        self._registrar = registrar
        self._dispatcher = dispatcher

    def run(self, request: RegisterIdRequest) -> RegisterIdResult:
        if not self._guard(request.force):
            return RegisterIdResult(state=RunState.ABORTED)

        product = request.product or self._default_product()

        client_id = IdentifierResolver(self._prompter, max_attempts=request.max_attempts).resolve(
            request.client_id,
            self._config.get(product.id_env_var),
        )
        callback_uri = CallbackResolver(self._prompter, max_attempts=request.max_attempts).resolve(
            request.callback_uri,
            self._config.get(product.callback_env_var),
        )

        outcome = self._register(client_id, callback_uri)
        result = RegisterIdResult(
            state=RunState.REGISTRATION_FAILED,
            product=product,
            client_id=client_id,
            callback_uri=callback_uri,
            outcome=outcome,
        )
        if not outcome.ok:
            return result

        self._prompter.info("Writing configurations to .env file...")
        written = {
            product.id_env_var: client_id,
            product.callback_env_var: callback_uri,
        }
        self._config.update(written)
        logger.debug("wrote %s", ", ".join(written))

        result = result.model_copy(update={"state": RunState.COMPLETED, "written": written})

        if self._dispatcher is not None and self._prompter.confirm(
            "Do you wish to request for the app secret?", True
        ):
            self._dispatcher.invoke(
                REQUEST_SECRET_COMMAND,
                {"id": client_id, "product": product.value, "force": request.force},
            )
            result = result.model_copy(update={"follow_up_invoked": True})

        return result

    def _guard(self, force: bool) -> bool:
        environment = self._config.get(ENVIRONMENT_ENV_VAR)
        if force or not is_protected_environment(environment):
            return True
        self._prompter.line("[yellow]Application in production.[/yellow] Use --force to run this command anyway.")
        logger.info("aborted: environment %r is protected", environment)
        return False

    def _default_product(self) -> Product:
        raw = self._config.get(PRODUCT_ENV_VAR)
        if not raw:
            return Product.default()
        try:
            return Product(raw.strip().lower())
        except ValueError as exc:
            raise ConfigError(f"unknown product {raw!r} in {PRODUCT_ENV_VAR}") from exc

    def _register(self, client_id: str, callback_uri: str) -> RegistrationOutcome:
        endpoint = self._config.get(REGISTER_ID_URL_ENV_VAR)
        if not endpoint:
            raise ConfigError(f"{REGISTER_ID_URL_ENV_VAR} is not configured")

        self._prompter.info("Registering Client ID")
        outcome = self._registrar.register(client_id, callback_uri, endpoint)
        logger.debug("registration outcome: %s", outcome.kind)
        report_outcome(self._prompter, outcome)
        return outcome

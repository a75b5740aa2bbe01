"""momo-provision command line.

Wires the adapters (settings, `.env` store, httpx client, typer prompts)
into the `register-id` workflow and maps its terminal state to an exit code.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from momo_provision import __version__
from momo_provision.adapters.dispatcher import ClickCommandDispatcher
from momo_provision.adapters.env_store import DotenvConfigStore
from momo_provision.adapters.http_client import build_client
from momo_provision.adapters.prompters import ConsolePrompter, NonInteractivePrompter
from momo_provision.adapters.provisioning_api import RegistrationClient
from momo_provision.cli import doctor
from momo_provision.cli.ui_components import build_result_panel, print_banner
from momo_provision.core.config import AppSettings, load_settings
from momo_provision.core.domain.models import RunState
from momo_provision.core.domain.product import Product
from momo_provision.core.errors import ConfigError, InputRetryLimitError, ProvisioningError
from momo_provision.core.services.register_pipeline import RegisterIdPipeline, RegisterIdRequest

EXIT_REGISTRATION_FAILED = 1
EXIT_INPUT_ERROR = 2

app = typer.Typer(
    no_args_is_help=True,
    add_completion=False,
    help="Provision MTN MoMo sandbox credentials.",
)
app.add_typer(doctor.app, name="doctor")

_console = Console()
_err_console = Console(stderr=True)

logger = logging.getLogger(__name__)


def _configure_logging(level: str | int) -> None:
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=_err_console, show_path=False)],
        force=True,
    )


def _load_settings() -> AppSettings:
    try:
        return load_settings()
    except ConfigError as exc:
        _err_console.print(f"[red]Error:[/red] {escape(str(exc))}")
        raise typer.Exit(code=EXIT_INPUT_ERROR) from exc


def _version_callback(value: bool) -> None:
    if value:
        _console.print(f"momo-provision {__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
) -> None:
    settings = _load_settings()
    _configure_logging(logging.DEBUG if verbose else settings.log_level.upper())


@app.command("register-id")
def register_id(
    client_id: Optional[str] = typer.Option(None, "--id", help="Client APP ID."),
    callback: Optional[str] = typer.Option(None, "--callback", help="Client APP callback URI."),
    product: Optional[Product] = typer.Option(
        None,
        "--product",
        case_sensitive=False,
        help="Product subscribed to (defaults to MOMO_PRODUCT).",
    ),
    no_write: bool = typer.Option(False, "--no-write", help="Don't write credentials to the .env file."),
    force: bool = typer.Option(False, "--force", "-f", help="Force the operation to run when in production."),
    no_interaction: bool = typer.Option(
        False,
        "--no-interaction",
        "-n",
        help="Accept every default instead of prompting.",
    ),
) -> None:
    """Register client APP ID ('apiuser') with the sandbox provisioning API."""

    settings = _load_settings()
    store = DotenvConfigStore(settings, write=not no_write)
    logger.debug("environment=%s env_file=%s", settings.environment, store.env_path)

    if no_interaction:
        prompter = NonInteractivePrompter(_console)
    else:
        print_banner(_console)
        prompter = ConsolePrompter(_console)

    # A human can retry forever; scripted input gets a cap.
    max_attempts = settings.max_prompt_attempts if no_interaction or not sys.stdin.isatty() else None

    request = RegisterIdRequest(
        client_id=client_id,
        callback_uri=callback,
        product=product,
        force=force,
        max_attempts=max_attempts,
    )

    with build_client(settings) as http:
        pipeline = RegisterIdPipeline(
            config=store,
            prompter=prompter,
            registrar=RegistrationClient(http),
            dispatcher=ClickCommandDispatcher(typer.main.get_command(app), console=_console),
        )
        try:
            result = pipeline.run(request)
        except InputRetryLimitError as exc:
            _err_console.print(f"[red]{exc}[/red]")
            raise typer.Exit(code=EXIT_INPUT_ERROR) from exc
        except ProvisioningError as exc:
            _err_console.print(f"[red]Error:[/red] {exc}")
            raise typer.Exit(code=EXIT_INPUT_ERROR) from exc

    _console.print(build_result_panel(result))
    if result.state is RunState.REGISTRATION_FAILED:
        raise typer.Exit(code=EXIT_REGISTRATION_FAILED)


def run() -> None:
    app()

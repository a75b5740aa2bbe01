"""Doctor command for configuration diagnostics."""

from __future__ import annotations

import httpx
import typer
from rich.console import Console

from momo_provision.adapters.env_store import DotenvConfigStore
from momo_provision.adapters.http_client import build_client
from momo_provision.cli.ui_components import build_checks_table
from momo_provision.core.config import (
    ENVIRONMENT_ENV_VAR,
    PRODUCT_ENV_VAR,
    SUBSCRIPTION_KEY_ENV_VAR,
    AppSettings,
    load_settings,
    write_env_vars,
)
from momo_provision.core.domain.product import Product

app = typer.Typer(no_args_is_help=True, help="Configuration diagnostics and setup.")

_console = Console()


def _check_http(settings: AppSettings) -> tuple[bool, str]:
    try:
        with build_client(settings) as client:
            response = client.get(settings.base_uri)
        return True, f"HTTP {response.status_code}"
    except httpx.HTTPError as exc:
        return False, str(exc) or exc.__class__.__name__


@app.command()
def run(
    offline: bool = typer.Option(False, "--offline", help="Skip the connectivity check."),
) -> None:
    """Show the effective configuration and check the API is reachable."""

    settings = load_settings()
    store = DotenvConfigStore(settings, write=False)
    product = settings.product

    table = build_checks_table("MoMo Provision Doctor")

    if settings.is_protected_environment:
        table.add_row("Environment", "PROTECTED", f"{settings.environment} (register-id needs --force)")
    else:
        table.add_row("Environment", "OK", settings.environment)
    table.add_row("Product", "OK", product.value)
    table.add_row("Registration URL", "OK", settings.register_id_url)
    if settings.subscription_key:
        table.add_row("Subscription key", "OK", "Ocp-Apim-Subscription-Key set")
    else:
        table.add_row("Subscription key", "MISSING", "Set MOMO_SUBSCRIPTION_KEY (see `doctor setup`)")
    table.add_row("Env file", "OK" if store.env_path.exists() else "NEW", str(store.env_path))

    for name in (product.id_env_var, product.callback_env_var):
        value = store.get(name)
        table.add_row(name, "OK" if value else "UNSET", value or "run `register-id`")

    if not offline:
        ok_http, detail_http = _check_http(settings)
        table.add_row("HTTP connectivity", "OK" if ok_http else "FAIL", detail_http)

    _console.print(table)


@app.command()
def setup() -> None:
    """Interactive setup (stores config in the user config .env).

    Avoids hand-editing the .env file before the first `register-id`.
    """

    settings = load_settings()

    product = typer.prompt(
        "Product",
        default=settings.product.value,
        show_default=True,
    ).strip().lower()
    try:
        product = Product(product).value
    except ValueError as exc:
        raise typer.BadParameter(f"product must be one of: {', '.join(p.value for p in Product)}") from exc

    environment = typer.prompt("Environment", default=settings.environment, show_default=True).strip()
    subscription_key = typer.prompt(
        "Subscription key (Ocp-Apim-Subscription-Key)",
        hide_input=True,
        confirmation_prompt=False,
    ).strip()

    if not environment or not subscription_key:
        raise typer.BadParameter("environment and subscription key are required")

    env_path = write_env_vars(
        settings.target_env_file,
        {
            PRODUCT_ENV_VAR: product,
            ENVIRONMENT_ENV_VAR: environment,
            SUBSCRIPTION_KEY_ENV_VAR: subscription_key,
        },
    )

    _console.print(f"[green]Saved config to:[/green] {env_path}")

"""Core configuration.

Centralizes environment variables (pydantic-settings) so the CLI and the
adapters read the same values. The `.env` helpers below are the durable
half of the configuration store used by `adapters.env_store`.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Mapping
from urllib.parse import urljoin

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from momo_provision.core.domain.product import Product
from momo_provision.core.errors import ConfigError

ENV_PREFIX = "MOMO_"
PRODUCT_ENV_VAR = f"{ENV_PREFIX}PRODUCT"
ENVIRONMENT_ENV_VAR = f"{ENV_PREFIX}ENVIRONMENT"
REGISTER_ID_URL_ENV_VAR = f"{ENV_PREFIX}REGISTER_ID_URL"
SUBSCRIPTION_KEY_ENV_VAR = f"{ENV_PREFIX}SUBSCRIPTION_KEY"

PROJECT_ENV_FILE = Path(".env")

PROTECTED_ENVIRONMENTS = frozenset({"production", "prod", "live"})


def is_protected_environment(environment: str | None) -> bool:
    return (environment or "").strip().lower() in PROTECTED_ENVIRONMENTS


def get_user_config_dir() -> Path:
    """Per-user configuration directory (cross-platform, no dependencies)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "momo-provision"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "momo-provision"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "momo-provision"
    return Path.home() / ".config" / "momo-provision"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def parse_env_lines(text: str) -> dict[str, str]:
    data: dict[str, str] = {}
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip().strip('"').strip("'")
        if key:
            data[key] = value
    return data


def read_env_vars(env_path: Path) -> dict[str, str]:
    if not env_path.exists():
        return {}
    return parse_env_lines(env_path.read_text(encoding="utf-8"))


def write_env_vars(env_path: Path, values: Mapping[str, str | None]) -> Path:
    """Write/update variables in a `.env` file, keeping existing entries."""

    env_path.parent.mkdir(parents=True, exist_ok=True)

    existing = read_env_vars(env_path)
    existing.update({k: v for k, v in values.items() if v is not None})

    lines = ["# momo-provision config (.env)"]
    for key in sorted(existing.keys()):
        lines.append(f"{key}={existing[key]}")
    env_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return env_path


class AppSettings(BaseSettings):
    """Application configuration.

    Values come from `MOMO_*` environment variables, the project `.env` and
    then the per-user `.env` (see `get_user_env_file`).
    """

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        extra="ignore",
        case_sensitive=False,
        # Project first (dev), then the global user config.
        env_file=(str(PROJECT_ENV_FILE), str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    environment: str = Field(
        default="sandbox",
        min_length=1,
        description="Deployment environment name (sandbox, production, ...).",
    )
    product: Product = Field(
        default=Product.COLLECTION,
        description="Default product the registered credentials apply to.",
    )
    base_uri: str = Field(
        default="https://sandbox.momodeveloper.mtn.com/",
        min_length=8,
        description="Base URL of the MoMo API.",
    )
    register_id_uri: str = Field(
        default="v1_0/apiuser",
        min_length=1,
        description="Path (relative to base_uri) or absolute URL of the API user registration endpoint.",
    )
    subscription_key: str | None = Field(
        default=None,
        description="Ocp-Apim-Subscription-Key sent with provisioning requests.",
    )
    env_file: Path | None = Field(
        default=None,
        description="`.env` file that receives the registered credentials (defaults to the user .env).",
    )

    http_timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        description="Timeout per request (seconds).",
    )
    user_agent: str = Field(
        default="momo-provision/0.1",
        min_length=1,
        description="User-Agent for provisioning requests.",
    )

    max_prompt_attempts: int = Field(
        default=3,
        ge=1,
        le=100,
        description="Re-prompt cap applied when input is not interactive.",
    )
    log_level: str = Field(
        default="WARNING",
        description="Logging level when --verbose is not given.",
    )

    @property
    def register_id_url(self) -> str:
        return urljoin(self.base_uri, self.register_id_uri)

    @property
    def is_protected_environment(self) -> bool:
        return is_protected_environment(self.environment)

    @property
    def target_env_file(self) -> Path:
        return self.env_file or get_user_env_file()


def load_settings() -> AppSettings:
    """Build `AppSettings`, reporting bad values as `ConfigError`."""

    try:
        return AppSettings()
    except ValidationError as exc:
        problems = "; ".join(
            f"{ENV_PREFIX}{'_'.join(str(part) for part in error['loc']).upper()}: {error['msg']}"
            for error in exc.errors()
        )
        raise ConfigError(f"invalid configuration: {problems}") from exc

"""Configuration store backed by the process environment and `.env` files.

Reads, in order: values set during this run, the static settings (product,
environment, registration URL), `os.environ`, the target `.env` file, then
the project `./.env`. Writes go to the live overlay and, unless disabled, to
the target `.env` file.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Mapping

from momo_provision.core.config import (
    ENVIRONMENT_ENV_VAR,
    PRODUCT_ENV_VAR,
    PROJECT_ENV_FILE,
    REGISTER_ID_URL_ENV_VAR,
    AppSettings,
    read_env_vars,
    write_env_vars,
)
from momo_provision.core.interfaces.ports import ConfigStore

logger = logging.getLogger(__name__)


class DotenvConfigStore(ConfigStore):
    def __init__(self, settings: AppSettings, *, env_path: Path | None = None, write: bool = True) -> None:
        self._settings = settings
        self._env_path = env_path or settings.target_env_file
        self._write = write
        self._live: dict[str, str] = {}
        # Target file wins over the project file.
        self._file_values = {**read_env_vars(PROJECT_ENV_FILE), **read_env_vars(self._env_path)}
        self._static = {
            PRODUCT_ENV_VAR: settings.product.value,
            ENVIRONMENT_ENV_VAR: settings.environment,
            REGISTER_ID_URL_ENV_VAR: settings.register_id_url,
        }

    @property
    def env_path(self) -> Path:
        return self._env_path

    def get(self, name: str) -> str | None:
        if name in self._live:
            return self._live[name]
        if name in self._static:
            return self._static[name]
        value = os.environ.get(name) or self._file_values.get(name)
        return value or None

    def set(self, name: str, value: str) -> None:
        self.update({name: value})

    def update(self, values: Mapping[str, str]) -> None:
        self._live.update(values)
        if not self._write:
            logger.debug("--no-write: %s kept in memory only", ", ".join(values))
            return
        write_env_vars(self._env_path, values)
        self._file_values.update(values)
        logger.debug("%s written to %s", ", ".join(values), self._env_path)

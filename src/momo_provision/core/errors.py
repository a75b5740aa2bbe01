"""Error types raised by the core."""

from __future__ import annotations


class ProvisioningError(RuntimeError):
    """Base error for momo-provision."""


class ConfigError(ProvisioningError, ValueError):
    """Configuration is missing or invalid."""


class InputRetryLimitError(ProvisioningError):
    """A validation loop ran out of attempts (non-interactive input)."""

    def __init__(self, field: str, attempts: int, last_value: str | None = None) -> None:
        super().__init__(f"no valid {field} after {attempts} attempt(s)")
        self.field = field
        self.attempts = attempts
        self.last_value = last_value

"""Products a client can be provisioned for.

Each product owns a configuration section; the id and callback registered
for it live under product-specific environment variables.
"""

from __future__ import annotations

from enum import Enum


class Product(str, Enum):
    """MoMo API products (subscriptions)."""

    COLLECTION = "collection"
    DISBURSEMENT = "disbursement"
    REMITTANCE = "remittance"

    @classmethod
    def default(cls) -> "Product":
        return cls.COLLECTION

    @property
    def id_env_var(self) -> str:
        """Environment variable holding the registered client id."""

        return f"MOMO_{self.value.upper()}_ID"

    @property
    def callback_env_var(self) -> str:
        """Environment variable holding the registered callback URI."""

        return f"MOMO_{self.value.upper()}_CALLBACK_URI"

    @property
    def id_config_key(self) -> str:
        return f"products.{self.value}.id"

    @property
    def callback_config_key(self) -> str:
        return f"products.{self.value}.callback_uri"

    def label(self) -> str:
        return self.value.capitalize()

"""Core interfaces/abstractions.

Protocols implemented by the concrete adapters; the core depends on these
abstractions only.
"""

from momo_provision.core.interfaces.ports import CommandDispatcher, ConfigStore, Prompter, Registrar

__all__ = ["CommandDispatcher", "ConfigStore", "Prompter", "Registrar"]

"""Application services (workflows built on the core ports)."""

from momo_provision.core.services.callback import DEFAULT_CALLBACK_URI, CallbackResolver
from momo_provision.core.services.identifier import IdentifierResolver
from momo_provision.core.services.register_pipeline import RegisterIdPipeline, RegisterIdRequest

__all__ = [
    "CallbackResolver",
    "DEFAULT_CALLBACK_URI",
    "IdentifierResolver",
    "RegisterIdPipeline",
    "RegisterIdRequest",
]

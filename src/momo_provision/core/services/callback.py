"""Callback URI resolution."""

from __future__ import annotations

import logging

from momo_provision.core.domain.validators import is_valid_url
from momo_provision.core.errors import InputRetryLimitError
from momo_provision.core.interfaces.ports import Prompter

logger = logging.getLogger(__name__)

DEFAULT_CALLBACK_URI = "http://localhost:8000/mtn-momo/callback"


class CallbackResolver:
    """Produces the callback URI (`providerCallbackHost`).

    The sandbox does not call it back but the API still requires the field.
    An empty answer ends validation: only non-empty, malformed values are
    re-prompted. With `max_attempts` set the input is scripted, so an empty
    re-prompt answer counts as another failed attempt instead of clearing
    the field.
    """

    def __init__(
        self,
        prompter: Prompter,
        *,
        default_uri: str = DEFAULT_CALLBACK_URI,
        max_attempts: int | None = None,
    ) -> None:
        self._prompter = prompter
        self._default_uri = default_uri
        self._max_attempts = max_attempts

    def resolve(self, explicit_override: str | None = None, persisted_value: str | None = None) -> str:
        self._prompter.info("Client APP callback URI - [X-Callback-Url, providerCallbackHost]")

        callback_uri = explicit_override or persisted_value or self._default_uri
        callback_uri = self._prompter.ask("Use client app callback URI?", callback_uri)

        attempts = 0
        while callback_uri and not is_valid_url(callback_uri):
            if self._max_attempts is not None and attempts >= self._max_attempts:
                raise InputRetryLimitError("callback URI", attempts, callback_uri)
            attempts += 1
            self._prompter.info(" Invalid URI. #IETF RFC3986")
            answer = self._prompter.ask("MOMO_CLIENT_CALLBACK_URI?", "")
            if not answer and self._max_attempts is not None:
                continue
            callback_uri = answer

        if not callback_uri:
            logger.warning("continuing with an empty callback URI")
        return callback_uri

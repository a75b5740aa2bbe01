"""Client id resolution.

The client id (API user, `X-Reference-Id`) is an operator-chosen UUID.
Sources, in order: explicit option, value persisted for the product, a
freshly generated `uuid4`. The candidate is then confirmed interactively.
"""

from __future__ import annotations

import logging
import uuid

from momo_provision.core.domain.validators import is_valid_uuid
from momo_provision.core.errors import InputRetryLimitError
from momo_provision.core.interfaces.ports import Prompter

logger = logging.getLogger(__name__)


class IdentifierResolver:
    """Produces a validated client id.

    `max_attempts=None` re-prompts until a valid UUID is typed. Set a cap
    when the prompter is not backed by a human.
    """

    def __init__(self, prompter: Prompter, *, max_attempts: int | None = None) -> None:
        self._prompter = prompter
        self._max_attempts = max_attempts

    def resolve(self, explicit_override: str | None = None, persisted_value: str | None = None) -> str:
        self._prompter.info("Client APP ID - [X-Reference-Id, api_user_id]")

        client_id = explicit_override or persisted_value
        if client_id:
            logger.debug("client id candidate from %s", "option" if explicit_override else "config")
        else:
            self._prompter.comment("> Generating random client ID...")
            client_id = str(uuid.uuid4())

        client_id = self._prompter.ask("Use client app ID?", client_id)

        attempts = 0
        while not is_valid_uuid(client_id):
            if self._max_attempts is not None and attempts >= self._max_attempts:
                raise InputRetryLimitError("client id", attempts, client_id)
            attempts += 1
            self._prompter.info(" Invalid UUID (Format: 4). #IETF RFC4122")
            client_id = self._prompter.ask("MOMO_CLIENT_ID")

        return client_id

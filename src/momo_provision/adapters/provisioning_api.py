"""Sandbox provisioning API: API user registration.

`POST /v1_0/apiuser` with the client id in `X-Reference-Id` and the
callback host in the JSON body. The API answers `201 Created` with an
empty body on success.

Docs: https://momodeveloper.mtn.com/docs/services/sandbox-provisioning-api/operations/post-v1_0-apiuser
"""

from __future__ import annotations

import logging

import httpx

from momo_provision.core.domain.models import (
    ClientRejected,
    RegistrationOutcome,
    ServerFailure,
    Success,
    TransportFailure,
)
from momo_provision.core.interfaces.ports import Registrar

logger = logging.getLogger(__name__)

REFERENCE_ID_HEADER = "X-Reference-Id"


class RegistrationClient(Registrar):
    """Registers a client id with a single attempt (no retries)."""

    def __init__(self, client: httpx.Client) -> None:
        self._client = client

    def register(self, identifier: str, callback_uri: str, endpoint: str) -> RegistrationOutcome:
        logger.debug("POST %s (%s=%s)", endpoint, REFERENCE_ID_HEADER, identifier)
        try:
            response = self._client.post(
                endpoint,
                headers={REFERENCE_ID_HEADER: identifier},
                json={"providerCallbackHost": callback_uri},
            )
        except httpx.TransportError as exc:
            logger.debug("transport error: %r", exc)
            return TransportFailure(message=str(exc) or exc.__class__.__name__)

        return classify_response(response)


def classify_response(response: httpx.Response) -> RegistrationOutcome:
    status = response.status_code
    reason = response.reason_phrase
    if 400 <= status < 500:
        return ClientRejected(status_code=status, reason_phrase=reason, body=response.text)
    if 500 <= status < 600:
        return ServerFailure(status_code=status, reason_phrase=reason, body=response.text)
    return Success(status_code=status, reason_phrase=reason)

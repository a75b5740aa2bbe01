"""httpx wrapper.

Why a wrapper:
- Standardizes timeouts and headers (User-Agent, subscription key).
- Eases testing: a `transport` (e.g. `httpx.MockTransport`) can be injected.
"""

from __future__ import annotations

import httpx

from momo_provision.core.config import AppSettings

SUBSCRIPTION_KEY_HEADER = "Ocp-Apim-Subscription-Key"


def build_client(
    settings: AppSettings | None = None,
    *,
    extra_headers: dict[str, str] | None = None,
    transport: httpx.BaseTransport | None = None,
) -> httpx.Client:
    """Create a synchronous `httpx.Client` with the configured defaults."""

    settings = settings or AppSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "application/json",
    }
    if settings.subscription_key:
        headers[SUBSCRIPTION_KEY_HEADER] = settings.subscription_key
    if extra_headers:
        headers.update(extra_headers)
    return httpx.Client(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=True,
        headers=headers,
        transport=transport,
    )

"""Syntax checks for operator-supplied values."""

from __future__ import annotations

import re

from pydantic import AnyUrl, TypeAdapter, ValidationError

# Canonical textual form, any version (RFC 4122 section 3).
_UUID_RE = re.compile(
    r"^[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}$"
)

_url_adapter = TypeAdapter(AnyUrl)


def is_valid_uuid(value: str | None) -> bool:
    if not value:
        return False
    return _UUID_RE.match(value) is not None


def is_valid_url(value: str | None) -> bool:
    """True for absolute URLs with a scheme and a host."""

    if not value or any(ch.isspace() for ch in value):
        return False
    try:
        url = _url_adapter.validate_python(value)
    except ValidationError:
        return False
    return bool(url.scheme) and bool(url.host)

"""
Authorization header parsing.

`headers` can be any mapping with a `get` method: werkzeug's Headers
(case-insensitive) from a live request, or a plain dict in tests.
"""
from __future__ import annotations

from typing import Mapping

from utils.exceptions import MalformedCredentialError, MissingCredentialError

AUTH_HEADER = "Authorization"


def _authorization(headers: Mapping[str, str]) -> str:
    value = headers.get(AUTH_HEADER)
    if not value:
        raise MissingCredentialError("authorization header doesn't exist")
    return value


def get_bearer_token(headers: Mapping[str, str]) -> str:
    """Return the token from `Authorization: Bearer <token>`."""
    fields = _authorization(headers).split()
    if len(fields) < 2:
        raise MalformedCredentialError("authorization header must be '<scheme> <token>'")
    return fields[1]


def get_api_key(headers: Mapping[str, str]) -> str:
    """Return the last whitespace-separated field of the Authorization header."""
    fields = _authorization(headers).split()
    if not fields:
        raise MalformedCredentialError("invalid authorization header format")
    return fields[-1]

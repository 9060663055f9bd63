"""
security helpers:
- Argon2 password hashing via argon2-cffi
- JWT creation/verification via PyJWT
- opaque refresh token generation
"""
from __future__ import annotations

import binascii
import secrets
import uuid
from datetime import datetime, timedelta, timezone

import jwt
from argon2 import PasswordHasher
from argon2.exceptions import HashingError as Argon2HashingError
from argon2.exceptions import InvalidHashError, VerificationError
from jwt.utils import base64url_decode, base64url_encode

from utils.exceptions import (
    HashingError,
    InvalidSignatureError,
    MalformedTokenError,
    PasswordMismatchError,
    TokenExpiredError,
)

ISSUER = "chirpy"
ALGORITHM = "HS256"
REFRESH_TOKEN_BYTES = 32

ph = PasswordHasher()


def hash_password(password: str) -> str:
    """Hash a plaintext password using Argon2
    """
    try:
        return ph.hash(password)
    except Argon2HashingError as exc:
        raise HashingError(f"could not hash password: {exc}") from exc


def check_password_hash(hashed_password: str, password: str) -> None:
    """Verify a plaintext password against an Argon2 hash.

    Raises PasswordMismatchError for a wrong password and for a stored hash
    that cannot be parsed; callers only learn that verification failed.
    """
    try:
        ph.verify(hashed_password, password)
    except (VerificationError, InvalidHashError) as exc:
        raise PasswordMismatchError("password does not match") from exc


def _now() -> datetime:
    return datetime.now(timezone.utc)


def make_jwt(user_id: uuid.UUID, token_secret: str, expires_in: timedelta) -> str:
    """Issue an HS256 session token for user_id.

    expires_in may be negative, which yields an already expired token.
    """
    now = _now()
    payload = {
        "iss": ISSUER,
        "iat": int(now.timestamp()),
        "exp": int((now + expires_in).timestamp()),
        "sub": str(user_id),
    }
    return jwt.encode(payload, token_secret, algorithm=ALGORITHM)


def _check_canonical(token: str) -> None:
    # base64url decoding ignores the spare bits of the last character, so a
    # mutated token could still decode to the signed bytes
    segments = token.split(".")
    if len(segments) != 3:
        raise MalformedTokenError("token must have three segments")
    for segment in segments:
        try:
            raw = base64url_decode(segment.encode("ascii"))
        except (binascii.Error, UnicodeEncodeError, ValueError) as exc:
            raise MalformedTokenError(f"invalid token segment: {exc}") from exc
        if base64url_encode(raw).decode("ascii") != segment:
            raise MalformedTokenError("token segment is not canonical base64url")


def validate_jwt(token: str, token_secret: str) -> uuid.UUID:
    """
    Decode and validate a session token, returning the user id it carries.
    Raises InvalidSignatureError, TokenExpiredError or MalformedTokenError.
    """
    _check_canonical(token)
    try:
        decoded = jwt.decode(
            token,
            token_secret,
            algorithms=[ALGORITHM],
            issuer=ISSUER,
            options={"require": ["iss", "iat", "exp", "sub"]},
        )
    except jwt.InvalidSignatureError as exc:
        raise InvalidSignatureError("token signature is invalid") from exc
    except jwt.ExpiredSignatureError as exc:
        raise TokenExpiredError("token expired") from exc
    except jwt.InvalidTokenError as exc:
        raise MalformedTokenError(f"invalid token: {exc}") from exc

    try:
        return uuid.UUID(decoded["sub"])
    except (TypeError, ValueError, AttributeError) as exc:
        raise MalformedTokenError("token subject is not a user id") from exc


def make_refresh_token() -> str:
    """Return a 64 character hex refresh token."""
    return secrets.token_bytes(REFRESH_TOKEN_BYTES).hex()

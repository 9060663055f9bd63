"""
Typed failures raised by the authentication core.

Every failure derives from AuthError so request guards can treat them
uniformly (HTTP 401) while logs keep the concrete cause.
"""


class AuthError(Exception):
    """Base class for credential, token and password failures."""


class MissingCredentialError(AuthError):
    """No Authorization header (or an empty one) was sent."""


class MalformedCredentialError(AuthError):
    """The Authorization header does not have the expected shape."""


class InvalidSignatureError(AuthError):
    """The token signature does not match the secret."""


class TokenExpiredError(AuthError):
    """The token is past its exp claim."""


class MalformedTokenError(AuthError):
    """The token cannot be parsed or carries unusable claims."""


class PasswordMismatchError(AuthError):
    """The password does not match the stored hash."""


class HashingError(AuthError):
    """The password hasher itself failed."""

from __future__ import annotations

import hmac
import logging
from functools import wraps

from flask import abort, current_app, g, request

from models import storage
from models.user import User
from utils.credentials import get_api_key, get_bearer_token
from utils.exceptions import AuthError
from utils.security import validate_jwt

logger = logging.getLogger(__name__)


def jwt_required():
    """Require a valid session token; exposes g.current_user."""
    def decorator(fn):
        @wraps(fn)
        def wrapper(*args, **kwargs):
            try:
                token = get_bearer_token(request.headers)
                user_id = validate_jwt(token, current_app.config["JWT_SECRET"])
            except AuthError as e:
                logger.info("Rejected session token on %s: %s", request.path, e)
                abort(401, description="Unauthorized")

            user = storage.get(User, str(user_id))
            if not user:
                logger.info("Session token for unknown user %s", user_id)
                abort(401, description="Unauthorized")
            g.current_user = user
            return fn(*args, **kwargs)

        return wrapper

    return decorator


def bearer_token_required():
    """
    Require `Authorization: Bearer <token>` without interpreting the token.
    Used by the refresh endpoints, where the bearer value is an opaque
    refresh token looked up in the database.
    """
    def decorator(fn):
        @wraps(fn)
        def wrapper(*args, **kwargs):
            try:
                g.bearer_token = get_bearer_token(request.headers)
            except AuthError as e:
                logger.info("Rejected bearer header on %s: %s", request.path, e)
                abort(401, description="Unauthorized")
            return fn(*args, **kwargs)

        return wrapper

    return decorator


def api_key_required(config_key: str):
    """Require an Authorization header whose key equals app.config[config_key]."""
    def decorator(fn):
        @wraps(fn)
        def wrapper(*args, **kwargs):
            expected = current_app.config.get(config_key) or ""
            try:
                api_key = get_api_key(request.headers)
            except AuthError as e:
                logger.info("Rejected API key header on %s: %s", request.path, e)
                abort(401, description="Unauthorized")
            if not expected or not hmac.compare_digest(api_key.encode(), expected.encode()):
                logger.info("Invalid API key on %s", request.path)
                abort(401, description="Unauthorized")
            return fn(*args, **kwargs)

        return wrapper

    return decorator

"""
Authentication blueprint:
- POST /login   -> session token (JWT, 1h) + refresh token (opaque, 60 days)
- POST /refresh -> new session token for a live refresh token
- POST /revoke  -> revoke a refresh token

Refresh tokens are sent as `Authorization: Bearer <refresh_token>` and are
checked against the refresh_tokens table (unexpired and unrevoked).
"""
from __future__ import annotations

import logging
import uuid

from flask import Blueprint, request, jsonify, g, abort, current_app

from models import storage
from models.user import User
from models.base_model import utcnow
from models.schemas.user import UserLoginSchema, LoginOutSchema, TokenOutSchema
from utils.decorators import bearer_token_required
from utils.exceptions import PasswordMismatchError
from utils.security import (
    check_password_hash,
    make_jwt,
    make_refresh_token,
)

logger = logging.getLogger(__name__)

bp = Blueprint("auth", __name__)

user_login_schema = UserLoginSchema()
login_out_schema = LoginOutSchema()
token_out_schema = TokenOutSchema()


@bp.post("/login")
def login():
    """
    Login: return the user with a session token and a refresh token
    ---
    tags:
      - Auth
    consumes:
      - application/json
    parameters:
      -  in: body
         name: body
         schema:
           type: object
           properties:
             email: { type: string }
             password: { type: string }
    responses:
      200:
        description: OK (returns tokens)
      401:
        description: Unauthorized
    """
    data = user_login_schema.load(request.get_json(silent=True) or {})

    user: User | None = storage.get_user_by_email(data["email"])
    if not user:
        logger.info("Login for unknown email")
        abort(401, description="Incorrect email or password")
    try:
        check_password_hash(user.hashed_password, data["password"])
    except PasswordMismatchError:
        logger.info("Login with wrong password for user %s", user.id)
        abort(401, description="Incorrect email or password")

    config = current_app.config
    token = make_jwt(uuid.UUID(user.id), config["JWT_SECRET"], config["JWT_TOKEN_EXPIRES"])
    refresh_token = make_refresh_token()
    storage.create_refresh_token(
        token=refresh_token,
        user_id=user.id,
        expires_at=utcnow() + config["REFRESH_TOKEN_EXPIRES"],
    )

    body = login_out_schema.dump(
        {
            "id": user.id,
            "created_at": user.created_at,
            "updated_at": user.updated_at,
            "email": user.email,
            "is_chirpy_red": user.is_chirpy_red,
            "token": token,
            "refresh_token": refresh_token,
        }
    )
    return jsonify(body), 200


@bp.post("/refresh")
@bearer_token_required()
def refresh():
    """
    Exchange a refresh token for a new session token
    ---
    tags:
      - Auth
    security:
      - Bearer: []
    responses:
      200:
        description: OK (returns a session token)
      401:
        description: Unknown, expired or revoked refresh token
    """
    rt = storage.get_refresh_token(g.bearer_token)
    if not rt:
        logger.info("Refresh with unknown token")
        abort(401, description="Unauthorized")
    if rt.is_revoked():
        logger.info("Refresh with revoked token for user %s", rt.user_id)
        abort(401, description="Unauthorized")
    if rt.is_expired():
        logger.info("Refresh with expired token for user %s", rt.user_id)
        abort(401, description="Unauthorized")

    config = current_app.config
    token = make_jwt(uuid.UUID(rt.user_id), config["JWT_SECRET"], config["JWT_TOKEN_EXPIRES"])
    return jsonify(token_out_schema.dump({"token": token})), 200


@bp.post("/revoke")
@bearer_token_required()
def revoke():
    """
    Revoke a refresh token
    ---
    tags:
      - Auth
    security:
      - Bearer: []
    responses:
      204:
        description: Revoked (also returned for unknown tokens)
      401:
        description: Missing or malformed Authorization header
    """
    if not storage.revoke_refresh_token(g.bearer_token):
        logger.info("Revoke for unknown refresh token")
    return ("", 204)

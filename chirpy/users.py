from __future__ import annotations

import logging

from flask import Blueprint, request, jsonify, g, abort

from models import storage
from models.user import User
from models.schemas.user import UserCreateSchema, UserUpdateSchema, UserOutSchema
from utils.decorators import jwt_required
from utils.security import hash_password

logger = logging.getLogger(__name__)

bp = Blueprint("users", __name__)

user_create_schema = UserCreateSchema()
user_update_schema = UserUpdateSchema()
user_out_schema = UserOutSchema()


@bp.post("/users")
def create_user():
    """
    Register a new user.
    ---
    tags:
      - Users
    consumes:
      - application/json
    parameters:
      - in: body
        name: body
        schema:
          type: object
          required: [email, password]
          properties:
            email: { type: string }
            password: { type: string }
    responses:
      201:
        description: Created
      409:
        description: Email already registered
      422:
        description: Validation error
    """
    data = user_create_schema.load(request.get_json(silent=True) or {})

    if storage.get_user_by_email(data["email"]):
        abort(409, description="Email already registered")

    user = User(email=data["email"], hashed_password=hash_password(data["password"]))
    storage.new(user)
    storage.save()
    logger.info("Registered user %s", user.id)

    return jsonify(user_out_schema.dump(user)), 201


@bp.put("/users")
@jwt_required()
def update_credentials():
    """
    Replace the current user's email and password.
    ---
    tags:
      - Users
    security:
      - Bearer: []
    consumes:
      - application/json
    parameters:
      - in: body
        name: body
        schema:
          type: object
          required: [email, password]
          properties:
            email: { type: string }
            password: { type: string }
    responses:
      200:
        description: OK
      401:
        description: Unauthorized
      409:
        description: Email already registered
      422:
        description: Validation error
    """
    data = user_update_schema.load(request.get_json(silent=True) or {})
    user: User = g.current_user

    other = storage.get_user_by_email(data["email"])
    if other and other.id != user.id:
        abort(409, description="Email already registered")

    user.email = data["email"]
    user.hashed_password = hash_password(data["password"])
    user.save()

    return jsonify(user_out_schema.dump(user)), 200

from __future__ import annotations

import logging
import uuid

from flask import Blueprint, request, jsonify, g, abort, current_app

from models import storage
from models.chirp import Chirp
from models.schemas.chirp import ChirpCreateSchema, ChirpOutSchema
from models.schemas.common import replace_profane
from utils.decorators import jwt_required

logger = logging.getLogger(__name__)

bp = Blueprint("chirps", __name__)

chirp_create_schema = ChirpCreateSchema()
chirp_out_schema = ChirpOutSchema()
chirps_out_schema = ChirpOutSchema(many=True)

SORT_ORDERS = {
    "asc": Chirp.created_at.asc(),
    "desc": Chirp.created_at.desc(),
}


def parse_uuid(value: str, name: str) -> str:
    try:
        return str(uuid.UUID(value))
    except (TypeError, ValueError):
        abort(400, description=f"Invalid {name}")


def parse_sort():
    sort = request.args.get("sort", "asc").lower()
    if sort not in SORT_ORDERS:
        abort(400, description="Unsupported sort order. Allowed: asc, desc")
    return SORT_ORDERS[sort]


def get_chirp_or_404(chirp_id: str) -> Chirp:
    chirp = storage.get(Chirp, parse_uuid(chirp_id, "chirp ID"))
    if not chirp:
        abort(404, description="Chirp not found")
    return chirp


@bp.post("/chirps")
@jwt_required()
def create_chirp():
    """
    Post a chirp as the current user
    ---
    tags:
      - Chirps
    security:
      - Bearer: []
    consumes:
      - application/json
    parameters:
      - in: body
        name: body
        required: true
        schema:
          type: object
          properties:
            body: { type: string, maxLength: 140 }
    responses:
      201:
        description: Created
      400:
        description: Chirp is too long
      401:
        description: Unauthorized
      422:
        description: Validation error
    """
    data = chirp_create_schema.load(request.get_json(silent=True) or {})
    if len(data["body"]) > current_app.config["CHIRP_MAX_LENGTH"]:
        abort(400, description="Chirp is too long")

    chirp = Chirp(body=replace_profane(data["body"]), user_id=g.current_user.id)
    storage.new(chirp)
    storage.save()
    return jsonify(chirp_out_schema.dump(chirp)), 201


@bp.get("/chirps")
def list_chirps():
    """
    List chirps by creation time
    ---
    tags:
      - Chirps
    parameters:
      - in: query
        name: author_id
        type: string
        description: Only chirps by this user
      - in: query
        name: sort
        type: string
        default: asc
        description: "Allowed: asc or desc"
    responses:
      200: { description: OK }
      400: { description: Invalid author_id or sort }
    """
    session = storage.get_session()
    order_by = parse_sort()

    query = session.query(Chirp)
    author_id = request.args.get("author_id")
    if author_id:
        query = query.filter(Chirp.user_id == parse_uuid(author_id, "author_id"))

    rows = query.order_by(order_by).all()
    return jsonify(chirps_out_schema.dump(rows)), 200


@bp.get("/chirps/<chirp_id>")
def get_chirp(chirp_id: str):
    """
    Get a chirp by id
    ---
    tags:
      - Chirps
    parameters:
      - in: path
        name: chirp_id
        type: string
        required: true
    responses:
      200: { description: OK }
      400: { description: Invalid chirp ID }
      404: { description: Not found }
    """
    return jsonify(chirp_out_schema.dump(get_chirp_or_404(chirp_id))), 200


@bp.delete("/chirps/<chirp_id>")
@jwt_required()
def delete_chirp(chirp_id: str):
    """
    Delete one of the current user's chirps
    ---
    tags:
      - Chirps
    security:
      - Bearer: []
    parameters:
      - in: path
        name: chirp_id
        type: string
        required: true
    responses:
      204: { description: Deleted }
      400: { description: Invalid chirp ID }
      401: { description: Unauthorized }
      403: { description: Not the author }
      404: { description: Not found }
    """
    chirp = get_chirp_or_404(chirp_id)
    if chirp.user_id != g.current_user.id:
        logger.info("User %s tried to delete chirp %s", g.current_user.id, chirp.id)
        abort(403, description="You are not authorized to delete this chirp")

    chirp.delete()
    return ("", 204)

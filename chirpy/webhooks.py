from __future__ import annotations

import logging
import uuid

from flask import Blueprint, request, abort

from models import storage
from models.user import User
from models.schemas.webhook import PolkaWebhookSchema
from utils.decorators import api_key_required

logger = logging.getLogger(__name__)

bp = Blueprint("webhooks", __name__)

UPGRADE_EVENT = "user.upgraded"

webhook_schema = PolkaWebhookSchema()


@bp.post("/polka/webhooks")
@api_key_required("POLKA_KEY")
def polka_webhook():
    """
    Polka payment events; "user.upgraded" turns on Chirpy Red
    ---
    tags:
      - Webhooks
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
            event: { type: string, example: user.upgraded }
            data:
              type: object
              properties:
                user_id: { type: string }
    responses:
      204: { description: Handled or ignored }
      400: { description: Invalid user_id }
      401: { description: Missing or wrong API key }
      404: { description: Unknown user }
    """
    data = webhook_schema.load(request.get_json(silent=True) or {})
    if data["event"] != UPGRADE_EVENT:
        logger.info("Ignoring webhook event %r", data["event"])
        return ("", 204)

    try:
        user_id = str(uuid.UUID(data["data"].get("user_id") or ""))
    except ValueError:
        abort(400, description="Invalid user_id")

    user = storage.get(User, user_id)
    if not user:
        abort(404, description="User not found")

    user.is_chirpy_red = True
    user.save()
    logger.info("User %s upgraded to Chirpy Red", user.id)
    return ("", 204)

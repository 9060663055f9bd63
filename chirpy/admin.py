import logging

from flask import Blueprint, abort, current_app

from models import storage
from models.user import User
from .metrics import hit_counter

logger = logging.getLogger(__name__)

bp = Blueprint("admin", __name__, url_prefix="/admin")

METRICS_TEMPLATE = """
<html>
  <body>
    <h1>Welcome, Chirpy Admin</h1>
    <p>Chirpy has been visited {hits} times!</p>
  </body>
</html>
"""


@bp.get("/metrics")
def metrics():
    """
    File server visit count
    ---
    tags:
      - Admin
    produces:
      - text/html
    responses:
      200:
        description: HTML page with the number of /app/ visits
    """
    html = METRICS_TEMPLATE.format(hits=hit_counter().value)
    return html, 200, {"Content-Type": "text/html; charset=utf-8"}


@bp.post("/reset")
def reset():
    """
    Reset the visit counter and delete every user (dev platform only)
    ---
    tags:
      - Admin
    responses:
      200:
        description: Counter and users reset
      403:
        description: Not running on the dev platform
    """
    if current_app.config.get("PLATFORM") != "dev":
        abort(403, description="Reset is only allowed in development mode")

    hit_counter().reset()
    # chirps and refresh tokens go with their users (ON DELETE CASCADE)
    storage.delete_all(User)
    logger.warning("Hit counter and users table reset")
    return "Hits counter and user table reset", 200, {"Content-Type": "text/plain; charset=utf-8"}

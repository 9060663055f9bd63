import os

from flask import Blueprint, current_app, send_from_directory

from .metrics import hit_counter

bp = Blueprint("fileserver", __name__)


@bp.before_request
def count_hit():
    hit_counter().increment()


@bp.get("/app/")
@bp.get("/app/<path:filename>")
def serve(filename: str = "index.html"):
    """
    Static files under FILESERVER_ROOT; every request counts as a visit
    ---
    tags:
      - App
    parameters:
      - in: path
        name: filename
        type: string
        required: false
    responses:
      200:
        description: File contents
      404:
        description: Not found
    """
    root = os.path.abspath(current_app.config["FILESERVER_ROOT"])
    if filename.endswith("/"):
        filename += "index.html"
    return send_from_directory(root, filename)

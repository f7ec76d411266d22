import logging
import os

from flask import current_app, send_from_directory

from app.routes.main import bp

logger = logging.getLogger(__name__)

ENTRY_DOCUMENT = "index.html"


@bp.route("/health")
def health():
    """Liveness probe"""
    return "", 200


@bp.route("/")
def index():
    return send_from_directory(current_app.static_folder, ENTRY_DOCUMENT)


@bp.route("/<path:path>")
def spa(path):
    """Serve a static asset if one exists, otherwise the single-page entry document"""
    static_folder = current_app.static_folder
    candidate = os.path.join(static_folder, path)
    if os.path.isfile(candidate):
        return send_from_directory(static_folder, path)

    logger.debug(f"Client route fallback for /{path}")
    return send_from_directory(static_folder, ENTRY_DOCUMENT)

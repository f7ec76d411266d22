import logging
from functools import wraps

from flask import jsonify, make_response, request

from app import get_backend, get_lockout
from app.routes.api import bp
from app.services.pick_backend import BackendError

logger = logging.getLogger(__name__)


def no_store(f):
    """Mark relayed backend data as uncacheable, on success and on failure"""

    @wraps(f)
    def decorated_function(*args, **kwargs):
        response = make_response(f(*args, **kwargs))
        response.headers["Cache-Control"] = "no-store"
        return response

    return decorated_function


def _json_body():
    """Request JSON as a dict; anything else counts as an empty body"""
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


@bp.route("/fights")
@no_store
def fights():
    """Get the current fight card"""
    try:
        return jsonify(get_backend().fetch_fights())
    except BackendError as e:
        logger.error(f"Error fetching fights: {e}")
        return jsonify({"error": "Failed to fetch fights"}), 500


@bp.route("/submit", methods=["POST"])
@no_store
def submit():
    """Forward a pick submission unless the card is locked"""
    data = _json_body()
    lockout = get_lockout()

    if lockout.is_locked():
        logger.info(f"Rejected submission from {data.get('username')!r}: picks locked")
        return jsonify({"success": False, "error": lockout.message})

    try:
        result = get_backend().submit_picks(data)
    except BackendError as e:
        logger.error(f"Error submitting picks for {data.get('username')!r}: {e}")
        return jsonify({"error": "Failed to submit picks"}), 500

    count = len(data["picks"]) if isinstance(data.get("picks"), list) else 0
    logger.info(f"Forwarded {count} picks for {data.get('username')!r}")
    return jsonify(result)


@bp.route("/picks", methods=["POST"])
@no_store
def picks():
    """Get one user's submitted picks"""
    data = _json_body()
    try:
        return jsonify(get_backend().fetch_user_picks(data))
    except BackendError as e:
        logger.error(f"Error fetching picks for {data.get('username')!r}: {e}")
        return jsonify({"error": "Failed to fetch picks"}), 500


@bp.route("/leaderboard", methods=["POST"])
@no_store
def leaderboard():
    """Get weekly scores and the champion of the week"""
    try:
        return jsonify(get_backend().fetch_leaderboard())
    except BackendError as e:
        logger.error(f"Error fetching leaderboard: {e}")
        return jsonify({"error": "Failed to fetch leaderboard"}), 500


@bp.route("/hall")
@no_store
def hall():
    """Get the all-time hall of fame"""
    try:
        return jsonify(get_backend().fetch_hall())
    except BackendError as e:
        # Empty list rather than {"error": ...}; existing clients rely on an array here
        logger.error(f"Error fetching hall of fame: {e}")
        return jsonify([]), 500


@bp.route("/lockout")
@no_store
def lockout():
    """Report whether pick submission is closed"""
    return jsonify(get_lockout().to_dict())

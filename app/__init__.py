import logging
import os

from flask import Flask, current_app, jsonify, request

from config import config

logger = logging.getLogger(__name__)


def create_app(config_name=None, backend=None):
    app = Flask(__name__)

    # Determine configuration
    if config_name is None:
        config_name = os.environ.get("FLASK_CONFIG", "default")

    app.config.from_object(config[config_name]())

    # Setup logging
    from app.utils.logging_config import setup_logging

    setup_logging(app)

    # Lockout and backend client are built once and never mutated afterwards
    from app.services.pick_backend import PickBackend
    from app.utils.lockout import Lockout
    from app.utils.timezone_utils import get_timezone

    app.extensions["lockout"] = Lockout(
        app.config["LOCKOUT_AT"],
        get_timezone(app.config.get("TIMEZONE", "UTC")),
        message=app.config.get("LOCKOUT_MESSAGE"),
    )
    app.extensions["pick_backend"] = backend or PickBackend(
        app.config["REMOTE_SCRIPT_URL"],
        timeout=app.config.get("REMOTE_TIMEOUT"),
    )

    # Import and register blueprints
    from app.routes.api import bp as api_bp

    app.register_blueprint(api_bp, url_prefix="/api")

    from app.routes.main import bp as main_bp

    app.register_blueprint(main_bp)

    # Register error handlers
    register_error_handlers(app)

    show_config_warnings(app, config_name)

    return app


def get_backend():
    """Backend client of the current application"""
    return current_app.extensions["pick_backend"]


def get_lockout():
    """Lockout gate of the current application"""
    return current_app.extensions["lockout"]


def show_config_warnings(app, config_name):
    """Log the effective configuration"""
    lockout = app.extensions["lockout"]

    logger.info(f"Fight Picks starting with '{config_name}' configuration")

    if config_name == "production" and app.config.get("DEBUG"):
        logger.warning("DEBUG mode is enabled in production!")

    logger.info(f"Remote backend: {app.config['REMOTE_SCRIPT_URL']}")
    if lockout.is_locked():
        logger.info(f"Picks are locked (since {lockout.lockout_at.isoformat()})")
    else:
        logger.info(f"Picks open until {lockout.lockout_at.isoformat()}")


def register_error_handlers(app):
    """Register global error handlers"""

    @app.after_request
    def after_request(response):
        # Add security headers to all responses
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        response.headers["X-XSS-Protection"] = "1; mode=block"

        # Add Strict-Transport-Security in production
        if not app.config.get("DEBUG") and not app.config.get("TESTING"):
            response.headers["Strict-Transport-Security"] = (
                "max-age=31536000; includeSubDomains"
            )

        # Content Security Policy
        csp_directives = [
            "default-src 'self'",
            "script-src 'self'",
            "style-src 'self' 'unsafe-inline'",
            "img-src 'self' data:",
            "connect-src 'self'",
            "frame-ancestors 'none'",
            "base-uri 'self'",
            "form-action 'self'",
        ]
        response.headers["Content-Security-Policy"] = "; ".join(csp_directives)

        return response

    @app.errorhandler(404)
    def not_found_error(error):
        if request.path.startswith("/api/"):
            return jsonify({"error": "Resource not found"}), 404
        return "Not found", 404

    @app.errorhandler(405)
    def method_not_allowed_error(error):
        if request.path.startswith("/api/"):
            return jsonify({"error": "Method not allowed"}), 405
        return "Method not allowed", 405

    @app.errorhandler(500)
    def internal_error(error):
        logger.error(f"Unhandled error on {request.method} {request.path}: {error}")
        if request.path.startswith("/api/"):
            return jsonify({"error": "Internal server error"}), 500
        return "Internal server error", 500

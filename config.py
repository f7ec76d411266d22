import os
import warnings

from dotenv import load_dotenv

basedir = os.path.abspath(os.path.dirname(__file__))
load_dotenv(os.path.join(basedir, ".env"))

DEFAULT_REMOTE_SCRIPT_URL = (
    "https://script.google.com/macros/s/"
    "AKfycbzFightPicksBackendDeploymentId/exec"
)
DEFAULT_LOCKOUT_AT = "2025-10-25T18:00:00-04:00"


def _env_bool(name, default):
    return os.environ.get(name, default).lower() in ["true", "on", "1"]


class Config:
    # Remote scripting backend
    REMOTE_SCRIPT_URL = os.environ.get("REMOTE_SCRIPT_URL") or DEFAULT_REMOTE_SCRIPT_URL
    _remote_timeout = os.environ.get("REMOTE_TIMEOUT")
    REMOTE_TIMEOUT = float(_remote_timeout) if _remote_timeout else None

    # Pick lockout
    LOCKOUT_AT = os.environ.get("LOCKOUT_AT") or DEFAULT_LOCKOUT_AT
    LOCKOUT_MESSAGE = os.environ.get("LOCKOUT_MESSAGE")
    TIMEZONE = os.environ.get("TIMEZONE", "America/New_York")

    # Server
    PORT = int(os.environ.get("PORT") or 3000)

    # Logging configuration
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
    LOG_TO_CONSOLE = _env_bool("LOG_TO_CONSOLE", "True")
    LOG_TO_FILE = _env_bool("LOG_TO_FILE", "True")
    LOG_DIR = os.environ.get("LOG_DIR", "logs")

    # Environment detection
    FLASK_ENV = os.environ.get("FLASK_ENV", "development")
    DEBUG = FLASK_ENV == "development"
    TESTING = False


class DevelopmentConfig(Config):
    """Development configuration with helpful defaults"""

    DEBUG = True


class ProductionConfig(Config):
    """Production configuration"""

    DEBUG = False

    def __init__(self):
        if not os.environ.get("REMOTE_SCRIPT_URL"):
            warnings.warn(
                "🚨 PRODUCTION WARNING: REMOTE_SCRIPT_URL not explicitly set! "
                "Using the compiled-in backend deployment.",
                UserWarning,
            )
        if not os.environ.get("LOCKOUT_AT"):
            warnings.warn(
                "🚨 PRODUCTION WARNING: LOCKOUT_AT not explicitly set! "
                f"Falling back to {DEFAULT_LOCKOUT_AT}.",
                UserWarning,
            )


class TestingConfig(Config):
    """Testing configuration"""

    TESTING = True
    DEBUG = False
    REMOTE_SCRIPT_URL = "https://backend.test/exec"
    REMOTE_TIMEOUT = None
    LOCKOUT_AT = "2999-01-01T00:00:00+00:00"
    LOCKOUT_MESSAGE = None
    TIMEZONE = "America/New_York"
    LOG_TO_FILE = False
    LOG_TO_CONSOLE = False


# Configuration mapping
config = {
    "development": DevelopmentConfig,
    "production": ProductionConfig,
    "testing": TestingConfig,
    "default": DevelopmentConfig,
}

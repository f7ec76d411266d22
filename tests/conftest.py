"""Shared fixtures for the Fight Picks test suite."""
import os
from unittest.mock import MagicMock

# Must be set before manage.py (which builds an app at import time) is imported
os.environ.setdefault("FLASK_CONFIG", "testing")

import pytest  # noqa: E402

from app import create_app  # noqa: E402
from app.services.pick_backend import PickBackend  # noqa: E402
from app.utils.lockout import Lockout  # noqa: E402
from app.utils.timezone_utils import get_timezone  # noqa: E402


@pytest.fixture
def backend():
    """Stand-in for the remote scripting backend."""
    return MagicMock(spec=PickBackend)


@pytest.fixture
def app(backend):
    """Application with picks still open."""
    return create_app("testing", backend=backend)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def locked_app(app):
    """Application whose lockout instant is already in the past."""
    app.extensions["lockout"] = Lockout(
        "2020-01-01T00:00:00+00:00", get_timezone("America/New_York")
    )
    return app


@pytest.fixture
def locked_client(locked_app):
    return locked_app.test_client()

"""Tests for the remote backend client."""
from unittest.mock import MagicMock

import pytest
import requests

from app.services.pick_backend import BackendError, PickBackend

URL = "https://backend.test/exec"


def _response(payload=None, status=200, json_error=None):
    response = MagicMock()
    response.status_code = status
    if status >= 400:
        response.raise_for_status.side_effect = requests.exceptions.HTTPError(
            f"{status} Server Error", response=response
        )
    if json_error is not None:
        response.json.side_effect = json_error
    else:
        response.json.return_value = payload
    return response


@pytest.fixture
def session():
    session = MagicMock()
    session.headers = {}
    return session


@pytest.fixture
def backend(session):
    return PickBackend(URL, session=session)


class TestReads:
    """GET actions."""

    def test_fetch_fights(self, backend, session):
        fights = [{"fight": "Main Event", "fighter1": "A", "fighter2": "B"}]
        session.get.return_value = _response(fights)

        assert backend.fetch_fights() == fights
        session.get.assert_called_once_with(URL, params={"action": "getFights"}, timeout=None)

    def test_fetch_hall(self, backend, session):
        session.get.return_value = _response([])

        assert backend.fetch_hall() == []
        session.get.assert_called_once_with(URL, params={"action": "getHall"}, timeout=None)

    def test_timeout_is_passed_through(self, session):
        backend = PickBackend(URL, timeout=5.0, session=session)
        session.get.return_value = _response([])

        backend.fetch_fights()

        assert session.get.call_args.kwargs["timeout"] == 5.0


class TestWrites:
    """POST actions."""

    def test_submit_adds_action_and_nothing_else(self, backend, session):
        payload = {
            "username": "alice",
            "picks": [{"fight": "Main Event", "winner": "Fighter A", "method": "Decision"}],
        }
        session.post.return_value = _response({"success": True})

        assert backend.submit_picks(payload) == {"success": True}
        session.post.assert_called_once_with(
            URL, json={"action": "submitPicks", **payload}, timeout=None
        )

    def test_submit_does_not_mutate_payload(self, backend, session):
        payload = {"username": "alice", "picks": []}
        session.post.return_value = _response({"success": True})

        backend.submit_picks(payload)

        assert payload == {"username": "alice", "picks": []}

    def test_fetch_user_picks(self, backend, session):
        session.post.return_value = _response({"success": True, "picks": []})

        backend.fetch_user_picks({"username": "alice"})

        session.post.assert_called_once_with(
            URL, json={"action": "getUserPicks", "username": "alice"}, timeout=None
        )

    def test_fetch_leaderboard(self, backend, session):
        session.post.return_value = _response({"scores": {}})

        assert backend.fetch_leaderboard() == {"scores": {}}
        session.post.assert_called_once_with(
            URL, json={"action": "getLeaderboard"}, timeout=None
        )


class TestFailures:
    """Every failure mode surfaces as BackendError."""

    def test_connection_error(self, backend, session):
        session.get.side_effect = requests.exceptions.ConnectionError("refused")

        with pytest.raises(BackendError) as exc_info:
            backend.fetch_fights()

        assert exc_info.value.action == "getFights"
        assert isinstance(exc_info.value.__cause__, requests.exceptions.ConnectionError)

    def test_timeout(self, backend, session):
        session.post.side_effect = requests.exceptions.Timeout()

        with pytest.raises(BackendError, match="timed out"):
            backend.fetch_leaderboard()

    def test_http_error(self, backend, session):
        session.post.return_value = _response(status=502)

        with pytest.raises(BackendError, match="HTTP 502"):
            backend.submit_picks({"username": "alice", "picks": []})

    def test_malformed_json(self, backend, session):
        session.get.return_value = _response(json_error=ValueError("Expecting value"))

        with pytest.raises(BackendError, match="malformed response"):
            backend.fetch_hall()


def test_user_agent_is_set(session):
    PickBackend(URL, session=session)
    assert session.headers["User-Agent"].startswith("Fight-Picks-Proxy/")

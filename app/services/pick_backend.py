import logging

import requests

logger = logging.getLogger(__name__)


class BackendError(Exception):
    """Raised when the remote scripting backend cannot produce a usable answer"""

    def __init__(self, action, message):
        super().__init__(f"{action}: {message}")
        self.action = action


class PickBackend:
    """
    Client for the remote scripting backend that owns fights, picks and scores.

    All knowledge of the remote request/response contract lives here: reads
    are GET requests with an ``action`` query parameter, writes are POSTed
    JSON bodies carrying an ``action`` key. Responses are returned as parsed
    JSON without further interpretation.
    """

    def __init__(self, url, timeout=None, session=None):
        self.url = url
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({"User-Agent": "Fight-Picks-Proxy/1.0"})

    def _request(self, action, method="GET", payload=None):
        """Issue one request to the backend and decode its JSON body"""
        logger.debug(f"Backend {method} action={action}")

        try:
            if method == "GET":
                response = self.session.get(
                    self.url, params={"action": action}, timeout=self.timeout
                )
            else:
                body = dict(payload or {})
                body["action"] = action
                response = self.session.post(self.url, json=body, timeout=self.timeout)
            response.raise_for_status()
            return response.json()

        except requests.exceptions.Timeout as e:
            logger.warning(f"Backend timeout for action={action}")
            raise BackendError(action, "request timed out") from e
        except requests.exceptions.ConnectionError as e:
            logger.warning(f"Backend connection error for action={action}: {e}")
            raise BackendError(action, "backend unreachable") from e
        except requests.exceptions.HTTPError as e:
            status = e.response.status_code if e.response is not None else "?"
            logger.warning(f"Backend HTTP error {status} for action={action}")
            raise BackendError(action, f"HTTP {status}") from e
        except requests.exceptions.JSONDecodeError as e:
            logger.warning(f"Backend returned non-JSON body for action={action}")
            raise BackendError(action, "malformed response") from e
        except requests.exceptions.RequestException as e:
            logger.warning(f"Backend request failed for action={action}: {e}")
            raise BackendError(action, str(e)) from e
        except ValueError as e:
            logger.warning(f"Backend returned non-JSON body for action={action}")
            raise BackendError(action, "malformed response") from e

    def fetch_fights(self):
        """Current fight card: ``[{fight, fighter1, fighter2, ...}]``"""
        return self._request("getFights")

    def submit_picks(self, payload):
        """Forward a ``{username, picks}`` submission unchanged apart from ``action``"""
        return self._request("submitPicks", method="POST", payload=payload)

    def fetch_user_picks(self, payload):
        return self._request("getUserPicks", method="POST", payload=payload)

    def fetch_leaderboard(self):
        return self._request("getLeaderboard", method="POST")

    def fetch_hall(self):
        return self._request("getHall")

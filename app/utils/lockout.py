"""
Pick submission lockout.

A single instant, fixed at startup, after which the proxy stops forwarding
pick submissions to the backend.
"""

from datetime import datetime

from app.utils.timezone_utils import convert_to_utc, format_deadline, get_utc_time


def parse_lockout(value, tz):
    """Parse an ISO-8601 lockout instant; naive values are read in ``tz``"""
    if isinstance(value, datetime):
        dt = value
    else:
        try:
            dt = datetime.fromisoformat(str(value).strip())
        except ValueError as e:
            raise ValueError(f"Invalid LOCKOUT_AT value: {value!r}") from e
    return convert_to_utc(dt, tz)


class Lockout:
    """Read-only lockout gate shared by every request"""

    __slots__ = ("_lockout_at", "_message", "_tz")

    def __init__(self, lockout_at, tz, message=None):
        self._tz = tz
        self._lockout_at = parse_lockout(lockout_at, tz)
        self._message = message or (
            "Picks are locked. Submissions closed "
            f"{format_deadline(self._lockout_at, tz)}."
        )

    @property
    def lockout_at(self):
        return self._lockout_at

    @property
    def message(self):
        return self._message

    def is_locked(self, now=None):
        """True once ``now`` (default: current UTC time) reaches the lockout instant"""
        now = get_utc_time() if now is None else convert_to_utc(now, self._tz)
        return now >= self._lockout_at

    def to_dict(self, now=None):
        return {
            "locked": self.is_locked(now),
            "lockout_at": self._lockout_at.isoformat(),
        }

    def __repr__(self):
        return f"<Lockout {self._lockout_at.isoformat()}>"

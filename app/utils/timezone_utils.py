"""
Timezone utility functions for the Fight Picks application
"""

from datetime import datetime, timezone

import pytz
from flask import current_app, has_app_context


def get_timezone(timezone_name=None):
    """Resolve a timezone name, falling back to the app setting and then UTC"""
    if timezone_name is None:
        timezone_name = (
            current_app.config.get("TIMEZONE", "UTC") if has_app_context() else "UTC"
        )
    try:
        return pytz.timezone(timezone_name)
    except pytz.UnknownTimeZoneError:
        # Fallback to UTC if timezone is invalid
        return pytz.UTC


def get_utc_time():
    """Get current time in UTC"""
    return datetime.now(timezone.utc)


def convert_to_utc(dt, tz=None):
    """Convert a datetime to UTC"""
    # If datetime is naive, assume it's in the given (or application) timezone
    if dt.tzinfo is None:
        dt = (tz or get_timezone()).localize(dt)

    return dt.astimezone(timezone.utc)


def format_deadline(dt, tz=None, format_str="%a %m/%d at %I:%M %p %Z"):
    """Format a deadline in the given (or application) timezone"""
    local = convert_to_utc(dt).astimezone(tz or get_timezone())
    return local.strftime(format_str)

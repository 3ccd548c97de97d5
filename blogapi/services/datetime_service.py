"""Date helpers: filename dates -> timezone-aware datetimes."""

from __future__ import annotations

from datetime import datetime, timezone

import pendulum


def resolve_timezone(name: str | None = None) -> pendulum.Timezone | pendulum.FixedTimezone:
    """Return the named IANA timezone, or the host's local zone when *name* is empty."""
    if name:
        return pendulum.timezone(name)
    return pendulum.local_timezone()


def local_midnight(year: int, month: int, day: int, tz: str | None = None) -> datetime:
    """Build midnight of the given calendar date in *tz*.

    *month* is the calendar month (1-12).  Raises ValueError for dates that
    do not exist, e.g. 2017-02-30.
    """
    return pendulum.datetime(year, month, day, tz=resolve_timezone(tz))


def format_iso(dt: datetime) -> str:
    """Format datetime as ISO 8601 for JSON serialization."""
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.isoformat()

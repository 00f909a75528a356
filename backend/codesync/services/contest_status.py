from __future__ import annotations
from datetime import datetime, timezone as dt_tz
from typing import Literal

ContestStatus = Literal["upcoming", "running", "finished"]


def _as_utc(dt: datetime) -> datetime:
    # Naive timestamps are taken to be UTC
    return dt.replace(tzinfo=dt_tz.utc) if dt.tzinfo is None else dt


def compute_status(now: datetime, start_time: datetime, end_time: datetime) -> ContestStatus:
    """
    Derive a contest's status from the clock. Never stored.

    Both boundaries belong to the running phase:

        >>> from datetime import datetime, timezone
        >>> t = datetime(2025, 1, 10, 12, tzinfo=timezone.utc)
        >>> compute_status(t, t, t)
        'running'
    """
    now, start_time, end_time = _as_utc(now), _as_utc(start_time), _as_utc(end_time)
    if now < start_time:
        return "upcoming"
    if now > end_time:
        return "finished"
    return "running"

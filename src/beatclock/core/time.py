from __future__ import annotations
from datetime import date, datetime, timedelta, timezone
from typing import Optional, Union
import re

MS_PER_HOUR = 3_600_000
MS_PER_DAY = 86_400_000

UNIX_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
JD_UNIX_EPOCH = 2440587.5  # JD at 1970-01-01 00:00:00 UTC

_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")

def as_instant(dt: datetime) -> datetime:
    """Normalize to an aware UTC datetime truncated to whole milliseconds.

    Naive datetimes are read as UTC.
    """
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    else:
        dt = dt.astimezone(timezone.utc)
    return dt.replace(microsecond=(dt.microsecond // 1000) * 1000)


def epoch_ms(dt: datetime) -> int:
    """Integer milliseconds since the Unix epoch."""
    delta = as_instant(dt) - UNIX_EPOCH
    return (delta.days * 86400 + delta.seconds) * 1000 + delta.microseconds // 1000


def from_epoch_ms(ms: int) -> datetime:
    return UNIX_EPOCH + timedelta(milliseconds=ms)


def ms_of_day(dt: datetime) -> int:
    """Milliseconds elapsed since UTC midnight."""
    dt = as_instant(dt)
    return ((dt.hour * 60 + dt.minute) * 60 + dt.second) * 1000 + dt.microsecond // 1000


def jd_to_instant(jd: float) -> datetime:
    """JD (UTC scale) -> aware UTC datetime, rounded to the millisecond."""
    return from_epoch_ms(round((jd - JD_UNIX_EPOCH) * MS_PER_DAY))


def instant_to_jd(dt: datetime) -> float:
    return JD_UNIX_EPOCH + epoch_ms(dt) / MS_PER_DAY


def parse_instant(text: Union[str, datetime, date]) -> Optional[datetime]:
    """
    Parse a calendar date/time into an Instant.

    Accepts ``YYYY-MM-DD`` (midnight UTC), any ISO 8601 string understood by
    ``datetime.fromisoformat`` (a trailing ``Z`` is accepted), or date/datetime
    objects. Returns None when the input cannot be read.
    """
    if isinstance(text, datetime):
        return as_instant(text)
    if isinstance(text, date):
        return datetime(text.year, text.month, text.day, tzinfo=timezone.utc)
    if not isinstance(text, str):
        return None

    s = text.strip()
    if not s:
        return None
    if s[-1] in "zZ":
        s = s[:-1] + "+00:00"
    try:
        if _DATE_RE.match(s):
            y, m, d = map(int, s.split("-"))
            return datetime(y, m, d, tzinfo=timezone.utc)
        return as_instant(datetime.fromisoformat(s))
    except ValueError:
        return None

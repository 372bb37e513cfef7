from __future__ import annotations

import logging
import re
from datetime import date, datetime, timezone
from typing import Any, Iterable, Optional

logger = logging.getLogger(__name__)

# Average Gregorian year, so leap days don't skew long careers.
DAYS_PER_YEAR = 365.25

_YEAR_RE = re.compile(r"^\d{4}$")
_YEAR_MONTH_RE = re.compile(r"^(\d{4})-(\d{1,2})$")

# Free-text end dates meaning "still there" (CV parsing emits "Present").
_OPEN_ENDED = {"present", "current", "now", "ongoing"}


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def parse_date(value: Any) -> datetime:
    """
    Parse the date shapes profile records carry into an aware UTC datetime.

    Accepts date/datetime objects, "YYYY", "YYYY-MM" (first of the month)
    and ISO 8601 dates or timestamps. Raises ValueError for anything else.
    """
    if isinstance(value, datetime):
        return _as_utc(value)
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day, tzinfo=timezone.utc)
    if not isinstance(value, str):
        raise ValueError(f"unsupported date value: {value!r}")

    raw = value.strip()
    if _YEAR_RE.match(raw):
        return datetime(int(raw), 1, 1, tzinfo=timezone.utc)
    m = _YEAR_MONTH_RE.match(raw)
    if m:
        return datetime(int(m.group(1)), int(m.group(2)), 1, tzinfo=timezone.utc)
    if raw.endswith("Z"):
        raw = raw[:-1] + "+00:00"
    return _as_utc(datetime.fromisoformat(raw))


def is_open_ended(value: Any) -> bool:
    if value is None:
        return True
    return isinstance(value, str) and (not value.strip() or value.strip().lower() in _OPEN_ENDED)


def years_between(start: datetime, end: datetime) -> float:
    days = (end - start).total_seconds() / 86400.0
    return days / DAYS_PER_YEAR


def years_of_experience(entry: Any, *, now: Optional[datetime] = None) -> float:
    """
    Years spent in one work-history entry.

    Current positions (or ones with no end date) run until `now`.
    Bad dates, or an end before the start, count as 0 years.
    """
    try:
        start = parse_date(entry.start_date)
        if entry.is_current or is_open_ended(entry.end_date):
            end = _as_utc(now) if now is not None else utc_now()
        else:
            end = parse_date(entry.end_date)
    except (ValueError, TypeError, OverflowError) as exc:
        logger.debug("Ignoring experience entry with unusable dates %r: %s", entry, exc)
        return 0.0

    years = years_between(start, end)
    return years if years > 0 else 0.0


def total_years_of_experience(entries: Iterable[Any], *, now: Optional[datetime] = None) -> float:
    # Overlapping positions are summed as-is.
    pinned = now if now is not None else utc_now()
    return sum(years_of_experience(e, now=pinned) for e in entries or [])

"""Date parsing utilities for experience and activity recency."""

import re
from datetime import date, datetime, timedelta

# Pattern to match 4-digit years (1900-2099)
YEAR_PATTERN = re.compile(r"\b(19|20)\d{2}\b")

# ISO dates: 2021-03-15 or 2021-03
ISO_PATTERN = re.compile(r"\b((?:19|20)\d{2})-(\d{1,2})(?:-(\d{1,2}))?\b")

# Terms indicating current/ongoing employment
PRESENT_TERMS = {"present", "current", "now", "ongoing"}

MONTHS = {
    name: index
    for index, names in enumerate(
        [
            ("jan", "january"),
            ("feb", "february"),
            ("mar", "march"),
            ("apr", "april"),
            ("may",),
            ("jun", "june"),
            ("jul", "july"),
            ("aug", "august"),
            ("sep", "sept", "september"),
            ("oct", "october"),
            ("nov", "november"),
            ("dec", "december"),
        ],
        start=1,
    )
    for name in names
}


def is_ongoing(value: str | None) -> bool:
    """Check whether a date string means the period has not ended."""
    if value is None:
        return False
    lowered = value.lower().strip()
    return any(term in lowered for term in PRESENT_TERMS)


def parse_partial_date(value: str | None) -> date | None:
    """Parse the loose date strings people type into CV forms.

    Args:
        value: Date string like "2021-03-15", "2021-03", "March 2021", "2021".

    Returns:
        The date (first day of month/year where unspecified), or None if the
        value is empty, ongoing or unparseable.

    Examples:
        >>> parse_partial_date("2021-03-15")
        datetime.date(2021, 3, 15)
        >>> parse_partial_date("December 2021")
        datetime.date(2021, 12, 1)
        >>> parse_partial_date("Present") is None
        True
    """
    if not value or is_ongoing(value):
        return None

    iso = ISO_PATTERN.search(value)
    if iso:
        year, month, day = int(iso.group(1)), int(iso.group(2)), int(iso.group(3) or 1)
        try:
            return date(year, month, day)
        except ValueError:
            return None

    year_match = YEAR_PATTERN.search(value)
    if not year_match:
        return None
    year = int(year_match.group())

    month = 1
    for word in re.findall(r"[a-z]+", value.lower()):
        if word in MONTHS:
            month = MONTHS[word]
            break
    return date(year, month, 1)


def _align(moment: datetime, now: datetime) -> datetime:
    """Make a datetime comparable with ``now`` (both naive or both aware)."""
    if moment.tzinfo is not None and now.tzinfo is None:
        return moment.replace(tzinfo=None)
    if moment.tzinfo is None and now.tzinfo is not None:
        return moment.replace(tzinfo=now.tzinfo)
    return moment


def is_recent(moment: date | datetime | None, days: int, now: datetime | None = None) -> bool:
    """Check whether a date falls within the last ``days`` days."""
    if moment is None:
        return False
    now = now or datetime.now()
    if isinstance(moment, datetime):
        return _align(moment, now) > now - timedelta(days=days)
    return moment > (now - timedelta(days=days)).date()


def describe_elapsed(moment: datetime, now: datetime | None = None) -> str:
    """Describe how long ago something happened ("Today", "3 days ago", ...)."""
    now = now or datetime.now()
    diff_days = (now - _align(moment, now)).days

    if diff_days <= 0:
        return "Today"
    if diff_days == 1:
        return "Yesterday"
    if diff_days < 7:
        return f"{diff_days} days ago"
    if diff_days < 30:
        return f"{diff_days // 7} weeks ago"
    return f"{diff_days // 30} months ago"

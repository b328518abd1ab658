from __future__ import annotations

from datetime import datetime, timezone

# NetSuite saved searches emit M/D/YYYY, sometimes with a time component.
_DATE_FORMATS = (
    "%m/%d/%Y %I:%M %p",
    "%m/%d/%Y %H:%M",
    "%m/%d/%Y",
)


def parse_date(value: str | None) -> datetime | None:
    """Parse a fulfillment date string, returning None when it cannot be read."""
    if not value:
        return None
    text = value.strip()
    try:
        parsed = datetime.fromisoformat(text.replace("Z", "+00:00"))
        if parsed.tzinfo is not None:
            parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
        return parsed
    except ValueError:
        pass
    for fmt in _DATE_FORMATS:
        try:
            return datetime.strptime(text, fmt)
        except ValueError:
            continue
    return None


def date_sort_key(value: str | None) -> datetime:
    """Sort key that places missing or unreadable dates first."""
    return parse_date(value) or datetime.min


def latest_date(*values: str | None) -> str:
    """Return whichever of the given date strings is the most recent."""
    candidates = [v for v in values if v]
    if not candidates:
        return ""
    return max(candidates, key=date_sort_key)

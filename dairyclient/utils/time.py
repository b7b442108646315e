import re
from datetime import datetime, timezone

ZERO_TIMESTAMP = "0001-01-01T00:00:00Z"

# the store sends up to nine fractional digits; datetime holds six
_FRACTION = re.compile(r"\.(\d{6})\d+")


def parse_rfc3339(ts: str | None) -> datetime | None:
    """Parse an RFC3339 timestamp (with trailing 'Z') to an aware datetime.

    The zero value the store API uses for unset fields maps to None.
    """
    if not ts or ts == ZERO_TIMESTAMP:
        return None
    if ts.endswith("Z"):
        ts = ts[:-1] + "+00:00"
    ts = _FRACTION.sub(r".\1", ts)
    dt = datetime.fromisoformat(ts)
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt


def format_rfc3339(dt: datetime | None) -> str:
    if dt is None:
        return ZERO_TIMESTAMP
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    text = dt.isoformat()
    if text.endswith("+00:00"):
        text = text[:-6] + "Z"
    return text

import re
from datetime import datetime, timezone
from typing import Union

from ghrest.errors import MalformedTimestampError

TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%SZ"

# RFC 3339 date-time; the fraction is matched but never kept
_RFC3339 = re.compile(
    r"^(\d{4}-\d{2}-\d{2})[Tt](\d{2}:\d{2}:\d{2})(?:\.\d+)?([Zz]|[+-]\d{2}:\d{2})$"
)


def normalize_timestamp(value: datetime) -> datetime:
    """
    Bring a datetime to what the wire can carry: aware UTC, whole seconds.
    Naive datetimes are taken to be UTC already.
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).replace(microsecond=0)


def format_timestamp(value: datetime) -> str:
    return normalize_timestamp(value).strftime(TIMESTAMP_FORMAT)


def parse_timestamp(raw: Union[str, int, float]) -> datetime:
    """
    Parse a wire timestamp into an aware UTC datetime.

    Accepts RFC 3339 text with any offset ("2002-02-10T15:30:00Z",
    "2002-02-10T10:30:00-05:00") and integer Unix seconds. The sub-second
    part, if any, is dropped.
    """
    if isinstance(raw, bool):
        raise MalformedTimestampError(raw)
    if isinstance(raw, (int, float)):
        try:
            parsed = datetime.fromtimestamp(int(raw), tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            raise MalformedTimestampError(raw) from None
        return parsed
    if not isinstance(raw, str):
        raise MalformedTimestampError(raw)

    m = _RFC3339.match(raw.strip())
    if not m:
        raise MalformedTimestampError(raw)
    date_part, time_part, offset = m.groups()
    if offset in ("Z", "z"):
        offset = "+00:00"
    try:
        parsed = datetime.fromisoformat(f"{date_part}T{time_part}{offset}")
    except ValueError:
        raise MalformedTimestampError(raw) from None
    return normalize_timestamp(parsed)

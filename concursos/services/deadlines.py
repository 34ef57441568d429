import re
from datetime import date, datetime, time
from typing import Optional, Union

# Формат, в котором приходит application_deadline из Diário da República
_DR_DEADLINE = re.compile(r"^(\d{2})-(\d{2})-(\d{4})\s(\d{2}):(\d{2})$")

Deadline = Union[str, date, datetime, None]


def parse_deadline(value: Deadline) -> Optional[datetime]:
    """Parses "DD-MM-YYYY HH:MM", ISO date / date-time strings and native dates."""
    if value is None:
        return None
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime.combine(value, time.min)

    value = value.strip()
    if not value:
        return None
    match = _DR_DEADLINE.match(value)
    try:
        if match:
            day, month, year, hour, minute = (int(part) for part in match.groups())
            return datetime(year, month, day, hour, minute)
        return datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None


def compute_expired(value: Deadline, now: datetime) -> Optional[bool]:
    """True when the deadline has passed, None when there is no usable deadline."""
    deadline = parse_deadline(value)
    if deadline is None:
        return None
    if deadline.tzinfo is not None and now.tzinfo is None:
        deadline = deadline.astimezone().replace(tzinfo=None)
    elif deadline.tzinfo is None and now.tzinfo is not None:
        now = now.astimezone().replace(tzinfo=None)
    return deadline < now

"""Lenient parsing of raw query-string values.

Listing filters come straight from the browser's URL, so malformed values are
never an error here: numbers and dates that do not parse are treated as absent
and the caller falls back to its default.
"""

from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Optional

TRUE_VALUES = {"true", "1", "yes"}
FALSE_VALUES = {"false", "0", "no"}


def clean_text(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    return value or None


def parse_int(value: Optional[str], default: int, minimum: int = 1, maximum: Optional[int] = None) -> int:
    try:
        number = int(str(value).strip())
    except (TypeError, ValueError):
        return default
    if number < minimum or (maximum is not None and number > maximum):
        return default
    return number


def parse_decimal(value: Optional[str]) -> Optional[Decimal]:
    value = clean_text(value)
    if value is None:
        return None
    try:
        number = Decimal(value)
    except InvalidOperation:
        return None
    return number if number.is_finite() else None


def parse_bool(value: Optional[str], default: bool) -> bool:
    value = clean_text(value)
    if value is None:
        return default
    lowered = value.lower()
    if lowered in TRUE_VALUES:
        return True
    if lowered in FALSE_VALUES:
        return False
    return default


def parse_date(value: Optional[str]) -> Optional[date]:
    """Accepts YYYY-MM-DD or a full ISO date-time; only the calendar day is kept."""
    value = clean_text(value)
    if value is None:
        return None
    try:
        if len(value) == 10:
            return date.fromisoformat(value)
        return datetime.fromisoformat(value.replace("Z", "+00:00")).date()
    except ValueError:
        return None


def parse_choice(value: Optional[str], choices: tuple, default: str) -> str:
    value = clean_text(value)
    if value is None:
        return default
    value = value.lower()
    return value if value in choices else default


def parse_id_list(value: Optional[str]) -> list[int]:
    """"1, 2,x,3" -> [1, 2, 3]"""
    if not value:
        return []
    ids = []
    for part in value.split(","):
        part = part.strip()
        if part.lstrip("-").isdigit():
            ids.append(int(part))
    return ids


def escape_like(value: str, escape: str = "\\") -> str:
    return (
        value.replace(escape, escape * 2)
        .replace("%", escape + "%")
        .replace("_", escape + "_")
    )

"""
Date prettifying with fixed en-US templates.
"""

from datetime import datetime, timezone
from typing import Any, Callable, Dict, Union

from ..core.errors import UnsupportedDataTypeError
from ..core.values import ValueKind, classify
from .consts import DATE_TEMPLATES, MONTH_NAMES, WEEKDAY_NAMES


def _to_datetime(value: Any) -> datetime:
    if isinstance(value, datetime):
        return value
    if classify(value) is ValueKind.NUMBER:
        # milliseconds since the epoch
        return datetime.fromtimestamp(value / 1000, tz=timezone.utc)
    if isinstance(value, str):
        try:
            return datetime.fromisoformat(value)
        except ValueError as e:
            raise UnsupportedDataTypeError(f"Unable to parse date string: {value!r}") from e
    raise UnsupportedDataTypeError(
        f"A date must be a datetime, a ms timestamp or an ISO string. Received: {value!r}"
    )


def _date_medium(dt: datetime) -> str:
    return f"{MONTH_NAMES[dt.month - 1]} {dt.day}, {dt.year}"


def _clock(dt: datetime) -> str:
    return f"{dt.hour % 12 or 12:02d}:{dt.minute:02d}"


def _meridiem(dt: datetime) -> str:
    return "AM" if dt.hour < 12 else "PM"


def _time_short(dt: datetime) -> str:
    return f"{_clock(dt)} {_meridiem(dt)}"


def _time_medium(dt: datetime) -> str:
    return f"{_clock(dt)}:{dt.second:02d} {_meridiem(dt)}"


_FORMATTERS: Dict[str, Callable[[datetime], str]] = {
    "date-short": lambda dt: f"{dt.month:02d}/{dt.day:02d}/{dt.year}",
    "date-medium": _date_medium,
    "date-long": lambda dt: f"{WEEKDAY_NAMES[dt.weekday()]}, {_date_medium(dt)}",
    "time-short": _time_short,
    "time-medium": _time_medium,
    "datetime-short": lambda dt: f"{dt.month:02d}/{dt.day}/{dt.year}, {_time_short(dt)}",
    "datetime-medium": lambda dt: f"{_date_medium(dt)} at {_time_short(dt)}",
    "datetime-long": lambda dt: f"{WEEKDAY_NAMES[dt.weekday()]}, {_date_medium(dt)} at {_time_medium(dt)}",
}


def prettify_date(value: Union[datetime, int, float, str], template: str) -> str:
    """
    Format a date with one of the DATE_TEMPLATES.

    Numeric values are millisecond timestamps rendered in UTC; datetimes are
    rendered in their own timezone.

    Raises:
        UnsupportedDataTypeError: If the value or the template is not supported
    """
    formatter = _FORMATTERS.get(template)
    if formatter is None:
        raise UnsupportedDataTypeError(
            f"Unknown date template {template!r}. Expected one of: {', '.join(DATE_TEMPLATES)}"
        )
    return formatter(_to_datetime(value))

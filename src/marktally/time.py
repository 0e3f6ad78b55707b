# SPDX-License-Identifier: MIT

import datetime
import re
from typing import Literal, Optional, Union

import pendulum

UnitType = Literal["day", "week", "month", "quarter", "year"]

DATE_TOKEN = r"\d{4}[-/.]\d{1,2}[-/.]\d{1,2}"

_NUMERIC_DATE_RE = re.compile(r"^(\d{4})[-/.](\d{1,2})[-/.](\d{1,2})$")
_CJK_DATE_RE = re.compile(r"^(\d{4})年(\d{1,2})月(\d{1,2})日?$")
_ISO_PREFIX_RE = re.compile(r"^(\d{4})-(\d{1,2})-(\d{1,2})")

# label spellings accepted for each calendar unit
PERIOD_LABELS: dict[UnitType, tuple[str, ...]] = {
    "day": ("day", "日", "天"),
    "week": ("week", "周"),
    "month": ("month", "月"),
    "quarter": ("quarter", "季"),
    "year": ("year", "年"),
}


def today() -> pendulum.Date:
    return pendulum.today("local").date()


def normalize_date_str(raw: Optional[str]) -> str:
    """
    Normalize a loosely written date to 'YYYY-MM-DD'.

    Accepts 2024-01-05, 2024-1-5, 2024/01/05, 2024.1.5 and 2024年1月5日.
    Anything that does not name a real calendar date is returned with
    '/' replaced by '-' instead of raising.
    """
    value = (raw or "").strip()
    fallback = value.replace("/", "-")

    match = _NUMERIC_DATE_RE.match(value) or _CJK_DATE_RE.match(value)
    if match is None:
        return fallback

    year, month, day = (int(group) for group in match.groups())
    try:
        return pendulum.date(year, month, day).to_date_string()
    except ValueError:
        return fallback


def extract_date(line: str, marker: Union[str, list[str]]) -> Optional[str]:
    """Return the normalized date that follows `marker` (or the first of several markers)."""
    markers = [marker] if isinstance(marker, str) else marker
    for emoji in markers:
        match = re.search(f"{re.escape(emoji)}\\s*({DATE_TOKEN})", line)
        if match:
            return normalize_date_str(match.group(1))
    return None


def date_from_iso_str(value: Optional[str]) -> Optional[pendulum.Date]:
    if not value:
        return None
    match = _ISO_PREFIX_RE.match(value.strip().replace("/", "-"))
    if match is None:
        return None
    year, month, day = (int(group) for group in match.groups())
    try:
        return pendulum.date(year, month, day)
    except ValueError:
        return None


def as_date(value: Union[str, datetime.date, None]) -> Optional[pendulum.Date]:
    if value is None:
        return None
    if isinstance(value, str):
        return date_from_iso_str(value)
    if isinstance(value, datetime.datetime):
        value = value.date()
    return pendulum.date(value.year, value.month, value.day)


def iso_str_to_ms(value: Optional[str]) -> Optional[int]:
    """Milliseconds since the epoch for UTC midnight of an ISO date, or None."""
    date = date_from_iso_str(value)
    if date is None:
        return None
    midnight = pendulum.datetime(date.year, date.month, date.day, tz="UTC")
    return midnight.int_timestamp * 1000


def period_unit(label: Optional[str]) -> Optional[UnitType]:
    if label is None:
        return None
    normalized = label.strip().lower()
    for unit, labels in PERIOD_LABELS.items():
        if normalized in labels:
            return unit
    return None


def week_of_calendar_year(date: datetime.date) -> int:
    """Monday-based week number where week 1 is the week holding 1 January."""
    jan_first = datetime.date(date.year, 1, 1)
    day_of_year = date.timetuple().tm_yday
    return (day_of_year - 1 + jan_first.weekday()) // 7 + 1


def get_period_count(
    period_label: Optional[str], reference_date: Union[str, datetime.date, None]
) -> Optional[int]:
    """
    Ordinal index of `reference_date` inside the calendar unit named by `period_label`.

    day: day of year, week: week of the calendar year, month: 1-12,
    quarter: 1-4, year: the year itself. Every count except the year restarts
    on 1 January. Unknown labels or dates give None.
    """
    unit = period_unit(period_label)
    date = as_date(reference_date)
    if unit is None or date is None:
        return None

    match unit:
        case "day":
            return date.day_of_year
        case "week":
            return week_of_calendar_year(date)
        case "month":
            return date.month
        case "quarter":
            return date.quarter
        case "year":
            return date.year
    return None


def get_date_range(
    anchor: Union[str, datetime.date], unit: UnitType
) -> tuple[pendulum.Date, pendulum.Date]:
    """
    First and last day (inclusive) of the calendar unit containing `anchor`.

    Weeks are ISO weeks starting on Monday.
    """
    date = as_date(anchor)
    if date is None:
        raise ValueError(f"Invalid anchor date: {anchor!r}")

    if unit == "day":
        return date, date
    elif unit == "week":
        return date.start_of("week"), date.end_of("week")
    elif unit == "month":
        return date.start_of("month"), date.end_of("month")
    elif unit == "quarter":
        start = pendulum.date(date.year, 3 * ((date.month - 1) // 3) + 1, 1)
        return start, start.add(months=3).subtract(days=1)
    else:  # unit == "year"
        return date.start_of("year"), date.end_of("year")


def is_in_range(
    date: datetime.date, start: datetime.date, end: datetime.date
) -> bool:
    return start <= date <= end

"""
Timex Expressions

Parses timex strings into TimexProperty and normalizes user date text into
canonical timex strings. Produces ISO-8601 values for definite dates.

Canonical forms:
    2024-03-04                  definite date
    2024-03-04T10:30            definite date and time
    XXXX-03-04                  month/day without a year
    XXXX-WXX-1                  day of week (1 = Monday)
    2024-03                     whole month
    (2024-03-01,2024-03-05,P4D) date range
"""
import re
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Optional, Set

# Timex types
DATE = "date"
TIME = "time"
DATETIME = "datetime"
DATERANGE = "daterange"
DEFINITE = "definite"

_ISO_DATE = re.compile(r"^(\d{4})-(\d{2})-(\d{2})$")
_ISO_DATETIME = re.compile(r"^(\d{4})-(\d{2})-(\d{2})T(\d{2})(?::(\d{2}))?(?::(\d{2}))?$")
_PARTIAL_DATE = re.compile(r"^XXXX-(\d{2})-(\d{2})$")
_DAY_OF_WEEK = re.compile(r"^XXXX-WXX-([1-7])$")
_YEAR_MONTH = re.compile(r"^(\d{4})-(\d{2})$")
_RANGE = re.compile(r"^\(([^,()]+),([^,()]+),P(\d+)D\)$")

MONTHS = {
    "january": 1, "jan": 1,
    "february": 2, "feb": 2,
    "march": 3, "mar": 3,
    "april": 4, "apr": 4,
    "may": 5,
    "june": 6, "jun": 6,
    "july": 7, "jul": 7,
    "august": 8, "aug": 8,
    "september": 9, "sept": 9, "sep": 9,
    "october": 10, "oct": 10,
    "november": 11, "nov": 11,
    "december": 12, "dec": 12,
}

WEEKDAYS = {
    "monday": 1, "mon": 1,
    "tuesday": 2, "tue": 2, "tues": 2,
    "wednesday": 3, "wed": 3,
    "thursday": 4, "thu": 4, "thur": 4, "thurs": 4,
    "friday": 5, "fri": 5,
    "saturday": 6, "sat": 6,
    "sunday": 7, "sun": 7,
}

RELATIVE_DAYS = {
    "today": 0,
    "now": 0,
    "tomorrow": 1,
    "yesterday": -1,
    "day after tomorrow": 2,
    "the day after tomorrow": 2,
    "day before yesterday": -2,
    "the day before yesterday": -2,
}

_ORDINAL = r"(?:st|nd|rd|th)?"
_WEEKDAY_TEXT = re.compile(
    r"^(?:(?:next|this|last|coming|on)\s+)?(" + "|".join(WEEKDAYS) + r")s?$"
)
_MONTH_DAY_TEXT = re.compile(
    r"^(?P<month>[a-z]+)\.?\s+(?P<day>\d{1,2})" + _ORDINAL + r"(?:,?\s+(?P<year>\d{4}))?$"
)
_DAY_MONTH_TEXT = re.compile(
    r"^(?:the\s+)?(?P<day>\d{1,2})" + _ORDINAL
    + r"\s+(?:of\s+)?(?P<month>[a-z]+)\.?(?:,?\s+(?P<year>\d{4}))?$"
)
_MONTH_YEAR_TEXT = re.compile(r"^(?P<month>[a-z]+)\.?,?\s+(?P<year>\d{4})$")
_US_NUMERIC = re.compile(r"^(\d{1,2})[/.](\d{1,2})[/.](\d{4})$")
_YMD_NUMERIC = re.compile(r"^(\d{4})[/.](\d{1,2})[/.](\d{1,2})$")
_RANGE_TEXT = (
    re.compile(r"^between\s+(.+?)\s+and\s+(.+)$"),
    re.compile(r"^(?:from\s+)?(.+?)\s+(?:to|until|till|through|-)\s+(.+)$"),
)


@dataclass
class TimexProperty:
    timex: str
    year: Optional[int] = None
    month: Optional[int] = None
    day_of_month: Optional[int] = None
    day_of_week: Optional[int] = None
    hour: Optional[int] = None
    minute: Optional[int] = None
    second: Optional[int] = None
    start: Optional["TimexProperty"] = None
    end: Optional["TimexProperty"] = None
    days: Optional[int] = None

    @property
    def types(self) -> Set[str]:
        types: Set[str] = set()
        if self.start is not None and self.end is not None:
            types.add(DATERANGE)
            if DEFINITE in self.start.types and DEFINITE in self.end.types:
                types.add(DEFINITE)
            return types

        if self.day_of_month is not None or self.day_of_week is not None:
            types.add(DATE)
        elif self.year is not None and self.month is not None:
            types.add(DATERANGE)
        if self.year is not None and self.month is not None and self.day_of_month is not None:
            types.add(DEFINITE)
        if self.hour is not None:
            types.add(TIME)
            if DATE in types:
                types.add(DATETIME)
        return types

    def to_date(self) -> Optional[date]:
        if DEFINITE not in self.types or self.start is not None:
            return None
        return date(self.year, self.month, self.day_of_month)


def _valid_date(year: int, month: int, day: int) -> Optional[date]:
    try:
        return date(year, month, day)
    except ValueError:
        return None


def _valid_month_day(month: int, day: int) -> bool:
    # 2000 is a leap year so Feb 29 is accepted without a year
    return _valid_date(2000, month, day) is not None


def parse_timex(timex: Optional[str]) -> Optional[TimexProperty]:
    """
    Parse a canonical timex string.

    Returns:
        TimexProperty, or None if the string is not a valid timex
    """
    if not timex:
        return None
    text = timex.strip().upper()

    match = _ISO_DATE.match(text)
    if match:
        year, month, day = (int(g) for g in match.groups())
        if _valid_date(year, month, day) is None:
            return None
        return TimexProperty(timex=text, year=year, month=month, day_of_month=day)

    match = _ISO_DATETIME.match(text)
    if match:
        year, month, day, hour = (int(g) for g in match.groups()[:4])
        minute = int(match.group(5)) if match.group(5) else 0
        second = int(match.group(6)) if match.group(6) else 0
        if _valid_date(year, month, day) is None or hour > 23 or minute > 59 or second > 59:
            return None
        return TimexProperty(
            timex=text, year=year, month=month, day_of_month=day,
            hour=hour, minute=minute, second=second,
        )

    match = _PARTIAL_DATE.match(text)
    if match:
        month, day = int(match.group(1)), int(match.group(2))
        if not _valid_month_day(month, day):
            return None
        return TimexProperty(timex=text, month=month, day_of_month=day)

    match = _DAY_OF_WEEK.match(text)
    if match:
        return TimexProperty(timex=text, day_of_week=int(match.group(1)))

    match = _YEAR_MONTH.match(text)
    if match:
        year, month = int(match.group(1)), int(match.group(2))
        if not 1 <= month <= 12:
            return None
        return TimexProperty(timex=text, year=year, month=month)

    match = _RANGE.match(text)
    if match:
        start = parse_timex(match.group(1))
        end = parse_timex(match.group(2))
        if start is None or end is None:
            return None
        return TimexProperty(timex=text, start=start, end=end, days=int(match.group(3)))

    return None


def _format_date(value: date) -> str:
    return value.isoformat()


def _month_day(month_name: str, day: str, year: Optional[str]) -> Optional[str]:
    month = MONTHS.get(month_name)
    if month is None:
        return None
    day_num = int(day)
    if year:
        resolved = _valid_date(int(year), month, day_num)
        return _format_date(resolved) if resolved else None
    if not _valid_month_day(month, day_num):
        return None
    return f"XXXX-{month:02d}-{day_num:02d}"


def _normalize_single(text: str, today: date) -> Optional[str]:
    """Normalize one date phrase (already lower-cased and trimmed)."""
    parsed = parse_timex(text)
    if parsed is not None and parsed.start is None:
        return parsed.timex

    if text in RELATIVE_DAYS:
        return _format_date(today + timedelta(days=RELATIVE_DAYS[text]))

    match = _WEEKDAY_TEXT.match(text)
    if match:
        return f"XXXX-WXX-{WEEKDAYS[match.group(1)]}"

    match = _US_NUMERIC.match(text)
    if match:
        month, day, year = (int(g) for g in match.groups())
        resolved = _valid_date(year, month, day)
        return _format_date(resolved) if resolved else None

    match = _YMD_NUMERIC.match(text)
    if match:
        year, month, day = (int(g) for g in match.groups())
        resolved = _valid_date(year, month, day)
        return _format_date(resolved) if resolved else None

    for pattern in (_MONTH_DAY_TEXT, _DAY_MONTH_TEXT):
        match = pattern.match(text)
        if match:
            return _month_day(match.group("month"), match.group("day"), match.group("year"))

    match = _MONTH_YEAR_TEXT.match(text)
    if match:
        month = MONTHS.get(match.group("month"))
        if month is None:
            return None
        return f"{match.group('year')}-{month:02d}"

    return None


def _normalize_range(start_text: str, end_text: str, today: date) -> Optional[str]:
    start = parse_timex(_normalize_single(start_text, today))
    end = parse_timex(_normalize_single(end_text, today))
    if start is None or end is None:
        return None
    start_date, end_date = start.to_date(), end.to_date()
    # Ranges over undated or relative ends have no canonical form
    if start_date is None or end_date is None or end_date < start_date:
        return None
    days = (end_date - start_date).days
    return f"({_format_date(start_date)},{_format_date(end_date)},P{days}D)"


def normalize_timex(text: Optional[str], today: Optional[date] = None) -> Optional[str]:
    """
    Normalize user or recognizer date text into a canonical timex string.

    Args:
        text: Date phrase ("tomorrow", "March 4, 2024", "from 3/1/2024 to 3/5/2024")
            or an existing timex string
        today: Reference date for relative phrases (defaults to date.today())

    Returns:
        Canonical timex, or None if the text cannot be understood
    """
    if not text or not text.strip():
        return None
    today = today or date.today()

    raw = text.strip()
    parsed = parse_timex(raw)
    if parsed is not None:
        return parsed.timex

    phrase = re.sub(r"\s+", " ", raw.lower()).rstrip(".!?")
    single = _normalize_single(phrase, today)
    if single is not None:
        return single

    for pattern in _RANGE_TEXT:
        match = pattern.match(phrase)
        if match:
            return _normalize_range(match.group(1).strip(), match.group(2).strip(), today)

    return None


def is_ambiguous(text: Optional[str], today: Optional[date] = None) -> bool:
    """
    A date is ambiguous unless it resolves to a definite timex.

    Unparseable text is ambiguous.
    """
    timex = parse_timex(normalize_timex(text, today))
    return timex is None or DEFINITE not in timex.types

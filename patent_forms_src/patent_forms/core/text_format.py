from __future__ import annotations

import calendar
import datetime
import re
from typing import Optional, Union

from dateutil.relativedelta import relativedelta

DateLike = Union[datetime.date, datetime.datetime, str, None]

SHORT_DATE_PLACEHOLDER = "_______________"
LONG_DATE_PLACEHOLDER = "this _____ day of _____, _____"
DOTTED_DATE_PLACEHOLDER = ".......... day of ........, ......."

_ONES = [
    "", "One", "Two", "Three", "Four", "Five", "Six", "Seven", "Eight", "Nine", "Ten",
    "Eleven", "Twelve", "Thirteen", "Fourteen", "Fifteen", "Sixteen", "Seventeen",
    "Eighteen", "Nineteen",
]
_TENS = ["", "", "Twenty", "Thirty", "Forty", "Fifty", "Sixty", "Seventy", "Eighty", "Ninety"]

# (divisor, label), largest first; crores recurse for anything above 99 crore.
_INDIAN_SCALE = [
    (10_000_000, "Crore"),
    (100_000, "Lakh"),
    (1_000, "Thousand"),
    (100, "Hundred"),
]

_MONTHS = list(calendar.month_name)[1:]

_ISO_DATE = re.compile(r"^\s*(\d{4})-(\d{1,2})-(\d{1,2})(?:[T\s].*)?$")
_DMY_DATE = re.compile(r"^\s*(\d{1,2})[/-](\d{1,2})[/-](\d{4})\s*$")


def _as_whole_number(value) -> int:
    if value is None or isinstance(value, bool):
        return 0
    try:
        return abs(int(float(value)))
    except (TypeError, ValueError, OverflowError):
        return 0


def _words(n: int) -> str:
    if n < 20:
        return _ONES[n]
    if n < 100:
        return _TENS[n // 10] + (f" {_ONES[n % 10]}" if n % 10 else "")
    for divisor, label in _INDIAN_SCALE:
        if n >= divisor:
            head, rest = divmod(n, divisor)
            out = f"{_words(head)} {label}"
            return f"{out} {_words(rest)}" if rest else out
    return ""


def number_to_words(value) -> str:
    """Spell a count or rupee amount in English using the Indian scale.

    100000 is "One Lakh" and 10000000 is "One Crore"; amounts past 99 crore
    keep counting in crores ("One Hundred Crore" for 10**9). Zero, None and
    anything non-numeric read "Zero".
    """
    n = _as_whole_number(value)
    if n == 0:
        return "Zero"
    return _words(n)


def parse_date(value: DateLike) -> Optional[datetime.date]:
    if value is None:
        return None
    if isinstance(value, datetime.datetime):
        return value.date()
    if isinstance(value, datetime.date):
        return value
    text = str(value).strip()
    if not text:
        return None

    m = _ISO_DATE.match(text)
    if m:
        year, month, day = int(m.group(1)), int(m.group(2)), int(m.group(3))
    else:
        m = _DMY_DATE.match(text)
        if not m:
            return None
        day, month, year = int(m.group(1)), int(m.group(2)), int(m.group(3))
    try:
        return datetime.date(year, month, day)
    except ValueError:
        return None


def ordinal(day: int) -> str:
    if 10 <= day % 100 <= 20:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(day % 10, "th")
    return f"{day}{suffix}"


def format_date_short(value: DateLike, placeholder: str = SHORT_DATE_PLACEHOLDER) -> str:
    d = parse_date(value)
    if d is None:
        return placeholder
    return d.strftime("%d/%m/%Y")


def format_date_long(value: DateLike, placeholder: str = LONG_DATE_PLACEHOLDER) -> str:
    d = parse_date(value)
    if d is None:
        return placeholder
    return f"{ordinal(d.day)} day of {_MONTHS[d.month - 1]}, {d.year}"


def dated_clause(value: DateLike, placeholder: str = LONG_DATE_PLACEHOLDER) -> str:
    long_date = format_date_long(value, placeholder)
    if long_date.startswith("this "):
        return f"Dated {long_date}"
    return f"Dated this {long_date}"


def add_months(value: DateLike, months: int) -> Optional[datetime.date]:
    # relativedelta clamps to the end of the target month (31 Jan + 1 month -> 28/29 Feb).
    d = parse_date(value)
    if d is None:
        return None
    return d + relativedelta(months=months)


def count_with_words(value) -> str:
    n = _as_whole_number(value)
    return f"{n} ({number_to_words(n)})"

# jalali.py
# Jalali (Persian solar Hijri) <-> Gregorian conversion.
#
# Both directions count days from the same origin (1 Farvardin 979, which is
# 79 days after 1 January 1600) and use the same 33-year leap cycle, so a
# round trip always returns the date it started from.
import datetime
from typing import NamedTuple

import jdatetime
import pytz
from dateutil.parser import isoparse

from config import TIMEZONE

EPOCH_YEAR = 979
EPOCH_OFFSET_DAYS = 79
EPOCH_ORDINAL = datetime.date(1600, 1, 1).toordinal() + EPOCH_OFFSET_DAYS

DAYS_IN_CYCLE = 33 * 365 + 8  # 12053
DAYS_IN_QUAD = 4 * 365 + 1  # 1461
FIRST_HALF_DAYS = 6 * 31  # 186

MONTH_NAMES = list(jdatetime.date.j_months_fa)


class InvalidCalendarDate(ValueError):
    """Raised for a Jalali triple that names no real day."""


class JalaliDate(NamedTuple):
    year: int
    month: int
    day: int

    def isoformat(self, sep="-"):
        return f"{self.year:04d}{sep}{self.month:02d}{sep}{self.day:02d}"

    @property
    def sort_key(self):
        # "1403/08": sorts lexicographically in calendar order
        return f"{self.year}/{self.month:02d}"

    @property
    def month_name(self):
        return MONTH_NAMES[self.month - 1]

    @property
    def month_label(self):
        return f"{self.month_name} {self.year}"

    def to_gregorian(self):
        return jalali_to_gregorian(self.year, self.month, self.day)


def days_before_year(year):
    """Days from the epoch to 1 Farvardin of ``year``."""
    y = year - EPOCH_YEAR
    return 365 * y + (y // 33) * 8 + (y % 33 + 3) // 4


def days_before_month(month):
    if month < 7:
        return (month - 1) * 31
    return (month - 7) * 30 + FIRST_HALF_DAYS


def is_leap(year):
    return days_before_year(year + 1) - days_before_year(year) == 366


def month_length(year, month):
    if month <= 6:
        return 31
    if month <= 11:
        return 30
    return 30 if is_leap(year) else 29


def validate(year, month, day):
    if not 1 <= month <= 12:
        raise InvalidCalendarDate(f"invalid calendar date {year}-{month}-{day}: month must be 1..12")
    max_day = month_length(year, month)
    if not 1 <= day <= max_day:
        raise InvalidCalendarDate(
            f"invalid calendar date {year}-{month}-{day}: day must be 1..{max_day}"
        )


def jalali_to_gregorian(year, month, day):
    """
    year, month, day: Jalali fields
    return: datetime.date (Gregorian)
    """
    validate(year, month, day)
    day_no = days_before_year(year) + days_before_month(month) + day - 1
    return datetime.date.fromordinal(EPOCH_ORDINAL + day_no)


def gregorian_to_jalali(date_obj):
    """
    date_obj: datetime.date (Gregorian)
    return: JalaliDate
    """
    day_no = date_obj.toordinal() - EPOCH_ORDINAL

    cycles, day_no = divmod(day_no, DAYS_IN_CYCLE)
    year = EPOCH_YEAR + 33 * cycles

    quads, day_no = divmod(day_no, DAYS_IN_QUAD)
    year += 4 * quads

    # the first year of every four is the 366-day one
    if day_no >= 366:
        extra, day_no = divmod(day_no - 1, 365)
        year += extra

    if day_no < FIRST_HALF_DAYS:
        month, day = divmod(day_no, 31)
        return JalaliDate(year, month + 1, day + 1)
    month, day = divmod(day_no - FIRST_HALF_DAYS, 30)
    return JalaliDate(year, month + 7, day + 1)


def to_civil_date(instant):
    """Normalize a date, datetime or ISO-8601 string to a Gregorian date."""
    if isinstance(instant, str):
        instant = isoparse(instant)
    if isinstance(instant, datetime.datetime):
        if instant.tzinfo is not None:
            instant = instant.astimezone(pytz.timezone(TIMEZONE))
        return instant.date()
    if isinstance(instant, datetime.date):
        return instant
    raise TypeError(f"expected date, datetime or ISO string, got {type(instant).__name__}")


def civil_to_jalali(instant):
    return gregorian_to_jalali(to_civil_date(instant))


def jalali_to_civil(year, month, day):
    return jalali_to_gregorian(year, month, day)


def parse_jalali(text):
    # "1403-08-25" or "1403/08/25"
    try:
        year, month, day = [int(x) for x in text.strip().replace("/", "-").split("-")]
    except ValueError:
        raise InvalidCalendarDate(f"invalid calendar date {text!r}") from None
    validate(year, month, day)
    return JalaliDate(year, month, day)

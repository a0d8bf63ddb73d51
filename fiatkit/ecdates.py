"""Integer-argument date utilities built on Julian day numbers.

Each function takes plain year/month/day/hour/minute/second integers and
returns plain integers or tuples of them. Invalid input raises one of the
errors from :mod:`fiatkit.julian`.
"""

from __future__ import annotations

from .julian import (
    Date,
    DateRangeError,
    Time,
    add_days,
    add_hours,
    add_minutes,
    add_seconds,
    century_to_date,
    date_to_century,
    date_to_yearday,
    days_between,
    hours_between,
    minutes_between,
    seconds_between,
    yearday_to_date,
)

__all__ = [
    "daydiff",
    "hourdiff",
    "mindiff",
    "secdiff",
    "dayincr",
    "hourincr",
    "minincr",
    "secincr",
    "cd2date",
    "yd2date",
    "idate2cd",
    "idate2yd",
    "icd2ymd",
    "iymd2cd",
]

_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1


def _truncated_divmod(a: int, b: int) -> tuple[int, int]:
    """Quotient rounded toward zero and the remainder with the dividend's sign."""
    q = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        q = -q
    return q, a - b * q


def daydiff(year1: int, month1: int, day1: int, year2: int, month2: int, day2: int) -> int:
    """Return the first date minus the second, in days."""
    return days_between(Date(year1, month1, day1), Date(year2, month2, day2))


def hourdiff(
    year1: int, month1: int, day1: int, hour1: int,
    year2: int, month2: int, day2: int, hour2: int,
) -> int:
    """Return the first moment minus the second, in whole hours."""
    return hours_between(
        Date(year1, month1, day1), Time(hour1),
        Date(year2, month2, day2), Time(hour2),
    )


def mindiff(
    year1: int, month1: int, day1: int, hour1: int, min1: int,
    year2: int, month2: int, day2: int, hour2: int, min2: int,
) -> int:
    """Return the first moment minus the second, in whole minutes."""
    return minutes_between(
        Date(year1, month1, day1), Time(hour1, min1),
        Date(year2, month2, day2), Time(hour2, min2),
    )


def secdiff(
    year1: int, month1: int, day1: int, hour1: int, min1: int, sec1: int,
    year2: int, month2: int, day2: int, hour2: int, min2: int, sec2: int,
) -> int:
    """Return the first moment minus the second, in seconds."""
    return seconds_between(
        Date(year1, month1, day1), Time(hour1, min1, sec1),
        Date(year2, month2, day2), Time(hour2, min2, sec2),
    )


def dayincr(year: int, month: int, day: int, days: int) -> tuple[int, int, int]:
    """Return (year, month, day) a number of days away."""
    new = add_days(Date(year, month, day), days)
    return new.year, new.month, new.day


def hourincr(year: int, month: int, day: int, hour: int, hours: int) -> tuple[int, int, int, int]:
    """Return (year, month, day, hour) a number of hours away."""
    new_date, new_time = add_hours(Date(year, month, day), Time(hour), hours)
    return new_date.year, new_date.month, new_date.day, new_time.hour


def minincr(
    year: int, month: int, day: int, hour: int, minute: int, minutes: int
) -> tuple[int, int, int, int, int]:
    """Return (year, month, day, hour, minute) a number of minutes away."""
    new_date, new_time = add_minutes(Date(year, month, day), Time(hour, minute), minutes)
    return new_date.year, new_date.month, new_date.day, new_time.hour, new_time.minute


def secincr(
    year: int, month: int, day: int, hour: int, minute: int, second: int, seconds: int
) -> tuple[int, int, int, int, int, int]:
    """Return (year, month, day, hour, minute, second) a number of seconds away."""
    new_date, new_time = add_seconds(
        Date(year, month, day), Time(hour, minute, second), seconds
    )
    return (
        new_date.year,
        new_date.month,
        new_date.day,
        new_time.hour,
        new_time.minute,
        new_time.second,
    )


def cd2date(icd: int) -> tuple[int, int, int]:
    """Return (year, month, day) of a century day."""
    date = century_to_date(icd)
    return date.year, date.month, date.day


def yd2date(iyd: int, year: int) -> tuple[int, int]:
    """Return (month, day) of a day of the given year."""
    date = yearday_to_date(iyd, year)
    return date.month, date.day


def idate2cd(year: int, month: int, day: int) -> int:
    """Return the century day of a date."""
    return date_to_century(Date(year, month, day))


def idate2yd(year: int, month: int, day: int) -> int:
    """Return the day of the year of a date."""
    return date_to_yearday(Date(year, month, day))


def icd2ymd(icd: int) -> int:
    """Return a century day as a packed YYYYMMDD integer."""
    year, month, day = cd2date(icd)
    ymd = year * 10000 + month * 100 + day
    if ymd > _INT32_MAX or ymd < _INT32_MIN:
        raise DateRangeError(f"icd2ymd: ymd = {ymd}: exceeded the allowed range")
    return ymd


def iymd2cd(iymd: int) -> int:
    """Return the century day of a packed YYYYMMDD integer."""
    year, rest = _truncated_divmod(iymd, 10000)
    month, day = _truncated_divmod(rest, 100)
    return idate2cd(year, month, day)
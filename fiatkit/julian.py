"""Calendar arithmetic on Julian day numbers.

Dates are proleptic Gregorian with years 0..9999; times are whole seconds
within a day. Century days count from 1900-01-01 (day 1).
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = [
    "JulianError",
    "InvalidDateError",
    "InvalidTimeError",
    "DateRangeError",
    "Date",
    "Time",
    "is_leap",
    "validate_date",
    "validate_time",
    "date_to_julian",
    "julian_to_date",
    "time_to_seconds",
    "seconds_to_time",
    "century_to_date",
    "date_to_century",
    "date_to_yearday",
    "yearday_to_date",
    "add_days",
    "add_hours",
    "add_minutes",
    "add_seconds",
    "days_between",
    "hours_between",
    "minutes_between",
    "seconds_between",
]

_MONTH_LEN = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)

_MJDSHIFT = 0
_CENTURYSHIFT = 2415021
_JULIAN_MIN = 0

_YEAR_MIN = 0
_YEAR_MAX = 9999

_SEC_MIN = 60
_SEC_HOUR = 3600
_SEC_DAY = 86400
_MIN_HOUR = 60
_MIN_DAY = 1440
_HOUR_DAY = 24

_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1


class JulianError(ValueError):
    """A date or time computation failed."""

    code = -1


class InvalidDateError(JulianError):
    """The date is not a valid calendar date."""

    code = -7


class InvalidTimeError(JulianError):
    """The time of day is not valid."""

    code = -8


class DateRangeError(JulianError):
    """A value lies outside the allowed range."""

    code = -10


@dataclass(frozen=True)
class Date:
    """A calendar date."""

    year: int
    month: int
    day: int

    def __str__(self) -> str:
        return f"{self.year:04d}{self.month:02d}{self.day:02d}"


@dataclass(frozen=True)
class Time:
    """A time of day."""

    hour: int = 0
    minute: int = 0
    second: int = 0

    def __str__(self) -> str:
        return f"{self.hour:02d}{self.minute:02d}{self.second:02d}"


def _tdiv(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    q = abs(a) // abs(b)
    return -q if (a < 0) != (b < 0) else q


def _tmod(a: int, b: int) -> int:
    """Remainder carrying the sign of the dividend."""
    return a - b * _tdiv(a, b)


def _check_int32(value: int, what: str) -> int:
    if value > _INT32_MAX or value < _INT32_MIN:
        raise DateRangeError(f"{what} = {value}: exceeded the allowed range")
    return value


def is_leap(year: int) -> bool:
    """Return True for a Gregorian leap year."""
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def validate_date(date: Date) -> None:
    """Raise if the date is outside the calendar or the supported years."""
    if date.year < _YEAR_MIN or date.year > _YEAR_MAX:
        raise DateRangeError(f"Year {date.year} out of allowed range")
    if not 1 <= date.month <= 12:
        raise InvalidDateError(f"Date incorrect ({date})")
    if date.month == 2:
        last = 29 if is_leap(date.year) else 28
    else:
        last = _MONTH_LEN[date.month - 1]
    if not 1 <= date.day <= last:
        raise InvalidDateError(f"Date incorrect ({date})")


def validate_time(time: Time) -> None:
    """Raise InvalidTimeError unless the time lies within a day."""
    if not (
        0 <= time.hour <= _HOUR_DAY - 1
        and 0 <= time.minute <= _MIN_HOUR - 1
        and 0 <= time.second <= _SEC_MIN - 1
    ):
        raise InvalidTimeError(f"Time incorrect ({time})")


def _require_date(date: Date) -> None:
    try:
        validate_date(date)
    except JulianError as exc:
        raise InvalidDateError(f"Date incorrect ({date})") from exc


def date_to_julian(date: Date) -> int:
    """Return the Julian day number of a date."""
    _require_date(date)
    m1 = _tdiv(date.month - 14, 12)
    a = _tdiv(1461 * (date.year + 4800 + m1), 4)
    b = _tdiv(367 * (date.month - 2 - 12 * m1), 12)
    m2 = _tdiv(date.year + 4900 + m1, 100)
    c = _tdiv(3 * m2, 4)
    return a + b - c + date.day - 32075 - _MJDSHIFT


def julian_to_date(julian: int) -> Date:
    """Return the date of a Julian day number."""
    jdate = julian + _MJDSHIFT
    if jdate < _JULIAN_MIN:
        raise JulianError(f"Julian {jdate} less than {_JULIAN_MIN}")
    l = jdate + 68569
    n = _tdiv(4 * l, 146097)
    l = l - _tdiv(146097 * n + 3, 4)
    i = _tdiv(4000 * (l + 1), 1461001)
    l = l - _tdiv(1461 * i, 4) + 31
    j = _tdiv(80 * l, 2447)
    day = l - _tdiv(2447 * j, 80)
    l = _tdiv(j, 11)
    month = j + 2 - 12 * l
    year = 100 * (n - 49) + i + l
    _check_int32(year, "julian_to_date: year")
    return Date(year, month, day)


def time_to_seconds(time: Time) -> int:
    """Return seconds since midnight."""
    validate_time(time)
    return _SEC_HOUR * time.hour + _SEC_MIN * time.minute + time.second


def seconds_to_time(seconds: int) -> Time:
    """Split seconds since midnight into a time; a full day is allowed."""
    if seconds < 0 or seconds > _SEC_DAY:
        raise JulianError(f"Seconds {seconds} outside a day")
    hour, rest = divmod(seconds, _SEC_HOUR)
    minute, second = divmod(rest, _MIN_HOUR)
    return Time(hour, minute, second)


def century_to_date(century: int) -> Date:
    """Return the date of a century day (1900-01-01 is day 1)."""
    return julian_to_date(century + _CENTURYSHIFT - 1)


def date_to_century(date: Date) -> int:
    """Return the century day of a date."""
    return date_to_julian(date) - _CENTURYSHIFT + 1


def date_to_yearday(date: Date) -> int:
    """Return the day of the year, starting at 1."""
    julian = date_to_julian(date)
    first = date_to_julian(Date(date.year, 1, 1))
    return julian - first + 1


def yearday_to_date(yearday: int, year: int) -> Date:
    """Return the date of a day of the year; out-of-year days roll over."""
    shift = date_to_julian(Date(year, 1, 1))
    return julian_to_date(yearday + shift - 1)


def add_days(date: Date, days: int) -> Date:
    """Return the date a number of days away."""
    julian = _check_int32(date_to_julian(date) + days, "add_days: julian")
    return julian_to_date(julian)


def _shift(julian: int, seconds: int, days: int, extra: int, wrap_both: bool) -> tuple[int, int]:
    julian += days
    seconds += extra
    if seconds < 0:
        julian -= 1
        seconds += _SEC_DAY
        if not wrap_both:
            return julian, seconds
    if seconds >= _SEC_DAY:
        julian += 1
        seconds -= _SEC_DAY
    return julian, seconds


def _add(date: Date, time: Time, days: int, extra: int, wrap_both: bool) -> tuple[Date, Time]:
    julian = date_to_julian(date)
    seconds = time_to_seconds(time)
    julian, seconds = _shift(julian, seconds, days, extra, wrap_both)
    return julian_to_date(julian), seconds_to_time(seconds)


def add_hours(date: Date, time: Time, hours: int) -> tuple[Date, Time]:
    """Return the date and time a number of hours away."""
    days = _tdiv(hours, _HOUR_DAY)
    extra = _tmod(hours, _HOUR_DAY) * _SEC_HOUR
    return _add(date, time, days, extra, True)


def add_minutes(date: Date, time: Time, minutes: int) -> tuple[Date, Time]:
    """Return the date and time a number of minutes away."""
    days = _tdiv(minutes, _MIN_DAY)
    extra = _tmod(minutes, _MIN_DAY) * _SEC_MIN
    return _add(date, time, days, extra, True)


def add_seconds(date: Date, time: Time, seconds: int) -> tuple[Date, Time]:
    """Return the date and time a number of seconds away."""
    days = _tdiv(seconds, _SEC_DAY)
    extra = _tmod(seconds, _SEC_DAY)
    return _add(date, time, days, extra, False)


def days_between(date1: Date, date2: Date) -> int:
    """Return date1 minus date2 in days."""
    return date_to_julian(date1) - date_to_julian(date2)


def _differences(date1: Date, time1: Time, date2: Date, time2: Time) -> tuple[int, int]:
    julian1 = date_to_julian(date1)
    julian2 = date_to_julian(date2)
    second1 = time_to_seconds(time1)
    second2 = time_to_seconds(time2)
    return julian1 - julian2, second1 - second2


def hours_between(date1: Date, time1: Time, date2: Date, time2: Time) -> int:
    """Return the first moment minus the second in whole hours."""
    days, secs = _differences(date1, time1, date2, time2)
    hours = days * _HOUR_DAY + _tdiv(secs, _SEC_HOUR)
    return _check_int32(hours, "hours_between: hours")


def minutes_between(date1: Date, time1: Time, date2: Date, time2: Time) -> int:
    """Return the first moment minus the second in whole minutes."""
    days, secs = _differences(date1, time1, date2, time2)
    minutes = days * _MIN_DAY + _tdiv(secs, _SEC_MIN)
    return _check_int32(minutes, "minutes_between: minutes")


def seconds_between(date1: Date, time1: Time, date2: Date, time2: Time) -> int:
    """Return the first moment minus the second in seconds."""
    days, secs = _differences(date1, time1, date2, time2)
    seconds = days * _SEC_DAY + secs
    return _check_int32(seconds, "seconds_between: seconds")
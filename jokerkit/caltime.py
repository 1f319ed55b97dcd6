"""Calendar arithmetic of the kernel clock.

Months are numbered from 1 as the CMOS clock reports them, and years count
from 1900, as two-digit CMOS years below 70 are taken to mean 2000-2069.
Timestamps are unsigned 32-bit seconds since 1970.
"""

import dataclasses
from dataclasses import dataclass
from itertools import accumulate

MINUTE = 60
HOUR = 60 * MINUTE
DAY = 24 * HOUR
YEAR = 365 * DAY

_U32 = 0xFFFFFFFF

# Days elapsed before each month; index 0 is a placeholder.
_MONTH_START = (0, 0, *accumulate((31, 29, 31, 30, 31, 30, 31, 31, 30, 31, 30)))


@dataclass
class Tm:
    """Broken-down time."""

    tm_sec: int = 0
    tm_min: int = 0
    tm_hour: int = 0
    tm_mday: int = 0
    tm_mon: int = 0
    tm_year: int = 0
    tm_wday: int = 0
    tm_yday: int = 0
    tm_isdst: int = 0


def _cdiv(num, den):
    quotient = abs(num) // abs(den)
    return quotient if (num < 0) == (den < 0) else -quotient


def _month_start(month):
    if not 0 <= month < len(_MONTH_START):
        raise ValueError(f"month out of range: {month}")
    return _MONTH_START[month]


def _years_since_1970(tm_year):
    return tm_year - 70 if tm_year >= 70 else tm_year - 70 + 100


def elapsed_leap_years(year):
    """Leap years from 1970 up to, not including, ``1900 + year``."""
    result = _cdiv(year - 1, 4)
    result -= _cdiv(year - 1, 100)
    result += _cdiv(year + 299, 400)
    result -= _cdiv(1970 - 1900, 4)
    return result


def is_leap_year(year):
    """Whether ``1900 + year`` is a leap year."""
    return (year % 4 == 0 and year % 100 != 0) or (year + 1900) % 400 == 0


def localtime(stamp):
    """Break a 32-bit timestamp down into a ``Tm``."""
    if not 0 <= stamp <= _U32:
        raise ValueError(f"timestamp out of range: {stamp}")
    time = Tm()
    remain, time.tm_sec = divmod(stamp, 60)
    remain, time.tm_min = divmod(remain, 60)
    days, time.tm_hour = divmod(remain, 24)
    time.tm_wday = (days + 4) % 7

    years = days // 365 + 70
    time.tm_year = years
    offset = 0 if is_leap_year(years) else 1

    days = (days - elapsed_leap_years(years)) & _U32
    time.tm_yday = days % (366 - offset)

    mon = next(
        (m for m in range(1, 13) if _MONTH_START[m] - offset > time.tm_yday), 13
    )
    time.tm_mon = mon - 1
    time.tm_mday = time.tm_yday - _MONTH_START[time.tm_mon] + offset + 1
    return time


def mktime(time):
    """Seconds since 1970 for ``time``, as an unsigned 32-bit value."""
    year = _years_since_1970(time.tm_year)
    res = YEAR * year
    res += DAY * _cdiv(year + 1, 4)
    res += _month_start(time.tm_mon) * DAY
    if time.tm_mon > 2 and (year + 2) % 4:
        res -= DAY
    res += DAY * (time.tm_mday - 1)
    res += HOUR * time.tm_hour
    res += MINUTE * time.tm_min
    res += time.tm_sec
    return res & _U32


def get_yday(time):
    """Day of the year, counting 1 January as day 1."""
    res = _month_start(time.tm_mon) + time.tm_mday
    year = _years_since_1970(time.tm_year)
    if (year + 2) % 4 and time.tm_mon > 2:
        res -= 1
    return res


def alarm_time(time, secs):
    """The clock time ``secs`` seconds after ``time``, as the alarm sets it.

    Only seconds, minutes and hours change; the hour wraps at 24.
    """
    if not 0 <= secs <= _U32:
        raise ValueError(f"seconds out of range: {secs}")
    rest, sec = divmod(secs, 60)
    hours, minutes = divmod(rest, 60)

    new_sec = time.tm_sec + sec
    new_min = time.tm_min
    if new_sec >= 60:
        new_sec %= 60
        new_min += 1

    new_min += minutes
    new_hour = time.tm_hour
    if new_min >= 60:
        new_min %= 60
        new_hour += 1

    new_hour += hours
    if new_hour >= 24:
        new_hour %= 24

    return dataclasses.replace(time, tm_sec=new_sec, tm_min=new_min, tm_hour=new_hour)
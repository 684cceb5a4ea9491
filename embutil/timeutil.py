"""Wall-clock time and a portable ``timegm``."""

from __future__ import annotations

import time
from typing import Any

_MONTH_DAY = (0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334)


def _cdiv(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b > 0) else -q


def _cmod(a: int, b: int) -> int:
    return a - b * _cdiv(a, b)


def now() -> float:
    """Seconds since the Unix epoch, with sub-second resolution."""
    return time.time()


def timegm(tm: Any) -> float:
    """Convert a UTC broken-down time to seconds since the Unix epoch.

    ``tm`` is a :class:`time.struct_time` or a 9-item tuple in the same
    layout (full year, month 1-12). Out-of-range months carry into the year.
    Returns -1.0 for times before the epoch.
    """
    if not hasattr(tm, "tm_year"):
        tm = time.struct_time(tuple(tm))
    mon = tm.tm_mon - 1
    month = _cmod(mon, 12)
    year = tm.tm_year - 1900 + _cdiv(mon, 12)
    if month < 0:
        month += 12
        year -= 1
    year_for_leap = year + 1 if month > 1 else year
    days = (
        _MONTH_DAY[month]
        + tm.tm_mday
        - 1
        + 365 * (year - 70)
        + _cdiv(year_for_leap - 69, 4)
        - _cdiv(year_for_leap - 1, 100)
        + _cdiv(year_for_leap + 299, 400)
    )
    rt = tm.tm_sec + 60 * (tm.tm_min + 60 * (tm.tm_hour + 24 * days))
    return -1.0 if rt < 0 else float(rt)
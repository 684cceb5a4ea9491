import calendar
import time

import pytest

from embutil.timeutil import now, timegm


def test_now_close_to_system_time():
    before = time.time()
    value = now()
    after = time.time()
    assert before <= value <= after


def test_epoch_is_zero():
    assert timegm(time.gmtime(0)) == 0.0


@pytest.mark.parametrize(
    "stamp",
    [0, 86399, 951782400, 951868800, 1561710959, 4102444800, 2147483647, 1709164800],
)
def test_matches_gmtime_round_trip(stamp):
    assert timegm(time.gmtime(stamp)) == float(stamp)


@pytest.mark.parametrize(
    "fields",
    [
        (2000, 2, 29, 12, 30, 15, 0, 0, 0),
        (2100, 3, 1, 0, 0, 0, 0, 0, 0),
        (1999, 12, 31, 23, 59, 59, 0, 0, 0),
    ],
)
def test_matches_calendar_timegm(fields):
    assert timegm(fields) == float(calendar.timegm(fields))


def test_month_overflow_carries_into_year():
    overflow = (2019, 13, 1, 0, 0, 0, 0, 0, 0)
    normal = (2020, 1, 1, 0, 0, 0, 0, 0, 0)
    assert timegm(overflow) == timegm(normal)


def test_month_underflow_borrows_from_year():
    underflow = (2020, 0, 1, 0, 0, 0, 0, 0, 0)
    normal = (2019, 12, 1, 0, 0, 0, 0, 0, 0)
    assert timegm(underflow) == timegm(normal)


def test_before_epoch_is_minus_one():
    assert timegm((1969, 12, 31, 23, 59, 59, 0, 0, 0)) == -1.0
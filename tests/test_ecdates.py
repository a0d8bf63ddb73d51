import pytest

from fiatkit import ecdates
from fiatkit.julian import DateRangeError, InvalidDateError, InvalidTimeError


def test_century_day_origin():
    assert ecdates.idate2cd(1900, 1, 1) == 1


@pytest.mark.parametrize(
    "date", [(1900, 1, 1), (2000, 2, 29), (1999, 12, 31), (2024, 7, 15), (1, 3, 1)]
)
def test_century_round_trip(date):
    assert ecdates.cd2date(ecdates.idate2cd(*date)) == date


@pytest.mark.parametrize("date", [(1900, 1, 1), (2000, 2, 29), (2023, 11, 5)])
def test_packed_round_trip(date):
    icd = ecdates.idate2cd(*date)
    ymd = ecdates.icd2ymd(icd)
    assert ymd == date[0] * 10000 + date[1] * 100 + date[2]
    assert ecdates.iymd2cd(ymd) == icd


def test_yearday_leap_years():
    assert ecdates.idate2yd(2000, 12, 31) == 366
    assert ecdates.idate2yd(1900, 12, 31) == 365


@pytest.mark.parametrize("date", [(2000, 1, 1), (2000, 3, 1), (2001, 12, 31), (2024, 2, 29)])
def test_yearday_round_trip(date):
    yd = ecdates.idate2yd(*date)
    assert ecdates.yd2date(yd, date[0]) == date[1:]


def test_yearday_first_day():
    assert ecdates.idate2yd(2015, 1, 1) == 1


def test_daydiff_same_date_and_antisymmetry():
    assert ecdates.daydiff(2020, 5, 5, 2020, 5, 5) == 0
    forward = ecdates.daydiff(2021, 3, 1, 2020, 2, 1)
    assert ecdates.daydiff(2020, 2, 1, 2021, 3, 1) == -forward


@pytest.mark.parametrize("days", [0, 1, -1, 59, 365, -1000, 40000])
def test_dayincr_inverts_daydiff(days):
    new = ecdates.dayincr(2000, 2, 28, days)
    assert ecdates.daydiff(*new, 2000, 2, 28) == days


def test_hourdiff_matches_days():
    days = ecdates.daydiff(2010, 6, 1, 2010, 1, 1)
    assert ecdates.hourdiff(2010, 6, 1, 7, 2010, 1, 1, 7) == days * 24


@pytest.mark.parametrize("hours", [0, 5, -5, 24, -25, 1000, -10000])
def test_hourincr_inverts_hourdiff(hours):
    new = ecdates.hourincr(2000, 1, 1, 3, hours)
    assert ecdates.hourdiff(*new, 2000, 1, 1, 3) == hours


@pytest.mark.parametrize("minutes", [0, -1, 1, 1439, -1441, 100000])
def test_minincr_inverts_mindiff(minutes):
    new = ecdates.minincr(2000, 1, 1, 0, 0, minutes)
    assert ecdates.mindiff(*new, 2000, 1, 1, 0, 0) == minutes


@pytest.mark.parametrize("seconds", [0, -1, 1, 86399, -86401, 3600 * 30])
def test_secincr_inverts_secdiff(seconds):
    new = ecdates.secincr(2000, 12, 31, 23, 59, 59, seconds)
    assert ecdates.secdiff(*new, 2000, 12, 31, 23, 59, 59) == seconds


def test_secdiff_is_sixty_times_mindiff_for_whole_minutes():
    mins = ecdates.mindiff(2005, 4, 3, 10, 20, 2005, 4, 1, 8, 5)
    secs = ecdates.secdiff(2005, 4, 3, 10, 20, 0, 2005, 4, 1, 8, 5, 0)
    assert secs == mins * 60


def test_secdiff_out_of_range():
    with pytest.raises(DateRangeError):
        ecdates.secdiff(9999, 1, 1, 0, 0, 0, 0, 1, 1, 0, 0, 0)


def test_invalid_date_raises():
    with pytest.raises(InvalidDateError):
        ecdates.daydiff(2001, 2, 29, 2001, 1, 1)
    with pytest.raises(InvalidDateError):
        ecdates.idate2cd(2000, 13, 1)


def test_year_out_of_range_raises():
    with pytest.raises(InvalidDateError):
        ecdates.idate2cd(10000, 1, 1)


def test_invalid_time_raises():
    with pytest.raises(InvalidTimeError):
        ecdates.hourdiff(2000, 1, 1, 24, 2000, 1, 1, 0)
    with pytest.raises(InvalidTimeError):
        ecdates.secincr(2000, 1, 1, 0, 60, 0, 1)


def test_iymd2cd_invalid():
    with pytest.raises(InvalidDateError):
        ecdates.iymd2cd(20010230)
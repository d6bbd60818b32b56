"""
Tests for the Jalali <-> Gregorian converter.

jdatetime is used as an independent reference for the forward direction.
"""

import datetime

import jdatetime
import pytest

from jalali import (
    InvalidCalendarDate,
    JalaliDate,
    civil_to_jalali,
    gregorian_to_jalali,
    is_leap,
    jalali_to_civil,
    jalali_to_gregorian,
    month_length,
    parse_jalali,
    to_civil_date,
)


def daterange(start, end):
    day = start
    while day <= end:
        yield day
        day += datetime.timedelta(days=1)


class TestKnownDates:
    @pytest.mark.parametrize("gregorian, jalali", [
        (datetime.date(1979, 2, 11), (1357, 11, 22)),
        (datetime.date(2000, 1, 1), (1378, 10, 11)),
        (datetime.date(2024, 3, 20), (1403, 1, 1)),
        (datetime.date(2024, 9, 21), (1403, 6, 31)),
        (datetime.date(2024, 9, 22), (1403, 7, 1)),
        (datetime.date(2025, 3, 20), (1403, 12, 30)),
        (datetime.date(2025, 3, 21), (1404, 1, 1)),
    ])
    def test_both_directions(self, gregorian, jalali):
        assert gregorian_to_jalali(gregorian) == jalali
        assert jalali_to_gregorian(*jalali) == gregorian

    def test_leap_years(self):
        assert is_leap(1399)
        assert is_leap(1403)
        assert is_leap(1408)
        assert not is_leap(1402)
        assert not is_leap(1404)

    def test_month_lengths(self):
        assert [month_length(1403, m) for m in range(1, 13)] == [31] * 6 + [30] * 6
        assert month_length(1402, 12) == 29


class TestAgainstReference:
    def test_matches_jdatetime_1920_to_2100(self):
        for day in daterange(datetime.date(1920, 1, 1), datetime.date(2100, 12, 31)):
            ref = jdatetime.date.fromgregorian(date=day)
            assert gregorian_to_jalali(day) == (ref.year, ref.month, ref.day), day


class TestRoundTrip:
    def test_civil_round_trip(self):
        for day in daterange(datetime.date(1920, 1, 1), datetime.date(2100, 12, 31)):
            assert jalali_to_civil(*civil_to_jalali(day)) == day

    def test_jalali_round_trip(self):
        for year in range(1299, 1480):
            for month in range(1, 13):
                for day in range(1, month_length(year, month) + 1):
                    assert gregorian_to_jalali(jalali_to_gregorian(year, month, day)) == (year, month, day)

    def test_leap_status_agrees_in_both_directions(self):
        for year in range(1299, 1480):
            start = jalali_to_gregorian(year, 1, 1)
            next_start = jalali_to_gregorian(year + 1, 1, 1)
            year_length = (next_start - start).days
            last_day = gregorian_to_jalali(next_start - datetime.timedelta(days=1))
            assert (year_length == 366) == is_leap(year)
            assert last_day == (year, 12, 30 if is_leap(year) else 29)


class TestInvalidInput:
    @pytest.mark.parametrize("year, month, day", [
        (1403, 0, 1),
        (1403, 13, 1),
        (1403, 1, 0),
        (1403, 7, 31),
        (1402, 12, 30),
    ])
    def test_rejects_instead_of_clamping(self, year, month, day):
        with pytest.raises(InvalidCalendarDate):
            jalali_to_gregorian(year, month, day)

    def test_invalid_calendar_date_is_value_error(self):
        with pytest.raises(ValueError):
            jalali_to_civil(1403, 12, 31)

    def test_parse_jalali(self):
        assert parse_jalali("1403-08-25") == JalaliDate(1403, 8, 25)
        assert parse_jalali("1403/12/30") == JalaliDate(1403, 12, 30)
        with pytest.raises(InvalidCalendarDate):
            parse_jalali("1403-08")
        with pytest.raises(InvalidCalendarDate):
            parse_jalali("1404-12-30")


class TestInstants:
    def test_to_civil_date_accepts_dates_and_strings(self):
        assert to_civil_date(datetime.date(2024, 9, 21)) == datetime.date(2024, 9, 21)
        assert to_civil_date(datetime.datetime(2024, 9, 21, 23, 59)) == datetime.date(2024, 9, 21)
        assert to_civil_date("2024-09-21") == datetime.date(2024, 9, 21)

    def test_aware_instant_uses_local_timezone(self):
        # 20:30 UTC is already the next day in Tehran (+03:30)
        assert to_civil_date("2024-09-20T20:30:00Z") == datetime.date(2024, 9, 21)

    def test_to_civil_date_rejects_other_types(self):
        with pytest.raises(TypeError):
            to_civil_date(20240921)


class TestJalaliDate:
    def test_formatting(self):
        jdate = JalaliDate(1403, 8, 5)
        assert jdate.isoformat() == "1403-08-05"
        assert jdate.isoformat("/") == "1403/08/05"
        assert jdate.sort_key == "1403/08"
        assert jdate.month_name == "آبان"
        assert jdate.month_label == "آبان 1403"

    def test_to_gregorian(self):
        assert JalaliDate(1403, 7, 1).to_gregorian() == datetime.date(2024, 9, 22)

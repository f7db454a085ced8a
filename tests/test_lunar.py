"""
한국 음력 <-> 양력 변환 (음력 1899~2050 / 양력 1900~2050)
"""

import datetime

import pytest
from korean_lunar_calendar import KoreanLunarCalendar

from manse.errors import OutOfRangeError
from manse.lunar import (
    LunarDate,
    SolarDate,
    leap_month_of,
    lunar_month_days,
    lunar_to_solar,
    lunar_year_days,
    resolve_lunar_auto,
    solar_to_lunar,
)


def solar(y, m, d):
    return SolarDate(year=y, month=m, day=d)


# =============================================================================
# 음력 -> 양력
# =============================================================================


class TestLunarToSolar:
    @pytest.mark.parametrize("lunar,expected", [
        ((2024, 1, 1), (2024, 2, 10)),    # 설날
        ((2025, 1, 1), (2025, 1, 29)),
        ((2024, 8, 15), (2024, 9, 17)),   # 추석
        ((1900, 1, 1), (1900, 1, 31)),
        ((1899, 12, 1), (1900, 1, 1)),
        ((2050, 11, 18), (2050, 12, 31)),
    ])
    def test_known_dates(self, lunar, expected):
        assert lunar_to_solar(*lunar) == solar(*expected)

    def test_leap_month_2023(self):
        assert leap_month_of(2023) == 2
        assert lunar_to_solar(2023, 2, 1) == solar(2023, 2, 20)
        assert lunar_to_solar(2023, 2, 1, True) == solar(2023, 3, 22)
        assert lunar_to_solar(2023, 2, 29, True) == solar(2023, 4, 19)

    def test_leap_month_2020(self):
        assert leap_month_of(2020) == 4
        assert lunar_to_solar(2020, 4, 15) == solar(2020, 5, 7)
        assert lunar_to_solar(2020, 4, 1, True) == solar(2020, 5, 23)
        assert lunar_to_solar(2020, 4, 15, True) == solar(2020, 6, 6)

    @pytest.mark.parametrize("args", [
        (2023, 2, 30, True),      # 윤2월은 29일까지
        (2024, 3, 1, True),       # 2024년은 윤달 없음
        (2024, 13, 1),
        (2024, 1, 0),
        (1898, 1, 1),
        (2051, 1, 1),
        (2050, 12, 1),            # 양력 2051년
        (1899, 1, 1),             # 양력 1899년
    ])
    def test_unresolvable_returns_none(self, args):
        assert lunar_to_solar(*args) is None


# =============================================================================
# 양력 -> 음력
# =============================================================================


class TestSolarToLunar:
    def test_known_dates(self):
        assert solar_to_lunar(2024, 2, 10) == LunarDate(year=2024, month=1, day=1)
        assert solar_to_lunar(2024, 2, 9) == LunarDate(year=2023, month=12, day=30)
        assert solar_to_lunar(2023, 3, 22) == LunarDate(year=2023, month=2, day=1, is_leap_month=True)
        assert solar_to_lunar(1900, 1, 1) == LunarDate(year=1899, month=12, day=1)
        assert solar_to_lunar(2050, 12, 31) == LunarDate(year=2050, month=11, day=18)

    @pytest.mark.parametrize("args", [(1899, 12, 31), (2051, 1, 1), (2023, 2, 29), (2024, 0, 1)])
    def test_out_of_range_returns_none(self, args):
        assert solar_to_lunar(*args) is None

    def test_round_trip_every_day(self):
        day = datetime.date(1900, 1, 1)
        last = datetime.date(2050, 12, 31)
        while day <= last:
            lunar = solar_to_lunar(day.year, day.month, day.day)
            back = lunar_to_solar(lunar.year, lunar.month, lunar.day, lunar.is_leap_month)
            assert back == solar(day.year, day.month, day.day), day
            day += datetime.timedelta(days=1)

    def test_matches_korean_lunar_calendar(self):
        calendar = KoreanLunarCalendar()
        day = datetime.date(1900, 1, 1)
        last = datetime.date(2050, 12, 31)
        while day <= last:
            assert calendar.setSolarDate(day.year, day.month, day.day)
            lunar = solar_to_lunar(day.year, day.month, day.day)
            expected = (calendar.lunarYear, calendar.lunarMonth, calendar.lunarDay, calendar.isIntercalation)
            assert (lunar.year, lunar.month, lunar.day, lunar.is_leap_month) == expected, day
            day += datetime.timedelta(days=13)


# =============================================================================
# 달 길이 / 자동 판정 / 모델 검증
# =============================================================================


class TestMonthLengths:
    def test_2024(self):
        lengths = [lunar_month_days(2024, m) for m in range(1, 13)]
        assert lengths == [29, 30, 29, 29, 30, 29, 30, 30, 29, 30, 30, 29]
        assert lunar_year_days(2024) == 354
        assert leap_month_of(2024) == 0

    def test_leap_year_has_13_months(self):
        assert lunar_year_days(2023) == sum(lunar_month_days(2023, m) for m in range(1, 13)) + 29

    def test_missing_leap_month_has_no_days(self):
        assert lunar_month_days(2024, 5, True) == 0

    def test_year_out_of_range(self):
        with pytest.raises(OutOfRangeError):
            leap_month_of(2051)
        with pytest.raises(OutOfRangeError):
            lunar_year_days(1898)


class TestResolveLunarAuto:
    def test_prefers_regular_month(self):
        assert resolve_lunar_auto(2023, 2, 1) == solar(2023, 2, 20)

    def test_falls_back_to_leap_month(self):
        # 평달 2월은 30일, 윤2월은 29일이므로 30일은 평달로만 풀린다
        assert resolve_lunar_auto(2023, 2, 30) == solar(2023, 3, 21)

    def test_unresolvable(self):
        assert resolve_lunar_auto(2024, 1, 30) is None


class TestModels:
    @pytest.mark.parametrize("fields", [
        dict(year=1898, month=1, day=1),
        dict(year=2024, month=13, day=1),
        dict(year=2024, month=1, day=31),
    ])
    def test_lunar_date_rejects(self, fields):
        with pytest.raises(OutOfRangeError):
            LunarDate(**fields)

    @pytest.mark.parametrize("fields", [
        dict(year=1899, month=12, day=31),
        dict(year=2023, month=2, day=29),
        dict(year=2051, month=1, day=1),
    ])
    def test_solar_date_rejects(self, fields):
        with pytest.raises(OutOfRangeError):
            SolarDate(**fields)

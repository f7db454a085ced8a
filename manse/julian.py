"""
율리우스일(Julian Day) 변환과 분 단위 달력 연산

- datetime_to_jd / jd_to_calendar : Meeus 알고리즘 (1582-10-15 그레고리력 개정 반영)
- round_to_nearest_minute         : 30초 이상 올림, 분→시→일→월→년 자리올림
- add_minutes / minutes_between   : 모든 시간 보정이 공유하는 분 단위 연산
"""

import math

from pydantic import BaseModel, model_validator

from manse.errors import OutOfRangeError
from manse.models import FrozenModel

GREGORIAN_REFORM_JD = 2299161
MINUTES_PER_DAY = 1440
_DAYS_IN_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def is_leap_year(year: int) -> bool:
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def days_in_month(year: int, month: int) -> int:
    if month == 2 and is_leap_year(year):
        return 29
    return _DAYS_IN_MONTH[month - 1]


def day_of_year(year: int, month: int, day: int) -> int:
    return sum(days_in_month(year, m) for m in range(1, month)) + day


class CivilMoment(FrozenModel):
    """분 단위 벽시계 시각 (타임존 정보 없음)"""

    year: int
    month: int
    day: int
    hour: int = 0
    minute: int = 0

    @model_validator(mode="after")
    def _check_fields(self):
        if not 1 <= self.month <= 12:
            raise OutOfRangeError(f"month out of range: {self.month}")
        if not 1 <= self.day <= days_in_month(self.year, self.month):
            raise OutOfRangeError(f"day out of range: {self.year}-{self.month}-{self.day}")
        if not 0 <= self.hour <= 23:
            raise OutOfRangeError(f"hour out of range: {self.hour}")
        if not 0 <= self.minute <= 59:
            raise OutOfRangeError(f"minute out of range: {self.minute}")
        return self

    @property
    def key(self) -> int:
        # 20240204 1727 형태의 정렬 키
        return (self.year * 100_000_000 + self.month * 1_000_000
                + self.day * 10_000 + self.hour * 100 + self.minute)

    def date_tuple(self):
        return self.year, self.month, self.day

    def __str__(self):
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}T{self.hour:02d}:{self.minute:02d}"


class CalendarMoment(BaseModel):
    """jd_to_calendar 결과. 초는 소수점 이하까지 유지한다."""
    model_config = {"frozen": True}

    year: int
    month: int
    day: int
    hour: int = 0
    minute: int = 0
    second: float = 0.0


# ==========================================
# 1. JD <-> 달력
# ==========================================
def datetime_to_jd(year, month, day, hour=0, minute=0, second=0.0) -> float:
    y, m = year, month
    if m <= 2:
        y -= 1
        m += 12
    a = math.floor(y / 100)
    b = 2 - a + math.floor(a / 4)
    frac = (hour + minute / 60.0 + second / 3600.0) / 24.0
    return math.floor(365.25 * (y + 4716)) + math.floor(30.6001 * (m + 1)) + day + b - 1524.5 + frac


def jd_to_calendar(jd: float) -> CalendarMoment:
    z = math.floor(jd + 0.5)
    f = jd + 0.5 - z
    if z >= GREGORIAN_REFORM_JD:
        alpha = math.floor((z - 1867216.25) / 36524.25)
        a = z + 1 + alpha - math.floor(alpha / 4)
    else:
        a = z
    b = a + 1524
    c = math.floor((b - 122.1) / 365.25)
    d = math.floor(365.25 * c)
    e = math.floor((b - d) / 30.6001)

    day = b - d - math.floor(30.6001 * e)
    month = e - 1 if e < 14 else e - 13
    year = c - 4716 if month > 2 else c - 4715

    total_hours = f * 24.0
    hour = math.floor(total_hours)
    total_minutes = (total_hours - hour) * 60.0
    minute = math.floor(total_minutes)
    second = (total_minutes - minute) * 60.0
    return CalendarMoment(year=year, month=month, day=day, hour=hour, minute=minute, second=second)


def jdn(year: int, month: int, day: int) -> int:
    """정오 기준 정수 율리우스일 번호"""
    return int(math.floor(datetime_to_jd(year, month, day, 12)))


def jdn_to_date(number: int):
    """JDN -> 역산 그레고리력 (년, 월, 일). jdn() 의 역함수 (Fliegel-Van Flandern)"""
    l = number + 68569
    n = 4 * l // 146097
    l = l - (146097 * n + 3) // 4
    i = 4000 * (l + 1) // 1461001
    l = l - 1461 * i // 4 + 31
    j = 80 * l // 2447
    day = l - 2447 * j // 80
    l = j // 11
    month = j + 2 - 12 * l
    year = 100 * (n - 49) + i + l
    return year, month, day


# ==========================================
# 2. 분 단위 반올림 / 자리올림
# ==========================================
def round_to_nearest_minute(moment: CalendarMoment) -> CivilMoment:
    year, month, day = moment.year, moment.month, moment.day
    hour, minute = moment.hour, moment.minute
    if moment.second >= 30.0:
        minute += 1
        if minute == 60:
            minute = 0
            hour += 1
            if hour == 24:
                hour = 0
                day += 1
                if day > days_in_month(year, month):
                    day = 1
                    month += 1
                    if month > 12:
                        month = 1
                        year += 1
    return CivilMoment(year=year, month=month, day=day, hour=hour, minute=minute)


def _ordinal_minutes(moment: CivilMoment) -> int:
    return jdn(moment.year, moment.month, moment.day) * MINUTES_PER_DAY + moment.hour * 60 + moment.minute


def add_minutes(moment: CivilMoment, minutes: int) -> CivilMoment:
    if not minutes:
        return moment
    total = _ordinal_minutes(moment) + int(minutes)
    day_number, rest = divmod(total, MINUTES_PER_DAY)
    year, month, day = jdn_to_date(day_number)
    return CivilMoment(year=year, month=month, day=day, hour=rest // 60, minute=rest % 60)


def minutes_between(start: CivilMoment, end: CivilMoment) -> int:
    """start -> end 부호 있는 분 차이"""
    return _ordinal_minutes(end) - _ordinal_minutes(start)


def next_day(year: int, month: int, day: int):
    return jdn_to_date(jdn(year, month, day) + 1)

"""
[음력 <-> 양력] 한국 음력 변환 (음력 1899~2050, 양력 1900~2050)

음력 1899년 1월 1일(JDN 2414696)부터의 누적 일수로 변환한다.
잘못된 입력은 None 을 돌려주고, 범위 밖의 LunarDate / SolarDate 생성은 OutOfRangeError.
"""

import logging
from typing import Optional

import numpy as np
from pydantic import model_validator

from manse import lunar_data as ld
from manse.errors import OutOfRangeError
from manse.julian import days_in_month, jdn, jdn_to_date
from manse.models import FrozenModel
from manse.registry import get_registry

logger = logging.getLogger(__name__)

SOLAR_FIRST_YEAR = 1900
SOLAR_LAST_YEAR = 2050


class LunarDate(FrozenModel):

    year: int
    month: int
    day: int
    is_leap_month: bool = False

    @model_validator(mode="after")
    def _check_range(self):
        if not ld.LUNAR_FIRST_YEAR <= self.year <= ld.LUNAR_LAST_YEAR:
            raise OutOfRangeError(f"lunar year out of range: {self.year}")
        if not 1 <= self.month <= 12:
            raise OutOfRangeError(f"lunar month out of range: {self.month}")
        if not 1 <= self.day <= 30:
            raise OutOfRangeError(f"lunar day out of range: {self.day}")
        return self


class SolarDate(FrozenModel):

    year: int
    month: int
    day: int

    @model_validator(mode="after")
    def _check_range(self):
        if not SOLAR_FIRST_YEAR <= self.year <= SOLAR_LAST_YEAR:
            raise OutOfRangeError(f"solar year out of range: {self.year}")
        if not 1 <= self.month <= 12:
            raise OutOfRangeError(f"solar month out of range: {self.month}")
        if not 1 <= self.day <= days_in_month(self.year, self.month):
            raise OutOfRangeError(f"solar day out of range: {self.year}-{self.month}-{self.day}")
        return self


def _word(year: int) -> int:
    table = get_registry().lunar
    return table.words[year - table.first_year]


def _year_start_jdn(year: int) -> int:
    table = get_registry().lunar
    return int(table.year_start_jdn[year - table.first_year])


def is_supported_lunar_year(year: int) -> bool:
    return ld.LUNAR_FIRST_YEAR <= year <= ld.LUNAR_LAST_YEAR


def leap_month_of(year: int) -> int:
    """윤달 위치 (없으면 0)"""
    if not is_supported_lunar_year(year):
        raise OutOfRangeError(f"lunar year out of range: {year}")
    return ld.leap_month(_word(year))


def lunar_year_days(year: int) -> int:
    if not is_supported_lunar_year(year):
        raise OutOfRangeError(f"lunar year out of range: {year}")
    return ld.year_total_days(_word(year))


def lunar_month_days(year: int, month: int, is_leap_month: bool = False) -> int:
    """해당 음력 달의 일수. 없는 윤달이면 0"""
    word = _word(year)
    if is_leap_month:
        if ld.leap_month(word) != month:
            return 0
        return 30 if ld.is_leap_month_big(word) else 29
    return 30 if ld.is_month_big(word, month) else 29


def _months_in_order(year: int):
    """(월, 윤달여부, 일수) 를 달력 순서대로"""
    word = _word(year)
    leap = ld.leap_month(word)
    for month in range(1, 13):
        yield month, False, lunar_month_days(year, month)
        if month == leap:
            yield month, True, lunar_month_days(year, month, True)


def _in_solar_range(number: int) -> bool:
    return jdn(SOLAR_FIRST_YEAR, 1, 1) <= number <= jdn(SOLAR_LAST_YEAR, 12, 31)


# ==========================================
# 변환
# ==========================================
def lunar_to_solar(year: int, month: int, day: int, is_leap_month: bool = False) -> Optional[SolarDate]:
    if not is_supported_lunar_year(year) or not 1 <= month <= 12 or day < 1:
        return None
    if day > lunar_month_days(year, month, is_leap_month):
        return None

    offset = 0
    for m, leap, days in _months_in_order(year):
        if m == month and leap == is_leap_month:
            break
        offset += days
    number = _year_start_jdn(year) + offset + day - 1
    if not _in_solar_range(number):
        return None
    y, mo, d = jdn_to_date(number)
    return SolarDate(year=y, month=mo, day=d)


def solar_to_lunar(year: int, month: int, day: int) -> Optional[LunarDate]:
    if not SOLAR_FIRST_YEAR <= year <= SOLAR_LAST_YEAR or not 1 <= month <= 12:
        return None
    if not 1 <= day <= days_in_month(year, month):
        return None

    number = jdn(year, month, day)
    table = get_registry().lunar
    pos = int(np.searchsorted(table.year_start_jdn, number, side="right")) - 1
    if not 0 <= pos < len(table.words):
        return None
    lunar_year = table.first_year + pos
    remaining = number - int(table.year_start_jdn[pos])
    for m, leap, days in _months_in_order(lunar_year):
        if remaining < days:
            return LunarDate(year=lunar_year, month=m, day=remaining + 1, is_leap_month=leap)
        remaining -= days
    # 누적표와 월별 일수가 어긋날 때만 도달
    raise OutOfRangeError(f"lunar table inconsistent for year {lunar_year}")


def resolve_lunar_auto(year: int, month: int, day: int) -> Optional[SolarDate]:
    """윤달 여부를 모를 때: 평달 먼저, 안 되면 윤달"""
    found = lunar_to_solar(year, month, day, False)
    if found is None:
        found = lunar_to_solar(year, month, day, True)
    if found is None:
        logger.debug("lunar date %d-%d-%d not resolvable", year, month, day)
    return found

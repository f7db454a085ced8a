"""
[진태양시 보정] 벽시계 시각 -> 표준시 -> 보정 태양시

    standard = local - DST + (UTC+8:30 시기 보정)
    adjusted = standard + 경도(LMT) 보정 + 균시차

모든 보정은 분 단위 정수이며, 결과에 항목별로 남긴다.
"""

import logging
import math
from datetime import datetime
from functools import lru_cache
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import BaseModel

from manse import saju_constants as sc
from manse.errors import ConfigError
from manse.julian import CivilMoment, add_minutes, day_of_year

logger = logging.getLogger(__name__)

MINUTES_PER_LONGITUDE_DEGREE = 4.0
SEOUL_TIMEZONE = "Asia/Seoul"
# 표준 오프셋을 읽을 기준일 (현행 표준시)
_REFERENCE_DATE = datetime(2001, 1, 15, 12, 0)


class SolarTimeAdjustment(BaseModel):
    model_config = {"frozen": True}

    standard: CivilMoment
    adjusted: CivilMoment
    dst_correction_minutes: int
    standard_time_correction_minutes: int
    longitude_correction_minutes: int
    equation_of_time_minutes: int


def js_round(value: float) -> int:
    """0.5 는 항상 올림 (Python round 의 은행가 반올림 대신)"""
    return int(math.floor(value + 0.5))


# ==========================================
# 1. 표준 자오선 / LMT
# ==========================================
@lru_cache(maxsize=128)
def standard_offset_minutes(timezone: str) -> int:
    """서머타임을 뺀 타임존 표준 UTC 오프셋(분)"""
    try:
        tz = ZoneInfo(timezone)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise ConfigError(f"unknown timezone: {timezone!r}") from e
    ref = _REFERENCE_DATE.replace(tzinfo=tz)
    offset = ref.utcoffset() - ref.dst()
    return int(offset.total_seconds() // 60)


def standard_meridian_degrees(timezone: str) -> float:
    return standard_offset_minutes(timezone) / 60.0 * 15.0


def lmt_offset_minutes(longitude: float, standard_meridian: float) -> int:
    return js_round((longitude - standard_meridian) * MINUTES_PER_LONGITUDE_DEGREE)


def to_kst(moment: CivilMoment, timezone: str) -> CivilMoment:
    """표준시 moment 를 절기표 기준(KST) 시각으로 옮긴다"""
    return add_minutes(moment, sc.KST_OFFSET_MINUTES - standard_offset_minutes(timezone))


# ==========================================
# 2. 역사적 보정 (서머타임 / UTC+8:30)
# ==========================================
def _in_periods(moment: CivilMoment, periods, end_inclusive: bool) -> bool:
    date = moment.date_tuple()
    for start, end in periods:
        if start <= date and (date <= end if end_inclusive else date < end):
            return True
    return False


def korean_dst_offset_minutes(moment: CivilMoment) -> int:
    """서머타임 시행 기간이면 60"""
    if _in_periods(moment, sc.KOREAN_DST_PERIODS, end_inclusive=False):
        return sc.DST_OFFSET_MINUTES
    return 0


def standard_time_history_minutes(moment: CivilMoment) -> int:
    """동경 127.5도 표준시(UTC+8:30) 시기의 벽시계를 UTC+9 로 맞추는 +30분"""
    if _in_periods(moment, sc.KOREAN_UTC_0830_PERIODS, end_inclusive=True):
        return sc.UTC_0830_CORRECTION_MINUTES
    return 0


# ==========================================
# 3. 균시차
# ==========================================
def equation_of_time_minutes(doy: int) -> int:
    b = 2.0 * math.pi * (doy - 81.0) / 364.0
    eot = 9.87 * math.sin(2.0 * b) - 7.53 * math.cos(b) - 1.5 * math.sin(b)
    return js_round(eot)


# ==========================================
# 4. 통합
# ==========================================
def adjust_solar_time(local: CivilMoment, timezone: str, longitude: float, config) -> SolarTimeAdjustment:
    dst = korean_dst_offset_minutes(local) if config.apply_dst_history else 0
    history = 0
    if config.apply_standard_time_history and timezone == SEOUL_TIMEZONE:
        history = standard_time_history_minutes(local)
    standard = add_minutes(local, history - dst)

    meridian = config.lmt_baseline_longitude
    if meridian is None:
        meridian = standard_meridian_degrees(timezone)
    lmt = lmt_offset_minutes(longitude, meridian)
    eot = 0
    if config.include_equation_of_time:
        eot = equation_of_time_minutes(day_of_year(standard.year, standard.month, standard.day))

    adjusted = add_minutes(standard, lmt + eot)
    logger.debug("solar time %s -> standard %s -> adjusted %s (dst=%d hist=%d lmt=%d eot=%d)",
                 local, standard, adjusted, dst, history, lmt, eot)
    return SolarTimeAdjustment(
        standard=standard,
        adjusted=adjusted,
        dst_correction_minutes=dst,
        standard_time_correction_minutes=history,
        longitude_correction_minutes=lmt,
        equation_of_time_minutes=eot,
    )

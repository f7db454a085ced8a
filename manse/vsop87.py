"""
[VSOP87D 폴백] 절기표(1900~2050) 밖의 연도에서 절입 시각을 직접 계산한다.

1. UT -> TT : NASA ΔT 다항식
2. VSOP87D L/R 급수로 지구 일심 황경과 거리를 구하고 180°를 더해 태양 지심 황경
3. 장동(IAU1980 주요 4항) + 광행차(-20.4898"/R) 보정
4. 목표 황경에 대해 뉴턴 반복으로 통과 시각을 찾고 KST 분 단위로 반올림

표 조회보다 정밀도가 낮으므로 호출 측에서 VSOP87_CALCULATED 로 표시한다.
"""

import logging
import math
from functools import lru_cache

import numpy as np

from manse import saju_constants as sc
from manse.ganji import month_branch
from manse.julian import CivilMoment, datetime_to_jd, jd_to_calendar, round_to_nearest_minute
from manse.registry import get_registry
from manse.term_table import JeolBoundary, search_boundary

logger = logging.getLogger(__name__)

J2000 = 2451545.0
NEWTON_STEP_DEG_PER_DAY = 0.98564736
MAX_NEWTON_ITERATION = 24
MAX_TT_UTC_FIXPOINT_ITERATION = 8
ABERRATION_ARCSEC = 20.4898
KST_DAY_FRACTION = sc.KST_OFFSET_MINUTES / 1440.0


def delta_t_seconds(year: int, month: int = 7) -> float:
    """ΔT = TT - UT (초), NASA eclipse 다항식"""
    y = year + (month - 0.5) / 12
    if year < -500:
        u = (y - 1820) / 100
        return -20 + 32 * u * u
    if year < 500:
        u = y / 100
        return (10583.6 - 1014.41 * u + 33.78311 * u ** 2 - 5.952053 * u ** 3
                - 0.1798452 * u ** 4 + 0.022174192 * u ** 5 + 0.0090316521 * u ** 6)
    if year < 1600:
        u = (y - 1000) / 100
        return (1574.2 - 556.01 * u + 71.23472 * u ** 2 + 0.319781 * u ** 3
                - 0.8503463 * u ** 4 - 0.005050998 * u ** 5 + 0.0083572073 * u ** 6)
    if year < 1700:
        t = y - 1600
        return 120 - 0.9808 * t - 0.01532 * t ** 2 + t ** 3 / 7129
    if year < 1800:
        t = y - 1700
        return 8.83 + 0.1603 * t - 0.0059285 * t ** 2 + 0.00013336 * t ** 3 - t ** 4 / 1174000
    if year < 1860:
        t = y - 1800
        return (13.72 - 0.332447 * t + 0.0068612 * t ** 2 + 0.0041116 * t ** 3
                - 0.00037436 * t ** 4 + 0.0000121272 * t ** 5 - 0.0000001699 * t ** 6
                + 0.000000000875 * t ** 7)
    if year < 1900:
        t = y - 1860
        return (7.62 + 0.5737 * t - 0.251754 * t ** 2 + 0.01680668 * t ** 3
                - 0.0004473624 * t ** 4 + t ** 5 / 233174)
    if year < 1920:
        t = y - 1900
        return -2.79 + 1.494119 * t - 0.0598939 * t ** 2 + 0.0061966 * t ** 3 - 0.000197 * t ** 4
    if year < 1941:
        t = y - 1920
        return 21.2 + 0.84493 * t - 0.0761 * t ** 2 + 0.0020936 * t ** 3
    if year < 1961:
        t = y - 1950
        return 29.07 + 0.407 * t - t ** 2 / 233 + t ** 3 / 2547
    if year < 1986:
        t = y - 1975
        return 45.45 + 1.067 * t - t ** 2 / 260 - t ** 3 / 718
    if year < 2005:
        t = y - 2000
        return (63.86 + 0.3345 * t - 0.060374 * t ** 2 + 0.0017275 * t ** 3
                + 0.000651814 * t ** 4 + 0.00002373599 * t ** 5)
    if year < 2050:
        t = y - 2000
        return 62.92 + 0.32217 * t + 0.005589 * t ** 2
    if year < 2150:
        u = (y - 1820) / 100
        return -20 + 32 * u * u - 0.5628 * (2150 - y)
    u = (y - 1820) / 100
    return -20 + 32 * u * u


def _eval_series(series, tau: float) -> float:
    total = 0.0
    for power, terms in enumerate(series):
        total += np.sum(terms[:, 0] * np.cos(terms[:, 1] + terms[:, 2] * tau)) * tau ** power
    return float(total) / 1e8


def nutation_longitude_arcsec(t: float) -> float:
    """황경 장동 Δψ (IAU1980 주요 4항)"""
    omega = math.radians(125.04452 - 1934.136261 * t)
    ls2 = math.radians(2 * (280.4665 + 36000.7698 * t))
    lm2 = math.radians(2 * (218.3165 + 481267.8813 * t))
    return -17.20 * math.sin(omega) - 1.32 * math.sin(ls2) - 0.23 * math.sin(lm2) + 0.21 * math.sin(2 * omega)


def apparent_longitude_tt(jd_tt: float) -> float:
    series = get_registry().vsop87
    tau = (jd_tt - J2000) / 365250.0
    l_rad = _eval_series(series.l_series, tau)
    radius = _eval_series(series.r_series, tau)
    lam = math.degrees(l_rad) + 180.0
    t = tau * 10.0
    lam += nutation_longitude_arcsec(t) / 3600.0 - ABERRATION_ARCSEC / 3600.0 / radius
    return lam % 360.0


def solar_longitude(jd_ut: float) -> float:
    """UT 율리우스일의 태양 시황경 [0, 360)"""
    cal = jd_to_calendar(jd_ut)
    return apparent_longitude_tt(jd_ut + delta_t_seconds(cal.year, cal.month) / 86400.0)


def _norm180(deg: float) -> float:
    return (deg + 180.0) % 360.0 - 180.0


def find_crossing_jd(year: int, target_longitude: float, guess_month: int, guess_day: int) -> float:
    """태양이 target_longitude 를 지나는 UT 율리우스일"""
    jd_ut = datetime_to_jd(year, guess_month, guess_day, 12) - KST_DAY_FRACTION
    jd_tt = jd_ut + delta_t_seconds(year, guess_month) / 86400.0
    for _ in range(MAX_NEWTON_ITERATION):
        delta = _norm180(target_longitude - apparent_longitude_tt(jd_tt))
        jd_tt += delta / NEWTON_STEP_DEG_PER_DAY
        if abs(delta) < 1e-9:
            break

    jd_ut = jd_tt
    for _ in range(MAX_TT_UTC_FIXPOINT_ITERATION):
        cal = jd_to_calendar(jd_ut + KST_DAY_FRACTION)
        jd_ut = jd_tt - delta_t_seconds(cal.year, cal.month) / 86400.0
    return jd_ut


def crossing_moment_kst(year: int, target_longitude: float, guess_month: int, guess_day: int) -> CivilMoment:
    jd_ut = find_crossing_jd(year, target_longitude, guess_month, guess_day)
    return round_to_nearest_minute(jd_to_calendar(jd_ut + KST_DAY_FRACTION))


# ==========================================
# 연도별 절입 경계 (표와 같은 인터페이스)
# ==========================================
@lru_cache(maxsize=512)
def boundaries_of_year(year: int) -> tuple:
    """양력 year 안의 12절입 (KST, 시간순)"""
    logger.debug("computing VSOP87 jeol boundaries for %d", year)
    found = []
    for term, longitude, month_index, guess_month, guess_day in sc.JEOL_TERM_SPECS:
        mt = crossing_moment_kst(year, longitude, guess_month, guess_day)
        found.append(JeolBoundary(
            year=mt.year, month=mt.month, day=mt.day, hour=mt.hour, minute=mt.minute,
            solar_longitude=longitude,
            saju_month_index=month_index,
            branch=month_branch(month_index),
            term=term,
        ))
    return tuple(sorted(found, key=lambda b: b.key))


def _span(years):
    boundaries = [b for y in years for b in boundaries_of_year(y)]
    return boundaries, np.array([b.key for b in boundaries], dtype=np.int64)


def ipchun_of(year: int) -> JeolBoundary:
    return next(b for b in boundaries_of_year(year) if b.saju_month_index == 1)


def previous_boundary_at_or_before(moment: CivilMoment) -> JeolBoundary:
    boundaries, keys = _span((moment.year - 1, moment.year))
    return search_boundary(boundaries, keys, moment.key, "before", inclusive=True)


def next_boundary_after(moment: CivilMoment) -> JeolBoundary:
    boundaries, keys = _span((moment.year, moment.year + 1))
    return search_boundary(boundaries, keys, moment.key, "after", inclusive=False)


def saju_month_index_at(moment: CivilMoment) -> int:
    return previous_boundary_at_or_before(moment).saju_month_index


def saju_year_at(moment: CivilMoment) -> int:
    return moment.year if moment.key >= ipchun_of(moment.year).key else moment.year - 1

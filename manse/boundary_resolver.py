"""
[절입 경계 해석] 절기표 -> VSOP87 -> 6일 근사 순으로 내려가며 답을 찾는다.

어느 단계가 답했는지(BoundaryMode)는 항상 결과에 함께 돌려준다.
정밀도가 떨어지는 경로는 예외 없이 경고 문자열을 남긴다.
"""

import enum
import logging
from typing import NamedTuple, Optional

from manse import ganji, term_table, vsop87
from manse import saju_constants as sc
from manse.julian import CivilMoment, days_in_month

logger = logging.getLogger(__name__)

# 1582년 그레고리력 개정 이전은 jd_to_calendar 가 율리우스력으로 돌아가므로 제외
VSOP87_FIRST_YEAR = 1600
VSOP87_LAST_YEAR = 3000


class BoundaryMode(str, enum.Enum):
    EXACT_TABLE = "EXACT_TABLE"
    VSOP87_CALCULATED = "VSOP87_CALCULATED"
    APPROXIMATE_DAY6 = "APPROXIMATE_DAY6"


class Resolved(NamedTuple):
    value: object
    mode: BoundaryMode
    warning: Optional[str] = None


def vsop87_warning(year: int) -> str:
    return (f"Birth year {year} is outside JeolBoundaryTable "
            f"({sc.TABLE_FIRST_YEAR}-{sc.TABLE_LAST_YEAR}); used VSOP87D fallback boundary.")


def table_edge_warning(moment: CivilMoment) -> str:
    return (f"JeolBoundaryTable has no boundary around {moment} at the edge of its range "
            f"({sc.TABLE_FIRST_YEAR}-{sc.TABLE_LAST_YEAR}); used VSOP87D fallback boundary.")


def approx_warning(year: int, direction: str) -> str:
    return (f"Jeol boundary table miss for year={year}; used minute-level approximate boundary "
            f"day={sc.APPROX_BOUNDARY_DAY}@{sc.APPROX_BOUNDARY_HOUR:02d}:00 ({direction}), "
            f"expected precision lower than exact mode.")


def vsop87_available(year: int) -> bool:
    return VSOP87_FIRST_YEAR <= year <= VSOP87_LAST_YEAR


def _use_table(moment: CivilMoment, force_vsop87: bool) -> bool:
    return not force_vsop87 and term_table.is_supported_year(moment.year)


def _vsop87_resolved(value, moment: CivilMoment, force_vsop87: bool) -> Resolved:
    in_table = term_table.is_supported_year(moment.year)
    # 설정으로 VSOP87 을 고른 경우는 경고 대상이 아니다
    if force_vsop87 and in_table:
        return Resolved(value, BoundaryMode.VSOP87_CALCULATED)
    # 표 범위 안인데 경계가 없으면 표의 첫 경계 이전 또는 마지막 경계 이후
    warning = table_edge_warning(moment) if in_table else vsop87_warning(moment.year)
    logger.warning(warning)
    return Resolved(value, BoundaryMode.VSOP87_CALCULATED, warning)


# ==========================================
# 사주 월 / 사주 연도
# ==========================================
def resolve_month_index(moment: CivilMoment, force_vsop87: bool = False) -> Resolved:
    """KST moment 의 사주 월 인덱스"""
    if _use_table(moment, force_vsop87):
        index = term_table.saju_month_index_at(moment)
        if index is not None:
            return Resolved(index, BoundaryMode.EXACT_TABLE)
    if vsop87_available(moment.year):
        return _vsop87_resolved(vsop87.saju_month_index_at(moment), moment, force_vsop87)
    warning = approx_warning(moment.year, "previous")
    logger.warning(warning)
    return Resolved(ganji.month_index_by_day_approx(moment.month, moment.day),
                    BoundaryMode.APPROXIMATE_DAY6, warning)


def resolve_saju_year(moment: CivilMoment, force_vsop87: bool = False) -> Resolved:
    """입춘 기준 사주 연도"""
    if _use_table(moment, force_vsop87):
        return Resolved(term_table.saju_year_at(moment), BoundaryMode.EXACT_TABLE)
    if vsop87_available(moment.year):
        return _vsop87_resolved(vsop87.saju_year_at(moment), moment, force_vsop87)
    warning = approx_warning(moment.year, "previous")
    logger.warning(warning)
    saju_year = ganji.saju_year_by_ipchun_approx(moment.year, moment.month, moment.day)
    return Resolved(saju_year, BoundaryMode.APPROXIMATE_DAY6, warning)


# ==========================================
# 대운용 경계 탐색
# ==========================================
def approx_boundary(moment: CivilMoment, forward: bool) -> CivilMoment:
    """모든 절입을 매월 6일 12:00 으로 가정한 경계"""
    def on_day6(year, month):
        day = min(sc.APPROX_BOUNDARY_DAY, days_in_month(year, month))
        return CivilMoment(year=year, month=month, day=day, hour=sc.APPROX_BOUNDARY_HOUR, minute=0)

    def shift(year, month, delta):
        total = year * 12 + (month - 1) + delta
        return total // 12, total % 12 + 1

    this_month = on_day6(moment.year, moment.month)
    if forward:
        if moment.key < this_month.key:
            return this_month
        return on_day6(*shift(moment.year, moment.month, 1))
    if moment.key >= this_month.key:
        return this_month
    return on_day6(*shift(moment.year, moment.month, -1))


def resolve_boundary(moment: CivilMoment, forward: bool, force_vsop87: bool = False) -> Resolved:
    """
    forward=True : moment 이후 첫 절입 (같은 분은 제외)
    forward=False: moment 이전(같은 분 포함) 마지막 절입
    value 는 경계 시각 CivilMoment
    """
    if _use_table(moment, force_vsop87):
        found = (term_table.next_boundary_after(moment) if forward
                 else term_table.previous_boundary_at_or_before(moment))
        if found is not None:
            return Resolved(found.moment, BoundaryMode.EXACT_TABLE)
    if vsop87_available(moment.year):
        found = (vsop87.next_boundary_after(moment) if forward
                 else vsop87.previous_boundary_at_or_before(moment))
        return _vsop87_resolved(found.moment, moment, force_vsop87)
    direction = "next" if forward else "previous"
    warning = approx_warning(moment.year, direction)
    logger.warning(warning)
    return Resolved(approx_boundary(moment, forward), BoundaryMode.APPROXIMATE_DAY6, warning)

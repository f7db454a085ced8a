"""
[대운수 및 경로 계산]

출생 시각에서 다음(순행) / 이전(역행) 절입까지의 분을 구해
360분 = 1개월(3일 = 1년) 비율로 대운 시작 나이와 개월을 낸다.
경계를 어디서 찾았는지(EXACT_TABLE / VSOP87_CALCULATED / APPROXIMATE_DAY6)는 항상 결과에 남는다.
"""

import enum
import logging
from typing import List, Optional

from pydantic import BaseModel

from manse import saju_constants as sc
from manse.boundary_resolver import BoundaryMode, resolve_boundary
from manse.ganji import Pillar, year_pillar
from manse.julian import CivilMoment, minutes_between

logger = logging.getLogger(__name__)

MONTHS_PER_YEAR = 12
YEARS_PER_DAEUN = 10

DaeunBoundaryMode = BoundaryMode


class Gender(str, enum.Enum):
    MALE = "M"
    FEMALE = "F"


class BoundaryDistance(BaseModel):
    model_config = {"frozen": True}

    total_minutes: int
    mode: BoundaryMode
    boundary: CivilMoment
    warning: Optional[str] = None


class DaeunPillar(BaseModel):
    model_config = {"frozen": True}

    order: int
    pillar: Pillar
    start_age: int
    end_age: int


class DaeunInfo(BaseModel):
    model_config = {"frozen": True}

    is_forward: bool
    start_age: int
    start_months: int
    boundary_mode: BoundaryMode
    warnings: List[str] = []
    pillars: List[DaeunPillar] = []


class SaeunPillar(BaseModel):
    model_config = {"frozen": True}

    year: int
    pillar: Pillar


def is_forward(year_stem, gender) -> bool:
    """양년생 남자 / 음년생 여자는 순행"""
    male = Gender(gender) == Gender.MALE
    yang = int(year_stem) % 2 == 0
    return yang == male


def boundary_distance(moment: CivilMoment, forward: bool, force_vsop87: bool = False) -> BoundaryDistance:
    """KST moment 에서 절입까지의 분 (절댓값)"""
    resolved = resolve_boundary(moment, forward, force_vsop87)
    return BoundaryDistance(
        total_minutes=abs(minutes_between(moment, resolved.value)),
        mode=resolved.mode,
        boundary=resolved.value,
        warning=resolved.warning,
    )


def daeun_months(total_minutes: int) -> int:
    return total_minutes // sc.MINUTES_PER_DAEUN_MONTH


def daeun_start(total_minutes: int):
    """(시작 나이, 시작 개월). 1세 미만은 1세 0개월로 올린다"""
    months = daeun_months(total_minutes)
    raw_age = months // MONTHS_PER_YEAR
    start_age = max(sc.MIN_DAEUN_START_AGE, raw_age)
    start_months = months % MONTHS_PER_YEAR if raw_age >= sc.MIN_DAEUN_START_AGE else 0
    return start_age, start_months


def daeun_pillars(month_pillar: Pillar, forward: bool, start_age: int, count: int) -> List[DaeunPillar]:
    step = 1 if forward else -1
    result = []
    for i in range(1, count + 1):
        age = start_age + (i - 1) * YEARS_PER_DAEUN
        result.append(DaeunPillar(
            order=i,
            pillar=month_pillar.shifted(step * i),
            start_age=age,
            end_age=age + YEARS_PER_DAEUN - 1,
        ))
    return result


def calculate_daeun(year_pillar_: Pillar, month_pillar: Pillar, gender, moment: CivilMoment,
                    count: int = 8, force_vsop87: bool = False) -> DaeunInfo:
    forward = is_forward(year_pillar_.stem, gender)
    distance = boundary_distance(moment, forward, force_vsop87)
    start_age, start_months = daeun_start(distance.total_minutes)
    logger.debug("daeun %s: %d min to boundary %s (%s) -> age %d, %d months",
                 "forward" if forward else "reverse", distance.total_minutes,
                 distance.boundary, distance.mode.value, start_age, start_months)
    return DaeunInfo(
        is_forward=forward,
        start_age=start_age,
        start_months=start_months,
        boundary_mode=distance.mode,
        warnings=[distance.warning] if distance.warning else [],
        pillars=daeun_pillars(month_pillar, forward, start_age, count),
    )


# ==========================================
# 세운 (연운)
# ==========================================
def saeun_for_year(year: int) -> SaeunPillar:
    return SaeunPillar(year=year, pillar=year_pillar(year))


def calculate_saeun(start_year: int, count: int = 10) -> List[SaeunPillar]:
    return [saeun_for_year(start_year + i) for i in range(count)]

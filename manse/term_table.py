"""
[절기표] 1900~2050 절입 시각표 (KST, 분 단위)

term_data.json 은 연도별 24절기 목록이며, isMonthChange 가 True 인 12개가
사주 월이 바뀌는 절입(節入) 경계다. 경계와 같은 분에 태어나면 새 달에 속한다.
"""

import json
import logging
from importlib import resources
from typing import Dict, List, Optional

import numpy as np
from pydantic import BaseModel

from manse import saju_constants as sc
from manse.ganji import Branch, month_branch
from manse.julian import CivilMoment
from manse.registry import get_registry

logger = logging.getLogger(__name__)

TERM_DATA_FILE = "term_data.json"


class SolarTerm(BaseModel):
    model_config = {"frozen": True}

    term: str
    moment: CivilMoment
    solar_longitude: int
    solar_index: int
    is_month_change: bool
    month_index: Optional[int] = None


class JeolBoundary(BaseModel):
    """사주 월이 시작되는 절입 시각 (KST)"""
    model_config = {"frozen": True}

    year: int
    month: int
    day: int
    hour: int
    minute: int
    solar_longitude: int
    saju_month_index: int
    branch: Branch
    term: str = ""

    @property
    def moment(self) -> CivilMoment:
        return CivilMoment(year=self.year, month=self.month, day=self.day,
                           hour=self.hour, minute=self.minute)

    @property
    def key(self) -> int:
        return self.moment.key


def load_term_rows() -> Dict[str, List[dict]]:
    """패키지에 포함된 term_data.json 원본을 읽는다"""
    ref = resources.files("manse").joinpath("data").joinpath(TERM_DATA_FILE)
    with ref.open("r", encoding="utf-8") as f:
        return json.load(f)


def parse_term(row: dict) -> SolarTerm:
    date, time = row["datetime"].split("T")
    y, m, d = (int(v) for v in date.split("-"))
    hh, mm = (int(v) for v in time.split(":"))
    return SolarTerm(
        term=row["term"],
        moment=CivilMoment(year=y, month=m, day=d, hour=hh, minute=mm),
        solar_longitude=int(row["degree"]),
        solar_index=int(row["solarIndex"]),
        is_month_change=bool(row["isMonthChange"]),
        month_index=row.get("monthIndex"),
    )


def to_boundary(term: SolarTerm) -> JeolBoundary:
    mt = term.moment
    return JeolBoundary(
        year=mt.year, month=mt.month, day=mt.day, hour=mt.hour, minute=mt.minute,
        solar_longitude=term.solar_longitude,
        saju_month_index=term.month_index,
        branch=month_branch(term.month_index),
        term=term.term,
    )


# ==========================================
# 공통 경계 탐색
# ==========================================
def search_boundary(boundaries, keys, key: int, side: str, inclusive: bool) -> Optional[JeolBoundary]:
    """
    정렬된 경계 목록에서 key 기준 직전(before) 또는 직후(after) 경계를 찾는다.
    inclusive=True 이면 같은 시각의 경계도 포함한다.
    """
    if side == "before":
        # 마지막 b <= key (inclusive) / b < key (strict)
        pos = int(np.searchsorted(keys, key, side="right" if inclusive else "left")) - 1
        return boundaries[pos] if pos >= 0 else None
    if side == "after":
        # 처음 b >= key (inclusive) / b > key (strict)
        pos = int(np.searchsorted(keys, key, side="left" if inclusive else "right"))
        return boundaries[pos] if pos < len(boundaries) else None
    raise ValueError(f"unknown search side: {side}")


def _table():
    return get_registry().jeol


def is_supported_year(year: int) -> bool:
    return sc.TABLE_FIRST_YEAR <= year <= sc.TABLE_LAST_YEAR


def terms_for_year(year: int) -> Optional[tuple]:
    """해당 연도의 24절기 (없으면 None)"""
    return _table().terms_by_year.get(year)


def boundaries_for_year(year: int) -> Optional[Dict[int, JeolBoundary]]:
    if not is_supported_year(year):
        return None
    return {b.saju_month_index: b for b in _table().boundaries_by_year[year]}


def ipchun_of(year: int) -> Optional[JeolBoundary]:
    found = boundaries_for_year(year)
    return found.get(1) if found else None


def previous_boundary_at_or_before(moment: CivilMoment) -> Optional[JeolBoundary]:
    table = _table()
    return search_boundary(table.boundaries, table.boundary_keys, moment.key, "before", inclusive=True)


def next_boundary_after(moment: CivilMoment) -> Optional[JeolBoundary]:
    table = _table()
    return search_boundary(table.boundaries, table.boundary_keys, moment.key, "after", inclusive=False)


def saju_month_index_at(moment: CivilMoment) -> Optional[int]:
    """moment 시점에 적용되는 사주 월 (경계 시각 포함 새 달)"""
    found = previous_boundary_at_or_before(moment)
    return found.saju_month_index if found else None


def saju_year_at(moment: CivilMoment) -> Optional[int]:
    """입춘 기준 사주 연도 (절기표 범위 밖이면 None)"""
    if not is_supported_year(moment.year):
        return None
    ipchun = ipchun_of(moment.year)
    return moment.year if moment.key >= ipchun.key else moment.year - 1


def build_jeol_index(raw: Dict[str, List[dict]]):
    """레지스트리용: 연도별 절기 / 정렬된 절입 경계 / 정렬 키"""
    terms_by_year = {}
    boundaries_by_year = {}
    for year_str in sorted(raw, key=int):
        terms = tuple(sorted((parse_term(r) for r in raw[year_str]), key=lambda t: t.moment.key))
        terms_by_year[int(year_str)] = terms
        boundaries_by_year[int(year_str)] = tuple(to_boundary(t) for t in terms if t.is_month_change)
    boundaries = tuple(b for year in sorted(boundaries_by_year) for b in boundaries_by_year[year])
    logger.debug("jeol table loaded: %d years, %d boundaries", len(terms_by_year), len(boundaries))
    return terms_by_year, boundaries_by_year, boundaries

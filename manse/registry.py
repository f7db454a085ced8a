"""
[참조 데이터 레지스트리] 절기표 / VSOP87 계수 / 음력표

처음 접근할 때 한 번만 만들고 이후에는 읽기만 한다.
numpy 배열은 writeable=False, 매핑은 MappingProxyType 으로 감싸서 공개한다.
"""

import logging
import threading
from types import MappingProxyType
from typing import NamedTuple, Optional

import numpy as np

logger = logging.getLogger(__name__)


class JeolIndex(NamedTuple):
    terms_by_year: MappingProxyType
    boundaries_by_year: MappingProxyType
    boundaries: tuple
    boundary_keys: np.ndarray


class Vsop87Series(NamedTuple):
    l_series: tuple
    r_series: tuple


class LunarTable(NamedTuple):
    first_year: int
    words: tuple
    # year_start_jdn[i] = (first_year + i)년 음력 1월 1일의 JDN, 마지막 원소는 종료 경계
    year_start_jdn: np.ndarray


class ReferenceRegistry(NamedTuple):
    jeol: JeolIndex
    vsop87: Vsop87Series
    lunar: LunarTable


def _frozen_array(values, dtype) -> np.ndarray:
    arr = np.array(values, dtype=dtype)
    arr.setflags(write=False)
    return arr


def _build_jeol() -> JeolIndex:
    from manse import term_table

    terms_by_year, boundaries_by_year, boundaries = term_table.build_jeol_index(term_table.load_term_rows())
    return JeolIndex(
        terms_by_year=MappingProxyType(terms_by_year),
        boundaries_by_year=MappingProxyType(boundaries_by_year),
        boundaries=boundaries,
        boundary_keys=_frozen_array([b.key for b in boundaries], np.int64),
    )


def _build_vsop87() -> Vsop87Series:
    from manse import vsop87_terms

    return Vsop87Series(
        l_series=tuple(_frozen_array(s, np.float64) for s in vsop87_terms.L_SERIES),
        r_series=tuple(_frozen_array(s, np.float64) for s in vsop87_terms.R_SERIES),
    )


def _build_lunar() -> LunarTable:
    from manse import lunar_data

    words = tuple(lunar_data.LUNAR_YEAR_WORDS)
    totals = [lunar_data.year_total_days(w) for w in words]
    starts = np.concatenate(([0], np.cumsum(totals))) + lunar_data.LUNAR_EPOCH_JDN
    return LunarTable(
        first_year=lunar_data.LUNAR_FIRST_YEAR,
        words=words,
        year_start_jdn=_frozen_array(starts, np.int64),
    )


_registry: Optional[ReferenceRegistry] = None
_lock = threading.Lock()


def get_registry() -> ReferenceRegistry:
    """프로세스 전역 레지스트리. 최초 1회만 생성된다."""
    global _registry
    registry = _registry
    if registry is None:
        with _lock:
            if _registry is None:
                logger.debug("building reference registry")
                _registry = ReferenceRegistry(
                    jeol=_build_jeol(),
                    vsop87=_build_vsop87(),
                    lunar=_build_lunar(),
                )
            registry = _registry
    return registry

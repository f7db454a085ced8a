"""
[사주 엔진] 출생 입력 -> 진태양시 -> 절입 판정 -> 4주(년/월/일/시)

년주와 월주는 표준시(KST 환산) 기준으로 절기표를 조회하고,
일주와 시주는 경도/균시차를 반영한 보정 태양시로 자시 규칙을 적용한다.
"""

import logging
from datetime import datetime
from typing import Dict, List, Optional

from pydantic import BaseModel, model_validator

from manse import saju_constants as sc
from manse.boundary_resolver import BoundaryMode, resolve_month_index, resolve_saju_year
from manse.config import DEFAULT_CONFIG, CalculationConfig, DayCutMode
from manse.daeun import DaeunInfo, Gender, calculate_daeun
from manse.day_cut import day_and_hour_pillars
from manse.errors import OutOfRangeError
from manse.ganji import Pillar, month_pillar, year_pillar
from manse.julian import CivilMoment
from manse.models import FrozenModel
from manse.solar_time import adjust_solar_time, to_kst

logger = logging.getLogger(__name__)

_MODE_RANK = {
    BoundaryMode.EXACT_TABLE: 0,
    BoundaryMode.VSOP87_CALCULATED: 1,
    BoundaryMode.APPROXIMATE_DAY6: 2,
}


class BirthInput(FrozenModel):

    moment: CivilMoment
    timezone: str = "Asia/Seoul"
    longitude: float = sc.CITY_DATA[sc.DEFAULT_CITY]
    latitude: float = 37.57
    gender: Optional[Gender] = None

    @model_validator(mode="after")
    def _check_position(self):
        if not -180.0 <= self.longitude <= 180.0:
            raise OutOfRangeError(f"longitude out of range: {self.longitude}")
        if not -90.0 <= self.latitude <= 90.0:
            raise OutOfRangeError(f"latitude out of range: {self.latitude}")
        return self

    @classmethod
    def of(cls, year, month, day, hour=0, minute=0, **kwargs) -> "BirthInput":
        moment = CivilMoment(year=year, month=month, day=day, hour=hour, minute=minute)
        return cls(moment=moment, **kwargs)


class PillarSet(BaseModel):
    model_config = {"frozen": True}

    year: Pillar
    month: Pillar
    day: Pillar
    hour: Pillar

    def palja(self) -> List[str]:
        return [self.year.stem.hanja, self.year.branch.hanja, self.month.stem.hanja, self.month.branch.hanja,
                self.day.stem.hanja, self.day.branch.hanja, self.hour.stem.hanja, self.hour.branch.hanja]


class PillarResult(BaseModel):
    model_config = {"frozen": True}

    pillars: PillarSet
    longitude_correction_minutes: int
    dst_correction_minutes: int
    standard_time_correction_minutes: int
    equation_of_time_minutes: int
    saju_month_index: int
    saju_year: int
    boundary_mode: BoundaryMode
    day_cut_mode: DayCutMode
    jasi_type: str
    standard: CivilMoment
    adjusted: CivilMoment
    kst_moment: CivilMoment
    warnings: List[str] = []

    def to_dict(self) -> Dict:
        return {
            "pillars": {name: getattr(self.pillars, name).hanja for name in ("year", "month", "day", "hour")},
            "longitudeCorrectionMinutes": self.longitude_correction_minutes,
            "dstCorrectionMinutes": self.dst_correction_minutes,
            "standardTimeCorrectionMinutes": self.standard_time_correction_minutes,
            "equationOfTimeMinutes": self.equation_of_time_minutes,
            "sajuMonthIndex": self.saju_month_index,
            "boundaryMode": self.boundary_mode.value,
            "dayCutMode": self.day_cut_mode.value,
            "standard": str(self.standard),
            "adjusted": str(self.adjusted),
            "warnings": list(self.warnings),
        }


def _worst_mode(*modes: BoundaryMode) -> BoundaryMode:
    return max(modes, key=_MODE_RANK.__getitem__)


class SajuEngine:
    def __init__(self, config: Optional[CalculationConfig] = None):
        self.config = config or DEFAULT_CONFIG

    def calculate(self, birth: BirthInput) -> PillarResult:
        cfg = self.config
        adj = adjust_solar_time(birth.moment, birth.timezone, birth.longitude, cfg)
        kst = to_kst(adj.standard, birth.timezone)

        # 1. 년주 / 월주 : 표준시 기준 절입 판정
        year_res = resolve_saju_year(kst, cfg.uses_vsop87)
        month_res = resolve_month_index(kst, cfg.uses_vsop87)
        y_p = year_pillar(year_res.value)
        m_p = month_pillar(y_p.stem, month_res.value)

        # 2. 일주 / 시주 : 보정 태양시 + 자시 규칙
        d_p, h_p, cut = day_and_hour_pillars(adj.adjusted, cfg.day_cut_mode)

        warnings = []
        for w in (year_res.warning, month_res.warning):
            if w and w not in warnings:
                warnings.append(w)

        result = PillarResult(
            pillars=PillarSet(year=y_p, month=m_p, day=d_p, hour=h_p),
            longitude_correction_minutes=adj.longitude_correction_minutes,
            dst_correction_minutes=adj.dst_correction_minutes,
            standard_time_correction_minutes=adj.standard_time_correction_minutes,
            equation_of_time_minutes=adj.equation_of_time_minutes,
            saju_month_index=month_res.value,
            saju_year=year_res.value,
            boundary_mode=_worst_mode(year_res.mode, month_res.mode),
            day_cut_mode=cfg.day_cut_mode,
            jasi_type=cut.jasi_type,
            standard=adj.standard,
            adjusted=adj.adjusted,
            kst_moment=kst,
            warnings=warnings,
        )
        logger.debug("pillars %s for %s (%s)", " ".join(result.to_dict()["pillars"].values()),
                     birth.moment, result.boundary_mode.value)
        return result

    def daeun(self, result: PillarResult, gender, count: Optional[int] = None) -> DaeunInfo:
        return calculate_daeun(
            result.pillars.year, result.pillars.month, gender, result.kst_moment,
            count=count or self.config.daeun_count,
            force_vsop87=self.config.uses_vsop87,
        )

    def analyze(self, birth_str: str, gender=None, location: str = sc.DEFAULT_CITY,
                timezone: str = "Asia/Seoul") -> Dict:
        """'YYYY-MM-DD HH:MM' 문자열과 도시명으로 바로 계산"""
        dt = datetime.strptime(birth_str, "%Y-%m-%d %H:%M")
        if location not in sc.CITY_DATA:
            raise OutOfRangeError(f"unknown location: {location}")
        birth = BirthInput.of(dt.year, dt.month, dt.day, dt.hour, dt.minute,
                              timezone=timezone, longitude=sc.CITY_DATA[location], gender=gender)
        result = self.calculate(birth)
        out = result.to_dict()
        if gender is not None:
            info = self.daeun(result, gender)
            out["daeun"] = {
                "isForward": info.is_forward,
                "startAge": info.start_age,
                "startMonths": info.start_months,
                "boundaryMode": info.boundary_mode.value,
                "list": [{"start_age": p.start_age, "ganzi": p.pillar.hanja} for p in info.pillars],
            }
            out["warnings"] = out["warnings"] + [w for w in info.warnings if w not in out["warnings"]]
        return out

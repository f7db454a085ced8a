"""
[계산 설정] 학파/유파마다 다른 계산 규칙을 하나의 불변 설정 객체로 묶는다.
"""

import enum
from typing import Optional

from pydantic import BaseModel, ValidationError

from manse.errors import ConfigError


class DayCutMode(str, enum.Enum):
    MIDNIGHT_00 = "MIDNIGHT_00"
    YAZA_23_TO_01_NEXTDAY = "YAZA_23_TO_01_NEXTDAY"
    YAZA_23_30_TO_01_30_NEXTDAY = "YAZA_23_30_TO_01_30_NEXTDAY"
    JOJA_SPLIT = "JOJA_SPLIT"


class JeolgiPrecision(str, enum.Enum):
    APPROXIMATE = "APPROXIMATE"        # 절기표 우선
    VSOP87D_EXACT = "VSOP87D_EXACT"    # 모든 연도를 VSOP87 로 직접 계산


class CalculationPreset(str, enum.Enum):
    KOREAN_MAINSTREAM = "KOREAN_MAINSTREAM"
    TRADITIONAL_CHINESE = "TRADITIONAL_CHINESE"
    MODERN_INTEGRATED = "MODERN_INTEGRATED"


class CalculationConfig(BaseModel):
    model_config = {"frozen": True, "extra": "forbid"}

    day_cut_mode: DayCutMode = DayCutMode.YAZA_23_TO_01_NEXTDAY
    apply_dst_history: bool = True
    apply_standard_time_history: bool = False
    include_equation_of_time: bool = False
    # None 이면 타임존 표준 자오선 사용
    lmt_baseline_longitude: Optional[float] = None
    jeolgi_precision: JeolgiPrecision = JeolgiPrecision.APPROXIMATE
    daeun_count: int = 8

    @classmethod
    def create(cls, **values) -> "CalculationConfig":
        """검증 실패를 ConfigError 로 바꿔 던지는 생성자"""
        try:
            config = cls(**values)
        except ValidationError as e:
            raise ConfigError(str(e)) from e
        if config.daeun_count < 1:
            raise ConfigError(f"daeun_count must be positive: {config.daeun_count}")
        if config.lmt_baseline_longitude is not None and not -180.0 <= config.lmt_baseline_longitude <= 180.0:
            raise ConfigError(f"lmt_baseline_longitude out of range: {config.lmt_baseline_longitude}")
        return config

    @property
    def uses_vsop87(self) -> bool:
        return self.jeolgi_precision == JeolgiPrecision.VSOP87D_EXACT


DEFAULT_CONFIG = CalculationConfig()

_PRESETS = {
    CalculationPreset.KOREAN_MAINSTREAM: dict(
        day_cut_mode=DayCutMode.YAZA_23_30_TO_01_30_NEXTDAY,
    ),
    CalculationPreset.TRADITIONAL_CHINESE: dict(
        day_cut_mode=DayCutMode.YAZA_23_30_TO_01_30_NEXTDAY,
        apply_dst_history=False,
        lmt_baseline_longitude=120.0,
    ),
    CalculationPreset.MODERN_INTEGRATED: dict(
        day_cut_mode=DayCutMode.JOJA_SPLIT,
        include_equation_of_time=True,
        jeolgi_precision=JeolgiPrecision.VSOP87D_EXACT,
    ),
}


def config_for_preset(preset, **overrides) -> CalculationConfig:
    try:
        preset = CalculationPreset(preset)
    except ValueError as e:
        raise ConfigError(f"unknown preset: {preset!r}") from e
    return CalculationConfig.create(**{**_PRESETS[preset], **overrides})

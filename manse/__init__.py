"""manse - 사주 만세력 시간 해석 엔진"""

from manse.boundary_resolver import BoundaryMode
from manse.config import (
    DEFAULT_CONFIG,
    CalculationConfig,
    CalculationPreset,
    DayCutMode,
    JeolgiPrecision,
    config_for_preset,
)
from manse.daeun import DaeunInfo, Gender
from manse.errors import ConfigError, InvalidGanjiError, OutOfRangeError, SajuError
from manse.ganji import Branch, Pillar, Stem
from manse.julian import CivilMoment
from manse.lunar import LunarDate, SolarDate, lunar_to_solar, resolve_lunar_auto, solar_to_lunar
from manse.saju_engine import BirthInput, PillarResult, SajuEngine

__version__ = "1.0.0"

__all__ = [
    "BirthInput",
    "BoundaryMode",
    "Branch",
    "CalculationConfig",
    "CalculationPreset",
    "CivilMoment",
    "ConfigError",
    "DaeunInfo",
    "DayCutMode",
    "DEFAULT_CONFIG",
    "Gender",
    "InvalidGanjiError",
    "JeolgiPrecision",
    "LunarDate",
    "OutOfRangeError",
    "Pillar",
    "PillarResult",
    "SajuEngine",
    "SajuError",
    "SolarDate",
    "Stem",
    "config_for_preset",
    "lunar_to_solar",
    "resolve_lunar_auto",
    "solar_to_lunar",
]

"""
SajuEngine 통합: 입력 -> 보정 태양시 -> 4주 / 대운

년주·월주는 표준시(KST) 기준, 일주·시주는 보정 태양시 기준
"""

import pytest
from pydantic import ValidationError

from manse import SajuEngine, __version__
from manse.boundary_resolver import BoundaryMode
from manse.config import CalculationPreset, DayCutMode, config_for_preset
from manse.daeun import Gender
from manse.errors import ConfigError, OutOfRangeError
from manse.saju_engine import BirthInput


@pytest.fixture
def engine():
    return SajuEngine()


def pillars_of(result):
    return [p.hanja for p in (result.pillars.year, result.pillars.month, result.pillars.day, result.pillars.hour)]


class TestIpchunBoundary:
    def test_on_ipchun_minute(self, engine):
        result = engine.calculate(BirthInput.of(2024, 2, 4, 17, 27, longitude=135.0))
        assert pillars_of(result) == ["甲辰", "丙寅", "戊戌", "辛酉"]
        assert result.saju_month_index == 1
        assert result.saju_year == 2024
        assert result.boundary_mode == BoundaryMode.EXACT_TABLE
        assert result.warnings == []

    def test_one_minute_before_ipchun(self, engine):
        result = engine.calculate(BirthInput.of(2024, 2, 4, 17, 26, longitude=135.0))
        assert pillars_of(result)[:2] == ["癸卯", "乙丑"]
        assert result.saju_month_index == 12
        assert result.saju_year == 2023

    def test_longitude_moves_hour_not_month(self, engine):
        """경도 보정(-32분)은 시주만 바꾸고 절입 판정에는 쓰지 않는다"""
        result = engine.calculate(BirthInput.of(2024, 2, 4, 17, 27))
        assert result.longitude_correction_minutes == -32
        assert str(result.adjusted) == "2024-02-04T16:55"
        assert pillars_of(result) == ["甲辰", "丙寅", "戊戌", "庚申"]

    def test_foreign_timezone_converted_to_kst(self, engine):
        result = engine.calculate(BirthInput.of(2024, 2, 4, 8, 27, timezone="UTC", longitude=0.0))
        assert str(result.kst_moment) == "2024-02-04T17:27"
        assert result.saju_month_index == 1
        assert result.pillars.year.hanja == "甲辰"


class TestDayCutThroughEngine:
    @pytest.mark.parametrize("mode,day,hour", [
        (DayCutMode.MIDNIGHT_00, "甲辰", "甲子"),
        (DayCutMode.YAZA_23_TO_01_NEXTDAY, "乙巳", "丙子"),
        (DayCutMode.JOJA_SPLIT, "甲辰", "丙子"),
    ])
    def test_late_night(self, mode, day, hour):
        engine = SajuEngine(config_for_preset(CalculationPreset.KOREAN_MAINSTREAM, day_cut_mode=mode))
        result = engine.calculate(BirthInput.of(2024, 2, 10, 23, 30, longitude=135.0))
        assert (result.pillars.day.hanja, result.pillars.hour.hanja) == (day, hour)
        assert result.jasi_type == "YAJAS-I"
        assert result.day_cut_mode == mode


class TestBoundaryTiers:
    def test_vsop87_outside_table(self, engine):
        result = engine.calculate(BirthInput.of(1850, 6, 15, 12, 0, longitude=135.0))
        assert result.boundary_mode == BoundaryMode.VSOP87_CALCULATED
        assert result.saju_month_index == 5
        assert pillars_of(result)[:2] == ["庚戌", "壬午"]
        assert len(result.warnings) == 1
        assert "1850" in result.warnings[0]

    def test_approximate_far_future(self, engine):
        result = engine.calculate(BirthInput.of(3100, 3, 1, 12, 0, longitude=135.0))
        assert result.boundary_mode == BoundaryMode.APPROXIMATE_DAY6
        assert result.saju_year == 3100
        assert result.saju_month_index == 1
        assert result.warnings

    def test_table_edge_inside_range_warning(self, engine):
        result = engine.calculate(BirthInput.of(1900, 1, 3, 12, 0, longitude=135.0))
        assert result.boundary_mode == BoundaryMode.VSOP87_CALCULATED
        assert result.saju_year == 1899
        assert result.saju_month_index == 11
        assert len(result.warnings) == 1
        assert "outside" not in result.warnings[0]
        assert "edge of its range" in result.warnings[0]

    @pytest.mark.parametrize("year", [1899, 2051, 1700, 2500])
    def test_outside_table_never_exact(self, engine, year):
        result = engine.calculate(BirthInput.of(year, 12, 31, 23, 59, longitude=135.0))
        assert result.boundary_mode != BoundaryMode.EXACT_TABLE

    def test_forced_vsop87_has_no_warning(self):
        engine = SajuEngine(config_for_preset(CalculationPreset.MODERN_INTEGRATED))
        result = engine.calculate(BirthInput.of(2024, 2, 10, 12, 0, longitude=135.0))
        assert result.boundary_mode == BoundaryMode.VSOP87_CALCULATED
        assert result.saju_month_index == 1
        assert result.warnings == []


class TestResultShape:
    def test_to_dict_keys(self, engine):
        out = engine.calculate(BirthInput.of(2024, 2, 10, 12, 0)).to_dict()
        assert set(out) == {
            "pillars", "longitudeCorrectionMinutes", "dstCorrectionMinutes",
            "standardTimeCorrectionMinutes", "equationOfTimeMinutes", "sajuMonthIndex",
            "boundaryMode", "dayCutMode", "standard", "adjusted", "warnings",
        }
        assert out["pillars"] == {"year": "甲辰", "month": "丙寅", "day": "甲辰", "hour": "庚午"}
        assert out["boundaryMode"] == "EXACT_TABLE"
        assert out["standard"] == "2024-02-10T12:00"
        assert out["adjusted"] == "2024-02-10T11:28"

    def test_palja(self, engine):
        result = engine.calculate(BirthInput.of(2024, 2, 10, 12, 0))
        assert result.pillars.palja() == ["甲", "辰", "丙", "寅", "甲", "辰", "庚", "午"]

    def test_dst_reported(self, engine):
        result = engine.calculate(BirthInput.of(1988, 6, 15, 12, 0, longitude=135.0))
        assert result.dst_correction_minutes == 60
        assert str(result.standard) == "1988-06-15T11:00"


class TestDaeunAndAnalyze:
    def test_daeun_from_result(self, engine):
        result = engine.calculate(BirthInput.of(2024, 2, 10, 12, 0))
        info = engine.daeun(result, Gender.FEMALE)
        assert (info.start_age, info.start_months) == (1, 11)
        assert info.pillars[0].pillar.hanja == "乙丑"

    def test_analyze(self, engine):
        out = engine.analyze("2024-02-10 12:00", gender="M", location="서울")
        assert out["pillars"]["hour"] == "庚午"
        assert out["daeun"]["isForward"] is True
        assert out["daeun"]["startAge"] == 7
        assert out["daeun"]["startMonths"] == 11
        assert out["daeun"]["list"][0] == {"start_age": 7, "ganzi": "丁卯"}
        assert len(out["daeun"]["list"]) == 8

    def test_analyze_without_gender(self, engine):
        out = engine.analyze("2024-02-10 12:00", location="부산")
        assert "daeun" not in out
        assert out["longitudeCorrectionMinutes"] == -24

    def test_analyze_unknown_city(self, engine):
        with pytest.raises(OutOfRangeError):
            engine.analyze("2024-02-10 12:00", location="평양")


class TestInputValidation:
    def test_longitude_range(self):
        with pytest.raises(OutOfRangeError):
            BirthInput.of(2024, 2, 10, 12, 0, longitude=200.0)

    def test_latitude_range(self):
        with pytest.raises(OutOfRangeError):
            BirthInput.of(2024, 2, 10, 12, 0, latitude=-91.0)

    def test_invalid_moment(self):
        with pytest.raises(OutOfRangeError):
            BirthInput.of(2023, 2, 29, 12, 0)

    def test_invalid_nested_moment(self):
        with pytest.raises(OutOfRangeError):
            BirthInput(moment={"year": 2024, "month": 2, "day": 30})

    def test_nested_moment_accepted(self):
        birth = BirthInput(moment={"year": 2024, "month": 2, "day": 29, "hour": 9})
        assert str(birth.moment) == "2024-02-29T09:00"

    def test_type_errors_stay_validation_errors(self):
        with pytest.raises(ValidationError):
            BirthInput(moment={"year": "abc", "month": 2, "day": 1})

    def test_unknown_timezone(self, engine):
        with pytest.raises(ConfigError):
            engine.calculate(BirthInput.of(2024, 2, 10, 12, 0, timezone="Nowhere/City"))


def test_version():
    assert __version__ == "1.0.0"

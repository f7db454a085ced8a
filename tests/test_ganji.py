"""
60갑자 순환 / 년·월·일·시주 공식
"""

import pytest

from manse.errors import InvalidGanjiError, OutOfRangeError
from manse.ganji import (
    SIXTY_GANZI,
    Branch,
    Pillar,
    Stem,
    day_pillar,
    hour_branch,
    hour_pillar,
    month_branch,
    month_index_by_day_approx,
    month_pillar,
    sexagenary_index,
    split_index,
    year_pillar,
    year_pillar_by_ipchun_approx,
)
from manse.julian import jdn, jdn_to_date


# =============================================================================
# 60갑자
# =============================================================================


class TestSexagenaryCycle:
    def test_sixty_unique_pairs(self):
        pairs = {(p.stem, p.branch) for p in SIXTY_GANZI}
        assert len(pairs) == 60

    def test_index_round_trip(self):
        for i, p in enumerate(SIXTY_GANZI):
            assert p.index == i
            assert sexagenary_index(p.stem, p.branch) == i

    def test_first_and_last(self):
        assert SIXTY_GANZI[0].hanja == "甲子"
        assert SIXTY_GANZI[59].hanja == "癸亥"
        assert SIXTY_GANZI[40].hangul == "갑진"

    @pytest.mark.parametrize("stem", range(10))
    @pytest.mark.parametrize("branch", range(12))
    def test_every_pair_by_parity(self, stem, branch):
        """음양이 같은 쌍만 만들어지고, 다른 쌍(예: 갑축)은 거부된다"""
        if stem % 2 == branch % 2:
            assert Pillar.of(stem, branch).index == sexagenary_index(stem, branch)
        else:
            with pytest.raises(InvalidGanjiError):
                Pillar.of(stem, branch)
            with pytest.raises(InvalidGanjiError):
                sexagenary_index(stem, branch)

    def test_exactly_sixty_valid_pairs(self):
        valid = []
        for stem in range(10):
            for branch in range(12):
                try:
                    valid.append(Pillar.of(stem, branch))
                except InvalidGanjiError:
                    pass
        assert len(valid) == 60
        assert {p.index for p in valid} == set(range(60))

    def test_parity_checked_on_validate(self):
        with pytest.raises(InvalidGanjiError):
            Pillar.model_validate({"stem": 1, "branch": 0})

    def test_invalid_ganji_is_not_value_error(self):
        with pytest.raises(InvalidGanjiError) as exc:
            Pillar(stem=Stem.EUL, branch=Branch.JA)
        assert not isinstance(exc.value, ValueError)

    def test_out_of_range_numbers_rejected(self):
        with pytest.raises(InvalidGanjiError):
            sexagenary_index(10, 0)
        with pytest.raises(OutOfRangeError):
            split_index(60)

    def test_shifted_wraps(self):
        assert Pillar.from_hanja("癸亥").shifted(1).hanja == "甲子"
        assert Pillar.from_hanja("甲子").shifted(-1).hanja == "癸亥"

    def test_stem_branch_properties(self):
        assert Stem.GAP.is_yang and not Stem.EUL.is_yang
        assert Branch.O.hanja == "午"
        assert Branch.O.hangul == "오"


# =============================================================================
# 일주 / 년주
# =============================================================================


class TestDayPillar:
    @pytest.mark.parametrize("date,expected", [
        ((2024, 1, 1), "甲子"),
        ((2024, 2, 10), "甲辰"),
        ((1900, 1, 1), "甲戌"),
        ((2024, 2, 11), "乙巳"),
    ])
    def test_known_days(self, date, expected):
        assert day_pillar(*date).hanja == expected

    def test_sixty_days_from_anchor_cover_cycle(self):
        start = jdn(2024, 1, 1)
        found = [day_pillar(*jdn_to_date(start + i)).index for i in range(60)]
        assert found == list(range(60))

    def test_consecutive_days_advance_by_one(self):
        prev = day_pillar(1999, 12, 31)
        assert day_pillar(2000, 1, 1).index == (prev.index + 1) % 60


class TestYearPillar:
    @pytest.mark.parametrize("year,expected", [
        (1984, "甲子"),
        (2024, "甲辰"),
        (2023, "癸卯"),
        (1850, "庚戌"),
    ])
    def test_known_years(self, year, expected):
        assert year_pillar(year).hanja == expected

    def test_approx_ipchun_cut(self):
        assert year_pillar_by_ipchun_approx(2024, 2, 3).hanja == "癸卯"
        assert year_pillar_by_ipchun_approx(2024, 2, 4).hanja == "甲辰"


# =============================================================================
# 월주 (월두법) / 시주 (시두법)
# =============================================================================


class TestMonthPillar:
    def test_month_branch(self):
        assert month_branch(1) == Branch.IN
        assert month_branch(11) == Branch.JA
        assert month_branch(12) == Branch.CHUK

    @pytest.mark.parametrize("year_stem,expected", [
        (Stem.GAP, "丙寅"),
        (Stem.EUL, "戊寅"),
        (Stem.BYEONG, "庚寅"),
        (Stem.JEONG, "壬寅"),
        (Stem.MU, "甲寅"),
        (Stem.GI, "丙寅"),
    ])
    def test_first_month_stem(self, year_stem, expected):
        assert month_pillar(year_stem, 1).hanja == expected

    def test_month_progression(self):
        assert month_pillar(Stem.GAP, 2).hanja == "丁卯"
        assert month_pillar(Stem.GAP, 12).hanja == "丁丑"
        assert month_pillar(Stem.GYE, 12).hanja == "乙丑"

    @pytest.mark.parametrize("index", [0, 13])
    def test_index_out_of_range(self, index):
        with pytest.raises(OutOfRangeError):
            month_pillar(Stem.GAP, index)

    @pytest.mark.parametrize("month,day,expected", [
        (2, 3, 12), (2, 4, 1), (3, 5, 1), (3, 6, 2), (1, 5, 11), (1, 6, 12), (12, 7, 11),
    ])
    def test_approx_month_index(self, month, day, expected):
        assert month_index_by_day_approx(month, day) == expected


class TestHourPillar:
    @pytest.mark.parametrize("hour,expected", [
        (0, Branch.JA), (1, Branch.CHUK), (2, Branch.CHUK), (11, Branch.O),
        (12, Branch.O), (22, Branch.HAE), (23, Branch.JA),
    ])
    def test_hour_branch(self, hour, expected):
        assert hour_branch(hour) == expected

    def test_ojawon(self):
        assert hour_pillar(Stem.GAP, 0).hanja == "甲子"
        assert hour_pillar(Stem.EUL, 0).hanja == "丙子"
        assert hour_pillar(Stem.MU, 0).hanja == "壬子"
        assert hour_pillar(Stem.GAP, 12).hanja == "庚午"

    def test_hour_out_of_range(self):
        with pytest.raises(OutOfRangeError):
            hour_branch(24)

"""
[간지 연산] 60갑자 순환과 년/월/일/시주 공식

천간(10)과 지지(12)의 최소공배수가 60이므로 유효한 조합은 음양이 같은 60쌍뿐이다.
나머지 60쌍은 생성 단계에서 InvalidGanjiError로 거부한다.
"""

import enum

from pydantic import model_validator

from manse import saju_constants as sc
from manse.errors import InvalidGanjiError, OutOfRangeError
from manse.julian import jdn
from manse.models import FrozenModel


class Stem(enum.IntEnum):
    GAP = 0
    EUL = 1
    BYEONG = 2
    JEONG = 3
    MU = 4
    GI = 5
    GYEONG = 6
    SIN = 7
    IM = 8
    GYE = 9

    @property
    def hanja(self) -> str:
        return sc.STEMS[self]

    @property
    def hangul(self) -> str:
        return sc.STEMS_KR[self]

    @property
    def is_yang(self) -> bool:
        return self % 2 == 0


class Branch(enum.IntEnum):
    JA = 0
    CHUK = 1
    IN = 2
    MYO = 3
    JIN = 4
    SA = 5
    O = 6
    MI = 7
    SIN = 8
    YU = 9
    SUL = 10
    HAE = 11

    @property
    def hanja(self) -> str:
        return sc.BRANCHES[self]

    @property
    def hangul(self) -> str:
        return sc.BRANCHES_KR[self]

    @property
    def is_yang(self) -> bool:
        return self % 2 == 0


def sexagenary_index(stem, branch) -> int:
    """(천간, 지지) -> 0..59. 음양 불일치면 InvalidGanjiError"""
    s, b = int(stem), int(branch)
    if not (0 <= s < 10 and 0 <= b < 12) or s % 2 != b % 2:
        raise InvalidGanjiError(stem, branch)
    # 6 * s - 5 * b 는 mod 10, mod 12 조건을 동시에 만족하는 해
    return (6 * s - 5 * b) % 60


def split_index(index: int):
    if not 0 <= index < 60:
        raise OutOfRangeError(f"sexagenary index out of range: {index}")
    return Stem(index % 10), Branch(index % 12)


class Pillar(FrozenModel):
    """검증된 (천간, 지지) 한 쌍"""

    stem: Stem
    branch: Branch

    @model_validator(mode="after")
    def _check_parity(self):
        if self.stem % 2 != self.branch % 2:
            raise InvalidGanjiError(self.stem.name, self.branch.name)
        return self

    @classmethod
    def of(cls, stem, branch) -> "Pillar":
        return cls(stem=Stem(stem), branch=Branch(branch))

    @classmethod
    def from_index(cls, index: int) -> "Pillar":
        stem, branch = split_index(index % 60)
        return cls(stem=stem, branch=branch)

    @classmethod
    def from_hanja(cls, text: str) -> "Pillar":
        return cls.of(sc.STEMS.index(text[0]), sc.BRANCHES.index(text[1]))

    @property
    def index(self) -> int:
        return sexagenary_index(self.stem, self.branch)

    @property
    def hanja(self) -> str:
        return self.stem.hanja + self.branch.hanja

    @property
    def hangul(self) -> str:
        return self.stem.hangul + self.branch.hangul

    def shifted(self, steps: int) -> "Pillar":
        return Pillar.from_index((self.index + steps) % 60)

    def __str__(self):
        return self.hanja


SIXTY_GANZI = tuple(Pillar.from_index(i) for i in range(60))


# ==========================================
# 사주 4주 공식
# ==========================================
def day_pillar(year: int, month: int, day: int) -> Pillar:
    """일주: (JDN + 49) mod 60. 2024-01-01 = 갑자"""
    return SIXTY_GANZI[(jdn(year, month, day) + sc.DAY_PILLAR_JDN_OFFSET) % 60]


def year_pillar(saju_year: int) -> Pillar:
    """년주: 입춘 기준 사주 연도. 1984 = 갑자"""
    return SIXTY_GANZI[(saju_year - sc.YEAR_PILLAR_BASE_YEAR) % 60]


def month_branch(saju_month_index: int) -> Branch:
    return Branch((saju_month_index + 1) % 12)


def month_pillar(year_stem, saju_month_index: int) -> Pillar:
    """월두법: 인월(1) 천간은 년간으로 정해지고 월 인덱스만큼 진행"""
    if not 1 <= saju_month_index <= 12:
        raise OutOfRangeError(f"saju month index out of range: {saju_month_index}")
    start = sc.MONTH_START_STEM[int(year_stem)]
    stem = (start + saju_month_index - 1) % 10
    return Pillar.of(stem, month_branch(saju_month_index))


def hour_branch(hour: int) -> Branch:
    if not 0 <= hour <= 23:
        raise OutOfRangeError(f"hour out of range: {hour}")
    return Branch(((hour + 1) // 2) % 12)


def ojawon_start(day_stem) -> Stem:
    return Stem(sc.HOUR_START_STEM[int(day_stem)])


def hour_pillar(day_stem, hour: int) -> Pillar:
    """시두법(오자원): 일간 쌍마다 자시 천간이 고정"""
    branch = hour_branch(hour)
    stem = (ojawon_start(day_stem) + branch) % 10
    return Pillar.of(stem, branch)


# ==========================================
# 절기표가 없을 때의 근사 공식
# ==========================================
APPROX_IPCHUN = (2, sc.APPROX_JEOL_START_DAY[2])


def saju_year_by_ipchun_approx(year: int, month: int, day: int) -> int:
    """입춘을 2월 4일 00:00 으로 고정한 근사 사주 연도"""
    return year - 1 if (month, day) < APPROX_IPCHUN else year


def year_pillar_by_ipchun_approx(year: int, month: int, day: int) -> Pillar:
    return year_pillar(saju_year_by_ipchun_approx(year, month, day))


def month_index_by_day_approx(month: int, day: int) -> int:
    """양력 월별 절입일 근사표로 사주 월 인덱스를 구한다 (1 = 인월)"""
    # 양력 2월 절입(입춘) 이후가 인월
    index = (month - 2) % 12 + 1
    if day < sc.APPROX_JEOL_START_DAY[month]:
        index = (index - 2) % 12 + 1
    return index

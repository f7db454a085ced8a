"""
[자시 처리] 자정 전후 출생에서 어느 날의 일주를 쓸지 결정한다.

- MIDNIGHT_00                 : 00:00 에 날이 바뀜
- YAZA_23_TO_01_NEXTDAY       : 23:00 부터 다음 날 일주
- YAZA_23_30_TO_01_30_NEXTDAY : 23:30 부터 다음 날 일주
- JOJA_SPLIT                  : 일주는 그대로, 23시대(야자시)의 시간만 다음 날 일간으로 세운다
                                00:00 ~ 00:59 는 당일 조자시
"""

from typing import Tuple

from pydantic import BaseModel

from manse.config import DayCutMode
from manse.ganji import Pillar, day_pillar, hour_pillar
from manse.julian import CivilMoment, next_day

YAZA_START_HOUR = 23
YAZA_23_30_START_MINUTE = 30


class DayCut(BaseModel):
    model_config = {"frozen": True}

    mode: DayCutMode
    day_date: Tuple[int, int, int]        # 일주를 세우는 날짜
    hour_stem_date: Tuple[int, int, int]  # 시간(時干)을 세우는 일간의 날짜
    jasi_type: str                        # "YAJAS-I" / "JOJAS-I" / "NORMAL"


def jasi_type(moment: CivilMoment) -> str:
    if moment.hour == 23:
        return "YAJAS-I"
    if moment.hour == 0:
        return "JOJAS-I"
    return "NORMAL"


def shifts_to_next_day(moment: CivilMoment, mode: DayCutMode) -> bool:
    if mode == DayCutMode.YAZA_23_TO_01_NEXTDAY:
        return moment.hour >= YAZA_START_HOUR
    if mode == DayCutMode.YAZA_23_30_TO_01_30_NEXTDAY:
        return moment.hour >= YAZA_START_HOUR and moment.minute >= YAZA_23_30_START_MINUTE
    return False


def resolve_day_cut(adjusted: CivilMoment, mode: DayCutMode) -> DayCut:
    mode = DayCutMode(mode)
    today = adjusted.date_tuple()
    tomorrow = next_day(*today)
    kind = jasi_type(adjusted)

    if mode == DayCutMode.JOJA_SPLIT:
        hour_date = tomorrow if kind == "YAJAS-I" else today
        return DayCut(mode=mode, day_date=today, hour_stem_date=hour_date, jasi_type=kind)

    day_date = tomorrow if shifts_to_next_day(adjusted, mode) else today
    return DayCut(mode=mode, day_date=day_date, hour_stem_date=day_date, jasi_type=kind)


def day_and_hour_pillars(adjusted: CivilMoment, mode: DayCutMode):
    """보정 태양시 기준 (일주, 시주, DayCut)"""
    cut = resolve_day_cut(adjusted, mode)
    day = day_pillar(*cut.day_date)
    stem_source: Pillar = day if cut.hour_stem_date == cut.day_date else day_pillar(*cut.hour_stem_date)
    hour = hour_pillar(stem_source.stem, adjusted.hour)
    return day, hour, cut

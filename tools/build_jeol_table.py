"""
manse/data/term_data.json 재생성 도구 (skyfield + JPL DE440s 천체력)

    pip install -e .[build]
    python tools/build_jeol_table.py [--start 1900] [--end 2050] [--out manse/data/term_data.json]
"""

import argparse
import json
from datetime import timedelta
from pathlib import Path

import numpy as np
from skyfield import almanac
from skyfield.api import load

from manse import saju_constants as sc

DEFAULT_OUT = Path(__file__).resolve().parent.parent / "manse" / "data" / "term_data.json"


# ==========================================
# 1. 환경 설정
# ==========================================
def load_ephemeris():
    ts = load.timescale()
    # de440s.bsp 는 1849~2150년을 커버한다
    eph = load("de440s.bsp")
    return ts, eph["sun"], eph["earth"]


# ==========================================
# 2. 절기 판정 함수
# ==========================================
def make_term_index(earth, sun):
    def solar_term_index(t):
        apparent = earth.at(t).observe(sun).apparent()
        # epoch=t : 그 시점의 춘분점(equinox of date) 기준 황경
        _, lon, _ = apparent.ecliptic_latlon(epoch=t)
        deg = np.asarray(lon.degrees) % 360
        return ((deg + 1e-9) // 15).astype(int) % 24

    # 절기 간격(약 15일)보다 충분히 작은 탐색 간격
    solar_term_index.step_days = 5.0
    return solar_term_index


# ==========================================
# 3. 연도별 절기 생성
# ==========================================
def generate_terms_for_year(ts, term_index, year):
    kst = timedelta(minutes=sc.KST_OFFSET_MINUTES)
    times, events = almanac.find_discrete(ts.utc(year - 1, 12, 31), ts.utc(year + 1, 1, 2), term_index)

    result = []
    for t, idx in zip(times, events):
        # 분 단위 반올림 (30초 이상 올림)
        dt = (t.utc_datetime() + kst + timedelta(seconds=30)).replace(tzinfo=None, second=0, microsecond=0)
        if dt.year != year:
            continue
        term_name = sc.SOLAR_TERM_KR[int(idx)]
        result.append({
            "term": term_name,
            "date": dt.strftime("%Y%m%d"),
            "time": dt.strftime("%H:%M"),
            "datetime": dt.strftime("%Y-%m-%dT%H:%M"),
            "solarIndex": int(idx),
            "degree": int(idx) * 15,
            "isMonthChange": term_name in sc.MONTH_INDEX,
            "monthIndex": sc.MONTH_INDEX.get(term_name),
        })

    result.sort(key=lambda x: x["datetime"])
    return result


def dump_table(db, path):
    # 한 줄에 절기 하나
    years = []
    for year, rows in db.items():
        lines = ",\n".join("    " + json.dumps(r, ensure_ascii=False, separators=(",", ":")) for r in rows)
        years.append(f'  "{year}": [\n{lines}\n  ]')
    with open(path, "w", encoding="utf-8") as f:
        f.write("{\n" + ",\n".join(years) + "\n}\n")


# ==========================================
# 4. 전체 DB 생성
# ==========================================
def main(argv=None):
    parser = argparse.ArgumentParser(description="Build the KST solar term table")
    parser.add_argument("--start", type=int, default=sc.TABLE_FIRST_YEAR)
    parser.add_argument("--end", type=int, default=sc.TABLE_LAST_YEAR)
    parser.add_argument("--out", type=Path, default=DEFAULT_OUT)
    args = parser.parse_args(argv)

    print(f"🚀 절기 DB 생성 시작 ({args.start}~{args.end})")
    ts, sun, earth = load_ephemeris()
    term_index = make_term_index(earth, sun)

    db = {}
    for year in range(args.start, args.end + 1):
        db[str(year)] = generate_terms_for_year(ts, term_index, year)
        if len(db[str(year)]) != 24:
            print(f"❌ {year}년 절기 수 이상: {len(db[str(year)])}")
        if year % 20 == 0:
            print(f"📊 {year}년 데이터 생성 완료...")

    dump_table(db, args.out)
    print(f"\n✅ {args.out} 생성 완료!")
    print("💡 2024년 입춘 확인: 2월 4일 17:27 (KST)로 나오면 성공입니다.")


if __name__ == "__main__":
    main()

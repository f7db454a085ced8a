"""
manse/lunar_data.py 재생성 도구 (korean_lunar_calendar 의 한국천문연구원 기반 데이터)

    pip install -e .[build]
    python tools/build_lunar_table.py
"""

from pathlib import Path

from korean_lunar_calendar import KoreanLunarCalendar

from manse.julian import jdn

FIRST_YEAR = 1899
LAST_YEAR = 2050
WORDS_PER_LINE = 8
OUT = Path(__file__).resolve().parent.parent / "manse" / "lunar_data.py"

HEADER = '''"""
한국 음력 연도별 압축 데이터 ({first}~{last})

연도마다 32비트 정수 하나:
    bit 30      양력 윤년 여부
    bit 17..25  음력 1년 총 일수
    bit 16      윤달이 큰달(30일)이면 1
    bit 12..15  윤달 위치 (0 = 윤달 없음)
    bit 12-m    m월이 큰달(30일)이면 1   (m = 1..12)
"""

LUNAR_FIRST_YEAR = {first}
LUNAR_LAST_YEAR = {last}
# 음력 {first}-01-01 = 양력 {epoch_date}
LUNAR_EPOCH_JDN = {epoch}

LUNAR_YEAR_WORDS = (
'''

FOOTER = ''')


def year_total_days(word: int) -> int:
    return (word >> 17) & 0x1FF


def leap_month(word: int) -> int:
    return (word >> 12) & 0xF


def is_leap_month_big(word: int) -> bool:
    return bool((word >> 16) & 1)


def is_month_big(word: int, month: int) -> bool:
    return bool((word >> (12 - month)) & 1)
'''


def main():
    calendar = KoreanLunarCalendar()
    print(f"🚀 음력 데이터 추출 ({FIRST_YEAR}~{LAST_YEAR})")

    base = calendar.KOREAN_LUNAR_BASE_YEAR
    words = calendar.KOREAN_LUNAR_DATA[FIRST_YEAR - base:LAST_YEAR - base + 1]

    # 기준점: 음력 1월 1일의 양력 날짜
    if not calendar.setLunarDate(FIRST_YEAR, 1, 1, False):
        raise SystemExit(f"❌ {FIRST_YEAR}-01-01 음력 날짜 설정 실패")
    epoch = jdn(calendar.solarYear, calendar.solarMonth, calendar.solarDay)
    epoch_date = f"{calendar.solarYear}-{calendar.solarMonth:02d}-{calendar.solarDay:02d}"

    lines = []
    for i in range(0, len(words), WORDS_PER_LINE):
        chunk = ", ".join(f"0x{w:08x}" for w in words[i:i + WORDS_PER_LINE])
        lines.append(f"    {chunk},  # {FIRST_YEAR + i}")

    OUT.write_text(
        HEADER.format(first=FIRST_YEAR, last=LAST_YEAR, epoch=epoch, epoch_date=epoch_date)
        + "\n".join(lines) + "\n" + FOOTER,
        encoding="utf-8",
    )
    print(f"✅ {OUT} 생성 완료! (연도 {len(words)}개, 기준 JDN {epoch})")


if __name__ == "__main__":
    main()

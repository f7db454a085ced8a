"""
한국 음력 연도별 압축 데이터 (1899~2050)

연도마다 32비트 정수 하나:
    bit 30      양력 윤년 여부
    bit 17..25  음력 1년 총 일수
    bit 16      윤달이 큰달(30일)이면 1
    bit 12..15  윤달 위치 (0 = 윤달 없음)
    bit 12-m    m월이 큰달(30일)이면 1   (m = 1..12)
"""

LUNAR_FIRST_YEAR = 1899
LUNAR_LAST_YEAR = 2050
# 음력 1899-01-01 = 양력 1899-02-10
LUNAR_EPOCH_JDN = 2414696

LUNAR_YEAR_WORDS = (
    0x82c60ab5, 0x830084bd, 0x82c404ae, 0x82c60a57, 0x82fe554d, 0xc2c40d26, 0x82c60d95, 0x83014655,  # 1899
    0x82c4056a, 0xc2c609ad, 0x8300255d, 0x82c404ae, 0x83006a5b, 0xc2c40a4d, 0x82c40d25, 0x83005da9,  # 1907
    0x82c60b55, 0xc2c4056a, 0x83002ada, 0x82c6095d, 0x830074bb, 0xc2c4049b, 0x82c40a4b, 0x83005b4b,  # 1915
    0x82c406a9, 0xc2c40ad4, 0x83024bb5, 0x82c402b6, 0x82c6095b, 0xc3002537, 0x82c40497, 0x82fe6656,  # 1923
    0x82c40e4a, 0xc2c60ea5, 0x830156a9, 0x82c605b5, 0x82c402b6, 0xc30138ae, 0x82c4092e, 0x83017c8d,  # 1931
    0x82c40c95, 0xc2c40d4a, 0x83016d8a, 0x82c60b69, 0x82c6056d, 0xc301425b, 0x82c4025d, 0x82c4092d,  # 1939
    0x83002d2b, 0xc2c40a95, 0x83007d55, 0x82c40b4a, 0x82c60b55, 0xc3015555, 0x82c604db, 0x82c4025b,  # 1947
    0x83013857, 0xc2c4052b, 0x83008a9b, 0x82c40695, 0x82c406aa, 0xc3006aea, 0x82c60ab5, 0x82c404b6,  # 1955
    0x83004aae, 0xc2c60a57, 0x82c40527, 0x82fe3726, 0x82c60d95, 0xc30076b5, 0x82c4056a, 0x82c609ad,  # 1963
    0x830054dd, 0xc2c404ae, 0x82c40a4e, 0x83004d4d, 0x82c40d25, 0xc3008d59, 0x82c40b54, 0x82c60d6a,  # 1971
    0x8301695a, 0xc2c6095b, 0x82c4049b, 0x83004a9b, 0x82c40a4b, 0xc300ab27, 0x82c406a5, 0x82c406d4,  # 1979
    0x83026b75, 0xc2c402b6, 0x82c6095b, 0x830054b7, 0x82c40497, 0xc2c4064b, 0x82fe374a, 0x82c60ea5,  # 1987
    0x830086d9, 0xc2c605ad, 0x82c402b6, 0x8300596e, 0x82c4092e, 0xc2c40c96, 0x83004e95, 0x82c40d4a,  # 1995
    0x82c60da5, 0xc3002755, 0x82c4056c, 0x83027abb, 0x82c4025d, 0xc2c4092d, 0x83005cab, 0x82c40a95,  # 2003
    0x82c40b4a, 0xc3013b4a, 0x82c60b55, 0x8300955d, 0x82c404ba, 0xc2c60a5b, 0x83005557, 0x82c4052b,  # 2011
    0x82c40a95, 0xc3004b95, 0x82c406aa, 0x82c60ad5, 0x830026b5, 0xc2c404b6, 0x83006a6e, 0x82c60a57,  # 2019
    0x82c40527, 0xc2fe56a6, 0x82c60d93, 0x82c405aa, 0x83003b6a, 0xc2c6096d, 0x8300b4af, 0x82c404ae,  # 2027
    0x82c40a4d, 0xc3016d0d, 0x82c40d25, 0x82c40d52, 0x83005dd4, 0xc2c60b6a, 0x82c6096d, 0x8300255b,  # 2035
    0x82c4049b, 0xc3007a57, 0x82c40a4b, 0x82c40b25, 0x83015b25, 0xc2c406d4, 0x82c60ada, 0x830138b6,  # 2043
)


def year_total_days(word: int) -> int:
    return (word >> 17) & 0x1FF


def leap_month(word: int) -> int:
    return (word >> 12) & 0xF


def is_leap_month_big(word: int) -> bool:
    return bool((word >> 16) & 1)


def is_month_big(word: int, month: int) -> bool:
    return bool((word >> (12 - month)) & 1)

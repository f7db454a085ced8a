# ==========================================
# 1. 천간 / 지지
# ==========================================
STEMS = "甲乙丙丁戊己庚辛壬癸"
BRANCHES = "子丑寅卯辰巳午未申酉戌亥"
STEMS_KR = "갑을병정무기경신임계"
BRANCHES_KR = "자축인묘진사오미신유술해"

# 60갑자 기준점
DAY_PILLAR_JDN_OFFSET = 49          # (JDN + 49) % 60, 2024-01-01 = 갑자(0)
YEAR_PILLAR_BASE_YEAR = 1984        # 1984년 = 갑자년

# 월두법: 년간 -> 인월(寅月) 천간  (甲己→丙, 乙庚→戊, 丙辛→庚, 丁壬→壬, 戊癸→甲)
MONTH_START_STEM = (2, 4, 6, 8, 0, 2, 4, 6, 8, 0)
# 시두법(오자원): 일간 -> 자시(子時) 천간  (甲己→甲, 乙庚→丙, 丙辛→戊, 丁壬→庚, 戊癸→壬)
HOUR_START_STEM = (0, 2, 4, 6, 8, 0, 2, 4, 6, 8)

# ==========================================
# 2. 24절기 (춘분 = solarIndex 0)
# ==========================================
SOLAR_TERM_KR = [
    "춘분", "청명", "곡우", "입하", "소만", "망종",
    "하지", "소서", "대서", "입추", "처서", "백로",
    "추분", "한로", "상강", "입동", "소설", "대설",
    "동지", "소한", "대한", "입춘", "우수", "경칩"
]

# 절입(월이 바뀌는 절기) -> 사주 월 인덱스 (1 = 인월)
MONTH_INDEX = {
    "입춘": 1, "경칩": 2, "청명": 3, "입하": 4, "망종": 5, "소서": 6,
    "입추": 7, "백로": 8, "한로": 9, "입동": 10, "대설": 11, "소한": 12
}

# (절기명, 황경, 사주월, 예상 월, 예상 일) - 양력 연도 안에서의 순서
JEOL_TERM_SPECS = (
    ("소한", 285, 12, 1, 6),
    ("입춘", 315, 1, 2, 4),
    ("경칩", 345, 2, 3, 6),
    ("청명", 15, 3, 4, 5),
    ("입하", 45, 4, 5, 6),
    ("망종", 75, 5, 6, 6),
    ("소서", 105, 6, 7, 7),
    ("입추", 135, 7, 8, 8),
    ("백로", 165, 8, 9, 8),
    ("한로", 195, 9, 10, 8),
    ("입동", 225, 10, 11, 7),
    ("대설", 255, 11, 12, 7),
)

# 절기표가 전혀 없을 때 쓰는 월별 절입일 근사값
APPROX_JEOL_START_DAY = {1: 6, 2: 4, 3: 6, 4: 5, 5: 6, 6: 6, 7: 7, 8: 8, 9: 8, 10: 8, 11: 7, 12: 7}

TABLE_FIRST_YEAR = 1900
TABLE_LAST_YEAR = 2050
KST_OFFSET_MINUTES = 9 * 60

# ==========================================
# 3. 역사적 시간 보정
# ==========================================
# 서머타임 구간 (시작일 포함, 종료일 미포함), 벽시계 -60분
KOREAN_DST_PERIODS = (
    ((1948, 6, 1), (1948, 9, 13)), ((1949, 4, 3), (1949, 9, 11)),
    ((1950, 4, 1), (1950, 9, 10)), ((1951, 5, 6), (1951, 9, 9)),
    ((1955, 5, 5), (1955, 9, 9)), ((1956, 5, 20), (1956, 9, 30)),
    ((1957, 5, 5), (1957, 9, 22)), ((1958, 5, 4), (1958, 9, 21)),
    ((1959, 5, 3), (1959, 9, 20)), ((1960, 5, 1), (1960, 9, 18)),
    ((1987, 5, 10), (1987, 10, 11)), ((1988, 5, 8), (1988, 10, 9)),
)
DST_OFFSET_MINUTES = 60

# 동경 127.5도(UTC+8:30) 표준시 사용 구간 (양 끝 포함), 벽시계 +30분
KOREAN_UTC_0830_PERIODS = (
    ((1908, 4, 1), (1911, 12, 31)),
    ((1954, 3, 21), (1961, 8, 9)),
)
UTC_0830_CORRECTION_MINUTES = 30

# ==========================================
# 4. 대운
# ==========================================
MINUTES_PER_DAEUN_MONTH = 360       # 3일 = 1년  ->  6시간 = 1개월
MIN_DAEUN_START_AGE = 1
APPROX_BOUNDARY_DAY = 6
APPROX_BOUNDARY_HOUR = 12

# ==========================================
# 5. 주요 도시 경도 (동경, 도)
# ==========================================
CITY_DATA = {
    "서울": 126.97, "부산": 129.07, "대구": 128.60, "인천": 126.70,
    "광주": 126.85, "대전": 127.38, "울산": 129.31, "세종": 127.29,
    "수원": 127.03, "춘천": 127.73, "강릉": 128.90, "청주": 127.49,
    "전주": 127.15, "포항": 129.36, "창원": 128.68, "제주": 126.53,
}
DEFAULT_CITY = "서울"

class SajuError(Exception):
    """manse 패키지 공통 예외"""


class OutOfRangeError(SajuError, ValueError):
    """지원 범위를 벗어난 연도/월/일, 잘못된 시각 필드"""


class ConfigError(SajuError, ValueError):
    """잘못된 설정값 또는 알 수 없는 타임존"""


class InvalidGanjiError(SajuError):
    """
    음양이 맞지 않는 (천간, 지지) 조합.
    호출 측 로직 결함이므로 ValueError 하위 클래스가 아니다.
    """

    def __init__(self, stem, branch):
        self.stem = stem
        self.branch = branch
        super().__init__(f"Invalid ganji combination: stem={stem} branch={branch} (parity mismatch)")

"""
[공통 모델] 생성 시 검증하는 불변 pydantic 모델

model_validator 안에서 던진 OutOfRangeError 는 ValueError 이므로 pydantic 이
ValidationError 로 감싼다. 생성자에서 원래 SajuError 를 꺼내 그대로 다시 던진다.
중첩 모델(dict 입력)에서 난 오류도 같은 방식으로 올라온다.
"""

from typing import Optional

from pydantic import BaseModel, ValidationError

from manse.errors import SajuError


def domain_error(exc: ValidationError) -> Optional[SajuError]:
    for err in exc.errors():
        cause = (err.get("ctx") or {}).get("error")
        if isinstance(cause, SajuError):
            return cause
    return None


class FrozenModel(BaseModel):
    model_config = {"frozen": True}

    def __init__(self, **data):
        try:
            super().__init__(**data)
        except ValidationError as e:
            cause = domain_error(e)
            if cause is None:
                raise
            raise cause from e

# slabcore/helpers.py

"""
이 모듈은 slabcore 패키지 내부의 다른 모듈들이 공통적으로 사용하는
저수준(low-level) 도우미 함수들을 제공합니다.
"""

import math
from enum import Enum
from typing import Type, TypeVar

from slabcore.exceptions import GSDException, InvalidNumericInputError

# 프로젝트 전역에서 사용할 부동소수점 비교를 위한 허용 오차
TOLERANCE = 1e-9

E = TypeVar("E", bound=Enum)

def is_greater_or_equal(a: float, b: float) -> bool:
    """
    부동소수점 오차를 고려하여 a >= b 인지 안전하게 비교합니다.
    a가 b보다 크거나, 두 수의 차이가 허용 오차보다 작으면 True를 반환합니다.
    """
    return (a - b) > -TOLERANCE

def is_less_or_equal(a: float, b: float) -> bool:
    """
    부동소수점 오차를 고려하여 a <= b 인지 안전하게 비교합니다.
    a가 b보다 작거나, 두 수의 차이가 허용 오차보다 작으면 True를 반환합니다.
    """
    return (a - b) < TOLERANCE

# --- 수치 입력 검증 (실패 시 InvalidNumericInputError) ---

def require_finite(name: str, value: float) -> float:
    """값이 유한한 실수(NaN, Infinity 아님)인지 확인합니다."""
    if isinstance(value, complex) or not math.isfinite(value):
        raise InvalidNumericInputError(f"'{name}' 값이 유효한 수가 아닙니다: {value}")
    return value

def require_positive(name: str, value: float) -> float:
    """값이 유한한 양수인지 확인합니다. (NaN 도 걸러냅니다)"""
    require_finite(name, value)
    if not value > 0:
        raise InvalidNumericInputError(f"'{name}' 값은 0보다 커야 합니다: {value}")
    return value

def require_non_negative(name: str, value: float) -> float:
    """값이 유한한 0 이상의 수인지 확인합니다."""
    require_finite(name, value)
    if value < 0:
        raise InvalidNumericInputError(f"'{name}' 값은 음수일 수 없습니다: {value}")
    return value

# --- 범주형 입력 변환 ---

def coerce_enum(enum_cls: Type[E], value, error_cls: Type[GSDException], label: str) -> E:
    """
    문자열 코드(예: 'dowel') 또는 Enum 멤버를 enum_cls 멤버로 변환합니다.
    지원하지 않는 코드는 error_cls 예외로 변환하여 발생시킵니다.
    """
    try:
        return enum_cls(value)
    except ValueError:
        supported = [member.value for member in enum_cls]
        raise error_cls(f"지원하지 않는 {label} 입니다: '{value}' (지원: {supported})") from None

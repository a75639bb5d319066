# slabcore/exceptions.py

"""
이 모듈은 Ground Slab Designer 프로젝트에서 사용되는 모든 사용자 정의 예외 클래스를
중앙에서 관리합니다.

각 예외는 특정 오류 상황을 명확하게 나타내어, 체계적이고 구체적인
오류 처리를 가능하게 합니다. 모든 예외는 기본 GSDException을 상속받습니다.
"""

class GSDException(Exception):
    """
    이 프로젝트(Ground Slab Design)의 모든 사용자 정의 예외에 대한 기본 클래스입니다.
    이 클래스를 직접 발생시키기보다는, 이를 상속받는 더 구체적인 예외를 사용합니다.
    """
    pass

# --- 입력값 및 정의 관련 오류 ---

class GroundError(GSDException):
    """지반 조건(CBR, Scala, 보조기층) 정의와 관련된 오류입니다."""
    pass

class MaterialError(GSDException):
    """콘크리트 재료 정의와 관련된 오류에 대한 기본 클래스입니다."""
    pass

class LoadingError(GSDException):
    """하중(랙킹/차륜) 및 줄눈 정의와 관련된 오류입니다."""
    pass

# --- 설계 계산 과정에서 발생하는 오류 ---

class DesignError(GSDException):
    """설계 계산 과정에서 발생하는 일반적인 오류에 대한 기본 클래스입니다."""
    pass

class InvalidNumericInputError(DesignError):
    """
    입력값 또는 중간 계산값이 유한한 수가 아니거나(NaN, Infinity) 허용 범위를
    벗어나 계산을 진행할 수 없을 때 발생하는 예외입니다.
    오케스트레이터는 이 예외를 잡아 '저하된(degraded)' 결과로 변환합니다.
    """
    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)

class ThicknessSearchExhaustedError(DesignError):
    """
    최대 반복 횟수 안에 허용응력을 만족하는 슬래브 두께를 찾지 못했을 때
    compute_design_or_raise 에서 발생하는 예외입니다.
    """
    def __init__(self, position: str, thickness: float, stress: float, allowable_stress: float):
        message = (f"Thickness search exhausted at {position} position. "
                   f"Design stress {stress:.0f} kPa at h={thickness:.0f} mm "
                   f"still exceeds the allowable stress {allowable_stress:.0f} kPa.")
        self.position = position
        self.thickness = thickness
        self.message = message
        super().__init__(self.message)

# slabcore/ground/subgrade.py

"""
이 모듈은 지반(노상) 조건으로부터 지반반력계수(k)를 추정하는 함수들과,
지반 조건을 정의하는 불변(immutable) 데이터 클래스 GroundCondition을 제공합니다.

CBR 또는 Scala 관입시험 결과를 TM38 도표의 단계형(step) 조회표로 변환하며,
보간(interpolation)은 하지 않습니다. 단위: CBR %, Scala mm/blow, k MN/m³, 두께 mm
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

import slabcore.constants as const
from slabcore.exceptions import GroundError
from slabcore.helpers import coerce_enum, require_finite


class GroundAssessment(str, Enum):
    """지반 평가 방법"""
    CBR = "cbr"
    SCALA = "scala"


# ==============================================================================
# 조회 함수
# ==============================================================================
def cbr_to_modulus(cbr: float) -> float:
    """CBR(%)을 지반반력계수 k(MN/m³)로 변환합니다. TM38 Figure 1.2"""
    for cbr_limit, modulus in const.CBR_MODULUS_TABLE:
        if cbr <= cbr_limit:
            return modulus
    return const.CBR_MODULUS_MAX

def scala_to_cbr(reading: float) -> float:
    """
    Scala 관입량(mm/blow)을 CBR(%)로 변환합니다. TM38 Figure 1.3
    타격당 관입량이 작을수록 단단한 지반이므로 CBR이 커집니다.
    """
    for reading_limit, cbr in const.SCALA_CBR_TABLE:
        if reading >= reading_limit:
            return cbr
    return const.SCALA_CBR_MIN_READING

def enhance_for_subbase(k: float, thickness: float, has_subbase: bool = True) -> float:
    """보조기층에 의한 k 증가를 반영합니다. 증가량은 2배로 제한됩니다. TM38 Figure 3.1"""
    if not has_subbase or thickness < const.SUBBASE_MIN_THICKNESS:
        return k
    enhancement = 1 + (thickness / const.SUBBASE_REFERENCE_THICKNESS) * const.SUBBASE_ENHANCEMENT_RATE
    return min(k * enhancement, k * const.SUBBASE_MAX_ENHANCEMENT)


# ==============================================================================
# 지반 조건 클래스
# ==============================================================================
@dataclass(frozen=True)
class GroundCondition:
    """
    Attributes:
        cbr_value (float): 설계 CBR (%).
        assessment (GroundAssessment): 지반 평가 방법 ('cbr' 또는 'scala').
        scala_reading (Optional[float]): Scala 관입량 (mm/blow). 'scala' 평가일 때만 사용.
        has_subbase (bool): 보조기층 유무.
        subbase_thickness (float): 보조기층 두께 (mm).
    """
    cbr_value: float = 10.0
    assessment: GroundAssessment = GroundAssessment.CBR
    scala_reading: Optional[float] = None
    has_subbase: bool = False
    subbase_thickness: float = 0.0

    def __post_init__(self):
        object.__setattr__(self, 'assessment', coerce_enum(GroundAssessment, self.assessment, GroundError, "지반 평가 방법"))

    def check_numeric_inputs(self) -> None:
        """계산 전에 수치 입력값의 유효성을 확인합니다."""
        require_finite("cbr_value", self.cbr_value)
        if self.scala_reading is not None:
            require_finite("scala_reading", self.scala_reading)
        require_finite("subbase_thickness", self.subbase_thickness)

    @property
    def design_cbr(self) -> float:
        """
        설계에 사용할 CBR (%).
        Scala 평가이면서 관입량이 주어진 경우에만 관입량으로부터 환산합니다.
        """
        if self.assessment == GroundAssessment.SCALA and self.scala_reading is not None:
            return scala_to_cbr(self.scala_reading)
        return self.cbr_value

    @property
    def base_modulus(self) -> float:
        """보조기층 보정 전 지반반력계수 (MN/m³)"""
        return cbr_to_modulus(self.design_cbr)

    @property
    def modulus(self) -> float:
        """보조기층 보정 후 설계 지반반력계수 (MN/m³)"""
        return enhance_for_subbase(self.base_modulus, self.subbase_thickness, self.has_subbase)

# slabcore/material/concrete.py

"""
이 모듈은 지반 슬래브 콘크리트의 강도 특성(파괴계수, 허용응력, 탄성계수)을
정의하는 함수와 불변(immutable) 데이터 클래스 SlabConcrete를 제공합니다.

모든 강도 단위는 MPa 이며, 허용응력과 탄성계수는 응력 계산과 맞추기 위해
kPa 로 반환합니다.
"""

from dataclasses import dataclass
from math import sqrt

import slabcore.constants as const
from slabcore.helpers import require_finite, require_positive

# ==============================================================================
# 강도 계산 함수
# ==============================================================================
def load_repetition_factor(repetitions: float) -> float:
    """하중 반복횟수에 따른 피로 계수 k2. 반복횟수가 많을수록 작아집니다."""
    for min_repetitions, k2 in const.LOAD_REPETITION_FACTORS:
        if repetitions >= min_repetitions:
            return k2
    return 1.0

def age_factor(age: float) -> float:
    """재령 계수 k1. 90일 이상이면 1.1"""
    return const.LONG_TERM_AGE_FACTOR if age >= const.LONG_TERM_AGE else 1.0

def modulus_of_rupture(fc: float, age: float, repetitions: float) -> float:
    """파괴계수 (MPa). TM38 Eq. 3.1 : 0.456 * k1 * k2 * fc^0.66"""
    k1 = age_factor(age)
    k2 = load_repetition_factor(repetitions)
    return const.RUPTURE_COEFFICIENT * k1 * k2 * fc ** const.RUPTURE_EXPONENT


# ==============================================================================
# Material Class
# ==============================================================================
@dataclass(frozen=True)
class SlabConcrete:
    """슬래브 콘크리트 재료와 설계 조건(재령, 반복하중, 프리스트레스)을 정의하는 불변 객체."""
    fc: float = 35.0
    assessment_age: int = 28
    load_repetitions: int = 8000
    is_prestressed: bool = False
    residual_prestress: float = 0.0

    def check_numeric_inputs(self) -> None:
        """계산 전에 수치 입력값의 유효성을 확인합니다. fc 는 양수여야 합니다."""
        require_positive("fc", self.fc)
        require_finite("assessment_age", self.assessment_age)
        require_finite("load_repetitions", self.load_repetitions)
        if self.is_prestressed:
            require_finite("residual_prestress", self.residual_prestress)

    @property
    def k1(self) -> float:
        return age_factor(self.assessment_age)

    @property
    def k2(self) -> float:
        return load_repetition_factor(self.load_repetitions)

    @property
    def modulus_of_rupture(self) -> float:
        """파괴계수 (MPa)"""
        return modulus_of_rupture(self.fc, self.assessment_age, self.load_repetitions)

    @property
    def allowable_stress(self) -> float:
        """허용 휨인장응력 (kPa). 프리스트레스 슬래브는 잔류 프리스트레스를 더합니다."""
        allowable = self.modulus_of_rupture * const.MPA_TO_KPA
        if self.is_prestressed:
            allowable += self.residual_prestress * const.MPA_TO_KPA
        return allowable

    @property
    def elastic_modulus(self) -> float:
        """탄성계수 E (kPa) = 5000 * sqrt(fc) MPa"""
        return const.ELASTIC_MODULUS_COEFFICIENT * sqrt(self.fc) * const.MPA_TO_KPA

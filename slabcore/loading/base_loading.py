# slabcore/loading/base_loading.py

"""
이 모듈은 모든 하중 형식 클래스가 따라야 할 추상 기본 클래스(ABC)인
BaseLoading과, 하중 재하면적을 등가 원형 반경으로 바꾸는 공통 함수를 정의합니다.

BaseLoading은 하중이 가져야 할 최소한의 기능(등가반경, 유효하중, 하중계수)을
명시합니다. 이를 통해 설계 엔진(DesignEngine)은 구체적인 하중 형식(랙킹, 차륜)에
의존하지 않고 일관된 방식으로 두께 탐색을 수행할 수 있습니다.
"""

from abc import ABC, abstractmethod
from enum import Enum
from math import pi, sqrt

import slabcore.constants as const


class LoadClass(str, Enum):
    """하중 형식"""
    RACKING = "racking"
    WHEEL = "wheel"


def radius_of_loaded_area(length: float, width: float, h: float, is_combined: bool = False) -> float:
    """
    재하면적(length x width, mm)의 등가 원형 반경 b (mm)를 계산합니다. TM38 Eq. 3.4
    r < 1.72h 인 작은 재하면적은 Westergaard 보정을 적용합니다.

    Args:
        length, width: 재하면 치수 (mm)
        h: 검토 슬래브 두께 (mm)
        is_combined: True 이면 인접 하중과 합산하여 면적을 2배로 봅니다.
    """
    area = (length * width) / 1e6  # m²
    if is_combined:
        area = 2 * area

    r = sqrt(area / pi) * 1000  # mm

    if r < const.SMALL_AREA_LIMIT_RATIO * h:
        b = sqrt(const.SMALL_AREA_COEFFICIENT * r ** 2 + h ** 2) - const.SMALL_AREA_OFFSET * h
        return max(b, r)
    return r


class BaseLoading(ABC):
    """
    모든 하중 형식 클래스가 상속받아야 할 추상 기본 클래스(Interface).
    실제 계산 로직은 이 클래스를 상속받는 구체적인 하중 클래스(예: RackingLoad)
    에서 구현되어야 합니다.
    """

    @property
    @abstractmethod
    def load_class(self) -> LoadClass:
        pass

    @property
    @abstractmethod
    def nominal_load(self) -> float:
        """공칭 집중하중 (kN)"""
        pass

    @abstractmethod
    def equivalent_radius(self, h: float) -> float:
        """검토 두께 h(mm)에서의 등가반경 b (mm)"""
        pass

    @abstractmethod
    def effective_load(self, h: float) -> float:
        """검토 두께 h(mm)에서 응력 계산에 사용하는 유효하중 (kN)"""
        pass

    @abstractmethod
    def check_numeric_inputs(self) -> None:
        """계산 전에 수치 입력값의 유효성을 확인합니다."""
        pass

    @property
    def design_factor(self) -> float:
        """응력에 곱하는 설계 계수. 기본은 하중계수 1.5"""
        return const.LOAD_FACTOR

# slabcore/loading/racking.py

"""
이 모듈은 랙킹(racking) 기둥 하중(RackingLoad)을 정의하고,
BaseLoading 추상 클래스를 구현하여 등가반경과 유효하중을 계산합니다.
이 클래스는 불변(immutable) 객체입니다.
단위: 베이스플레이트 mm, 하중 kN, 배면 간격 m
"""

from dataclasses import dataclass

import slabcore.constants as const
from slabcore.loading.base_loading import BaseLoading, LoadClass, radius_of_loaded_area
from slabcore.helpers import require_finite, require_non_negative


@dataclass(frozen=True)
class RackingLoad(BaseLoading):
    """
    Attributes:
        baseplate_x (float): 베이스플레이트 X 치수 (mm).
        baseplate_y (float): 베이스플레이트 Y 치수 (mm).
        point_load (float): 기둥 1개당 집중하중 (kN).
        is_back_to_back (bool): 배면(back-to-back) 랙 배치 여부.
        back_to_back_spacing (float): 배면 랙 기둥 중심 간격 (m).
    """
    baseplate_x: float = 140.0
    baseplate_y: float = 140.0
    point_load: float = 40.0
    is_back_to_back: bool = False
    back_to_back_spacing: float = 0.8

    @property
    def load_class(self) -> LoadClass:
        return LoadClass.RACKING

    @property
    def nominal_load(self) -> float:
        return self.point_load

    @property
    def back_to_back_spacing_mm(self) -> float:
        return self.back_to_back_spacing * 1000

    def check_numeric_inputs(self) -> None:
        require_non_negative("baseplate_x", self.baseplate_x)
        require_non_negative("baseplate_y", self.baseplate_y)
        require_non_negative("point_load", self.point_load)
        if self.is_back_to_back:
            require_non_negative("back_to_back_spacing", self.back_to_back_spacing)
        else:
            require_finite("back_to_back_spacing", self.back_to_back_spacing)

    def is_combined(self, h: float) -> bool:
        """배면 랙 간격이 2h 보다 가까우면 두 기둥 하중을 합산합니다."""
        return self.is_back_to_back and self.back_to_back_spacing_mm < const.COMBINED_LOAD_SPACING_RATIO * h

    def equivalent_radius(self, h: float) -> float:
        return radius_of_loaded_area(self.baseplate_x, self.baseplate_y, h, self.is_combined(h))

    def effective_load(self, h: float) -> float:
        # 면적 2배와 하중 2배는 항상 같은 조건으로 함께 적용
        if self.is_combined(h):
            return 2 * self.point_load
        return self.point_load

# slabcore/loading/wheel.py

"""
이 모듈은 차륜(wheel) 하중(WheelLoad)을 정의하고, 타이어 종류와 차륜 배치에 따른
접지면(WheelContact)을 계산합니다.

접지면은 먼저 단일 차륜 기준으로 구한 뒤, 복륜(dual, 좌우) 또는 탠덤(tandem, 전후)
배치에서 두 차륜이 가까우면 하나의 합성 접지면으로, 멀면 면적만 합산한 독립
접지면으로 취급합니다. 단위: 치수 mm, 하중 kN
"""

from dataclasses import dataclass
from enum import Enum
from math import sqrt
from typing import Tuple

import slabcore.constants as const
from slabcore.exceptions import LoadingError
from slabcore.loading.base_loading import BaseLoading, LoadClass, radius_of_loaded_area
from slabcore.helpers import coerce_enum, require_non_negative, require_positive


class TireType(str, Enum):
    PNEUMATIC = "pneumatic"
    SOLID = "solid"
    STEEL = "steel"


class WheelConfiguration(str, Enum):
    SINGLE = "single"
    DUAL = "dual"       # 좌우 나란히
    TANDEM = "tandem"   # 전후 연속


@dataclass(frozen=True)
class WheelContact:
    """차륜 접지면 계산 결과를 담는 데이터 클래스."""
    length: float           # 유효 접지 길이 (mm)
    width: float            # 유효 접지 폭 (mm)
    area: float             # 총 접지 면적 (m²)
    single_length: float
    single_width: float
    configuration: WheelConfiguration
    is_interacting: bool    # 복륜/탠덤이 하나의 접지면으로 합성되었는지 여부


def single_contact_dimensions(tire_type: TireType, diameter: float, tire_width: float, load: float) -> Tuple[float, float]:
    """단일 차륜의 접지 (길이, 폭)을 계산합니다. 두 치수 모두 50mm 이상으로 제한됩니다."""
    if tire_type == TireType.PNEUMATIC:
        # 공기압 타이어 - 타원형 접지면 근사
        length = const.PNEUMATIC_LENGTH_COEFFICIENT * sqrt(diameter * load * 10)
        width = tire_width * const.PNEUMATIC_WIDTH_RATIO
    elif tire_type == TireType.SOLID:
        # 솔리드 타이어 - 사각형 접지면
        length = const.SOLID_LENGTH_COEFFICIENT * sqrt(diameter * load * 10)
        width = tire_width * const.SOLID_WIDTH_RATIO
    else:
        # 강재 휠 - 선 접촉에 가까움
        length = tire_width * const.STEEL_LENGTH_RATIO
        width = max(const.STEEL_MIN_WIDTH, load / 10)

    return max(const.MIN_CONTACT_DIMENSION, length), max(const.MIN_CONTACT_DIMENSION, width)


@dataclass(frozen=True)
class WheelLoad(BaseLoading):
    """
    Attributes:
        point_load (float): 차륜 1개당 하중 (kN).
        tire_type (TireType): 타이어 종류 ('pneumatic', 'solid', 'steel').
        configuration (WheelConfiguration): 차륜 배치 ('single', 'dual', 'tandem').
        wheel_diameter (float): 차륜 직경 (mm).
        tire_width (float): 타이어 폭 (mm).
        wheel_spacing (float): 복륜 또는 탠덤 차륜 사이 간격 (mm).
        frequency_factor (float): 교통 빈도 계수 (1.0 ~ 1.3).
    """
    point_load: float = 40.0
    tire_type: TireType = TireType.PNEUMATIC
    configuration: WheelConfiguration = WheelConfiguration.SINGLE
    wheel_diameter: float = 250.0
    tire_width: float = 100.0
    wheel_spacing: float = 150.0
    frequency_factor: float = 1.0

    def __post_init__(self):
        object.__setattr__(self, 'tire_type', coerce_enum(TireType, self.tire_type, LoadingError, "타이어 종류"))
        object.__setattr__(self, 'configuration', coerce_enum(WheelConfiguration, self.configuration, LoadingError, "차륜 배치"))

    @property
    def load_class(self) -> LoadClass:
        return LoadClass.WHEEL

    @property
    def nominal_load(self) -> float:
        return self.point_load

    @property
    def design_factor(self) -> float:
        """하중계수 1.5 에 교통 빈도 계수를 곱합니다."""
        return const.LOAD_FACTOR * self.frequency_factor

    def check_numeric_inputs(self) -> None:
        require_non_negative("point_load", self.point_load)
        require_non_negative("wheel_diameter", self.wheel_diameter)
        require_non_negative("tire_width", self.tire_width)
        require_non_negative("wheel_spacing", self.wheel_spacing)
        require_positive("frequency_factor", self.frequency_factor)

    def contact_patch(self) -> WheelContact:
        """차륜 배치를 반영한 유효 접지면을 계산합니다."""
        single_length, single_width = single_contact_dimensions(
            self.tire_type, self.wheel_diameter, self.tire_width, self.point_load
        )
        spacing = self.wheel_spacing
        is_interacting = False

        if self.configuration == WheelConfiguration.SINGLE:
            length, width = single_length, single_width
            total_area = length * width
        elif self.configuration == WheelConfiguration.DUAL:
            length = single_length
            if spacing < const.WHEEL_INTERACTION_RATIO * single_width:
                # 가까운 간격 - 하나의 합성 접지면
                is_interacting = True
                width = (2 * single_width) + spacing
                total_area = length * width
            else:
                # 넓은 간격 - 면적만 합산, 길이를 고정하고 폭을 역산
                total_area = 2 * (single_length * single_width)
                width = sqrt((2 * single_length * single_width) / single_length)
        else:
            width = single_width
            if spacing < const.WHEEL_INTERACTION_RATIO * single_length:
                is_interacting = True
                length = (2 * single_length) + spacing
                total_area = length * width
            else:
                total_area = 2 * (single_length * single_width)
                length = sqrt((2 * single_length * single_width) / single_width)

        return WheelContact(
            length=length,
            width=width,
            area=total_area / 1e6,
            single_length=single_length,
            single_width=single_width,
            configuration=self.configuration,
            is_interacting=is_interacting,
        )

    def equivalent_radius(self, h: float) -> float:
        contact = self.contact_patch()
        return radius_of_loaded_area(contact.length, contact.width, h)

    def effective_load(self, h: float) -> float:
        return self.point_load

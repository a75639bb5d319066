# slabcore/stress.py

"""
이 모듈은 상대강성반경(l)과 재하 위치별(내부/단부/모서리) 휨인장응력 식을 제공합니다.

세 위치는 같은 두께 탐색 알고리즘을 공유하며, 위치마다 다른 것은 응력 식과
줄눈 하중전달 계수뿐입니다. 따라서 Position 을 키로 하는 식/계수 테이블로
디스패치합니다.

단위: P kN, h/l/b mm, 응력 kPa
"""

from enum import Enum
from math import log

import slabcore.constants as const
from slabcore.exceptions import LoadingError
from slabcore.helpers import coerce_enum


class Position(str, Enum):
    """재하 위치"""
    INTERIOR = "interior"
    EDGE = "edge"
    CORNER = "corner"


class JointType(str, Enum):
    """줄눈 형식. dowel, tied 줄눈은 인접 슬래브로 하중을 전달합니다."""
    DOWEL = "dowel"
    TIED = "tied"
    NON_DOWEL = "non_dowel"


def has_load_transfer(joint_type) -> bool:
    joint_type = coerce_enum(JointType, joint_type, LoadingError, "줄눈 형식")
    return joint_type in (JointType.DOWEL, JointType.TIED)


def radius_of_relative_stiffness(E: float, h: float, k: float, mu: float = const.POISSON_RATIO) -> float:
    """상대강성반경 l. TM38 Eq. 3.3 (E: kPa, h: mm, k: MN/m³)"""
    denominator = 12 * (1 - mu ** 2) * k * 1000
    return ((E * h ** 3) / denominator) ** 0.25


# ==============================================================================
# 위치별 응력 식 (하중전달 계수 적용 전)
# ==============================================================================
def _unit_pressure(P: float, h: float) -> float:
    return P * 1000 / h ** 2

def interior_stress(P: float, h: float, l: float, b: float, mu: float = const.POISSON_RATIO) -> float:
    """내부 재하 응력 (kPa). TM38 Eq. 3.2"""
    stress = _unit_pressure(P, h) * (0.70 * (1 + mu) * log(l / b) + 1.069)
    return stress * 1e6 / 1000

def edge_stress(P: float, h: float, l: float, b: float, mu: float = const.POISSON_RATIO) -> float:
    """단부 재하 응력 (kPa). TM38 Eq. 3.5"""
    stress = 5.19 * (1 + 0.54 * mu) * _unit_pressure(P, h) * \
             (4 * log(l / b) + log(b / const.EDGE_REFERENCE_RADIUS))
    return stress * 1e6 / 1000

def corner_stress(P: float, h: float, l: float, b: float, mu: float = const.POISSON_RATIO) -> float:
    """모서리 재하 응력 (kPa). TM38 Eq. 3.6"""
    ratio = b / l
    stress = 41.2 * _unit_pressure(P, h) * (1 - ratio ** 0.5) / (0.925 + 0.22 * ratio)
    return stress * 1e6 / 1000


STRESS_FORMULAS = {
    Position.INTERIOR: interior_stress,
    Position.EDGE: edge_stress,
    Position.CORNER: corner_stress,
}

LOAD_TRANSFER_FACTORS = {
    Position.INTERIOR: 1.0,
    Position.EDGE: const.EDGE_LOAD_TRANSFER_FACTOR,
    Position.CORNER: const.CORNER_LOAD_TRANSFER_FACTOR,
}


def position_stress(position: Position, P: float, h: float, l: float, b: float, load_transfer: bool) -> float:
    """위치별 응력 (kPa). 하중전달이 있으면 위치별 감소계수를 곱합니다."""
    stress = STRESS_FORMULAS[position](P, h, l, b)
    if load_transfer:
        stress *= LOAD_TRANSFER_FACTORS[position]
    return stress

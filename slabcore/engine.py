# slabcore/engine.py

import logging
from dataclasses import dataclass
from typing import Dict, Optional

import slabcore.constants as const
from slabcore.exceptions import (
    DesignError, InvalidNumericInputError, LoadingError, ThicknessSearchExhaustedError
)
from slabcore.ground.subgrade import GroundCondition
from slabcore.helpers import coerce_enum, is_greater_or_equal, is_less_or_equal, require_finite
from slabcore.loading.base_loading import BaseLoading, LoadClass
from slabcore.material.concrete import SlabConcrete
from slabcore.stress import (
    JointType, Position, has_load_transfer, position_stress, radius_of_relative_stiffness
)

logger = logging.getLogger(__name__)

# ==============================================================================
# 입력 및 결과 반환을 위한 데이터 클래스 정의
# ==============================================================================
@dataclass(frozen=True)
class DesignInput:
    """
    1회 설계 계산의 전체 입력. 하중은 RackingLoad 또는 WheelLoad 중 하나만 가지므로
    두 하중 형식의 입력이 섞이지 않습니다.
    """
    ground: GroundCondition
    concrete: SlabConcrete
    loading: BaseLoading
    joint_type: JointType = JointType.DOWEL

    def __post_init__(self):
        object.__setattr__(self, 'joint_type', coerce_enum(JointType, self.joint_type, LoadingError, "줄눈 형식"))
        if not isinstance(self.loading, BaseLoading):
            raise LoadingError(f"지원하지 않는 하중 객체입니다: {type(self.loading).__name__}")

    @property
    def load_class(self) -> LoadClass:
        return self.loading.load_class

    @property
    def has_load_transfer(self) -> bool:
        return has_load_transfer(self.joint_type)

    def check_numeric_inputs(self) -> None:
        self.ground.check_numeric_inputs()
        self.concrete.check_numeric_inputs()
        self.loading.check_numeric_inputs()

@dataclass(frozen=True)
class TrialResult:
    """검토 두께 1개에 대한 저수준(low-level) 계산 결과를 담는 내부용 데이터 클래스."""
    thickness: float
    radius_of_stiffness: float
    equivalent_radius: float
    effective_load: float
    stress: float           # 하중계수 적용 전 (kPa)
    design_stress: float    # 하중계수(및 교통 빈도 계수) 적용 후 (kPa)

@dataclass(frozen=True)
class PositionResult:
    """재하 위치 1개에 대한 소요 두께 탐색 결과를 담는 데이터 클래스."""
    position: Position
    equivalent_radius: float
    radius_of_stiffness: float
    stress: float
    thickness: float
    is_adequate: bool
    iterations: int = 0

    @classmethod
    def from_trial(cls, position: Position, trial: TrialResult, is_adequate: bool, iterations: int) -> "PositionResult":
        return cls(
            position=position,
            equivalent_radius=trial.equivalent_radius,
            radius_of_stiffness=trial.radius_of_stiffness,
            stress=trial.design_stress,
            thickness=trial.thickness,
            is_adequate=is_adequate,
            iterations=iterations,
        )

    @classmethod
    def degraded(cls, position: Position) -> "PositionResult":
        return cls(position=position, equivalent_radius=0.0, radius_of_stiffness=0.0, stress=0.0,
                   thickness=const.DEGRADED_THICKNESS, is_adequate=False)

@dataclass(frozen=True)
class DesignOutput:
    """'설계' 결과. error 가 있으면 계산이 실패하여 기본값으로 채워진 결과입니다."""
    modulus: float
    allowable_stress: float
    interior: PositionResult
    edge: PositionResult
    corner: PositionResult
    error: Optional[DesignError] = None

    @classmethod
    def degraded(cls, error: DesignError) -> "DesignOutput":
        return cls(
            modulus=0.0,
            allowable_stress=0.0,
            interior=PositionResult.degraded(Position.INTERIOR),
            edge=PositionResult.degraded(Position.EDGE),
            corner=PositionResult.degraded(Position.CORNER),
            error=error,
        )

    @property
    def results(self) -> Dict[Position, PositionResult]:
        return {Position.INTERIOR: self.interior, Position.EDGE: self.edge, Position.CORNER: self.corner}

    @property
    def is_degraded(self) -> bool:
        return self.error is not None

    @property
    def is_adequate(self) -> bool:
        return not self.is_degraded and all(r.is_adequate for r in self.results.values())

    @property
    def governing_position(self) -> Position:
        """소요 두께가 가장 큰 위치. 같으면 모서리 > 단부 > 내부 순으로 우선합니다."""
        i, e, c = self.interior.thickness, self.edge.thickness, self.corner.thickness
        if is_greater_or_equal(c, e) and is_greater_or_equal(c, i):
            return Position.CORNER
        if is_greater_or_equal(e, i):
            return Position.EDGE
        return Position.INTERIOR

    @property
    def recommended_thickness(self) -> float:
        """권장 최소 슬래브 두께 (mm)"""
        return max(r.thickness for r in self.results.values())

# ==============================================================================
# 설계 엔진 클래스
# ==============================================================================
class DesignEngine:
    """
    TM38/CCANZ 방법으로 집중하중을 받는 지반 슬래브의 소요 두께를 계산하는 핵심 엔진 클래스.
    내부/단부/모서리 세 위치에 대해 같은 두께 탐색을 독립적으로 수행합니다.
    엔진은 상태를 갖지 않으므로 여러 입력에 대해 안전하게 재사용할 수 있습니다.
    """

    def compute_design(self, design_input: DesignInput) -> DesignOutput:
        """
        설계 입력 1개에 대한 전체 결과를 계산합니다.
        수치 오류가 발생해도 예외를 밖으로 던지지 않고, 두께 150mm / 전 위치 부적합으로
        채운 저하된(degraded) 결과에 오류를 담아 반환합니다.
        """
        try:
            return self._compute(design_input)
        except InvalidNumericInputError as e:
            error = e
        except (ArithmeticError, ValueError) as e:
            # math domain error, 0 나누기, overflow 등
            error = InvalidNumericInputError(f"수치 계산 실패 ({type(e).__name__}: {e})")

        logger.warning("Slab design degraded: %s", error)
        return DesignOutput.degraded(error)

    def compute_design_or_raise(self, design_input: DesignInput) -> DesignOutput:
        """설계 결과를 계산하고, 오류 또는 부적합 위치가 있으면 원인에 맞는 예외를 발생시킵니다."""
        output = self.compute_design(design_input)
        if output.error is not None:
            raise output.error

        for position, result in output.results.items():
            if not result.is_adequate:
                raise ThicknessSearchExhaustedError(
                    position=position.value, thickness=result.thickness,
                    stress=result.stress, allowable_stress=output.allowable_stress
                )
        return output

    def find_required_thickness(self, position: Position, design_input: DesignInput,
                                modulus: float, allowable_stress: float) -> PositionResult:
        """
        125mm 부터 25mm 씩 두께를 늘려가며 설계응력이 허용응력 이하가 되는 두께를 찾습니다.
        최대 반복 횟수 안에 찾지 못하면 마지막 증가 후 두께의 값을 부적합(is_adequate=False)으로 반환합니다.
        """
        loading = design_input.loading
        load_transfer = design_input.has_load_transfer
        E = design_input.concrete.elastic_modulus

        thickness = const.START_THICKNESS
        for iteration in range(1, const.MAX_ITERATIONS + 1):
            trial = self._evaluate_trial(position, loading, thickness, E, modulus, load_transfer)
            if is_less_or_equal(trial.design_stress, allowable_stress):
                logger.debug("%s: h=%.0f mm adequate after %d trials", position.value, thickness, iteration)
                return PositionResult.from_trial(position, trial, True, iteration)
            thickness += const.THICKNESS_INCREMENT

        trial = self._evaluate_trial(position, loading, thickness, E, modulus, load_transfer)
        logger.debug("%s: no adequate thickness within %d trials", position.value, const.MAX_ITERATIONS)
        return PositionResult.from_trial(position, trial, False, const.MAX_ITERATIONS)

    # --------------------------------------------------------------------------
    # 내부용 메서드
    # --------------------------------------------------------------------------
    def _compute(self, design_input: DesignInput) -> DesignOutput:
        """[내부용] 입력 검증 -> 지반반력계수 -> 허용응력 -> 위치별 두께 탐색"""
        design_input.check_numeric_inputs()

        modulus = require_finite("modulus", design_input.ground.modulus)
        allowable_stress = require_finite("allowable_stress", design_input.concrete.allowable_stress)

        results = {
            position: self.find_required_thickness(position, design_input, modulus, allowable_stress)
            for position in Position
        }
        return DesignOutput(
            modulus=modulus,
            allowable_stress=allowable_stress,
            interior=results[Position.INTERIOR],
            edge=results[Position.EDGE],
            corner=results[Position.CORNER],
        )

    def _evaluate_trial(self, position: Position, loading: BaseLoading, h: float, E: float,
                        k: float, load_transfer: bool) -> TrialResult:
        """[내부용] 검토 두께 h 에서 l, b, 유효하중, 응력을 계산합니다."""
        l = require_finite("radius_of_stiffness", radius_of_relative_stiffness(E, h, k))
        b = require_finite("equivalent_radius", loading.equivalent_radius(h))
        P = loading.effective_load(h)

        stress = position_stress(position, P, h, l, b, load_transfer)
        design_stress = require_finite("design_stress", stress * loading.design_factor)

        return TrialResult(
            thickness=h,
            radius_of_stiffness=l,
            equivalent_radius=b,
            effective_load=P,
            stress=stress,
            design_stress=design_stress,
        )


def compute_design(design_input: DesignInput) -> DesignOutput:
    """설계 계산의 단일 진입점. DesignEngine().compute_design 과 같습니다."""
    return DesignEngine().compute_design(design_input)

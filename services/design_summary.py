# services/design_summary.py

"""
이 모듈은 설계 엔진의 결과(DesignOutput)를 사람이 읽기 위한 요약으로 정리하는
DesignSummarizer 서비스를 제공합니다.
위치별 응력비, 지배 위치, 권장 두께, 설계 경고와 설계 참고사항을 만듭니다.
"""
from dataclasses import dataclass, field
from typing import List

from slabcore.engine import DesignInput, DesignOutput, PositionResult
from slabcore.loading.base_loading import LoadClass
from slabcore.stress import Position

GENERAL_NOTES = [
    "설계하중에 하중계수 1.5 적용",
    "산업용 바닥의 최소 슬래브 두께는 일반적으로 125mm",
    "콘크리트 강도 선정 시 내구성 요구조건을 함께 검토",
    "단부 및 모서리 재하는 내부 재하보다 큰 두께를 요구",
    "하중 반복횟수가 많으면 피로를 고려하여 허용응력을 감소",
]

RACKING_NOTES = [
    "배면(back-to-back) 랙 간격이 2 x 두께 미만이면 두 하중을 합산",
    "일반적인 랙 간격: 길이방향 2.4-2.7m, 폭방향 0.8-1.2m",
]

WHEEL_NOTES = [
    "강재 휠은 접촉면이 작아 더 큰 응력을 발생",
    "교통 빈도 계수는 통행량이 많을수록 설계응력을 증가",
    "고속 주행 시 동적 효과를 별도로 검토",
    "복륜/탠덤 간격이 2 x 접지치수 미만이면 하나의 합성 접지면으로 검토",
    "넓은 간격의 복수 차륜은 독립 접지면으로 검토",
]

POSITION_LABELS = {
    Position.INTERIOR: "내부 재하 (Interior)",
    Position.EDGE: "단부 재하 (Edge)",
    Position.CORNER: "모서리 재하 (Corner)",
}


def stress_ratio(stress: float, allowable_stress: float) -> float:
    """응력비 (%) = 설계응력 / 허용응력 x 100. 허용응력이 0 이하이면 0"""
    if allowable_stress > 0:
        return stress / allowable_stress * 100
    return 0.0


@dataclass(frozen=True)
class PositionSummary:
    position: Position
    thickness: float
    stress: float
    stress_ratio: float
    is_adequate: bool

    @property
    def label(self) -> str:
        return POSITION_LABELS[self.position]


@dataclass(frozen=True)
class DesignSummary:
    """설계 결과 요약."""
    rows: List[PositionSummary]
    governing_position: Position
    recommended_thickness: float
    is_adequate: bool
    warnings: List[str] = field(default_factory=list)
    notes: List[str] = field(default_factory=list)


class DesignSummarizer:
    """DesignOutput 을 위치별 응력비, 지배 위치, 경고, 참고사항으로 요약합니다."""

    def summarize(self, design_input: DesignInput, output: DesignOutput) -> DesignSummary:
        rows = [self._summarize_position(result, output.allowable_stress) for result in output.results.values()]

        warnings = []
        if output.error is not None:
            warnings.append(f"계산 오류로 기본값이 표시됩니다: {output.error}")
        else:
            for row in rows:
                if not row.is_adequate:
                    warnings.append(
                        f"{row.label}: 최대 반복 내 적정 두께를 찾지 못했습니다 "
                        f"(h={row.thickness:.0f} mm, 응력비 {row.stress_ratio:.1f}%)."
                    )

        return DesignSummary(
            rows=rows,
            governing_position=output.governing_position,
            recommended_thickness=output.recommended_thickness,
            is_adequate=output.is_adequate,
            warnings=warnings,
            notes=self.design_notes(design_input.load_class),
        )

    def design_notes(self, load_class: LoadClass) -> List[str]:
        """하중 형식에 맞는 설계 참고사항 목록을 반환합니다."""
        if load_class == LoadClass.RACKING:
            return GENERAL_NOTES + RACKING_NOTES
        return GENERAL_NOTES + WHEEL_NOTES

    def _summarize_position(self, result: PositionResult, allowable_stress: float) -> PositionSummary:
        return PositionSummary(
            position=result.position,
            thickness=result.thickness,
            stress=result.stress,
            stress_ratio=stress_ratio(result.stress, allowable_stress),
            is_adequate=result.is_adequate,
        )

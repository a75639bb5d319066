# interface/cli.py

from typing import Dict, Any, List

# --- 모든 필요한 모듈과 클래스를 import ---
from slabcore.ground.subgrade import GroundCondition, GroundAssessment
from slabcore.material.concrete import SlabConcrete
from slabcore.loading.base_loading import BaseLoading
from slabcore.loading.racking import RackingLoad
from slabcore.loading.wheel import WheelLoad, WheelContact, TireType, WheelConfiguration
from slabcore.stress import JointType
from slabcore.engine import DesignEngine, DesignInput, DesignOutput
from slabcore.exceptions import GSDException

from services.design_summary import DesignSummarizer, DesignSummary

# --- [1. 기본 사용자 입력(Prompt) 함수] ---

def _prompt_yes_no(message: str) -> bool:
    return input(f"{message} [y/n]: ").strip().lower() == 'y'

def _prompt_choice(message: str, options: List[str]) -> str:
    while True:
        choice = input(f"{message} {options}: ").strip().lower()
        if choice in options:
            return choice
        print(f"잘못된 입력입니다. {options} 중에서 선택해주세요.")

def prompt_for_ground() -> Dict[str, Any]:
    """사용자로부터 지반 조건을 입력받습니다."""
    print("\n--- [Step 1] 지반 조건 입력 ---")
    assessment = _prompt_choice("지반 평가 방법을 선택하세요", [m.value for m in GroundAssessment])
    cbr_value, scala_reading = 0.0, None
    if assessment == GroundAssessment.SCALA.value:
        scala_reading = float(input("Scala 관입량 (mm/blow): "))
    else:
        cbr_value = float(input("CBR (%): "))
    has_subbase = _prompt_yes_no("보조기층이 있습니까?")
    subbase_thickness = float(input("보조기층 두께 (mm): ")) if has_subbase else 0.0
    return {"assessment": assessment, "cbr_value": cbr_value, "scala_reading": scala_reading,
            "has_subbase": has_subbase, "subbase_thickness": subbase_thickness}

def prompt_for_concrete(repetition_options: List[int]) -> Dict[str, Any]:
    """사용자로부터 콘크리트 및 설계 조건을 입력받습니다."""
    print("\n--- [Step 2] 콘크리트 정보 입력 ---")
    fc = float(input("콘크리트 압축강도 (f'c, MPa): "))
    is_prestressed = _prompt_yes_no("프리스트레스 슬래브입니까?")
    residual_prestress = float(input("잔류 프리스트레스 (MPa): ")) if is_prestressed else 0.0
    assessment_age = int(_prompt_choice("강도 평가 재령 (일)", ['28', '90']))
    print(f"  선택 가능한 하중 반복횟수: {repetition_options}")
    load_repetitions = int(input("하중 반복횟수: "))
    return {"fc": fc, "is_prestressed": is_prestressed, "residual_prestress": residual_prestress,
            "assessment_age": assessment_age, "load_repetitions": load_repetitions}

def prompt_for_joint() -> str:
    print("\n--- [Step 3] 줄눈 형식 선택 ---")
    return _prompt_choice("줄눈 형식을 선택하세요", [m.value for m in JointType])

def prompt_for_racking() -> Dict[str, Any]:
    """사용자로부터 랙킹 하중 정보를 입력받습니다."""
    print("\n--- [Step 4a] 랙킹 하중 정보 입력 ---")
    baseplate_x = float(input("베이스플레이트 X (mm): "))
    baseplate_y = float(input("베이스플레이트 Y (mm): "))
    point_load = float(input("기둥 집중하중 (kN): "))
    is_back_to_back = _prompt_yes_no("배면(back-to-back) 랙입니까?")
    back_to_back_spacing = float(input("배면 랙 기둥 간격 (m): ")) if is_back_to_back else 0.0
    return {"baseplate_x": baseplate_x, "baseplate_y": baseplate_y, "point_load": point_load,
            "is_back_to_back": is_back_to_back, "back_to_back_spacing": back_to_back_spacing}

def prompt_for_wheel(frequency_factors: List[float]) -> Dict[str, Any]:
    """사용자로부터 차륜 하중 정보를 입력받습니다."""
    print("\n--- [Step 4b] 차륜 하중 정보 입력 ---")
    configuration = _prompt_choice("차륜 배치", [m.value for m in WheelConfiguration])
    wheel_spacing = 0.0
    if configuration != WheelConfiguration.SINGLE.value:
        wheel_spacing = float(input("차륜 간격 (mm): "))
    wheel_diameter = float(input("차륜 직경 (mm): "))
    tire_width = float(input("타이어 폭 (mm): "))
    tire_type = _prompt_choice("타이어 종류", [m.value for m in TireType])
    point_load = float(input("차륜 하중 (kN): "))
    print(f"  교통 빈도 계수: {frequency_factors}")
    frequency_factor = float(input("교통 빈도 계수: "))
    return {"configuration": configuration, "wheel_spacing": wheel_spacing, "wheel_diameter": wheel_diameter,
            "tire_width": tire_width, "tire_type": tire_type, "point_load": point_load,
            "frequency_factor": frequency_factor}

# --- [2. 내부용 헬퍼(Helper) 함수] ---

def _prompt_common_inputs(repetition_options: List[int]) -> tuple[GroundCondition, SlabConcrete, str]:
    """[내부용] 지반, 콘크리트, 줄눈 정보를 입력받아 객체를 생성하여 반환합니다."""
    ground = GroundCondition(**prompt_for_ground())
    concrete = SlabConcrete(**prompt_for_concrete(repetition_options))
    joint_type = prompt_for_joint()
    return ground, concrete, joint_type

# --- [3. 결과 출력(Display) 함수] ---

def display_wheel_contact(contact: WheelContact):
    """차륜 접지면 계산 결과를 출력합니다."""
    print("\n  [차륜 접지면]")
    print(f"  - 배치           : {contact.configuration.value}")
    if contact.configuration != WheelConfiguration.SINGLE:
        print(f"  - 단일 차륜      : {contact.single_length:.0f} x {contact.single_width:.0f} mm")
        if contact.is_interacting:
            print("  - ⚠️ 가까운 간격 - 두 차륜을 하나의 합성 접지면으로 검토")
        else:
            print("  - ℹ️ 넓은 간격 - 두 차륜을 독립 접지면으로 검토")
    print(f"  - 유효 접지면    : {contact.length:.0f} x {contact.width:.0f} mm")
    print(f"  - 총 접지 면적   : {contact.area:.4f} m²")

def display_design_result(output: DesignOutput, summary: DesignSummary):
    """설계 결과를 가독성 높게 출력합니다."""
    print("\n" + "="*50)
    print("      ✅ 슬래브 두께 설계 결과 (전체 재하 위치)")
    print("="*50)
    print(f"  - 설계 지반반력계수 (k) : {output.modulus:.0f} MN/m³")
    print(f"  - 허용응력             : {output.allowable_stress:.0f} kPa")
    for row, result in zip(summary.rows, output.results.values()):
        print(f"\n  [{row.label}] {'OK' if row.is_adequate else 'NG'}")
        print(f"  - 소요 두께   : {row.thickness:.0f} mm")
        print(f"  - 설계응력    : {row.stress:.0f} kPa")
        print(f"  - 응력비      : {row.stress_ratio:.1f} %")
        print(f"  - 등가반경 b  : {result.equivalent_radius:.1f} mm, 상대강성반경 l : {result.radius_of_stiffness:.1f} mm")
    print("\n  [설계 요약]")
    print(f"  - 권장 최소 두께 : {summary.recommended_thickness:.0f} mm")
    print(f"  - 지배 위치      : {summary.governing_position.value}")
    for warning in summary.warnings:
        print(f"  ❌ {warning}")
    print("\n  [설계 참고사항]")
    for note in summary.notes:
        print(f"  • {note}")
    print("="*50)

def display_error(error: Exception):
    print("\n" + "-"*40)
    print("      ❌ 오류 발생 (Error)")
    print(f"  오류 유형: {type(error).__name__}")
    print(f"  상세 내용: {error}")
    print("-"*40)

# --- [4. 메인 워크플로우(Workflow) 함수] ---

def _run_design(design_input: DesignInput):
    """[내부용] 엔진과 요약 서비스를 실행하고 결과를 출력합니다."""
    engine = DesignEngine()
    output = engine.compute_design(design_input)
    summary = DesignSummarizer().summarize(design_input, output)
    display_design_result(output, summary)

def run_racking_workflow(repetition_options: List[int]):
    print("\n>>> 랙킹 하중 설계(Racking Mode)를 시작합니다.")
    try:
        ground, concrete, joint_type = _prompt_common_inputs(repetition_options)
        loading: BaseLoading = RackingLoad(**prompt_for_racking())
        _run_design(DesignInput(ground=ground, concrete=concrete, loading=loading, joint_type=joint_type))
    except (GSDException, ValueError) as e:
        display_error(e)

def run_wheel_workflow(repetition_options: List[int], frequency_factors: List[float]):
    print("\n>>> 차륜 하중 설계(Wheel Mode)를 시작합니다.")
    try:
        ground, concrete, joint_type = _prompt_common_inputs(repetition_options)
        loading = WheelLoad(**prompt_for_wheel(frequency_factors))
        display_wheel_contact(loading.contact_patch())
        _run_design(DesignInput(ground=ground, concrete=concrete, loading=loading, joint_type=joint_type))
    except (GSDException, ValueError) as e:
        display_error(e)

# interface/batch_runner.py

import itertools
import pandas as pd
from tqdm.auto import tqdm
from typing import Dict, List, Any

from slabcore.ground.subgrade import GroundCondition
from slabcore.material.concrete import SlabConcrete
from slabcore.loading.base_loading import BaseLoading, LoadClass
from slabcore.loading.racking import RackingLoad
from slabcore.loading.wheel import WheelLoad
from slabcore.engine import DesignEngine, DesignInput, DesignOutput
from slabcore.exceptions import GSDException, LoadingError

from services.design_summary import stress_ratio

class BatchRunner:
    """
    설계 파라미터의 여러 조합에 대한 배치 실행을 관리하고 결과를 생성합니다.
    """
    def __init__(self, params: Dict[str, List[Any]]):
        self.params = params
        self.engine = DesignEngine()
        self.results = []

    def run(self):
        """배치 실행을 시작하고 모든 조합에 대한 계산을 수행합니다."""
        combinations = self._generate_combinations()

        for combo in tqdm(combinations, desc="Batch Processing", ncols=120):
            try:
                design_input = self._setup_case_from_combo(combo)
                output = self.engine.compute_design(design_input)
                self.results.append(self._build_row(combo, output))

            except GSDException as e:
                self.results.append({**combo, "status": "Error", "message": str(e)})
            except Exception as e:
                self.results.append({**combo, "status": "Critical Error", "message": str(e)})

    def _generate_combinations(self) -> List[Dict[str, Any]]:
        """itertools.product를 사용하여 모든 파라미터 조합 딕셔너리를 생성합니다."""
        keys = self.params.keys()
        values = self.params.values()
        return [dict(zip(keys, p)) for p in itertools.product(*values)]

    def _build_row(self, combo: Dict[str, Any], output: DesignOutput) -> Dict[str, Any]:
        """[출력] 조합 1개의 결과를 위치별 컬럼으로 펼친 한 행으로 만듭니다."""
        row = {
            **combo,
            "modulus": output.modulus,
            "allowable_stress": output.allowable_stress,
        }
        for position, result in output.results.items():
            key = position.value
            row[f"{key}_thickness"] = result.thickness
            row[f"{key}_stress"] = result.stress
            row[f"{key}_ratio"] = stress_ratio(result.stress, output.allowable_stress)
            row[f"{key}_ok"] = result.is_adequate

        row["governing"] = output.governing_position.value
        row["recommended_thickness"] = output.recommended_thickness
        if output.error is not None:
            row["status"], row["message"] = "Degraded", str(output.error)
        else:
            row["status"] = "OK" if output.is_adequate else "Inadequate"
            row["message"] = ""
        return row

    def _setup_case_from_combo(self, combo: Dict[str, Any]) -> DesignInput:
        """'load_class' 키를 기반으로 적절한 하중 객체와 설계 입력을 생성합니다."""
        subbase_thickness = combo.get('subbase_thickness', 0.0)
        scala_reading = combo.get('scala')
        ground = GroundCondition(
            cbr_value=combo.get('cbr', 0.0),
            assessment='scala' if scala_reading is not None else 'cbr',
            scala_reading=scala_reading,
            has_subbase=subbase_thickness > 0,
            subbase_thickness=subbase_thickness,
        )

        # 프리스트레스 입력값 없으면 0 으로 처리
        residual_prestress = combo.get('prestress', 0.0)
        concrete = SlabConcrete(
            fc=combo['fc'],
            assessment_age=combo.get('age', 28),
            load_repetitions=combo.get('repetitions', 8000),
            is_prestressed=residual_prestress > 0,
            residual_prestress=residual_prestress,
        )

        load_class = combo.get('load_class', LoadClass.RACKING.value)
        if load_class == LoadClass.RACKING.value:
            spacing = combo.get('back_to_back_spacing')
            loading: BaseLoading = RackingLoad(
                baseplate_x=combo['baseplate_x'],
                baseplate_y=combo['baseplate_y'],
                point_load=combo['point_load'],
                is_back_to_back=spacing is not None,
                back_to_back_spacing=spacing if spacing is not None else 0.0,
            )
        elif load_class == LoadClass.WHEEL.value:
            loading = WheelLoad(
                point_load=combo['point_load'],
                tire_type=combo.get('tire_type', 'pneumatic'),
                configuration=combo.get('configuration', 'single'),
                wheel_diameter=combo['wheel_diameter'],
                tire_width=combo['tire_width'],
                wheel_spacing=combo.get('wheel_spacing', 0.0),
                frequency_factor=combo.get('frequency_factor', 1.0),
            )
        else:
            raise LoadingError(f"지원하지 않는 하중 형식입니다: '{load_class}'")

        return DesignInput(ground=ground, concrete=concrete, loading=loading,
                           joint_type=combo.get('joint', 'dowel'))

    def save_to_csv(self, filename: str):
        """결과를 pandas DataFrame으로 변환하고 단위를 조정한 후 CSV 파일로 저장합니다."""
        if not self.results:
            print("결과가 없습니다. 저장할 내용이 없습니다.")
            return

        df = pd.DataFrame(self.results)

        # --- 출력의 단위 변환은 여기서 일괄 수행 ---
        # 응력은 kPa -> MPa 로 출력
        mpa_cols = ['allowable_stress', 'interior_stress', 'edge_stress', 'corner_stress']
        for col in df.columns:
            if col in mpa_cols:
                df[col] = df[col] / 1e3

        df.to_csv(filename, index=False, encoding='utf-8-sig')

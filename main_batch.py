# main_batch.py

import numpy as np
from interface.batch_runner import BatchRunner
import time


# =================================
# 사용자 배치 실행 시나리오 정의
# =================================

# --- 랙킹 하중: 지반/하중 변화 ---
racking_design = {
    "load_class": ["racking"],
    "cbr": [2, 5, 10, 20, 40],
    "subbase_thickness": [0, 150, 300],  # 0 이면 보조기층 없음
    "fc": [30, 35, 40],
    "age": [28],
    "repetitions": [8000],
    "joint": ["dowel", "non_dowel"],
    "baseplate_x": [140], "baseplate_y": [140],
    "point_load": np.arange(20, 121, 10),   # kN
}

# --- 랙킹 하중: 배면 랙 간격 영향 ---
racking_back_to_back = {
    "load_class": ["racking"],
    "cbr": [10],
    "fc": [35],
    "joint": ["dowel"],
    "baseplate_x": [100, 140, 180], "baseplate_y": [100, 140, 180],
    "point_load": [40, 60],
    # None 이면 단독 랙, 값이 있으면 배면 랙 기둥 간격 (m)
    "back_to_back_spacing": [None, 0.3, 0.6, 0.8],
}

# --- 차륜 하중: 타이어 종류 및 배치 ---
wheel_design = {
    "load_class": ["wheel"],
    "scala": [5, 20, 50],   # Scala 관입량 (mm/blow)
    "subbase_thickness": [150],
    "fc": [35, 40],
    "repetitions": [30000, 100000],
    "joint": ["dowel", "tied", "non_dowel"],
    "tire_type": ["pneumatic", "solid", "steel"],
    "configuration": ["single", "dual", "tandem"],
    "wheel_diameter": [250, 400],
    "tire_width": [100, 150],
    "wheel_spacing": np.linspace(50, 300, 6),  # mm
    "point_load": [20, 40],
    "frequency_factor": [1.0, 1.2],
}

# --- 프리스트레스 슬래브 ---
prestressed_design = {
    "load_class": ["racking"],
    "cbr": [5, 10],
    "fc": [35],
    "age": [28, 90],
    "prestress": [0.0, 1.0, 2.0],  # 잔류 프리스트레스 (MPa), 0 이면 일반 슬래브
    "baseplate_x": [140], "baseplate_y": [140],
    "point_load": [40, 80],
}


def main():

    """
    Ground Slab Designer (Batch Mode)의 메인 실행 함수.
    치수 단위 : mm (배면 랙 간격만 m), 하중 단위 : kN, 재료강도 : MPa
    결과 파일의 응력은 MPa 로 출력됩니다.
    """
    print("="*50)
    print("    Ground Slab Designer - Batch Mode")
    print("="*50)

    # 실행할 배치 입력
    param = racking_design ; output_filename = 'batch_racking_result'
    # param = racking_back_to_back ; output_filename = 'batch_racking_b2b_result'
    # param = wheel_design ; output_filename = 'batch_wheel_result'
    # param = prestressed_design ; output_filename = 'batch_prestressed_result'

    outfile_name = str(output_filename + '.csv')

    start_time = time.time()

    runner = BatchRunner(param)
    runner.run()
    runner.save_to_csv(outfile_name)

    print(f"'{outfile_name}' 의 결과 파일로 저장됩니다.")
    end_time = time.time()
    print(f"총 실행 시간: {end_time - start_time:.2f} 초")

if __name__ == "__main__":
    main()

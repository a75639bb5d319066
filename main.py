# main.py

import sys
from interface import cli

# ==========================================================
# 사용자 설정 (User Configuration)
# ==========================================================
# 이 부분만 수정하면 프로그램 전체에 적용됩니다.
LOAD_REPETITION_OPTIONS = [8000, 10000, 30000, 50000, 100000, 200000, 300000, 400000]
TRAFFIC_FREQUENCY_FACTORS = [1.0, 1.1, 1.2, 1.3]   # 가벼운 ~ 매우 많은 통행

# 지원 범위
MIN_FREQUENCY_FACTOR = 1.0
MAX_FREQUENCY_FACTOR = 2.0

def validate_configuration():
    """
    사용자 설정값이 프로그램에서 지원하는 범위 내에 있는지 확인합니다.
    """
    invalid_repetitions = [n for n in LOAD_REPETITION_OPTIONS if n <= 0]
    invalid_factors = [f for f in TRAFFIC_FREQUENCY_FACTORS if not (MIN_FREQUENCY_FACTOR <= f <= MAX_FREQUENCY_FACTOR)]

    if invalid_repetitions or invalid_factors:
        print("="*50)
        print("❌ 설정 오류 (Configuration Error)")
        if invalid_repetitions:
            print(f"하중 반복횟수는 양수여야 합니다: {invalid_repetitions}")
        if invalid_factors:
            print(f"교통 빈도 계수는 {MIN_FREQUENCY_FACTOR} ~ {MAX_FREQUENCY_FACTOR} 범위여야 합니다: {invalid_factors}")
        print("main.py 상단의 사용자 설정을 수정해주세요.")
        print("="*50)
        sys.exit(1) # 프로그램 비정상 종료


def get_user_choice():
    """사용자로부터 실행할 모드를 입력받습니다."""
    while True:
        print("\n어떤 작업을 수행하시겠습니까?")
        print("  1: 랙킹 하중 슬래브 두께 설계")
        print("  2: 차륜 하중 슬래브 두께 설계")
        print("  Q: 종료 (Quit)")
        choice = input("선택: ").strip().upper()
        if choice in ['1', '2', 'Q']:
            return choice
        else:
            print("잘못된 입력입니다. 1, 2, Q 중에서 선택해주세요.")

def main():
    """
    Ground Slab Designer 프로그램의 메인 실행 함수.
    """
    print("="*50)
    print("      Concrete Ground Slab Point Load Calculator")
    print("="*50)
    print("이 프로그램은 TM38/CCANZ 방법에 따라 집중하중을 받는 지반 슬래브의 두께를 산정합니다.")
    print("치수 단위는 'mm', 재료강도는 'MPa', 하중은 'kN' 입니다.")
    print("배면 랙 간격만 'm' 단위로 입력합니다.")

    # --- 프로그램 시작 시 설정값부터 검증 ---
    validate_configuration()

    while True:
        choice = get_user_choice()

        if choice == '1':
            cli.run_racking_workflow(LOAD_REPETITION_OPTIONS)
        elif choice == '2':
            cli.run_wheel_workflow(LOAD_REPETITION_OPTIONS, TRAFFIC_FREQUENCY_FACTORS)
        elif choice == 'Q':
            break

    print("\n프로그램을 종료합니다.")

if __name__ == "__main__":
    main()

# slabcore/constants.py

"""
TM38/CCANZ 지반 슬래브 설계에 사용되는 상수 모음.
단위: 길이 mm, 하중 kN, 응력 kPa (재료강도 MPa), 지반반력계수 MN/m³
"""

# ==============================================================================
# 지반 (TM38 Figure 1.2, 1.3, 3.1)
# ==============================================================================
# (CBR 상한 %, k MN/m³) : cbr <= 상한 이면 해당 k. 마지막 구간 이후는 CBR_MODULUS_MAX
CBR_MODULUS_TABLE = ((2, 15), (5, 37), (10, 54), (20, 68), (40, 82))
CBR_MODULUS_MAX = 109

# (Scala 하한 mm/blow, CBR %) : reading >= 하한 이면 해당 CBR
SCALA_CBR_TABLE = ((100, 2), (50, 3), (20, 5), (10, 8), (5, 12), (2, 20), (1, 30))
SCALA_CBR_MIN_READING = 50

SUBBASE_MIN_THICKNESS = 100.0       # mm, 이보다 얇으면 보정하지 않음
SUBBASE_REFERENCE_THICKNESS = 300.0 # mm
SUBBASE_ENHANCEMENT_RATE = 0.5
SUBBASE_MAX_ENHANCEMENT = 2.0       # k 증가 상한 (2배)

# ==============================================================================
# 콘크리트 (TM38 Eq. 3.1)
# ==============================================================================
RUPTURE_COEFFICIENT = 0.456
RUPTURE_EXPONENT = 0.66
LONG_TERM_AGE = 90                  # days
LONG_TERM_AGE_FACTOR = 1.1          # k1 (90일 강도)

# (반복횟수 하한, k2) : 큰 값부터 검사
LOAD_REPETITION_FACTORS = (
    (400000, 0.77), (300000, 0.78), (200000, 0.81), (100000, 0.84),
    (50000, 0.89), (30000, 0.90), (10000, 0.96),
)

ELASTIC_MODULUS_COEFFICIENT = 5000.0  # E = 5000*sqrt(f'c) MPa
POISSON_RATIO = 0.15
MPA_TO_KPA = 1000.0

# ==============================================================================
# 기하 (TM38 Eq. 3.4)
# ==============================================================================
SMALL_AREA_LIMIT_RATIO = 1.72       # r < 1.72h 이면 Westergaard 보정
SMALL_AREA_COEFFICIENT = 1.6
SMALL_AREA_OFFSET = 0.675
COMBINED_LOAD_SPACING_RATIO = 2.0   # 배면(back-to-back) 간격 < 2h 이면 하중 합산

# 차륜 접지면 (타이어 종류별 계수)
PNEUMATIC_LENGTH_COEFFICIENT = 0.6
PNEUMATIC_WIDTH_RATIO = 0.8
SOLID_LENGTH_COEFFICIENT = 0.4
SOLID_WIDTH_RATIO = 0.7
STEEL_LENGTH_RATIO = 0.9
STEEL_MIN_WIDTH = 10.0
MIN_CONTACT_DIMENSION = 50.0        # mm, 접지 길이/폭 최소값
WHEEL_INTERACTION_RATIO = 2.0       # 복륜/탠덤 간격 < 2 x 접지치수 이면 합성

# ==============================================================================
# 응력 및 두께 탐색 (TM38 Eq. 3.2, 3.5, 3.6)
# ==============================================================================
LOAD_FACTOR = 1.5
EDGE_LOAD_TRANSFER_FACTOR = 0.85
CORNER_LOAD_TRANSFER_FACTOR = 0.70
EDGE_REFERENCE_RADIUS = 25.4        # mm (1 inch)

START_THICKNESS = 125.0             # mm, 산업용 바닥 최소 두께
THICKNESS_INCREMENT = 25.0
MAX_ITERATIONS = 20
DEGRADED_THICKNESS = 150.0          # 계산 실패 시 보고하는 기본 두께

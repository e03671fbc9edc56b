"""
PLONK 회로 표현 (Circuit Representation)
==========================================

PLONK 산술화(arithmetization)의 핵심: 계산을 게이트와 배선으로 표현.

**PLONK 게이트 구조**:
  각 게이트는 3개의 배선(wire) a, b, c와 5개의 셀렉터(selector)로 구성:

    q_L·a + q_R·b + q_O·c + q_M·(a·b) + q_C = 0

**게이트 유형별 셀렉터 설정**:
  | 유형 | q_L | q_R | q_O | q_M | q_C | 의미      |
  |------|-----|-----|-----|-----|-----|-----------|
  | 덧셈 |  1  |  1  | -1  |  0  |  0  | a + b = c |
  | 곱셈 |  0  |  0  | -1  |  1  |  0  | a·b = c   |

**배선 id 규칙**:
  게이트 수가 n일 때 3n개의 배선 id는 클래스별로 배치된다.
    a(왼쪽)의 i번째 = i,  b(오른쪽)의 i번째 = n+i,  c(출력)의 i번째 = 2n+i
  id의 의미가 최종 게이트 수에 따라 정해지므로, 배선 연결은
  모든 게이트를 추가한 뒤에 해야 한다.

**배선(Copy) 제약**:
  connect_wires(u, v)로 두 배선이 같은 값을 가져야 함을 선언한다.
  이는 WirePermutation의 순환으로 인코딩된다.

사용 예시:
    >>> circuit = Circuit()
    >>> circuit.add_gate()     # 게이트 0: a + b = c
    >>> circuit.mult_gate()    # 게이트 1: a · b = c
    >>> circuit.connect_wires(circuit.wire(0, 2), circuit.wire(1, 0))
"""

import copy
import logging

from zkarith.plonk.field import FR
from zkarith.plonk.permutation import WirePermutation


logger = logging.getLogger(__name__)

# 배선 슬롯 (클래스)
LEFT, RIGHT, OUTPUT = 0, 1, 2


class ConstraintTable:
    """게이트별 셀렉터 계수 표.

    다섯 개의 열 q_l, q_r, q_o, q_m, q_c는 항상 같은 길이(= 게이트 수)를
    유지한다. 행은 append()로만 추가된다.
    """

    def __init__(self):
        self.q_l = []
        self.q_r = []
        self.q_o = []
        self.q_m = []
        self.q_c = []

    def __len__(self):
        return len(self.q_l)

    def append(self, q_l, q_r, q_o, q_m, q_c):
        self.q_l.append(FR(q_l))
        self.q_r.append(FR(q_r))
        self.q_o.append(FR(q_o))
        self.q_m.append(FR(q_m))
        self.q_c.append(FR(q_c))

    def row(self, i):
        """i번째 게이트의 (q_L, q_R, q_O, q_M, q_C)."""
        return (self.q_l[i], self.q_r[i], self.q_o[i], self.q_m[i], self.q_c[i])

    def columns(self):
        """(q_L, q_R, q_O, q_M, q_C) 순서의 열 리스트."""
        return self.q_l, self.q_r, self.q_o, self.q_m, self.q_c


class WitnessTrace:
    """배선 값 할당: 게이트마다 왼쪽/오른쪽/출력 배선 값 하나씩.

    이 모듈은 witness를 만들지 않는다. 회로가 만족되는지 검사할 때만 쓴다.
    """

    def __init__(self, a, b, c):
        self.a = [v if isinstance(v, FR) else FR(v) for v in a]
        self.b = [v if isinstance(v, FR) else FR(v) for v in b]
        self.c = [v if isinstance(v, FR) else FR(v) for v in c]

    def __len__(self):
        return len(self.a)

    def values(self):
        """배선 id 순서(a 전체, b 전체, c 전체)의 값 리스트."""
        return self.a + self.b + self.c


class Circuit:
    """PLONK 산술 회로.

    속성:
        constraints: ConstraintTable (게이트별 셀렉터)
        wire_count: 배선 수 (항상 3 × constraint_count)
        constraint_count: 게이트 수
        permutation: WirePermutation (배선 복사 제약)
        powers_omega: 도메인 점 [ω⁰, ω¹, ...] (전처리 후 채워짐)
        extended_coset: [H][K1·H][K2·H] (전처리 후 채워짐)
    """

    def __init__(self):
        self.constraints = ConstraintTable()
        self.permutation = WirePermutation()
        self.wire_count = 0
        self.constraint_count = 0
        self.powers_omega = []
        self.extended_coset = []

    def _append_row(self, q_l, q_r, q_o, q_m, q_c):
        self.constraints.append(q_l, q_r, q_o, q_m, q_c)
        # 새 배선 3개는 항등 순열로 추가
        self.permutation.extend(3)
        self.wire_count += 3
        self.constraint_count += 1
        return self.constraint_count - 1

    def add_gate(self):
        """덧셈 게이트 추가: a + b = c.

        셀렉터: q_L=1, q_R=1, q_O=-1, q_M=0, q_C=0
        → a + b - c = 0

        Returns:
            int: 추가된 게이트의 인덱스
        """
        index = self._append_row(1, 1, -1, 0, 0)
        logger.debug("addition gate %d appended", index)
        return index

    def mult_gate(self):
        """곱셈 게이트 추가: a · b = c.

        셀렉터: q_L=0, q_R=0, q_O=-1, q_M=1, q_C=0
        → a·b - c = 0

        Returns:
            int: 추가된 게이트의 인덱스
        """
        index = self._append_row(0, 0, -1, 1, 0)
        logger.debug("multiplication gate %d appended", index)
        return index

    def wire(self, gate, slot):
        """게이트 gate의 slot번째 배선 id (0=a, 1=b, 2=c)."""
        if not 0 <= gate < self.constraint_count:
            raise ValueError(f"존재하지 않는 게이트입니다: {gate}")
        if slot not in (LEFT, RIGHT, OUTPUT):
            raise ValueError(f"배선 슬롯은 0, 1, 2 중 하나여야 합니다: {slot}")
        return slot * self.constraint_count + gate

    def connect_wires(self, u, v):
        """배선 복사 제약 추가: 배선 u == 배선 v.

        게이트를 모두 추가한 뒤에 호출해야 한다.

        Raises:
            IndexError: u 또는 v가 현재 배선 수 이상일 때
        """
        self.permutation.connect(u, v)

    def check_gate(self, i, a, b, c):
        """i번째 게이트 제약이 만족되는지 확인한다.

        q_L·a + q_R·b + q_O·c + q_M·(a·b) + q_C == 0 ?
        """
        q_l, q_r, q_o, q_m, q_c = self.constraints.row(i)
        a, b, c = FR(a), FR(b), FR(c)
        return q_l * a + q_r * b + q_o * c + q_m * (a * b) + q_c == FR(0)

    def check_witness(self, trace):
        """witness가 모든 게이트 제약과 배선 복사 제약을 만족하는지 확인한다.

        Args:
            trace: WitnessTrace

        Returns:
            bool: 만족 여부

        Raises:
            ValueError: trace 길이가 게이트 수와 다를 때
        """
        if not (len(trace.a) == len(trace.b) == len(trace.c) == self.constraint_count):
            raise ValueError(
                f"witness 길이가 게이트 수({self.constraint_count})와 다릅니다"
            )
        for i in range(self.constraint_count):
            if not self.check_gate(i, trace.a[i], trace.b[i], trace.c[i]):
                logger.debug("gate %d not satisfied", i)
                return False

        # 같은 순환의 배선은 같은 값을 가져야 한다
        values = trace.values()
        for wire, target in enumerate(self.permutation):
            if values[wire] != values[target]:
                logger.debug("copy constraint %d -> %d violated", wire, target)
                return False
        return True

    def copy(self):
        """독립적인 깊은 복사본 (스냅샷)."""
        return copy.deepcopy(self)

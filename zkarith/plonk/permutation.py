"""
PLONK 배선 순열 (Wire Permutation)
====================================

배선 복사 제약(copy constraint)을 순열(permutation)로 인코딩하는 모듈.

**배경: 왜 순열이 필요한가?**
  PLONK 게이트는 각각 독립적으로 q_L·a + q_R·b + q_O·c + q_M·a·b + q_C = 0을
  만족하지만, 서로 다른 게이트의 배선이 "같은 값"을 갖도록 강제할 방법이 없다.
  예: 게이트 0의 출력(c₀)이 게이트 1의 입력(a₁)과 같아야 할 때.

  해결: 배선 id 위에 순열 σ를 정의한다. 같은 값을 가져야 하는 배선들은
  σ의 한 순환(cycle)에 놓이고, 이후 Grand Product 논증이
  "w_{σ(i)} = wᵢ for all i"를 검사한다.

**순환 접합 (rotate-and-splice)**:
  connect(u, v)는 v가 속한 순환을 v에서 시작하도록 회전한 뒤 u 바로 뒤에
  끼워 넣는다.

    u → u' → ... → u            v → v' → ... → p → v
                      ⇩
    u → v → v' → ... → p → u' → ... → u

  v가 단일 원소 순환이면 σ(u) = v, σ(v) = (u의 이전 후속자)가 된다.
  순환 안의 순회 순서가 곧 σ의 값이므로 union-find처럼 대표 원소만
  관리해서는 안 된다.

사용 예시:
    >>> perm = WirePermutation()
    >>> perm.extend(6)
    >>> perm.connect(2, 3)
    >>> perm.cycle(2)  # [2, 3]
"""

import logging


logger = logging.getLogger(__name__)


class WirePermutation:
    """배선 id → 배선 id 순열.

    mapping[w]는 w의 순환에서 다음 배선이다. 생성 시에는 항등 순열이며,
    extend()로 정의역이 늘어나고 connect()로만 변경된다.
    """

    def __init__(self, size=0):
        self.mapping = list(range(size))

    def __len__(self):
        return len(self.mapping)

    def __getitem__(self, wire):
        return self.mapping[wire]

    def __iter__(self):
        return iter(self.mapping)

    def extend(self, count):
        """count개의 새 배선을 자기 자신에게 매핑하여 추가한다."""
        start = len(self.mapping)
        self.mapping.extend(range(start, start + count))

    def _check_wire(self, wire):
        if not 0 <= wire < len(self.mapping):
            raise IndexError(
                f"회로의 배선 수가 부족합니다: 최대 {len(self.mapping)}, 받은 값 {wire}"
            )

    def connect(self, u, v):
        """u가 속한 순환과 v가 속한 순환을 하나로 합친다.

        Args:
            u, v: 배선 id (0 ≤ id < 배선 수)

        Raises:
            IndexError: 존재하지 않는 배선 id일 때
        """
        if not (0 <= u < len(self.mapping) and 0 <= v < len(self.mapping)):
            raise IndexError(
                f"회로의 배선 수가 부족합니다: 최대 {len(self.mapping)}, "
                f"받은 값 {u}, {v}"
            )

        v_cycle = self.cycle(v)
        if u in v_cycle:
            # 이미 같은 순환 (u == v 포함)
            return

        old_next = self.mapping[u]
        last = v_cycle[-1]
        self.mapping[u] = v
        self.mapping[last] = old_next
        logger.debug("wires %d and %d connected", u, v)

    def cycle(self, wire):
        """wire에서 출발해 σ를 따라가며 만나는 배선 id들을 순서대로 반환한다."""
        self._check_wire(wire)
        result = [wire]
        current = self.mapping[wire]
        while current != wire:
            result.append(current)
            current = self.mapping[current]
        return result

    def cycles(self):
        """서로소 순환들의 리스트 (각 순환은 가장 작은 id에서 시작)."""
        seen = [False] * len(self.mapping)
        result = []
        for wire in range(len(self.mapping)):
            if seen[wire]:
                continue
            cyc = self.cycle(wire)
            for w in cyc:
                seen[w] = True
            result.append(cyc)
        return result

    def is_bijection(self):
        """모든 배선 id가 정확히 한 번씩 σ의 값으로 나타나는지 확인한다."""
        return sorted(self.mapping) == list(range(len(self.mapping)))

    def copy(self):
        clone = WirePermutation()
        clone.mapping = list(self.mapping)
        return clone

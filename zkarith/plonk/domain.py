"""
평가 도메인 (Roots-of-Unity Domain)
=====================================

게이트 수로부터 평가 도메인 H와 세 개의 배선 클래스용 코셋을 만든다.

**도메인 크기**:
  n = (게이트 수 이상의 가장 작은 2의 거듭제곱).
  ω는 고정된 2^32차 원시 단위근을 2^(32 - log₂n)번 제곱하여 얻는다.
  H = {ω⁰, ω¹, ..., ω^{n-1}} (항등원 1 포함).

**확장 코셋 (extended coset)**:
  3n개의 배선 위치를 3개의 서로소 코셋으로 분리:
  - a 배선: H
  - b 배선: K1·H
  - c 배선: K2·H
  K1, K2는 어떤 코셋도 다른 코셋이나 H와 겹치지 않도록 고른 상수이다.
  확장 코셋은 [H][K1·H][K2·H] 순서로 저장한다.

**자기 검사 (self-check)**:
  ω의 위수가 정확히 n인지, 세 코셋이 서로소인지를 생성 시 확인한다.
  실패는 도메인 구성 오류이며 복구 대상이 아니다 (ValueError).
"""

from zkarith.plonk.field import FR, TWO_ADICITY, get_root_of_unity, inverse


# 코셋 식별자: H, K1·H, K2·H가 서로소가 되도록 선택한 비잉여(non-residue) 상수
K1 = FR(7)
K2 = FR(13)


def next_power_of_2(n):
    """n 이상의 가장 작은 2의 거듭제곱을 반환한다.

    예시:
        >>> next_power_of_2(3)  # 4
        >>> next_power_of_2(4)  # 4
    """
    if n <= 1:
        return 1
    p = 1
    while p < n:
        p <<= 1
    return p


class Domain:
    """평가 도메인과 확장 코셋.

    속성:
        size: 도메인 크기 n (2의 거듭제곱)
        omega: n차 원시 단위근
        points: [ω⁰, ω¹, ..., ω^{n-1}]
        extended_coset: [H][K1·H][K2·H] (길이 3n)
    """

    def __init__(self, size):
        if size < 1 or size > (1 << TWO_ADICITY):
            raise ValueError(f"지원하지 않는 도메인 크기입니다: {size}")
        self.size = size
        self.omega = get_root_of_unity(size)

        self.points = [FR(1)]
        for _ in range(1, size):
            self.points.append(self.points[-1] * self.omega)

        self.extended_coset = (
            list(self.points)
            + [K1 * h for h in self.points]
            + [K2 * h for h in self.points]
        )
        self.check()

    @classmethod
    def for_constraints(cls, constraint_count):
        """constraint_count개의 게이트를 담는 도메인."""
        if constraint_count < 1:
            raise ValueError("게이트가 없는 회로는 도메인을 만들 수 없습니다")
        return cls(next_power_of_2(constraint_count))

    def check(self):
        """ω의 위수와 코셋 서로소 조건을 확인한다.

        Raises:
            ValueError: 검사 실패 시
        """
        n = self.size
        if self.omega ** n != FR(1):
            raise ValueError(f"ω^{n} != 1: 단위근 유도가 잘못되었습니다")
        if n > 1 and self.omega ** (n // 2) == FR(1):
            raise ValueError(f"ω의 위수가 {n}보다 작습니다")

        # k·H == H  ⟺  k^n == 1
        for name, k in (("K1", K1), ("K2", K2), ("K2/K1", K2 * inverse(K1))):
            if k ** n == FR(1):
                raise ValueError(f"{name}·H가 H와 겹칩니다 (n={n})")

    def scale(self, wire_class):
        """배선 클래스(0, 1, 2)의 코셋 배율 1, K1, K2."""
        return (FR(1), K1, K2)[wire_class]

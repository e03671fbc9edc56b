"""
Structured Reference String (SRS)
==================================

KZG 다항식 커밋먼트에 필요한 공개 파라미터를 생성한다.

  SRS = {
      G1 powers: [G1, τ·G1, τ²·G1, ..., τ^d·G1]
      G2 powers: [G2, τ·G2]
  }

비밀 값 τ("toxic waste")는 생성 후 폐기되어야 한다. 여기서는 seed가
주어지면 결정론적으로, 아니면 secrets 모듈로 τ를 만든다.
SRS는 회로에 독립적이며 최대 차수 d 이하의 모든 다항식에 재사용된다.

사용 예시:
    >>> srs = SRS.generate(max_degree=16, seed=42)
    >>> len(srs.g1_powers)  # 17
"""

import hashlib
import secrets

from zkarith.plonk.field import FR, G1, G2, ec_mul, CURVE_ORDER


# 전처리가 기본으로 사용하는 SRS 최대 차수
MAX_DEGREE = 128


class SRS:
    """KZG 커밋먼트용 공개 파라미터.

    속성:
        g1_powers: [G1, τ·G1, τ²·G1, ..., τ^d·G1]
        g2_powers: [G2, τ·G2]
        max_degree: 지원하는 최대 다항식 차수 d
    """

    def __init__(self, g1_powers, g2_powers, max_degree):
        self.g1_powers = g1_powers
        self.g2_powers = g2_powers
        self.max_degree = max_degree

    @classmethod
    def generate(cls, max_degree=MAX_DEGREE, seed=None):
        """SRS를 생성한다.

        Args:
            max_degree: 지원할 최대 다항식 차수 (0 이상)
            seed: 결정론적 생성을 위한 시드 (테스트용)

        Raises:
            ValueError: max_degree가 음수일 때
        """
        if max_degree < 0:
            raise ValueError(f"max_degree는 0 이상이어야 합니다: {max_degree}")

        if seed is not None:
            h = hashlib.sha256(str(seed).encode()).digest()
            tau_int = int.from_bytes(h, "big") % (CURVE_ORDER - 1) + 1
        else:
            tau_int = secrets.randbelow(CURVE_ORDER - 1) + 1
        tau = FR(tau_int)

        g1_powers = []
        tau_power = FR(1)
        for _ in range(max_degree + 1):
            g1_powers.append(ec_mul(G1, tau_power))
            tau_power = tau_power * tau

        g2_powers = [G2, ec_mul(G2, tau)]

        return cls(g1_powers, g2_powers, max_degree)

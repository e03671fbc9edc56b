"""
PLONK 기반 모듈: 유한체(Finite Field) 및 타원곡선 연산
========================================================

산술화(arithmetization)와 전처리 전체에서 사용되는 기본 대수적 도구.

**유한체 FR**:
  BLS12-381 타원곡선의 스칼라 필드 (scalar field).
  - 위수(order) r ≈ 2^255, 소수체(prime field)
  - r - 1 = 2^32 × t (t는 홀수) → 최대 2^32차 단위근을 지원
  - 곱셈군의 생성자(generator)는 7

**단위근 (Roots of Unity)**:
  ROOT_OF_UNITY는 위수가 정확히 2^32인 원시 단위근이다.
  도메인 크기 n = 2^k에 필요한 ω는 이 값을 2^(32-k)번 제곱하여 얻는다.

**타원곡선 연산**:
  KZG 커밋먼트용 G1, G2 그룹 연산 (py_ecc.bls12_381).

사용 예시:
    >>> from zkarith.plonk.field import FR, inverse
    >>> a = FR(3)
    >>> a * inverse(a) == FR(1)   # True
"""

from py_ecc.fields import bls12_381_FQ as FQ
from py_ecc import bls12_381


# ─────────────────────────────────────────────────────────────────────
# 유한체(Finite Field) FR
# ─────────────────────────────────────────────────────────────────────

class FR(FQ):
    """BLS12-381 스칼라 필드 위의 유한체 원소.

    py_ecc의 FQ 클래스를 상속하여 +, -, *, ** 등의 필드 연산을 제공한다.
    나눗셈 대신 inverse()를 사용할 것: py_ecc는 0의 역원을 0으로 돌려준다.

    예시:
        >>> x = FR(3)
        >>> x * x          # FR(9)
        >>> -FR(1)         # r - 1
    """
    field_modulus = bls12_381.curve_order


# 곡선 위수 (필드 크기)
CURVE_ORDER = bls12_381.curve_order

# r - 1 = 2^TWO_ADICITY × 홀수
TWO_ADICITY = 32

# FR* 의 생성자
MULTIPLICATIVE_GENERATOR = FR(7)

# 위수 2^32의 원시 단위근: g^((r-1) / 2^32)
ROOT_OF_UNITY = MULTIPLICATIVE_GENERATOR ** ((CURVE_ORDER - 1) >> TWO_ADICITY)


def inverse(x):
    """곱셈 역원 x⁻¹ 을 반환한다.

    Raises:
        ZeroDivisionError: x == 0 일 때 (도메인 구성 오류를 의미)
    """
    if not isinstance(x, FR):
        x = FR(x)
    if x == FR(0):
        raise ZeroDivisionError("0의 역원은 존재하지 않습니다")
    return FR(1) / x


# ─────────────────────────────────────────────────────────────────────
# 타원곡선 상수 및 연산
# ─────────────────────────────────────────────────────────────────────

G1 = bls12_381.G1
G2 = bls12_381.G2

# G1의 항등원 (무한원점)
Z1 = None


def ec_mul(point, scalar):
    """타원곡선 스칼라 곱셈: scalar · point."""
    if isinstance(scalar, FR):
        scalar = int(scalar)
    return bls12_381.multiply(point, scalar % CURVE_ORDER)


def ec_add(p1, p2):
    """타원곡선 점 덧셈: p1 + p2."""
    return bls12_381.add(p1, p2)


# ─────────────────────────────────────────────────────────────────────
# 단위근 (Roots of Unity)
# ─────────────────────────────────────────────────────────────────────

def get_root_of_unity(n):
    """n차 원시 단위근 ω를 반환한다.

    고정된 2^32차 원시 단위근 g에서 ω = g^(2^(32 - log₂n))으로 유도한다.
    그러면 ω^n = g^(2^32) = 1 이고, ω의 위수는 정확히 n이다.

    Args:
        n: 단위근의 차수 (2의 거듭제곱, ≤ 2^32)

    Returns:
        FR: n차 원시 단위근

    Raises:
        ValueError: n이 2의 거듭제곱이 아니거나 2^32을 초과할 때

    예시:
        >>> omega = get_root_of_unity(4)
        >>> omega ** 4 == FR(1)  # True
        >>> omega ** 2 != FR(1)  # True
    """
    if n < 1 or (n & (n - 1)) != 0:
        raise ValueError(f"n은 2의 거듭제곱이어야 합니다: {n}")
    if n > (1 << TWO_ADICITY):
        raise ValueError(f"n은 2^{TWO_ADICITY} 이하여야 합니다: {n}")

    log_n = n.bit_length() - 1
    return ROOT_OF_UNITY ** (1 << (TWO_ADICITY - log_n))


def get_roots_of_unity(n):
    """도메인 H = [ω^0, ω^1, ..., ω^(n-1)] 을 반환한다."""
    omega = get_root_of_unity(n)
    roots = []
    current = FR(1)
    for _ in range(n):
        roots.append(current)
        current = current * omega
    return roots

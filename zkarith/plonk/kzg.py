"""
KZG 다항식 커밋먼트
====================

다항식 p(x)의 커밋먼트 C = p(τ)·G1 을 SRS의 G1 거듭제곱으로 계산한다.

  C = Σᵢ cᵢ · [τⁱ]₁

τ를 모른 채로 p(τ)·G1을 얻는 것이 핵심이다. 전처리는 셀렉터 다항식과
순열 다항식을 커밋하여 검증자(Verifier)가 쓸 공개 입력을 만든다.
열기 증명(opening)과 검증은 증명 단계의 몫이다.
"""

from zkarith.plonk.field import FR, Z1, ec_mul, ec_add


def commit(poly, srs):
    """다항식을 KZG 커밋한다.

    Args:
        poly: 커밋할 다항식 (Polynomial)
        srs: SRS

    Returns:
        G1 점 (영 다항식이면 무한원점 None)

    Raises:
        ValueError: 다항식 차수가 SRS 최대 차수를 초과할 때

    예시:
        >>> p = Polynomial([FR(1), FR(2), FR(3)])  # 1 + 2x + 3x²
        >>> C = commit(p, srs)  # (1 + 2τ + 3τ²)·G1
    """
    if poly.degree > srs.max_degree:
        raise ValueError(
            f"다항식 차수 {poly.degree}가 SRS 최대 차수 {srs.max_degree}를 초과합니다"
        )

    result = Z1
    for i, coeff in enumerate(poly.coeffs):
        if coeff == FR(0):
            continue
        result = ec_add(result, ec_mul(srs.g1_powers[i], coeff))
    return result

"""
셀렉터 / 순열 다항식 구성
==========================

회로의 셀렉터 표와 배선 순열을 도메인 위의 다항식으로 인코딩한다.

**셀렉터 다항식**:
  각 열 q ∈ {q_L, q_R, q_O, q_M, q_C}에 대해 점 쌍 (ωⁱ, qᵢ)를 보간한다.
  도메인이 게이트 수보다 크면 남는 행은 0으로 채운다 (빈 게이트: 제약 자동 만족).

**σ* (회전된 코셋 값)**:
  배선 w와 그 순열 대상 t = σ(w)에 대해
    k = w // 게이트 수            (w 자신의 클래스)
    σ*(w) = scale_k · ω^(t mod 게이트 수),   scale = (1, K1, K2)
  배율은 대상이 아니라 배선 w 자신의 클래스를 따른다.

**순열 다항식**:
  클래스 k에 대해  S_k(x) = Σᵢ Lᵢ(x) · σ*(k·게이트 수 + i)
  계약: S_k(ωⁱ) == σ*(k·게이트 수 + i)  (모든 i < 게이트 수)
"""

import logging

from zkarith.plonk.field import FR
from zkarith.plonk.polynomial import Polynomial, interpolate, lagrange_basis


logger = logging.getLogger(__name__)

# 이 크기를 넘는 도메인은 Lagrange 보간 대신 IFFT로 셀렉터/순열 다항식을 만든다
LAGRANGE_LIMIT = 64


def selector_polynomials(constraints, domain, use_fft=None):
    """다섯 셀렉터 다항식 (q_L, q_R, q_O, q_M, q_C)를 만든다.

    기본은 점 쌍 (ωⁱ, qᵢ)의 보간이다. 도메인 크기가 LAGRANGE_LIMIT를 넘거나
    use_fft=True이면 같은 값을 IFFT로 보간한다 (결과 다항식은 동일).

    Args:
        constraints: ConstraintTable
        domain: Domain
        use_fft: None이면 도메인 크기로 자동 선택

    Returns:
        tuple[Polynomial]: (q_L(x), q_R(x), q_O(x), q_M(x), q_C(x))
    """
    if use_fft is None:
        use_fft = domain.size > LAGRANGE_LIMIT
    padding = [FR(0)] * (domain.size - len(constraints))
    result = []
    for column in constraints.columns():
        evals = list(column) + padding
        if use_fft:
            result.append(Polynomial.from_evaluations(evals, domain.omega))
        else:
            result.append(interpolate(list(zip(domain.points, evals))))
    return tuple(result)


def compute_sigma_star(permutation, constraint_count, domain):
    """모든 배선 id에 대한 σ* 값을 계산한다.

    Args:
        permutation: WirePermutation (또는 배선 id로 인덱싱되는 시퀀스)
        constraint_count: 게이트 수
        domain: Domain

    Returns:
        dict[int, FR]: 배선 id → scale_k · ω^(σ(w) mod 게이트 수)
    """
    sigma_star = {}
    for wire, target in enumerate(permutation):
        wire_class = wire // constraint_count
        if wire_class > 2:
            raise ValueError(
                f"배선 {wire}이(가) 3 × 게이트 수({constraint_count}) 범위를 벗어납니다"
            )
        position = target % constraint_count
        sigma_star[wire] = domain.scale(wire_class) * domain.points[position]
    return sigma_star


def permutation_evaluations(sigma_star, constraint_count, domain):
    """세 순열 다항식의 도메인 위 평가값.

    게이트 수를 넘는 패딩 행은 항등 값 scale_k · ωⁱ를 갖는다.

    Returns:
        tuple[list[FR]]: (S_σ1 평가값, S_σ2 평가값, S_σ3 평가값)
    """
    evals = ([], [], [])
    for k in range(3):
        for i in range(domain.size):
            if i < constraint_count:
                evals[k].append(sigma_star[k * constraint_count + i])
            else:
                evals[k].append(domain.scale(k) * domain.points[i])
    return evals


def permutation_polynomials(sigma_star, constraint_count, domain, use_fft=None):
    """세 순열 다항식 (S_σ1, S_σ2, S_σ3)을 만든다.

    기본은 Lagrange 기저의 선형결합이다. 도메인 크기가 LAGRANGE_LIMIT를
    넘거나 use_fft=True이면 같은 평가값을 IFFT로 보간한다 (결과 다항식은 동일).

    Args:
        sigma_star: compute_sigma_star()의 결과
        constraint_count: 게이트 수
        domain: Domain
        use_fft: None이면 도메인 크기로 자동 선택

    Returns:
        tuple[Polynomial]: (S_σ1(x), S_σ2(x), S_σ3(x))
    """
    if use_fft is None:
        use_fft = domain.size > LAGRANGE_LIMIT
    evals = permutation_evaluations(sigma_star, constraint_count, domain)

    if use_fft:
        logger.debug("permutation polynomials via ifft (n=%d)", domain.size)
        return tuple(Polynomial.from_evaluations(e, domain.omega) for e in evals)

    polys = [Polynomial.zero(domain.size) for _ in range(3)]
    for i in range(domain.size):
        basis = lagrange_basis(domain.points, i)
        for k in range(3):
            polys[k] += basis * evals[k][i]
    return tuple(poly.normalize() for poly in polys)

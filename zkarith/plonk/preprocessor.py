"""
PLONK 전처리기 (Preprocessor)
===============================

완성된 회로에서 증명/검증에 필요한 공개 다항식을 한 번에 만든다.

**단계** (각 단계는 이전 단계의 결과를 전제로 한다):
  1. 도메인과 확장 코셋 구성, ω 위수 자기 검사, SRS 차수가 도메인을
     감당하는지 확인 (회로를 건드리기 전)
  2. 현재 배선 순열에서 σ* 계산
  3. 순열 다항식 S_σ1, S_σ2, S_σ3 (Lagrange 기저 결합)
  4. 셀렉터 다항식 q_L, q_R, q_O, q_M, q_C (점 쌍 보간)
  5. 소거 다항식 Z_H(x) = x^n - 1, Z_H(ω) == 0 확인
  6. SRS 연결 (srs가 없으면 1단계에서 최대 차수 MAX_DEGREE로 생성)
  7. 셀렉터/순열 다항식 KZG 커밋
  8. 회로 스냅샷과 함께 PreprocessedData로 묶기

**Prover vs Verifier 사용**:
  - Prover: 다항식 원본과 σ*가 필요
  - Verifier: 커밋먼트와 도메인 정보만 필요

사용 예시:
    >>> circuit = Circuit()
    >>> circuit.add_gate()
    >>> circuit.mult_gate()
    >>> circuit.connect_wires(2, 3)
    >>> pp = preprocess(circuit, max_degree=16, seed=1)
    >>> pp.n  # 2
"""

import logging

from zkarith.plonk.domain import Domain
from zkarith.plonk.encoder import (
    compute_sigma_star,
    permutation_polynomials,
    selector_polynomials,
)
from zkarith.plonk.field import FR
from zkarith.plonk.kzg import commit
from zkarith.plonk.polynomial import Polynomial
from zkarith.plonk.srs import SRS, MAX_DEGREE


logger = logging.getLogger(__name__)


class PreprocessedData:
    """전처리 결과물. 생성 이후 원본 회로와 데이터를 공유하지 않는다.

    속성 (도메인):
        n: 도메인 크기 (2의 거듭제곱, ≥ 게이트 수)
        omega: n차 원시 단위근
        domain: [1, ω, ω², ..., ω^{n-1}]

    속성 (다항식):
        q_l_poly, q_r_poly, q_o_poly, q_m_poly, q_c_poly: 셀렉터 다항식
        s_sigma1_poly, s_sigma2_poly, s_sigma3_poly: 순열 다항식
        vanishing_poly: Z_H(x) = x^n - 1

    속성 (커밋먼트, G1 점):
        q_l_comm, q_r_comm, q_o_comm, q_m_comm, q_c_comm
        s_sigma1_comm, s_sigma2_comm, s_sigma3_comm

    속성 (기타):
        srs: 커밋먼트 설정 (SRS)
        sigma_star: 배선 id → σ* 값
        circuit: 전처리 시점의 회로 스냅샷
    """

    SELECTORS = ("q_l", "q_r", "q_o", "q_m", "q_c")
    PERMUTATIONS = ("s_sigma1", "s_sigma2", "s_sigma3")

    def selector_polys(self):
        return tuple(getattr(self, f"{name}_poly") for name in self.SELECTORS)

    def permutation_polys(self):
        return tuple(getattr(self, f"{name}_poly") for name in self.PERMUTATIONS)

    def commitments(self):
        """이름 → 커밋먼트 (검증자용 공개 입력)."""
        return {
            name: getattr(self, f"{name}_comm")
            for name in self.SELECTORS + self.PERMUTATIONS
        }


def preprocess(circuit, srs=None, max_degree=MAX_DEGREE, seed=None):
    """회로를 전처리하여 PreprocessedData를 만든다.

    모든 게이트와 배선 연결을 추가한 뒤 한 번 호출한다. 부수 효과로
    circuit.powers_omega와 circuit.extended_coset을 채운다.

    Args:
        circuit: Circuit 객체 (게이트 1개 이상)
        srs: 미리 만든 SRS. None이면 SRS.generate(max_degree, seed)
        max_degree: srs가 없을 때 생성할 SRS의 최대 차수
        seed: srs가 없을 때 τ 생성 시드

    Returns:
        PreprocessedData

    Raises:
        ValueError: 빈 회로, 도메인 자기 검사 실패, 소거 다항식 검사 실패,
                    SRS 차수 부족
    """
    if circuit.constraint_count == 0:
        raise ValueError("게이트가 없는 회로는 전처리할 수 없습니다")

    result = PreprocessedData()
    count = circuit.constraint_count

    # ── 1단계: 도메인 ──
    domain = Domain.for_constraints(count)

    # SRS는 도메인 위의 (n-1)차 다항식을 모두 커밋할 수 있어야 한다
    if srs is None:
        srs = SRS.generate(max_degree=max_degree, seed=seed)
    if domain.size - 1 > srs.max_degree:
        raise ValueError(
            f"도메인 크기 {domain.size}에는 SRS 최대 차수 {domain.size - 1} 이상이 "
            f"필요합니다 (현재 {srs.max_degree})"
        )

    circuit.powers_omega = list(domain.points)
    circuit.extended_coset = list(domain.extended_coset)
    result.n = domain.size
    result.omega = domain.omega
    result.domain = list(domain.points)
    logger.debug("domain n=%d for %d constraints", domain.size, count)

    # ── 2단계: σ* ──
    result.sigma_star = compute_sigma_star(circuit.permutation, count, domain)

    # ── 3단계: 순열 다항식 ──
    (result.s_sigma1_poly,
     result.s_sigma2_poly,
     result.s_sigma3_poly) = permutation_polynomials(result.sigma_star, count, domain)

    # ── 4단계: 셀렉터 다항식 ──
    (result.q_l_poly,
     result.q_r_poly,
     result.q_o_poly,
     result.q_m_poly,
     result.q_c_poly) = selector_polynomials(circuit.constraints, domain)

    # ── 5단계: 소거 다항식 ──
    result.vanishing_poly = Polynomial.vanishing(domain.size)
    if result.vanishing_poly.evaluate(domain.omega) != FR(0):
        raise ValueError("소거 다항식이 도메인 생성자에서 0이 아닙니다")

    # ── 6단계: SRS ──
    result.srs = srs

    # ── 7단계: 커밋 ──
    for name in PreprocessedData.SELECTORS + PreprocessedData.PERMUTATIONS:
        poly = getattr(result, f"{name}_poly")
        setattr(result, f"{name}_comm", commit(poly, srs))

    # ── 8단계: 스냅샷 ──
    result.circuit = circuit.copy()

    logger.info(
        "preprocessed circuit: %d constraints, %d wires, domain size %d",
        count, circuit.wire_count, domain.size,
    )
    return result

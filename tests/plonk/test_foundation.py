"""
기반 모듈 테스트: field.py, polynomial.py, domain.py
"""
import pytest
from zkarith.plonk.field import (
    FR, CURVE_ORDER, TWO_ADICITY, ROOT_OF_UNITY,
    inverse, get_root_of_unity, get_roots_of_unity,
)
from zkarith.plonk.polynomial import (
    Polynomial, fft, ifft, lagrange_basis, interpolate,
)
from zkarith.plonk.domain import Domain, K1, K2, next_power_of_2


# =====================================================================
# FR 산술
# =====================================================================

class TestFR:
    def test_modular_reduction(self):
        """r을 법으로 축약."""
        assert FR(CURVE_ORDER) == FR(0)
        assert FR(CURVE_ORDER + 7) == FR(7)

    def test_negation(self):
        """-1 == r - 1."""
        assert -FR(1) == FR(CURVE_ORDER - 1)
        assert FR(-1) == -FR(1)

    def test_inverse(self):
        """a · a⁻¹ == 1."""
        a = FR(12345)
        assert a * inverse(a) == FR(1)

    def test_inverse_of_int(self):
        """정수 인자도 FR로 변환하여 역원 계산."""
        assert inverse(2) * FR(2) == FR(1)

    def test_inverse_of_zero_raises(self):
        """0의 역원은 ZeroDivisionError."""
        with pytest.raises(ZeroDivisionError):
            inverse(FR(0))

    def test_two_adicity(self):
        """r - 1 = 2^32 · (홀수)."""
        assert (CURVE_ORDER - 1) % (1 << TWO_ADICITY) == 0
        assert ((CURVE_ORDER - 1) >> TWO_ADICITY) % 2 == 1


class TestRootOfUnity:
    def test_global_root_has_order_2_32(self):
        """고정 단위근의 위수는 정확히 2^32."""
        assert ROOT_OF_UNITY ** (1 << 32) == FR(1)
        assert ROOT_OF_UNITY ** (1 << 31) != FR(1)

    @pytest.mark.parametrize("n", [1, 2, 4, 8, 16])
    def test_primitive(self, n):
        """get_root_of_unity(n)은 n차 원시 단위근."""
        omega = get_root_of_unity(n)
        assert omega ** n == FR(1)
        if n > 1:
            assert omega ** (n // 2) != FR(1)

    def test_order_two_root_is_minus_one(self):
        """2차 단위근은 -1."""
        assert get_root_of_unity(2) == -FR(1)

    def test_n1_is_one(self):
        """1차 단위근은 1."""
        assert get_root_of_unity(1) == FR(1)

    def test_not_power_of_two_raises(self):
        """2의 거듭제곱이 아니면 ValueError."""
        with pytest.raises(ValueError):
            get_root_of_unity(3)

    def test_zero_raises(self):
        """n = 0은 ValueError."""
        with pytest.raises(ValueError):
            get_root_of_unity(0)

    def test_too_large_raises(self):
        """2^32를 넘는 크기는 ValueError."""
        with pytest.raises(ValueError):
            get_root_of_unity(1 << 33)

    def test_roots_list_starts_at_one(self):
        """단위근 목록은 1부터 시작."""
        roots = get_roots_of_unity(4)
        assert len(roots) == 4
        assert roots[0] == FR(1)
        assert roots[1] == get_root_of_unity(4)

    def test_roots_are_distinct(self):
        """n개의 단위근은 서로 다르다."""
        roots = get_roots_of_unity(8)
        assert len({int(r) for r in roots}) == 8


# =====================================================================
# Polynomial
# =====================================================================

class TestPolynomial:
    def test_trim(self):
        """생성 시 끝의 0 계수 제거."""
        p = Polynomial([FR(1), FR(2), FR(0), FR(0)])
        assert len(p) == 2
        assert p.degree == 1

    def test_empty_list_is_zero(self):
        """빈 계수 리스트는 영 다항식."""
        assert Polynomial([]).is_zero()

    def test_evaluate(self):
        """1 + 2x + 3x² at x=2 → 17."""
        p = Polynomial([1, 2, 3])
        assert p.evaluate(FR(2)) == FR(17)

    def test_add_sub(self):
        """다항식 덧셈, 뺄셈."""
        p = Polynomial([1, 2])
        q = Polynomial([3, 4, 5])
        assert p + q == Polynomial([4, 6, 5])
        assert q - p == Polynomial([2, 2, 5])
        assert p - p == Polynomial.zero()

    def test_mul(self):
        """(1 + 2x)(3 + 4x) = 3 + 10x + 8x²."""
        p = Polynomial([1, 2])
        q = Polynomial([3, 4])
        assert p * q == Polynomial([3, 10, 8])

    def test_scalar_mul(self):
        """스칼라곱은 양쪽 순서 모두 지원."""
        p = Polynomial([1, 2])
        assert p * 3 == Polynomial([3, 6])
        assert 3 * p == Polynomial([3, 6])
        assert p * FR(0) == Polynomial.zero()

    def test_zero_with_size(self):
        """zero(size)는 size개의 0 계수 버퍼."""
        z = Polynomial.zero(5)
        assert len(z.coeffs) == 5
        assert z.is_zero()
        assert z.degree == 0
        assert z == Polynomial.zero()

    def test_iadd_in_place(self):
        """+=는 계수 버퍼를 재사용."""
        acc = Polynomial.zero(3)
        buf = acc.coeffs
        acc += Polynomial([1, 2, 3])
        acc += Polynomial([1])
        assert acc.coeffs is buf
        assert acc == Polynomial([2, 2, 3])

    def test_iadd_grows(self):
        """+=는 필요하면 버퍼를 늘린다."""
        acc = Polynomial.zero(1)
        acc += Polynomial([0, 0, 7])
        assert acc == Polynomial([0, 0, 7])

    def test_normalize(self):
        """normalize()는 누적 후 남은 끝의 0 계수를 제거하고 자신을 반환."""
        acc = Polynomial.zero(4)
        acc += Polynomial([1, 2])
        assert len(acc.coeffs) == 4
        assert acc.normalize() is acc
        assert acc.coeffs == [FR(1), FR(2)]

    def test_normalize_zero(self):
        """영 다항식의 정규형은 계수 하나."""
        assert Polynomial.zero(6).normalize().coeffs == [FR(0)]

    def test_vanishing(self):
        """Z_H(x) = x⁴ - 1은 4차 단위근에서 0."""
        z = Polynomial.vanishing(4)
        assert len(z) == 5
        assert z.coeffs[0] == -FR(1)
        assert z.coeffs[4] == FR(1)
        for h in get_roots_of_unity(4):
            assert z.evaluate(h) == FR(0)

    def test_vanishing_invalid_size(self):
        """크기 0의 소거 다항식은 ValueError."""
        with pytest.raises(ValueError):
            Polynomial.vanishing(0)

    def test_repr(self):
        """0 계수 항은 출력하지 않는다."""
        assert repr(Polynomial([1, 0, 3])) == "Poly(1 + 3*x^2)"
        assert repr(Polynomial.zero()) == "Poly(0)"


class TestNTT:
    def test_fft_matches_evaluation(self):
        """FFT 결과는 각 단위근에서의 평가값."""
        omega = get_root_of_unity(4)
        coeffs = [FR(1), FR(2), FR(3), FR(4)]
        p = Polynomial(coeffs)
        evals = fft(coeffs, omega)
        for i in range(4):
            assert evals[i] == p.evaluate(omega ** i)

    def test_ifft_inverts_fft(self):
        """IFFT(FFT(c)) == c."""
        omega = get_root_of_unity(8)
        coeffs = [FR(i * 7 + 1) for i in range(8)]
        assert ifft(fft(coeffs, omega), omega) == coeffs

    def test_from_evaluations(self):
        """평가값에서 다항식 복원."""
        omega = get_root_of_unity(4)
        p = Polynomial([5, 0, 1])
        evals = [p.evaluate(omega ** i) for i in range(4)]
        assert Polynomial.from_evaluations(evals, omega) == p


class TestLagrange:
    def test_basis_kronecker_delta(self):
        """L_i(d_j) = δ_ij."""
        domain = [FR(1), FR(2), FR(3), FR(5)]
        for i in range(4):
            basis = lagrange_basis(domain, i)
            assert basis.degree == 3
            for j, d in enumerate(domain):
                assert basis.evaluate(d) == (FR(1) if i == j else FR(0))

    def test_basis_on_roots_of_unity(self):
        """단위근 도메인 위의 기저."""
        domain = get_roots_of_unity(4)
        basis = lagrange_basis(domain, 2)
        assert basis.evaluate(domain[2]) == FR(1)
        assert basis.evaluate(domain[0]) == FR(0)

    def test_coincident_points_raise(self):
        """같은 점이 두 번 나오면 ZeroDivisionError."""
        with pytest.raises(ZeroDivisionError):
            lagrange_basis([FR(1), FR(1), FR(2)], 0)

    def test_interpolate_line(self):
        """두 점 (1, 3), (2, 5) → 1 + 2x."""
        p = interpolate([(FR(1), FR(3)), (FR(2), FR(5))])
        assert p == Polynomial([1, 2])

    def test_interpolate_minimal_degree(self):
        """세 점이 한 직선 위에 있으면 1차."""
        p = interpolate([(1, 3), (2, 5), (3, 7)])
        assert p.degree == 1
        assert len(p.coeffs) == 2

    def test_interpolate_reproduces_points(self):
        """보간 다항식은 모든 점을 지난다."""
        points = [(FR(2), FR(9)), (FR(4), FR(0)), (FR(7), FR(1)), (FR(11), FR(5))]
        p = interpolate(points)
        for x, y in points:
            assert p.evaluate(x) == y

    def test_interpolate_all_zero(self):
        """모든 y가 0이면 영 다항식."""
        assert interpolate([(1, 0), (2, 0)]).is_zero()

    def test_interpolate_duplicate_x_raises(self):
        """x좌표 중복은 ValueError."""
        with pytest.raises(ValueError):
            interpolate([(FR(1), FR(2)), (FR(1), FR(3))])

    def test_interpolate_empty_raises(self):
        """점이 없으면 ValueError."""
        with pytest.raises(ValueError):
            interpolate([])


# =====================================================================
# Domain
# =====================================================================

class TestDomain:
    def test_next_power_of_2(self):
        """n 이상의 가장 작은 2의 거듭제곱."""
        assert next_power_of_2(1) == 1
        assert next_power_of_2(3) == 4
        assert next_power_of_2(4) == 4
        assert next_power_of_2(5) == 8

    @pytest.mark.parametrize("count,size", [(1, 1), (2, 2), (3, 4), (5, 8)])
    def test_size_for_constraints(self, count, size):
        """게이트 수 → 도메인 크기."""
        assert Domain.for_constraints(count).size == size

    def test_empty_circuit_rejected(self):
        """게이트 0개는 ValueError."""
        with pytest.raises(ValueError):
            Domain.for_constraints(0)

    def test_unsupported_size(self):
        """2의 거듭제곱이 아닌 크기는 ValueError."""
        with pytest.raises(ValueError):
            Domain(3)

    def test_points(self):
        """도메인 점은 [ω⁰, ..., ω^{n-1}]."""
        d = Domain(4)
        assert d.points == get_roots_of_unity(4)
        assert d.omega == get_root_of_unity(4)

    def test_extended_coset_layout(self):
        """확장 코셋은 [H][K1·H][K2·H] 순서."""
        d = Domain(4)
        assert len(d.extended_coset) == 12
        for i in range(4):
            assert d.extended_coset[i] == d.points[i]
            assert d.extended_coset[4 + i] == K1 * d.points[i]
            assert d.extended_coset[8 + i] == K2 * d.points[i]

    def test_extended_coset_disjoint(self):
        """세 코셋의 원소 3n개는 모두 다르다."""
        d = Domain(8)
        assert len({int(x) for x in d.extended_coset}) == 24

    def test_check_passes(self):
        """올바른 도메인은 자기 검사 통과."""
        Domain(16).check()

    def test_check_detects_wrong_order(self):
        """위수가 n보다 작은 ω는 ValueError."""
        d = Domain(4)
        d.omega = get_root_of_unity(2)
        with pytest.raises(ValueError):
            d.check()

    def test_check_detects_non_root(self):
        """n차 단위근이 아닌 ω는 ValueError."""
        d = Domain(4)
        d.omega = FR(3)
        with pytest.raises(ValueError):
            d.check()

    def test_check_detects_k1_coset_overlap(self, monkeypatch):
        """K1이 H의 원소면 K1·H == H이므로 ValueError."""
        monkeypatch.setattr("zkarith.plonk.domain.K1", FR(1))
        with pytest.raises(ValueError, match="K1"):
            Domain(4)

    def test_check_detects_k2_coset_overlap(self, monkeypatch):
        """K2가 H의 원소(ω)면 ValueError."""
        monkeypatch.setattr("zkarith.plonk.domain.K2", get_root_of_unity(4))
        with pytest.raises(ValueError, match="K2"):
            Domain(4)

    def test_check_detects_k1_k2_coset_overlap(self, monkeypatch):
        """K2 = -K1이면 n = 2에서 K1·H == K2·H이므로 ValueError."""
        monkeypatch.setattr("zkarith.plonk.domain.K2", -K1)
        with pytest.raises(ValueError, match="K2/K1"):
            Domain(2)

    def test_scale(self):
        """클래스 0, 1, 2의 배율 1, K1, K2."""
        d = Domain(2)
        assert d.scale(0) == FR(1)
        assert d.scale(1) == K1
        assert d.scale(2) == K2

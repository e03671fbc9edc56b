"""
PLONK 기반 모듈: 다항식(Polynomial) 클래스, 보간 및 NTT
=========================================================

전처리 단계에서 만들어지는 모든 다항식의 표현과 연산을 제공한다.

**Polynomial 클래스**:
  계수(coefficient) 표현 기반 밀집(dense) 다항식. p(x) = c₀ + c₁·x + c₂·x² + ...
  산술 연산자(+, -, *, 스칼라곱), 제자리 덧셈(+=)과 평가(evaluation)를 지원한다.

**보간 (Interpolation)**:
  - lagrange_basis: 임의의 도메인 위의 i번째 Lagrange 기저 L_i(x)
  - interpolate: (x, y) 점 쌍들을 지나는 최소 차수 다항식
  - ifft: 단위근 도메인 위의 평가값 → 계수 (큰 도메인용 빠른 경로)

사용 예시:
    >>> from zkarith.plonk.polynomial import Polynomial, interpolate
    >>> p = interpolate([(FR(1), FR(3)), (FR(2), FR(5))])  # 1 + 2x
    >>> p.evaluate(FR(4))  # FR(9)
"""

from zkarith.plonk.field import FR, inverse


# ─────────────────────────────────────────────────────────────────────
# Polynomial 클래스
# ─────────────────────────────────────────────────────────────────────

class Polynomial:
    """유한체 FR 위의 다항식.

    계수 리스트로 표현: coeffs = [c₀, c₁, c₂, ...] → c₀ + c₁x + c₂x² + ...

    전처리에서의 역할:
    - 셀렉터 다항식 q_L(x), q_R(x), q_O(x), q_M(x), q_C(x): 게이트 유형을 인코딩
    - 순열 다항식 S_σ1(x), S_σ2(x), S_σ3(x): 배선 연결 관계를 인코딩
    - 소거 다항식 Z_H(x) = x^n - 1

    예시:
        >>> p = Polynomial([FR(1), FR(2)])  # 1 + 2x
        >>> q = Polynomial([FR(3), FR(4)])  # 3 + 4x
        >>> r = p + q                        # 4 + 6x
        >>> r = p * q                        # 3 + 10x + 8x²
    """

    def __init__(self, coeffs=None):
        """다항식 생성.

        Args:
            coeffs: FR 원소(또는 정수)의 리스트 [c₀, c₁, ...].
                    None이면 영 다항식(0)을 생성한다.
        """
        if coeffs is None:
            self.coeffs = [FR(0)]
        else:
            self.coeffs = [c if isinstance(c, FR) else FR(c) for c in coeffs]
            if not self.coeffs:
                self.coeffs = [FR(0)]
        self._trim()

    def _trim(self):
        """최고차 계수가 0인 항을 제거하여 정규화한다.

        예: [1, 2, 0, 0] → [1, 2]  (1 + 2x)
        """
        while len(self.coeffs) > 1 and self.coeffs[-1] == FR(0):
            self.coeffs.pop()

    def normalize(self):
        """끝의 0 계수를 제거하고 자기 자신을 반환한다 (+= 누적 후 정리용)."""
        self._trim()
        return self

    @property
    def degree(self):
        """다항식의 차수. 영 다항식의 차수는 0으로 정의한다."""
        for i in range(len(self.coeffs) - 1, 0, -1):
            if self.coeffs[i] != FR(0):
                return i
        return 0

    def is_zero(self):
        """영 다항식인지 확인."""
        return all(c == FR(0) for c in self.coeffs)

    def evaluate(self, point):
        """다항식을 주어진 점에서 평가한다 (Horner's method).

        Args:
            point: 평가할 FR 원소

        Returns:
            FR: p(point) 값

        예시:
            >>> p = Polynomial([FR(1), FR(2), FR(3)])  # 1 + 2x + 3x²
            >>> p.evaluate(FR(2))  # 1 + 4 + 12 = FR(17)
        """
        if not isinstance(point, FR):
            point = FR(point)
        result = FR(0)
        for coeff in reversed(self.coeffs):
            result = result * point + coeff
        return result

    def __add__(self, other):
        """다항식 덧셈: p(x) + q(x)."""
        if isinstance(other, (int, FR)):
            other = Polynomial([other])
        max_len = max(len(self.coeffs), len(other.coeffs))
        result = []
        for i in range(max_len):
            a = self.coeffs[i] if i < len(self.coeffs) else FR(0)
            b = other.coeffs[i] if i < len(other.coeffs) else FR(0)
            result.append(a + b)
        return Polynomial(result)

    def __radd__(self, other):
        return self.__add__(other)

    def __iadd__(self, other):
        """제자리 덧셈: 계수 버퍼를 재사용한다 (기저 합산용)."""
        if isinstance(other, (int, FR)):
            other = Polynomial([other])
        if len(other.coeffs) > len(self.coeffs):
            self.coeffs.extend([FR(0)] * (len(other.coeffs) - len(self.coeffs)))
        for i, c in enumerate(other.coeffs):
            self.coeffs[i] = self.coeffs[i] + c
        return self

    def __sub__(self, other):
        """다항식 뺄셈: p(x) - q(x)."""
        if isinstance(other, (int, FR)):
            other = Polynomial([other])
        return self + (-other)

    def __neg__(self):
        """다항식 부호 반전: -p(x)."""
        return Polynomial([-c for c in self.coeffs])

    def __mul__(self, other):
        """다항식 곱셈: p(x) · q(x) 또는 스칼라곱.

        다항식 × 다항식: O(n²) 나이브 곱셈
        다항식 × 스칼라: 각 계수에 스칼라를 곱함
        """
        if isinstance(other, (int, FR)):
            if isinstance(other, int):
                other = FR(other)
            return Polynomial([c * other for c in self.coeffs])
        result = [FR(0)] * (len(self.coeffs) + len(other.coeffs) - 1)
        for i, a in enumerate(self.coeffs):
            if a == FR(0):
                continue
            for j, b in enumerate(other.coeffs):
                result[i + j] = result[i + j] + a * b
        return Polynomial(result)

    def __rmul__(self, other):
        return self.__mul__(other)

    def __eq__(self, other):
        """다항식 동등 비교 (끝의 0 계수는 무시)."""
        if isinstance(other, (int, FR)):
            other = Polynomial([other])
        if not isinstance(other, Polynomial):
            return NotImplemented
        return Polynomial(self.coeffs).coeffs == Polynomial(other.coeffs).coeffs

    def __repr__(self):
        terms = []
        for i, c in enumerate(self.coeffs):
            if c == FR(0):
                continue
            if i == 0:
                terms.append(str(int(c)))
            elif i == 1:
                terms.append(f"{int(c)}*x")
            else:
                terms.append(f"{int(c)}*x^{i}")
        return "Poly(" + " + ".join(terms) + ")" if terms else "Poly(0)"

    def __len__(self):
        """계수 개수 반환."""
        return len(self.coeffs)

    @classmethod
    def zero(cls, size=1):
        """영 다항식. size개의 계수 자리를 미리 확보한다.

        += 로 기저 다항식을 누적할 때 버퍼로 사용된다.
        """
        poly = cls()
        poly.coeffs = [FR(0)] * max(size, 1)
        return poly

    @classmethod
    def vanishing(cls, n):
        """소거 다항식 Z_H(x) = x^n - 1.

        도메인 H = {1, ω, ..., ω^(n-1)} 위의 모든 점에서 0이 되는
        최소 차수 모닉(monic) 다항식이다.

        Args:
            n: 도메인 크기

        Returns:
            Polynomial: x^n - 1  (계수 [-1, 0, ..., 0, 1], 길이 n+1)
        """
        if n < 1:
            raise ValueError(f"도메인 크기는 1 이상이어야 합니다: {n}")
        coeffs = [FR(0)] * (n + 1)
        coeffs[0] = -FR(1)
        coeffs[n] = FR(1)
        return cls(coeffs)

    @classmethod
    def from_evaluations(cls, evals, omega):
        """도메인 {1, ω, ..., ω^(n-1)} 위의 평가값에서 다항식을 복원한다 (IFFT).

        Args:
            evals: [p(1), p(ω), p(ω²), ...] FR 원소 리스트 (길이 2의 거듭제곱)
            omega: n차 원시 단위근

        Returns:
            Polynomial: 보간된 (n-1)차 이하 다항식
        """
        return cls(ifft(evals, omega))


# ─────────────────────────────────────────────────────────────────────
# FFT / IFFT (Number Theoretic Transform)
# ─────────────────────────────────────────────────────────────────────

def fft(coeffs, omega):
    """NTT: 계수 → {1, ω, ..., ω^(n-1)} 위의 평가값.

    재귀적 Cooley-Tukey radix-2 알고리즘.
        y[k]       = even[k] + ω^k · odd[k]
        y[k + n/2] = even[k] - ω^k · odd[k]

    Args:
        coeffs: [c₀, c₁, ..., c_{n-1}] (길이는 2의 거듭제곱)
        omega: n차 원시 단위근

    Returns:
        list[FR]: [p(1), p(ω), ..., p(ω^{n-1})]
    """
    n = len(coeffs)
    if n == 1:
        return [coeffs[0] if isinstance(coeffs[0], FR) else FR(coeffs[0])]

    even_vals = fft(coeffs[0::2], omega * omega)
    odd_vals = fft(coeffs[1::2], omega * omega)

    result = [FR(0)] * n
    omega_k = FR(1)
    half = n // 2
    for k in range(half):
        t = omega_k * odd_vals[k]
        result[k] = even_vals[k] + t
        result[k + half] = even_vals[k] - t
        omega_k = omega_k * omega

    return result


def ifft(evals, omega):
    """역 NTT: 평가값 → 계수.

    역 단위근 ω⁻¹로 FFT를 수행한 후 n으로 나눈다.
    """
    n = len(evals)
    coeffs = fft(evals, inverse(omega))
    n_inv = inverse(FR(n))
    return [c * n_inv for c in coeffs]


# ─────────────────────────────────────────────────────────────────────
# Lagrange 보간
# ─────────────────────────────────────────────────────────────────────

def lagrange_basis(domain, i):
    """i번째 Lagrange 기저 다항식 L_i(x)를 계수 형태로 반환한다.

    L_i(x) = ∏_{j≠i} (x - d_j) / (d_i - d_j)

    성질: L_i(d_j) = δ_{ij} (크로네커 델타)

    기저 하나에 O(n²) 필드 연산이 필요하므로 작은 도메인에만 적합하다.

    Args:
        domain: FR 원소 리스트 [d₀, d₁, ..., d_{n-1}]
        i: 기저 인덱스

    Returns:
        Polynomial: L_i(x)

    Raises:
        ZeroDivisionError: 도메인에 같은 점이 두 번 나올 때 (d_i == d_j)

    예시:
        >>> domain = [FR(1), FR(2), FR(3)]
        >>> L0 = lagrange_basis(domain, 0)
        >>> L0.evaluate(FR(1))  # FR(1)
        >>> L0.evaluate(FR(2))  # FR(0)
    """
    result = Polynomial([FR(1)])
    denominator = FR(1)

    for j, d_j in enumerate(domain):
        if j == i:
            continue
        result = result * Polynomial([-d_j, FR(1)])
        denominator = denominator * (domain[i] - d_j)

    return result * inverse(denominator)


def interpolate(points):
    """점 쌍 (x, y)들을 지나는 유일한 최소 차수 다항식을 반환한다.

    p(x) = Σᵢ yᵢ · Lᵢ(x)   (Lᵢ는 x좌표 집합 위의 Lagrange 기저)

    Args:
        points: [(x₀, y₀), (x₁, y₁), ...]. x좌표는 서로 달라야 한다.

    Returns:
        Polynomial: 보간 다항식

    Raises:
        ValueError: 점이 없거나 x좌표가 중복될 때
    """
    if not points:
        raise ValueError("보간할 점이 없습니다")
    xs = [x if isinstance(x, FR) else FR(x) for x, _ in points]
    if len({int(x) for x in xs}) != len(xs):
        raise ValueError("보간점의 x좌표가 중복됩니다")

    result = Polynomial.zero(len(xs))
    for i, (_, y) in enumerate(points):
        if y == FR(0):
            continue
        result += lagrange_basis(xs, i) * y
    return result.normalize()

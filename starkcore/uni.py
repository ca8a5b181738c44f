"""Univariate polynomials and projective fractions over the base field."""

from __future__ import annotations

from dataclasses import dataclass
from functools import reduce
from typing import Iterable, Iterator, Sequence, Union

from .field import BabyBear

Scalar = Union[BabyBear, int]


def _trimmed(coeffs: list[BabyBear]) -> list[BabyBear]:
    end = len(coeffs)
    while end and coeffs[end - 1].is_zero():
        end -= 1
    return coeffs[:end]


class UnivariatePolynomial:
    """A polynomial stored by its coefficients, lowest degree first."""

    __slots__ = ("_coeffs",)

    def __init__(self, coeffs: Iterable[Scalar] = ()) -> None:
        self._coeffs = [BabyBear(int(c)) if isinstance(c, int) else c for c in coeffs]

    @classmethod
    def from_coeffs(cls, coeffs: Iterable[Scalar]) -> "UnivariatePolynomial":
        poly = cls(coeffs)
        poly._coeffs = _trimmed(poly._coeffs)
        return poly

    @classmethod
    def zero(cls) -> "UnivariatePolynomial":
        return cls()

    @classmethod
    def _one(cls) -> "UnivariatePolynomial":
        return cls([BabyBear.ONE])

    @classmethod
    def _identity(cls) -> "UnivariatePolynomial":
        return cls([BabyBear.ZERO, BabyBear.ONE])

    @classmethod
    def from_interpolation(
        cls, points: Sequence[tuple[Scalar, Scalar]]
    ) -> "UnivariatePolynomial":
        """Lagrange interpolation; raises ZeroDivisionError on duplicate x."""
        pts = [(BabyBear(int(x)), BabyBear(int(y))) for x, y in points]
        result = cls.zero()
        for i, (xi, yi) in enumerate(pts):
            num = cls._one()
            denom = BabyBear.ONE
            for j, (xj, _) in enumerate(pts):
                if i != j:
                    num = num * (cls._identity() - cls.from_coeffs([xj]))
                    denom = denom * (xi - xj)
            result = result + num * denom.inverse() * yi
        return cls.from_coeffs(result._coeffs)

    @property
    def coeffs(self) -> list[BabyBear]:
        return list(self._coeffs)

    def is_zero(self) -> bool:
        return all(c.is_zero() for c in self._coeffs)

    def evaluate(self, x: Scalar) -> BabyBear:
        return evaluate_on_slice(self._coeffs, x)

    def degree(self) -> int:
        return max(len(_trimmed(self._coeffs)) - 1, 0)

    def __len__(self) -> int:
        return len(self._coeffs)

    def __iter__(self) -> Iterator[BabyBear]:
        return iter(self._coeffs)

    def __getitem__(self, index):
        return self._coeffs[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UnivariatePolynomial):
            return NotImplemented
        return _trimmed(self._coeffs) == _trimmed(other._coeffs)

    def __repr__(self) -> str:
        return f"UnivariatePolynomial({[c.value for c in self._coeffs]})"

    def __add__(self, other: "UnivariatePolynomial") -> "UnivariatePolynomial":
        if not isinstance(other, UnivariatePolynomial):
            return NotImplemented
        n = max(len(self._coeffs), len(other._coeffs))
        pad_a = self._coeffs + [BabyBear.ZERO] * (n - len(self._coeffs))
        pad_b = other._coeffs + [BabyBear.ZERO] * (n - len(other._coeffs))
        return UnivariatePolynomial(a + b for a, b in zip(pad_a, pad_b))

    def __neg__(self) -> "UnivariatePolynomial":
        return UnivariatePolynomial(-c for c in self._coeffs)

    def __sub__(self, other: "UnivariatePolynomial") -> "UnivariatePolynomial":
        if not isinstance(other, UnivariatePolynomial):
            return NotImplemented
        return self + (-other)

    def __mul__(self, other: object) -> "UnivariatePolynomial":
        if isinstance(other, UnivariatePolynomial):
            if self.is_zero() or other.is_zero():
                return UnivariatePolynomial.zero()
            a = _trimmed(self._coeffs)
            b = _trimmed(other._coeffs)
            res = [BabyBear.ZERO] * (len(a) + len(b) - 1)
            for i, ca in enumerate(a):
                for j, cb in enumerate(b):
                    res[i + j] = res[i + j] + ca * cb
            return UnivariatePolynomial.from_coeffs(res)
        if isinstance(other, (BabyBear, int)):
            return UnivariatePolynomial(c * other for c in self._coeffs)
        return NotImplemented

    def __rmul__(self, other: object) -> "UnivariatePolynomial":
        if isinstance(other, (BabyBear, int)):
            return self * other
        return NotImplemented


def evaluate_on_slice(coeffs: Sequence[BabyBear], x: Scalar) -> BabyBear:
    """Evaluates the polynomial with the given coefficients at ``x`` (Horner)."""
    return reduce(lambda acc, c: acc * x + c, reversed(coeffs), BabyBear.ZERO)


def random_linear_combination(v: Sequence[BabyBear], alpha: Scalar) -> BabyBear:
    """Returns ``v_0 + alpha * v_1 + ... + alpha^(n-1) * v_{n-1}``."""
    return evaluate_on_slice(v, alpha)


@dataclass(frozen=True)
class Fraction:
    """A projective fraction ``numerator / denominator``."""

    numerator: BabyBear
    denominator: BabyBear

    @classmethod
    def zero(cls) -> "Fraction":
        return cls(BabyBear.ZERO, BabyBear.ONE)

    def __add__(self, other: "Fraction") -> "Fraction":
        if not isinstance(other, Fraction):
            return NotImplemented
        return Fraction(
            other.denominator * self.numerator + self.denominator * other.numerator,
            self.denominator * other.denominator,
        )

    def is_zero(self) -> bool:
        return self.numerator.is_zero() and not self.denominator.is_zero()
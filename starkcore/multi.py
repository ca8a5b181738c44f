"""Multivariate polynomial oracles and multilinear extensions."""

from __future__ import annotations

from abc import ABC, abstractmethod
from functools import reduce
from typing import Iterable, Iterator, Sequence

from .field import BabyBear
from .uni import Scalar, UnivariatePolynomial


class MultivariatePolyOracle(ABC):
    """A multivariate polynomial ``g(x_1, ..., x_n)``."""

    @abstractmethod
    def arity(self) -> int:
        """Number of variables n."""

    @abstractmethod
    def marginalize_first(self, claim: BabyBear) -> UnivariatePolynomial:
        """Sum of g over the last n-1 boolean variables, as a polynomial in x_1."""

    @abstractmethod
    def partial_evaluation(self, alpha: BabyBear) -> "MultivariatePolyOracle":
        """The polynomial ``h(x_2, ..., x_n) = g(alpha, x_2, ..., x_n)``."""


def _fold(evals: Sequence[BabyBear], alpha: Scalar) -> list[BabyBear]:
    mid = len(evals) // 2
    return [alpha * (rhs - lhs) + lhs for lhs, rhs in zip(evals[:mid], evals[mid:])]


class Mle(MultivariatePolyOracle):
    """Multilinear extension of values on the boolean hypercube, in lexicographic order."""

    __slots__ = ("evals",)

    def __init__(self, evals: Iterable[BabyBear]) -> None:
        values = list(evals)
        n = len(values)
        if n == 0 or n & (n - 1):
            raise ValueError(f"number of evaluations must be a power of two, got {n}")
        self.evals = values

    def __len__(self) -> int:
        return len(self.evals)

    def __iter__(self) -> Iterator[BabyBear]:
        return iter(self.evals)

    def __getitem__(self, index):
        return self.evals[index]

    def __repr__(self) -> str:
        return f"Mle({[e.value for e in self.evals]})"

    def arity(self) -> int:
        return len(self.evals).bit_length() - 1

    def marginalize_first(self, claim: BabyBear) -> UnivariatePolynomial:
        y0 = sum(self.evals[: len(self.evals) // 2], BabyBear.ZERO)
        y1 = claim - y0
        return UnivariatePolynomial.from_interpolation(
            [(BabyBear.ZERO, y0), (BabyBear.ONE, y1)]
        )

    def partial_evaluation(self, alpha: BabyBear) -> "Mle":
        return Mle(_fold(self.evals, alpha))

    def eval(self, point: Sequence[Scalar]) -> BabyBear:
        """Evaluates the multilinear polynomial at ``point``.

        A shorter point fixes only the leading variables and reads the first
        remaining value; a point longer than the arity raises ValueError.
        """
        if len(point) > self.arity():
            raise ValueError(
                f"point has {len(point)} coordinates but the polynomial has {self.arity()} variables"
            )
        return reduce(_fold, point, self.evals)[0]


def hypercube_eq(x: Sequence[Scalar], y: Sequence[Scalar]) -> BabyBear:
    """Evaluates the boolean Lagrange basis polynomial ``eq(x, y)``."""
    if len(x) != len(y):
        raise ValueError(f"points differ in length: {len(x)} != {len(y)}")
    return reduce(
        lambda acc, pair: acc * (pair[0] * pair[1] + (pair[0] - 1) * (pair[1] - 1)),
        zip(x, y),
        BabyBear.ONE,
    )


def fold_mle_evals(assignment: Scalar, eval0: Scalar, eval1: Scalar) -> BabyBear:
    """Computes ``eq(0, assignment) * eval0 + eq(1, assignment) * eval1``."""
    result = assignment * (eval1 - eval0) + eval0
    return result if isinstance(result, BabyBear) else BabyBear(result)
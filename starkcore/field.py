"""Arithmetic in the BabyBear prime field."""

from __future__ import annotations

from typing import Iterable, Union

MODULUS = 2013265921  # 15 * 2**27 + 1

IntoField = Union["BabyBear", int]


class BabyBear:
    """An element of the prime field of order ``15 * 2**27 + 1``."""

    __slots__ = ("value",)

    MODULUS = MODULUS
    ZERO: "BabyBear"
    ONE: "BabyBear"
    TWO: "BabyBear"

    def __init__(self, value: int = 0) -> None:
        self.value = int(value) % MODULUS

    @staticmethod
    def _coerce(other: object) -> "BabyBear | None":
        if isinstance(other, BabyBear):
            return other
        if isinstance(other, int):
            return BabyBear(other)
        return None

    def __add__(self, other: object) -> "BabyBear":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return BabyBear(self.value + rhs.value)

    __radd__ = __add__

    def __sub__(self, other: object) -> "BabyBear":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return BabyBear(self.value - rhs.value)

    def __rsub__(self, other: object) -> "BabyBear":
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return BabyBear(lhs.value - self.value)

    def __mul__(self, other: object) -> "BabyBear":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return BabyBear(self.value * rhs.value)

    __rmul__ = __mul__

    def __truediv__(self, other: object) -> "BabyBear":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self * rhs.inverse()

    def __rtruediv__(self, other: object) -> "BabyBear":
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs * self.inverse()

    def __neg__(self) -> "BabyBear":
        return BabyBear(-self.value)

    def __pow__(self, exponent: int) -> "BabyBear":
        if exponent < 0:
            return self.inverse() ** (-exponent)
        return BabyBear(pow(self.value, exponent, MODULUS))

    def __eq__(self, other: object) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self.value == rhs.value

    def __hash__(self) -> int:
        return hash(("BabyBear", self.value))

    def __int__(self) -> int:
        return self.value

    def __repr__(self) -> str:
        return f"BabyBear({self.value})"

    def __str__(self) -> str:
        return str(self.value)

    def inverse(self) -> "BabyBear":
        """Multiplicative inverse; raises ZeroDivisionError for zero."""
        if self.value == 0:
            raise ZeroDivisionError("zero has no multiplicative inverse")
        return BabyBear(pow(self.value, MODULUS - 2, MODULUS))

    def halve(self) -> "BabyBear":
        return self * _INV_TWO

    def double(self) -> "BabyBear":
        return BabyBear(self.value * 2)

    def square(self) -> "BabyBear":
        return BabyBear(self.value * self.value)

    def is_zero(self) -> bool:
        return self.value == 0


BabyBear.ZERO = BabyBear(0)
BabyBear.ONE = BabyBear(1)
BabyBear.TWO = BabyBear(2)
_INV_TWO = BabyBear((MODULUS + 1) // 2)


def batch_multiplicative_inverse(values: Iterable[BabyBear]) -> list[BabyBear]:
    """Inverts every element with a single field inversion.

    Raises ZeroDivisionError if any element is zero.
    """
    items = list(values)
    prefix: list[BabyBear] = []
    acc = BabyBear.ONE
    for value in items:
        prefix.append(acc)
        acc = acc * value
    inv = acc.inverse()
    result: list[BabyBear] = []
    for value, before in zip(reversed(items), reversed(prefix)):
        result.append(inv * before)
        inv = inv * value
    result.reverse()
    return result
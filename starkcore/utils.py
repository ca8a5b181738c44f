"""Small helpers shared across the prover and verifier."""

from __future__ import annotations

import logging
import time
from typing import Callable, Iterable, TypeVar

from .field import BabyBear, batch_multiplicative_inverse

R = TypeVar("R")

logger = logging.getLogger(__name__)


def batch_multiplicative_inverse_allowing_zero(
    values: Iterable[BabyBear],
) -> list[BabyBear]:
    """Inverts every non-zero element; zero elements stay zero."""
    result = list(values)
    nonzero = [(i, v) for i, v in enumerate(result) if not v.is_zero()]
    inverses = batch_multiplicative_inverse(v for _, v in nonzero)
    for (index, _), inverse in zip(nonzero, inverses):
        result[index] = inverse
    return result


def metrics_span(name: str, f: Callable[[], R]) -> R:
    """Runs ``f`` and logs its wall-clock duration under ``name``."""
    start = time.perf_counter()
    result = f()
    elapsed_ms = (time.perf_counter() - start) * 1000.0
    logger.debug("%s: %.3f ms", name, elapsed_ms)
    return result


def log2_strict(n: int) -> int:
    """Returns log2 of ``n``; raises ValueError unless ``n`` is a power of two."""
    if n <= 0 or n & (n - 1):
        raise ValueError(f"{n} is not a power of two")
    return n.bit_length() - 1
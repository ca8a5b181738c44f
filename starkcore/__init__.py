"""BabyBear field arithmetic, polynomials, sum-check, STARK key and proof types, and a prover coordinator."""

__version__ = "0.1.0"
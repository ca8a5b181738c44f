import random

import pytest

from starkcore.challenger import HashChallenger
from starkcore.field import BabyBear, MODULUS
from starkcore.multi import Mle
from starkcore.sumcheck import (
    MAX_DEGREE,
    DegreeInvalidError,
    SumcheckError,
    SumcheckProof,
    SumInvalidError,
    partially_verify,
    prove_batch,
)
from starkcore.uni import UnivariatePolynomial


def _rng():
    return random.Random(0)


def _values(rng, n):
    return [BabyBear(rng.randrange(MODULUS)) for _ in range(n)]


def _sum(values):
    return sum(values, BabyBear.ZERO)


def test_sumcheck_works():
    rng = _rng()
    values = _values(rng, 32)
    claim = _sum(values)
    mle = Mle(values)
    proof, _ = prove_batch([claim], [mle], BabyBear.ONE, HashChallenger())
    assignment, ev = partially_verify(claim, proof, HashChallenger())
    assert ev == mle.eval(assignment)


def test_batch_sumcheck_works():
    rng = _rng()
    values0 = _values(rng, 32)
    values1 = _values(rng, 32)
    mle0, mle1 = Mle(values0), Mle(values1)
    claim0, claim1 = _sum(values0), _sum(values1)
    lam = BabyBear(rng.randrange(MODULUS))
    proof, _ = prove_batch([claim0, claim1], [mle0, mle1], lam, HashChallenger())
    claim = claim0 + lam * claim1
    assignment, ev = partially_verify(claim, proof, HashChallenger())
    assert ev == mle0.eval(assignment) + lam * mle1.eval(assignment)


def test_batch_sumcheck_with_different_n_variables():
    rng = _rng()
    values0 = _values(rng, 64)
    values1 = _values(rng, 32)
    mle0, mle1 = Mle(values0), Mle(values1)
    claim0, claim1 = _sum(values0), _sum(values1)
    lam = BabyBear(rng.randrange(MODULUS))
    proof, _ = prove_batch([claim0, claim1], [mle0, mle1], lam, HashChallenger())
    claim = claim0 + lam * claim1.double()
    assignment, ev = partially_verify(claim, proof, HashChallenger())
    assert ev == mle0.eval(assignment) + lam * mle1.eval(assignment[1:])


def test_invalid_sumcheck_proof_fails():
    rng = _rng()
    values = _values(rng, 8)
    claim = _sum(values)
    invalid = list(values)
    invalid[0] = invalid[0] + BabyBear.ONE
    proof, _ = prove_batch(
        [claim + BabyBear.ONE], [Mle(invalid)], BabyBear.ONE, HashChallenger()
    )
    with pytest.raises(SumInvalidError) as info:
        partially_verify(claim, proof, HashChallenger())
    assert info.value.round == 0
    assert isinstance(info.value, SumcheckError)


def test_artifacts_are_consistent_with_proof():
    rng = _rng()
    values = _values(rng, 16)
    mle = Mle(values)
    claim = _sum(values)
    proof, artifacts = prove_batch([claim], [mle], BabyBear.ONE, HashChallenger())
    assert len(proof.round_polys) == 4
    assert len(artifacts.evaluation_point) == 4
    assert all(p.arity() == 0 for p in artifacts.constant_poly_oracles)
    assert artifacts.claimed_evals == [mle.eval(artifacts.evaluation_point)]
    assert artifacts.constant_poly_oracles[0][0] == artifacts.claimed_evals[0]


def test_degree_too_high_rejected():
    poly = UnivariatePolynomial.from_coeffs([1] * (MAX_DEGREE + 2))
    proof = SumcheckProof([poly])
    with pytest.raises(DegreeInvalidError) as info:
        partially_verify(BabyBear(0), proof, HashChallenger())
    assert info.value.round == 0


def test_empty_proof_returns_claim():
    assignment, ev = partially_verify(BabyBear(42), SumcheckProof(), HashChallenger())
    assert assignment == []
    assert ev == BabyBear(42)


def test_prove_batch_requires_polys():
    with pytest.raises(ValueError):
        prove_batch([], [], BabyBear.ONE, HashChallenger())


def test_prove_batch_requires_matching_claims():
    mle = Mle([BabyBear(1), BabyBear(2)])
    with pytest.raises(ValueError):
        prove_batch([BabyBear(3), BabyBear(3)], [mle], BabyBear.ONE, HashChallenger())
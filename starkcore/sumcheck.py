"""Sum-check protocol for claims about ``sum_x g(x)`` over the boolean hypercube."""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import reduce
from typing import Generic, Sequence, TypeVar

from .challenger import HashChallenger
from .field import BabyBear
from .multi import MultivariatePolyOracle
from .uni import UnivariatePolynomial

MAX_DEGREE = 3
"""Max degree of polynomials the verifier accepts in each round."""

O = TypeVar("O", bound=MultivariatePolyOracle)


@dataclass
class SumcheckProof:
    """Round polynomials sent by the prover, one per variable."""

    round_polys: list[UnivariatePolynomial] = field(default_factory=list)


@dataclass
class SumcheckArtifacts(Generic[O]):
    """Challenges, the fully fixed oracles and their claimed evaluations."""

    evaluation_point: list[BabyBear]
    constant_poly_oracles: list[O]
    claimed_evals: list[BabyBear]


class SumcheckError(Exception):
    """Sum-check verification failure."""

    def __init__(self, message: str, round: int) -> None:
        super().__init__(message)
        self.round = round


class DegreeInvalidError(SumcheckError):
    def __init__(self, round: int) -> None:
        super().__init__(
            f"degree of the polynomial in round {round} is too high", round
        )


class SumInvalidError(SumcheckError):
    def __init__(self, claim: BabyBear, sum: BabyBear, round: int) -> None:
        super().__init__(
            f"sum does not match the claim in round {round} (sum {sum}, claim {claim})",
            round,
        )
        self.claim = claim
        self.sum = sum


def _combine_polys(
    polys: Sequence[UnivariatePolynomial], alpha: BabyBear
) -> UnivariatePolynomial:
    """Returns ``p_0 + alpha * p_1 + ... + alpha^(n-1) * p_{n-1}``."""
    return reduce(
        lambda acc, poly: acc * alpha + poly,
        reversed(polys),
        UnivariatePolynomial.zero(),
    )


def prove_batch(
    claims: Sequence[BabyBear],
    polys: Sequence[O],
    lambda_: BabyBear,
    challenger: HashChallenger,
) -> tuple[SumcheckProof, SumcheckArtifacts[O]]:
    """Runs sum-check on ``h = g_0 + lambda * g_1 + ...``.

    Polynomials with fewer variables are folded in the latest rounds.
    Raises ValueError on empty or mismatched input and on an inconsistent
    or over-degree round polynomial.
    """
    polys = list(polys)
    claims = list(claims)
    if not polys:
        raise ValueError("no multivariate polynomials provided")
    if len(claims) != len(polys):
        raise ValueError(
            f"number of claims ({len(claims)}) differs from number of polynomials ({len(polys)})"
        )
    n_variables = max(p.arity() for p in polys)

    claims = [
        claim * BabyBear(1 << (n_variables - poly.arity()))
        for claim, poly in zip(claims, polys)
    ]

    round_polys: list[UnivariatePolynomial] = []
    evaluation_point: list[BabyBear] = []

    for round_idx in range(n_variables):
        n_remaining = n_variables - round_idx

        this_round: list[UnivariatePolynomial] = []
        for i, (poly, claim) in enumerate(zip(polys, claims)):
            if poly.arity() == n_remaining:
                round_poly = poly.marginalize_first(claim)
            else:
                round_poly = UnivariatePolynomial.from_coeffs([claim.halve()])
            total = round_poly.evaluate(BabyBear.ZERO) + round_poly.evaluate(BabyBear.ONE)
            if total != claim:
                raise ValueError(
                    f"Round {round_idx}, poly {i}: eval(0) + eval(1) != claim ({total} != {claim})"
                )
            if round_poly.degree() > MAX_DEGREE:
                raise ValueError(
                    f"Round {round_idx}, poly {i}: degree {round_poly.degree()} > max {MAX_DEGREE}"
                )
            this_round.append(round_poly)

        combined = _combine_polys(this_round, lambda_)
        challenger.observe_slice(combined)
        challenge = challenger.sample_ext_element()

        claims = [p.evaluate(challenge) for p in this_round]
        polys = [
            poly.partial_evaluation(challenge) if poly.arity() == n_remaining else poly
            for poly in polys
        ]
        round_polys.append(combined)
        evaluation_point.append(challenge)

    return SumcheckProof(round_polys), SumcheckArtifacts(
        evaluation_point=evaluation_point,
        constant_poly_oracles=polys,
        claimed_evals=claims,
    )


def partially_verify(
    claim: BabyBear, proof: SumcheckProof, challenger: HashChallenger
) -> tuple[list[BabyBear], BabyBear]:
    """Checks every round and returns ``(assignment, claimed_eval)``.

    The final evaluation is left for the caller to check. Raises
    DegreeInvalidError or SumInvalidError on a bad round.
    """
    assignment: list[BabyBear] = []
    for round_idx, round_poly in enumerate(proof.round_polys):
        if round_poly.degree() > MAX_DEGREE:
            raise DegreeInvalidError(round_idx)
        total = round_poly.evaluate(BabyBear.ZERO) + round_poly.evaluate(BabyBear.ONE)
        if claim != total:
            raise SumInvalidError(claim, total, round_idx)
        challenger.observe_slice(round_poly)
        challenge = challenger.sample_ext_element()
        claim = round_poly.evaluate(challenge)
        assignment.append(challenge)
    return assignment, claim
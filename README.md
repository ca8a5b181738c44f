# starkcore

Building blocks for proving multi-matrix STARKs, written in plain Python
with no third-party dependencies.

## What is inside

- `starkcore.field`: the BabyBear prime field (`BabyBear`, modulus
  `15 * 2**27 + 1`) with `inverse`, `halve`, `double`, `square`, `is_zero`
  and the usual operators, plus `batch_multiplicative_inverse`.
- `starkcore.utils`: `batch_multiplicative_inverse_allowing_zero` (zeros stay
  zero), `log2_strict` (raises `ValueError` unless given a power of two) and
  `metrics_span` (runs a function and logs its duration at debug level).
- `starkcore.uni`: `UnivariatePolynomial` (`from_coeffs`, `zero`,
  `from_interpolation`, `evaluate`, `degree`, addition, subtraction and
  multiplication), the projective `Fraction`, `evaluate_on_slice` and
  `random_linear_combination`.
- `starkcore.multi`: the `MultivariatePolyOracle` interface, multilinear
  extensions (`Mle` with `arity`, `marginalize_first`, `partial_evaluation`,
  `eval`), `hypercube_eq` and `fold_mle_evals`.
- `starkcore.challenger`: `HashChallenger`, a SHA-512 duplex Fiat–Shamir
  challenger with `observe`, `observe_slice`, `sample` and
  `sample_ext_element`.
- `starkcore.sumcheck`: batched sum-check with `prove_batch` and
  `partially_verify`, returning `SumcheckProof` and `SumcheckArtifacts`, and
  raising `DegreeInvalidError` or `SumInvalidError` (both `SumcheckError`) on
  a bad proof.
- `starkcore.errors`: `VerificationError` and its subclasses
  `InvalidProofShapeError`, `InvalidOpeningArgumentError`,
  `OodEvaluationMismatchError` and `ChallengePhaseError`.
- `starkcore.rap`: `get_air_name` and `simplify_type_name`, which derive short
  display names for AIR objects.
- `starkcore.proof`: `Proof`, `Commitments`, `OpeningProof`, `OpenedValues`,
  `AdjacentOpenedValues` and `AirProofData`.
- `starkcore.keygen_types` and `starkcore.keygen_view`: `TraceWidth`,
  `StarkVerifyingParams`, `StarkVerifyingKey`, `MultiStarkVerifyingKey`,
  `StarkProvingKey`, `MultiStarkProvingKey` and the
  `MultiStarkVerifyingKeyView` over a selection of AIRs.
- `starkcore.metrics`: `trace_metrics`, `TraceMetrics`,
  `SingleTraceMetrics`, `TraceCells` and `format_number_with_underscores`.
- `starkcore.prover_types`: `RowMajorMatrix`, proving contexts, trace views,
  `HalProof` (with `into_proof`) and `AirProofInput` helpers such as
  `simple` and `cached_traces_no_pis`.
- `starkcore.hal`: abstract interfaces a proving device implements
  (`TraceCommitter`, `RapPartialProver`, `QuotientCommitter`,
  `OpeningProver`, `ProverDevice`, `DeviceDataTransporter`, `ProverBackend`).
- `starkcore.opener`: `OpeningProver`, which asks a polynomial commitment
  scheme for openings and arranges them into `OpenedValues`, and
  `collect_trace_openings`.
- `starkcore.coordinator`: `Coordinator`, which drives a `ProverDevice`
  through trace commitment, challenge phases, quotient commitment and
  openings, and returns a `HalProof`.

## Installation

```
pip install .
```

## Example: sum-check over a multilinear extension

```python
from starkcore.field import BabyBear
from starkcore.multi import Mle
from starkcore.challenger import HashChallenger
from starkcore.sumcheck import prove_batch, partially_verify

values = [BabyBear(v) for v in range(1, 9)]
claim = sum(values, BabyBear(0))
mle = Mle(values)

proof, _ = prove_batch([claim], [mle], BabyBear(1), HashChallenger())
assignment, evaluation = partially_verify(claim, proof, HashChallenger())
assert evaluation == mle.eval(assignment)
```

## Example: polynomials

```python
from starkcore.field import BabyBear
from starkcore.uni import UnivariatePolynomial

points = [(BabyBear(x), BabyBear(y)) for x, y in [(5, 1), (1, 2), (3, 3), (9, 4)]]
poly = UnivariatePolynomial.from_interpolation(points)
assert poly.evaluate(BabyBear(3)) == BabyBear(3)
```

## What the package does not do

- It contains no polynomial commitment scheme, no FRI, and no concrete
  proving device. `Coordinator` and `OpeningProver` work only with a device
  and a commitment scheme supplied by the caller.
- It has no key generation from AIR constraints and no constraint system;
  the key types are plain data holders.
- It has no full STARK verifier; `starkcore.errors` only defines the errors
  one would raise.
- There is no extension field: `HashChallenger.sample_ext_element` returns a
  base field element.
- There is no command-line tool.

## Running the tests

```
pip install .[test]
pytest
```
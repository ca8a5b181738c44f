"""Polynomial opening proofs for all committed trace and quotient matrices."""

from __future__ import annotations

from itertools import chain
from typing import Any, Sequence

from .proof import AdjacentOpenedValues, OpenedValues, OpeningProof


def collect_trace_openings(ops: Sequence[Sequence[Sequence[Any]]]) -> list[AdjacentOpenedValues]:
    """Turns per-matrix openings at two points into local/next value pairs.

    Raises ValueError if a matrix was not opened at exactly two points.
    """
    result = []
    for op in ops:
        points = list(op)
        if len(points) != 2:
            raise ValueError(f"Should have 2 openings, got {len(points)}")
        local, nxt = points
        result.append(AdjacentOpenedValues(local=list(local), next=list(nxt)))
    return result


class OpeningProver:
    """Opens every committed matrix at ``zeta`` (and the next point where needed)."""

    def __init__(self, pcs: Any, zeta: Any) -> None:
        self.pcs = pcs
        self.zeta = zeta

    def _next_point(self, domain: Any) -> Any:
        point = domain.next_point(self.zeta)
        if point is None:
            raise ValueError("domain has no next point for zeta")
        return point

    def open(
        self,
        challenger: Any,
        preprocessed: Sequence[tuple[Any, Any]],
        main: Sequence[tuple[Any, Sequence[Any]]],
        after_challenge: Sequence[tuple[Any, Sequence[Any]]],
        quotient_data: Any,
        quotient_degrees: Sequence[int],
    ) -> OpeningProof:
        """Produces the opening proof and the opened values.

        Each preprocessed trace has its own commitment; main traces may have
        several commitments; each challenge phase shares one commitment; all
        quotient chunks share one commitment. Raises ValueError if the PCS
        returns openings of the wrong shape.
        """
        preprocessed_rounds = [(data, [domain]) for data, domain in preprocessed]
        main = list(main)
        after_challenge = list(after_challenge)

        zeta = self.zeta
        rounds: list[tuple[Any, list[list[Any]]]] = [
            (data, [[zeta, self._next_point(domain)] for domain in domains])
            for data, domains in chain(preprocessed_rounds, main, after_challenge)
        ]

        num_chunks = sum(quotient_degrees)
        rounds.append((quotient_data, [[zeta] for _ in range(num_chunks)]))

        opening_values, opening_proof = self.pcs.open(rounds, challenger)
        opening_values = list(opening_values)

        if not opening_values:
            raise ValueError("Should have quotient opening")
        quotient_openings = list(opening_values.pop())

        num_pre = len(preprocessed_rounds)
        num_main = len(main)
        num_after = len(after_challenge)
        if len(opening_values) != num_pre + num_main + num_after:
            raise ValueError(
                f"Incorrect number of trace openings: expected {num_pre + num_main + num_after}, "
                f"got {len(opening_values)}"
            )

        after_challenge_openings = [
            collect_trace_openings(values)
            for values in opening_values[num_pre + num_main :]
        ]
        main_openings = [
            collect_trace_openings(values)
            for values in opening_values[num_pre : num_pre + num_main]
        ]

        preprocessed_openings = []
        for values in opening_values[:num_pre]:
            openings = collect_trace_openings(values)
            if not openings:
                raise ValueError("Preprocessed trace should be opened at 1 point")
            preprocessed_openings.append(openings[-1])

        if len(quotient_openings) < num_chunks:
            raise ValueError(
                f"expected {num_chunks} quotient chunk openings, got {len(quotient_openings)}"
            )
        chunk_iter = iter(quotient_openings)
        quotient_values = []
        for chunk_size in quotient_degrees:
            per_air = []
            for _ in range(chunk_size):
                op = list(next(chunk_iter))
                if not op:
                    raise ValueError("quotient chunk should be opened at 1 point")
                per_air.append(list(op[-1]))
            quotient_values.append(per_air)

        return OpeningProof(
            proof=opening_proof,
            values=OpenedValues(
                preprocessed=preprocessed_openings,
                main=main_openings,
                after_challenge=after_challenge_openings,
                quotient=quotient_values,
            ),
        )
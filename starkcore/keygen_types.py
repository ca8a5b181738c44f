"""Proving and verifying key types."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from .keygen_view import MultiStarkVerifyingKeyView


@dataclass
class TraceWidth:
    """Widths of the different parts of a trace matrix."""

    preprocessed: Optional[int]
    cached_mains: list[int]
    common_main: int
    after_challenge: list[int] = field(default_factory=list)
    """Counted in extension field elements, not base field elements."""

    def main_widths(self) -> list[int]:
        """Widths of all main traces, including the common main trace if present."""
        widths = list(self.cached_mains)
        if self.common_main != 0:
            widths.append(self.common_main)
        return widths


@dataclass
class StarkVerifyingParams:
    width: TraceWidth
    num_public_values: int
    num_exposed_values_after_challenge: list[int] = field(default_factory=list)
    num_challenges_to_sample: list[int] = field(default_factory=list)


@dataclass
class VerifierSinglePreprocessedData:
    """Commitment to a single AIR's preprocessed trace."""

    commit: Any


@dataclass
class StarkVerifyingKey:
    """Verifying key for a single AIR.

    ``symbolic_constraints`` must expose an ``interactions`` sequence.
    """

    preprocessed_data: Optional[VerifierSinglePreprocessedData]
    params: StarkVerifyingParams
    symbolic_constraints: Any
    quotient_degree: int
    rap_phase_seq_kind: Any

    def num_cached_mains(self) -> int:
        return len(self.params.width.cached_mains)

    def has_common_main(self) -> bool:
        return self.params.width.common_main != 0

    def has_interaction(self) -> bool:
        return len(self.symbolic_constraints.interactions) > 0


@dataclass
class MultiStarkVerifyingKey:
    """Verifying key for a set of AIRs."""

    per_air: list[StarkVerifyingKey]

    def full_view(self) -> MultiStarkVerifyingKeyView:
        return MultiStarkVerifyingKeyView(list(self.per_air))

    def view(self, air_ids: list[int]) -> MultiStarkVerifyingKeyView:
        """View of the given AIRs in the given order; raises IndexError on a bad id."""
        selected = []
        for air_id in air_ids:
            if not 0 <= air_id < len(self.per_air):
                raise IndexError(f"air id {air_id} out of range")
            selected.append(self.per_air[air_id])
        return MultiStarkVerifyingKeyView(selected)

    def num_challenges_per_phase(self) -> list[int]:
        return self.full_view().num_challenges_per_phase()


@dataclass
class ProverOnlySinglePreprocessedData:
    """Preprocessed trace matrix and the prover data of its commitment."""

    trace: Any
    data: Any


@dataclass
class StarkProvingKey:
    """Proving key for a single AIR."""

    air_name: str
    vk: StarkVerifyingKey
    preprocessed_data: Optional[ProverOnlySinglePreprocessedData] = None
    rap_partial_pk: Any = None


@dataclass
class MultiStarkProvingKey:
    """Proving key for a set of AIRs."""

    per_air: list[StarkProvingKey]
    max_constraint_degree: int

    def get_vk(self) -> MultiStarkVerifyingKey:
        return MultiStarkVerifyingKey([pk.vk for pk in self.per_air])
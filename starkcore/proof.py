"""Proof structures for multi-matrix STARKs."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Generic, Optional, TypeVar

from .field import BabyBear

C = TypeVar("C")
P = TypeVar("P")


@dataclass
class Commitments(Generic[C]):
    """All non-preprocessed commitments of a multi-matrix STARK."""

    main_trace: list[C]
    """Commitments for the main trace; each part of a partitioned main trace belongs to one."""
    after_challenge: list[C]
    """One shared commitment per challenge phase."""
    quotient: C
    """Shared commitment for all quotient polynomial evaluations."""


@dataclass
class AdjacentOpenedValues:
    """Values opened at a point and at the next point of the trace domain."""

    local: list[BabyBear]
    next: list[BabyBear]


@dataclass
class OpenedValues:
    """Opened values of every committed matrix."""

    preprocessed: list[AdjacentOpenedValues] = field(default_factory=list)
    main: list[list[AdjacentOpenedValues]] = field(default_factory=list)
    after_challenge: list[list[AdjacentOpenedValues]] = field(default_factory=list)
    quotient: list[list[list[BabyBear]]] = field(default_factory=list)


@dataclass
class OpeningProof(Generic[P]):
    """PCS opening proof together with the opened values."""

    proof: P
    values: OpenedValues


@dataclass
class AirProofData:
    """Per-AIR data carried in a proof."""

    air_id: int
    degree: int
    """Height of the trace matrix."""
    exposed_values_after_challenge: list[list[BabyBear]] = field(default_factory=list)
    public_values: list[BabyBear] = field(default_factory=list)


@dataclass
class Proof(Generic[C, P]):
    """Full proof for multiple RAPs committed into multi-matrix commitments."""

    commitments: Commitments[C]
    opening: OpeningProof[P]
    per_air: list[AirProofData]
    rap_phase_seq_proof: Optional[Any] = None

    def get_air_ids(self) -> list[int]:
        return [p.air_id for p in self.per_air]

    def get_public_values(self) -> list[list[BabyBear]]:
        return [list(p.public_values) for p in self.per_air]
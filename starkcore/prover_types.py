"""Data passed between the prover host and a proving device."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Generic, Iterable, Iterator, Optional, Sequence, TypeVar

from .keygen_types import StarkVerifyingKey
from .keygen_view import MultiStarkVerifyingKeyView
from .proof import AirProofData, Commitments, Proof

T = TypeVar("T")
M = TypeVar("M")
D = TypeVar("D")


class RowMajorMatrix(Generic[T]):
    """A dense matrix stored row after row in one flat list."""

    __slots__ = ("values", "_width")

    def __init__(self, values: Iterable[T], width: int) -> None:
        values = list(values)
        if width < 0:
            raise ValueError(f"width must be non-negative, got {width}")
        if width == 0:
            if values:
                raise ValueError("a matrix of width 0 cannot hold values")
        elif len(values) % width:
            raise ValueError(
                f"{len(values)} values do not fill rows of width {width}"
            )
        self.values = values
        self._width = width

    @classmethod
    def from_rows(cls, rows: Iterable[Sequence[T]]) -> "RowMajorMatrix[T]":
        """Builds a matrix from equally long rows; raises ValueError otherwise."""
        rows = [list(r) for r in rows]
        if not rows:
            return cls([], 0)
        width = len(rows[0])
        if any(len(r) != width for r in rows):
            raise ValueError("rows differ in length")
        return cls([v for r in rows for v in r], width)

    def height(self) -> int:
        return len(self.values) // self._width if self._width else 0

    def width(self) -> int:
        return self._width

    def row(self, r: int) -> list[T]:
        """Returns a copy of row ``r``; raises IndexError if out of range."""
        if not 0 <= r < self.height():
            raise IndexError(f"row {r} out of range for height {self.height()}")
        start = r * self._width
        return self.values[start : start + self._width]

    def get(self, r: int, c: int) -> T:
        """Returns the entry at row ``r``, column ``c``; raises IndexError if out of range."""
        if not 0 <= c < self._width:
            raise IndexError(f"column {c} out of range for width {self._width}")
        if not 0 <= r < self.height():
            raise IndexError(f"row {r} out of range for height {self.height()}")
        return self.values[r * self._width + c]

    def rows(self) -> Iterator[list[T]]:
        return (self.row(r) for r in range(self.height()))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RowMajorMatrix):
            return NotImplemented
        return self._width == other._width and self.values == other.values

    def __repr__(self) -> str:
        return f"RowMajorMatrix(height={self.height()}, width={self._width})"


@dataclass
class SingleCommitPreimage(Generic[M, D]):
    """A committed trace with the preimage of its commitment.

    ``matrix_idx`` is the index of the matrix within the commitment.
    """

    trace: M
    data: D
    matrix_idx: int = 0


@dataclass
class DeviceStarkProvingKey:
    """Proving key of a single AIR, as seen by the device."""

    air_name: str
    vk: StarkVerifyingKey
    preprocessed_data: Optional[SingleCommitPreimage] = None
    rap_partial_pk: Any = None


@dataclass
class AirProvingContext:
    """Trace and public values needed to prove a single AIR."""

    cached_mains: list[tuple[Any, SingleCommitPreimage]] = field(default_factory=list)
    """Cached main matrices with their commitments, one matrix per commitment."""
    common_main: Optional[Any] = None
    public_values: list[Any] = field(default_factory=list)


@dataclass
class ProvingContext:
    """Proving context per AIR, as ``(air_id, context)`` pairs."""

    per_air: list[tuple[int, AirProvingContext]]

    def into_air_proving_ctx_vec(self) -> list[AirProvingContext]:
        return [ctx for _, ctx in self.per_air]

    def __iter__(self) -> Iterator[tuple[int, AirProvingContext]]:
        return iter(self.per_air)

    def __len__(self) -> int:
        return len(self.per_air)


@dataclass
class DeviceMultiStarkProvingKey:
    """Proving keys of the selected AIRs, in the order of ``air_ids``."""

    air_ids: list[int]
    per_air: list[DeviceStarkProvingKey]

    def __post_init__(self) -> None:
        if len(self.air_ids) != len(self.per_air):
            raise ValueError(
                f"{len(self.air_ids)} air ids but {len(self.per_air)} proving keys"
            )

    def validate(self, ctx: ProvingContext) -> bool:
        """True if ``ctx`` covers exactly these AIRs in strictly increasing id order."""
        ids = [air_id for air_id, _ in ctx.per_air]
        return (
            ids == list(self.air_ids)
            and all(a < b for a, b in zip(ids, ids[1:]))
        )

    def vk_view(self) -> MultiStarkVerifyingKeyView:
        return MultiStarkVerifyingKeyView([pk.vk for pk in self.per_air])


@dataclass
class PairView(Generic[M]):
    """Preprocessed and partitioned main traces of one AIR, all of equal height."""

    log_trace_height: int
    preprocessed: Optional[M]
    partitioned_main: list[M]
    public_values: list[Any] = field(default_factory=list)


@dataclass
class RapSinglePhaseView(Generic[M]):
    """A single challenge phase of one RAP; ``inner`` is None if the phase is unused."""

    inner: Optional[M] = None
    challenges: list[Any] = field(default_factory=list)
    exposed_values: list[Any] = field(default_factory=list)


@dataclass
class RapView(Generic[M]):
    """Full RAP trace: the pair view and one view per challenge phase."""

    pair: PairView[M]
    per_phase: list[RapSinglePhaseView[M]] = field(default_factory=list)


@dataclass
class ProverDataAfterRapPhases:
    """Commitments and per-RAP views produced by the challenge phases.

    ``rap_views_per_phase[phase_idx][rap_idx]`` holds the matrix index within
    the phase commitment as ``inner``.
    """

    committed_pcs_data_per_phase: list[tuple[Any, Any]] = field(default_factory=list)
    rap_views_per_phase: list[list[RapSinglePhaseView[int]]] = field(
        default_factory=list
    )


@dataclass
class HalProof:
    """Proof as produced by a device-backed prover."""

    commitments: Commitments
    opening: Any
    per_air: list[AirProofData]
    rap_partial_proof: Any = None

    def into_proof(self) -> Proof:
        return Proof(
            commitments=self.commitments,
            opening=self.opening,
            per_air=self.per_air,
            rap_phase_seq_proof=self.rap_partial_proof,
        )


@dataclass
class CommittedTraceData:
    trace: RowMajorMatrix
    commitment: Any
    pcs_data: Any


@dataclass
class AirProofRawInput:
    """Raw traces and public values of a single AIR."""

    cached_mains: list[RowMajorMatrix] = field(default_factory=list)
    common_main: Optional[RowMajorMatrix] = None
    public_values: list[Any] = field(default_factory=list)

    def height(self) -> int:
        """Common height of all traces, 0 if there are none.

        Raises ValueError if the traces differ in height.
        """
        heights = [m.height() for m in self.cached_mains]
        if self.common_main is not None:
            heights.append(self.common_main.height())
        if not heights:
            return 0
        if any(h != heights[0] for h in heights):
            raise ValueError(f"trace heights differ: {heights}")
        return heights[0]


@dataclass
class AirProofInput:
    """Input for proving a single AIR.

    Prover data for cached mains must be given for all of them or for none.
    """

    cached_mains_pdata: list[tuple[Any, Any]]
    raw: AirProofRawInput

    @classmethod
    def simple(
        cls, trace: RowMajorMatrix, public_values: Sequence[Any]
    ) -> "AirProofInput":
        return cls([], AirProofRawInput([], trace, list(public_values)))

    @classmethod
    def simple_no_pis(cls, trace: RowMajorMatrix) -> "AirProofInput":
        return cls.simple(trace, [])

    @classmethod
    def multiple_simple(
        cls,
        traces: Sequence[RowMajorMatrix],
        public_values: Sequence[Sequence[Any]],
    ) -> list["AirProofInput"]:
        return [cls.simple(t, pvs) for t, pvs in zip(traces, public_values)]

    @classmethod
    def multiple_simple_no_pis(
        cls, traces: Sequence[RowMajorMatrix]
    ) -> list["AirProofInput"]:
        return [cls.simple_no_pis(t) for t in traces]

    @classmethod
    def cached_traces_no_pis(
        cls, cached_traces: Sequence[RowMajorMatrix], common_trace: RowMajorMatrix
    ) -> "AirProofInput":
        return cls([], AirProofRawInput(list(cached_traces), common_trace, []))

    def main_trace_height(self) -> int:
        """Height of the main trace; raises ValueError if there is none."""
        if self.raw.cached_mains:
            return self.raw.cached_mains[0].height()
        if self.raw.common_main is None:
            raise ValueError("an AIR must have a main trace")
        return self.raw.common_main.height()


@dataclass
class ProofInput:
    """Inputs per AIR, as ``(air_id, input)`` pairs."""

    per_air: list[tuple[int, AirProofInput]]
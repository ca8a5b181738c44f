"""Interfaces a proving device implements."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Sequence

from .prover_types import (
    DeviceMultiStarkProvingKey,
    DeviceStarkProvingKey,
    PairView,
    ProverDataAfterRapPhases,
    RowMajorMatrix,
    SingleCommitPreimage,
)


class ProverBackend(ABC):
    """Host and device types used by a prover backend."""

    @property
    @abstractmethod
    def challenge_ext_degree(self) -> int:
        """Degree of the challenge field over the base field."""


class MatrixDimensions(ABC):
    @abstractmethod
    def height(self) -> int: ...

    @abstractmethod
    def width(self) -> int: ...


MatrixDimensions.register(RowMajorMatrix)


class TraceCommitter(ABC):
    """Commits to a batch of trace matrices, possibly of different heights."""

    @abstractmethod
    def commit(self, traces: Sequence[Any]) -> tuple[Any, Any]:
        """Returns ``(commitment, pcs_data)``."""


class RapPartialProver(ABC):
    """Proves the challenge phases that follow the main trace commitment.

    It may observe and sample challenges, commit to more trace data and
    produce other partial proof data.
    """

    @abstractmethod
    def partially_prove(
        self,
        challenger: Any,
        pk_views: Sequence[DeviceStarkProvingKey],
        trace_views: list[PairView],
    ) -> tuple[Any, ProverDataAfterRapPhases]:
        """Returns ``(rap_partial_proof, prover_data_after)``."""


class QuotientCommitter(ABC):
    """Evaluates and commits to the quotient polynomials of all RAPs."""

    @abstractmethod
    def eval_and_commit_quotient(
        self,
        challenger: Any,
        pk_views: Sequence[DeviceStarkProvingKey],
        public_values: Sequence[Sequence[Any]],
        cached_views_per_air: Sequence[Sequence[SingleCommitPreimage]],
        common_main_pcs_data: Any,
        prover_data_after: ProverDataAfterRapPhases,
    ) -> tuple[Any, Any]:
        """Returns ``(quotient_commitment, quotient_pcs_data)``.

        ``pk_views``, ``public_values`` and ``cached_views_per_air`` all have
        one entry per AIR.
        """


class OpeningProver(ABC):
    """Produces the PCS opening proof for all committed matrices."""

    @abstractmethod
    def open(
        self,
        challenger: Any,
        preprocessed: list[Any],
        main: list[Any],
        after_phase: list[Any],
        quotient_data: Any,
        quotient_degrees: Sequence[int],
    ) -> Any:
        """Returns the opening proof.

        Each preprocessed trace has its own commitment, main traces may have
        several, each challenge phase shares one, and all quotient chunks
        share one.
        """


class ProverDevice(TraceCommitter, RapPartialProver, QuotientCommitter, OpeningProver):
    """A device that can run every proving step."""


class DeviceDataTransporter(ABC):
    """Moves prover data from the host to a device."""

    @abstractmethod
    def transport_pk_to_device(
        self, mpk: Any, air_ids: list[int]
    ) -> DeviceMultiStarkProvingKey:
        """Transports the proving key, keeping only the given AIRs."""

    @abstractmethod
    def transport_matrix_to_device(self, matrix: RowMajorMatrix) -> Any: ...

    @abstractmethod
    def transport_pcs_data_to_device(self, data: Any) -> Any: ...
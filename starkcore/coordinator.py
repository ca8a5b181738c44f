"""Host-side prover that drives a proving device through all phases."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any

from .challenger import HashChallenger
from .field import BabyBear
from .hal import ProverBackend, ProverDevice
from .metrics import trace_metrics
from .proof import AirProofData, Commitments
from .prover_types import (
    DeviceMultiStarkProvingKey,
    HalProof,
    PairView,
    ProvingContext,
)
from .utils import log2_strict, metrics_span

logger = logging.getLogger(__name__)


class Prover(ABC):
    """A STARK prover; it owns the challenger, whose state changes while proving."""

    @abstractmethod
    def prove(self, mpk: Any, ctx: Any) -> Any:
        """Produces a proof for the given proving key and context."""


class Coordinator(Prover):
    """Coordinates a full proof between the host and a proving device."""

    def __init__(self, backend: ProverBackend, device: ProverDevice, challenger: HashChallenger) -> None:
        self.backend = backend
        self.device = device
        self.challenger = challenger

    def prove(self, mpk: DeviceMultiStarkProvingKey, ctx: ProvingContext) -> HalProof:
        """Commits traces, runs challenge phases and quotient, and opens everything.

        ``mpk`` must hold exactly the AIRs of ``ctx``. Raises ValueError on an
        invalid input, an AIR without a main trace or a height that is not a
        power of two.
        """
        if not mpk.validate(ctx):
            raise ValueError("Invalid proof input")

        num_air = len(ctx.per_air)
        cached_commits_per_air = []
        cached_views_per_air = []
        common_main_per_air = []
        pvs_per_air = []
        for _, air_ctx in ctx:
            cached_commits_per_air.append([commit for commit, _ in air_ctx.cached_mains])
            cached_views_per_air.append([view for _, view in air_ctx.cached_mains])
            common_main_per_air.append(air_ctx.common_main)
            pvs_per_air.append(list(air_ctx.public_values))

        def commit_common() -> tuple[list[Any], tuple[Any, Any]]:
            traces = [t for t in common_main_per_air if t is not None]
            return traces, self.device.commit(traces)

        common_main_traces, (common_main_commit, common_main_pcs_data) = metrics_span(
            "main_trace_commit_time_ms", commit_common
        )

        main_trace_commitments = [
            commit for commits in cached_commits_per_air for commit in commits
        ]
        main_trace_commitments.append(common_main_commit)

        common_iter = iter(common_main_traces)
        log_trace_height_per_air: list[int] = []
        pair_trace_view_per_air: list[PairView] = []
        for pk, cached_views, pvs in zip(mpk.per_air, cached_views_per_air, pvs_per_air):
            main_views = [view.trace for view in cached_views]
            if pk.vk.has_common_main():
                main_views.append(next(common_iter))
            if not main_views:
                raise ValueError("no main trace")
            log_height = log2_strict(main_views[0].height())
            if log_height > 255:
                raise ValueError(f"log trace height {log_height} does not fit in a byte")
            log_trace_height_per_air.append(log_height)
            pair_trace_view_per_air.append(
                PairView(
                    log_trace_height=log_height,
                    preprocessed=pk.preprocessed_data.trace if pk.preprocessed_data is not None else None,
                    partitioned_main=main_views,
                    public_values=list(pvs),
                )
            )
        logger.info(
            "%s",
            trace_metrics(mpk.per_air, log_trace_height_per_air, self.backend.challenge_ext_degree),
        )

        for pvs in pvs_per_air:
            self.challenger.observe_slice(pvs)
        mvk = mpk.vk_view()
        self.challenger.observe_slice(mvk.flattened_preprocessed_commits())
        self.challenger.observe_slice(main_trace_commitments)
        self.challenger.observe_slice(BabyBear(h) for h in log_trace_height_per_air)

        rap_partial_proof, prover_data_after = self.device.partially_prove(
            self.challenger, mpk.per_air, pair_trace_view_per_air
        )
        for commit, _ in prover_data_after.committed_pcs_data_per_phase:
            self.challenger.observe(commit)

        exposed_values_per_air = []
        for i in range(num_air):
            values = []
            for per_air in prover_data_after.rap_views_per_phase:
                view = per_air[i] if i < len(per_air) else None
                values.append(
                    list(view.exposed_values) if view is not None and view.inner is not None else None
                )
            while values and values[-1] is None:
                values.pop()
            exposed_values_per_air.append([v if v is not None else [] for v in values])

        quotient_commit, quotient_data = self.device.eval_and_commit_quotient(
            self.challenger,
            mpk.per_air,
            pvs_per_air,
            cached_views_per_air,
            common_main_pcs_data,
            prover_data_after,
        )
        self.challenger.observe(quotient_commit)

        commitments_after = [c for c, _ in prover_data_after.committed_pcs_data_per_phase]
        pcs_data_after = [d for _, d in prover_data_after.committed_pcs_data_per_phase]

        def open_all() -> Any:
            quotient_degrees = [pk.vk.quotient_degree for pk in mpk.per_air]
            preprocessed = [
                pk.preprocessed_data.data
                for pk in mpk.per_air
                if pk.preprocessed_data is not None
            ]
            main = [cv.data for views in cached_views_per_air for cv in views]
            main.append(common_main_pcs_data)
            return self.device.open(
                self.challenger,
                preprocessed,
                main,
                pcs_data_after,
                quotient_data,
                quotient_degrees,
            )

        opening = metrics_span("pcs_opening_time_ms", open_all)

        per_air = [
            AirProofData(
                air_id=air_id,
                degree=1 << log_height,
                exposed_values_after_challenge=exposed,
                public_values=pvs,
            )
            for air_id, log_height, exposed, pvs in zip(
                mpk.air_ids, log_trace_height_per_air, exposed_values_per_air, pvs_per_air
            )
        ]
        return HalProof(
            commitments=Commitments(
                main_trace=main_trace_commitments,
                after_challenge=commitments_after,
                quotient=quotient_commit,
            ),
            opening=opening,
            per_air=per_air,
            rap_partial_proof=rap_partial_proof,
        )
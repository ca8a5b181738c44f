"""Views over a subset of the AIRs of a multi-STARK verifying key."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Optional

if TYPE_CHECKING:
    from .keygen_types import StarkVerifyingKey


@dataclass
class MultiStarkVerifyingKeyView:
    """An ordered selection of single-AIR verifying keys."""

    per_air: list["StarkVerifyingKey"]

    def preprocessed_commits(self) -> list[Optional[Any]]:
        """The preprocessed commit of each AIR, or None where there is none."""
        return [
            vk.preprocessed_data.commit if vk.preprocessed_data is not None else None
            for vk in self.per_air
        ]

    def flattened_preprocessed_commits(self) -> list[Any]:
        """All preprocessed commits that exist, in AIR order."""
        return [c for c in self.preprocessed_commits() if c is not None]

    def num_phases(self) -> int:
        """Maximum number of challenge phases over all AIRs.

        Raises ValueError if an AIR's per-phase parameters disagree in length.
        """
        counts = []
        for vk in self.per_air:
            params = vk.params
            num = len(params.width.after_challenge)
            if num != len(params.num_challenges_to_sample):
                raise ValueError(
                    f"{num} challenge phases but {len(params.num_challenges_to_sample)} challenge counts"
                )
            if num != len(params.num_exposed_values_after_challenge):
                raise ValueError(
                    f"{num} challenge phases but {len(params.num_exposed_values_after_challenge)} exposed value counts"
                )
            counts.append(num)
        return max(counts, default=0)

    def num_challenges_per_phase(self) -> list[int]:
        return [self.num_challenges_in_phase(i) for i in range(self.num_phases())]

    def num_challenges_in_phase(self, phase_idx: int) -> int:
        """Largest number of challenges any AIR samples in the phase.

        Raises ValueError if no AIR uses the phase.
        """
        counts = [
            vk.params.num_challenges_to_sample[phase_idx]
            for vk in self.per_air
            if 0 <= phase_idx < len(vk.params.num_challenges_to_sample)
        ]
        if not counts:
            raise ValueError(f"No challenges used in challenge phase {phase_idx}")
        return max(counts)
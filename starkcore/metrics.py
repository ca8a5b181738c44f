"""Trace size statistics for prover runs."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Optional, Sequence

from .keygen_types import TraceWidth


@dataclass
class TraceCells:
    """Trace cells, counted in base field elements."""

    preprocessed: Optional[int]
    cached_mains: list[int]
    common_main: int
    after_challenge: list[int]


@dataclass
class SingleTraceMetrics:
    air_name: str
    height: int
    width: TraceWidth
    """After-challenge widths are in base field elements."""
    cells: TraceCells
    total_cells: int
    """Base field cells of main and after-challenge traces, excluding preprocessed."""

    def __str__(self) -> str:
        main = str(self.width.main_widths())
        perm = str(list(self.width.after_challenge))
        return (
            f"{self.air_name:<20} | "
            f"Rows = {format_number_with_underscores(self.height):<10} | "
            f"Cells = {format_number_with_underscores(self.total_cells):<11} | "
            f"Prep Cols = {self.width.preprocessed or 0:<5} | "
            f"Main Cols = {main:<5} | "
            f"Perm Cols = {perm:<5}"
        )


@dataclass
class TraceMetrics:
    per_air: list[SingleTraceMetrics]
    total_cells: int
    """Total base field cells from all traces, excluding preprocessed."""

    def __str__(self) -> str:
        lines = [
            f"Total Cells: {format_number_with_underscores(self.total_cells)} (excluding preprocessed)"
        ]
        lines.extend(str(m) for m in self.per_air)
        return "".join(line + "\n" for line in lines)


def trace_metrics(
    pk: Sequence[Any], log_trace_heights: Sequence[int], challenge_ext_degree: int
) -> TraceMetrics:
    """Computes trace metrics per AIR.

    Each item of ``pk`` must have ``air_name`` and ``vk``. Raises ValueError
    if ``pk`` and ``log_trace_heights`` differ in length.
    """
    if len(pk) != len(log_trace_heights):
        raise ValueError(
            f"{len(pk)} proving keys but {len(log_trace_heights)} trace heights"
        )
    per_air = []
    for key, log_height in zip(pk, log_trace_heights):
        height = 1 << log_height
        source = key.vk.params.width
        width = replace(
            source,
            cached_mains=list(source.cached_mains),
            after_challenge=[w * challenge_ext_degree for w in source.after_challenge],
        )
        cells = TraceCells(
            preprocessed=None if width.preprocessed is None else width.preprocessed * height,
            cached_mains=[w * height for w in width.cached_mains],
            common_main=width.common_main * height,
            after_challenge=[w * height for w in width.after_challenge],
        )
        total = sum(cells.cached_mains) + cells.common_main + sum(cells.after_challenge)
        per_air.append(
            SingleTraceMetrics(
                air_name=str(key.air_name),
                height=height,
                width=width,
                cells=cells,
                total_cells=total,
            )
        )
    return TraceMetrics(per_air=per_air, total_cells=sum(m.total_cells for m in per_air))


def format_number_with_underscores(n: int) -> str:
    """Formats ``n`` with an underscore between each group of three digits."""
    if n < 0:
        raise ValueError("n must be non-negative")
    return f"{n:_}"
"""
Peak usage and summary statistics for a parsed profile.

``describe()`` mirrors what ``ms_print`` puts above its graph: how many
snapshots were taken, how many carry a heap tree, and where the peak is.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from massif_parse.parsers.base import MassifDocument, Snapshot
from massif_parse.transforms.units import format_bytes

logger = logging.getLogger(__name__)

_METRICS = ("memory_heap", "memory_heap_extra", "memory_stack", "memory_total")


@dataclass
class DocumentSummary:
    """Structured summary of a MassifDocument, returned by ``describe()``.

    Attributes:
        binary: Profiled program, or None if the profile had no ``cmd:``.
        time_unit: Unit of the snapshot ``time`` values, or None.
        snapshot_count: Number of snapshots.
        detailed_count: Number of snapshots carrying a heap tree.
        peak_index: ``index`` of the snapshot with the largest heap, or
            None for a profile without snapshots.
        peak_time: ``time`` of that snapshot.
        peak_heap_bytes: Its ``mem_heap_B``.
        peak_heap: ``peak_heap_bytes`` rendered by ``format_bytes()``.
    """

    binary: str | None
    time_unit: str | None
    snapshot_count: int = 0
    detailed_count: int = 0
    peak_index: int | None = None
    peak_time: str | None = None
    peak_heap_bytes: int = 0
    peak_heap: str = "0 B"


def peak_snapshot(document: MassifDocument, metric: str = "memory_heap") -> Snapshot | None:
    """Return the first snapshot with the largest *metric*.

    Args:
        document: A parsed document.
        metric: ``memory_heap``, ``memory_heap_extra``, ``memory_stack``
            or ``memory_total``.

    Returns:
        The peak snapshot, or None if the document has no snapshots.

    Raises:
        ValueError: If *metric* is not one of the supported names.
    """
    if metric not in _METRICS:
        raise ValueError(f"Unknown metric: '{metric}'. Supported metrics: {list(_METRICS)}")

    peak: Snapshot | None = None
    for snap in document.snapshots:
        if peak is None or getattr(snap, metric) > getattr(peak, metric):
            peak = snap
    return peak


def describe(document: MassifDocument) -> DocumentSummary:
    summary = DocumentSummary(
        binary=document.binary,
        time_unit=document.time_unit,
        snapshot_count=len(document.snapshots),
        detailed_count=sum(1 for s in document.snapshots if s.has_heap_tree),
    )
    peak = peak_snapshot(document)
    if peak is not None:
        summary.peak_index = peak.index
        summary.peak_time = peak.time
        summary.peak_heap_bytes = peak.memory_heap
        summary.peak_heap = format_bytes(peak.memory_heap)
    logger.debug("Summary: %s", summary)
    return summary

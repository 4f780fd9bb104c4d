"""
Unit tests for peak detection and summaries (massif_parse.summary).
"""

from __future__ import annotations

import pytest

from massif_parse.parsers.base import MassifDocument, Snapshot
from massif_parse.summary import describe, peak_snapshot


def _doc(*snapshots: Snapshot) -> MassifDocument:
    return MassifDocument(binary="prog", time_unit="ms", snapshots=snapshots)


class TestPeakSnapshot:
    """Tests for peak_snapshot()."""

    def test_largest_heap(self):
        doc = _doc(
            Snapshot(index=0, time="0", memory_heap=10),
            Snapshot(index=1, time="5", memory_heap=30),
            Snapshot(index=2, time="9", memory_heap=20),
        )
        assert peak_snapshot(doc).index == 1

    def test_first_of_equal_peaks_wins(self):
        doc = _doc(
            Snapshot(index=0, time="0", memory_heap=30),
            Snapshot(index=1, time="5", memory_heap=30),
        )
        assert peak_snapshot(doc).index == 0

    def test_total_metric(self):
        doc = _doc(
            Snapshot(index=0, time="0", memory_heap=10, memory_stack=100),
            Snapshot(index=1, time="5", memory_heap=30),
        )
        assert peak_snapshot(doc, metric="memory_total").index == 0

    def test_no_snapshots(self):
        assert peak_snapshot(MassifDocument()) is None

    def test_unknown_metric(self):
        with pytest.raises(ValueError, match="Unknown metric"):
            peak_snapshot(_doc(), metric="heap")


class TestDescribe:
    """Tests for describe()."""

    def test_summary_fields(self):
        doc = _doc(
            Snapshot(index=0, time="0"),
            Snapshot(index=1, time="5", memory_heap=2048,
                     heap_tree="n0: 2048", heap_tree_kind="peak"),
        )
        info = describe(doc)
        assert info.binary == "prog"
        assert info.time_unit == "ms"
        assert info.snapshot_count == 2
        assert info.detailed_count == 1
        assert info.peak_index == 1
        assert info.peak_time == "5"
        assert info.peak_heap_bytes == 2048
        assert info.peak_heap == "2.00 KiB"

    def test_empty_document(self):
        info = describe(MassifDocument())
        assert info.snapshot_count == 0
        assert info.peak_index is None
        assert info.peak_heap == "0 B"

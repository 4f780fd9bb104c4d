"""
Tabular views of a MassifDocument.

Snapshots become one DataFrame row each, with columns named after the
Massif variables so that byte columns keep their ``_B`` suffix (which
``normalize_units`` relies on). The header becomes a one-row ``_header``
table that is exported alongside the snapshots.
"""

from __future__ import annotations

import pandas as pd

from massif_parse.parsers.base import MassifDocument

SNAPSHOT_COLUMNS = [
    "snapshot",
    "time",
    "mem_heap_B",
    "mem_heap_extra_B",
    "mem_stacks_B",
    "mem_total_B",
    "heap_tree_kind",
    "heap_tree",
]

_BYTE_COLUMNS = ["mem_heap_B", "mem_heap_extra_B", "mem_stacks_B", "mem_total_B"]


def snapshots_to_frame(
    document: MassifDocument, include_heap_tree: bool = True
) -> pd.DataFrame:
    """Build one row per snapshot, in input order.

    ``time`` stays a string (its unit is ``document.time_unit``); byte
    columns are int64.

    Args:
        document: A parsed document.
        include_heap_tree: If False, the (potentially large) ``heap_tree``
            column is left out.
    """
    columns = SNAPSHOT_COLUMNS if include_heap_tree else SNAPSHOT_COLUMNS[:-1]
    rows = [
        {
            "snapshot": s.index,
            "time": s.time,
            "mem_heap_B": s.memory_heap,
            "mem_heap_extra_B": s.memory_heap_extra,
            "mem_stacks_B": s.memory_stack,
            "mem_total_B": s.memory_total,
            "heap_tree_kind": s.heap_tree_kind,
            "heap_tree": s.heap_tree,
        }
        for s in document.snapshots
    ]
    df = pd.DataFrame(rows, columns=columns)
    return df.astype({"snapshot": "int64", "time": str, **{c: "int64" for c in _BYTE_COLUMNS}})


def header_to_frame(document: MassifDocument, source_file: str = "") -> pd.DataFrame:
    """Build the one-row ``_header`` table.

    ``args`` is joined with single spaces, mirroring the ``cmd:`` line.
    """
    return pd.DataFrame([
        {
            "source_file": source_file,
            "description": document.description,
            "binary": document.binary,
            "args": " ".join(document.args),
            "time_unit": document.time_unit,
            "snapshot_count": len(document.snapshots),
        }
    ])

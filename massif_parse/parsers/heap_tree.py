"""
Heap tree accumulator.

The payload after ``heap_tree=detailed`` (or ``peak``) is an indented
call tree:

    n2: 1123587 (heap allocation functions) malloc/new/new[], --alloc-fns, etc.
     n1: 639061 0x10F42A: std::string::_M_construct (basic_string.tcc:219)
     n0: 12558 in 28 places, all below massif's threshold (1.00%)

It is kept as an opaque blob. Only its extent is determined here.
"""

from __future__ import annotations

from massif_parse.parsers.base import SNAPSHOT_SEPARATOR
from massif_parse.parsers.cursor import LineCursor


def read_heap_tree(cursor: LineCursor) -> str:
    """Collect the lines following the ``heap_tree=`` line.

    Expects the cursor to sit on the ``heap_tree=`` line itself. Stops
    without consuming at the next separator, or at end of input. Lines
    are returned verbatim (indentation included), joined with ``\\n``.
    """
    lines: list[str] = []
    cursor.advance()
    while not cursor.at_end and cursor.current != SNAPSHOT_SEPARATOR:
        lines.append(cursor.current)
        cursor.advance()
    return "\n".join(lines)

"""
Snapshot recognizer for Massif profiles.

Each snapshot is a fixed-grammar block:

    #-----------
    snapshot=1
    #-----------
    time=103242501
    mem_heap_B=1123587
    mem_heap_extra_B=89197
    mem_stacks_B=0
    heap_tree=detailed
    <heap tree lines, until the next separator or end of file>

Variable lines are matched by position, not looked up in a map: the block
is rejected as soon as a line does not carry the variable expected at that
position. Every advance inside a block is end-of-file checked, so a
truncated block is reported instead of silently completed.
"""

from __future__ import annotations

import logging
import re

from massif_parse.exceptions import FormatError
from massif_parse.parsers.base import EMPTY_HEAP_TREE, SNAPSHOT_SEPARATOR, Snapshot
from massif_parse.parsers.cursor import LineCursor
from massif_parse.parsers.heap_tree import read_heap_tree

logger = logging.getLogger(__name__)

_EOF_CONTEXT = "snapshot"

# Base-10, optional sign, no whitespace or digit separators
_INT_RE = re.compile(r"[+-]?[0-9]+")
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


def _eat_separator(cursor: LineCursor) -> None:
    line = cursor.current
    if line != SNAPSHOT_SEPARATOR:
        raise FormatError(
            cursor.line_number, f"got line {line!r}, expected {SNAPSHOT_SEPARATOR!r}"
        )
    cursor.advance(_EOF_CONTEXT)


def parse_variable(cursor: LineCursor, name: str) -> str:
    """Return the raw value of the ``<name>=<value>`` current line.

    Raises:
        FormatError: If the line has no ``=`` or names another variable.
    """
    line = cursor.current
    parsed_name, sep, value = line.partition("=")
    if not sep:
        raise FormatError(
            cursor.line_number, f'got {line!r}, expected variable "{name}=..."'
        )
    if parsed_name != name:
        raise FormatError(
            cursor.line_number,
            f"got variable {parsed_name!r}, but looking for variable {name!r}",
        )
    return value


def parse_int_variable(cursor: LineCursor, name: str) -> int:
    """Return the value of ``<name>=<int64>`` as an int.

    Raises:
        FormatError: If the variable is missing or not a signed 64-bit
            decimal integer.
    """
    raw = parse_variable(cursor, name)
    if not _INT_RE.fullmatch(raw):
        raise FormatError(
            cursor.line_number,
            f"snapshot variable {name!r} value {raw!r} not an integer",
        )
    value = int(raw)
    if not _INT64_MIN <= value <= _INT64_MAX:
        raise FormatError(
            cursor.line_number,
            f"snapshot variable {name!r} value {raw!r} out of 64-bit range",
        )
    return value


def parse_snapshot(cursor: LineCursor) -> Snapshot:
    """Recognise one snapshot block starting at the current separator line.

    On return the cursor sits on the first line after the block: the next
    separator, a trailing line, or end of input.

    Raises:
        FormatError: At the first line that breaks the block grammar, or
            if the input ends before ``heap_tree=`` is reached.
    """
    _eat_separator(cursor)

    index = parse_int_variable(cursor, "snapshot")
    cursor.advance(_EOF_CONTEXT)

    _eat_separator(cursor)

    time = parse_variable(cursor, "time")
    cursor.advance(_EOF_CONTEXT)
    memory_heap = parse_int_variable(cursor, "mem_heap_B")
    cursor.advance(_EOF_CONTEXT)
    memory_heap_extra = parse_int_variable(cursor, "mem_heap_extra_B")
    cursor.advance(_EOF_CONTEXT)
    memory_stack = parse_int_variable(cursor, "mem_stacks_B")
    cursor.advance(_EOF_CONTEXT)
    heap_tree_kind = parse_variable(cursor, "heap_tree")

    if heap_tree_kind == EMPTY_HEAP_TREE:
        heap_tree = ""
        cursor.advance()
    else:
        # Cursor is still on the heap_tree= line
        heap_tree = read_heap_tree(cursor)

    logger.debug(
        "Snapshot %d: time=%s heap=%d extra=%d stacks=%d tree=%s",
        index, time, memory_heap, memory_heap_extra, memory_stack, heap_tree_kind,
    )
    return Snapshot(
        index=index,
        time=time,
        memory_heap=memory_heap,
        memory_heap_extra=memory_heap_extra,
        memory_stack=memory_stack,
        heap_tree=heap_tree,
        heap_tree_kind=heap_tree_kind,
    )

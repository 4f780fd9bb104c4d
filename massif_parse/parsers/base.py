"""
Document model for parsed Massif profiles.

The parser's contract is:
1. parse() takes any iterable of text lines and returns a MassifDocument.
2. MassifDocument holds the optional header fields (desc, cmd, time_unit)
   and every snapshot in input order.

Both classes are frozen dataclasses: a document is built once per parse
call and never mutated afterwards. Sequences are stored as tuples for the
same reason.
"""

from __future__ import annotations

from dataclasses import dataclass, field

# Literal line that opens every snapshot block (and sits between its
# index and its variables).
SNAPSHOT_SEPARATOR = "#-----------"

# heap_tree value marking a snapshot without a heap tree payload.
EMPTY_HEAP_TREE = "empty"


@dataclass(frozen=True)
class Snapshot:
    """One point-in-time memory measurement.

    Attributes:
        index: Value of ``snapshot=<n>``, verbatim. Not checked against
            the snapshot's position or for uniqueness.
        time: Value of ``time=<value>``, verbatim. Interpreted against
            ``MassifDocument.time_unit`` (``i``, ``ms`` or ``B``).
        memory_heap: ``mem_heap_B`` in bytes.
        memory_heap_extra: ``mem_heap_extra_B`` in bytes.
        memory_stack: ``mem_stacks_B`` in bytes.
        heap_tree: Verbatim heap tree payload, lines joined with ``\\n``.
            Empty when ``heap_tree_kind == "empty"``.
        heap_tree_kind: Raw ``heap_tree=`` value (``empty``, ``detailed``,
            ``peak``, ...).
    """

    index: int
    time: str
    memory_heap: int = 0
    memory_heap_extra: int = 0
    memory_stack: int = 0
    heap_tree: str = ""
    heap_tree_kind: str = EMPTY_HEAP_TREE

    @property
    def memory_total(self) -> int:
        """Heap + heap admin overhead + stacks, in bytes."""
        return self.memory_heap + self.memory_heap_extra + self.memory_stack

    @property
    def has_heap_tree(self) -> bool:
        """True for any tag other than ``empty``, even when no payload lines follow it."""
        return self.heap_tree_kind != EMPTY_HEAP_TREE


@dataclass(frozen=True)
class MassifDocument:
    """A complete, validated Massif profile.

    Attributes:
        description: Value of the ``desc:`` header line, or None.
        binary: First whitespace token of ``cmd:``, or None.
        args: Remaining ``cmd:`` tokens, in order. Quoting is not
            interpreted: ``cmd: prog "a b"`` yields ``('"a', 'b"')``.
        time_unit: Value of the ``time_unit:`` header line, or None.
        snapshots: Every snapshot, in input order.
    """

    description: str | None = None
    binary: str | None = None
    args: tuple[str, ...] = ()
    time_unit: str | None = None
    snapshots: tuple[Snapshot, ...] = field(default_factory=tuple)

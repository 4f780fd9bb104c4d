"""
Parsers sub-package for massif-parse.

Turns the textual output of Valgrind's Massif into a MassifDocument.

Layout:
- base.py defines the MassifDocument / Snapshot models and grammar literals.
- cursor.py implements LineCursor, the forward-only line source wrapper.
- header.py recognises the optional desc / cmd / time_unit lines.
- snapshot.py recognises one fixed-grammar snapshot block.
- heap_tree.py captures the free-form heap tree payload of a block.
- massif.py implements MassifParser, which sequences the above.
"""

from massif_parse.parsers.base import MassifDocument, Snapshot
from massif_parse.parsers.massif import MassifParser, parse

__all__ = ["MassifDocument", "MassifParser", "Snapshot", "parse"]

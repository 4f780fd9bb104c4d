"""
Massif profile parser.

Sequences the recognizers over a single LineCursor:

1. Prime the cursor with the first line.
2. parse_header() consumes the optional desc / cmd / time_unit lines.
3. parse_snapshot() runs while the current line is the separator.
4. Anything left over is trailing content and is rejected.

The parse is all-or-nothing: the first FormatError raised by a recognizer
ends it, and no partially built document escapes. There is no attempt to
resynchronise on the next separator.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from massif_parse.exceptions import FormatError
from massif_parse.parsers.base import SNAPSHOT_SEPARATOR, MassifDocument, Snapshot
from massif_parse.parsers.cursor import LineCursor
from massif_parse.parsers.header import parse_header
from massif_parse.parsers.snapshot import parse_snapshot

logger = logging.getLogger(__name__)


class MassifParser:
    """Parser for Massif (``massif.out.<pid>``) profiles.

    Stateless: every call to parse() builds its own cursor, so one
    instance can be shared freely, including across threads.
    """

    def parse(self, source: Iterable[str]) -> MassifDocument:
        """Parse a Massif profile.

        Args:
            source: Any iterable of text lines, e.g. an open text file,
                ``io.StringIO`` or a list of strings. Line terminators
                are stripped if present.

        Returns:
            The complete MassifDocument.

        Raises:
            FormatError: If the input breaks the Massif grammar.
            OSError: Propagated unchanged from the source.
        """
        cursor = LineCursor(source)
        cursor.advance()

        header = parse_header(cursor)

        snapshots: list[Snapshot] = []
        while not cursor.at_end and cursor.current == SNAPSHOT_SEPARATOR:
            snapshots.append(parse_snapshot(cursor))

        if not cursor.at_end:
            raise FormatError(
                cursor.line_number, "trailing unparsable content starting on this line"
            )

        logger.info(
            "Parsed %d snapshot(s) from %d line(s)", len(snapshots), cursor.line_number
        )
        return MassifDocument(
            description=header.description,
            binary=header.binary,
            args=header.args,
            time_unit=header.time_unit,
            snapshots=tuple(snapshots),
        )


def parse(source: Iterable[str]) -> MassifDocument:
    """Parse a Massif profile from any iterable of lines."""
    return MassifParser().parse(source)

"""
Header recognizer for Massif profiles.

A profile may start with up to three header lines, always in this order:

    desc: --massif-out-file=/outs/blah.massif
    cmd: /some/foo/command --first-option --second-option
    time_unit: i

Every line is optional. Each candidate field is tested once against the
current line; a match consumes the line, a miss leaves it for the next
candidate.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from massif_parse.parsers.cursor import LineCursor

logger = logging.getLogger(__name__)

# Scan order of the optional header fields
_HEADER_FIELDS = ("desc", "cmd", "time_unit")


@dataclass
class Header:
    """Header fields recognised at the top of a profile."""
    description: str | None = None
    binary: str | None = None
    args: tuple[str, ...] = field(default_factory=tuple)
    time_unit: str | None = None


def _try_header_field(cursor: LineCursor, name: str) -> str | None:
    """Return the value of ``<name>: <value>`` and consume the line, or None."""
    line = cursor.current
    if cursor.at_end or not line.startswith(f"{name}: "):
        return None
    value = line.split(" ", 1)[1]
    cursor.advance()
    return value


def parse_header(cursor: LineCursor) -> Header:
    """Recognise the optional ``desc`` / ``cmd`` / ``time_unit`` lines.

    The ``cmd`` value is split on whitespace only: the first token is the
    binary, the rest are its arguments. Quoted or escaped arguments are
    not reassembled.
    """
    values = {name: _try_header_field(cursor, name) for name in _HEADER_FIELDS}

    header = Header(description=values["desc"], time_unit=values["time_unit"])
    command = values["cmd"]
    if command is not None:
        tokens = command.split()
        if tokens:
            header.binary = tokens[0]
            header.args = tuple(tokens[1:])

    logger.debug(
        "Header: desc=%r binary=%r args=%d time_unit=%r",
        header.description, header.binary, len(header.args), header.time_unit,
    )
    return header

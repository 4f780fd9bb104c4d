"""
Forward-only line cursor over a text line source.

The cursor is the only mutable state of a parse. One cursor is created per
parse call and handed to each recognizer, so concurrent parses of
different sources never share anything.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from massif_parse.exceptions import FormatError


def _strip_terminator(raw: str) -> str:
    """Remove a trailing ``\\n``, then one trailing ``\\r``; keep all other whitespace.

    The ``\\r`` goes even without a ``\\n`` after it, so the final line of a
    CRLF file that lacks a last newline reads the same as the others.
    """
    if raw.endswith("\n"):
        raw = raw[:-1]
    if raw.endswith("\r"):
        raw = raw[:-1]
    return raw


class LineCursor:
    """Pulls lines one at a time and tracks a 1-based line counter.

    Errors raised by the underlying source while reading (OSError,
    UnicodeDecodeError, ...) propagate unchanged.
    """

    def __init__(self, source: Iterable[str]) -> None:
        self._lines: Iterator[str] = iter(source)
        self._current = ""
        self._line_number = 0
        self._at_end = False

    @property
    def current(self) -> str:
        """The most recently read line, or ``""`` once the input is exhausted."""
        return self._current

    @property
    def line_number(self) -> int:
        return self._line_number

    @property
    def at_end(self) -> bool:
        return self._at_end

    def advance(self, eof_context: str | None = None) -> None:
        """Move to the next line.

        Args:
            eof_context: Name of the construct being parsed. When given,
                running out of input raises a FormatError naming it.
                When None, end of input just sets ``at_end``.

        Raises:
            FormatError: If the input is exhausted and *eof_context* is set.
        """
        if not self._at_end:
            try:
                raw = next(self._lines)
            except StopIteration:
                self._at_end = True
                self._current = ""
            else:
                self._current = _strip_terminator(raw)
                self._line_number += 1

        if self._at_end and eof_context is not None:
            raise FormatError(
                self._line_number,
                f"unexpected end of file while parsing {eof_context}",
            )

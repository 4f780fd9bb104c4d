"""
Custom exception hierarchy for massif-parse.

Why a custom hierarchy:
- Callers can catch a malformed profile (FormatError) separately from a
  bad report configuration (ConfigValidationError) or a failed write
  (ExportError) without relying on generic ValueError/RuntimeError.
- I/O failures from the line source are *not* part of this hierarchy.
  OSError and UnicodeDecodeError propagate unchanged so that a broken
  disk is never reported as a broken file format.
"""


class MassifParseError(Exception):
    """Base exception for all massif-parse errors."""


class FormatError(MassifParseError):
    """Raised when a Massif profile violates the output grammar.

    Carries the 1-based line number where the violation was detected and
    a human-readable cause. The string form is ``"[line N] <cause>"``.

    Covers:
    - a missing or mismatched ``#-----------`` separator,
    - a variable line with the wrong name or without ``=``,
    - a non-integer (or out of range) value for an integer variable,
    - end of file while a snapshot block is still incomplete,
    - trailing content that is neither a header field nor a snapshot.
    """

    def __init__(self, line_number: int, cause: str) -> None:
        super().__init__(f"[line {line_number}] {cause}")
        self.line_number = line_number
        self.cause = cause


class ConfigValidationError(MassifParseError):
    """Raised when a report configuration fails validation.

    This can happen if:
    - The YAML file is empty.
    - A requested size unit is not one of B, KiB, MiB, GiB, TiB.
    """


class ExportError(MassifParseError):
    """Raised when the exporter fails to write output files.

    For example, permission errors, disk full, or unsupported format.
    """

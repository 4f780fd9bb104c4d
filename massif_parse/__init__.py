"""
massif-parse: Python library for reading Valgrind Massif heap profiles.

Public API surface:

- ``parse(source)`` -- Parse any iterable of text lines (open file,
  ``io.StringIO``, list of strings) into a ``MassifDocument``.

- ``parse_file(path, encoding)`` -- Open a ``massif.out.<pid>`` file and
  parse it.

- ``init(...)`` -- First-run workflow. Generates a report YAML for a
  profile and optionally exports its snapshot tables. Returns a ``Report``.

- ``report(...)`` -- Subsequent-run workflow. Loads the report YAML and
  re-exports. Returns a ``Report``.
"""

from __future__ import annotations

import logging
from pathlib import Path

from massif_parse._pipeline import Report, parse_file, run_report
from massif_parse.config import generate_default_config, load_config, save_config
from massif_parse.exceptions import (
    ConfigValidationError,
    ExportError,
    FormatError,
    MassifParseError,
)
from massif_parse.parsers import MassifDocument, MassifParser, Snapshot, parse

__all__ = [
    "parse",
    "parse_file",
    "init",
    "report",
    "Report",
    "MassifDocument",
    "MassifParser",
    "Snapshot",
    "MassifParseError",
    "FormatError",
    "ConfigValidationError",
    "ExportError",
]

logger = logging.getLogger(__name__)


def init(
    input_path: str,
    output_dir: str = "outputs/",
    config_path: str | None = None,
    run_immediately: bool = True,
) -> Report:
    """First-run entry point: parse a profile, write its config, optionally export.

    Orchestration:
      1. ``parse_file()`` -> ``MassifDocument`` (fails fast on a bad profile,
         before any file is written).
      2. ``generate_default_config()`` -> ``ReportConfig``
      3. ``save_config()`` to *config_path*
      4. If *run_immediately* is True, export via ``run_report()``.

    Args:
        input_path: Path to the Massif output file.
        output_dir: Directory where output tables will be written.
        config_path: Where to write the generated YAML. If ``None``,
            derived as ``{output_dir}.yaml`` (sibling of output_dir).
        run_immediately: If False, only write the config and stop.

    Raises:
        FormatError: If the profile breaks the Massif grammar.
        OSError: If the profile cannot be read.
    """
    logger.info("init() -- input_path=%s, output_dir=%s", input_path, output_dir)

    if config_path is None:
        config_path = str(Path(output_dir.rstrip("/\\")).with_suffix(".yaml"))

    document = parse_file(input_path)

    config = generate_default_config(input_path=input_path, output_dir=output_dir)
    save_config(config, config_path)

    if run_immediately:
        logger.info("run_immediately=True -- exporting tables")
        return run_report(config, document)
    return Report(config=config, document=document)


def report(config_path: str = "massif-report.yaml") -> Report:
    """Subsequent-run entry point: load the report YAML, parse, export.

    Raises:
        FileNotFoundError: If *config_path* does not exist.
        pydantic.ValidationError: If the config fails Pydantic validation.
        ConfigValidationError: If the config file is empty.
        FormatError: If the profile breaks the Massif grammar.
        ExportError: If writing the output tables fails.
    """
    logger.info("report() -- config_path=%s", config_path)
    config = load_config(config_path)
    return run_report(config)

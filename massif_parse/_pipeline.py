"""
Internal report pipeline for massif-parse.

Extracted from ``__init__.py`` so that ``init()`` and ``report()`` share
the same parse -> frame -> unit normalisation -> export sequence.

This module is **not** part of the public API.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from massif_parse.config import ReportConfig
from massif_parse.export import export_tables
from massif_parse.parsers.base import MassifDocument
from massif_parse.parsers.massif import MassifParser
from massif_parse.transforms.frame import header_to_frame, snapshots_to_frame
from massif_parse.transforms.units import normalize_units

logger = logging.getLogger(__name__)

SNAPSHOTS_TABLE = "snapshots"


@dataclass
class Report:
    """Result of a report run.

    Attributes:
        config: The configuration the report was built from.
        document: The parsed profile.
        written: Paths of the exported files (empty if nothing was exported).
    """

    config: ReportConfig
    document: MassifDocument
    written: list[str] = field(default_factory=list)


def parse_file(path: str | Path, encoding: str = "utf-8") -> MassifDocument:
    """Open a Massif profile and parse it.

    Raises:
        FileNotFoundError / OSError: If the file cannot be opened or read.
        FormatError: If the content breaks the Massif grammar.
    """
    path = Path(path)
    logger.info("Parsing Massif profile: %s", path)
    with open(path, "r", encoding=encoding, newline="\n") as f:
        return MassifParser().parse(f)


def run_report(config: ReportConfig, document: MassifDocument | None = None) -> Report:
    """Build the snapshot and header tables and export them.

    Args:
        config: Report configuration.
        document: An already parsed document. If None, the profile at
            ``config.source.input_path`` is parsed first.
    """
    if document is None:
        document = parse_file(config.source.input_path, config.source.encoding)

    out = config.output
    snapshots_df = snapshots_to_frame(document, include_heap_tree=out.include_heap_tree)
    snapshots_df, unit_info = normalize_units(snapshots_df, out.size_unit)
    logger.info(
        "Built snapshot table: %d rows, %d byte column(s) in %s",
        len(snapshots_df), len(unit_info), out.size_unit,
    )

    header_df = header_to_frame(document, source_file=Path(config.source.input_path).name)
    written = export_tables(
        {SNAPSHOTS_TABLE: snapshots_df},
        header_df,
        out.output_dir,
        output_format=out.output_format,
    )
    return Report(config=config, document=document, written=written)

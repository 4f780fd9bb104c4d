"""
Exporter for massif-parse.

Writes the snapshot table and the _header table to the output directory
in the configured format (CSV, Parquet or JSON), and renders a whole
document as JSON for display.

Output file naming convention:
  {table_name}.{format}  -- e.g., "snapshots.parquet"
  "_header.{format}"     -- always written alongside data tables.

Why Parquet is the default:
- Preserves the int64 byte columns exactly (no re-parsing on load).
- Heap trees compress well in a columnar layout.

CSV and JSON are supported for spreadsheets and dashboards.
"""

from __future__ import annotations

import json
import logging
from dataclasses import asdict
from pathlib import Path
from typing import Any, Literal

import pandas as pd

from massif_parse.exceptions import ExportError
from massif_parse.parsers.base import MassifDocument

logger = logging.getLogger(__name__)

_SUPPORTED_FORMATS = {"csv", "parquet", "json"}


def _write_dataframe(
    df: pd.DataFrame,
    path: Path,
    output_format: str,
) -> None:
    """Write a single DataFrame to disk in the specified format.

    Raises:
        ExportError: If writing fails for any reason.
    """
    try:
        if output_format == "csv":
            df.to_csv(path, index=False, encoding="utf-8")
        elif output_format == "json":
            df.to_json(path, orient="records", indent=2)
        else:  # parquet
            df.to_parquet(path, index=False, engine="pyarrow")
    except Exception as exc:
        raise ExportError(
            f"Failed to write {path.name} as {output_format}: {exc}"
        ) from exc


def export_tables(
    tables: dict[str, pd.DataFrame],
    header_df: pd.DataFrame,
    output_dir: str | Path,
    output_format: Literal["csv", "parquet", "json"] = "parquet",
) -> list[str]:
    """Write data tables and the _header table to disk.

    The output directory is created recursively if it does not exist.

    Args:
        tables: Dict mapping table_name -> DataFrame.
        header_df: The _header DataFrame (see ``header_to_frame()``).
        output_dir: Directory to write files into (created if needed).
        output_format: "csv", "parquet" or "json".

    Returns:
        List of file paths (as strings) that were written, data tables
        first, then ``_header``.

    Raises:
        ExportError: If *output_format* is unsupported, or if any write fails.
    """
    if output_format not in _SUPPORTED_FORMATS:
        raise ExportError(
            f"Unsupported output format: '{output_format}'. "
            f"Supported formats: {sorted(_SUPPORTED_FORMATS)}"
        )

    out = Path(output_dir)
    out.mkdir(parents=True, exist_ok=True)

    written: list[str] = []

    for table_name, df in tables.items():
        file_path = out / f"{table_name}.{output_format}"
        _write_dataframe(df, file_path, output_format)
        written.append(str(file_path))
        logger.info(
            "Exported table '%s' -> %s (%d rows, %d cols)",
            table_name,
            file_path.name,
            len(df),
            len(df.columns),
        )

    header_path = out / f"_header.{output_format}"
    _write_dataframe(header_df, header_path, output_format)
    written.append(str(header_path))
    logger.info("Exported _header -> %s", header_path.name)

    return written


def document_to_dict(document: MassifDocument) -> dict[str, Any]:
    """Convert a document to plain dicts and lists (tuples become lists)."""
    data = asdict(document)
    data["args"] = list(document.args)
    data["snapshots"] = [asdict(s) for s in document.snapshots]
    return data


def document_to_json(document: MassifDocument, indent: int | None = 2) -> str:
    """Render a document as JSON, for display or hand-off to other tools."""
    return json.dumps(document_to_dict(document), indent=indent)

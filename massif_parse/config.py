"""
Configuration models and YAML I/O for massif-parse reports.

This module defines the Pydantic models that map 1:1 to a report YAML
file, plus helper functions for loading, saving, and auto-generating it.

Key models:
- ReportConfig: Top-level config (source + output).
- SourceConfig: Massif profile path and its text encoding.
- OutputConfig: Output directory, format, size unit and heap tree toggle.

Key functions:
- load_config(path) -> ReportConfig: Load and validate from YAML.
- save_config(config, path): Serialize to YAML.
- generate_default_config(...) -> ReportConfig: Build a config for a profile.

Example YAML::

    source:
      input_path: massif.out.12345
      encoding: utf-8
    output:
      output_dir: outputs/
      output_format: parquet
      size_unit: MiB
      include_heap_tree: false
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, Field

from massif_parse.exceptions import ConfigValidationError

logger = logging.getLogger(__name__)


class SourceConfig(BaseModel):
    """Source profile information."""

    input_path: str = Field(..., description="Path to the Massif output file")
    encoding: str = Field("utf-8", description="Text encoding of the profile")


class OutputConfig(BaseModel):
    """Output settings."""

    output_dir: str = Field("outputs/", description="Directory for output files")
    output_format: Literal["csv", "parquet", "json"] = Field(
        "parquet", description="Output format"
    )
    size_unit: Literal["B", "KiB", "MiB", "GiB", "TiB"] = Field(
        "B", description="Unit for byte columns; 'B' keeps exact integer counts"
    )
    include_heap_tree: bool = Field(
        True, description="If True, export the verbatim heap tree of each snapshot"
    )


class ReportConfig(BaseModel):
    """Top-level configuration for a massif-parse report."""

    source: SourceConfig
    output: OutputConfig = Field(default_factory=OutputConfig)


def load_config(path: str | Path) -> ReportConfig:
    """Load and validate a report YAML file into a ReportConfig model.

    Raises:
        FileNotFoundError: If the config file does not exist.
        ConfigValidationError: If the file is empty.
        pydantic.ValidationError: If the YAML content fails schema validation.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f)
    if raw is None:
        raise ConfigValidationError(f"Config file is empty: {path}")
    logger.info("Loaded config from %s", path)
    return ReportConfig.model_validate(raw)


def save_config(config: ReportConfig, path: str | Path) -> None:
    """Serialize a ReportConfig to YAML with a header comment."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    data = config.model_dump(mode="json")
    with open(path, "w", encoding="utf-8") as f:
        f.write("# massif-parse report configuration\n")
        f.write("# Edit this file to change the output format, size unit, etc.\n\n")
        yaml.dump(data, f, default_flow_style=False, sort_keys=False)
    logger.info("Saved config to %s", path)


def generate_default_config(
    input_path: str,
    output_dir: str = "outputs/",
    encoding: str = "utf-8",
) -> ReportConfig:
    """Build a ReportConfig for *input_path* with default output settings."""
    return ReportConfig(
        source=SourceConfig(input_path=input_path, encoding=encoding),
        output=OutputConfig(output_dir=output_dir),
    )

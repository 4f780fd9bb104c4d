"""
Byte unit conversion for massif-parse.

The parser always returns exact byte counts. This module converts them
for display, either one value at a time or for whole DataFrame columns.

Supported units and their multipliers (IEC, powers of 1024):
  B    -> 1
  KiB  -> 1,024
  MiB  -> 1,048,576
  GiB  -> 1,073,741,824
  TiB  -> 1,099,511,627,776

Byte columns are recognised by their suffix, following the Massif variable
names: ``mem_heap_B``, ``mem_heap_extra_B``, ``mem_stacks_B``. After
scaling, the suffix is renamed (``mem_heap_B`` -> ``mem_heap_MiB``).
"""

from __future__ import annotations

import re

import pandas as pd

from massif_parse.exceptions import ConfigValidationError

# Mapping from unit suffix to multiplier, smallest first
UNIT_MULTIPLIERS: dict[str, int] = {
    "B": 1,
    "KiB": 1024,
    "MiB": 1024**2,
    "GiB": 1024**3,
    "TiB": 1024**4,
}

# Regex to extract the unit suffix from a column name like "mem_heap_B"
_UNIT_SUFFIX_RE = re.compile(r"_([A-Za-z]+)$")


def _multiplier(unit: str) -> int:
    try:
        return UNIT_MULTIPLIERS[unit]
    except KeyError:
        raise ConfigValidationError(
            f"Unsupported size unit: '{unit}'. "
            f"Supported units: {list(UNIT_MULTIPLIERS)}"
        ) from None


def detect_unit(column_name: str) -> tuple[str | None, int]:
    """Detect the byte unit suffix in a column name.

    Args:
        column_name: e.g., "mem_heap_B" or "mem_heap_MiB"

    Returns:
        Tuple of (unit_suffix, multiplier). If no byte unit is found,
        returns (None, 1).
    """
    match = _UNIT_SUFFIX_RE.search(column_name)
    if not match:
        return None, 1
    unit = match.group(1)
    if unit not in UNIT_MULTIPLIERS:
        # "heap_tree_kind" and friends end in words, not units
        return None, 1
    return unit, UNIT_MULTIPLIERS[unit]


def convert_bytes(value: int, unit: str) -> float:
    """Convert a byte count to *unit*.

    Raises:
        ConfigValidationError: If *unit* is not a supported unit.
    """
    return value / _multiplier(unit)


def format_bytes(value: int, precision: int = 2) -> str:
    """Render a byte count with the largest unit that keeps it >= 1.

    Examples: ``512`` -> ``"512 B"``, ``2758273`` -> ``"2.63 MiB"``.
    The unit is chosen after rounding, so ``1048575`` gives ``"1.00 MiB"``.
    """
    if abs(value) < UNIT_MULTIPLIERS["KiB"]:
        return f"{value} B"
    units = [u for u in UNIT_MULTIPLIERS if u != "B"]
    for i, unit in enumerate(units):
        scaled = round(value / UNIT_MULTIPLIERS[unit], precision)
        if abs(scaled) < 1024 or i == len(units) - 1:
            return f"{scaled:.{precision}f} {unit}"


def normalize_column_name(column_name: str, original_unit: str, target_unit: str) -> str:
    """Rename a column suffix from original_unit to target_unit.

    Example: ("mem_heap_B", "B", "MiB") -> "mem_heap_MiB"
    """
    return column_name[: -len(original_unit)] + target_unit


def normalize_units(
    df: pd.DataFrame, target_unit: str = "B"
) -> tuple[pd.DataFrame, dict[str, tuple[str, int]]]:
    """Scale byte columns to *target_unit* and rename their suffixes.

    For each column whose name carries a byte unit suffix (e.g.
    ``mem_heap_B``), this function:

    1. Rescales the values from the column's unit to *target_unit*.
    2. Renames the suffix (``mem_heap_B`` -> ``mem_heap_MiB``).

    Columns already in *target_unit* are recorded in ``unit_info`` but are
    *not* modified, so ``target_unit="B"`` keeps exact integer counts.

    Args:
        df: DataFrame, typically from ``snapshots_to_frame()``.
        target_unit: One of ``UNIT_MULTIPLIERS``.

    Returns:
        Tuple of (transformed DataFrame, unit_info dict).
        unit_info maps original_column_name -> (original_unit, multiplier)
        for every column where a byte unit was detected.

    Raises:
        ConfigValidationError: If *target_unit* is not supported.
    """
    target_multiplier = _multiplier(target_unit)
    df = df.copy()
    unit_info: dict[str, tuple[str, int]] = {}
    rename_map: dict[str, str] = {}

    for col in df.columns:
        unit, multiplier = detect_unit(col)
        if unit is None:
            continue

        unit_info[col] = (unit, multiplier)

        if unit != target_unit:
            df[col] = df[col] * multiplier / target_multiplier
            rename_map[col] = normalize_column_name(col, unit, target_unit)

    # Apply all renames at once to avoid intermediate collisions
    if rename_map:
        df = df.rename(columns=rename_map)

    return df, unit_info

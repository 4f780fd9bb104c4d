"""
Demo script: parse Massif profiles and export their snapshot tables.

Usage:
    uv run python scripts/run_report.py massif.out.1234 [massif.out.5678 ...]
    uv run python scripts/run_report.py --json massif.out.1234   # print the document

Each profile gets its own output subdirectory and report YAML under outputs/.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------

OUTPUT_ROOT = Path("outputs")

# ---------------------------------------------------------------------------
# Logging setup
# ---------------------------------------------------------------------------

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
    datefmt="%H:%M:%S",
)
log = logging.getLogger("run_report")


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------

def main() -> int:
    import massif_parse
    from massif_parse.export import document_to_json
    from massif_parse.summary import describe

    args = [a for a in sys.argv[1:] if not a.startswith("--")]
    as_json = "--json" in sys.argv
    if not args:
        print(__doc__)
        return 2

    failed = 0
    for input_path in args:
        if not Path(input_path).exists():
            log.warning("SKIP  %s  (file not found)", input_path)
            continue

        if as_json:
            print(document_to_json(massif_parse.parse_file(input_path)))
            continue

        name = Path(input_path).name.replace(".", "_")
        output_dir = str(OUTPUT_ROOT / name)
        config_path = str(OUTPUT_ROOT / f"{name}.yaml")

        log.info("=" * 70)
        log.info("Processing: %s", input_path)
        log.info("  output_dir  : %s", output_dir)
        log.info("  config_path : %s", config_path)
        log.info("=" * 70)

        try:
            result = massif_parse.init(
                input_path, output_dir=output_dir, config_path=config_path
            )
        except massif_parse.FormatError as exc:
            log.error("Malformed profile %s: %s", input_path, exc)
            failed += 1
            continue

        info = describe(result.document)
        log.info(
            "  %d snapshots (%d detailed), peak %s in snapshot %s at time %s%s",
            info.snapshot_count,
            info.detailed_count,
            info.peak_heap,
            info.peak_index,
            info.peak_time,
            info.time_unit or "",
        )
        log.info("Done: %s\n", name)

    log.info("All files processed.")
    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())

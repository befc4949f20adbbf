"""
Demo script: read the /proc/net/sctp tables and export them.

Usage:
    python scripts/dump_snapshot.py                      # /proc/net/sctp -> outputs/sctp
    python scripts/dump_snapshot.py --config sctp.yaml   # settings from a config file

Without --config the live tables are read and written as Parquet under
outputs/sctp/. The effective config is saved next to the output
directory so later runs can reuse it.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------

OUTPUT_DIR = Path("outputs") / "sctp"

# ---------------------------------------------------------------------------
# Logging setup
# ---------------------------------------------------------------------------

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
    datefmt="%H:%M:%S",
)
log = logging.getLogger("dump_snapshot")


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------

def main() -> None:
    import sctp_procfs
    from sctp_procfs.config import OutputConfig

    if "--config" in sys.argv:
        config_path = sys.argv[sys.argv.index("--config") + 1]
        config = sctp_procfs.load_config(config_path)
    else:
        config = sctp_procfs.SnapshotConfig(output=OutputConfig(output_dir=str(OUTPUT_DIR)))
        config_path = str(OUTPUT_DIR.with_suffix(".yaml"))
        sctp_procfs.save_config(config, config_path)

    log.info("Reading tables from %s", config.source.proc_dir)
    try:
        snapshot = sctp_procfs.read_snapshot(config)
    except FileNotFoundError as exc:
        log.error("Cannot read SCTP tables (is the sctp module loaded?): %s", exc)
        sys.exit(1)

    for table_name in snapshot.tables:
        log.info("  Table '%s': %d records", table_name, len(snapshot.records(table_name)))

    written = sctp_procfs.export_snapshot(snapshot, config)
    for path in written:
        log.info("  wrote %s", path)


if __name__ == "__main__":
    main()

"""
Meta table builder for sctp-procfs.

Builds the flat _meta table that is output alongside the table
exports: one row per table read into a snapshot, recording where it
came from (path and SHA-256 of the file at export time), how many
records it produced and when the snapshot was taken.

Pseudo-files under /proc change between reads, so the hash is most
useful for snapshots read from saved copies of the tables.
"""

from __future__ import annotations

import hashlib
import logging
from pathlib import Path

import pandas as pd

from sctp_procfs.snapshot import Snapshot

logger = logging.getLogger(__name__)

META_COLUMNS = ["table_name", "source_file", "source_hash", "num_rows", "captured_at"]


def _compute_file_hash(path: Path) -> str:
    """Compute SHA-256 hash of a file for reproducibility tracking."""
    h = hashlib.sha256()
    with open(path, "rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def build_meta_table(snapshot: Snapshot) -> pd.DataFrame:
    """Build the flat _meta table for a snapshot.

    Returns:
        DataFrame with one row per table in ``snapshot.sources`` and
        columns table_name, source_file, source_hash, num_rows,
        captured_at.
    """
    rows: list[dict] = []
    for table_name, source in snapshot.sources.items():
        source_path = Path(source)
        try:
            source_hash = _compute_file_hash(source_path)
        except FileNotFoundError:
            logger.warning(
                "Source file not found for hashing: %s (using empty hash)",
                source_path,
            )
            source_hash = ""

        rows.append(
            {
                "table_name": table_name,
                "source_file": str(source_path),
                "source_hash": source_hash,
                "num_rows": len(snapshot.records(table_name)),
                "captured_at": snapshot.captured_at,
            }
        )

    logger.info("Built _meta table: %d rows", len(rows))
    return pd.DataFrame(rows, columns=META_COLUMNS)

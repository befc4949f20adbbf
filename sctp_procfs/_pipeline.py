"""
Internal read -> meta -> export orchestration for sctp-procfs.

Kept apart from snapshot.py so that meta.py can depend on the Snapshot
type without a circular import.

This module is **not** part of the public API.
"""

from __future__ import annotations

import logging

from sctp_procfs.config import SnapshotConfig
from sctp_procfs.export import export_tables
from sctp_procfs.meta import build_meta_table
from sctp_procfs.snapshot import Snapshot

logger = logging.getLogger(__name__)


def export_snapshot(snapshot: Snapshot, config: SnapshotConfig) -> list[str]:
    """Write every table of *snapshot* plus ``_meta`` per ``config.output``.

    Returns:
        List of output file paths that were written.
    """
    written = export_tables(
        tables=snapshot.frames(),
        meta_df=build_meta_table(snapshot),
        output_dir=config.output.output_dir,
        output_format=config.output.output_format,
    )
    logger.info("Snapshot export complete: wrote %d files", len(written))
    return written


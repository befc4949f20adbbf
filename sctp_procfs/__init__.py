"""
sctp-procfs: parsers for the Linux /proc/net/sctp tables.

Public API surface:

- ``parse_assocs(lines, header=True)``, ``parse_eps(...)``,
  ``parse_remaddr(...)`` -- parse one table from any iterable of text
  lines (an open file, ``io.StringIO``, a list) into immutable records.

- ``parse_table(lines)`` -- detect the table from its header line, then
  parse it.

- ``read_snapshot(config)`` -- open and parse the configured table files
  (default ``/proc/net/sctp``) into a ``Snapshot``.

- ``export_snapshot(snapshot, config)`` -- write a snapshot's tables and
  a ``_meta`` lineage table as CSV or Parquet.

Examples::

    with open("/proc/net/sctp/assocs", encoding="utf-8") as f:
        assocs = sctp_procfs.parse_assocs(f)

    snapshot = sctp_procfs.read_snapshot()
    sctp_procfs.export_snapshot(snapshot, sctp_procfs.SnapshotConfig())
"""

from __future__ import annotations

from sctp_procfs._pipeline import export_snapshot
from sctp_procfs.config import SnapshotConfig, load_config, save_config
from sctp_procfs.detect import detect_table, get_parser, parse_table
from sctp_procfs.exceptions import (
    ConfigValidationError,
    ExportError,
    InvalidFormatError,
    ParsingError,
    SctpProcError,
    TooFewFieldsError,
    UnknownFormatError,
)
from sctp_procfs.models import AssociationRecord, EndpointRecord, RemoteAddressRecord
from sctp_procfs.parsers import parse_assocs, parse_eps, parse_remaddr
from sctp_procfs.snapshot import Snapshot, read_snapshot

__all__ = [
    "AssociationRecord",
    "ConfigValidationError",
    "EndpointRecord",
    "ExportError",
    "InvalidFormatError",
    "ParsingError",
    "RemoteAddressRecord",
    "SctpProcError",
    "Snapshot",
    "SnapshotConfig",
    "TooFewFieldsError",
    "UnknownFormatError",
    "detect_table",
    "export_snapshot",
    "get_parser",
    "load_config",
    "parse_assocs",
    "parse_eps",
    "parse_remaddr",
    "parse_table",
    "read_snapshot",
    "save_config",
]

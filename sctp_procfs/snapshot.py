"""
Snapshot of the /proc/net/sctp tables.

read_snapshot() is the caller-side layer over the parsers: it opens the
configured table files, hands each one to its parser and collects the
results in an immutable ``Snapshot``. The parsers themselves never open
files.

The three tables are kept side by side; nothing here joins an
association to its endpoint or remote-address rows.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime, timezone
from types import MappingProxyType

import pandas as pd

from sctp_procfs.config import SnapshotConfig
from sctp_procfs.detect import get_parser
from sctp_procfs.frames import records_to_frame
from sctp_procfs.models import AssociationRecord, EndpointRecord, RemoteAddressRecord

logger = logging.getLogger(__name__)

# table name -> Snapshot attribute
_TABLE_ATTRS = {"assocs": "assocs", "eps": "eps", "remaddr": "remaddrs"}


@dataclass(frozen=True)
class Snapshot:
    """Parsed contents of the /proc/net/sctp tables at one point in time.

    Attributes:
        assocs: Records from the associations table.
        eps: Records from the endpoints table.
        remaddrs: Records from the remote-address table.
        sources: Table name -> path of the file it was read from. Only
            tables that were actually read appear here; read-only.
        captured_at: UTC ISO-8601 timestamp of the read.
    """

    assocs: tuple[AssociationRecord, ...] = ()
    eps: tuple[EndpointRecord, ...] = ()
    remaddrs: tuple[RemoteAddressRecord, ...] = ()
    sources: Mapping[str, str] = field(default_factory=dict)
    captured_at: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "sources", MappingProxyType(dict(self.sources)))

    @property
    def tables(self) -> list[str]:
        return list(self.sources)

    def records(self, table_name: str) -> tuple:
        """Return the records of *table_name*."""
        try:
            return getattr(self, _TABLE_ATTRS[table_name])
        except KeyError:
            raise KeyError(
                f"Unknown table '{table_name}'. Known tables: {list(_TABLE_ATTRS)}"
            ) from None

    def frames(self) -> dict[str, pd.DataFrame]:
        """One DataFrame per table that was read."""
        return {name: records_to_frame(name, self.records(name)) for name in self.sources}


def read_snapshot(config: SnapshotConfig | None = None) -> Snapshot:
    """Read and parse every configured table.

    Args:
        config: Snapshot config; defaults read all three tables from
            /proc/net/sctp with header lines.

    Returns:
        A Snapshot. Tables not listed in ``config.tables`` stay empty.

    Raises:
        FileNotFoundError: If a configured table file does not exist
            (e.g., the sctp module is not loaded).
        TooFewFieldsError, InvalidFormatError: If a table is malformed.
    """
    config = config or SnapshotConfig()
    captured_at = datetime.now(timezone.utc).isoformat(timespec="seconds")

    parsed: dict[str, tuple] = {}
    sources: dict[str, str] = {}
    for table_name in config.tables:
        path = config.source.path_for(table_name)
        with open(path, "r", encoding="utf-8") as f:
            records = get_parser(table_name).parse(f, header=config.source.header)
        parsed[_TABLE_ATTRS[table_name]] = tuple(records)
        sources[table_name] = str(path)
        logger.info("Read %s: %d records from %s", table_name, len(records), path)

    return Snapshot(**parsed, sources=sources, captured_at=captured_at)

"""
Record types for the three /proc/net/sctp tables.

Every record is produced fresh per line and is immutable: the
dataclasses are frozen and address lists are stored as tuples.
Attribute names map to the kernel's published column names through
the layout YAML files (see layout_registry.py).
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class AssociationRecord:
    """One line of /proc/net/sctp/assocs."""
    assoc: int
    sock: int
    sock_type: int
    sock_state: int
    state: int
    hash_bucket: int
    assoc_id: int
    tx_queue: int
    rx_queue: int
    uid: int
    inode: int
    local_port: int
    remote_port: int
    local_addrs: tuple[str, ...]
    remote_addrs: tuple[str, ...]
    hb_interval: int
    in_streams: int
    out_streams: int
    max_retrans: int
    t1x: int
    t2x: int
    retrans_count: int
    wmem_alloc: int
    wmem_queued: int
    sndbuf: int
    rcvbuf: int


@dataclass(frozen=True)
class EndpointRecord:
    """One line of /proc/net/sctp/eps."""
    endpoint: int
    sock: int
    sock_type: int
    sock_state: int
    hash_bucket: int
    local_port: int
    uid: int
    inode: int
    local_addrs: tuple[str, ...]


@dataclass(frozen=True)
class RemoteAddressRecord:
    """One line of /proc/net/sctp/remaddr."""
    addr: str
    assoc_id: int
    hb_active: int
    rto: int
    max_path_retrans: int
    rem_addr_retrans: int
    start: int
    state: int


Record = AssociationRecord | EndpointRecord | RemoteAddressRecord

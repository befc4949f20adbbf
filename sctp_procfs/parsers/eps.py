"""
Parser for /proc/net/sctp/eps.

Input structure (one endpoint per line)::

    ENDPT SOCK STY SST HBKT LPORT UID INODE LADDRS...

Every token after the 8 fixed columns is a bound local address, kept
verbatim.
"""

from __future__ import annotations

from collections.abc import Iterable

from sctp_procfs.models import EndpointRecord
from sctp_procfs.parsers.base import BaseTableParser


class EpsParser(BaseTableParser):
    """Parser for the SCTP endpoints table."""

    table_name = "eps"
    record_cls = EndpointRecord

    def split_addresses(
        self, tokens: list[str], line_number: int
    ) -> dict[str, tuple[str, ...]]:
        local_spec = self.layout.addresses.local
        return {local_spec.attr: tuple(tokens[len(self.layout.prefix):])}


def parse_eps(lines: Iterable[str] | str, header: bool = True) -> list[EndpointRecord]:
    """Parse the contents of /proc/net/sctp/eps.

    Raises:
        TooFewFieldsError: If a line has fewer than 9 tokens.
        InvalidFormatError: If a column fails to decode.
    """
    return EpsParser().parse(lines, header=header)

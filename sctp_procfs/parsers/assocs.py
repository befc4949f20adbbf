"""
Parser for /proc/net/sctp/assocs.

Input structure (one association per line)::

    ASSOC SOCK STY SST ST HBKT ASSOC-ID TX_QUEUE RX_QUEUE UID INODE LPORT RPORT
        LADDRS... <-> RADDRS...
        HBINT INS OUTS MAXRT T1X T2X RTXC wmema wmemq sndbuf rcvbuf

Both address lists are variable-length, so they are located from both
ends of the line: local addresses run from the end of the 13 prefix
columns up to the first ``<->`` token, remote addresses run from just
after ``<->`` up to the 11 suffix columns counted back from the end of
the line. The kernel marks the primary remote path with a leading
``*``; that marker is stripped.

Example::

    0 0 2 1 3 0 60 0 496 0 188897 12345 54321 127.0.0.1 <-> *127.0.0.2 30000 65535 65535 10 0 0 0 1 0 212992 212992
"""

from __future__ import annotations

from collections.abc import Iterable

from sctp_procfs.exceptions import InvalidFormatError
from sctp_procfs.models import AssociationRecord
from sctp_procfs.parsers.base import BaseTableParser


class AssocsParser(BaseTableParser):
    """Parser for the SCTP associations table."""

    table_name = "assocs"
    record_cls = AssociationRecord

    def split_addresses(
        self, tokens: list[str], line_number: int
    ) -> dict[str, tuple[str, ...]]:
        addresses = self.layout.addresses
        local_spec, remote_spec = addresses.local, addresses.remote
        separator = addresses.separator

        start = len(self.layout.prefix)
        boundary = len(tokens) - len(self.layout.suffix)

        try:
            sep_index = tokens.index(separator, start)
        except ValueError:
            raise InvalidFormatError(
                self.table_name,
                local_spec.column,
                line_number,
                f"no '{separator}' separator between "
                f"{local_spec.column} and {remote_spec.column}",
            ) from None

        local_addrs = tuple(tokens[start:sep_index])
        if not local_addrs:
            raise InvalidFormatError(
                self.table_name, local_spec.column, line_number, "empty address list"
            )

        # sep_index >= boundary also lands here: the separator sits inside
        # the fixed trailing columns.
        remote_addrs = tuple(
            token.strip(remote_spec.strip) for token in tokens[sep_index + 1:boundary]
        )
        if not remote_addrs:
            raise InvalidFormatError(
                self.table_name, remote_spec.column, line_number, "empty address list"
            )
        if not all(remote_addrs):
            raise InvalidFormatError(
                self.table_name, remote_spec.column, line_number,
                f"address made only of '{remote_spec.strip}'",
            )

        return {local_spec.attr: local_addrs, remote_spec.attr: remote_addrs}


def parse_assocs(
    lines: Iterable[str] | str, header: bool = True
) -> list[AssociationRecord]:
    """Parse the contents of /proc/net/sctp/assocs.

    Args:
        lines: The table contents as an iterable of lines (or one string).
        header: False if the input has no header line.

    Returns:
        One AssociationRecord per non-blank line, in input order.

    Raises:
        TooFewFieldsError: If a line has fewer than 27 tokens.
        InvalidFormatError: If a column fails to decode or the
            ``<->`` separator is missing.
    """
    return AssocsParser().parse(lines, header=header)

"""
Parser for /proc/net/sctp/remaddr.

Input structure (one peer transport address per line)::

    ADDR ASSOC_ID HB_ACT RTO MAX_PATH_RTX REM_ADDR_RTX START STATE

All columns are fixed; ADDR is kept verbatim.
"""

from __future__ import annotations

from collections.abc import Iterable

from sctp_procfs.models import RemoteAddressRecord
from sctp_procfs.parsers.base import BaseTableParser


class RemaddrParser(BaseTableParser):
    """Parser for the SCTP remote address table."""

    table_name = "remaddr"
    record_cls = RemoteAddressRecord

    def split_addresses(
        self, tokens: list[str], line_number: int
    ) -> dict[str, tuple[str, ...]]:
        return {}


def parse_remaddr(
    lines: Iterable[str] | str, header: bool = True
) -> list[RemoteAddressRecord]:
    """Parse the contents of /proc/net/sctp/remaddr.

    Raises:
        TooFewFieldsError: If a line has fewer than 8 tokens.
        InvalidFormatError: If a column fails to decode.
    """
    return RemaddrParser().parse(lines, header=header)

"""
Parsers sub-package for sctp-procfs.

Contains one parser per /proc/net/sctp table, converting raw table
text into immutable record dataclasses.

- base.py defines BaseTableParser: header/blank-line handling, line
  numbering, the minimum-field check and layout-driven field decoding.
- numbers.py holds the shared integer conversion helper.
- assocs.py, eps.py and remaddr.py implement the per-table address
  extraction and expose parse_assocs(), parse_eps(), parse_remaddr().

detect.py in the parent package selects the parser from a header line.
"""

from sctp_procfs.parsers.assocs import AssocsParser, parse_assocs
from sctp_procfs.parsers.base import BaseTableParser
from sctp_procfs.parsers.eps import EpsParser, parse_eps
from sctp_procfs.parsers.remaddr import RemaddrParser, parse_remaddr

__all__ = [
    "AssocsParser",
    "BaseTableParser",
    "EpsParser",
    "RemaddrParser",
    "parse_assocs",
    "parse_eps",
    "parse_remaddr",
]

"""
Table detection for /proc/net/sctp contents.

Each layout YAML declares the leading header tokens of its table
(``ASSOC SOCK``, ``ENDPT SOCK``, ``ADDR ASSOC_ID``). Given a header
line, detect_table() returns the matching table name; parse_table()
combines detection and parsing for input whose table is not known in
advance.

Detection algorithm:
1. Load all layout YAML files from sctp_procfs/layouts/.
2. Tokenize the header line.
3. Return the first layout whose header_startswith tokens lead the line.
4. Fallback: raise UnknownFormatError.
"""

from __future__ import annotations

import io
import itertools
import logging
from collections.abc import Iterable
from typing import Any

from sctp_procfs.exceptions import UnknownFormatError
from sctp_procfs.layout_registry import load_all_layouts
from sctp_procfs.parsers.assocs import AssocsParser
from sctp_procfs.parsers.base import BaseTableParser, tokenize
from sctp_procfs.parsers.eps import EpsParser
from sctp_procfs.parsers.remaddr import RemaddrParser

logger = logging.getLogger(__name__)

_PARSER_MAP: dict[str, type[BaseTableParser]] = {
    "assocs": AssocsParser,
    "eps": EpsParser,
    "remaddr": RemaddrParser,
}


def get_parser(table_name: str) -> BaseTableParser:
    """Return a parser instance for *table_name*.

    Raises:
        UnknownFormatError: If *table_name* is not a known table.
    """
    try:
        parser_cls = _PARSER_MAP[table_name]
    except KeyError:
        raise UnknownFormatError(
            f"Unknown table '{table_name}'. Known tables: {sorted(_PARSER_MAP)}"
        ) from None
    return parser_cls()


def detect_table(header_line: str) -> str:
    """Identify which /proc/net/sctp table a header line belongs to.

    Raises:
        UnknownFormatError: If the header matches no known layout.
    """
    tokens = tokenize(header_line)
    for layout in load_all_layouts():
        if layout.matches_header(tokens):
            logger.debug("Detected table: %s", layout.table_name)
            return layout.table_name

    snippet = header_line.strip()[:80]
    raise UnknownFormatError(
        f"Header does not match any known /proc/net/sctp table: {snippet!r}"
    )


def parse_table(lines: Iterable[str] | str) -> tuple[str, list[Any]]:
    """Detect the table from its header line, then parse it.

    The header counts as line 1 for error reporting.

    Returns:
        ``(table_name, records)``.

    Raises:
        UnknownFormatError: If the input is empty or the header is unknown.
        TooFewFieldsError: If a data line is too short.
        InvalidFormatError: If a column fails to decode.
    """
    if isinstance(lines, str):
        lines = io.StringIO(lines, newline=None)
    it = iter(lines)

    header_line = next(it, None)
    if header_line is None:
        raise UnknownFormatError("Empty input: no header line to detect a table from")

    table_name = detect_table(header_line)
    records = get_parser(table_name).parse(itertools.chain([header_line], it), header=True)
    return table_name, records

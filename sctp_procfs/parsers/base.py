"""
Base table parser for sctp-procfs.

All table parsers share the same reading contract:
1. parse() takes a line source and a header flag and returns a list of
   records, one per non-blank line, in input order.
2. Line numbers are 1-based and count every consumed line, including
   the header and blank lines, so errors point at the physical line.
3. A line with fewer tokens than the layout minimum raises
   TooFewFieldsError; any column that fails to decode raises
   InvalidFormatError. Either aborts the whole read.

Decoding a line walks the layout grammar: fixed prefix columns from the
start, the address region (delegated to split_addresses(), the one step
that differs per table), then fixed suffix columns counted from the end.
"""

from __future__ import annotations

import io
import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import Any, ClassVar

from sctp_procfs.exceptions import TooFewFieldsError
from sctp_procfs.layout_registry import FieldSpec, TableLayout, load_layout
from sctp_procfs.parsers.numbers import parse_int_field

logger = logging.getLogger(__name__)


def tokenize(line: str) -> list[str]:
    """Split a line on runs of whitespace, dropping empty tokens."""
    return line.split()


class BaseTableParser(ABC):
    """Abstract base class for /proc/net/sctp table parsers.

    Subclasses set ``table_name`` and ``record_cls`` and implement
    split_addresses(). The column layout itself comes from the table's
    YAML file.
    """

    table_name: ClassVar[str]
    record_cls: ClassVar[type]

    def __init__(self) -> None:
        self.layout: TableLayout = load_layout(self.table_name)

    @property
    def min_fields(self) -> int:
        return self.layout.min_fields

    # -----------------------------------------------------------------
    # Table reading
    # -----------------------------------------------------------------

    def parse(self, lines: Iterable[str] | str, header: bool = True) -> list[Any]:
        """Parse a whole table.

        Args:
            lines: Any iterable of text lines (an open file, a list,
                ``io.StringIO``). A plain string is read as a file would be,
                splitting on newlines only.
            header: True if the first line is a header to skip.

        Returns:
            List of records in input order; empty if the input holds
            only a header and/or blank lines.

        Raises:
            TooFewFieldsError: If a line is shorter than the table minimum.
            InvalidFormatError: If a column fails to decode.
        """
        if isinstance(lines, str):
            lines = io.StringIO(lines, newline=None)
        it = iter(lines)

        first_line_number = 1
        if header:
            next(it, None)
            first_line_number = 2

        records: list[Any] = []
        for line_number, line in enumerate(it, start=first_line_number):
            tokens = tokenize(line)
            if not tokens:
                continue
            if len(tokens) < self.min_fields:
                raise TooFewFieldsError(
                    self.table_name, line_number, len(tokens), self.min_fields
                )
            records.append(self.decode_line(tokens, line_number))

        logger.debug("Parsed %s: %d records", self.table_name, len(records))
        return records

    # -----------------------------------------------------------------
    # Line decoding
    # -----------------------------------------------------------------

    def decode_line(self, tokens: list[str], line_number: int) -> Any:
        """Decode one tokenized, length-checked line into a record."""
        values: dict[str, Any] = {}
        for spec, token in zip(self.layout.prefix, tokens):
            values[spec.attr] = self._decode_field(spec, token, line_number)

        values.update(self.split_addresses(tokens, line_number))

        suffix = self.layout.suffix
        if suffix:
            for spec, token in zip(suffix, tokens[-len(suffix):]):
                values[spec.attr] = self._decode_field(spec, token, line_number)

        return self.record_cls(**values)

    @abstractmethod
    def split_addresses(
        self, tokens: list[str], line_number: int
    ) -> dict[str, tuple[str, ...]]:
        """Extract the address lists lying between prefix and suffix.

        Returns:
            Mapping of record attribute name -> tuple of addresses.
            Empty when the table has no address region.
        """

    def _decode_field(self, spec: FieldSpec, token: str, line_number: int) -> Any:
        if spec.kind == "str":
            return token
        return parse_int_field(
            token,
            column=spec.column,
            line_number=line_number,
            table=self.table_name,
            base=spec.base,
            bits=spec.bits,
            signed=spec.signed,
        )

    # -----------------------------------------------------------------
    # Formatting
    # -----------------------------------------------------------------

    def format_record(self, record: Any) -> str:
        """Render a record back to a single-space-joined table line.

        Base-16 columns are written in lower-case hex without prefix.
        Stripped characters (the ``*`` marker on assocs remote
        addresses) are not restored.
        """
        parts = [
            self._format_field(spec, getattr(record, spec.attr))
            for spec in self.layout.prefix
        ]

        addresses = self.layout.addresses
        if addresses is not None:
            parts.extend(getattr(record, addresses.local.attr))
            if addresses.remote is not None:
                parts.append(addresses.separator)
                parts.extend(getattr(record, addresses.remote.attr))

        parts.extend(
            self._format_field(spec, getattr(record, spec.attr))
            for spec in self.layout.suffix
        )
        return " ".join(parts)

    @staticmethod
    def _format_field(spec: FieldSpec, value: Any) -> str:
        if spec.kind == "str":
            return value
        if spec.base == 16:
            return format(value, "x")
        return str(value)

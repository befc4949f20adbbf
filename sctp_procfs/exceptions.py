"""
Custom exception hierarchy for sctp-procfs.

Callers can catch a specific failure (e.g., TooFewFieldsError vs
InvalidFormatError) or the package-wide SctpProcError. Parsing errors
carry the table name and the 1-based line number of the offending
line so a report can point straight at it.
"""

from __future__ import annotations


class SctpProcError(Exception):
    """Base exception for all sctp-procfs errors."""


class ParsingError(SctpProcError):
    """Raised when a table line or layout cannot be decoded."""


class TooFewFieldsError(ParsingError):
    """Raised when a line has fewer tokens than its table requires.

    Attributes:
        table: Table name ("assocs", "eps" or "remaddr").
        line_number: 1-based line number, counting header and blank lines.
        found: Number of tokens on the line.
        required: Minimum number of tokens the table needs.
    """

    def __init__(self, table: str, line_number: int, found: int, required: int) -> None:
        self.table = table
        self.line_number = line_number
        self.found = found
        self.required = required
        super().__init__(
            f"{table}: at line #{line_number}: insufficient number of items "
            f"(found {found}, need at least {required})"
        )


class InvalidFormatError(ParsingError):
    """Raised when a named column fails to decode.

    Attributes:
        table: Table name.
        column: Published column name, e.g. ``"ASSOC"`` or ``"LPORT"``.
        line_number: 1-based line number.
        reason: Optional detail appended to the message.
    """

    def __init__(
        self,
        table: str,
        column: str,
        line_number: int,
        reason: str | None = None,
    ) -> None:
        self.table = table
        self.column = column
        self.line_number = line_number
        self.reason = reason
        message = f"{table}: {column} at line #{line_number}: invalid format"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class UnknownFormatError(SctpProcError):
    """Raised when a header line or table name matches no known layout."""


class ConfigValidationError(SctpProcError):
    """Raised when a snapshot config file is empty or inconsistent."""


class ExportError(SctpProcError):
    """Raised when the exporter fails to write output files.

    For example, permission errors, disk full, or unsupported format.
    """

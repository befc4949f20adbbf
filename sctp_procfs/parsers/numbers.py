"""
Integer field conversion for /proc/net/sctp tables.

The kernel prints every numeric column either as a decimal integer
(``%d``, ``%u``, ``%lu``) or as a bare hexadecimal pointer (``%pK``,
no ``0x`` prefix). This module converts one token to ``int`` with the
same acceptance rules:

- base 10, signed: optional ``+``/``-`` sign followed by digits.
- base 10, unsigned: digits only.
- base 16: hex digits only, optional sign only when signed.
- the value must fit the given bit width.

Anything else (``int()`` niceties such as ``_`` separators, ``0x``
prefixes or surrounding whitespace included) is rejected with an
InvalidFormatError naming the column and line.
"""

from __future__ import annotations

import re

from sctp_procfs.exceptions import InvalidFormatError

_DIGITS = {
    10: re.compile(r"[0-9]+"),
    16: re.compile(r"[0-9a-fA-F]+"),
}


def int_bounds(bits: int, signed: bool) -> tuple[int, int]:
    """Return the inclusive ``(low, high)`` range of an integer type."""
    if signed:
        return -(1 << (bits - 1)), (1 << (bits - 1)) - 1
    return 0, (1 << bits) - 1


def parse_int_field(
    token: str,
    *,
    column: str,
    line_number: int,
    table: str,
    base: int = 10,
    bits: int = 64,
    signed: bool = True,
) -> int:
    """Convert one token to an integer or raise a column-named error.

    Args:
        token: The raw token from the split line.
        column: Published column name, used in the error.
        line_number: 1-based line number, used in the error.
        table: Table name, used in the error.
        base: 10 or 16.
        bits: Bit width the value must fit in.
        signed: Whether a sign and negative values are allowed.

    Returns:
        The converted integer.

    Raises:
        InvalidFormatError: If the token is not a valid integer of the
            requested base, or does not fit the requested width.
    """
    pattern = _DIGITS.get(base)
    if pattern is None:
        raise ValueError(f"Unsupported base: {base}")

    digits = token
    if signed and token[:1] in ("+", "-"):
        digits = token[1:]
    if not pattern.fullmatch(digits):
        raise InvalidFormatError(
            table, column, line_number, f"not a base-{base} integer: {token!r}"
        )

    value = int(token, base)
    low, high = int_bounds(bits, signed)
    if not low <= value <= high:
        kind = "int" if signed else "uint"
        raise InvalidFormatError(
            table, column, line_number, f"out of range for {kind}{bits}: {token!r}"
        )
    return value

"""
DataFrame conversion for parsed /proc/net/sctp records.

One row per record, one column per published column name, in the
order the kernel prints them. Two representation choices keep the
frames exportable to both CSV and Parquet:

- Address lists are joined with single spaces, as in the source file.
- Base-16 handle columns (ASSOC, ENDPT, SOCK) are kept as lower-case
  hex strings; kernel pointers do not fit a signed 64-bit column.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

import pandas as pd

from sctp_procfs.layout_registry import FieldSpec, load_layout


def _cell(spec: FieldSpec, value: Any) -> Any:
    if spec.kind == "int" and spec.base == 16:
        return format(value, "x")
    return value


def records_to_frame(table_name: str, records: Iterable[Any]) -> pd.DataFrame:
    """Build a DataFrame from the records of one table.

    Args:
        table_name: "assocs", "eps" or "remaddr".
        records: Records produced by that table's parser.

    Returns:
        DataFrame with the table's published column names. An empty
        input still yields every column.
    """
    layout = load_layout(table_name)
    addresses = layout.addresses

    rows: list[dict[str, Any]] = []
    for record in records:
        row = {spec.column: _cell(spec, getattr(record, spec.attr)) for spec in layout.prefix}
        if addresses is not None:
            row[addresses.local.column] = " ".join(getattr(record, addresses.local.attr))
            if addresses.remote is not None:
                row[addresses.remote.column] = " ".join(getattr(record, addresses.remote.attr))
        for spec in layout.suffix:
            row[spec.column] = _cell(spec, getattr(record, spec.attr))
        rows.append(row)

    return pd.DataFrame(rows, columns=layout.columns)

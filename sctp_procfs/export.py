"""
Exporter for sctp-procfs.

Writes one file per snapshot table plus the _meta table to the output
directory in the configured format (CSV or Parquet).

Output file naming convention:
  {table_name}.{format}  -- e.g., "assocs.parquet", "remaddr.csv"
  "_meta.{format}"       -- always written alongside the tables.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Literal

import pandas as pd

from sctp_procfs.exceptions import ExportError

logger = logging.getLogger(__name__)

_SUPPORTED_FORMATS = {"csv", "parquet"}


def _write_dataframe(df: pd.DataFrame, path: Path, output_format: str) -> None:
    """Write a single DataFrame, wrapping any failure in ExportError."""
    try:
        if output_format == "csv":
            df.to_csv(path, index=False, encoding="utf-8")
        else:  # parquet
            df.to_parquet(path, index=False, engine="pyarrow")
    except Exception as exc:
        raise ExportError(
            f"Failed to write {path.name} as {output_format}: {exc}"
        ) from exc


def export_tables(
    tables: dict[str, pd.DataFrame],
    meta_df: pd.DataFrame,
    output_dir: str | Path,
    output_format: Literal["csv", "parquet"] = "parquet",
) -> list[str]:
    """Write table frames and the _meta frame to disk.

    The output directory is created recursively if it does not exist.

    Args:
        tables: Dict mapping table name -> DataFrame.
        meta_df: The _meta DataFrame.
        output_dir: Directory to write files into.
        output_format: "csv" or "parquet".

    Returns:
        Paths written, tables first (in dict order), then ``_meta``.

    Raises:
        ExportError: If *output_format* is unsupported, or if any write fails.
    """
    if output_format not in _SUPPORTED_FORMATS:
        raise ExportError(
            f"Unsupported output format: '{output_format}'. "
            f"Supported formats: {sorted(_SUPPORTED_FORMATS)}"
        )

    out = Path(output_dir)
    out.mkdir(parents=True, exist_ok=True)

    written: list[str] = []
    for table_name, df in tables.items():
        file_path = out / f"{table_name}.{output_format}"
        _write_dataframe(df, file_path, output_format)
        written.append(str(file_path))
        logger.info("Exported table '%s' -> %s (%d rows)", table_name, file_path.name, len(df))

    meta_path = out / f"_meta.{output_format}"
    _write_dataframe(meta_df, meta_path, output_format)
    written.append(str(meta_path))
    logger.info("Exported _meta -> %s", meta_path.name)

    return written

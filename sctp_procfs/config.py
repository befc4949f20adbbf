"""
Configuration models and YAML I/O for sctp-procfs.

This module defines the Pydantic models that map 1:1 to a snapshot
config YAML file, plus helper functions for loading and saving it.

Key models:
- SnapshotConfig: Top-level config (source + output + tables).
- SourceConfig: Where the /proc/net/sctp tables are read from.
- OutputConfig: Output directory and format.

Key functions:
- load_config(path) -> SnapshotConfig: Load and validate from YAML.
- save_config(config, path): Serialize to YAML.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, Field, model_validator

from sctp_procfs.exceptions import ConfigValidationError
from sctp_procfs.layout_registry import TABLE_NAMES

logger = logging.getLogger(__name__)

DEFAULT_PROC_DIR = "/proc/net/sctp"


class SourceConfig(BaseModel):
    """Where the tables are read from."""

    proc_dir: str = Field(DEFAULT_PROC_DIR, description="Directory holding the table files")
    files: dict[str, str] = Field(
        default_factory=lambda: {name: name for name in TABLE_NAMES},
        description="Table name -> file name inside proc_dir",
    )
    header: bool = Field(True, description="If True, each file starts with a header line")

    @model_validator(mode="after")
    def _check_file_keys(self) -> SourceConfig:
        unknown = set(self.files) - set(TABLE_NAMES)
        if unknown:
            raise ValueError(
                f"Unknown table(s) in files: {sorted(unknown)}. "
                f"Known tables: {list(TABLE_NAMES)}"
            )
        return self

    def path_for(self, table_name: str) -> Path:
        return Path(self.proc_dir) / self.files.get(table_name, table_name)


class OutputConfig(BaseModel):
    """Output settings."""

    output_dir: str = Field("outputs/", description="Directory for output files")
    output_format: Literal["csv", "parquet"] = Field(
        "parquet", description="Output format"
    )


class SnapshotConfig(BaseModel):
    """Top-level configuration for reading and exporting a snapshot."""

    source: SourceConfig = Field(default_factory=SourceConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    tables: list[str] = Field(
        default_factory=lambda: list(TABLE_NAMES),
        description="Tables to read; subset of assocs, eps, remaddr",
    )

    @model_validator(mode="after")
    def _check_tables(self) -> SnapshotConfig:
        if not self.tables:
            raise ValueError("tables must name at least one table.")
        unknown = [t for t in self.tables if t not in TABLE_NAMES]
        if unknown:
            raise ValueError(
                f"Unknown table(s): {unknown}. Known tables: {list(TABLE_NAMES)}"
            )
        if len(set(self.tables)) != len(self.tables):
            raise ValueError(f"Duplicate table names in tables: {self.tables}")
        return self


def load_config(path: str | Path) -> SnapshotConfig:
    """Load and validate a snapshot config YAML into a SnapshotConfig.

    Raises:
        FileNotFoundError: If the config file does not exist.
        ConfigValidationError: If the config file is empty.
        pydantic.ValidationError: If the YAML content fails schema validation.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f)
    if raw is None:
        raise ConfigValidationError(f"Config file is empty: {path}")
    logger.info("Loaded config from %s", path)
    return SnapshotConfig.model_validate(raw)


def save_config(config: SnapshotConfig, path: str | Path) -> None:
    """Serialize a SnapshotConfig to YAML."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    data = config.model_dump(mode="json")
    with open(path, "w", encoding="utf-8") as f:
        f.write("# sctp-procfs snapshot configuration\n\n")
        yaml.dump(data, f, default_flow_style=False, sort_keys=False)
    logger.info("Saved config to %s", path)

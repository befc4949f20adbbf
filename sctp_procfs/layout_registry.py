"""
Layout loader for sctp-procfs.

Loads layout YAML files from sctp_procfs/layouts/ and provides
structured access via Pydantic models. Each layout defines:
- table_name: unique identifier ("assocs", "eps", "remaddr")
- source_file: default pseudo-file name under /proc/net/sctp
- detection: leading header tokens that identify the table
- prefix: fixed columns counted from the start of a line
- addresses: the variable-length address region (optional)
- suffix: fixed columns counted from the end of a line

A line therefore follows the grammar::

    prefix{n}  local+  [separator  remote+]  suffix{m}

and the minimum token count of a table follows from its layout.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from sctp_procfs.exceptions import ParsingError, UnknownFormatError

logger = logging.getLogger(__name__)

# Directory containing layout YAML files (sibling package)
_LAYOUTS_DIR = Path(__file__).parent / "layouts"

TABLE_NAMES = ("assocs", "eps", "remaddr")


class FieldSpec(BaseModel):
    """One fixed column: where its value goes and how to convert it."""
    model_config = ConfigDict(frozen=True)

    column: str
    attr: str
    kind: Literal["int", "str"] = "int"
    base: Literal[10, 16] = 10
    signed: bool = True
    bits: int = 64


class AddressListSpec(BaseModel):
    """One address list inside the address region."""
    model_config = ConfigDict(frozen=True)

    column: str
    attr: str
    strip: str = ""


class AddressSpec(BaseModel):
    """The variable-length address region between prefix and suffix."""
    model_config = ConfigDict(frozen=True)

    local: AddressListSpec
    separator: str | None = None
    remote: AddressListSpec | None = None

    @model_validator(mode="after")
    def _check_separator_pairing(self) -> AddressSpec:
        if (self.separator is None) != (self.remote is None):
            raise ValueError("separator and remote must be given together")
        return self


class DetectionConfig(BaseModel):
    """Detection rules for a layout."""
    model_config = ConfigDict(frozen=True)

    header_startswith: tuple[str, ...] = ()


class TableLayout(BaseModel):
    """A complete table layout loaded from YAML."""
    model_config = ConfigDict(frozen=True)

    table_name: str
    description: str = ""
    source_file: str
    detection: DetectionConfig = Field(default_factory=DetectionConfig)
    prefix: tuple[FieldSpec, ...]
    addresses: AddressSpec | None = None
    suffix: tuple[FieldSpec, ...] = ()

    @property
    def min_fields(self) -> int:
        """Fewest tokens a well-formed line can have."""
        count = len(self.prefix) + len(self.suffix)
        if self.addresses is not None:
            count += 1
            if self.addresses.separator is not None:
                count += 2
        return count

    @property
    def columns(self) -> list[str]:
        """Published column names in line order (separator excluded)."""
        names = [f.column for f in self.prefix]
        if self.addresses is not None:
            names.append(self.addresses.local.column)
            if self.addresses.remote is not None:
                names.append(self.addresses.remote.column)
        names.extend(f.column for f in self.suffix)
        return names

    def matches_header(self, tokens: list[str]) -> bool:
        expected = self.detection.header_startswith
        return bool(expected) and tuple(tokens[: len(expected)]) == expected


def load_layout_file(path: Path) -> TableLayout:
    """Load a single layout YAML file.

    Raises:
        ParsingError: If the file is empty or fails schema validation.
    """
    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f)
    if raw is None:
        raise ParsingError(f"Layout file is empty: {path}")
    try:
        return TableLayout.model_validate(raw)
    except ValidationError as exc:
        raise ParsingError(f"Invalid layout file {path}: {exc}") from exc


@lru_cache(maxsize=None)
def load_layout(table_name: str) -> TableLayout:
    """Load the built-in layout for *table_name*.

    Raises:
        UnknownFormatError: If no layout exists for *table_name*.
    """
    path = _LAYOUTS_DIR / f"{table_name}.yaml"
    if table_name not in TABLE_NAMES or not path.exists():
        raise UnknownFormatError(
            f"Unknown table '{table_name}'. Known tables: {list(TABLE_NAMES)}"
        )
    layout = load_layout_file(path)
    logger.debug(
        "Loaded layout: %s (%d prefix, %d suffix, min %d fields)",
        layout.table_name, len(layout.prefix), len(layout.suffix), layout.min_fields,
    )
    return layout


def load_all_layouts() -> list[TableLayout]:
    """Load every built-in layout, in TABLE_NAMES order."""
    return [load_layout(name) for name in TABLE_NAMES]

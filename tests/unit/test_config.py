"""
Unit tests for config models and YAML I/O (sctp_procfs.config).

Tests Pydantic model validation and YAML serialization round-trip.
"""

from pathlib import Path

import pytest
from pydantic import ValidationError

from sctp_procfs.config import (
    DEFAULT_PROC_DIR,
    OutputConfig,
    SnapshotConfig,
    SourceConfig,
    load_config,
    save_config,
)
from sctp_procfs.exceptions import ConfigValidationError


# ---------------------------------------------------------------------------
# SourceConfig
# ---------------------------------------------------------------------------

class TestSourceConfig:
    """Tests for SourceConfig."""

    def test_defaults(self):
        cfg = SourceConfig()
        assert cfg.proc_dir == DEFAULT_PROC_DIR
        assert cfg.header is True
        assert cfg.files == {"assocs": "assocs", "eps": "eps", "remaddr": "remaddr"}

    def test_path_for(self):
        cfg = SourceConfig(proc_dir="/tmp/copy", files={"assocs": "assocs.txt"})
        assert cfg.path_for("assocs") == Path("/tmp/copy/assocs.txt")
        # tables missing from files fall back to their own name
        assert cfg.path_for("eps") == Path("/tmp/copy/eps")

    def test_unknown_file_key(self):
        with pytest.raises(ValidationError, match="Unknown table"):
            SourceConfig(files={"tcp": "tcp"})


# ---------------------------------------------------------------------------
# OutputConfig
# ---------------------------------------------------------------------------

class TestOutputConfig:
    """Tests for OutputConfig."""

    def test_defaults(self):
        cfg = OutputConfig()
        assert cfg.output_dir == "outputs/"
        assert cfg.output_format == "parquet"

    def test_csv(self):
        assert OutputConfig(output_format="csv").output_format == "csv"

    def test_invalid_format(self):
        with pytest.raises(ValidationError):
            OutputConfig(output_format="xlsx")


# ---------------------------------------------------------------------------
# SnapshotConfig
# ---------------------------------------------------------------------------

class TestSnapshotConfig:
    """Tests for SnapshotConfig validation."""

    def test_defaults_read_all_tables(self):
        assert SnapshotConfig().tables == ["assocs", "eps", "remaddr"]

    def test_subset(self):
        assert SnapshotConfig(tables=["eps"]).tables == ["eps"]

    def test_empty_tables_rejected(self):
        with pytest.raises(ValidationError, match="at least one"):
            SnapshotConfig(tables=[])

    def test_unknown_table_rejected(self):
        with pytest.raises(ValidationError, match="Unknown table"):
            SnapshotConfig(tables=["assocs", "snmp"])

    def test_duplicate_table_rejected(self):
        with pytest.raises(ValidationError, match="Duplicate"):
            SnapshotConfig(tables=["eps", "eps"])


# ---------------------------------------------------------------------------
# YAML I/O
# ---------------------------------------------------------------------------

class TestYamlIO:
    """Tests for load_config() / save_config()."""

    def test_round_trip(self, tmp_path):
        cfg = SnapshotConfig(
            source=SourceConfig(proc_dir="/data/sctp", header=False),
            output=OutputConfig(output_dir="out/sctp", output_format="csv"),
            tables=["assocs", "remaddr"],
        )
        path = tmp_path / "nested" / "sctp.yaml"
        save_config(cfg, path)
        assert path.exists()
        assert load_config(path) == cfg

    def test_saved_file_has_header_comment(self, tmp_path):
        path = tmp_path / "sctp.yaml"
        save_config(SnapshotConfig(), path)
        assert path.read_text(encoding="utf-8").startswith("# sctp-procfs")

    def test_partial_yaml_uses_defaults(self, tmp_path):
        path = tmp_path / "sctp.yaml"
        path.write_text("tables: [eps]\n", encoding="utf-8")
        cfg = load_config(path)
        assert cfg.tables == ["eps"]
        assert cfg.source.proc_dir == DEFAULT_PROC_DIR

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "nope.yaml")

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")
        with pytest.raises(ConfigValidationError):
            load_config(path)

    def test_invalid_content(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("output:\n  output_format: xml\n", encoding="utf-8")
        with pytest.raises(ValidationError):
            load_config(path)

"""
Unit tests for the _meta table builder (sctp_procfs.meta).
"""

from __future__ import annotations

import hashlib

import pytest

from sctp_procfs.meta import META_COLUMNS, _compute_file_hash, build_meta_table
from sctp_procfs.parsers import parse_eps
from sctp_procfs.snapshot import Snapshot


def test_compute_file_hash(tmp_path):
    path = tmp_path / "eps"
    path.write_bytes(b"hello")
    assert _compute_file_hash(path) == hashlib.sha256(b"hello").hexdigest()


def test_one_row_per_table(tmp_path, eps_sample):
    eps_path = tmp_path / "eps"
    eps_path.write_text(eps_sample, encoding="utf-8")
    snapshot = Snapshot(
        eps=tuple(parse_eps(eps_sample)),
        sources={"eps": str(eps_path), "remaddr": str(tmp_path / "remaddr")},
        captured_at="2026-01-01T00:00:00+00:00",
    )

    df = build_meta_table(snapshot)

    assert list(df.columns) == META_COLUMNS
    assert df["table_name"].tolist() == ["eps", "remaddr"]
    assert df["num_rows"].tolist() == [2, 0]
    assert df["source_hash"].iloc[0] == _compute_file_hash(eps_path)
    # missing source file -> empty hash, no error
    assert df["source_hash"].iloc[1] == ""
    assert (df["captured_at"] == "2026-01-01T00:00:00+00:00").all()


def test_empty_snapshot():
    df = build_meta_table(Snapshot())
    assert df.empty
    assert list(df.columns) == META_COLUMNS

def test_snapshot_sources_read_only(tmp_path):
    sources = {"eps": str(tmp_path / "eps")}
    snapshot = Snapshot(sources=sources)
    sources["remaddr"] = "elsewhere"
    assert snapshot.tables == ["eps"]
    with pytest.raises(TypeError):
        snapshot.sources["eps"] = "elsewhere"  # type: ignore[index]

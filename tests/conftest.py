"""
Shared test fixtures for sctp-procfs tests.

Sample table contents mirror real /proc/net/sctp output, including the
kernel's uneven column padding.
"""

from pathlib import Path

import pytest

# ---------------------------------------------------------------------------
# Sample tables -- edit here if the kernel format samples change
# ---------------------------------------------------------------------------
ASSOCS_SAMPLE = """\
 ASSOC     SOCK   STY SST ST HBKT ASSOC-ID TX_QUEUE RX_QUEUE UID INODE LPORT RPORT LADDRS <-> RADDRS HBINT INS OUTS MAXRT T1X T2X RTXC wmema wmemq sndbuf rcvbuf
     0        0 2   1   3  0      60        0      496       0 188897 12345 54321  127.0.0.1 <-> *127.0.0.2     30000 65535 65535   10    0    0        0        1        0   212992   212992
     0        0 2   1   3  0      59        0        0       0 189472 54321 12345  127.0.0.2 <-> *127.0.0.1     30000 65535 65535   10    0    0        0        1        0   212992   212992

"""

ASSOCS_MULTI_SAMPLE = """\
 ASSOC     SOCK   STY SST ST HBKT ASSOC-ID TX_QUEUE RX_QUEUE UID INODE LPORT RPORT LADDRS <-> RADDRS HBINT INS OUTS MAXRT T1X T2X RTXC wmema wmemq sndbuf rcvbuf
\t0        0 2   1   3  0      62        0        0       0 212110 54321 12345  127.0.0.10 127.0.0.20 <-> *127.0.0.1 127.0.0.2    30000 65535 65535   10    0    0        0        1        0   212992   212992
\t0        0 2   1   3  0      63        0        0       0 212095 12345 54321  127.0.0.1 127.0.0.2 <-> *127.0.0.10 127.0.0.20    30000 65535 65535   10    0    0        0        1        0   212992   212992
"""

EPS_SAMPLE = """\
 ENDPT     SOCK   STY SST HBKT LPORT   UID INODE LADDRS
0        0 2   10  24   12345     0 227065 127.0.0.1
0        0 2   10  16   54321     0 232851 127.0.0.3
"""

REMADDR_SAMPLE = """\
ADDR ASSOC_ID HB_ACT RTO MAX_PATH_RTX REM_ADDR_RTX START STATE
127.0.0.10  69 1 1000 5 0 0 2
127.0.0.20  69 1 3000 5 0 0 3
127.0.0.1  68 1 1000 5 0 0 2
127.0.0.2  68 1 3000 5 0 0 2
"""


@pytest.fixture
def assocs_sample() -> str:
    return ASSOCS_SAMPLE


@pytest.fixture
def assocs_multi_sample() -> str:
    return ASSOCS_MULTI_SAMPLE


@pytest.fixture
def eps_sample() -> str:
    return EPS_SAMPLE


@pytest.fixture
def remaddr_sample() -> str:
    return REMADDR_SAMPLE


@pytest.fixture
def proc_dir(tmp_path: Path) -> Path:
    """A directory laid out like /proc/net/sctp with the sample tables."""
    d = tmp_path / "sctp"
    d.mkdir()
    (d / "assocs").write_text(ASSOCS_SAMPLE, encoding="utf-8")
    (d / "eps").write_text(EPS_SAMPLE, encoding="utf-8")
    (d / "remaddr").write_text(REMADDR_SAMPLE, encoding="utf-8")
    return d


# ---------------------------------------------------------------------------
# Pytest markers
# ---------------------------------------------------------------------------
def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line(
        "markers",
        "integration: mark test as integration test (reads table files from disk)",
    )

"""Pytest configuration and fixtures."""

import pytest


@pytest.fixture
def iupac_sequence():
    """Return a sequence using every recognized code in both cases."""
    return "ATCGKMRYSWBDHVNatcgkmryswbdhvn"


@pytest.fixture
def sample_block():
    """Return a pasted multi-line block of sequences."""
    return "ATCGATCGATCG\nGCTAGCTAGCTA"


@pytest.fixture
def params_file(tmp_path):
    """Return a factory writing a params file and returning its path."""
    def _write(content):
        path = tmp_path / "params.txt"
        path.write_text(content)
        return path
    return _write

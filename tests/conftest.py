"""
Pytest configuration and shared fixtures.
"""

import tempfile
from pathlib import Path

import pytest

from chuk_orchestra.orchestra import OrchestraManager


@pytest.fixture
def temp_dir() -> Path:
    """Create a temporary directory for test outputs."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def orchestra() -> OrchestraManager:
    """Small orchestra: 2 violin, 3 cello, 3 bass seats."""
    return OrchestraManager(2, 3, 3)

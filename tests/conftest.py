"""Shared pytest configuration and fixtures."""

import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from nodetreelib.testing import build_sample_tree


def pytest_configure(config):
    config.addinivalue_line("markers", "slow: large-tree tests excluded by run_tests.py")


@pytest.fixture
def sample_tree():
    """Root A with children B (child D) and C (child E)."""
    return build_sample_tree()

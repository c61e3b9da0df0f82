"""Pytest configuration and fixtures."""
import sys
from pathlib import Path

import pytest

# Add backend to path
backend_path = Path(__file__).parent.parent
sys.path.insert(0, str(backend_path))

from task_api.store import TASK_STORE  # noqa: E402


@pytest.fixture
def sample_suites_dir():
    """Directory holding sample test-suite files."""
    return Path(__file__).parent.parent.parent / "examples"


@pytest.fixture(autouse=True)
def reset_task_store():
    """Give every test the three seed tasks."""
    TASK_STORE.reset()
    yield
    TASK_STORE.reset()

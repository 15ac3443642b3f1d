"""
Pytest configuration and shared fixtures for hashtree tests.

This conftest.py:
1. Adds project root to sys.path for imports
2. Isolates every test from HASHTREE_* environment variables
3. Provides commonly-used tree fixtures
"""

import sys
from pathlib import Path

import pytest

# =============================================================================
# Path Setup - Must happen before any local imports
# =============================================================================

# Get the project root (parent of tests/)
_PROJECT_ROOT = Path(__file__).resolve().parent.parent
_TESTS_ROOT = Path(__file__).resolve().parent

# Add both project root and tests root to sys.path
for _path in [str(_PROJECT_ROOT), str(_TESTS_ROOT)]:
    if _path not in sys.path:
        sys.path.insert(0, _path)

from hashtree.config.runtime import RuntimeConfig, set_default_config  # noqa: E402
from fixtures.trees import make_built_tree  # noqa: E402


_ENV_VARS = [
    "HASHTREE_VALUE_SEPARATOR",
    "HASHTREE_RENDER_INDENT",
    "HASHTREE_RENDER_SHOW_VALUES",
    "HASHTREE_LOG_LEVEL",
    "HASHTREE_LOG_FILE",
]


# =============================================================================
# Pytest Fixtures (autodiscovered by pytest)
# =============================================================================

@pytest.fixture(autouse=True)
def clean_config(monkeypatch):
    """Run every test with default configuration and no HASHTREE_* env."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    set_default_config(RuntimeConfig())
    yield
    set_default_config(None)


@pytest.fixture
def r_values():
    """The four-value scenario R1..R4."""
    return ["R1", "R2", "R3", "R4"]


@pytest.fixture
def r_tree(r_values):
    """A built tree over R1..R4."""
    return make_built_tree(r_values)

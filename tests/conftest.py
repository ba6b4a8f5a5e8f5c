"""
Pytest configuration and shared fixtures for hexcodec tests.

This conftest.py:
1. Adds project root to sys.path for imports
2. Provides commonly-used fixtures via pytest's autodiscovery
3. Configures pytest markers
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

from hexcodec.config import reset_config  # noqa: E402


# =============================================================================
# Pytest Fixtures (autodiscovered by pytest)
# =============================================================================

@pytest.fixture
def clean_env(monkeypatch):
    """Remove hexcodec env vars and drop the cached config around a test."""
    monkeypatch.delenv("HEXCODEC_WORD_BITS", raising=False)
    monkeypatch.delenv("HEXCODEC_LOG_LEVEL", raising=False)
    reset_config()
    yield monkeypatch
    reset_config()


@pytest.fixture
def word_bits_env(clean_env):
    """Set HEXCODEC_WORD_BITS for the duration of a test."""
    def _set(bits: int) -> None:
        clean_env.setenv("HEXCODEC_WORD_BITS", str(bits))
        reset_config()
    return _set


# =============================================================================
# Pytest Configuration
# =============================================================================

def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )

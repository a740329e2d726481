# tests/conftest.py - Pytest Configuration
# ============================================================================
"""
Pytest configuration and fixtures
"""

import pytest
import os
import sys
import sympy as sp

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from fastseries.utils.config import Settings, get_settings


@pytest.fixture
def x():
    """Default expansion variable"""
    return sp.Symbol('x')


@pytest.fixture
def settings():
    """Settings independent of the environment"""
    return Settings(
        default_order=6,
        max_order=500,
        product_guard_degrees=2,
        fallback_enabled=True,
        log_level="WARNING",
    )


@pytest.fixture(autouse=True)
def reset_settings_cache(monkeypatch):
    """Keep FASTSERIES_* variables and the cached settings from leaking between tests"""
    for key in list(os.environ):
        if key.upper().startswith("FASTSERIES_"):
            monkeypatch.delenv(key, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


# Pytest markers
def pytest_configure(config):
    """Configure pytest markers"""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )


def pytest_collection_modifyitems(config, items):
    """Modify test collection"""
    if config.getoption("--no-slow"):
        skip_slow = pytest.mark.skip(reason="--no-slow option provided")
        for item in items:
            if "slow" in item.keywords:
                item.add_marker(skip_slow)


def pytest_addoption(parser):
    """Add custom options"""
    parser.addoption(
        "--no-slow",
        action="store_true",
        default=False,
        help="Skip slow tests"
    )

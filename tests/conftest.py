"""Shared pytest configuration and fixtures for the test suite.

This module centralizes:
- Path setup so ``scripts/`` is importable alongside ``socnet``
- Pytest markers for test categorization (unit, integration)
- Small follow networks reused across the graph tests
"""
from __future__ import annotations

import logging
import sys
from pathlib import Path

import pytest

from socnet.config import AnalyticsSettings
from socnet.graph import NetworkAnalytics, NetworkModel
from socnet.performance_profiler import get_profiler


# ==============================================================================
# Path Setup
# ==============================================================================

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))


# ==============================================================================
# Pytest Configuration
# ==============================================================================

def pytest_configure(config):
    """Register custom markers for test categorization."""
    config.addinivalue_line(
        "markers",
        "unit: Fast tests with no I/O",
    )
    config.addinivalue_line(
        "markers",
        "integration: Tests touching the file system or the CLI",
    )


@pytest.fixture(autouse=True)
def _reset_profiler():
    yield
    get_profiler().clear_reports()


@pytest.fixture
def restore_root_logger():
    """Put the root logger back the way it was after setup_logging() runs."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield root
    for handler in root.handlers[:]:
        if handler not in handlers:
            handler.close()
            root.removeHandler(handler)
    for handler in handlers:
        if handler not in root.handlers:
            root.addHandler(handler)
    root.setLevel(level)


# ==============================================================================
# Follow Networks
# ==============================================================================

CHAIN_PAIRS = [("A", "B"), ("B", "C"), ("C", "D")]
MUTUAL_PAIRS = [("A", "B"), ("B", "A")]


def make_analytics(pairs, **settings) -> NetworkAnalytics:
    """Build analytics with explicit settings so the environment can't leak in."""
    return NetworkAnalytics(NetworkModel.from_pairs(pairs), settings=AnalyticsSettings(**settings))


@pytest.fixture
def analytics_for():
    """Factory fixture: analytics_for(pairs, leader_threshold=..., ...)."""
    return make_analytics


@pytest.fixture
def chain_analytics() -> NetworkAnalytics:
    """A follows B follows C follows D."""
    return make_analytics(CHAIN_PAIRS)


@pytest.fixture
def mutual_analytics() -> NetworkAnalytics:
    return make_analytics(MUTUAL_PAIRS)


@pytest.fixture
def star_pairs():
    """Four fans follow 'hub'; hub follows 'fan1' back; 'loner' follows nobody."""
    return [
        ("fan1", "hub"),
        ("fan2", "hub"),
        ("fan3", "hub"),
        ("fan4", "hub"),
        ("hub", "fan1"),
        ("fan2", "fan3"),
        ("loner", "fan4"),
    ]

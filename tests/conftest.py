"""
Pytest configuration and shared fixtures.
"""

from __future__ import annotations

import pytest

from tests.auxiliaries import dataset_reference, dataset_resolver, is_inhabited
from tzoracle.comparator import ZoneComparator
from tzoracle.dataset import load_test_cases


def pytest_configure(config):
    """
    Register custom markers for different types of tests.
    """
    config.addinivalue_line("markers", "integration: mark test as integration test")
    config.addinivalue_line("markers", "unit: mark test as unit test")
    config.addinivalue_line(
        "markers", "slow: mark test as slow (deselect with '-m \"not slow\"')"
    )


@pytest.fixture(scope="session")
def comparator() -> ZoneComparator:
    """Shared comparator backed by pytz."""
    return ZoneComparator()


@pytest.fixture(scope="session")
def test_cases():
    """The bundled regression dataset, parsed once per session."""
    return load_test_cases()


@pytest.fixture(scope="session")
def resolver():
    return dataset_resolver


@pytest.fixture(scope="session")
def reference():
    return dataset_reference


@pytest.fixture(scope="session")
def inhabited():
    return is_inhabited

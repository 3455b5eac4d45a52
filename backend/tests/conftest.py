"""Shared test configuration, fixtures and pytest markers."""

import pytest

from services.skill_taxonomy import get_vocabulary


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "concurrency: runs matches on thread pools or asyncio tasks"
    )


@pytest.fixture
def vocabulary():
    return get_vocabulary()

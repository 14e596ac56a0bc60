"""
Pytest Configuration and Shared Fixtures

Provides common test fixtures and configuration for the entire test suite.
"""

import pytest

from moneycalc.core import config as config_module
from moneycalc.core.money import Money, create


@pytest.fixture
def rub_amount() -> Money:
    """5 руб. 50 коп. in rubles with bookkeeping fields set."""
    return create(5, 50, "RUB", "tx-001", "Lunch")


@pytest.fixture
def usd_amount() -> Money:
    """3 руб. 75 коп. tagged as USD."""
    return create(3, 75, "USD")


@pytest.fixture
def money_test_cases() -> list[dict]:
    """Raw (major, minor) pairs with their normalized form."""
    return [
        {"raw": (5, 50), "major": 5, "minor": 50, "negative": False},
        {"raw": (5, 150), "major": 6, "minor": 50, "negative": False},
        {"raw": (3, -250), "major": 0, "minor": 50, "negative": False},
        {"raw": (-2, 30), "major": -1, "minor": 70, "negative": True},
        {"raw": (-2, -30), "major": -2, "minor": 30, "negative": True},
        {"raw": (0, -30), "major": 0, "minor": 30, "negative": True},
        {"raw": (0, 0), "major": 0, "minor": 0, "negative": False},
    ]


@pytest.fixture(autouse=True)
def setup_test_environment(monkeypatch):
    """Set up test environment variables."""
    monkeypatch.setenv("MONEYCALC_ENV", "test")
    monkeypatch.delenv("MONEYCALC_DEFAULT_CURRENCY", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    monkeypatch.delenv("DEBUG", raising=False)

    # Every test starts from a freshly loaded configuration
    monkeypatch.setattr(config_module, "_config", None)


# Test markers for categorizing tests
def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line(
        "markers", "unit: Unit tests for individual components"
    )
    config.addinivalue_line(
        "markers", "integration: Integration tests for complete workflows"
    )
    config.addinivalue_line(
        "markers", "currency: Tests for currency handling and precision"
    )
    config.addinivalue_line(
        "markers", "cli: Tests for the command-line interface"
    )

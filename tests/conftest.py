# tests/conftest.py

import pytest

from brew_units import Settings, initialize


@pytest.fixture(scope="session")
def ureg():
    """Process registry, exact arithmetic"""
    return initialize(Settings(log_level="DEBUG", exact=True))


@pytest.fixture
def Q_(ureg):
    return ureg.Quantity

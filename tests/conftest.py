"""
Shared pytest fixtures for polycalc tests.
"""

import pytest

from polycalc.config import reset_config
from polycalc.status import reset_status


@pytest.fixture(autouse=True)
def clean_numerics_state():
    """Каждый тест начинает со статуса OK и значений bins/dx по умолчанию."""
    reset_status()
    reset_config()
    yield
    reset_status()
    reset_config()

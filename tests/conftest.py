"""Pytest configuration and fixtures."""

import pytest

from fixedpoint import MAX_UNSIGNED, Unsigned


@pytest.fixture
def max_unsigned() -> Unsigned:
    """The largest representable value."""
    return Unsigned(MAX_UNSIGNED)


@pytest.fixture
def one() -> Unsigned:
    """The value 1."""
    return Unsigned.one()

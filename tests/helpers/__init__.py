"""Test helpers module for shared test utilities.

- constants: Width limits and common magnitudes
- factories: Unsigned factory functions
"""

from tests.helpers.constants import TEN_TO_FIFTY_NINE, TEN_TO_SEVENTY, TEN_TO_SIXTY, UINT_MAX
from tests.helpers.factories import fp, to_wei

__all__ = [
    # Constants
    "UINT_MAX",
    "TEN_TO_SIXTY",
    "TEN_TO_FIFTY_NINE",
    "TEN_TO_SEVENTY",
    # Factories
    "fp",
    "to_wei",
]

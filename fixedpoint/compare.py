"""Comparison of fixed-point and plain values.

Both operands share the same scale, so ordering is plain integer ordering
on raw values. A plain (unscaled) operand is scaled by 10^18 in an
unbounded intermediate first, so comparison never overflows even when
the plain value itself could not be stored as an Unsigned.
"""

from __future__ import annotations

from fixedpoint.config import SCALE
from fixedpoint.unsigned import Unsigned, validate_plain

__all__ = [
    "is_equal",
    "is_greater_than",
    "is_greater_than_or_equal",
    "is_less_than",
    "is_less_than_or_equal",
    "min",
    "max",
]


def _wide_raw(value: Unsigned | int, operation: str) -> int:
    """Raw value of an operand, scaling plain ints without a width check."""
    if isinstance(value, Unsigned):
        return value.raw
    return validate_plain(value, operation) * SCALE


def is_equal(a: Unsigned | int, b: Unsigned | int) -> bool:
    """True if a == b."""
    return _wide_raw(a, "is_equal") == _wide_raw(b, "is_equal")


def is_greater_than(a: Unsigned | int, b: Unsigned | int) -> bool:
    """True if a > b.

    Either operand may be an Unsigned or a plain unscaled int.

    Raises:
        TypeError: If an operand is neither Unsigned nor int
        InvalidOperand: If a plain operand is outside [0, 2^W - 1]
    """
    return _wide_raw(a, "is_greater_than") > _wide_raw(b, "is_greater_than")


def is_greater_than_or_equal(a: Unsigned | int, b: Unsigned | int) -> bool:
    """True if a >= b."""
    return _wide_raw(a, "is_greater_than_or_equal") >= _wide_raw(b, "is_greater_than_or_equal")


def is_less_than(a: Unsigned | int, b: Unsigned | int) -> bool:
    """True if a < b.

    Either operand may be an Unsigned or a plain unscaled int.

    Raises:
        TypeError: If an operand is neither Unsigned nor int
        InvalidOperand: If a plain operand is outside [0, 2^W - 1]
    """
    return _wide_raw(a, "is_less_than") < _wide_raw(b, "is_less_than")


def is_less_than_or_equal(a: Unsigned | int, b: Unsigned | int) -> bool:
    """True if a <= b."""
    return _wide_raw(a, "is_less_than_or_equal") <= _wide_raw(b, "is_less_than_or_equal")


def min(a: Unsigned, b: Unsigned) -> Unsigned:
    """The smaller of two values (a on ties)."""
    return a if a.raw <= b.raw else b


def max(a: Unsigned, b: Unsigned) -> Unsigned:
    """The larger of two values (a on ties)."""
    return a if a.raw >= b.raw else b

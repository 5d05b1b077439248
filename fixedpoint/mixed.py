"""Arithmetic between an Unsigned and a plain (unscaled) integer.

Addition, subtraction and the opposite-order division first scale the
plain operand with from_unscaled and then reuse the core layer under their
own operation names. A plain operand too large to scale raises
OperandOverflow, which is both an InvalidOperand and an Overflow.

Multiplication and division by a plain integer keep the scale without a
correction step, so the plain operand only has to fit in W bits:

    mixed_mul(Unsigned.from_decimal("0.1"), 10**60) == from_unscaled(10**59)
"""

from __future__ import annotations

from fixedpoint.core import add, div, sub
from fixedpoint.errors import OperandOverflow, Overflow, fault
from fixedpoint.safe_int import S
from fixedpoint.unsigned import Unsigned, from_unscaled, validate_plain

__all__ = [
    "mixed_add",
    "mixed_sub",
    "mixed_sub_opposite",
    "mixed_mul",
    "mixed_div",
    "mixed_div_opposite",
]


def _scale_operand(value: int, operation: str) -> Unsigned:
    """Scale a plain operand, reporting failure as OperandOverflow."""
    validate_plain(value, operation)
    try:
        return from_unscaled(value)
    except Overflow as err:
        raise fault(
            OperandOverflow,
            operation,
            "plain operand cannot be represented as Unsigned",
            value=value,
        ) from err


def mixed_add(a: Unsigned, b: int) -> Unsigned:
    """Return a + b where b is unscaled.

    Raises:
        OperandOverflow: If b cannot be scaled
        Overflow: If the sum exceeds 2^W - 1
    """
    return add(a, _scale_operand(b, "mixed_add"), operation="mixed_add")


def mixed_sub(a: Unsigned, b: int) -> Unsigned:
    """Return a - b where b is unscaled.

    Raises:
        OperandOverflow: If b cannot be scaled
        Underflow: If b is larger than a
    """
    return sub(a, _scale_operand(b, "mixed_sub"), operation="mixed_sub")


def mixed_sub_opposite(a: int, b: Unsigned) -> Unsigned:
    """Return a - b where a is unscaled.

    Raises:
        OperandOverflow: If a cannot be scaled
        Underflow: If b is larger than a
    """
    return sub(_scale_operand(a, "mixed_sub_opposite"), b, operation="mixed_sub_opposite")


def mixed_mul(a: Unsigned, b: int) -> Unsigned:
    """Return a * b where b is unscaled: raw a.raw * b, exact.

    Raises:
        OperandOverflow: If b exceeds 2^W - 1
        Overflow: If the product exceeds 2^W - 1
    """
    validate_plain(b, "mixed_mul")
    return Unsigned((S(a.raw) * b).narrow("mixed_mul"))


def mixed_div(a: Unsigned, b: int) -> Unsigned:
    """Return a / b where b is unscaled: raw a.raw // b, truncated.

    Raises:
        OperandOverflow: If b exceeds 2^W - 1
        DivideByZero: If b is zero
    """
    validate_plain(b, "mixed_div")
    return Unsigned(S(a.raw).checked_div(b, "mixed_div").value)


def mixed_div_opposite(a: int, b: Unsigned) -> Unsigned:
    """Return a / b where a is unscaled, truncated.

    Raises:
        OperandOverflow: If a cannot be scaled
        DivideByZero: If b is zero
        Overflow: If the quotient exceeds 2^W - 1
    """
    return div(_scale_operand(a, "mixed_div_opposite"), b, operation="mixed_div_opposite")

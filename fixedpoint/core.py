"""Core arithmetic on two Unsigned values.

Multiplication and division run in a SafeInt intermediate, which may exceed
the raw width, and only the final result is narrowed back to W bits. Both
truncate toward zero.

Each function takes a keyword-only `operation` naming the public operation
in error messages and fault events, so the mixed and power layers report
faults under their own names.
"""

from __future__ import annotations

from fixedpoint.config import SCALE
from fixedpoint.safe_int import S
from fixedpoint.unsigned import Unsigned

__all__ = ["add", "sub", "mul", "div"]


def add(a: Unsigned, b: Unsigned, *, operation: str = "add") -> Unsigned:
    """Return a + b.

    Raises:
        Overflow: If the raw sum exceeds 2^W - 1
    """
    return Unsigned((S(a.raw) + b.raw).narrow(operation))


def sub(a: Unsigned, b: Unsigned, *, operation: str = "sub") -> Unsigned:
    """Return a - b.

    Raises:
        Underflow: If b is larger than a
    """
    return Unsigned(S(a.raw).checked_sub(b.raw, operation).value)


def mul(a: Unsigned, b: Unsigned, *, operation: str = "mul") -> Unsigned:
    """Return a * b, truncated: (a.raw * b.raw) // 10^18.

    The product before the division may be up to 2W bits wide.

    Raises:
        Overflow: If the truncated product exceeds 2^W - 1
    """
    return Unsigned(((S(a.raw) * b.raw) // SCALE).narrow(operation))


def div(a: Unsigned, b: Unsigned, *, operation: str = "div") -> Unsigned:
    """Return a / b, truncated: (a.raw * 10^18) // b.raw.

    Raises:
        DivideByZero: If b is zero
        Overflow: If the quotient exceeds 2^W - 1
    """
    return Unsigned((S(a.raw) * SCALE).checked_div(b.raw, operation).narrow(operation))

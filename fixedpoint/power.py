"""Integer powers of Unsigned values."""

from __future__ import annotations

from fixedpoint.core import mul
from fixedpoint.unsigned import Unsigned, from_unscaled, validate_plain

__all__ = ["pow"]


def pow(base: Unsigned, exponent: int) -> Unsigned:
    """Compute base^exponent by repeated truncating multiplication.

    Starts from 1 and applies mul(acc, base) exponent times, so every
    partial product is truncated exactly as a chain of mul() calls would
    be. pow(x, 0) is 1 for every x, including 0.

    Cost is linear in exponent. The loop stops early once the accumulator
    can no longer change (it is 0, or a step left it unchanged), which
    gives the same result.

    Raises:
        InvalidOperand: If exponent is outside [0, 2^W - 1]
        Overflow: At the first partial product that exceeds 2^W - 1
    """
    validate_plain(exponent, "pow")

    acc = from_unscaled(1)
    for _ in range(exponent):
        step = mul(acc, base, operation="pow")
        if step.raw == acc.raw or step.raw == 0:
            return step
        acc = step
    return acc

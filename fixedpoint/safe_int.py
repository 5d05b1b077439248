"""Wide intermediate accumulator for unsigned raw values.

SafeInt wraps an unbounded Python int so that products and scaled
numerators can exceed the raw width W while a computation is in flight.
Arithmetic is safe by default:
- Subtraction below zero raises Underflow
- Division by zero raises DivideByZero
- Narrowing back to W bits raises Overflow

Usage pattern:
    from fixedpoint.safe_int import S

    def mul_raw(a: int, b: int) -> int:
        # Wrap at entry
        product = S(a) * b  # May exceed 2^W - 1 here

        # Narrow at exit
        return (product // SCALE).narrow("mul")
"""

from __future__ import annotations

from fixedpoint.config import DEFAULT_CONFIG
from fixedpoint.errors import DivideByZero, Overflow, Underflow, fault

MAX_UNSIGNED = DEFAULT_CONFIG.max_raw


class SafeInt:
    """Non-negative integer with checked arithmetic.

    Attributes:
        value: The underlying integer value (read-only)
    """

    __slots__ = ("_value",)
    _value: int

    def __init__(self, value: int | SafeInt) -> None:
        """Create a SafeInt from an integer or another SafeInt.

        Raises:
            TypeError: If value is not an int or SafeInt
        """
        if isinstance(value, SafeInt):
            self._value = value._value
        elif isinstance(value, int) and not isinstance(value, bool):
            self._value = value
        else:
            raise TypeError(f"SafeInt requires int, got {type(value).__name__}")

    @property
    def value(self) -> int:
        """The underlying integer value."""
        return self._value

    def __repr__(self) -> str:
        return f"SafeInt({self._value})"

    def __add__(self, other: SafeInt | int) -> SafeInt:
        """Add without bounds check (narrow() checks the width)."""
        return SafeInt(self._value + _extract_value(other))

    def __sub__(self, other: SafeInt | int) -> SafeInt:
        """Subtract other from self (see checked_sub)."""
        return self.checked_sub(other, "sub")

    def __mul__(self, other: SafeInt | int) -> SafeInt:
        """Multiply without bounds check (narrow() checks the width)."""
        return SafeInt(self._value * _extract_value(other))

    def __floordiv__(self, other: SafeInt | int) -> SafeInt:
        """Integer division (see checked_div)."""
        return self.checked_div(other, "div")

    def checked_sub(self, other: SafeInt | int, operation: str) -> SafeInt:
        """Subtract other from self.

        Args:
            other: Subtrahend
            operation: Name of the operation, for the error message

        Raises:
            Underflow: If other is larger than self
        """
        other_val = _extract_value(other)
        if other_val > self._value:
            raise fault(Underflow, operation, f"{self._value} - {other_val} is negative")
        return SafeInt(self._value - other_val)

    def checked_div(self, other: SafeInt | int, operation: str) -> SafeInt:
        """Integer division, truncating toward zero.

        Both operands are non-negative, so floor and truncation agree.

        Args:
            other: Divisor
            operation: Name of the operation, for the error message

        Raises:
            DivideByZero: If other is zero
        """
        other_val = _extract_value(other)
        if other_val == 0:
            raise fault(DivideByZero, operation, f"{self._value} // 0")
        return SafeInt(self._value // other_val)

    def narrow(self, operation: str) -> int:
        """Convert back to a W-bit raw value.

        Args:
            operation: Name of the operation, for the error message

        Raises:
            Overflow: If value exceeds 2^W - 1
        """
        if self._value > MAX_UNSIGNED:
            raise fault(
                Overflow,
                operation,
                f"result exceeds 2^{DEFAULT_CONFIG.width_bits} - 1",
                value=self._value,
            )
        return self._value


def _extract_value(x: SafeInt | int) -> int:
    """Extract integer value from SafeInt or int."""
    if isinstance(x, SafeInt):
        return x._value
    return x


# Convenience alias for concise code
S = SafeInt

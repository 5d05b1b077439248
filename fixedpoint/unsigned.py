"""Unsigned fixed-point representation.

A value is stored as a non-negative integer `raw` in [0, 2^W - 1] and
represents raw / 10^18. Example: 1.5 is stored as 1_500_000_000_000_000_000.

Arithmetic lives in the layers built on top of this module:
- fixedpoint.core: two Unsigned operands
- fixedpoint.mixed: one Unsigned and one plain (unscaled) int
- fixedpoint.power: integer exponents
The operators on Unsigned dispatch to those layers.
"""

from __future__ import annotations

from decimal import ROUND_DOWN, Decimal, InvalidOperation, localcontext
from fractions import Fraction
from typing import ClassVar

from fixedpoint.config import DECIMALS, SCALE
from fixedpoint.errors import InvalidOperand, OperandOverflow, Overflow, fault
from fixedpoint.safe_int import MAX_UNSIGNED

__all__ = [
    "Unsigned",
    "from_unscaled",
    "validate_plain",
    "SCALE",
    "MAX_UNSIGNED",
    "MAX_UNSCALED",
]

# Largest plain integer whose scaled form still fits in W bits
MAX_UNSCALED = MAX_UNSIGNED // SCALE

# Enough digits for any W-bit raw value plus the fractional part
_DECIMAL_PRECISION = len(str(MAX_UNSIGNED)) + DECIMALS + 2


def validate_plain(value: object, operation: str) -> int:
    """Validate a plain unsigned integer operand.

    Args:
        value: Operand to validate
        operation: Name of the operation, for the error message

    Returns:
        The operand as int

    Raises:
        TypeError: If value is not an int (bool is rejected)
        InvalidOperand: If value is negative
        OperandOverflow: If value exceeds 2^W - 1
    """
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{operation} requires int, got {type(value).__name__}")
    if value < 0:
        raise fault(InvalidOperand, operation, f"operand {value} is negative")
    if value > MAX_UNSIGNED:
        raise fault(OperandOverflow, operation, "operand exceeds the raw width", value=value)
    return value


def from_unscaled(n: int) -> Unsigned:
    """Create the Unsigned representing the plain integer n.

    Raises:
        Overflow: If n * 10^18 exceeds 2^W - 1
        InvalidOperand: If n is negative
    """
    if not isinstance(n, int) or isinstance(n, bool):
        raise TypeError(f"from_unscaled requires int, got {type(n).__name__}")
    if n < 0:
        raise fault(InvalidOperand, "from_unscaled", f"operand {n} is negative")
    if n > MAX_UNSCALED:
        raise fault(
            Overflow, "from_unscaled", f"{n} * 10^{DECIMALS} exceeds the raw width", value=n
        )
    return Unsigned(n * SCALE)


class Unsigned:
    """Non-negative 18-decimal fixed-point number stored as int.

    Instances are immutable. Plain ints mixed into comparisons or
    arithmetic are treated as unscaled numbers, so
    `Unsigned.from_unscaled(2) == 2` holds.

    Floats are not operands: comparison and arithmetic with a float return
    NotImplemented, so `Unsigned.one() == 1.0` is False and ordering against
    a float raises TypeError. Equality is therefore not transitive through
    float (`one == 1` and `1 == 1.0`, but `one != 1.0`). Use from_decimal
    to bring a non-integer number in.
    """

    ONE: ClassVar[int] = SCALE

    __slots__ = ("_raw",)
    _raw: int

    def __init__(self, raw: int) -> None:
        """Create from a raw scaled value.

        Raises:
            TypeError: If raw is not an int
            InvalidOperand: If raw is negative
            OperandOverflow: If raw exceeds 2^W - 1
        """
        self._raw = validate_plain(raw, "Unsigned")

    @property
    def raw(self) -> int:
        """The stored raw value (semantic value times 10^18)."""
        return self._raw

    @classmethod
    def from_raw(cls, raw: int) -> Unsigned:
        """Create from a raw value (already scaled to 18 decimals)."""
        return cls(raw)

    @classmethod
    def from_unscaled(cls, n: int) -> Unsigned:
        """Create from a plain integer (will be scaled by 10^18)."""
        return from_unscaled(n)

    @classmethod
    def from_decimal(cls, value: Decimal | str | int) -> Unsigned:
        """Create from a decimal number, truncating past 18 decimals.

        Raises:
            InvalidOperand: If value is negative, NaN or infinite
            Overflow: If value exceeds the largest representable number
        """
        try:
            d = Decimal(value)
        except InvalidOperation as err:
            raise fault(InvalidOperand, "from_decimal", f"cannot parse {value!r}") from err

        if not d.is_finite():
            raise fault(InvalidOperand, "from_decimal", f"{value!r} is not finite")
        if d < 0:
            raise fault(InvalidOperand, "from_decimal", f"{value!r} is negative")
        if d.adjusted() >= len(str(MAX_UNSCALED)):
            raise fault(Overflow, "from_decimal", f"{value!r} exceeds the raw width")

        with localcontext() as ctx:
            ctx.prec = _DECIMAL_PRECISION
            scaled = d.scaleb(DECIMALS).quantize(Decimal("1"), rounding=ROUND_DOWN)

        raw = int(scaled)
        if raw > MAX_UNSIGNED:
            raise fault(Overflow, "from_decimal", f"{value!r} exceeds the raw width")
        return cls(raw)

    @classmethod
    def zero(cls) -> Unsigned:
        """Create the value 0."""
        return cls(0)

    @classmethod
    def one(cls) -> Unsigned:
        """Create the value 1."""
        return cls(SCALE)

    def to_decimal(self) -> Decimal:
        """Convert to an exact Decimal for display."""
        return Decimal(str(self))

    def __repr__(self) -> str:
        return f"Unsigned({self._raw})"

    def __str__(self) -> str:
        whole, frac = divmod(self._raw, SCALE)
        if frac == 0:
            return str(whole)
        return f"{whole}.{frac:0{DECIMALS}d}".rstrip("0")

    def __hash__(self) -> int:
        # Matches hash() of the equal int/Fraction
        return hash(Fraction(self._raw, SCALE))

    def __bool__(self) -> bool:
        return self._raw != 0

    # --- Comparison operations ---

    def __eq__(self, other: object) -> bool:
        if not _is_operand(other):
            return NotImplemented
        if _is_plain(other) and not 0 <= other <= MAX_UNSIGNED:  # type: ignore[operator]
            return False
        from fixedpoint.compare import is_equal

        return is_equal(self, other)  # type: ignore[arg-type]

    def __lt__(self, other: object) -> bool:
        if not _is_operand(other):
            return NotImplemented
        from fixedpoint.compare import is_less_than

        return is_less_than(self, other)  # type: ignore[arg-type]

    def __le__(self, other: object) -> bool:
        if not _is_operand(other):
            return NotImplemented
        from fixedpoint.compare import is_less_than_or_equal

        return is_less_than_or_equal(self, other)  # type: ignore[arg-type]

    def __gt__(self, other: object) -> bool:
        if not _is_operand(other):
            return NotImplemented
        from fixedpoint.compare import is_greater_than

        return is_greater_than(self, other)  # type: ignore[arg-type]

    def __ge__(self, other: object) -> bool:
        if not _is_operand(other):
            return NotImplemented
        from fixedpoint.compare import is_greater_than_or_equal

        return is_greater_than_or_equal(self, other)  # type: ignore[arg-type]

    # --- Arithmetic operations ---

    def __add__(self, other: object) -> Unsigned:
        from fixedpoint import core, mixed

        if isinstance(other, Unsigned):
            return core.add(self, other)
        if _is_plain(other):
            return mixed.mixed_add(self, other)  # type: ignore[arg-type]
        return NotImplemented

    def __radd__(self, other: object) -> Unsigned:
        from fixedpoint import mixed

        if _is_plain(other):
            return mixed.mixed_add(self, other)  # type: ignore[arg-type]
        return NotImplemented

    def __sub__(self, other: object) -> Unsigned:
        from fixedpoint import core, mixed

        if isinstance(other, Unsigned):
            return core.sub(self, other)
        if _is_plain(other):
            return mixed.mixed_sub(self, other)  # type: ignore[arg-type]
        return NotImplemented

    def __rsub__(self, other: object) -> Unsigned:
        from fixedpoint import mixed

        if _is_plain(other):
            return mixed.mixed_sub_opposite(other, self)  # type: ignore[arg-type]
        return NotImplemented

    def __mul__(self, other: object) -> Unsigned:
        from fixedpoint import core, mixed

        if isinstance(other, Unsigned):
            return core.mul(self, other)
        if _is_plain(other):
            return mixed.mixed_mul(self, other)  # type: ignore[arg-type]
        return NotImplemented

    def __rmul__(self, other: object) -> Unsigned:
        from fixedpoint import mixed

        if _is_plain(other):
            return mixed.mixed_mul(self, other)  # type: ignore[arg-type]
        return NotImplemented

    def __truediv__(self, other: object) -> Unsigned:
        from fixedpoint import core, mixed

        if isinstance(other, Unsigned):
            return core.div(self, other)
        if _is_plain(other):
            return mixed.mixed_div(self, other)  # type: ignore[arg-type]
        return NotImplemented

    def __rtruediv__(self, other: object) -> Unsigned:
        from fixedpoint import mixed

        if _is_plain(other):
            return mixed.mixed_div_opposite(other, self)  # type: ignore[arg-type]
        return NotImplemented

    def __pow__(self, exponent: object) -> Unsigned:
        from fixedpoint.power import pow

        if _is_plain(exponent):
            return pow(self, exponent)  # type: ignore[arg-type]
        return NotImplemented


def _is_plain(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_operand(value: object) -> bool:
    return isinstance(value, Unsigned) or _is_plain(value)

"""Unsigned 18-decimal fixed-point arithmetic.

Values are stored as raw integers in [0, 2^W - 1] scaled by 10^18. Every
operation either returns an exact-or-truncated result or raises one of
Overflow, Underflow, DivideByZero or InvalidOperand (OperandOverflow for
operands too wide for W bits).
"""

from fixedpoint.compare import (
    is_equal,
    is_greater_than,
    is_greater_than_or_equal,
    is_less_than,
    is_less_than_or_equal,
    max,
    min,
)
from fixedpoint.config import DEFAULT_CONFIG, SCALE, FixedPointConfig, load_config
from fixedpoint.core import add, div, mul, sub
from fixedpoint.errors import (
    DivideByZero,
    FixedPointError,
    InvalidOperand,
    OperandOverflow,
    Overflow,
    Underflow,
)
from fixedpoint.mixed import (
    mixed_add,
    mixed_div,
    mixed_div_opposite,
    mixed_mul,
    mixed_sub,
    mixed_sub_opposite,
)
from fixedpoint.power import pow
from fixedpoint.types import UnsignedField
from fixedpoint.unsigned import MAX_UNSCALED, MAX_UNSIGNED, Unsigned, from_unscaled

__version__ = "0.1.0"
__all__ = [
    # Representation
    "Unsigned",
    "from_unscaled",
    "SCALE",
    "MAX_UNSIGNED",
    "MAX_UNSCALED",
    # Comparison
    "is_equal",
    "is_greater_than",
    "is_greater_than_or_equal",
    "is_less_than",
    "is_less_than_or_equal",
    "min",
    "max",
    # Core arithmetic
    "add",
    "sub",
    "mul",
    "div",
    # Mixed arithmetic
    "mixed_add",
    "mixed_sub",
    "mixed_sub_opposite",
    "mixed_mul",
    "mixed_div",
    "mixed_div_opposite",
    # Power
    "pow",
    # Errors
    "FixedPointError",
    "Overflow",
    "Underflow",
    "DivideByZero",
    "InvalidOperand",
    "OperandOverflow",
    # Configuration
    "FixedPointConfig",
    "DEFAULT_CONFIG",
    "load_config",
    # Serialization
    "UnsignedField",
    "__version__",
]

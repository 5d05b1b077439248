"""Fixed-point error classes.

Every detected fault maps to exactly one of these kinds. Errors are never
recovered internally; the failing operation produces no result.

An operand that is merely out of domain (negative, or not a number) raises
InvalidOperand, which is a ValueError and not an Overflow. An operand that
is too wide for W bits, or a plain value that cannot be scaled by 10^18,
raises OperandOverflow, which is both an InvalidOperand and an Overflow.

Faults are logged with structlog at debug level just before raising. The
library never configures structlog: with structlog's default configuration
those events are printed, so hosts either configure a log level or set
FIXED_POINT_LOG_FAULTS=false.
"""

import structlog

from fixedpoint.config import DEFAULT_CONFIG

logger = structlog.get_logger()


class FixedPointError(ArithmeticError):
    """Base error for fixed-point operations."""

    pass


class Overflow(FixedPointError):
    """Raw result would exceed 2^W - 1."""

    pass


class Underflow(FixedPointError):
    """Subtraction would produce a negative result."""

    pass


class DivideByZero(FixedPointError, ZeroDivisionError):
    """Divisor is zero."""

    pass


class InvalidOperand(FixedPointError, ValueError):
    """Operand is negative or otherwise not a valid unsigned value."""

    pass


class OperandOverflow(InvalidOperand, Overflow):
    """Operand exceeds 2^W - 1 or cannot be scaled by 10^18."""

    pass


_EVENTS: dict[type[FixedPointError], str] = {
    Overflow: "fixed_point_overflow",
    Underflow: "fixed_point_underflow",
    DivideByZero: "fixed_point_division_by_zero",
    InvalidOperand: "fixed_point_invalid_operand",
    OperandOverflow: "fixed_point_invalid_operand",
}


def fault(
    kind: type[FixedPointError], operation: str, message: str, **context: object
) -> FixedPointError:
    """Build an error of the given kind, logging it first.

    Callers raise the returned exception so tracebacks point at the
    operation that detected the fault.
    """
    if DEFAULT_CONFIG.log_faults:
        logger.debug(
            _EVENTS.get(kind, "fixed_point_error"),
            operation=operation,
            reason=message,
            **{key: str(value) for key, value in context.items()},
        )
    return kind(f"{operation}: {message}")

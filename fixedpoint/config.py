"""Configuration for fixed-point arithmetic."""

import os
from collections.abc import Mapping
from dataclasses import dataclass

# Fixed-point scale: every raw value is the semantic value times 10^18
DECIMALS = 18
SCALE = 10**DECIMALS

_TRUE_VALUES = ("true", "1", "yes")
_FALSE_VALUES = ("false", "0", "no")


@dataclass(frozen=True)
class FixedPointConfig:
    """Centralized configuration for the arithmetic layers.

    Attributes:
        width_bits: Width W of the unsigned raw integer (default: 256)
        log_faults: If True, emit a structlog debug event for every
            overflow, underflow, division by zero or invalid operand
            before it is raised.
    """

    width_bits: int = 256
    log_faults: bool = True

    def __post_init__(self) -> None:
        if self.width_bits <= 0 or self.width_bits % 8 != 0:
            raise ValueError(f"width_bits must be a positive multiple of 8, got {self.width_bits}")
        if self.max_raw < SCALE:
            raise ValueError(
                f"width_bits={self.width_bits} cannot represent 1 at scale 10^{DECIMALS}"
            )

    @property
    def max_raw(self) -> int:
        """Largest raw value: 2^W - 1."""
        return (1 << self.width_bits) - 1


def _parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be one of {_TRUE_VALUES + _FALSE_VALUES}, got {raw!r}")


def load_config(environ: Mapping[str, str] | None = None) -> FixedPointConfig:
    """Build configuration from environment variables with defaults.

    - FIXED_POINT_WIDTH_BITS: raw integer width (default: 256)
    - FIXED_POINT_LOG_FAULTS: log faults before raising (default: true)

    Raises:
        ValueError: If a variable is set to an invalid value
    """
    env = os.environ if environ is None else environ

    width_raw = env.get("FIXED_POINT_WIDTH_BITS", "256")
    try:
        width_bits = int(width_raw)
    except ValueError as err:
        raise ValueError(f"FIXED_POINT_WIDTH_BITS must be an integer, got {width_raw!r}") from err

    log_faults = _parse_bool("FIXED_POINT_LOG_FAULTS", env.get("FIXED_POINT_LOG_FAULTS", "true"))

    return FixedPointConfig(width_bits=width_bits, log_faults=log_faults)


# Default configuration instance, used by every operation
DEFAULT_CONFIG = load_config()

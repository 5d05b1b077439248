"""Pydantic field types for storing Unsigned values.

Unsigned values cross storage and API boundaries as their raw integer in
a decimal string, the same way uint256 token amounts are exchanged.
"""

from typing import Annotated, Any

from pydantic import Field, PlainSerializer, PlainValidator

from fixedpoint.errors import InvalidOperand
from fixedpoint.unsigned import Unsigned


def validate_unsigned(value: Any) -> Unsigned:
    """Validate an Unsigned given as itself, a raw int, or a raw decimal string.

    Raises:
        ValueError: If value is not a valid raw value within [0, 2^W - 1]
    """
    if isinstance(value, Unsigned):
        return value

    if isinstance(value, str):
        try:
            value = int(value)
        except ValueError as err:
            raise ValueError(f"Unsigned must be a decimal integer string: '{value}'") from err

    if not isinstance(value, int) or isinstance(value, bool):
        raise ValueError(f"Unsigned must be string or int, got {type(value).__name__}")

    try:
        return Unsigned(value)
    except InvalidOperand as err:
        raise ValueError(str(err)) from err


def serialize_unsigned(value: Unsigned) -> str:
    """Serialize to the raw value as a decimal string."""
    return str(value.raw)


# Unsigned stored as its raw value in a decimal string
UnsignedField = Annotated[
    Unsigned,
    PlainValidator(validate_unsigned),
    PlainSerializer(serialize_unsigned, return_type=str),
    Field(description="18-decimal fixed-point value as raw decimal string"),
]

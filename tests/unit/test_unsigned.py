"""Tests for the Unsigned representation layer."""

from decimal import Decimal
from fractions import Fraction

import pytest

from fixedpoint import (
    MAX_UNSCALED,
    SCALE,
    InvalidOperand,
    Overflow,
    Unsigned,
    from_unscaled,
)
from fixedpoint.unsigned import validate_plain
from tests.helpers import TEN_TO_SIXTY, UINT_MAX, fp, to_wei


class TestConstruction:
    """Tests for constructing Unsigned values."""

    def test_from_raw(self):
        """The raw value is stored unchanged."""
        assert Unsigned(1_500_000_000_000_000_000).raw == to_wei("1.5")
        assert Unsigned.from_raw(7).raw == 7

    def test_raw_bounds(self):
        """0 and 2^256 - 1 are both representable."""
        assert Unsigned(0).raw == 0
        assert Unsigned(UINT_MAX).raw == UINT_MAX

    def test_raw_above_width_raises(self):
        """A raw value above 2^256 - 1 is rejected."""
        with pytest.raises(InvalidOperand):
            Unsigned(UINT_MAX + 1)

    def test_negative_raw_raises(self):
        """Negative raw values are not representable."""
        with pytest.raises(InvalidOperand, match="negative"):
            Unsigned(-1)

    def test_invalid_type_raises(self):
        """Only ints are accepted as raw values."""
        with pytest.raises(TypeError):
            Unsigned(1.5)  # type: ignore[arg-type]
        with pytest.raises(TypeError):
            Unsigned("1")  # type: ignore[arg-type]
        with pytest.raises(TypeError):
            Unsigned(True)

    def test_zero_and_one(self):
        """zero() and one() construct 0 and 1."""
        assert Unsigned.zero().raw == 0
        assert Unsigned.one().raw == SCALE
        assert Unsigned.ONE == SCALE


class TestFromUnscaled:
    """Tests for from_unscaled."""

    def test_basic(self):
        """53 scales to 53 * 10^18."""
        assert from_unscaled(53).raw == to_wei("53")
        assert Unsigned.from_unscaled(53) == fp("53")

    def test_zero(self):
        """0 scales to 0."""
        assert from_unscaled(0).raw == 0

    @pytest.mark.parametrize("n", [0, 1, 53, 10**18, 10**40, MAX_UNSCALED])
    def test_round_trip(self, n):
        """Dividing the raw value by the scale recovers n exactly."""
        assert from_unscaled(n).raw // SCALE == n
        assert from_unscaled(n).raw % SCALE == 0

    def test_overflow_raises(self):
        """10^60 * 10^18 does not fit in 256 bits."""
        with pytest.raises(Overflow) as exc_info:
            from_unscaled(TEN_TO_SIXTY)
        assert type(exc_info.value) is Overflow

    def test_just_above_limit_raises(self):
        """The first unscalable integer overflows."""
        with pytest.raises(Overflow):
            from_unscaled(MAX_UNSCALED + 1)

    def test_negative_raises(self):
        """Negative integers are invalid operands."""
        with pytest.raises(InvalidOperand):
            from_unscaled(-1)

    def test_non_int_raises(self):
        """Floats are rejected."""
        with pytest.raises(TypeError):
            from_unscaled(1.5)  # type: ignore[arg-type]


class TestFromDecimal:
    """Tests for parsing decimal values."""

    def test_decimal_string(self):
        """Decimal strings are scaled exactly."""
        assert Unsigned.from_decimal("1.5").raw == 1_500_000_000_000_000_000
        assert Unsigned.from_decimal("0.0001").raw == 10**14

    def test_decimal_instance(self):
        """Decimal instances are accepted."""
        assert Unsigned.from_decimal(Decimal("150.3")) == fp("150.3")

    def test_int(self):
        """Ints are treated as whole numbers."""
        assert Unsigned.from_decimal(7) == from_unscaled(7)

    def test_truncates_extra_decimals(self):
        """Digits beyond 18 decimals are truncated, not rounded."""
        assert Unsigned.from_decimal("0.0000000000000000019").raw == 1
        assert Unsigned.from_decimal("2.9999999999999999999").raw == 3 * SCALE - 1

    def test_full_width_round_trip(self):
        """The largest value survives str() and from_decimal()."""
        largest = Unsigned(UINT_MAX)
        assert Unsigned.from_decimal(str(largest)) == largest

    def test_negative_raises(self):
        """Negative values are invalid operands."""
        with pytest.raises(InvalidOperand, match="negative"):
            Unsigned.from_decimal(Decimal("-1"))

    @pytest.mark.parametrize("value", ["NaN", "Infinity", "not a number"])
    def test_non_numeric_raises(self, value):
        """NaN, infinity and garbage are invalid operands."""
        with pytest.raises(InvalidOperand):
            Unsigned.from_decimal(value)

    def test_too_large_raises(self):
        """Values above the largest representable number overflow."""
        with pytest.raises(Overflow):
            Unsigned.from_decimal("1e60")
        with pytest.raises(Overflow):
            Unsigned.from_decimal(str(MAX_UNSCALED + 1))


class TestDisplay:
    """Tests for str/repr/to_decimal."""

    def test_str(self):
        """str() renders the exact decimal value."""
        assert str(fp("1.5")) == "1.5"
        assert str(fp("3")) == "3"
        assert str(Unsigned(1)) == "0.000000000000000001"
        assert str(Unsigned(0)) == "0"

    def test_repr(self):
        """repr() shows the raw value."""
        assert repr(fp("1.5")) == "Unsigned(1500000000000000000)"

    def test_to_decimal(self):
        """to_decimal() is exact."""
        assert fp("50.1").to_decimal() == Decimal("50.1")
        expected = Decimal(f"{UINT_MAX // SCALE}.{UINT_MAX % SCALE:018d}")
        assert Unsigned(UINT_MAX).to_decimal() == expected

    def test_bool(self):
        """Only zero is falsy."""
        assert not Unsigned.zero()
        assert Unsigned(1)


class TestHashing:
    """Tests for hash consistency."""

    def test_equal_values_hash_equal(self):
        """Equal Unsigned values hash equal."""
        assert hash(fp("1.5")) == hash(Unsigned(to_wei("1.5")))

    def test_hash_matches_number(self):
        """Unsigned hashes like the number it represents."""
        assert hash(fp("2")) == hash(2)
        assert hash(fp("0.5")) == hash(Fraction(1, 2))

    def test_set_membership(self):
        """Equal values collapse in a set."""
        assert len({fp("2"), from_unscaled(2), 2}) == 1


class TestValidatePlain:
    """Tests for plain operand validation."""

    def test_accepts_range(self):
        """0 and 2^256 - 1 are valid plain operands."""
        assert validate_plain(0, "op") == 0
        assert validate_plain(UINT_MAX, "op") == UINT_MAX

    def test_rejects_out_of_range(self):
        """Negative and too-wide ints are invalid operands."""
        with pytest.raises(InvalidOperand, match="op"):
            validate_plain(-1, "op")
        with pytest.raises(InvalidOperand, match="op"):
            validate_plain(UINT_MAX + 1, "op")

    def test_rejects_non_int(self):
        """Non-int operands raise TypeError."""
        with pytest.raises(TypeError, match="op requires int"):
            validate_plain(1.0, "op")
        with pytest.raises(TypeError):
            validate_plain(False, "op")

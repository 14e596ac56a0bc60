#!/usr/bin/env python3
"""Tests for core currency utilities."""

from decimal import Decimal
from fractions import Fraction

import pytest

from moneycalc.core.currency import (
    format_minor_units,
    is_finite_scalar,
    round_half_away_from_zero,
    scalar_to_decimal,
    split_minor_units,
    to_minor_units,
)


class TestMinorUnitConversions:
    """Test collapsing and splitting minor-unit totals."""

    @pytest.mark.currency
    def test_to_minor_units(self):
        """Test raw pairs collapse to a signed total."""
        assert to_minor_units(5, 50) == 550
        assert to_minor_units(0, -30) == -30
        assert to_minor_units(-2, 30) == -170
        assert to_minor_units(3, 250) == 550

    @pytest.mark.currency
    @pytest.mark.parametrize(
        "total,expected",
        [
            (925, (9, 25, False)),
            (-170, (-1, 70, True)),
            (-30, (0, 30, True)),
            (0, (0, 0, False)),
            (99, (0, 99, False)),
            (-100, (-1, 0, True)),
        ],
    )
    def test_split_minor_units(self, total, expected):
        """Test the sign is carried by major units and the negative flag only."""
        assert split_minor_units(total) == expected


class TestRounding:
    """Test half-away-from-zero rounding."""

    @pytest.mark.currency
    @pytest.mark.parametrize(
        "value,expected",
        [("0.5", 1), ("-0.5", -1), ("2.5", 3), ("-2.5", -3), ("1.49", 1), ("-1.51", -2), ("100.5", 101), ("7", 7)],
    )
    def test_round_half_away_from_zero(self, value, expected):
        """Test ties round away from zero, not to even."""
        assert round_half_away_from_zero(Decimal(value)) == expected

    @pytest.mark.currency
    def test_scalar_to_decimal_uses_shortest_repr(self):
        """Test floats convert through their shortest decimal form."""
        assert scalar_to_decimal(1.005) == Decimal("1.005")
        assert scalar_to_decimal(0.1) == Decimal("0.1")
        assert scalar_to_decimal(3) == Decimal(3)

    @pytest.mark.currency
    def test_scalar_to_decimal_bool_and_fraction(self):
        """Test bools convert as integers and fractions through their float value."""
        assert scalar_to_decimal(True) == Decimal(1)
        assert scalar_to_decimal(False) == Decimal(0)
        assert scalar_to_decimal(Fraction(1, 4)) == Decimal("0.25")

    @pytest.mark.currency
    def test_is_finite_scalar(self):
        """Test infinities and NaN are not finite."""
        assert is_finite_scalar(1.5)
        assert not is_finite_scalar(float("inf"))
        assert not is_finite_scalar(float("nan"))


class TestFormatting:
    """Test display formatting of minor-unit totals."""

    @pytest.mark.currency
    def test_format_minor_units(self):
        """Test labels, padding and sign."""
        assert format_minor_units(925, "RUB") == "9 руб. 25 коп. (RUB)"
        assert format_minor_units(-507, "RUB") == "-5 руб. 07 коп. (RUB)"
        assert format_minor_units(-30, "USD") == "-0 руб. 30 коп. (USD)"

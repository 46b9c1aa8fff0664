"""
Tests for currency rounding and formatting.
"""

import pytest
from escalafin.core.currency import MXN, Currency, round_half_up


class TestRoundHalfUp:
    """Float rounding with scale-then-round semantics."""

    def test_rounds_to_cents(self):
        assert round_half_up(9025.8333) == 9025.83
        assert round_half_up(944.2857142857143) == 944.29

    def test_halves_round_up(self):
        assert round_half_up(0.125) == 0.13
        assert round_half_up(2.5, 0) == 3.0
        assert round_half_up(305.5, 0) == 306.0

    def test_negative_halves_round_toward_positive_infinity(self):
        assert round_half_up(-2.5, 0) == -2.0
        assert round_half_up(-2.6, 0) == -3.0

    def test_binary_float_representation_is_respected(self):
        """1.005 is stored as 1.00499999..., so it rounds down."""
        assert round_half_up(1.005) == 1.0

    def test_integers_untouched(self):
        assert round_half_up(4800.0) == 4800.0
        assert round_half_up(113.33, 0) == 113.0


class TestCurrency:
    """Test currency rounding and formatting."""

    def test_mxn_rounds_half_up(self):
        assert MXN.round(0.125) == 0.13
        assert MXN.round(9025.8331) == 9025.83

    def test_zero_decimal_currency(self):
        pesos = Currency("MXN", decimals=0)
        assert pesos.round(245.4) == 245.0
        assert pesos.round(245.5) == 246.0
        assert pesos.format(1234.5) == "$1,235"

    def test_format(self):
        assert MXN.format(9025.83) == "$9,025.83"
        assert MXN.format(300) == "$300.00"
        assert MXN.format(-1500) == "-$1,500.00"

    def test_code_is_upper_case(self):
        assert Currency("mxn").code == "MXN"

    def test_currency_repr(self):
        assert repr(MXN) == "Currency('MXN', decimals=2)"
        assert str(MXN) == "MXN"


@pytest.mark.parametrize("value", [0.0, 1.0, 99.99, 123456.78])
def test_round_is_identity_on_cents(value):
    """Values already at cent precision are returned unchanged."""
    assert MXN.round(value) == value

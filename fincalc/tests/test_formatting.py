import pytest

from fincalc.core import InvalidArgument, format_currency
from fincalc.core.formatting import group_indian


@pytest.mark.parametrize(
    "digits, expected",
    [("0", "0"), ("999", "999"), ("1000", "1,000"), ("100000", "1,00,000"), ("123456789", "12,34,56,789")],
)
def test_group_indian(digits, expected):
    assert group_indian(digits) == expected


def test_format_currency():
    assert format_currency(1234567) == "₹12,34,567"
    assert format_currency(64047) == "₹64,047"
    assert format_currency(-1500.5) == "₹-1,500.5"
    assert format_currency(10.12345) == "₹10.123"
    assert format_currency(0) == "₹0"


def test_format_currency_rejects_text():
    with pytest.raises(InvalidArgument):
        format_currency("12")


def test_format_currency_rounds_exact_value_half_away_from_zero():
    assert format_currency(0.0125) == "₹0.013"
    assert format_currency(-0.0125) == "₹-0.013"


def test_format_currency_handles_amounts_beyond_default_precision():
    assert format_currency(1e21) == "₹1," + "00," * 9 + "000"

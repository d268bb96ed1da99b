from __future__ import annotations

import pytest

from fincalc.core import InvalidArgument, compute_lumpsum
from fincalc.core.rates import round_half_up


def test_annual_compounding_per_year():
    result = compute_lumpsum(100_000, 10, 3)

    assert [row.balance for row in result.yearly_data] == [110_000, 121_000, 133_100]
    assert all(row.invested_amount == 100_000 for row in result.yearly_data)
    assert result.total_value == 133_100
    assert result.estimated_returns == 33_100


def test_yearly_balance_matches_closed_form():
    principal, rate = 250_000, 7.25
    result = compute_lumpsum(principal, rate, 12)

    for index, row in enumerate(result.yearly_data):
        assert row.balance == round_half_up(principal * (1 + rate / 100) ** (index + 1))


def test_zero_rate_keeps_value_flat():
    result = compute_lumpsum(50_000, 0, 4, base_year=2024)

    assert result.total_value == 50_000
    assert result.estimated_returns == 0
    assert [row.year_label for row in result.yearly_data] == ["2024", "2025", "2026", "2027"]


def test_overflowing_growth_is_rejected():
    with pytest.raises(InvalidArgument):
        compute_lumpsum(1_000, 1e300, 5)


def test_repeated_calls_are_identical():
    assert compute_lumpsum(325_000, 11.75, 22, base_year=2025) == compute_lumpsum(
        325_000, 11.75, 22, base_year=2025
    )

"""Purchasing-power erosion of a present amount."""

from __future__ import annotations

import logging
from typing import Optional

from fincalc.core.rates import compound, round_half_up, year_label
from fincalc.core.validation import (
    require_amount,
    require_base_year,
    require_rate_above,
    require_years,
)
from fincalc.schemas.results import InflationResult, YearlyInflation

logger = logging.getLogger(__name__)


def compute_inflation(
    amount: float,
    annual_rate: float,
    years: int,
    *,
    base_year: Optional[int] = None,
) -> InflationResult:
    """Amount needed in each future year to match `amount` today.

    Negative rates model deflation; a rate of -100% or below is meaningless.
    """
    amount = require_amount("amount", amount)
    annual_rate = require_rate_above("annual_rate", annual_rate, -100.0)
    years = require_years("years", years)
    base_year = require_base_year(base_year)
    logger.debug("Inflation: amount=%s rate=%s%% years=%s", amount, annual_rate, years)

    rate = annual_rate / 100
    original_value = round_half_up(amount)
    yearly_data = tuple(
        YearlyInflation(
            year=year,
            year_label=year_label(year, base_year),
            original_value=original_value,
            inflated_value=round_half_up(amount * compound(rate, year)),
        )
        for year in range(1, years + 1)
    )

    future_value = round_half_up(amount * compound(rate, years))
    return InflationResult(
        present_value=original_value,
        future_value=future_value,
        inflation_impact=future_value - original_value,
        yearly_data=yearly_data,
    )

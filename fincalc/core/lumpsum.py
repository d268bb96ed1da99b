"""One-off investment compounding annually."""

from __future__ import annotations

import logging
from typing import Optional

from fincalc.core.rates import compound, round_half_up, year_label
from fincalc.core.validation import (
    require_amount,
    require_base_year,
    require_rate,
    require_years,
)
from fincalc.schemas.results import LumpsumResult, YearlyBalance

logger = logging.getLogger(__name__)


def compute_lumpsum(
    amount: float,
    annual_rate: float,
    years: int,
    *,
    base_year: Optional[int] = None,
) -> LumpsumResult:
    """FV = P * (1 + rate/100)^years, with the same formula for every yearly row."""
    amount = require_amount("amount", amount)
    annual_rate = require_rate("annual_rate", annual_rate)
    years = require_years("years", years)
    base_year = require_base_year(base_year)
    logger.debug("Lumpsum: amount=%s rate=%s%% years=%s", amount, annual_rate, years)

    rate = annual_rate / 100
    invested_amount = round_half_up(amount)
    yearly_data = tuple(
        YearlyBalance(
            year=year,
            year_label=year_label(year, base_year),
            invested_amount=invested_amount,
            balance=round_half_up(amount * compound(rate, year)),
        )
        for year in range(1, years + 1)
    )

    total_value = round_half_up(amount * compound(rate, years))
    return LumpsumResult(
        invested_amount=invested_amount,
        estimated_returns=total_value - invested_amount,
        total_value=total_value,
        yearly_data=yearly_data,
    )

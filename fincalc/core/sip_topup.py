"""SIP whose contribution steps up by a fixed percentage every year."""

from __future__ import annotations

import logging
from typing import List, Optional, Union

from fincalc.core.rates import Frequency, compound, periodic_rate, round_half_up, year_label
from fincalc.core.validation import (
    require_amount,
    require_base_year,
    require_rate,
    require_years,
)
from fincalc.schemas.results import SipResult, YearlyBalance

logger = logging.getLogger(__name__)


def compute_sip_top_up(
    start_contribution: float,
    annual_increase: float,
    annual_rate: float,
    years: int,
    frequency: Union[Frequency, str] = Frequency.MONTHLY,
    *,
    base_year: Optional[int] = None,
) -> SipResult:
    """Project a stepped-up SIP by carrying a running balance from year to year.

    Order of operations per year:
      1) grow the balance brought forward by one full year of periods;
      2) for each period, add the contribution and grow the total by one period;
      3) unless this is the last year, raise the contribution by
         `annual_increase` percent.
    """
    contribution = require_amount("start_contribution", start_contribution)
    annual_increase = require_rate("annual_increase", annual_increase)
    annual_rate = require_rate("annual_rate", annual_rate)
    years = require_years("years", years)
    frequency = Frequency.coerce(frequency)
    base_year = require_base_year(base_year)
    logger.debug(
        "SIP top-up: contribution=%s increase=%s%% rate=%s%% years=%s frequency=%s",
        contribution,
        annual_increase,
        annual_rate,
        years,
        frequency.value,
    )

    periods_per_year = frequency.periods_per_year
    rate = periodic_rate(annual_rate, periods_per_year)
    year_growth = compound(rate, periods_per_year)

    yearly_data: List[YearlyBalance] = []
    total_invested = 0.0
    future_value = 0.0
    for year in range(1, years + 1):
        future_value *= year_growth
        for _ in range(periods_per_year):
            future_value = (future_value + contribution) * (1 + rate)
        total_invested += contribution * periods_per_year

        yearly_data.append(
            YearlyBalance(
                year=year,
                year_label=year_label(year, base_year),
                invested_amount=round_half_up(total_invested),
                balance=round_half_up(future_value),
            )
        )

        if year < years:
            contribution += contribution * (annual_increase / 100)

    invested_amount = round_half_up(total_invested)
    total_value = round_half_up(future_value)
    return SipResult(
        invested_amount=invested_amount,
        estimated_returns=total_value - invested_amount,
        total_value=total_value,
        yearly_data=tuple(yearly_data),
    )

"""Systematic Investment Plan projection."""

from __future__ import annotations

import logging
from typing import List, Optional, Union

from fincalc.core.errors import DegenerateRate
from fincalc.core.rates import (
    Frequency,
    annuity_factor,
    periodic_rate,
    round_half_up,
    year_label,
)
from fincalc.core.validation import (
    require_amount,
    require_base_year,
    require_rate,
    require_years,
)
from fincalc.schemas.results import SipResult, YearlyBalance

logger = logging.getLogger(__name__)


def sip_future_value(contribution: float, rate: float, periods: int) -> float:
    """Value after `periods` contributions made at the start of each period.

    P * ((1 + r)^n - 1) / r * (1 + r); with no growth the contributions are
    simply summed.
    """
    try:
        return contribution * annuity_factor(rate, periods) * (1 + rate)
    except DegenerateRate:
        logger.debug("SIP rate %r is degenerate, using linear future value", rate)
        return contribution * periods


def compute_sip(
    contribution: float,
    annual_rate: float,
    years: int,
    frequency: Union[Frequency, str] = Frequency.MONTHLY,
    *,
    base_year: Optional[int] = None,
) -> SipResult:
    """Project a fixed periodic contribution compounding at `annual_rate` percent.

    Each yearly row is evaluated in closed form at the periods elapsed so far,
    not carried forward from the previous row.
    """
    contribution = require_amount("contribution", contribution)
    annual_rate = require_rate("annual_rate", annual_rate)
    years = require_years("years", years)
    frequency = Frequency.coerce(frequency)
    base_year = require_base_year(base_year)

    periods_per_year = frequency.periods_per_year
    rate = periodic_rate(annual_rate, periods_per_year)
    total_periods = years * periods_per_year
    logger.debug(
        "SIP: contribution=%s rate=%s%% years=%s frequency=%s",
        contribution,
        annual_rate,
        years,
        frequency.value,
    )

    yearly_data: List[YearlyBalance] = []
    running_investment = 0.0
    for year in range(1, years + 1):
        running_investment += contribution * periods_per_year
        balance = sip_future_value(contribution, rate, year * periods_per_year)
        yearly_data.append(
            YearlyBalance(
                year=year,
                year_label=year_label(year, base_year),
                invested_amount=round_half_up(running_investment),
                balance=round_half_up(balance),
            )
        )

    invested_amount = round_half_up(contribution * total_periods)
    total_value = round_half_up(sip_future_value(contribution, rate, total_periods))
    return SipResult(
        invested_amount=invested_amount,
        estimated_returns=total_value - invested_amount,
        total_value=total_value,
        yearly_data=tuple(yearly_data),
    )

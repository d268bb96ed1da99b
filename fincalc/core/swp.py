"""Systematic Withdrawal Plan projection."""

from __future__ import annotations

import logging
from typing import Iterator, List, NamedTuple, Optional, Tuple

from fincalc.core.rates import periodic_rate, round_half_up, year_label
from fincalc.core.validation import (
    require_amount,
    require_base_year,
    require_rate,
    require_years,
)
from fincalc.schemas.results import SwpResult, YearlyWithdrawal

logger = logging.getLogger(__name__)


class SwpMonth(NamedTuple):
    year: int
    month: int
    balance: float
    withdrawal: float


def _validated(
    initial_investment: object, monthly_withdrawal: object, annual_rate: object, years: object
) -> Tuple[float, float, float, int]:
    return (
        require_amount("initial_investment", initial_investment),
        require_amount("monthly_withdrawal", monthly_withdrawal),
        require_rate("annual_rate", annual_rate),
        require_years("years", years),
    )


def iter_swp_months(
    initial_investment: float,
    monthly_withdrawal: float,
    annual_rate: float,
    years: int,
) -> Iterator[SwpMonth]:
    """Yield the balance after each month of a withdrawal plan.

    Growth is applied before the withdrawal. A month that overdraws the
    balance clamps it to zero and ends that year; the plan stops at the end
    of any year that finishes with nothing left. The overdrawing month still
    reports the full withdrawal.
    """
    initial_investment, monthly_withdrawal, annual_rate, years = _validated(
        initial_investment, monthly_withdrawal, annual_rate, years
    )
    return _simulate(initial_investment, monthly_withdrawal, periodic_rate(annual_rate, 12), years)


def _simulate(balance: float, withdrawal: float, rate: float, years: int) -> Iterator[SwpMonth]:
    for year in range(1, years + 1):
        for month in range(1, 13):
            balance = balance * (1 + rate) - withdrawal
            overdrawn = balance < 0
            if overdrawn:
                balance = 0.0
            yield SwpMonth(year=year, month=month, balance=balance, withdrawal=withdrawal)
            if overdrawn:
                break
        if balance <= 0:
            return


def compute_swp(
    initial_investment: float,
    monthly_withdrawal: float,
    annual_rate: float,
    years: int,
    *,
    base_year: Optional[int] = None,
) -> SwpResult:
    """Summarise a withdrawal plan year by year.

    `yearly_data` has fewer than `years` rows when the balance runs out early;
    `final_balance` is then zero.
    """
    initial_investment, monthly_withdrawal, annual_rate, years = _validated(
        initial_investment, monthly_withdrawal, annual_rate, years
    )
    base_year = require_base_year(base_year)
    logger.debug(
        "SWP: investment=%s withdrawal=%s rate=%s%% years=%s",
        initial_investment,
        monthly_withdrawal,
        annual_rate,
        years,
    )
    months = _simulate(initial_investment, monthly_withdrawal, periodic_rate(annual_rate, 12), years)

    yearly_data: List[YearlyWithdrawal] = []
    total_withdrawal = 0.0
    balance = initial_investment
    current_year = 0
    withdrawn_this_year = 0.0

    for row in months:
        if row.year != current_year:
            if current_year:
                yearly_data.append(_year_row(current_year, withdrawn_this_year, balance, base_year))
            current_year = row.year
            withdrawn_this_year = 0.0
        withdrawn_this_year += row.withdrawal
        total_withdrawal += row.withdrawal
        balance = row.balance
    if current_year:
        yearly_data.append(_year_row(current_year, withdrawn_this_year, balance, base_year))

    if len(yearly_data) < years:
        logger.debug(
            "SWP balance exhausted after %d of %d years", len(yearly_data), years
        )

    return SwpResult(
        final_balance=max(0, round_half_up(balance)),
        total_withdrawal=round_half_up(total_withdrawal),
        yearly_withdrawal=round_half_up(monthly_withdrawal * 12),
        yearly_data=tuple(yearly_data),
    )


def _year_row(year: int, withdrawn: float, balance: float, base_year: Optional[int]) -> YearlyWithdrawal:
    return YearlyWithdrawal(
        year=year,
        year_label=year_label(year, base_year),
        withdrawal_amount=round_half_up(withdrawn),
        balance=max(0, round_half_up(balance)),
    )

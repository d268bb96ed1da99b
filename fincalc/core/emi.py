"""Equated monthly installment and loan amortization."""

from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from fincalc.core.errors import DegenerateRate
from fincalc.core.rates import annuity_factor, periodic_rate, round_half_up, year_label
from fincalc.core.validation import (
    require_amount,
    require_base_year,
    require_rate,
    require_years,
)
from fincalc.schemas.results import AmortizationEntry, EmiResult

logger = logging.getLogger(__name__)


def _validated(principal: object, annual_rate: object, tenure_years: object) -> Tuple[float, float, int]:
    return (
        require_amount("principal", principal),
        require_rate("annual_rate", annual_rate),
        require_years("tenure_years", tenure_years),
    )


def monthly_installment(principal: float, rate: float, months: int) -> float:
    """P * r * (1 + r)^m / ((1 + r)^m - 1), or P / m when the rate is degenerate.

    Written as P * (1 + r)^m / annuity_factor so the zero-rate case surfaces
    as DegenerateRate rather than a division by zero.
    """
    try:
        factor = annuity_factor(rate, months)
    except DegenerateRate:
        logger.debug("EMI rate %r is degenerate, repaying principal linearly", rate)
        return principal / months
    return principal * (factor * rate + 1) / factor


def compute_emi(principal: float, annual_rate: float, tenure_years: int) -> EmiResult:
    principal, annual_rate, tenure_years = _validated(principal, annual_rate, tenure_years)
    months = tenure_years * 12
    emi = monthly_installment(principal, periodic_rate(annual_rate, 12), months)
    total_payment = emi * months
    logger.debug(
        "EMI: principal=%s rate=%s%% tenure=%s emi=%.4f", principal, annual_rate, tenure_years, emi
    )
    return EmiResult(
        emi=round_half_up(emi),
        total_interest=round_half_up(total_payment - principal),
        total_payment=round_half_up(total_payment),
    )


def compute_amortization_schedule(
    principal: float,
    annual_rate: float,
    tenure_years: int,
    *,
    base_year: Optional[int] = None,
) -> Tuple[AmortizationEntry, ...]:
    """Split each year's installments into principal repaid and interest paid.

    Interest accrues monthly on the outstanding balance; the year-end balance
    is floored at zero to hide floating-point residue on the final payment.
    """
    principal, annual_rate, tenure_years = _validated(principal, annual_rate, tenure_years)
    base_year = require_base_year(base_year)
    rate = periodic_rate(annual_rate, 12)
    emi = monthly_installment(principal, rate, tenure_years * 12)

    balance = principal
    schedule: List[AmortizationEntry] = []
    for year in range(1, tenure_years + 1):
        yearly_principal = 0.0
        yearly_interest = 0.0
        for _ in range(12):
            interest = balance * rate
            repaid = emi - interest
            yearly_principal += repaid
            yearly_interest += interest
            balance -= repaid

        schedule.append(
            AmortizationEntry(
                year=year,
                year_label=year_label(year, base_year),
                principal=round_half_up(yearly_principal),
                interest=round_half_up(yearly_interest),
                balance=max(0, round_half_up(balance)),
            )
        )

    return tuple(schedule)

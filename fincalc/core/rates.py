"""Rate conversion, compounding and rounding helpers shared by the calculators."""

from __future__ import annotations

import math
from enum import Enum
from typing import Optional, Union

from fincalc.core.errors import DegenerateRate, InvalidArgument


class Frequency(str, Enum):
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    QUARTERLY = "quarterly"
    YEARLY = "yearly"

    @property
    def periods_per_year(self) -> int:
        return _PERIODS_PER_YEAR[self]

    @classmethod
    def coerce(cls, value: Union["Frequency", str]) -> "Frequency":
        """Accept an enum member or its string value."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            allowed = ", ".join(member.value for member in cls)
            raise InvalidArgument(
                f"frequency must be one of: {allowed} (got {value!r})",
                field="frequency",
            ) from None


_PERIODS_PER_YEAR = {
    Frequency.DAILY: 365,
    Frequency.WEEKLY: 52,
    Frequency.MONTHLY: 12,
    Frequency.QUARTERLY: 4,
    Frequency.YEARLY: 1,
}


def periodic_rate(annual_rate: float, periods_per_year: int) -> float:
    """Convert an annual percentage (12 means 12%) into a per-period fraction."""
    return annual_rate / periods_per_year / 100


def _log_growth(rate: float, periods: int) -> float:
    """periods * ln(1 + rate), computed without first rounding 1 + rate."""
    if rate <= -1:
        raise InvalidArgument(
            f"periodic rate {rate!r} wipes out the balance", field="annual_rate"
        )
    return periods * math.log1p(rate)


def compound(rate: float, periods: int) -> float:
    """Return (1 + rate) ** periods, rejecting results that overflow."""
    try:
        factor = math.exp(_log_growth(rate, periods))
    except OverflowError:
        raise InvalidArgument(
            f"growth over {periods} periods at {rate!r} per period overflows",
            field="annual_rate",
        ) from None
    if not math.isfinite(factor):
        raise InvalidArgument(
            f"growth over {periods} periods at {rate!r} per period is not finite",
            field="annual_rate",
        )
    return factor


def annuity_factor(rate: float, periods: int) -> float:
    """Future value of `periods` unit payments: ((1 + r)^n - 1) / r.

    The numerator goes through expm1/log1p so that tiny rates keep their
    precision. Raises DegenerateRate when r is zero, since the quotient is
    then 0/0.
    """
    if rate == 0:
        raise DegenerateRate("periodic rate is zero", field="annual_rate")
    try:
        growth = math.expm1(_log_growth(rate, periods))
    except OverflowError:
        raise InvalidArgument(
            f"growth over {periods} periods at {rate!r} per period overflows",
            field="annual_rate",
        ) from None
    return growth / rate


def round_half_up(value: float) -> int:
    """Round to the nearest whole unit, halves going up (2.5 -> 3, -2.5 -> -2)."""
    if not math.isfinite(value):
        raise InvalidArgument(f"cannot report non-finite amount {value!r}")
    return int(math.floor(value + 0.5))


def year_label(year: int, base_year: Optional[int] = None) -> str:
    if base_year is None:
        return f"Year {year}"
    return str(base_year + year - 1)

"""Input guards shared by the calculators.

Every public calculator runs its arguments through these before computing, so
a call either returns a complete result or raises InvalidArgument.
"""

from __future__ import annotations

import math
from numbers import Integral, Real
from typing import Optional

from fincalc.core.errors import InvalidArgument


def require_number(field: str, value: object) -> float:
    # bool is an Integral subclass; True is never a meaningful amount
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidArgument(f"{field} must be a number (got {value!r})", field=field)
    number = float(value)
    if not math.isfinite(number):
        raise InvalidArgument(f"{field} must be finite (got {value!r})", field=field)
    return number


def require_amount(field: str, value: object) -> float:
    amount = require_number(field, value)
    if amount < 0:
        raise InvalidArgument(f"{field} must not be negative (got {value!r})", field=field)
    return amount


def require_rate(field: str, value: object, minimum: Optional[float] = 0.0) -> float:
    """Annual percentage; `minimum` is inclusive, None disables the check."""
    rate = require_number(field, value)
    if minimum is not None and rate < minimum:
        raise InvalidArgument(f"{field} must be at least {minimum:g} (got {value!r})", field=field)
    return rate


def require_rate_above(field: str, value: object, floor: float) -> float:
    """Annual percentage strictly greater than `floor`."""
    rate = require_number(field, value)
    if rate <= floor:
        raise InvalidArgument(f"{field} must be greater than {floor:g} (got {value!r})", field=field)
    return rate


def require_years(field: str, value: object) -> int:
    if isinstance(value, bool):
        raise InvalidArgument(f"{field} must be a whole number of years (got {value!r})", field=field)
    if isinstance(value, Integral):
        years = int(value)
    elif isinstance(value, Real) and math.isfinite(value) and float(value).is_integer():
        years = int(value)
    else:
        raise InvalidArgument(f"{field} must be a whole number of years (got {value!r})", field=field)
    if years < 1:
        raise InvalidArgument(f"{field} must be at least 1 (got {value!r})", field=field)
    return years


def require_base_year(value: Optional[object]) -> Optional[int]:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, Integral):
        raise InvalidArgument(f"base_year must be an integer (got {value!r})", field="base_year")
    return int(value)

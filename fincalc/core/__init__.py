"""Pure projection functions behind the calculators."""

from fincalc.core.emi import compute_amortization_schedule, compute_emi
from fincalc.core.errors import CalculationError, DegenerateRate, InvalidArgument
from fincalc.core.formatting import format_currency
from fincalc.core.inflation import compute_inflation
from fincalc.core.lumpsum import compute_lumpsum
from fincalc.core.rates import Frequency
from fincalc.core.sip import compute_sip
from fincalc.core.sip_topup import compute_sip_top_up
from fincalc.core.swp import SwpMonth, compute_swp, iter_swp_months

__all__ = [
    "CalculationError",
    "DegenerateRate",
    "Frequency",
    "InvalidArgument",
    "SwpMonth",
    "compute_amortization_schedule",
    "compute_emi",
    "compute_inflation",
    "compute_lumpsum",
    "compute_sip",
    "compute_sip_top_up",
    "compute_swp",
    "format_currency",
    "iter_swp_months",
]

"""Request contracts for the calculator endpoints."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from fincalc.core.rates import Frequency


class CalculatorRequest(BaseModel):
    model_config = ConfigDict(
        extra="forbid",
        alias_generator=to_camel,
        populate_by_name=True,
    )


def _lowercase_frequency(value: object) -> object:
    """Frequencies are matched case-insensitively, as the engine does."""
    if isinstance(value, str):
        return value.lower()
    return value


class LabelledRequest(CalculatorRequest):
    base_year: Optional[int] = Field(
        None,
        ge=1,
        description="Calendar year of the first row; defaults to the server's current year.",
    )


class SipRequest(LabelledRequest):
    """Inputs for a fixed periodic investment."""

    contribution: float = Field(..., ge=0, description="Amount invested every period.")
    annual_rate: float = Field(
        ...,
        ge=0,
        le=100,
        description="Expected annual return as a percentage (e.g. 12 for 12%).",
    )
    years: int = Field(..., ge=1, description="Number of years to project.")
    frequency: Frequency = Frequency.MONTHLY

    normalise_frequency = field_validator("frequency", mode="before")(_lowercase_frequency)


class SwpRequest(LabelledRequest):
    initial_investment: float = Field(..., ge=0)
    monthly_withdrawal: float = Field(..., ge=0)
    annual_rate: float = Field(..., ge=0, le=100)
    years: int = Field(..., ge=1)


class EmiRequest(CalculatorRequest):
    """Loan amount, annual interest percentage and tenure in years."""

    principal: float = Field(..., ge=0)
    annual_rate: float = Field(..., ge=0, le=100)
    tenure_years: int = Field(..., ge=1)


class EmiScheduleRequest(EmiRequest, LabelledRequest):
    pass


class LumpsumRequest(LabelledRequest):
    amount: float = Field(..., ge=0, description="One-off amount invested at the start.")
    annual_rate: float = Field(..., ge=0, le=100)
    years: int = Field(..., ge=1)


class SipTopUpRequest(LabelledRequest):
    start_contribution: float = Field(..., ge=0, description="First year's periodic amount.")
    annual_increase: float = Field(
        ...,
        ge=0,
        le=100,
        description="Percentage the periodic amount rises by each year.",
    )
    annual_rate: float = Field(..., ge=0, le=100)
    years: int = Field(..., ge=1)
    frequency: Frequency = Frequency.MONTHLY

    normalise_frequency = field_validator("frequency", mode="before")(_lowercase_frequency)


class InflationRequest(LabelledRequest):
    amount: float = Field(..., ge=0, description="Amount in today's money.")
    annual_rate: float = Field(
        ...,
        gt=-100,
        le=100,
        description="Annual inflation percentage; negative values model deflation.",
    )
    years: int = Field(..., ge=1)

"""Result records returned by the projection engine."""

from __future__ import annotations

from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ResultModel(BaseModel):
    """Immutable record; attributes are snake_case, the wire format camelCase."""

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        alias_generator=to_camel,
        populate_by_name=True,
    )


class YearlyEntry(ResultModel):
    year: int = Field(..., ge=1)
    year_label: str


class YearlyBalance(YearlyEntry):
    """Row of a SIP, SIP Top-Up or Lumpsum breakdown."""

    invested_amount: int
    balance: int


class YearlyWithdrawal(YearlyEntry):
    withdrawal_amount: int
    balance: int = Field(..., ge=0)


class AmortizationEntry(YearlyEntry):
    """Principal and interest repaid during one year of a loan."""

    principal: int
    interest: int
    balance: int = Field(..., ge=0)


class YearlyInflation(YearlyEntry):
    original_value: int
    inflated_value: int


class SipResult(ResultModel):
    invested_amount: int
    estimated_returns: int
    total_value: int
    yearly_data: Tuple[YearlyBalance, ...]


# same shape: a lumpsum is a SIP with one contribution up front
LumpsumResult = SipResult


class SwpResult(ResultModel):
    final_balance: int = Field(..., ge=0)
    total_withdrawal: int
    yearly_withdrawal: int
    yearly_data: Tuple[YearlyWithdrawal, ...]


class EmiResult(ResultModel):
    emi: int
    total_interest: int
    total_payment: int


class InflationResult(ResultModel):
    present_value: int
    future_value: int
    inflation_impact: int
    yearly_data: Tuple[YearlyInflation, ...]

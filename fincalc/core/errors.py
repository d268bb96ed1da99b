"""Exceptions raised by the projection engine."""

from __future__ import annotations

from typing import Optional


class CalculationError(ValueError):
    """Base class for every failure a calculator can signal."""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.field = field


class InvalidArgument(CalculationError):
    """Input is non-numeric, non-finite or outside the calculator's domain."""


class DegenerateRate(CalculationError):
    """Periodic rate is too small for a formula that divides by it."""

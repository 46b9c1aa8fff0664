"""
Result containers returned by the EscalaFin calculation engine.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any, TypedDict


@dataclass(frozen=True)
class FixedFeeBreakdown:
    """Outcome of the flat-fee tiered calculation (all values rounded to cents)."""

    payment_amount: float
    total_amount: float
    total_fee: float


@dataclass(frozen=True)
class WeeklyInterestBreakdown:
    """Outcome of the weekly-interest calculation (all values rounded to cents)."""

    payment_amount: float
    total_amount: float
    total_charge: float
    weekly_interest: float
    effective_rate: float


@dataclass(frozen=True)
class LoanCalculationResult:
    """
    Normalized result of ``calculate_loan_details``.

    ``effective_rate`` is a percentage (46.0 means 46%). It is ``None`` for
    'INTERES' loans and for flat-fee loans that charge no fee.
    ``weekly_interest`` is only set for 'INTERES_SEMANAL' loans.
    """

    payment_amount: float
    total_amount: float
    end_date: date
    effective_rate: float | None = None
    weekly_interest: float | None = None

    def to_dict(self) -> dict[str, Any]:
        """camelCase mapping as persisted on the loan record; absent optionals are omitted."""
        out: dict[str, Any] = {
            "paymentAmount": self.payment_amount,
            "totalAmount": self.total_amount,
            "endDate": self.end_date.isoformat(),
        }
        if self.effective_rate is not None:
            out["effectiveRate"] = self.effective_rate
        if self.weekly_interest is not None:
            out["weeklyInterest"] = self.weekly_interest
        return out


class CalculationOutput(TypedDict):
    """
    Unrounded output of a calculation strategy.

    The engine applies the final cent rounding to ``payment_amount``,
    ``total_amount`` and ``effective_rate``.
    """

    payment_amount: float
    total_amount: float
    effective_rate: float | None
    weekly_interest: float | None


def neutral_output() -> CalculationOutput:
    """Zero-valued output used whenever a calculation cannot be performed."""
    return CalculationOutput(
        payment_amount=0.0, total_amount=0.0, effective_rate=None, weekly_interest=None
    )

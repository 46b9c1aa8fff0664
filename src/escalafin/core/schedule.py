"""
Installment-by-installment amortization tables for EscalaFin loans.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from datetime import date
from typing import Any

import numpy as np
import pandas as pd

from .currency import MXN
from .engine import calculate_loan_details
from .kinds import CalcType
from .specs import LoanCalculationRequest
from .utils import get_payments_per_year, payment_dates

logger = logging.getLogger(__name__)

SCHEDULE_COLUMNS = [
    "payment_date",
    "principal_payment",
    "interest_payment",
    "total_payment",
    "remaining_balance",
]


@dataclass(frozen=True)
class ScheduleEntry:
    """One installment of an amortization table (amounts rounded to cents)."""

    payment_number: int
    payment_date: date
    principal_payment: float
    interest_payment: float
    total_payment: float
    remaining_balance: float


@dataclass(frozen=True)
class AmortizationSchedule:
    """Ordered installments of one loan."""

    loan_calculation_type: str
    entries: tuple[ScheduleEntry, ...]

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[ScheduleEntry]:
        return iter(self.entries)

    def summary(self) -> dict[str, Any]:
        """Totals over the whole table."""
        return {
            "totalPayments": len(self.entries),
            "totalPrincipal": MXN.round(sum(e.principal_payment for e in self.entries)),
            "totalInterest": MXN.round(sum(e.interest_payment for e in self.entries)),
            "totalPaid": MXN.round(sum(e.total_payment for e in self.entries)),
        }

    def to_frame(self) -> pd.DataFrame:
        """
        Table as a DataFrame indexed by ``payment_number``.

        An empty schedule gives an empty frame with the same columns.
        """
        frame = pd.DataFrame(
            [
                {
                    "payment_number": e.payment_number,
                    "payment_date": e.payment_date,
                    "principal_payment": e.principal_payment,
                    "interest_payment": e.interest_payment,
                    "total_payment": e.total_payment,
                    "remaining_balance": e.remaining_balance,
                }
                for e in self.entries
            ],
            columns=["payment_number", *SCHEDULE_COLUMNS],
        )
        return frame.set_index("payment_number")


def _declining_balance(
    principal: float, payment: float, rate: float, n: int
) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    interest = np.zeros(n)
    amortized = np.zeros(n)
    balance = np.zeros(n)

    remaining = principal
    for k in range(n):
        interest[k] = remaining * rate
        amortized[k] = payment - interest[k]
        remaining -= amortized[k]
        balance[k] = max(0.0, remaining)
    return amortized, interest, balance


def _flat_split(
    principal: float, total: float, n: int
) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    amortized = np.full(n, principal / n)
    charge = np.full(n, (total - principal) / n)
    balance = np.maximum(principal - np.cumsum(amortized), 0.0)
    return amortized, charge, balance


def build_amortization_schedule(
    request: LoanCalculationRequest | Mapping[str, Any],
) -> AmortizationSchedule:
    """
    Build the amortization table of a loan.

    'INTERES' loans follow the declining balance: each installment pays the
    periodic rate on the outstanding balance and the rest of the level payment
    goes to principal; the reported balance is floored at zero. Flat-fee and
    weekly-interest loans split principal and charge evenly over the
    installments.

    Requests the engine would answer with zero amounts (non-positive inputs,
    unknown calculation type) produce an empty schedule.
    """
    if isinstance(request, Mapping):
        request = LoanCalculationRequest.from_dict(request)

    calc_type = request.loan_calculation_type
    n = request.number_of_payments
    principal = request.principal_amount

    result = calculate_loan_details(request)
    if n <= 0 or principal <= 0 or result.total_amount == 0:
        logger.debug("Nothing to schedule for %s request", calc_type)
        return AmortizationSchedule(loan_calculation_type=calc_type, entries=())

    if calc_type == CalcType.INTERES:
        rate = (request.annual_interest_rate or 0.0) / get_payments_per_year(
            request.payment_frequency
        )
        amortized, interest, balance = _declining_balance(
            principal, result.payment_amount, rate, n
        )
    else:
        amortized, interest, balance = _flat_split(principal, result.total_amount, n)

    dates = payment_dates(request.start_date, n, request.payment_frequency)
    entries = tuple(
        ScheduleEntry(
            payment_number=k + 1,
            payment_date=dates[k],
            principal_payment=MXN.round(float(amortized[k])),
            interest_payment=MXN.round(float(interest[k])),
            total_payment=result.payment_amount,
            remaining_balance=MXN.round(float(balance[k])),
        )
        for k in range(n)
    )
    return AmortizationSchedule(loan_calculation_type=calc_type, entries=entries)

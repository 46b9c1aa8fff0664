"""
Strategy interface protocol for EscalaFin.
Defines the contract every calculation strategy must satisfy.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from .results import CalculationOutput
from .specs import LoanCalculationRequest


@runtime_checkable
class ICalculationStrategy(Protocol):
    """
    Contract for loan calculation strategies.
    Responsibilities: turn a request into payment and total amounts.
    """

    def calculate(self, request: LoanCalculationRequest) -> CalculationOutput:
        """
        Compute the loan amounts for one request.

        Must not raise for numeric input: non-positive principals or
        installment counts produce a zero-valued output instead.

        Returns:
            CalculationOutput with fields:
              - payment_amount:  per-installment amount
              - total_amount:    amount repaid over the whole loan
              - effective_rate:  total cost as a percentage of principal, or None
              - weekly_interest: weekly peso interest, or None
        """
        ...

"""
Declining-balance amortized loans (calculation type 'INTERES').
"""

from __future__ import annotations

import logging

from escalafin.core.currency import MXN
from escalafin.core.interfaces import ICalculationStrategy
from escalafin.core.kinds import Frequency
from escalafin.core.results import CalculationOutput, neutral_output
from escalafin.core.specs import LoanCalculationRequest
from escalafin.core.utils import get_payments_per_year

logger = logging.getLogger(__name__)


def periodic_rate(annual_rate: float, frequency: str) -> float:
    """Annual rate divided evenly over the installments of one year."""
    return annual_rate / get_payments_per_year(frequency)


def calculate_interest_based_payment(
    principal: float,
    annual_rate: float,
    number_of_payments: int,
    frequency: str = Frequency.MENSUAL,
) -> float:
    """
    Level installment of an amortized loan.

    Uses the annuity formula

        payment = P * r * (1 + r)^n / ((1 + r)^n - 1)

    with ``r = annual_rate / payments_per_year``, rounded to cents. A zero rate
    degenerates to the unrounded straight line ``P / n``. Non-positive
    principal or installment count returns 0; callers validate beforehand.

    **Example:**
        ```python
        calculate_interest_based_payment(100_000, 0.15, 12, "MENSUAL")  # 9025.83
        ```
    """
    if principal <= 0 or number_of_payments <= 0:
        return 0.0

    if annual_rate == 0:
        return principal / number_of_payments

    rate = periodic_rate(annual_rate, frequency)
    factor = (1 + rate) ** number_of_payments
    if factor == 1:
        # Rate below float resolution
        return principal / number_of_payments
    payment = principal * (rate * factor) / (factor - 1)
    return MXN.round(payment)


class StrategyInterest(ICalculationStrategy):
    """
    Amortized loan strategy (type: 'INTERES').

    **Required Parameters:**
        - annual_interest_rate: decimal fraction; treated as 0 when absent

    Populates neither ``effective_rate`` nor ``weekly_interest``.
    """

    def calculate(self, request: LoanCalculationRequest) -> CalculationOutput:
        if request.principal_amount <= 0 or request.number_of_payments <= 0:
            logger.debug("Non-positive principal or payment count; zero result")
            return neutral_output()

        payment = calculate_interest_based_payment(
            request.principal_amount,
            request.annual_interest_rate or 0.0,
            request.number_of_payments,
            request.payment_frequency,
        )
        return CalculationOutput(
            payment_amount=payment,
            total_amount=payment * request.number_of_payments,
            effective_rate=None,
            weekly_interest=None,
        )

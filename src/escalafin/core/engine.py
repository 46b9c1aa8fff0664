"""
Unified loan calculation entry point for EscalaFin.

``calculate_loan_details`` dispatches on the request's calculation type to the
strategy registered in ``CalculationRegistry`` and assembles the final, rounded
``LoanCalculationResult``. Strategies are registered by
``escalafin.strategies.register_defaults`` when the package is imported.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from .currency import MXN
from .interfaces import ICalculationStrategy
from .results import CalculationOutput, LoanCalculationResult, neutral_output
from .specs import LoanCalculationRequest
from .utils import calculate_end_date

logger = logging.getLogger(__name__)

# Global registry mapping calculation types to strategy implementations
CalculationRegistry: dict[str, ICalculationStrategy] = {}


def calculate(request: LoanCalculationRequest) -> CalculationOutput:
    """
    Run the registered strategy for a request without final rounding.

    Unknown calculation types yield the neutral zero output; this never raises.
    """
    strategy = CalculationRegistry.get(request.loan_calculation_type)
    if strategy is None:
        logger.warning(
            "Unknown loan calculation type %r; returning zero amounts",
            request.loan_calculation_type,
        )
        return neutral_output()
    return strategy.calculate(request)


def calculate_loan_details(
    request: LoanCalculationRequest | Mapping[str, Any],
) -> LoanCalculationResult:
    """
    Calculate payment amount, total amount and end date of a loan.

    **Args:**
        request: A ``LoanCalculationRequest`` or a mapping accepted by
            ``LoanCalculationRequest.from_dict`` (camelCase keys welcome)

    **Returns:**
        ``LoanCalculationResult`` with the end date for the request's payment
        frequency, payment and total, the effective rate (flat-fee and
        weekly-interest loans) and the weekly interest (weekly-interest loans
        only). Every amount is rounded to cents.

    **Example:**
        ```python
        from datetime import date
        from escalafin import calculate_loan_details

        result = calculate_loan_details({
            "loanCalculationType": "TARIFA_FIJA",
            "principalAmount": 6000,
            "numberOfPayments": 16,
            "paymentFrequency": "SEMANAL",
            "startDate": date(2024, 1, 1),
        })
        result.payment_amount  # 720.0
        result.total_amount    # 11520.0
        ```

    **Note:**
        ``payment_amount`` and ``total_amount`` are rounded independently, so
        ``payment_amount * number_of_payments`` can differ from
        ``total_amount`` by a cent.
    """
    if isinstance(request, Mapping):
        request = LoanCalculationRequest.from_dict(request)

    output = calculate(request)
    end_date = calculate_end_date(
        request.start_date, request.number_of_payments, request.payment_frequency
    )

    effective_rate = output["effective_rate"]
    weekly_interest = output["weekly_interest"]
    return LoanCalculationResult(
        payment_amount=MXN.round(output["payment_amount"]),
        total_amount=MXN.round(output["total_amount"]),
        end_date=end_date,
        effective_rate=MXN.round(effective_rate) if effective_rate is not None else None,
        weekly_interest=MXN.round(weekly_interest) if weekly_interest is not None else None,
    )

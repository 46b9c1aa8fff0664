"""
Fixed weekly-interest loans (calculation type 'INTERES_SEMANAL').
"""

from __future__ import annotations

import logging
from bisect import bisect_left

from escalafin.core.currency import MXN, round_half_up
from escalafin.core.interfaces import ICalculationStrategy
from escalafin.core.results import (
    CalculationOutput,
    WeeklyInterestBreakdown,
    neutral_output,
)
from escalafin.core.specs import LoanCalculationRequest
from escalafin.core.tariffs import TariffConfig, resolve_tariffs

logger = logging.getLogger(__name__)


def get_weekly_interest_amount(principal: float, config: TariffConfig | None = None) -> float:
    """
    Weekly interest in pesos for a principal, from the rate table.

    Lookup order:
      1. exact match on a table ``amount``
      2. linear interpolation between the two bracketing entries, rounded
         to the nearest peso
      3. above ``fallback.max_base``: ``max_interest`` scaled by
         ``principal / max_base``, rounded
      4. below ``fallback.min_base``: ``min_interest`` scaled by
         ``principal / min_base``, rounded
      5. otherwise ``fallback.min_interest``

    **Example:**
        ```python
        get_weekly_interest_amount(5000)   # 230
        get_weekly_interest_amount(5500)   # 245 (between 5000->230 and 6000->260)
        get_weekly_interest_amount(12000)  # 480 (400 * 12000 / 10000)
        ```
    """
    table = resolve_tariffs(config).weekly_interest
    rates = table.rates
    amounts = [entry.amount for entry in rates]

    idx = bisect_left(amounts, principal)
    if idx < len(rates) and rates[idx].amount == principal:
        return rates[idx].interest

    if 0 < idx < len(rates):
        lower, upper = rates[idx - 1], rates[idx]
        ratio = (principal - lower.amount) / (upper.amount - lower.amount)
        return round_half_up(lower.interest + ratio * (upper.interest - lower.interest), 0)

    fallback = table.fallback
    if principal > fallback.max_base:
        return round_half_up(fallback.max_interest * principal / fallback.max_base, 0)
    if principal < fallback.min_base:
        return round_half_up(fallback.min_interest * principal / fallback.min_base, 0)
    return fallback.min_interest


def calculate_weekly_interest_payment(
    principal: float,
    number_of_weeks: int,
    weekly_interest_amount: float | None = None,
    config: TariffConfig | None = None,
) -> WeeklyInterestBreakdown:
    """
    Installment, total, charge and effective rate of a weekly-interest loan.

    The caller-supplied ``weekly_interest_amount`` takes precedence over the
    rate table. Non-positive principal or week count gives zero amounts while
    still reporting the resolved weekly interest.
    """
    if weekly_interest_amount is not None:
        weekly_interest = weekly_interest_amount
    else:
        weekly_interest = get_weekly_interest_amount(principal, config)

    if principal <= 0 or number_of_weeks <= 0:
        return WeeklyInterestBreakdown(
            payment_amount=0.0,
            total_amount=0.0,
            total_charge=0.0,
            weekly_interest=weekly_interest,
            effective_rate=0.0,
        )

    total_charge = weekly_interest * number_of_weeks
    total_amount = principal + total_charge
    payment_amount = total_amount / number_of_weeks
    effective_rate = total_charge / principal * 100

    return WeeklyInterestBreakdown(
        payment_amount=MXN.round(payment_amount),
        total_amount=MXN.round(total_amount),
        total_charge=MXN.round(total_charge),
        weekly_interest=weekly_interest,
        effective_rate=MXN.round(effective_rate),
    )


class StrategyWeeklyInterest(ICalculationStrategy):
    """
    Weekly-interest strategy (type: 'INTERES_SEMANAL').

    ``number_of_payments`` is the number of weeks. Reports both the weekly
    interest and the effective rate.
    """

    def calculate(self, request: LoanCalculationRequest) -> CalculationOutput:
        if request.principal_amount <= 0 or request.number_of_payments <= 0:
            logger.debug("Non-positive principal or payment count; zero result")
            return neutral_output()

        breakdown = calculate_weekly_interest_payment(
            request.principal_amount,
            request.number_of_payments,
            request.weekly_interest_amount,
            request.tariffs,
        )
        return CalculationOutput(
            payment_amount=breakdown.payment_amount,
            total_amount=breakdown.total_amount,
            effective_rate=breakdown.effective_rate,
            weekly_interest=breakdown.weekly_interest,
        )

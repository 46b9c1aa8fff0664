"""
Flat-fee tiered loans (calculation type 'TARIFA_FIJA').
"""

from __future__ import annotations

import logging
import math

from escalafin.core.currency import MXN
from escalafin.core.interfaces import ICalculationStrategy
from escalafin.core.results import CalculationOutput, FixedFeeBreakdown, neutral_output
from escalafin.core.specs import LoanCalculationRequest
from escalafin.core.tariffs import FixedFeeConfig, TariffConfig, resolve_tariffs

logger = logging.getLogger(__name__)


def installment_for(principal: float, fixed_fee: FixedFeeConfig) -> float:
    """
    Per-installment amount for a principal.

    The first tier with ``principal <= max_amount`` wins. Above every tier the
    over-limit rule adds ``additional_fee`` for each started ``additional_step``
    beyond ``base_amount``.
    """
    for tier in fixed_fee.tiers:
        if principal <= tier.max_amount:
            return tier.payment_amount

    over = fixed_fee.over_limit
    remaining = principal - over.base_amount
    if remaining <= 0:
        # Tiers end below base_amount: nothing to surcharge
        logger.warning(
            "Principal %s exceeds all tiers but not overLimit.baseAmount %s; "
            "charging basePayment only",
            principal,
            over.base_amount,
        )
        return over.base_payment
    additional_steps = math.ceil(remaining / over.additional_step)
    return over.base_payment + additional_steps * over.additional_fee


def calculate_fixed_fee_payment(
    principal: float,
    number_of_payments: int = 16,
    config: TariffConfig | None = None,
) -> FixedFeeBreakdown:
    """
    Installment, total and fee of a flat-fee loan.

    **Args:**
        principal: Disbursed amount
        number_of_payments: Installment count (16 by default)
        config: Tenant tariffs; ``None`` uses the legacy tiers
            (<=3000: 300, <=4000: 425, <=5000: 600, then +120 per started 1000)

    **Returns:**
        FixedFeeBreakdown with every amount rounded to cents. Non-positive
        inputs give an all-zero breakdown.

    **Example:**
        ```python
        calculate_fixed_fee_payment(6000, 16)
        # FixedFeeBreakdown(payment_amount=720.0, total_amount=11520.0, total_fee=5520.0)
        ```
    """
    if principal <= 0 or number_of_payments <= 0:
        return FixedFeeBreakdown(payment_amount=0.0, total_amount=0.0, total_fee=0.0)

    tariffs = resolve_tariffs(config)
    total_amount = installment_for(principal, tariffs.fixed_fee) * number_of_payments
    payment_amount = total_amount / number_of_payments
    total_fee = total_amount - principal

    return FixedFeeBreakdown(
        payment_amount=MXN.round(payment_amount),
        total_amount=MXN.round(total_amount),
        total_fee=MXN.round(total_fee),
    )


class StrategyFixedFee(ICalculationStrategy):
    """
    Flat-fee tiered strategy (type: 'TARIFA_FIJA').

    ``effective_rate`` is the fee as a percentage of principal and is only
    reported when a fee is actually charged.
    """

    def calculate(self, request: LoanCalculationRequest) -> CalculationOutput:
        if request.principal_amount <= 0 or request.number_of_payments <= 0:
            logger.debug("Non-positive principal or payment count; zero result")
            return neutral_output()

        breakdown = calculate_fixed_fee_payment(
            request.principal_amount, request.number_of_payments, request.tariffs
        )
        effective_rate = None
        if breakdown.total_fee > 0:
            effective_rate = breakdown.total_fee / request.principal_amount * 100

        return CalculationOutput(
            payment_amount=breakdown.payment_amount,
            total_amount=breakdown.total_amount,
            effective_rate=effective_rate,
            weekly_interest=None,
        )

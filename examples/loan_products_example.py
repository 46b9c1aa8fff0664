#!/usr/bin/env python3
"""
Loan Products Example

This example walks through the three EscalaFin loan products:
- INTERES: Declining-balance loan with a level monthly payment
- TARIFA_FIJA: Flat installment chosen from principal tiers
- INTERES_SEMANAL: Fixed weekly interest looked up in a rate table
"""

import sys
from datetime import date
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from escalafin import (
    CalcType,
    Frequency,
    build_amortization_schedule,
    calculate_loan_details,
    load_tariffs,
    validate_loan_params,
)
from escalafin.core.currency import MXN


def interest_loan_example():
    """Monthly loan with interest on the outstanding balance."""
    print("=== Interest Loan Example ===")

    params = {
        "loanCalculationType": CalcType.INTERES,
        "principalAmount": 100_000,
        "annualInterestRate": 0.15,  # 15% per year
        "numberOfPayments": 12,
        "paymentFrequency": Frequency.MENSUAL,
        "startDate": date(2024, 1, 15),
    }

    result = calculate_loan_details(params)
    print(f"Monthly payment: {MXN.format(result.payment_amount)}")
    print(f"Total to repay:  {MXN.format(result.total_amount)}")
    print(f"Last payment:    {result.end_date}")

    schedule = build_amortization_schedule(params)
    print(schedule.to_frame().head(3).to_string())
    print()


def flat_fee_example():
    """Flat-fee loans across the tier boundaries."""
    print("=== Flat Fee Example ===")

    for principal in (3000, 4000, 5000, 6000, 8000):
        result = calculate_loan_details(
            {
                "loanCalculationType": CalcType.TARIFA_FIJA,
                "principalAmount": principal,
                "numberOfPayments": 16,
                "paymentFrequency": Frequency.SEMANAL,
                "startDate": date(2024, 1, 1),
            }
        )
        print(
            f"{MXN.format(principal):>10} -> {MXN.format(result.payment_amount)} x 16"
            f" = {MXN.format(result.total_amount)} ({result.effective_rate:.0f}% fee)"
        )
    print()


def weekly_interest_example():
    """Weekly-interest loans with default and tenant tariffs."""
    print("=== Weekly Interest Example ===")

    tenant = load_tariffs(
        {
            "fixedFee": {
                "tiers": [{"maxAmount": 3000, "paymentAmount": 280}],
                "overLimit": {
                    "baseAmount": 3000,
                    "basePayment": 280,
                    "additionalStep": 1000,
                    "additionalFee": 90,
                },
            },
            "weeklyInterest": {
                "rates": [
                    {"amount": 3000, "interest": 150},
                    {"amount": 6000, "interest": 240},
                ],
                "fallback": {
                    "minBase": 3000,
                    "minInterest": 150,
                    "maxBase": 6000,
                    "maxInterest": 240,
                },
            },
        }
    )

    for label, config in (("default", None), ("tenant", tenant)):
        params = {
            "loanCalculationType": CalcType.INTERES_SEMANAL,
            "principalAmount": 5500,
            "numberOfPayments": 10,
            "paymentFrequency": Frequency.SEMANAL,
            "startDate": date(2024, 1, 1),
            "config": config,
        }
        result = calculate_loan_details(params)
        print(
            f"{label:>8}: {MXN.format(result.weekly_interest)} per week, "
            f"installment {MXN.format(result.payment_amount)}, "
            f"effective rate {result.effective_rate:.1f}%"
        )
    print()


def validation_example():
    """Parameters are checked before any calculation."""
    print("=== Validation Example ===")

    check = validate_loan_params(
        {
            "loanCalculationType": CalcType.TARIFA_FIJA,
            "principalAmount": 500,
            "numberOfPayments": 16,
        }
    )
    print(f"valid={check.valid} error={check.error!r}")


if __name__ == "__main__":
    interest_loan_example()
    flat_fee_example()
    weekly_interest_example()
    validation_example()

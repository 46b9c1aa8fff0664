"""
EscalaFin - Loan calculation engine for microfinance origination

EscalaFin computes installment amounts, totals and end dates for the three
loan products of the EscalaFin platform. It is pure and deterministic: the
loan-creation flow and the simulator call it with plain parameters and a
tenant tariff configuration, and persist or display the numbers it returns.

Key Features:
- **Strategy Pattern**: Calculations are selected by a calculation-type tag
- **Tenant Tariffs**: Flat-fee tiers and weekly-interest tables come from
  configuration, with legacy defaults when none is supplied
- **Never Throws on Numbers**: Invalid numeric input yields zero amounts;
  ``validate_loan_params`` reports problems as values
- **Amortization Tables**: Per-installment breakdown as dataclasses or a
  pandas DataFrame

Calculation Types:
    - 'INTERES': Declining-balance amortization with a level payment
    - 'TARIFA_FIJA': Fixed installment picked from principal tiers
    - 'INTERES_SEMANAL': Fixed peso interest per week from a rate table

Quick Start:
    ```python
    from datetime import date
    from escalafin import calculate_loan_details, validate_loan_params

    params = {
        "loanCalculationType": "INTERES_SEMANAL",
        "principalAmount": 5000,
        "numberOfPayments": 10,
        "paymentFrequency": "SEMANAL",
        "startDate": date(2024, 1, 1),
    }
    if validate_loan_params(params):
        result = calculate_loan_details(params)
        result.payment_amount   # 730.0
        result.weekly_interest  # 230
    ```
"""

# Version information
__version__ = "0.1.0"
__author__ = "EscalaFin Team"
__description__ = "Loan calculation engine for microfinance origination"

# Registers the default calculation strategies
import escalafin.strategies

from .core import (
    DEFAULT_TARIFFS,
    AmortizationSchedule,
    CalcType,
    CalculationRegistry,
    ConfigError,
    Frequency,
    ICalculationStrategy,
    LoanCalculationRequest,
    LoanCalculationResult,
    ScheduleEntry,
    TariffConfig,
    TariffConfigError,
    ValidationResult,
    build_amortization_schedule,
    calculate_end_date,
    calculate_loan_details,
    get_payments_per_year,
    load_tariffs,
    validate_loan_params,
)
from .strategies import (
    calculate_fixed_fee_payment,
    calculate_interest_based_payment,
    calculate_weekly_interest_payment,
    get_weekly_interest_amount,
)

# Define what gets imported with "from escalafin import *"
__all__ = [
    # Kinds
    "CalcType",
    "Frequency",
    # Configuration
    "TariffConfig",
    "DEFAULT_TARIFFS",
    "load_tariffs",
    "ConfigError",
    "TariffConfigError",
    # Requests and results
    "LoanCalculationRequest",
    "LoanCalculationResult",
    "ValidationResult",
    # Engine
    "ICalculationStrategy",
    "CalculationRegistry",
    "calculate_loan_details",
    "validate_loan_params",
    # Strategy functions
    "calculate_interest_based_payment",
    "calculate_fixed_fee_payment",
    "calculate_weekly_interest_payment",
    "get_weekly_interest_amount",
    # Calendar
    "get_payments_per_year",
    "calculate_end_date",
    # Schedule
    "AmortizationSchedule",
    "ScheduleEntry",
    "build_amortization_schedule",
    # Version info
    "__version__",
    "__author__",
    "__description__",
]

"""
Core module for EscalaFin.

This module contains the value objects, calendar helpers, validator and
engine entry point of the loan calculation system.
"""

from .config_loader import TariffConfigError, dump_tariffs, load_tariffs
from .currency import MXN, Currency, round_half_up
from .engine import CalculationRegistry, calculate, calculate_loan_details
from .errors import ConfigError, TariffWarning
from .interfaces import ICalculationStrategy
from .kinds import CalcType, Frequency
from .results import (
    CalculationOutput,
    FixedFeeBreakdown,
    LoanCalculationResult,
    WeeklyInterestBreakdown,
    neutral_output,
)
from .schedule import AmortizationSchedule, ScheduleEntry, build_amortization_schedule
from .specs import LoanCalculationRequest
from .tariffs import (
    DEFAULT_TARIFFS,
    FeeTier,
    FixedFeeConfig,
    OverLimit,
    RateEntry,
    RateFallback,
    TariffConfig,
    WeeklyInterestConfig,
    resolve_tariffs,
)
from .utils import add_months, calculate_end_date, get_payments_per_year, payment_dates
from .validation import ValidationResult, validate_loan_params

__all__ = [
    # Errors
    "ConfigError",
    "TariffConfigError",
    "TariffWarning",
    # Kinds
    "CalcType",
    "Frequency",
    # Currency
    "Currency",
    "MXN",
    "round_half_up",
    # Tariffs
    "TariffConfig",
    "FixedFeeConfig",
    "FeeTier",
    "OverLimit",
    "WeeklyInterestConfig",
    "RateEntry",
    "RateFallback",
    "DEFAULT_TARIFFS",
    "resolve_tariffs",
    "load_tariffs",
    "dump_tariffs",
    # Requests and results
    "LoanCalculationRequest",
    "LoanCalculationResult",
    "CalculationOutput",
    "FixedFeeBreakdown",
    "WeeklyInterestBreakdown",
    "neutral_output",
    # Engine
    "ICalculationStrategy",
    "CalculationRegistry",
    "calculate",
    "calculate_loan_details",
    # Validation
    "ValidationResult",
    "validate_loan_params",
    # Schedule
    "AmortizationSchedule",
    "ScheduleEntry",
    "build_amortization_schedule",
    # Calendar
    "get_payments_per_year",
    "calculate_end_date",
    "payment_dates",
    "add_months",
]

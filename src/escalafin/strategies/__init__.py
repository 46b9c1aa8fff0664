"""
Calculation strategy implementations for EscalaFin.

Each strategy implements ``ICalculationStrategy`` for one calculation type.
Importing this module registers all default strategies in
``escalafin.core.engine.CalculationRegistry``.
"""

from .fixed_fee import (
    StrategyFixedFee,
    calculate_fixed_fee_payment,
    installment_for,
)
from .interest import StrategyInterest, calculate_interest_based_payment, periodic_rate
from .registry import register_defaults
from .weekly_interest import (
    StrategyWeeklyInterest,
    calculate_weekly_interest_payment,
    get_weekly_interest_amount,
)

# Register all default strategies when module is imported
register_defaults()

__all__ = [
    # Strategies
    "StrategyInterest",
    "StrategyFixedFee",
    "StrategyWeeklyInterest",
    # Calculation functions
    "calculate_interest_based_payment",
    "calculate_fixed_fee_payment",
    "calculate_weekly_interest_payment",
    "get_weekly_interest_amount",
    "installment_for",
    "periodic_rate",
    # Registry
    "register_defaults",
]

"""
Strategy registry setup for EscalaFin.
"""

from escalafin.core.engine import CalculationRegistry
from escalafin.core.kinds import CalcType

from .fixed_fee import StrategyFixedFee
from .interest import StrategyInterest
from .weekly_interest import StrategyWeeklyInterest


def register_defaults():
    """
    Register the default calculation strategies in ``CalculationRegistry``.

    Registered Strategies:
        - 'INTERES': declining-balance amortization
        - 'TARIFA_FIJA': flat-fee tiers
        - 'INTERES_SEMANAL': fixed weekly interest

    Note:
        This function is automatically called when the package is imported.
        Tenant-specific strategies can be added by assigning to the registry
        dictionary directly.
    """
    CalculationRegistry[CalcType.INTERES] = StrategyInterest()
    CalculationRegistry[CalcType.TARIFA_FIJA] = StrategyFixedFee()
    CalculationRegistry[CalcType.INTERES_SEMANAL] = StrategyWeeklyInterest()

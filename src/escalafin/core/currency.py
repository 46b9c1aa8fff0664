"""
Currency and precision handling for EscalaFin.
"""

from __future__ import annotations

import math


def round_half_up(value: float, decimals: int = 2) -> float:
    """
    Round a float the way ``Math.round(x * 10**d) / 10**d`` does.

    The value is scaled as a binary float before rounding, so ``1.005`` rounds
    to ``1.0`` (its scaled value is ``100.49999...``). Halves go toward
    positive infinity, which means ``-2.5`` rounds to ``-2``.
    """
    scale = 10**decimals
    return math.floor(value * scale + 0.5) / scale


class Currency:
    """
    Currency definition with precision and display rules.

    Attributes:
        code: ISO currency code (e.g., 'MXN')
        decimals: Number of decimal places for this currency
        symbol: Prefix used by ``format``
    """

    def __init__(self, code: str, decimals: int = 2, symbol: str = "$"):
        self.code = code.upper()
        self.decimals = decimals
        self.symbol = symbol

    def round(self, amount: float) -> float:
        """Round a float amount to currency precision (halves up)."""
        return round_half_up(amount, self.decimals)

    def format(self, amount: float) -> str:
        """Format an amount for display, e.g. ``$9,025.00``."""
        value = self.round(amount)
        sign = "-" if value < 0 else ""
        return f"{sign}{self.symbol}{abs(value):,.{self.decimals}f}"

    def __str__(self) -> str:
        return self.code

    def __repr__(self) -> str:
        return f"Currency('{self.code}', decimals={self.decimals})"


# Every EscalaFin amount is in Mexican pesos
MXN = Currency("MXN", decimals=2)

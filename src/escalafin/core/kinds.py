"""
EscalaFin discriminator constants (calculation types and payment frequencies).

Values are plain strings so that whatever the loan-creation flow or the
simulator sends can be passed through untouched; unknown values are handled by
the documented fallbacks rather than rejected.
"""


class CalcType:
    """Calculation type constants, the tag strategies are registered under."""

    # Standard declining-balance amortization
    INTERES = "INTERES"
    # Per-installment amount picked from principal brackets
    TARIFA_FIJA = "TARIFA_FIJA"
    # Fixed peso amount of interest per week
    INTERES_SEMANAL = "INTERES_SEMANAL"

    @classmethod
    def all_types(cls) -> list[str]:
        """Enumerate all known calculation types."""
        return [cls.INTERES, cls.TARIFA_FIJA, cls.INTERES_SEMANAL]


class Frequency:
    """Payment frequency constants; unknown values behave as MENSUAL."""

    SEMANAL = "SEMANAL"  # weekly
    CATORCENAL = "CATORCENAL"  # every 14 days
    QUINCENAL = "QUINCENAL"  # every 15 days
    MENSUAL = "MENSUAL"  # monthly (also the fallback)

    @classmethod
    def all_frequencies(cls) -> list[str]:
        """Enumerate all known payment frequencies."""
        return [cls.SEMANAL, cls.CATORCENAL, cls.QUINCENAL, cls.MENSUAL]

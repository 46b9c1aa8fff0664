"""
Pre-flight validation of loan parameters for EscalaFin.

Validation never raises: it returns a ``ValidationResult`` describing the first
failing check. Messages are in Spanish because they are shown verbatim to
loan officers.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import date
from typing import Any

from .errors import ConfigError
from .kinds import CalcType
from .specs import LoanCalculationRequest

# Principal range accepted for flat-fee and weekly-interest loans, independent
# of whatever tiers or rates the tenant configured
MIN_TARIFF_PRINCIPAL = 1000
MAX_TARIFF_PRINCIPAL = 100000

_TARIFF_LABELS = {
    CalcType.TARIFA_FIJA: "tarifa fija",
    CalcType.INTERES_SEMANAL: "interés semanal",
}


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of ``validate_loan_params``; ``error`` is set only when invalid."""

    valid: bool
    error: str | None = None

    def __bool__(self) -> bool:
        return self.valid

    def to_dict(self) -> dict[str, Any]:
        """Mapping in the ``{valid, error?}`` shape used by the HTTP layer."""
        if self.valid:
            return {"valid": True}
        return {"valid": False, "error": self.error}


def _fail(message: str) -> ValidationResult:
    return ValidationResult(valid=False, error=message)


def validate_loan_params(
    request: LoanCalculationRequest | Mapping[str, Any],
) -> ValidationResult:
    """
    Check that loan parameters are plausible before calculating.

    Checks, in order (the first failure is returned):
      1. principal must be positive
      2. number of payments must be positive
      3. 'INTERES' needs a non-negative annual rate
      4. 'TARIFA_FIJA' and 'INTERES_SEMANAL' need a principal between
         1,000 and 100,000
      5. 'INTERES_SEMANAL' rejects a negative weekly interest amount

    Mappings that cannot be read as a request (missing or non-numeric
    fields) are reported as invalid as well.

    A request can pass validation and still fall outside every configured
    tier or rate; the calculation then uses the over-limit and fallback rules.
    """
    if isinstance(request, Mapping):
        try:
            request = LoanCalculationRequest.from_dict(request, default_start=date.today())
        except (ConfigError, TypeError, ValueError) as e:
            return _fail(f"Parámetros de préstamo inválidos: {e}")

    calc_type = request.loan_calculation_type
    principal = request.principal_amount

    if principal <= 0:
        return _fail("El monto principal debe ser mayor a 0")

    if request.number_of_payments <= 0:
        return _fail("El número de pagos debe ser mayor a 0")

    if calc_type == CalcType.INTERES:
        rate = request.annual_interest_rate
        if rate is None or rate < 0:
            return _fail("La tasa de interés debe ser un número válido no negativo")

    label = _TARIFF_LABELS.get(calc_type)
    if label is not None:
        if principal < MIN_TARIFF_PRINCIPAL:
            return _fail(f"El monto mínimo para {label} es ${MIN_TARIFF_PRINCIPAL:,}")
        if principal > MAX_TARIFF_PRINCIPAL:
            return _fail(f"El monto máximo para {label} es ${MAX_TARIFF_PRINCIPAL:,}")

    if calc_type == CalcType.INTERES_SEMANAL:
        weekly = request.weekly_interest_amount
        if weekly is not None and weekly < 0:
            return _fail("El interés semanal no puede ser negativo")

    return ValidationResult(valid=True)

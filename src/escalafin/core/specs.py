"""
Loan request specification for EscalaFin.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any

from .errors import ConfigError
from .kinds import Frequency
from .tariffs import TariffConfig, resolve_tariffs

# camelCase keys used by the HTTP layer and the simulator
_ALIASES = {
    "loanCalculationType": "loan_calculation_type",
    "principalAmount": "principal_amount",
    "numberOfPayments": "number_of_payments",
    "paymentFrequency": "payment_frequency",
    "annualInterestRate": "annual_interest_rate",
    "weeklyInterestAmount": "weekly_interest_amount",
    "startDate": "start_date",
}


@dataclass(frozen=True)
class LoanCalculationRequest:
    """
    Parameters of one loan calculation.

    Attributes:
        loan_calculation_type: 'INTERES', 'TARIFA_FIJA' or 'INTERES_SEMANAL'
        principal_amount: Disbursed amount in pesos
        number_of_payments: Installment count (weeks for 'INTERES_SEMANAL')
        start_date: Disbursement date
        payment_frequency: 'SEMANAL', 'CATORCENAL', 'QUINCENAL' or 'MENSUAL'
        annual_interest_rate: Decimal fraction (0.15 = 15%), used by 'INTERES'
        weekly_interest_amount: Peso amount per week for 'INTERES_SEMANAL';
            looked up in the rate table when omitted
        config: Tenant tariffs; ``None`` uses the default tariffs
    """

    loan_calculation_type: str
    principal_amount: float
    number_of_payments: int
    start_date: date
    payment_frequency: str = Frequency.MENSUAL
    annual_interest_rate: float | None = None
    weekly_interest_amount: float | None = None
    config: TariffConfig | None = None

    @property
    def tariffs(self) -> TariffConfig:
        """Configuration to calculate with (defaults substituted)."""
        return resolve_tariffs(self.config)

    @classmethod
    def from_dict(
        cls, data: Mapping[str, Any], *, default_start: date | None = None
    ) -> LoanCalculationRequest:
        """
        Build a request from a mapping with camelCase or snake_case keys.

        ``startDate`` may be a ``date``/``datetime`` or an ISO string and falls
        back to ``default_start`` when missing; a raw ``config`` mapping is
        parsed into a ``TariffConfig``.
        """
        params = {_ALIASES.get(key, key): value for key, value in data.items()}
        if params.get("start_date") is None and default_start is not None:
            params["start_date"] = default_start
        unknown = set(params) - set(cls.__dataclass_fields__)
        if unknown:
            raise ConfigError(f"Unknown loan parameters: {', '.join(sorted(unknown))}")
        for required in ("loan_calculation_type", "principal_amount", "number_of_payments", "start_date"):
            if params.get(required) is None:
                raise ConfigError(f"'{required}' is required")

        params["principal_amount"] = float(params["principal_amount"])
        params["number_of_payments"] = int(params["number_of_payments"])
        for key in ("annual_interest_rate", "weekly_interest_amount"):
            if params.get(key) is not None:
                params[key] = float(params[key])
        params["start_date"] = _coerce_date(params["start_date"])
        if params.get("config") is not None:
            params["config"] = resolve_tariffs(params["config"])
        return cls(**params)


def _coerce_date(value: Any) -> date:
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            if "T" in value or " " in value:
                return datetime.fromisoformat(value)
            return date.fromisoformat(value)
        except ValueError as exc:
            raise ConfigError(f"start_date: invalid ISO date '{value}'") from exc
    raise ConfigError(f"start_date: expected a date or ISO string, got {value!r}")

"""
Tariff configuration value objects for EscalaFin.

A ``TariffConfig`` describes the flat-fee tiers used by ``TARIFA_FIJA`` loans
and the weekly-interest table used by ``INTERES_SEMANAL`` loans. It is owned
by an external per-tenant configuration store and exchanged as JSON:

    ```json
    {
      "fixedFee": {
        "tiers": [{"maxAmount": 3000, "paymentAmount": 300}],
        "overLimit": {"baseAmount": 5000, "basePayment": 600,
                      "additionalStep": 1000, "additionalFee": 120}
      },
      "weeklyInterest": {
        "rates": [{"amount": 3000, "interest": 170}],
        "fallback": {"minBase": 3000, "minInterest": 170,
                     "maxBase": 10000, "maxInterest": 400}
      }
    }
    ```

All objects are frozen. Tables are stored sorted ascending (tiers by
``max_amount``, rates by ``amount``); unsorted input is reordered with a
``TariffWarning`` so that first-match tier selection is always well defined.
"""

from __future__ import annotations

import math
import warnings
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from .errors import ConfigError, TariffWarning

__all__ = [
    "FeeTier",
    "OverLimit",
    "FixedFeeConfig",
    "RateEntry",
    "RateFallback",
    "WeeklyInterestConfig",
    "TariffConfig",
    "DEFAULT_TARIFFS",
    "resolve_tariffs",
]


@dataclass(frozen=True)
class FeeTier:
    """Principal bracket: loans up to ``max_amount`` pay ``payment_amount`` per installment."""

    max_amount: float
    payment_amount: float


@dataclass(frozen=True)
class OverLimit:
    """Surcharge rule for principals above every tier."""

    base_amount: float
    base_payment: float
    additional_step: float
    additional_fee: float

    def __post_init__(self):
        if self.additional_step <= 0:
            raise ConfigError(
                f"overLimit.additionalStep must be positive, got {self.additional_step}"
            )


@dataclass(frozen=True)
class FixedFeeConfig:
    tiers: tuple[FeeTier, ...]
    over_limit: OverLimit

    def __post_init__(self):
        tiers = tuple(self.tiers)
        ordered = tuple(sorted(tiers, key=lambda t: t.max_amount))
        if ordered != tiers:
            warnings.warn(
                "fixedFee.tiers were not sorted by maxAmount; reordered ascending",
                TariffWarning,
                stacklevel=3,
            )
        object.__setattr__(self, "tiers", ordered)


@dataclass(frozen=True)
class RateEntry:
    """Weekly interest (pesos) charged for a principal of exactly ``amount``."""

    amount: float
    interest: float


@dataclass(frozen=True)
class RateFallback:
    """Extrapolation anchors for principals outside the rate table."""

    min_base: float
    min_interest: float
    max_base: float
    max_interest: float

    def __post_init__(self):
        if self.min_base <= 0 or self.max_base <= 0:
            raise ConfigError(
                "weeklyInterest.fallback minBase and maxBase must be positive"
            )


@dataclass(frozen=True)
class WeeklyInterestConfig:
    rates: tuple[RateEntry, ...]
    fallback: RateFallback

    def __post_init__(self):
        rates = tuple(self.rates)
        if not rates:
            raise ConfigError("weeklyInterest.rates must contain at least one entry")
        ordered = tuple(sorted(rates, key=lambda r: r.amount))
        if ordered != rates:
            warnings.warn(
                "weeklyInterest.rates were not sorted by amount; reordered ascending",
                TariffWarning,
                stacklevel=3,
            )
        amounts = [r.amount for r in ordered]
        if len(set(amounts)) != len(amounts):
            raise ConfigError("weeklyInterest.rates contains duplicated amounts")
        object.__setattr__(self, "rates", ordered)


@dataclass(frozen=True)
class TariffConfig:
    """
    Complete tariff configuration for one tenant.

    Attributes:
        fixed_fee: Tiers and over-limit rule for ``TARIFA_FIJA`` loans
        weekly_interest: Rate table and fallback for ``INTERES_SEMANAL`` loans
    """

    fixed_fee: FixedFeeConfig
    weekly_interest: WeeklyInterestConfig

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> TariffConfig:
        """Build a configuration from its JSON mapping (camelCase keys)."""
        root = _section(data, "fixedFee", "<tariffs>")
        over = _section(root, "overLimit", "fixedFee")
        fixed_fee = FixedFeeConfig(
            tiers=tuple(
                FeeTier(
                    max_amount=_number(item, "maxAmount", ctx),
                    payment_amount=_number(item, "paymentAmount", ctx),
                )
                for ctx, item in _entries(root, "tiers", "fixedFee")
            ),
            over_limit=OverLimit(
                base_amount=_number(over, "baseAmount", "fixedFee.overLimit"),
                base_payment=_number(over, "basePayment", "fixedFee.overLimit"),
                additional_step=_number(over, "additionalStep", "fixedFee.overLimit"),
                additional_fee=_number(over, "additionalFee", "fixedFee.overLimit"),
            ),
        )

        weekly = _section(data, "weeklyInterest", "<tariffs>")
        fallback = _section(weekly, "fallback", "weeklyInterest")
        weekly_interest = WeeklyInterestConfig(
            rates=tuple(
                RateEntry(
                    amount=_number(item, "amount", ctx),
                    interest=_number(item, "interest", ctx),
                )
                for ctx, item in _entries(weekly, "rates", "weeklyInterest")
            ),
            fallback=RateFallback(
                min_base=_number(fallback, "minBase", "weeklyInterest.fallback"),
                min_interest=_number(fallback, "minInterest", "weeklyInterest.fallback"),
                max_base=_number(fallback, "maxBase", "weeklyInterest.fallback"),
                max_interest=_number(fallback, "maxInterest", "weeklyInterest.fallback"),
            ),
        )
        return cls(fixed_fee=fixed_fee, weekly_interest=weekly_interest)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the JSON mapping exchanged with the configuration store."""
        over = self.fixed_fee.over_limit
        fallback = self.weekly_interest.fallback
        return {
            "fixedFee": {
                "tiers": [
                    {"maxAmount": t.max_amount, "paymentAmount": t.payment_amount}
                    for t in self.fixed_fee.tiers
                ],
                "overLimit": {
                    "baseAmount": over.base_amount,
                    "basePayment": over.base_payment,
                    "additionalStep": over.additional_step,
                    "additionalFee": over.additional_fee,
                },
            },
            "weeklyInterest": {
                "rates": [
                    {"amount": r.amount, "interest": r.interest}
                    for r in self.weekly_interest.rates
                ],
                "fallback": {
                    "minBase": fallback.min_base,
                    "minInterest": fallback.min_interest,
                    "maxBase": fallback.max_base,
                    "maxInterest": fallback.max_interest,
                },
            },
        }


def _section(data: Any, key: str, ctx: str) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise ConfigError(f"{ctx}: expected a mapping")
    value = data.get(key)
    if not isinstance(value, Mapping):
        raise ConfigError(f"{ctx}.{key}: expected a mapping")
    return value


def _entries(data: Mapping[str, Any], key: str, ctx: str):
    value = data.get(key)
    if not isinstance(value, (list, tuple)):
        raise ConfigError(f"{ctx}.{key}: expected a list")
    for idx, item in enumerate(value):
        item_ctx = f"{ctx}.{key}[{idx}]"
        if not isinstance(item, Mapping):
            raise ConfigError(f"{item_ctx}: expected a mapping")
        yield item_ctx, item


def _number(data: Mapping[str, Any], key: str, ctx: str) -> float:
    if key not in data:
        raise ConfigError(f"{ctx}: '{key}' is required")
    value = data[key]
    if isinstance(value, bool):  # bool is an int subclass
        raise ConfigError(f"{ctx}.{key}: expected a number, got {value!r}")
    try:
        number = float(value)
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"{ctx}.{key}: expected a number, got {value!r}") from exc
    if not math.isfinite(number):
        raise ConfigError(f"{ctx}.{key}: expected a finite number, got {value!r}")
    return number


# Legacy hardcoded tariffs, used whenever a caller supplies no configuration
DEFAULT_TARIFFS = TariffConfig(
    fixed_fee=FixedFeeConfig(
        tiers=(
            FeeTier(max_amount=3000, payment_amount=300),
            FeeTier(max_amount=4000, payment_amount=425),
            FeeTier(max_amount=5000, payment_amount=600),
        ),
        over_limit=OverLimit(
            base_amount=5000, base_payment=600, additional_step=1000, additional_fee=120
        ),
    ),
    weekly_interest=WeeklyInterestConfig(
        rates=(
            RateEntry(amount=3000, interest=170),
            RateEntry(amount=4000, interest=200),
            RateEntry(amount=5000, interest=230),
            RateEntry(amount=6000, interest=260),
            RateEntry(amount=7000, interest=291),
            RateEntry(amount=8000, interest=320),
            RateEntry(amount=9000, interest=360),
            RateEntry(amount=10000, interest=400),
        ),
        fallback=RateFallback(
            min_base=3000, min_interest=170, max_base=10000, max_interest=400
        ),
    ),
)


def resolve_tariffs(config: TariffConfig | Mapping[str, Any] | None) -> TariffConfig:
    """
    Return the configuration to calculate with.

    ``None`` means the caller has no tenant configuration and yields
    ``DEFAULT_TARIFFS``; a raw JSON mapping is parsed with ``from_dict``.
    """
    if config is None:
        return DEFAULT_TARIFFS
    if isinstance(config, TariffConfig):
        return config
    return TariffConfig.from_dict(config)

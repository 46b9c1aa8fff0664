"""Tests for the flat-fee tiered strategy."""

from datetime import date

import pytest
from escalafin.core.kinds import CalcType
from escalafin.core.results import FixedFeeBreakdown
from escalafin.core.specs import LoanCalculationRequest
from escalafin.core.tariffs import DEFAULT_TARIFFS, TariffConfig
from escalafin.strategies.fixed_fee import (
    StrategyFixedFee,
    calculate_fixed_fee_payment,
    installment_for,
)


def _config(tiers, over_limit):
    data = DEFAULT_TARIFFS.to_dict()
    data["fixedFee"] = {"tiers": tiers, "overLimit": over_limit}
    return TariffConfig.from_dict(data)


class TestLegacyTiers:
    """Hardcoded tiers used when no configuration is supplied."""

    @pytest.mark.parametrize(
        "principal, installment",
        [
            (1000, 300),
            (3000, 300),
            (3001, 425),
            (4000, 425),
            (4500, 600),
            (5000, 600),
            (5001, 720),
            (6000, 720),
            (7000, 840),
            (7500, 960),
        ],
    )
    def test_installment_per_principal(self, principal, installment):
        assert installment_for(principal, DEFAULT_TARIFFS.fixed_fee) == installment

    def test_three_thousand_over_sixteen_payments(self):
        assert calculate_fixed_fee_payment(3000, 16) == FixedFeeBreakdown(
            payment_amount=300.0, total_amount=4800.0, total_fee=1800.0
        )

    def test_tier_boundary_is_inclusive(self):
        result = calculate_fixed_fee_payment(5000, 16)
        assert result.payment_amount == 600.0
        assert result.total_amount == 9600.0
        assert result.total_fee == 4600.0

    def test_over_limit_surcharge(self):
        result = calculate_fixed_fee_payment(6000, 16)
        assert result.total_amount == 11520.0
        assert result.payment_amount == 720.0
        assert result.total_fee == 5520.0

    def test_default_payment_count_is_sixteen(self):
        assert calculate_fixed_fee_payment(3000).total_amount == 4800.0

    def test_none_config_matches_defaults(self):
        assert calculate_fixed_fee_payment(6500, 12, None) == calculate_fixed_fee_payment(
            6500, 12, DEFAULT_TARIFFS
        )


class TestConfiguredTiers:
    def test_custom_tiers_and_over_limit(self):
        config = _config(
            tiers=[{"maxAmount": 2000, "paymentAmount": 250}],
            over_limit={
                "baseAmount": 2000,
                "basePayment": 250,
                "additionalStep": 500,
                "additionalFee": 50,
            },
        )

        assert calculate_fixed_fee_payment(2000, 10, config).payment_amount == 250.0
        # 600 over the base is two started steps of 500
        result = calculate_fixed_fee_payment(2600, 10, config)
        assert result.payment_amount == 350.0
        assert result.total_amount == 3500.0

    def test_inconsistent_over_limit_charges_base_payment(self, caplog):
        """Tiers ending below baseAmount fall back to basePayment without surcharge."""
        config = _config(
            tiers=[{"maxAmount": 3000, "paymentAmount": 300}],
            over_limit={
                "baseAmount": 5000,
                "basePayment": 600,
                "additionalStep": 1000,
                "additionalFee": 120,
            },
        )

        result = calculate_fixed_fee_payment(4000, 16, config)

        assert result.payment_amount == 600.0
        assert result.total_amount == 9600.0
        assert "charging basePayment only" in caplog.text

    def test_no_tiers_uses_over_limit_for_everything(self):
        config = _config(
            tiers=[],
            over_limit={
                "baseAmount": 0,
                "basePayment": 100,
                "additionalStep": 1000,
                "additionalFee": 100,
            },
        )
        # 2500 is three started steps of 1000
        assert calculate_fixed_fee_payment(2500, 4, config).payment_amount == 400.0


@pytest.mark.parametrize("principal, payments", [(0, 16), (-100, 16), (3000, 0)])
def test_non_positive_inputs_give_zero_breakdown(principal, payments):
    assert calculate_fixed_fee_payment(principal, payments) == FixedFeeBreakdown(0.0, 0.0, 0.0)


class TestStrategyFixedFee:
    def _request(self, principal, payments=16, config=None):
        return LoanCalculationRequest(
            loan_calculation_type=CalcType.TARIFA_FIJA,
            principal_amount=principal,
            number_of_payments=payments,
            start_date=date(2024, 1, 1),
            payment_frequency="SEMANAL",
            config=config,
        )

    def test_effective_rate_from_fee(self):
        out = StrategyFixedFee().calculate(self._request(3000))
        assert out["effective_rate"] == pytest.approx(60.0)
        assert out["weekly_interest"] is None

    def test_no_effective_rate_without_fee(self):
        config = _config(
            tiers=[{"maxAmount": 10000, "paymentAmount": 100}],
            over_limit={
                "baseAmount": 10000,
                "basePayment": 100,
                "additionalStep": 1000,
                "additionalFee": 10,
            },
        )
        out = StrategyFixedFee().calculate(self._request(5000, payments=10, config=config))
        assert out["total_amount"] == 1000.0
        assert out["effective_rate"] is None

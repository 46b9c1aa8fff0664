"""Tests for the weekly-interest strategy and rate table lookup."""

from datetime import date

import pytest
from escalafin.core.kinds import CalcType
from escalafin.core.results import WeeklyInterestBreakdown
from escalafin.core.specs import LoanCalculationRequest
from escalafin.core.tariffs import DEFAULT_TARIFFS, TariffConfig
from escalafin.strategies.weekly_interest import (
    StrategyWeeklyInterest,
    calculate_weekly_interest_payment,
    get_weekly_interest_amount,
)


class TestRateLookup:
    @pytest.mark.parametrize(
        "entry", DEFAULT_TARIFFS.weekly_interest.rates, ids=lambda e: str(int(e.amount))
    )
    def test_exact_table_amounts(self, entry):
        assert get_weekly_interest_amount(entry.amount) == entry.interest

    def test_interpolates_between_entries(self):
        assert get_weekly_interest_amount(5500) == 245

    def test_interpolation_rounds_half_up(self):
        # 291 + 0.5 * (320 - 291) = 305.5
        assert get_weekly_interest_amount(7500) == 306

    def test_interpolation_rounds_to_nearest_peso(self):
        # 170 + 0.25 * 30 = 177.5 -> 178; 170 + 0.1 * 30 = 173
        assert get_weekly_interest_amount(3250) == 178
        assert get_weekly_interest_amount(3100) == 173

    def test_extrapolates_above_table(self):
        assert get_weekly_interest_amount(12000) == 480
        assert get_weekly_interest_amount(25000) == 1000

    def test_extrapolates_below_table(self):
        # 170 * 2000 / 3000 = 113.33
        assert get_weekly_interest_amount(2000) == 113
        assert get_weekly_interest_amount(1500) == 85

    def test_gap_inside_fallback_range_uses_min_interest(self):
        data = DEFAULT_TARIFFS.to_dict()
        data["weeklyInterest"]["rates"] = [
            {"amount": 5000, "interest": 230},
            {"amount": 6000, "interest": 260},
        ]
        config = TariffConfig.from_dict(data)

        assert get_weekly_interest_amount(4000, config) == 170
        assert get_weekly_interest_amount(8000, config) == 170
        assert get_weekly_interest_amount(5500, config) == 245

    def test_configured_table(self):
        data = DEFAULT_TARIFFS.to_dict()
        data["weeklyInterest"] = {
            "rates": [
                {"amount": 1000, "interest": 50},
                {"amount": 2000, "interest": 90},
            ],
            "fallback": {
                "minBase": 1000,
                "minInterest": 50,
                "maxBase": 2000,
                "maxInterest": 90,
            },
        }
        config = TariffConfig.from_dict(data)

        assert get_weekly_interest_amount(1500, config) == 70
        assert get_weekly_interest_amount(4000, config) == 180


class TestWeeklyInterestPayment:
    def test_table_lookup(self):
        assert calculate_weekly_interest_payment(5000, 10) == WeeklyInterestBreakdown(
            payment_amount=730.0,
            total_amount=7300.0,
            total_charge=2300.0,
            weekly_interest=230,
            effective_rate=46.0,
        )

    def test_supplied_weekly_interest_wins(self):
        result = calculate_weekly_interest_payment(5000, 10, weekly_interest_amount=250)
        assert result.weekly_interest == 250
        assert result.total_charge == 2500.0
        assert result.total_amount == 7500.0
        assert result.payment_amount == 750.0
        assert result.effective_rate == 50.0

    def test_zero_weekly_interest(self):
        result = calculate_weekly_interest_payment(4000, 8, weekly_interest_amount=0)
        assert result.total_amount == 4000.0
        assert result.payment_amount == 500.0
        assert result.effective_rate == 0.0

    def test_payment_rounded_to_cents(self):
        result = calculate_weekly_interest_payment(5000, 7)
        assert result.total_amount == 6610.0
        assert result.payment_amount == 944.29

    def test_zero_weeks_keeps_weekly_interest(self):
        result = calculate_weekly_interest_payment(5000, 0)
        assert result.weekly_interest == 230
        assert result.total_amount == 0.0
        assert result.payment_amount == 0.0


class TestStrategyWeeklyInterest:
    def test_reports_weekly_interest_and_rate(self):
        request = LoanCalculationRequest(
            loan_calculation_type=CalcType.INTERES_SEMANAL,
            principal_amount=6000,
            number_of_payments=12,
            start_date=date(2024, 1, 1),
            payment_frequency="SEMANAL",
        )
        out = StrategyWeeklyInterest().calculate(request)

        assert out["weekly_interest"] == 260
        assert out["total_amount"] == 9120.0
        assert out["payment_amount"] == 760.0
        assert out["effective_rate"] == 52.0

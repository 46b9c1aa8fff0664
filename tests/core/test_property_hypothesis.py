"""
Property-based tests using Hypothesis for the loan calculation rules.
"""

from datetime import date

import pytest
from hypothesis import assume, given
from hypothesis import strategies as st

from escalafin.core.engine import calculate_loan_details
from escalafin.core.errors import TariffWarning
from escalafin.core.kinds import CalcType, Frequency
from escalafin.core.specs import LoanCalculationRequest
from escalafin.core.tariffs import DEFAULT_TARIFFS, TariffConfig
from escalafin.strategies.fixed_fee import calculate_fixed_fee_payment
from escalafin.strategies.interest import calculate_interest_based_payment
from escalafin.strategies.weekly_interest import (
    calculate_weekly_interest_payment,
    get_weekly_interest_amount,
)

principal_strategy = st.floats(
    min_value=1.0, max_value=500_000.0, allow_infinity=False, allow_nan=False
).map(lambda x: round(x, 2))

payments_strategy = st.integers(min_value=1, max_value=260)

rate_strategy = st.floats(min_value=0.0, max_value=3.0, allow_infinity=False, allow_nan=False)

frequency_strategy = st.sampled_from(Frequency.all_frequencies())

RATES = DEFAULT_TARIFFS.weekly_interest.rates


class TestEngineProperties:
    @given(
        calc_type=st.sampled_from(CalcType.all_types()),
        principal=principal_strategy,
        payments=payments_strategy,
        rate=rate_strategy,
        frequency=frequency_strategy,
    )
    def test_idempotent(self, calc_type, principal, payments, rate, frequency):
        """Identical requests give identical results."""
        request = LoanCalculationRequest(
            loan_calculation_type=calc_type,
            principal_amount=principal,
            number_of_payments=payments,
            start_date=date(2024, 3, 31),
            payment_frequency=frequency,
            annual_interest_rate=rate,
        )
        assert calculate_loan_details(request) == calculate_loan_details(request)

    @given(
        calc_type=st.sampled_from(CalcType.all_types()),
        principal=principal_strategy,
        payments=payments_strategy,
        rate=rate_strategy,
    )
    def test_total_is_installment_times_count(self, calc_type, principal, payments, rate):
        """Independent rounding keeps the total within half a cent per installment."""
        result = calculate_loan_details(
            LoanCalculationRequest(
                loan_calculation_type=calc_type,
                principal_amount=principal,
                number_of_payments=payments,
                start_date=date(2024, 1, 1),
                annual_interest_rate=rate,
            )
        )
        tolerance = 0.005 * payments + 0.01
        assert abs(result.payment_amount * payments - result.total_amount) <= tolerance


class TestInterestProperties:
    @given(principal=principal_strategy, payments=payments_strategy)
    def test_zero_rate_is_straight_line(self, principal, payments):
        payment = calculate_interest_based_payment(principal, 0.0, payments)
        assert payment == pytest.approx(principal / payments)

    @given(
        principal=principal_strategy,
        payments=payments_strategy,
        rate=st.floats(min_value=0.001, max_value=3.0),
        frequency=frequency_strategy,
    )
    def test_interest_never_lowers_the_installment(self, principal, payments, rate, frequency):
        payment = calculate_interest_based_payment(principal, rate, payments, frequency)
        assert payment >= round(principal / payments, 2) - 0.01


class TestFixedFeeProperties:
    @given(
        a=principal_strategy,
        b=principal_strategy,
        payments=st.integers(min_value=1, max_value=52),
    )
    def test_total_monotone_in_principal(self, a, b, payments):
        """Crossing a tier boundary never makes the loan cheaper."""
        low, high = sorted((a, b))
        assert (
            calculate_fixed_fee_payment(low, payments).total_amount
            <= calculate_fixed_fee_payment(high, payments).total_amount
        )

    @given(principal=principal_strategy, payments=st.integers(min_value=1, max_value=52))
    def test_fee_is_total_minus_principal(self, principal, payments):
        breakdown = calculate_fixed_fee_payment(principal, payments)
        assert breakdown.total_fee == pytest.approx(
            breakdown.total_amount - principal, abs=0.011
        )

    @given(
        tiers=st.lists(
            st.tuples(
                st.integers(min_value=1, max_value=100).map(lambda x: x * 1000),
                st.integers(min_value=1, max_value=100).map(lambda x: x * 10),
            ),
            min_size=2,
            max_size=6,
            unique_by=lambda t: t[0],
        )
    )
    def test_unsorted_tiers_are_normalised(self, tiers):
        """Tier order in the source does not change the configuration."""
        assume(tiers != sorted(tiers))

        def config_for(rows):
            data = DEFAULT_TARIFFS.to_dict()
            data["fixedFee"]["tiers"] = [
                {"maxAmount": limit, "paymentAmount": fee} for limit, fee in rows
            ]
            return data

        with pytest.warns(TariffWarning):
            unsorted_config = TariffConfig.from_dict(config_for(tiers))
        assert unsorted_config == TariffConfig.from_dict(config_for(sorted(tiers)))


class TestWeeklyInterestProperties:
    @given(entry=st.sampled_from(RATES))
    def test_table_amounts_are_exact(self, entry):
        assert get_weekly_interest_amount(entry.amount) == entry.interest

    @given(
        index=st.integers(min_value=0, max_value=len(RATES) - 2),
        fraction=st.floats(min_value=0.001, max_value=0.999),
    )
    def test_interpolation_stays_between_neighbours(self, index, fraction):
        lower, upper = RATES[index], RATES[index + 1]
        amount = lower.amount + fraction * (upper.amount - lower.amount)
        assume(lower.amount < amount < upper.amount)

        interest = get_weekly_interest_amount(amount)
        assert lower.interest <= interest <= upper.interest

    @given(principal=principal_strategy, weeks=st.integers(min_value=1, max_value=104))
    def test_charge_is_weekly_interest_times_weeks(self, principal, weeks):
        breakdown = calculate_weekly_interest_payment(principal, weeks)
        assert breakdown.total_charge == pytest.approx(breakdown.weekly_interest * weeks)
        assert breakdown.total_amount == pytest.approx(principal + breakdown.total_charge)

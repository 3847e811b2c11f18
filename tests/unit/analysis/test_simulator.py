# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Property Portfolio Simulator Unit Tests

Test Coverage:
1. Acquisition schedule and property cap
2. Per-cohort valuation, loan and cash flow accounting
3. Agreement of horizon aggregates with the yearly series
4. Agreement with an independent brute-force reference
5. Edge cases: no properties, short tenure, sparse intervals
"""

import pytest

from propertylab.analysis import simulate, simulate_horizon, simulate_series
from propertylab.asset import PropertyAssumptions, PropertyTerms
from propertylab.debt import calculate_loan_balance, calculate_monthly_payment


def reference_horizon(
    years: int,
    market_value: float,
    loan_amount: float,
    payment: float,
    appreciation: float,
    rent: float,
    rate: float,
    interval: int,
    max_properties: int,
    tenure: int,
    expense: float,
) -> dict:
    """Brute-force horizon aggregate, written independently of the simulator."""
    owned = 0
    assets = loans = cumulative = 0.0
    for year in range(1, years + 1):
        if (year % interval == 1 or interval == 1) and owned < max_properties:
            owned += 1
        assets = loans = 0.0
        cash_flow = 0.0
        for i in range(owned):
            age = year - i * interval
            if age > 0:
                assets += market_value * (1 + appreciation) ** age
                loans += calculate_loan_balance(
                    loan_amount, payment, rate, min(age, tenure), tenure
                )
                cash_flow += rent - payment * 12 - expense
        cumulative += cash_flow
    return {
        "net_equity": assets - loans + cumulative,
        "total_asset_value": assets,
        "total_loan_balance": loans,
        "cumulative_cash_flow": cumulative,
        "properties_owned": owned,
    }


@pytest.fixture
def reference_terms(reference_assumptions) -> PropertyTerms:
    return PropertyTerms.from_assumptions(reference_assumptions)


class TestAcquisitionSchedule:
    def test_baseline_year_is_empty(self, reference_terms):
        year0 = simulate_series(reference_terms)[0]
        assert year0.year == 0
        assert year0.calendar_year == 2026
        assert year0.properties_owned == 0
        assert year0.total_asset_value == 0
        assert year0.total_loan_balance == 0
        assert year0.net_equity == 0
        assert year0.annual_cash_flow == 0

    def test_one_property_per_year_until_cap(self, reference_terms):
        series = simulate_series(reference_terms)
        assert [s.properties_owned for s in series[:12]] == [0, 1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 10]
        assert series[30].properties_owned == 10

    def test_sparse_interval(self):
        terms = PropertyTerms.from_assumptions(
            PropertyAssumptions(purchase_interval=5, max_properties=10)
        )
        series = simulate_series(terms)
        # Purchases in years 1, 6, 11, 16, 21, 26
        assert series[5].properties_owned == 1
        assert series[6].properties_owned == 2
        assert series[30].properties_owned == 6

    def test_zero_max_properties(self):
        terms = PropertyTerms.from_assumptions(PropertyAssumptions(max_properties=0))
        result = simulate_horizon(terms, 30)
        assert result.properties_owned == 0
        assert result.net_equity == 0
        assert result.cumulative_cash_flow == 0


class TestPerCohortAccounting:
    def test_first_year(self, reference_terms):
        year1 = simulate_series(reference_terms)[1]
        payment = calculate_monthly_payment(500_000, 0.04, 30)

        assert year1.properties_owned == 1
        assert year1.total_asset_value == pytest.approx(500_000 * 1.03)
        assert year1.total_loan_balance == pytest.approx(
            calculate_loan_balance(500_000, payment, 0.04, 1, 30)
        )
        assert year1.annual_cash_flow == pytest.approx(40_000 - payment * 12)
        assert year1.cumulative_cash_flow == pytest.approx(year1.annual_cash_flow)

    def test_cohorts_age_independently(self, reference_terms):
        """In year 3 the cohorts are aged 3, 2 and 1."""
        year3 = simulate_series(reference_terms)[3]
        expected = sum(500_000 * 1.03**age for age in (3, 2, 1))
        assert year3.total_asset_value == pytest.approx(expected)

    def test_net_equity_identity(self, reference_terms):
        for snapshot in simulate_series(reference_terms):
            assert snapshot.net_equity == pytest.approx(
                snapshot.total_asset_value
                - snapshot.total_loan_balance
                + snapshot.cumulative_cash_flow
            )

    def test_cumulative_cash_flow_accumulates(self, reference_terms):
        series = simulate_series(reference_terms)
        running = 0.0
        for snapshot in series:
            running += snapshot.annual_cash_flow
            assert snapshot.cumulative_cash_flow == pytest.approx(running)

    def test_display_totals(self, reference_terms):
        year4 = simulate_series(reference_terms)[4]
        assert year4.annual_rental_income == pytest.approx(4 * 40_000)
        assert year4.annual_mortgage_payment == pytest.approx(
            4 * reference_terms.annual_mortgage_payment
        )

    def test_expense_counts_operating_properties(self):
        terms = PropertyTerms.from_assumptions(
            PropertyAssumptions(expense_type="fixed", expense_value=5_000)
        )
        series = simulate_series(terms)
        assert series[0].annual_expense == 0
        assert series[3].annual_expense == pytest.approx(15_000)
        assert series[3].annual_cash_flow == pytest.approx(3 * terms.annual_cash_flow_per_property)

    def test_rent_does_not_appreciate(self, reference_terms):
        series = simulate_series(reference_terms)
        assert series[11].annual_rental_income == series[30].annual_rental_income

    def test_loans_retire_after_tenure(self):
        terms = PropertyTerms.from_assumptions(
            PropertyAssumptions(loan_tenure=10, max_properties=3)
        )
        series = simulate_series(terms)
        # Youngest cohort (bought year 3) is 13 years old by year 15
        assert series[15].total_loan_balance == 0.0
        assert series[30].total_loan_balance == 0.0

    def test_below_market_value_creates_instant_equity(self):
        terms = PropertyTerms.from_assumptions(
            PropertyAssumptions(purchase_price=450_000, below_market_discount=10, max_properties=1)
        )
        year1 = simulate_series(terms)[1]
        assert year1.total_asset_value == pytest.approx(500_000 * 1.03)
        assert year1.total_asset_value - year1.total_loan_balance > 50_000


class TestHorizonConsistency:
    @pytest.mark.parametrize("horizon", [10, 20, 30])
    def test_horizon_matches_series(self, reference_terms, horizon):
        series = simulate_series(reference_terms)
        result = simulate_horizon(reference_terms, horizon)
        snapshot = series[horizon]

        assert result.net_equity == snapshot.net_equity
        assert result.total_asset_value == snapshot.total_asset_value
        assert result.total_loan_balance == snapshot.total_loan_balance
        assert result.cumulative_cash_flow == snapshot.cumulative_cash_flow
        assert result.properties_owned == snapshot.properties_owned

    @pytest.mark.parametrize(
        "overrides",
        [
            {},
            {"purchase_interval": 3, "max_properties": 4},
            {"purchase_interval": 2, "loan_tenure": 15, "expense_type": "fixed", "expense_value": 4_000},
            {"interest_rate": 0, "appreciation_rate": 0},
            {"purchase_price": 450_000, "below_market_discount": 10, "loan_to_price": 0.9},
        ],
    )
    @pytest.mark.parametrize("horizon", [10, 20, 30])
    def test_matches_brute_force_reference(self, overrides, horizon):
        terms = PropertyTerms.from_assumptions(PropertyAssumptions(**overrides))
        expected = reference_horizon(
            horizon,
            terms.market_value,
            terms.loan_amount,
            terms.monthly_payment,
            terms.appreciation_rate,
            terms.annual_rental_income,
            terms.interest_rate,
            terms.purchase_interval,
            terms.max_properties,
            terms.loan_tenure,
            terms.annual_expense_per_property,
        )
        result = simulate_horizon(terms, horizon)

        assert result.properties_owned == expected["properties_owned"]
        for field in ("net_equity", "total_asset_value", "total_loan_balance", "cumulative_cash_flow"):
            assert getattr(result, field) == pytest.approx(expected[field])

    def test_series_length(self, reference_terms):
        assert len(simulate(reference_terms, 30)) == 31
        assert [s.year for s in simulate(reference_terms, 5)] == [0, 1, 2, 3, 4, 5]

    def test_simulation_is_deterministic(self, reference_terms):
        assert simulate_series(reference_terms) == simulate_series(reference_terms)

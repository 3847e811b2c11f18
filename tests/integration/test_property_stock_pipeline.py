# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Property to Stock Pipeline Integration Tests

Runs the public entry points end to end: inputs -> property plan -> stock
overlay -> summary, snapshot and comparison. Everything goes through the
front door (``calculate_property_plan``, ``calculate_stock_reinvestment``,
``create_snapshot``) rather than internal helpers.
"""

import pytest

from propertylab.analysis import PortfolioSnapshot, calculate_property_plan, create_snapshot
from propertylab.asset import PropertyAssumptions
from propertylab.core.primitives import SimulationSettings
from propertylab.reporting import build_context_message, compare_scenarios
from propertylab.stock import StockAssumptions, calculate_stock_reinvestment, combined_dataframe


class TestPropertyStockPipeline:
    @pytest.fixture
    def bmv_assumptions(self):
        """Every second year, 10% below market, 90% loan, fixed expenses."""
        return PropertyAssumptions(
            purchase_price=450_000,
            below_market_discount=10,
            loan_to_price=0.9,
            interest_rate=4.5,
            appreciation_rate=2.5,
            rental_yield=7,
            expense_type="fixed",
            expense_value=4_800,
            purchase_interval=2,
            max_properties=6,
            start_year=2027,
            investor_age=40,
        )

    @pytest.fixture
    def approved_stock(self):
        return StockAssumptions(mortgage_approved_amount=500_000, reinvest_dividends=False)

    def test_property_plan_shape(self, bmv_assumptions):
        plan = calculate_property_plan(bmv_assumptions)

        assert plan.market_value == pytest.approx(500_000)
        assert plan.loan_amount == pytest.approx(405_000)
        assert plan.annual_expense_per_property == 4_800
        assert len(plan.yearly_data) == 31
        assert plan.yearly_data[0].calendar_year == 2027

        owned = [s.properties_owned for s in plan.yearly_data]
        assert owned[1] == 1
        assert owned[11] == 6
        assert owned[30] == 6
        assert all(b >= a for a, b in zip(owned, owned[1:]))

    def test_stock_overlay_on_plan(self, bmv_assumptions, approved_stock):
        plan = calculate_property_plan(bmv_assumptions)
        stock = calculate_stock_reinvestment(approved_stock, bmv_assumptions, plan)

        assert stock.cashback_per_property == 50_000
        assert stock.total_cashback_all_properties == 300_000
        cashback_years = [s.year for s in stock.yearly_data if s.cashback_amount > 0]
        assert cashback_years == [1, 3, 5, 7, 9, 11]

        for stock_year, property_year in zip(stock.yearly_data, plan.yearly_data):
            assert stock_year.combined_net_worth == pytest.approx(
                property_year.net_equity + stock_year.stock_portfolio_value
            )

        frame = combined_dataframe(plan, stock)
        assert frame.loc[30, "combined_net_worth"] == stock.yearly_data[30].combined_net_worth

    def test_longer_horizon_keeps_milestones(self, bmv_assumptions, approved_stock):
        standard = calculate_property_plan(bmv_assumptions)
        extended_settings = SimulationSettings(horizon_years=40)
        extended = calculate_property_plan(bmv_assumptions, extended_settings)

        assert len(extended.yearly_data) == 41
        assert extended.results_30 == standard.results_30
        assert extended.yearly_data[:31] == standard.yearly_data

        stock = calculate_stock_reinvestment(
            approved_stock, bmv_assumptions, extended, extended_settings
        )
        assert len(stock.yearly_data) == 41
        assert stock.stock_30_year.portfolio_value == stock.yearly_data[30].stock_portfolio_value

    def test_snapshot_lifecycle(self, bmv_assumptions, approved_stock):
        snapshot = create_snapshot("  Six by two  ", bmv_assumptions, approved_stock)
        assert snapshot.name == "Six by two"
        assert snapshot.summary.properties == 6
        assert snapshot.summary.combined_30 is not None

        restored = PortfolioSnapshot.from_json(snapshot.to_json())
        assert restored == snapshot
        assert restored.is_current()

        renamed = restored.rename("Six by two (rev)")
        assert renamed.name == "Six by two (rev)"
        assert renamed.summary == snapshot.summary

    def test_context_message_for_plan(self, bmv_assumptions, approved_stock):
        plan = calculate_property_plan(bmv_assumptions)
        stock = calculate_stock_reinvestment(approved_stock, bmv_assumptions, plan)
        message = build_context_message(bmv_assumptions, plan, approved_stock, stock)

        assert "- Below Market Value: Yes (10% discount)" in message
        assert "- Loan Amount: RM 405,000 (90% of price)" in message
        assert "- Purchase Interval: Every 2 year(s)" in message
        assert "- Investor Age: 40 (age 70 at year 30)" in message
        assert "- DRIP: Off" in message

    def test_what_if_comparison(self, bmv_assumptions):
        faster = bmv_assumptions.copy(updates={"purchase_interval": 1})
        df = compare_scenarios(bmv_assumptions, faster)

        # Same end count, bought sooner
        assert bool(df.loc["Properties Owned", "same"])
        assert df.loc["10-Year Net Equity", "diff"] != 0
        assert bool(df.loc["Monthly Payment", "same"])

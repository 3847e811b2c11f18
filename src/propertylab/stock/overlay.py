# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Stock reinvestment overlay.

A parallel stock account funded by the property plan. Each year:

1. Price: flat through year 1, then ``price *= 1 + appreciation``
   (the purchase discount is the only year-1 benefit).
2. Cashback: ``new properties * cashback per property`` buys shares.
3. Cash flow: a positive annual property cash flow buys shares. A negative
   one is never drawn from the account.
4. Dividend: last year's closing value * yield. With DRIP it buys shares,
   otherwise it is income only.
5. Value: ``shares * price``; combined net worth adds the same year's
   property net equity.

Every purchase is made at ``price * (1 - discount)``. Nothing is ever sold,
so shares and cost basis never decrease.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, List, Optional

import pandas as pd

from ..core.primitives import SimulationSettings
from .assumptions import StockAssumptions
from .results import StockMilestone, StockSimulationResult, StockYearlySnapshot

if TYPE_CHECKING:
    from ..analysis.results import FullSimulationResult
    from ..asset.assumptions import PropertyAssumptions

logger = logging.getLogger(__name__)


def calculate_stock_reinvestment(
    stock_assumptions: StockAssumptions,
    property_assumptions: "PropertyAssumptions",
    property_result: "FullSimulationResult",
    settings: Optional[SimulationSettings] = None,
) -> StockSimulationResult:
    """
    Simulate the stock account alongside a computed property plan.

    Args:
        stock_assumptions: Yield, discount, appreciation and DRIP policy
        property_assumptions: The plan's inputs (purchase price for cashback)
        property_result: The plan's computed yearly series
        settings: Optional engine settings (normalized starting price)

    Returns:
        StockSimulationResult with the yearly series and milestones
    """
    settings = settings or SimulationSettings()

    dividend_yield = stock_assumptions.dividend_yield / 100
    discount = stock_assumptions.discount / 100
    appreciation = stock_assumptions.appreciation / 100

    cashback_per_property = stock_assumptions.cashback_per_property(
        property_assumptions.purchase_price, property_result.loan_amount
    )
    logger.debug(f"Stock overlay: cashback per property {cashback_per_property:,.2f}")

    yearly_data: List[StockYearlySnapshot] = []
    current_price = settings.initial_stock_price
    shares_owned = 0.0
    cost_basis = 0.0
    portfolio_value = 0.0
    cumulative_dividends = 0.0
    cumulative_cash_flow_invested = 0.0
    previous_properties_owned = 0

    for property_year in property_result.yearly_data:
        year = property_year.year

        if year > 1:
            current_price *= 1 + appreciation
        buy_price = current_price * (1 - discount)

        cashback_this_year = 0.0
        cash_flow_this_year = 0.0
        dividend_paid = 0.0
        dividend_reinvested = 0.0

        if year > 0:
            new_properties = property_year.properties_owned - previous_properties_owned
            if new_properties > 0 and cashback_per_property > 0:
                cashback_this_year = new_properties * cashback_per_property
                shares_owned += cashback_this_year / buy_price
                cost_basis += cashback_this_year

            if property_year.annual_cash_flow > 0:
                cash_flow_this_year = property_year.annual_cash_flow
                shares_owned += cash_flow_this_year / buy_price
                cost_basis += cash_flow_this_year
                cumulative_cash_flow_invested += cash_flow_this_year

            # portfolio_value still holds last year's close here
            dividend_paid = portfolio_value * dividend_yield
            cumulative_dividends += dividend_paid

            if stock_assumptions.reinvest_dividends and dividend_paid > 0:
                dividend_reinvested = dividend_paid
                shares_owned += dividend_reinvested / buy_price
                cost_basis += dividend_reinvested

        previous_properties_owned = property_year.properties_owned
        portfolio_value = shares_owned * current_price

        yearly_data.append(
            StockYearlySnapshot(
                year=year,
                calendar_year=property_year.calendar_year,
                stock_price=current_price,
                shares_owned=shares_owned,
                cash_flow_invested=cash_flow_this_year,
                cumulative_cash_flow_invested=cumulative_cash_flow_invested,
                cashback_amount=cashback_this_year,
                dividend_paid=dividend_paid,
                dividend_reinvested=dividend_reinvested,
                stock_portfolio_value=portfolio_value,
                stock_cost_basis=cost_basis,
                stock_unrealized_gain=portfolio_value - cost_basis,
                annual_dividend_income=portfolio_value * dividend_yield if year > 0 else 0.0,
                cumulative_dividends=cumulative_dividends,
                combined_net_worth=property_year.net_equity + portfolio_value,
            )
        )

    final_properties = property_result.yearly_data[-1].properties_owned

    return StockSimulationResult(
        yearly_data=yearly_data,
        cashback_per_property=cashback_per_property,
        total_cashback_all_properties=cashback_per_property * final_properties,
        stock_10_year=StockMilestone.from_snapshot(yearly_data[10]),
        stock_20_year=StockMilestone.from_snapshot(yearly_data[20]),
        stock_30_year=StockMilestone.from_snapshot(yearly_data[30]),
    )


def combined_dataframe(
    property_result: "FullSimulationResult", stock_result: StockSimulationResult
) -> pd.DataFrame:
    """Property and stock series side by side, indexed by simulated year."""
    property_df = property_result.to_dataframe()
    stock_df = stock_result.to_dataframe().drop(columns=["calendar_year"])
    return property_df.join(stock_df, how="inner")

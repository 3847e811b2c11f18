# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Stock overlay result records.
"""

from __future__ import annotations

from typing import List

import pandas as pd

from ..core.primitives import MilestoneEnum, Model


class StockYearlySnapshot(Model):
    """Stock account state at the end of one simulated year."""

    year: int
    calendar_year: int
    stock_price: float
    shares_owned: float
    cash_flow_invested: float
    cumulative_cash_flow_invested: float
    cashback_amount: float
    dividend_paid: float  # declared on last year's closing value
    dividend_reinvested: float
    stock_portfolio_value: float
    stock_cost_basis: float
    stock_unrealized_gain: float
    annual_dividend_income: float  # run-rate on this year's closing value
    cumulative_dividends: float
    combined_net_worth: float


class StockMilestone(Model):
    portfolio_value: float
    total_dividends: float
    total_invested: float

    @classmethod
    def from_snapshot(cls, snapshot: StockYearlySnapshot) -> "StockMilestone":
        return cls(
            portfolio_value=snapshot.stock_portfolio_value,
            total_dividends=snapshot.cumulative_dividends,
            total_invested=snapshot.stock_cost_basis,
        )


class StockSimulationResult(Model):
    """Yearly stock series plus cashback totals and 10/20/30-year milestones."""

    yearly_data: List[StockYearlySnapshot]
    cashback_per_property: float
    total_cashback_all_properties: float
    stock_10_year: StockMilestone
    stock_20_year: StockMilestone
    stock_30_year: StockMilestone

    def milestone(self, years: int) -> StockMilestone:
        """Milestone metrics for 10, 20 or 30 years."""
        try:
            horizon = MilestoneEnum(years)
        except ValueError:
            raise ValueError(
                f"No milestone for {years} years; available: "
                f"{[m.value for m in MilestoneEnum]}"
            ) from None
        return getattr(self, f"stock_{horizon.value}_year")

    def to_dataframe(self) -> pd.DataFrame:
        """Yearly series as a DataFrame indexed by simulated year."""
        df = pd.DataFrame([s.model_dump() for s in self.yearly_data])
        return df.set_index("year")

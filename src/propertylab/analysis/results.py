# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Property simulation result records.
"""

from __future__ import annotations

from typing import List

import pandas as pd

from ..core.primitives import MilestoneEnum, Model


class YearlySnapshot(Model):
    """Portfolio state at the end of one simulated year."""

    year: int
    calendar_year: int
    properties_owned: int
    total_asset_value: float
    total_loan_balance: float
    net_equity: float
    annual_cash_flow: float
    cumulative_cash_flow: float
    annual_rental_income: float
    annual_mortgage_payment: float
    annual_expense: float


class SimulationResult(Model):
    """Headline aggregate at a single horizon."""

    net_equity: float
    total_asset_value: float
    total_loan_balance: float
    cumulative_cash_flow: float
    properties_owned: int

    @classmethod
    def from_snapshot(cls, snapshot: YearlySnapshot) -> "SimulationResult":
        return cls(
            net_equity=snapshot.net_equity,
            total_asset_value=snapshot.total_asset_value,
            total_loan_balance=snapshot.total_loan_balance,
            cumulative_cash_flow=snapshot.cumulative_cash_flow,
            properties_owned=snapshot.properties_owned,
        )


class FullSimulationResult(Model):
    """
    Complete output of a property plan.

    Holds the 10/20/30-year milestones, the full yearly series and the
    per-property scalars reused by display code and the stock overlay.
    """

    results_10: SimulationResult
    results_20: SimulationResult
    results_30: SimulationResult
    yearly_data: List[YearlySnapshot]
    monthly_payment: float
    loan_amount: float
    market_value: float
    annual_rental_income: float
    annual_expense_per_property: float

    def milestone(self, years: int) -> SimulationResult:
        """Milestone aggregate for 10, 20 or 30 years."""
        try:
            horizon = MilestoneEnum(years)
        except ValueError:
            raise ValueError(
                f"No milestone for {years} years; available: "
                f"{[m.value for m in MilestoneEnum]}"
            ) from None
        return getattr(self, f"results_{horizon.value}")

    def snapshot(self, year: int) -> YearlySnapshot:
        """Yearly snapshot for simulated year ``year``."""
        snapshot = self.yearly_data[year]
        if snapshot.year != year:
            raise IndexError(f"Year {year} not found in yearly series")
        return snapshot

    def to_dataframe(self) -> pd.DataFrame:
        """Yearly series as a DataFrame indexed by simulated year."""
        df = pd.DataFrame([s.model_dump() for s in self.yearly_data])
        return df.set_index("year")

# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Property portfolio simulation.

One routine, ``simulate``, walks the years in order and re-sums every owned
cohort from scratch each year. ``simulate_horizon`` (single aggregate) and
``simulate_series`` (full yearly list) are both views over it, so the
milestone at year H and the series entry for year H always agree.

Per-year accounting for each cohort ``i`` with age ``year - i * interval``:
    age >= 0: market value ``mv * (1 + g) ** age`` and the loan balance after
              ``min(age, tenure)`` years count toward the balance sheet
    age >  0: rent - mortgage - expense counts toward the year's cash flow

Net equity = total asset value - total loan balance + cumulative cash flow.
"""

from __future__ import annotations

import logging
from typing import List

from ..asset.cohort import is_purchase_year, iter_cohorts
from ..asset.terms import PropertyTerms
from .results import SimulationResult, YearlySnapshot

logger = logging.getLogger(__name__)


def simulate(terms: PropertyTerms, years: int) -> List[YearlySnapshot]:
    """
    Simulate the portfolio for years ``0..years`` inclusive.

    Args:
        terms: Resolved per-property terms
        years: Last simulated year

    Returns:
        One snapshot per year, in increasing year order
    """
    snapshots: List[YearlySnapshot] = []
    properties_owned = 0
    cumulative_cash_flow = 0.0

    # Cumulative cash flow depends on every prior year; strictly sequential
    for year in range(0, years + 1):
        if is_purchase_year(year, terms.purchase_interval):
            if properties_owned < terms.max_properties:
                properties_owned += 1
                logger.debug(f"Year {year}: acquired property #{properties_owned}")

        total_asset_value = 0.0
        total_loan_balance = 0.0
        annual_cash_flow = 0.0
        operating_properties = 0

        for cohort in iter_cohorts(properties_owned, terms.purchase_interval):
            if not cohort.is_valued(year):
                continue
            total_asset_value += cohort.market_value(terms, year)
            total_loan_balance += cohort.loan_balance(terms, year)

            if cohort.is_operating(year):
                operating_properties += 1
                annual_cash_flow += terms.annual_cash_flow_per_property

        cumulative_cash_flow += annual_cash_flow

        snapshots.append(
            YearlySnapshot(
                year=year,
                calendar_year=terms.start_year + year,
                properties_owned=properties_owned,
                total_asset_value=total_asset_value,
                total_loan_balance=total_loan_balance,
                net_equity=total_asset_value - total_loan_balance + cumulative_cash_flow,
                annual_cash_flow=annual_cash_flow,
                cumulative_cash_flow=cumulative_cash_flow,
                annual_rental_income=properties_owned * terms.annual_rental_income,
                annual_mortgage_payment=properties_owned * terms.annual_mortgage_payment,
                annual_expense=operating_properties * terms.annual_expense_per_property,
            )
        )

    return snapshots


def simulate_horizon(terms: PropertyTerms, years: int) -> SimulationResult:
    """Aggregate portfolio position at the end of year ``years``."""
    return SimulationResult.from_snapshot(simulate(terms, years)[-1])


def simulate_series(terms: PropertyTerms, years: int = 30) -> List[YearlySnapshot]:
    """Full yearly series for years ``0..years``."""
    return simulate(terms, years)

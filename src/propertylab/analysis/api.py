# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Property Plan API

Public entry point turning ``PropertyAssumptions`` into a
``FullSimulationResult``. Stock overlay functions live in
`propertylab.stock` to keep the property core independent of it.
"""

from __future__ import annotations

import logging
from typing import Optional

from ..asset.assumptions import PropertyAssumptions
from ..asset.terms import PropertyTerms
from ..core.primitives import SimulationSettings
from .results import FullSimulationResult, SimulationResult
from .simulator import simulate_series

logger = logging.getLogger(__name__)


def calculate_property_plan(
    assumptions: PropertyAssumptions,
    settings: Optional[SimulationSettings] = None,
) -> FullSimulationResult:
    """
    Run the property plan and return milestones, series and derived scalars.

    Workflow:
      1) Resolve assumptions into decimal-rate per-property terms
      2) Simulate the yearly series 0..horizon once
      3) Read the 10/20/30-year milestones from that series

    Args:
        assumptions: Boundary inputs (percent rates)
        settings: Optional engine settings; defaults to a 30-year horizon

    Returns:
        FullSimulationResult for the plan
    """
    settings = settings or SimulationSettings()
    terms = PropertyTerms.from_assumptions(assumptions)

    yearly_data = simulate_series(terms, settings.horizon_years)

    logger.debug(
        f"Property plan: {yearly_data[-1].properties_owned} properties, "
        f"year {settings.horizon_years} net equity {yearly_data[-1].net_equity:,.0f}"
    )

    return FullSimulationResult(
        results_10=SimulationResult.from_snapshot(yearly_data[10]),
        results_20=SimulationResult.from_snapshot(yearly_data[20]),
        results_30=SimulationResult.from_snapshot(yearly_data[30]),
        yearly_data=yearly_data,
        monthly_payment=terms.monthly_payment,
        loan_amount=terms.loan_amount,
        market_value=terms.market_value,
        annual_rental_income=terms.annual_rental_income,
        annual_expense_per_property=terms.annual_expense_per_property,
    )

# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Property Portfolio Analysis

Simulation of the acquisition schedule and per-cohort accounting, the
public ``calculate_property_plan`` entry point and saved snapshots.
"""

from .api import calculate_property_plan
from .results import FullSimulationResult, SimulationResult, YearlySnapshot
from .simulator import simulate, simulate_horizon, simulate_series
from .snapshot import PortfolioSnapshot, create_snapshot

__all__ = [
    # Entry points
    "calculate_property_plan",
    "simulate",
    "simulate_horizon",
    "simulate_series",
    # Results
    "FullSimulationResult",
    "SimulationResult",
    "YearlySnapshot",
    # Snapshots
    "PortfolioSnapshot",
    "create_snapshot",
]

# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Side-by-side comparison of two property plans.
"""

from __future__ import annotations

from typing import List, Tuple

import numpy as np
import pandas as pd

from ..analysis.api import calculate_property_plan
from ..analysis.results import FullSimulationResult
from ..asset.assumptions import PropertyAssumptions

# Differences smaller than one currency unit read as "same"
SAME_TOLERANCE = 1.0


def _metric_rows(result: FullSimulationResult) -> List[Tuple[str, float]]:
    return [
        ("10-Year Net Equity", result.results_10.net_equity),
        ("20-Year Net Equity", result.results_20.net_equity),
        ("30-Year Net Equity", result.results_30.net_equity),
        ("Properties Owned", result.results_30.properties_owned),
        ("Monthly Payment", result.monthly_payment),
        ("Annual Rental Income", result.annual_rental_income),
    ]


def compare_results(
    result_a: FullSimulationResult, result_b: FullSimulationResult
) -> pd.DataFrame:
    """
    Metric-by-metric deltas of plan B against plan A.

    Returns:
        DataFrame indexed by metric label with columns:
            - a, b: Metric values
            - diff: b - a
            - pct_change: diff relative to |a| (0 when a is 0)
            - same: True when |diff| is below one currency unit
    """
    labels = [label for label, _ in _metric_rows(result_a)]
    df = pd.DataFrame(
        {
            "a": [value for _, value in _metric_rows(result_a)],
            "b": [value for _, value in _metric_rows(result_b)],
        },
        index=pd.Index(labels, name="metric"),
    )
    df["diff"] = df["b"] - df["a"]
    abs_a = df["a"].abs()
    df["pct_change"] = np.where(abs_a > 0, df["diff"] / abs_a.where(abs_a > 0, 1.0), 0.0)
    df["same"] = df["diff"].abs() < SAME_TOLERANCE
    return df


def compare_scenarios(
    assumptions_a: PropertyAssumptions, assumptions_b: PropertyAssumptions
) -> pd.DataFrame:
    """Run both plans from their inputs and compare them."""
    return compare_results(
        calculate_property_plan(assumptions_a), calculate_property_plan(assumptions_b)
    )


def equity_overlay(
    result_a: FullSimulationResult, result_b: FullSimulationResult
) -> pd.DataFrame:
    """
    Net equity and annual cash flow of both plans on a shared year axis.

    Plans with different horizons are aligned on simulated year; missing
    years are NaN.
    """
    columns = ["calendar_year", "net_equity", "annual_cash_flow"]
    frame_a = result_a.to_dataframe()[columns].add_suffix("_a")
    frame_b = result_b.to_dataframe()[columns].add_suffix("_b")
    return frame_a.join(frame_b, how="outer")

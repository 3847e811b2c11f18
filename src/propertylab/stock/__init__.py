# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Stock reinvestment overlay funded by mortgage cashback, positive property
cash flow and reinvested dividends.
"""

from .assumptions import StockAssumptions
from .overlay import calculate_stock_reinvestment, combined_dataframe
from .results import StockMilestone, StockSimulationResult, StockYearlySnapshot

__all__ = [
    "StockAssumptions",
    "calculate_stock_reinvestment",
    "combined_dataframe",
    "StockMilestone",
    "StockSimulationResult",
    "StockYearlySnapshot",
]

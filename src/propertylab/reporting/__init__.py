# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Reporting on computed plans: summary metrics, advisory context digests and
scenario comparison tables.
"""

from .summary import PortfolioSummary, build_context_message, build_summary
from .comparison import compare_results, compare_scenarios, equity_overlay

__all__ = [
    # Summaries
    "PortfolioSummary",
    "build_summary",
    "build_context_message",
    # Comparison
    "compare_results",
    "compare_scenarios",
    "equity_overlay",
]

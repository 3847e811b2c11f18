# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Saved portfolio snapshots.

A snapshot is the record an owner-scoped store keeps for a named scenario:
the inputs, the computed results and a quick-access summary. This module
only builds and (de)serializes the record; storage belongs to the caller.
"""

from __future__ import annotations

import logging
from typing import Optional, Tuple

from pydantic import Field

from ..asset.assumptions import PropertyAssumptions
from ..core.primitives import Model
from ..reporting.summary import PortfolioSummary, build_summary
from ..stock.assumptions import StockAssumptions
from ..stock.overlay import calculate_stock_reinvestment
from ..stock.results import StockSimulationResult
from .api import calculate_property_plan
from .results import FullSimulationResult

logger = logging.getLogger(__name__)


class PortfolioSnapshot(Model):
    """Named, self-contained record of a property (and optional stock) plan."""

    name: str = Field(..., min_length=1, max_length=255)
    property_inputs: PropertyAssumptions
    stock_inputs: Optional[StockAssumptions] = None
    property_results: FullSimulationResult
    stock_results: Optional[StockSimulationResult] = None
    summary: PortfolioSummary

    def to_json(self) -> str:
        """Serialize with camelCase keys for storage."""
        return self.model_dump_json(by_alias=True)

    @classmethod
    def from_json(cls, payload: str) -> "PortfolioSnapshot":
        """Rebuild a snapshot from stored JSON; raises ValidationError on bad payloads."""
        return cls.model_validate_json(payload)

    def rename(self, name: str) -> "PortfolioSnapshot":
        """Copy of the snapshot under a new name."""
        return self.model_validate({**self.model_dump(), "name": name.strip()})

    def replay(self) -> Tuple[FullSimulationResult, Optional[StockSimulationResult]]:
        """Re-run the stored inputs through the simulators."""
        property_results = calculate_property_plan(self.property_inputs)
        stock_results = None
        if self.stock_inputs is not None:
            stock_results = calculate_stock_reinvestment(
                self.stock_inputs, self.property_inputs, property_results
            )
        return property_results, stock_results

    def is_current(self) -> bool:
        """True when replaying the stored inputs reproduces the stored results."""
        property_results, stock_results = self.replay()
        matches = (
            property_results == self.property_results
            and stock_results == self.stock_results
        )
        if not matches:
            logger.warning(f"Snapshot '{self.name}' results differ from a fresh run")
        return matches


def create_snapshot(
    name: str,
    property_inputs: PropertyAssumptions,
    stock_inputs: Optional[StockAssumptions] = None,
) -> PortfolioSnapshot:
    """
    Run the plan (and overlay, when stock inputs are given) and wrap it.

    Args:
        name: Display name for the saved scenario
        property_inputs: Property assumptions
        stock_inputs: Optional stock overlay assumptions

    Returns:
        PortfolioSnapshot ready to serialize
    """
    property_results = calculate_property_plan(property_inputs)
    stock_results = None
    if stock_inputs is not None:
        stock_results = calculate_stock_reinvestment(
            stock_inputs, property_inputs, property_results
        )

    return PortfolioSnapshot(
        name=name.strip(),
        property_inputs=property_inputs,
        stock_inputs=stock_inputs,
        property_results=property_results,
        stock_results=stock_results,
        summary=build_summary(property_inputs, property_results, stock_results),
    )

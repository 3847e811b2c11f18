# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from pydantic import Field, model_validator

from .enums import MilestoneEnum
from .model import Model
from .types import PositiveFloatGt0, PositiveInt


class SimulationSettings(Model):
    """
    Configuration for the projection engine.

    Usage Examples:
        # Standard 30-year projection (default settings)
        settings = SimulationSettings()

        # Longer yearly series, milestones still read at 10/20/30
        settings = SimulationSettings(horizon_years=40)

        # Stock account priced in index points rather than a unit price
        settings = SimulationSettings(initial_stock_price=100.0)
    """

    horizon_years: PositiveInt = Field(
        default=30,
        description="Last simulated year of the yearly series (series covers 0..horizon).",
    )
    initial_stock_price: PositiveFloatGt0 = Field(
        default=1.0,
        description="Normalized stock price in year 0; only ratios matter.",
    )

    @model_validator(mode="after")
    def validate_horizon_covers_milestones(self) -> "SimulationSettings":
        """Milestone aggregates are read from the series, so it must reach them."""
        last_milestone = max(m.value for m in MilestoneEnum)
        if self.horizon_years < last_milestone:
            raise ValueError(
                f"horizon_years ({self.horizon_years}) must be >= {last_milestone} "
                "so every milestone year is simulated"
            )
        return self

# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
PropertyLab Core Primitives

Essential building blocks shared across the package: the immutable base
model, constrained numeric types, enums, settings and validation helpers.
"""

from .enums import ExpenseTypeEnum, MilestoneEnum
from .model import Model
from .settings import SimulationSettings
from .types import (
    DiscountPercent,
    FloatBetween0And1,
    PercentFloat,
    PositiveFloat,
    PositiveFloatGt0,
    PositiveInt,
    PositiveIntGe1,
)
from .validation import ValidationMixin

__all__ = [
    # Core models
    "Model",
    # Settings
    "SimulationSettings",
    # Enums
    "ExpenseTypeEnum",
    "MilestoneEnum",
    # Types
    "DiscountPercent",
    "FloatBetween0And1",
    "PercentFloat",
    "PositiveFloat",
    "PositiveFloatGt0",
    "PositiveInt",
    "PositiveIntGe1",
    # Validation
    "ValidationMixin",
]

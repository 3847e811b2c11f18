# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from enum import Enum


class ExpenseTypeEnum(str, Enum):
    """
    How the per-property annual operating expense is expressed.

    - FIXED: ``expense_value`` is an annual currency amount per property
    - PERCENTAGE: ``expense_value`` is a percentage of the purchase price
    """

    FIXED = "fixed"
    PERCENTAGE = "percentage"


class MilestoneEnum(int, Enum):
    """Horizons reported as headline aggregates."""

    TEN_YEAR = 10
    TWENTY_YEAR = 20
    THIRTY_YEAR = 30

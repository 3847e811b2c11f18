# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Shared fixtures for PropertyLab tests.

The reference plan buys one 500,000 property a year (no discount, full
financing at 4% over 30 years, 3% appreciation, 8% gross yield) up to ten
properties. The cashback plan is identical except that the bank lends
600,000 per property.
"""

from __future__ import annotations

import pytest

from propertylab.analysis import FullSimulationResult, calculate_property_plan
from propertylab.asset import PropertyAssumptions
from propertylab.stock import StockAssumptions


@pytest.fixture
def reference_assumptions() -> PropertyAssumptions:
    return PropertyAssumptions(
        purchase_price=500_000,
        market_value=500_000,
        loan_amount=500_000,
        interest_rate=4,
        appreciation_rate=3,
        rental_yield=8,
        loan_tenure=30,
        purchase_interval=1,
        max_properties=10,
        start_year=2026,
    )


@pytest.fixture
def cashback_assumptions() -> PropertyAssumptions:
    return PropertyAssumptions(
        purchase_price=500_000,
        market_value=600_000,
        loan_amount=600_000,
        interest_rate=4,
        appreciation_rate=3,
        rental_yield=8,
        loan_tenure=30,
        purchase_interval=1,
        max_properties=10,
        start_year=2026,
    )


@pytest.fixture
def reference_plan(reference_assumptions: PropertyAssumptions) -> FullSimulationResult:
    return calculate_property_plan(reference_assumptions)


@pytest.fixture
def cashback_plan(cashback_assumptions: PropertyAssumptions) -> FullSimulationResult:
    return calculate_property_plan(cashback_assumptions)


@pytest.fixture
def stock_assumptions() -> StockAssumptions:
    """6% yield, 20% purchase discount, 5% appreciation, DRIP on."""
    return StockAssumptions(
        dividend_yield=6,
        discount=20,
        appreciation=5,
        reinvest_dividends=True,
    )

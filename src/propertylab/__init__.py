# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

import importlib
import logging

"""
PropertyLab - Leveraged Property Portfolio and Reinvestment Projections

Deterministic year-by-year projections for a portfolio of identical rental
properties bought on a fixed interval, with an optional stock account funded
by mortgage cashback, positive rental cash flow and reinvested dividends.

Key Entry Points:
- propertylab.analysis.calculate_property_plan() - Milestones plus yearly series
- propertylab.stock.calculate_stock_reinvestment() - Stock overlay on a property plan
- propertylab.debt.* - Mortgage installment and balance math
- propertylab.reporting.* - Summaries and scenario comparison

Example Usage:
    ```python
    from propertylab.analysis import calculate_property_plan
    from propertylab.asset import PropertyAssumptions
    from propertylab.stock import StockAssumptions, calculate_stock_reinvestment

    assumptions = PropertyAssumptions(purchase_price=500_000, loan_amount=600_000)
    plan = calculate_property_plan(assumptions)
    stock = calculate_stock_reinvestment(StockAssumptions(), assumptions, plan)
    print(f"30Y combined: {stock.yearly_data[30].combined_net_worth:,.0f}")
    ```
"""

# Library code stays silent unless the application configures logging.
logging.getLogger(__name__).addHandler(logging.NullHandler())


# Public API surface (lazy-loaded on first attribute access)
__all__ = [  # noqa: F822 - lazy loading
    "analysis",
    "asset",
    "core",
    "debt",
    "reporting",
    "stock",
]


_LAZY_MODULES = {
    "analysis": "propertylab.analysis",
    "asset": "propertylab.asset",
    "core": "propertylab.core",
    "debt": "propertylab.debt",
    "reporting": "propertylab.reporting",
    "stock": "propertylab.stock",
}


def __getattr__(name: str):
    module_path = _LAZY_MODULES.get(name)
    if module_path is None:
        raise AttributeError(f"module 'propertylab' has no attribute '{name}'")
    module = importlib.import_module(module_path)
    globals()[name] = module
    return module

# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from typing import Optional

from pydantic import Field

from ..core.primitives import DiscountPercent, Model, PercentFloat, PositiveFloat


class StockAssumptions(Model):
    """
    Assumptions for the stock account funded by the property plan.

    Rates are percentages (``6`` for 6%). Shares are always bought
    ``discount`` percent below the current market price.
    """

    dividend_yield: PercentFloat = Field(default=6.0, description="Annual dividend yield, percent")
    discount: DiscountPercent = Field(
        default=20.0, description="Purchase discount below market price, percent"
    )
    appreciation: float = Field(
        default=5.0, gt=-100, description="Annual price appreciation, percent"
    )
    reinvest_dividends: bool = Field(
        default=True, description="Reinvest dividends (DRIP) instead of taking cash"
    )
    mortgage_approved_amount: Optional[PositiveFloat] = Field(
        default=None,
        description="Bank-approved mortgage per property; defaults to the plan's loan amount",
    )

    def cashback_per_property(self, purchase_price: float, loan_amount: float) -> float:
        """Approved mortgage in excess of the purchase price, released at purchase."""
        approved = (
            self.mortgage_approved_amount
            if self.mortgage_approved_amount is not None
            else loan_amount
        )
        return max(0.0, approved - purchase_price)

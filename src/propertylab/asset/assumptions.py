# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Property assumptions at the input boundary.

Rates are entered the way an investor states them (``3`` for 3%) and are
converted to decimal fractions once, in ``PropertyTerms``.
"""

from __future__ import annotations

from typing import Any, Optional

from pydantic import Field, model_validator

from ..core.primitives import (
    DiscountPercent,
    ExpenseTypeEnum,
    FloatBetween0And1,
    Model,
    PercentFloat,
    PositiveFloat,
    PositiveInt,
    PositiveIntGe1,
    ValidationMixin,
)


class PropertyAssumptions(Model, ValidationMixin):
    """
    Assumptions for a portfolio of identical properties bought on a schedule.

    Every property shares the same price, financing and operating profile;
    the portfolio grows by one property per purchase interval until
    ``max_properties`` is reached.

    Market value can be given directly (``market_value``) or derived from a
    below-market-value discount (``below_market_discount``). The loan can be
    given directly (``loan_amount``) or as a ratio of the purchase price
    (``loan_to_price``); with neither, the purchase is fully financed.

    Examples:
        >>> # Full financing at market value
        >>> PropertyAssumptions(purchase_price=500_000)

        >>> # 10% below market value with a 90% loan
        >>> PropertyAssumptions(
        ...     purchase_price=450_000,
        ...     below_market_discount=10,
        ...     loan_to_price=0.9,
        ... )

        >>> # Cashback financing: bank approves more than the price
        >>> PropertyAssumptions(
        ...     purchase_price=500_000,
        ...     market_value=600_000,
        ...     loan_amount=600_000,
        ... )
    """

    # === ACQUISITION ===
    purchase_price: PositiveFloat = Field(
        default=500_000.0, description="Price paid per property"
    )
    market_value: Optional[PositiveFloat] = Field(
        default=None,
        description="Assessed market value per property; defaults to the purchase price",
    )
    below_market_discount: DiscountPercent = Field(
        default=0.0,
        description="Percent below market value paid; derives market value when set",
    )

    # === FINANCING ===
    loan_amount: Optional[PositiveFloat] = Field(
        default=None, description="Loan principal per property"
    )
    loan_to_price: Optional[FloatBetween0And1] = Field(
        default=None,
        description="Loan principal as a fraction of purchase price (e.g. 0.9)",
    )
    interest_rate: PercentFloat = Field(default=4.0, description="Annual interest rate, percent")
    loan_tenure: PositiveIntGe1 = Field(default=30, description="Loan tenure in years")

    # === GROWTH & INCOME ===
    appreciation_rate: float = Field(
        default=3.0, gt=-100, description="Annual market value appreciation, percent"
    )
    rental_yield: PercentFloat = Field(
        default=8.0, description="Gross rental yield on purchase price, percent"
    )
    annual_rental_income: Optional[PositiveFloat] = Field(
        default=None,
        description="Fixed annual rent per property; overrides the yield-based rent",
    )

    # === OPERATING EXPENSES ===
    expense_type: ExpenseTypeEnum = Field(default=ExpenseTypeEnum.PERCENTAGE)
    expense_value: PositiveFloat = Field(
        default=0.0,
        description="Annual expense per property: amount (fixed) or percent of price",
    )

    # === ACQUISITION SCHEDULE ===
    purchase_interval: PositiveIntGe1 = Field(
        default=1, description="Years between acquisitions"
    )
    max_properties: PositiveInt = Field(
        default=10, description="Cap on the number of properties acquired"
    )
    start_year: int = Field(default=2026, description="Calendar year of simulation year 0")
    investor_age: Optional[PositiveInt] = Field(
        default=None, description="Investor age in year 0 (reporting only)"
    )

    @model_validator(mode="before")
    @classmethod
    def check_alternative_inputs(cls, data: Any) -> Any:
        """Each derived quantity may be specified one way only."""
        cls.validate_at_most_one(
            data,
            "market_value",
            "below_market_discount",
            "Provide either market_value or below_market_discount, not both",
            unset_b=0,
        )
        cls.validate_at_most_one(
            data,
            "loan_amount",
            "loan_to_price",
            "Provide either loan_amount or loan_to_price, not both",
        )
        return data

    @property
    def is_below_market_value(self) -> bool:
        """True when the purchase price is below the market value."""
        return self.below_market_discount > 0 or (
            self.market_value is not None and self.market_value > self.purchase_price
        )

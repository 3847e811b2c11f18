# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Resolved per-property terms.

``PropertyTerms`` is what the simulation actually consumes: decimal rates and
the scalars derived once from the assumptions (market value, loan, fixed
installment, rent and expense per property).
"""

from __future__ import annotations

import logging

from ..core.primitives import ExpenseTypeEnum, Model
from ..debt.amortization import calculate_monthly_payment
from .assumptions import PropertyAssumptions

logger = logging.getLogger(__name__)


class PropertyTerms(Model):
    """
    Per-property economics with rates as decimal fractions.

    Attributes:
        purchase_price: Price paid per property
        market_value: Market value per property at purchase (appreciation base)
        loan_amount: Loan principal per property
        monthly_payment: Fixed monthly installment per property
        annual_rental_income: Fixed annual rent per property
        annual_expense_per_property: Annual operating expense per property
        interest_rate: Annual interest rate (0.04 for 4%)
        appreciation_rate: Annual appreciation (0.03 for 3%)
        purchase_interval: Years between acquisitions
        max_properties: Cap on properties acquired
        loan_tenure: Loan tenure in years
        start_year: Calendar year of simulation year 0
    """

    purchase_price: float
    market_value: float
    loan_amount: float
    monthly_payment: float
    annual_rental_income: float
    annual_expense_per_property: float
    interest_rate: float
    appreciation_rate: float
    purchase_interval: int
    max_properties: int
    loan_tenure: int
    start_year: int

    @property
    def annual_mortgage_payment(self) -> float:
        """Twelve installments."""
        return self.monthly_payment * 12

    @property
    def annual_cash_flow_per_property(self) -> float:
        """Rent less mortgage and operating expense for one operating property."""
        return (
            self.annual_rental_income
            - self.annual_mortgage_payment
            - self.annual_expense_per_property
        )

    @classmethod
    def from_assumptions(cls, assumptions: PropertyAssumptions) -> "PropertyTerms":
        """
        Convert boundary percentages to decimals and derive per-property scalars.

        Rent is a fixed fraction of the purchase price: it does not follow
        appreciation, and for a below-market purchase it is based on the
        discounted price rather than the market value.
        """
        price = assumptions.purchase_price
        interest_rate = assumptions.interest_rate / 100
        appreciation_rate = assumptions.appreciation_rate / 100
        discount = assumptions.below_market_discount / 100

        if assumptions.market_value is not None:
            market_value = assumptions.market_value
        elif discount > 0:
            market_value = price / (1 - discount)
        else:
            market_value = price

        if assumptions.loan_amount is not None:
            loan_amount = assumptions.loan_amount
        elif assumptions.loan_to_price is not None:
            loan_amount = price * assumptions.loan_to_price
        else:
            loan_amount = price

        if assumptions.annual_rental_income is not None:
            annual_rental_income = assumptions.annual_rental_income
        else:
            annual_rental_income = price * (assumptions.rental_yield / 100)

        if assumptions.expense_type == ExpenseTypeEnum.FIXED:
            annual_expense = assumptions.expense_value
        else:
            annual_expense = price * (assumptions.expense_value / 100)

        monthly_payment = calculate_monthly_payment(
            loan_amount, interest_rate, assumptions.loan_tenure
        )

        logger.debug(
            f"Resolved terms: market value {market_value:,.2f}, loan {loan_amount:,.2f}, "
            f"installment {monthly_payment:,.2f}/month, rent {annual_rental_income:,.2f}/year"
        )

        return cls(
            purchase_price=price,
            market_value=market_value,
            loan_amount=loan_amount,
            monthly_payment=monthly_payment,
            annual_rental_income=annual_rental_income,
            annual_expense_per_property=annual_expense,
            interest_rate=interest_rate,
            appreciation_rate=appreciation_rate,
            purchase_interval=assumptions.purchase_interval,
            max_properties=assumptions.max_properties,
            loan_tenure=assumptions.loan_tenure,
            start_year=assumptions.start_year,
        )

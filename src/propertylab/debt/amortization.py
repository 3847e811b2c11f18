# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""Loan amortization calculations"""

from __future__ import annotations

import numpy as np
import pandas as pd
from pydantic import Field
from pyxirr import pmt

from ..core.primitives import Model, PercentFloat, PositiveFloat, PositiveIntGe1


def calculate_monthly_payment(
    principal: float, annual_rate: float, years: int
) -> float:
    """
    Fixed monthly installment of a fully amortizing loan.

    Formula: P * r * (1+r)^n / ((1+r)^n - 1), with r = annual_rate / 12 and
    n = years * 12. A zero rate repays the principal in equal parts.

    Args:
        principal: Loan amount
        annual_rate: Annual interest rate as a decimal (0.04 for 4%)
        years: Loan tenure in years

    Returns:
        Unrounded monthly payment
    """
    monthly_rate = annual_rate / 12
    number_of_payments = years * 12

    if monthly_rate == 0:
        return principal / number_of_payments

    return -pmt(monthly_rate, number_of_payments, principal)


def calculate_loan_balance(
    principal: float,
    payment: float,
    annual_rate: float,
    years_elapsed: float,
    tenure_years: int,
) -> float:
    """
    Remaining balance after ``years_elapsed`` years of scheduled payments.

    Uses P * ((1+r)^N - (1+r)^k) / ((1+r)^N - 1) with N = tenure * 12 and
    k = min(years_elapsed, tenure) * 12. Once the tenure has run out the loan
    is retired and the balance stays at exactly zero.

    Args:
        principal: Original loan amount
        payment: Monthly installment (only used on the zero-rate path)
        annual_rate: Annual interest rate as a decimal
        years_elapsed: Years of payments made so far
        tenure_years: Loan tenure in years

    Returns:
        Outstanding balance, never negative
    """
    if years_elapsed >= tenure_years:
        return 0.0

    monthly_rate = annual_rate / 12
    total_payments = tenure_years * 12
    payments_made = min(years_elapsed, tenure_years) * 12

    if monthly_rate == 0:
        return max(0.0, principal - payment * payments_made)

    growth_total = (1 + monthly_rate) ** total_payments
    growth_made = (1 + monthly_rate) ** payments_made
    remaining_balance = principal * (growth_total - growth_made) / (growth_total - 1)

    # Float drift near the final payment can dip just below zero
    return max(0.0, remaining_balance)


class LoanAmortization(Model):
    """
    Year-by-year amortization schedule for one property's mortgage.

    Attributes:
        loan_amount (PositiveFloat): Initial loan amount
        interest_rate (PercentFloat): Annual interest rate in percent (4 for 4%)
        tenure (PositiveIntGe1): Loan tenure in years

    Examples:
        >>> amortization = LoanAmortization(
        ...     loan_amount=500_000.0,
        ...     interest_rate=4,
        ...     tenure=30,
        ... )
        >>> schedule = amortization.schedule
        >>> schedule.loc[30, "End Balance"]
        0.0
    """

    loan_amount: PositiveFloat
    interest_rate: PercentFloat = Field(
        ..., description="Annual interest rate in percent (4 means 4%)"
    )
    tenure: PositiveIntGe1 = Field(..., description="Loan tenure in years")

    @property
    def annual_rate(self) -> float:
        """Interest rate as a decimal fraction."""
        return self.interest_rate / 100

    @property
    def monthly_payment(self) -> float:
        """Fixed monthly installment."""
        return calculate_monthly_payment(self.loan_amount, self.annual_rate, self.tenure)

    @property
    def schedule(self) -> pd.DataFrame:
        """
        Generate the yearly amortization schedule.

        Returns:
            DataFrame indexed by loan year (1..tenure) with columns:
                - Begin Balance: Balance at the start of the year
                - Payment: Twelve monthly installments
                - Interest: Interest portion of the year's payments
                - Principal: Principal repaid during the year
                - End Balance: Balance after the year's last installment
        """
        years = np.arange(1, self.tenure + 1)
        payment = self.monthly_payment

        balances = np.array(
            [
                calculate_loan_balance(
                    self.loan_amount, payment, self.annual_rate, year, self.tenure
                )
                for year in range(0, self.tenure + 1)
            ]
        )
        begin_balances = balances[:-1]
        end_balances = balances[1:]
        principal_paid = begin_balances - end_balances
        annual_payments = np.full(self.tenure, payment * 12)

        df = pd.DataFrame(
            {
                "Begin Balance": begin_balances,
                "Payment": annual_payments,
                "Interest": annual_payments - principal_paid,
                "Principal": principal_paid,
                "End Balance": end_balances,
            },
            index=pd.Index(years, name="Year"),
        )
        return df

    @property
    def total_interest(self) -> float:
        """Interest paid over the full tenure."""
        return float(self.schedule["Interest"].sum())

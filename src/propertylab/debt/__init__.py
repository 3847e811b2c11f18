# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from .amortization import (
    LoanAmortization,
    calculate_loan_balance,
    calculate_monthly_payment,
)

__all__ = [
    # Payment calculations
    "calculate_monthly_payment",
    "calculate_loan_balance",
    # Schedules
    "LoanAmortization",
]

# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Purchase cohorts.

Properties are identical, so a property is fully described by its
acquisition index ``i``: it is bought at elapsed offset ``i * interval`` and
its age in simulated year ``y`` is ``y - i * interval``.
"""

from __future__ import annotations

from typing import Iterator

from ..core.primitives import Model
from ..debt.amortization import calculate_loan_balance
from .terms import PropertyTerms


class PropertyCohort(Model):
    """One acquisition event in the purchase schedule."""

    index: int
    purchase_interval: int

    @property
    def offset(self) -> int:
        """Elapsed years at which this cohort was bought."""
        return self.index * self.purchase_interval

    def age(self, year: int) -> int:
        return year - self.offset

    def is_valued(self, year: int) -> bool:
        """Held on the balance sheet (market value and loan)."""
        return self.age(year) >= 0

    def is_operating(self, year: int) -> bool:
        """Has a full year of operating history; the purchase year has none."""
        return self.age(year) > 0

    def market_value(self, terms: PropertyTerms, year: int) -> float:
        return terms.market_value * (1 + terms.appreciation_rate) ** self.age(year)

    def loan_balance(self, terms: PropertyTerms, year: int) -> float:
        return calculate_loan_balance(
            terms.loan_amount,
            terms.monthly_payment,
            terms.interest_rate,
            min(self.age(year), terms.loan_tenure),
            terms.loan_tenure,
        )


def is_purchase_year(year: int, purchase_interval: int) -> bool:
    """
    Acquisitions happen in years 1, 1 + interval, 1 + 2 * interval, ...

    Year 0 is the baseline before the first purchase.
    """
    if year <= 0:
        return False
    return purchase_interval == 1 or year % purchase_interval == 1


def iter_cohorts(properties_owned: int, purchase_interval: int) -> Iterator[PropertyCohort]:
    """Cohorts ``0..properties_owned - 1`` in acquisition order."""
    for index in range(properties_owned):
        yield PropertyCohort(index=index, purchase_interval=purchase_interval)

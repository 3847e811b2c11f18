# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Property-level inputs and per-property economics.
"""

from .assumptions import PropertyAssumptions
from .cohort import PropertyCohort, is_purchase_year, iter_cohorts
from .terms import PropertyTerms

__all__ = [
    "PropertyAssumptions",
    "PropertyTerms",
    "PropertyCohort",
    "is_purchase_year",
    "iter_cohorts",
]

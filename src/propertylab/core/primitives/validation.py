# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Reusable Pydantic validation utilities for common input patterns.

This module provides standardized validators for:
- Mutual exclusivity (two optional ways of specifying one quantity)
"""

from __future__ import annotations

from typing import Any, Dict, Optional


class ValidationMixin:
    """
    Mixin class providing reusable validation methods for Pydantic models.

    Inherit alongside ``Model`` and call the helpers from a
    ``model_validator(mode="before")``.
    """

    @classmethod
    def validate_at_most_one(
        cls,
        data: Dict[str, Any],
        field_a: str,
        field_b: str,
        error_message: Optional[str] = None,
        *,
        unset_b: Any = None,
    ) -> Dict[str, Any]:
        """
        Validate that two alternative fields are not both provided.

        Args:
            data: Raw model input dictionary
            field_a: First field name
            field_b: Second field name
            error_message: Custom error message
            unset_b: Value of ``field_b`` that counts as "not provided"
                (e.g. a discount of 0)

        Returns:
            The unchanged input dictionary

        Raises:
            ValueError: If both fields are provided
        """
        if not isinstance(data, dict):
            return data

        value_a = _lookup(data, field_a)
        value_b = _lookup(data, field_b)

        if value_a is not None and value_b is not None and value_b != unset_b:
            msg = error_message or f"Cannot provide both {field_a} and {field_b}"
            raise ValueError(msg)

        return data


def _lookup(data: Dict[str, Any], field_name: str) -> Any:
    """Read a field from raw input by snake_case name or camelCase alias."""
    if field_name in data:
        return data[field_name]
    head, *rest = field_name.split("_")
    alias = head + "".join(part.capitalize() for part in rest)
    return data.get(alias)

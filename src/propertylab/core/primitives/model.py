# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class Model(BaseModel):
    """Base Pydantic model with common configuration.

    Immutable models; simulation state that changes year to year lives in
    local variables of the simulation routines, never on a model.

    Fields serialize with camelCase aliases so stored payloads keep the
    field names downstream consumers already read (``netEquity``,
    ``yearlyData``). Either spelling is accepted on input.
    """

    model_config = ConfigDict(
        frozen=True,  # Results are shared freely between callers
        extra="forbid",  # Catches typos and missing field definitions immediately
        alias_generator=to_camel,
        populate_by_name=True,
    )

    def copy(self, *, updates: Optional[Dict[str, Any]] = None) -> "Model":
        """
        Return a validated copy of the model with field updates applied

        Updates go through the same validation as construction, so a copy can
        never break an invariant the original had to satisfy.

        Args:
            updates: Optional field values to change, by field name or alias

        Returns:
            A new model instance

        Raises:
            ValidationError: If the updated values are invalid
        """
        data = self.model_dump(by_alias=True)
        fields = type(self).model_fields
        for key, value in (updates or {}).items():
            alias = fields[key].alias if key in fields else None
            data[alias or key] = value
        return type(self).model_validate(data)

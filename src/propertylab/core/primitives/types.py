# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from typing import Annotated

from pydantic import Field

# constrained types
PositiveInt = Annotated[int, Field(strict=True, ge=0)]
PositiveIntGe1 = Annotated[int, Field(strict=True, ge=1)]
PositiveFloat = Annotated[float, Field(ge=0)]
PositiveFloatGt0 = Annotated[float, Field(gt=0)]
FloatBetween0And1 = Annotated[float, Field(ge=0, le=1)]
# Percentages at the input boundary: 3 means 3%
PercentFloat = Annotated[float, Field(ge=0)]
DiscountPercent = Annotated[float, Field(ge=0, lt=100)]

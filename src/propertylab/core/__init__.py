# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
PropertyLab Core

Shared primitives (base model, constrained types, enums, settings and
validation helpers) used by every other subpackage.
"""

from . import primitives

__all__ = ["primitives"]

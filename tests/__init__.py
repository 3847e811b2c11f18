# PropertyLab Test Suite
# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
PropertyLab test suite.

This package contains tests for all PropertyLab components, organized into
unit and integration test categories.
"""

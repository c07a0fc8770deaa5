#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Shared constants and validation helpers

This sub-package centralises physical constants, the periodic table, and
argument validation so that the model and registry layers apply the same
rules everywhere.
"""

from __future__ import annotations

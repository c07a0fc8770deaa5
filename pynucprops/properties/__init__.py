#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Scattering-center property registries

* :class:`~pynucprops.properties.atom.AtomProperties` — atomic data for one element
* :class:`~pynucprops.properties.nuclide.NuclideProperties` — nuclear data for
  one nuclide plus shared atomic data
* :class:`~pynucprops.properties.cache.ScatteringCenterPropertiesCache` —
  name/alias-keyed collection of either

All registries share the :class:`~pynucprops.properties.base.ScatteringCenterProperties`
interface.
"""

from __future__ import annotations

from pynucprops.properties.atom import AtomProperties
from pynucprops.properties.base import ScatteringCenterProperties
from pynucprops.properties.cache import ScatteringCenterPropertiesCache
from pynucprops.properties.nuclide import NuclideProperties

__all__ = [
    "ScatteringCenterProperties",
    "AtomProperties",
    "NuclideProperties",
    "ScatteringCenterPropertiesCache",
]

#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
PyNucProps - registry of evaluated nuclear and atomic data properties

Track which evaluated data tables (file type, file version, evaluation
temperature) exist for each nuclide and element, and resolve requests such
as "the version-0 ACE nuclear data for H-1 nearest to 600 K".

Modules
-------
models
    Energy / temperature quantities, the ZAID identifier, and the
    data-properties record types.
properties
    Atom and nuclide registries, and the name-keyed properties cache.
utils
    Physical constants and validation logic.

Examples
--------
>>> from pynucprops import NuclideProperties, NuclearDataProperties, Temperature
>>> h1 = NuclideProperties(1001, 0.999167)
>>> h1.set_nuclear_data_properties(NuclearDataProperties(
...     zaid=1001, file_type="ACE", file_version=8,
...     evaluation_temperature=Temperature(293.6)))
>>> h1.get_nuclear_data_properties(
...     "ACE", 8, Temperature(600.0), require_exact_match=False).file_version
8
"""

from __future__ import annotations

__version__ = "0.1.0"
__author__ = "Melek Derman"

from pynucprops.models.quantities import (
    ZAID,
    Energy,
    Temperature,
    energy_to_kelvin,
    kelvin_to_energy,
)
from pynucprops.models.records import (
    AdjointElectroatomicDataProperties,
    AdjointNuclearDataProperties,
    AdjointPhotoatomicDataProperties,
    AdjointPhotonuclearDataProperties,
    AdjointThermalNuclearDataProperties,
    ElectroatomicDataProperties,
    NuclearDataProperties,
    PhotoatomicDataProperties,
    PhotonuclearDataProperties,
    ThermalNuclearDataProperties,
)
from pynucprops.properties import (
    AtomProperties,
    NuclideProperties,
    ScatteringCenterProperties,
    ScatteringCenterPropertiesCache,
)
from pynucprops.exceptions import (
    PyNucPropsError,
    InvalidScatteringCenterPropertiesData,
    InvalidScatteringCenterPropertiesRequest,
    RequestNotSatisfiableError,
)

__all__ = [
    # Version
    "__version__",
    # Quantities
    "ZAID",
    "Energy",
    "Temperature",
    "energy_to_kelvin",
    "kelvin_to_energy",
    # Records
    "PhotoatomicDataProperties",
    "AdjointPhotoatomicDataProperties",
    "ElectroatomicDataProperties",
    "AdjointElectroatomicDataProperties",
    "NuclearDataProperties",
    "AdjointNuclearDataProperties",
    "ThermalNuclearDataProperties",
    "AdjointThermalNuclearDataProperties",
    "PhotonuclearDataProperties",
    "AdjointPhotonuclearDataProperties",
    # Registries
    "ScatteringCenterProperties",
    "AtomProperties",
    "NuclideProperties",
    "ScatteringCenterPropertiesCache",
    # Exceptions
    "PyNucPropsError",
    "InvalidScatteringCenterPropertiesData",
    "InvalidScatteringCenterPropertiesRequest",
    "RequestNotSatisfiableError",
]

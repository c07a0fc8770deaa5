#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Typed models for scattering-center data

Quantities (energy, temperature, ZAID) and the data-properties records
stored by the registries in :mod:`pynucprops.properties`.
"""

from __future__ import annotations

from pynucprops.models.quantities import (
    ZAID,
    Energy,
    Temperature,
    energy_to_kelvin,
    kelvin_to_energy,
)
from pynucprops.models.records import (
    AdjointElectroatomicDataProperties,
    AdjointElectroatomicFileType,
    AdjointNuclearDataProperties,
    AdjointNuclearFileType,
    AdjointPhotoatomicDataProperties,
    AdjointPhotoatomicFileType,
    AdjointPhotonuclearDataProperties,
    AdjointPhotonuclearFileType,
    AdjointThermalNuclearDataProperties,
    AdjointThermalNuclearFileType,
    DataProperties,
    ElectroatomicDataProperties,
    ElectroatomicFileType,
    NuclearDataProperties,
    NuclearFileType,
    PhotoatomicDataProperties,
    PhotoatomicFileType,
    PhotonuclearDataProperties,
    PhotonuclearFileType,
    ThermalNuclearDataProperties,
    ThermalNuclearFileType,
)

__all__ = [
    "ZAID",
    "Energy",
    "Temperature",
    "energy_to_kelvin",
    "kelvin_to_energy",
    "DataProperties",
    "PhotoatomicDataProperties",
    "PhotoatomicFileType",
    "AdjointPhotoatomicDataProperties",
    "AdjointPhotoatomicFileType",
    "ElectroatomicDataProperties",
    "ElectroatomicFileType",
    "AdjointElectroatomicDataProperties",
    "AdjointElectroatomicFileType",
    "NuclearDataProperties",
    "NuclearFileType",
    "AdjointNuclearDataProperties",
    "AdjointNuclearFileType",
    "ThermalNuclearDataProperties",
    "ThermalNuclearFileType",
    "AdjointThermalNuclearDataProperties",
    "AdjointThermalNuclearFileType",
    "PhotonuclearDataProperties",
    "PhotonuclearFileType",
    "AdjointPhotonuclearDataProperties",
    "AdjointPhotonuclearFileType",
]

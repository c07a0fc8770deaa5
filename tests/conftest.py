#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Shared pytest fixtures for PyNucProps tests

Provides synthetic data-properties records and pre-populated registries
for H-1 so that every test module exercises the same data.
"""

from __future__ import annotations

import pytest

from pynucprops.models.quantities import Energy
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
from pynucprops.properties.atom import AtomProperties
from pynucprops.properties.nuclide import NuclideProperties

EVALUATION_TEMPS_MEV = (0.0, 2.5301e-08, 2.1543e-07)
"""Evaluation temperatures used for every temperature-indexed category."""


@pytest.fixture
def h_atom_properties() -> AtomProperties:
    """Hydrogen atom properties with one record in each atomic category"""
    atom = AtomProperties(1000, 0.999167)
    atom.set_photoatomic_data_properties(
        PhotoatomicDataProperties(
            zaid=1000,
            file_type="ACE",
            file_version=12,
            file_path="photoatomic_data/1000.12p",
            table_name="1000.12p",
        )
    )
    atom.set_adjoint_photoatomic_data_properties(
        AdjointPhotoatomicDataProperties(
            zaid=1000,
            file_type="Native EPR",
            file_version=0,
            file_path="adjoint_photoatomic_data/aepr_native_H.xml",
        )
    )
    atom.set_electroatomic_data_properties(
        ElectroatomicDataProperties(
            zaid=1000,
            file_type="ACE EPR",
            file_version=14,
            file_path="electroatomic_data/1000.14p",
            table_name="1000.14p",
        )
    )
    atom.set_adjoint_electroatomic_data_properties(
        AdjointElectroatomicDataProperties(
            zaid=1000,
            file_type="Native EPR",
            file_version=0,
            file_path="adjoint_electroatomic_data/aepr_native_H.xml",
        )
    )
    return atom


def _populate_nuclide(nuclide: NuclideProperties) -> None:
    for index, temp in enumerate(EVALUATION_TEMPS_MEV):
        nuclide.set_nuclear_data_properties(
            NuclearDataProperties(
                zaid=1001,
                file_type="ACE",
                file_version=0,
                evaluation_temperature=Energy(temp),
                file_path=f"neutron_data/h1_{index}.txt",
                table_name=f"1001.7{index}c",
            )
        )
        nuclide.set_adjoint_nuclear_data_properties(
            AdjointNuclearDataProperties(
                zaid=1001,
                file_type="Native",
                file_version=0,
                evaluation_temperature=Energy(temp),
                file_path=f"adjoint_neutron_data/h1_{index}.xml",
            )
        )
        for name in ("H2O", "D2O"):
            nuclide.set_thermal_nuclear_data_properties(
                ThermalNuclearDataProperties(
                    name=name,
                    zaid=1001,
                    zaids=(1001, 1002, 8016),
                    file_type="ACE",
                    file_version=0,
                    evaluation_temperature=Energy(temp),
                    file_path=f"sab_data/{name.lower()}_{index}.txt",
                )
            )
            nuclide.set_adjoint_thermal_nuclear_data_properties(
                AdjointThermalNuclearDataProperties(
                    name=name,
                    zaid=1001,
                    file_type="Native",
                    file_version=0,
                    evaluation_temperature=Energy(temp),
                    file_path=f"adjoint_sab_data/{name.lower()}_{index}.xml",
                )
            )
    nuclide.set_photonuclear_data_properties(
        PhotonuclearDataProperties(
            zaid=1001,
            file_type="ACE",
            file_version=70,
            file_path="photonuclear_data/1001.70u",
            table_name="1001.70u",
        )
    )
    nuclide.set_adjoint_photonuclear_data_properties(
        AdjointPhotonuclearDataProperties(
            zaid=1001,
            file_type="Native",
            file_version=0,
            file_path="adjoint_photonuclear_data/h1.xml",
        )
    )


@pytest.fixture
def h1_properties(h_atom_properties: AtomProperties) -> NuclideProperties:
    """H-1 nuclide sharing ``h_atom_properties``, with every category populated"""
    nuclide = NuclideProperties(1001, 0.999167, atom_properties=h_atom_properties)
    _populate_nuclide(nuclide)
    return nuclide


@pytest.fixture
def owning_h1_properties() -> NuclideProperties:
    """H-1 nuclide owning a private, empty atom registry"""
    nuclide = NuclideProperties(1001, 0.999167)
    _populate_nuclide(nuclide)
    return nuclide

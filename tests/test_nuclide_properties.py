#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Tests for the nuclide data-properties registry

Covers construction, atomic-data sharing, the six nuclear categories
(including nearest evaluation-temperature lookups), record ownership
checks, and the three cloning strategies.
"""

from __future__ import annotations

import pytest

from pynucprops.exceptions import (
    InvalidScatteringCenterPropertiesData,
    InvalidScatteringCenterPropertiesRequest,
    RequestNotSatisfiableError,
)
from pynucprops.models.quantities import ZAID, Energy, Temperature
from pynucprops.models.records import (
    AdjointPhotonuclearDataProperties,
    NuclearDataProperties,
    PhotoatomicDataProperties,
    ThermalNuclearDataProperties,
)
from pynucprops.properties.atom import AtomProperties
from pynucprops.properties.base import ScatteringCenterProperties
from pynucprops.properties.nuclide import NuclideProperties
from pynucprops.utils.constants import NEUTRON_REST_MASS_AMU

ROOM_TEMP_K = 2.936059397103837227e02


class TestNuclideConstruction:

    def test_identity(self) -> None:
        nuclide = NuclideProperties(1001, 1.0)
        assert nuclide.zaid == ZAID(1001)
        assert nuclide.name == "H1"
        assert nuclide.is_nuclide()
        assert isinstance(nuclide, ScatteringCenterProperties)
        assert nuclide.atomic_weight == pytest.approx(NEUTRON_REST_MASS_AMU)

    @pytest.mark.parametrize("ratio", [0.0, -1.0])
    def test_bad_weight_ratio(self, ratio: float) -> None:
        with pytest.raises(InvalidScatteringCenterPropertiesData):
            NuclideProperties(1001, ratio)

    def test_owning_mode_creates_atom(self) -> None:
        nuclide = NuclideProperties(1001, 0.999167)
        assert isinstance(nuclide.atom_properties, AtomProperties)
        assert nuclide.atom_properties.zaid == ZAID(1000)
        assert not nuclide.photoatomic_data_available()

    def test_owning_mode_atoms_are_private(self) -> None:
        first = NuclideProperties(1001, 0.999167)
        second = NuclideProperties(1001, 0.999167)
        assert first.atom_properties is not second.atom_properties

    def test_rejects_non_atom(self) -> None:
        with pytest.raises(InvalidScatteringCenterPropertiesData):
            NuclideProperties(1001, 0.999167, atom_properties=NuclideProperties(1001, 1.0))

    def test_empty(self) -> None:
        nuclide = NuclideProperties(8016, 15.857510)
        assert not nuclide.nuclear_data_available()
        assert not nuclide.thermal_nuclear_data_available()
        assert not nuclide.photonuclear_data_available()
        assert nuclide.get_thermal_nuclear_data_names() == set()
        assert nuclide.get_nuclear_data_evaluation_temps_in_mev("ACE", 0) == []


class TestAtomicDataSharing:

    def test_shared_instance(
        self, h_atom_properties: AtomProperties, h1_properties: NuclideProperties
    ) -> None:
        assert h1_properties.atom_properties is h_atom_properties
        assert h1_properties.get_photoatomic_data_properties("ACE", 12) is (
            h_atom_properties.get_photoatomic_data_properties("ACE", 12)
        )

    def test_atom_writes_visible_through_nuclide(
        self, h_atom_properties: AtomProperties, h1_properties: NuclideProperties
    ) -> None:
        record = PhotoatomicDataProperties(zaid=1000, file_type="Native EPR", file_version=0)
        h_atom_properties.set_photoatomic_data_properties(record)
        assert h1_properties.get_photoatomic_data_properties("Native EPR", 0) is record

    def test_nuclide_writes_visible_through_atom(
        self, h_atom_properties: AtomProperties, h1_properties: NuclideProperties
    ) -> None:
        record = PhotoatomicDataProperties(zaid=1000, file_type="ACE EPR", file_version=3)
        h1_properties.set_photoatomic_data_properties(record)
        assert h_atom_properties.get_photoatomic_data_properties("ACE EPR", 3) is record

    def test_isotopes_share_atom(
        self, h_atom_properties: AtomProperties, h1_properties: NuclideProperties
    ) -> None:
        h2 = NuclideProperties(1002, 1.996300, atom_properties=h_atom_properties)
        record = PhotoatomicDataProperties(zaid=1000, file_type="ACE", file_version=84)
        h2.set_photoatomic_data_properties(record)
        assert h1_properties.get_photoatomic_data_properties("ACE", 84) is record

    def test_all_atomic_categories_delegate(self, h1_properties: NuclideProperties) -> None:
        assert h1_properties.get_photoatomic_data_file_types() == {"ACE"}
        assert h1_properties.adjoint_photoatomic_data_available("Native EPR", 0)
        assert h1_properties.get_recommended_electroatomic_data_file_version("ACE EPR") == 14
        assert h1_properties.get_adjoint_electroatomic_data_file_versions("Native EPR") == {0}


class TestNuclearData:

    def test_available(self, h1_properties: NuclideProperties) -> None:
        assert h1_properties.nuclear_data_available()
        assert h1_properties.nuclear_data_available("ACE", 0)
        assert h1_properties.nuclear_data_available("ACE", 0, Energy(2.5301e-08))
        assert h1_properties.nuclear_data_available("ACE", 0, Temperature(ROOM_TEMP_K))
        assert not h1_properties.nuclear_data_available("ACE", 0, Energy(1e-08))
        assert not h1_properties.nuclear_data_available("ACE", 1)

    def test_evaluation_temps(self, h1_properties: NuclideProperties) -> None:
        temps = h1_properties.get_nuclear_data_evaluation_temps_in_mev("ACE", 0)
        assert temps == [Energy(0.0), Energy(2.5301e-08), Energy(2.1543e-07)]
        kelvin = h1_properties.get_nuclear_data_evaluation_temps("ACE", 0)
        assert kelvin[0] == Temperature(0.0)
        assert kelvin[1].value == pytest.approx(ROOM_TEMP_K)

    def test_exact_lookup(self, h1_properties: NuclideProperties) -> None:
        record = h1_properties.get_nuclear_data_properties(
            "ACE", 0, Temperature(ROOM_TEMP_K), True
        )
        assert record.table_name == "1001.71c"
        with pytest.raises(RequestNotSatisfiableError):
            h1_properties.get_nuclear_data_properties("ACE", 0, Energy(3e-07), True)

    def test_exact_is_default(self, h1_properties: NuclideProperties) -> None:
        with pytest.raises(RequestNotSatisfiableError):
            h1_properties.get_nuclear_data_properties("ACE", 0, Energy(1.26e-08))

    @pytest.mark.parametrize(
        "query, table",
        [
            (1.26e-08, "1001.70c"),
            (1.27e-08, "1001.71c"),
            (1.20e-07, "1001.71c"),
            (1.21e-07, "1001.72c"),
            (3.0e-07, "1001.72c"),
        ],
    )
    def test_nearest_lookup(
        self, h1_properties: NuclideProperties, query: float, table: str
    ) -> None:
        record = h1_properties.get_nuclear_data_properties("ACE", 0, Energy(query), False)
        assert record.table_name == table

    def test_missing_bucket(self, h1_properties: NuclideProperties) -> None:
        with pytest.raises(InvalidScatteringCenterPropertiesRequest):
            h1_properties.get_nuclear_data_properties("ACE", 1, Energy(0.0), False)

    def test_recommended_version(self, h1_properties: NuclideProperties) -> None:
        for version in (1, 2):
            h1_properties.set_nuclear_data_properties(
                NuclearDataProperties(
                    zaid=1001, file_type="ACE", file_version=version,
                    evaluation_temperature=0.0,
                )
            )
        assert h1_properties.get_nuclear_data_file_versions("ACE") == {0, 1, 2}
        assert h1_properties.get_recommended_nuclear_data_file_version("ACE") == 2
        with pytest.raises(InvalidScatteringCenterPropertiesRequest):
            h1_properties.get_recommended_nuclear_data_file_version("Native")

    def test_wrong_nuclide_rejected(self, h1_properties: NuclideProperties) -> None:
        with pytest.raises(InvalidScatteringCenterPropertiesData):
            h1_properties.set_nuclear_data_properties(
                NuclearDataProperties(
                    zaid=1002, file_type="ACE", file_version=0,
                    evaluation_temperature=0.0,
                )
            )

    def test_adjoint_nuclear(self, h1_properties: NuclideProperties) -> None:
        assert h1_properties.get_adjoint_nuclear_data_file_types() == {"Native"}
        assert h1_properties.get_recommended_adjoint_nuclear_data_file_version("Native") == 0
        record = h1_properties.get_adjoint_nuclear_data_properties(
            "Native", 0, Energy(1.21e-07), False
        )
        assert record.evaluation_temperature == Energy(2.1543e-07)
        assert len(h1_properties.get_adjoint_nuclear_data_evaluation_temps("Native", 0)) == 3


class TestThermalNuclearData:

    def test_names(self, h1_properties: NuclideProperties) -> None:
        assert h1_properties.get_thermal_nuclear_data_names() == {"H2O", "D2O"}
        assert h1_properties.get_adjoint_thermal_nuclear_data_names() == {"H2O", "D2O"}

    def test_names_are_independent(self, h1_properties: NuclideProperties) -> None:
        h1_properties.set_thermal_nuclear_data_properties(
            ThermalNuclearDataProperties(
                name="D2O", zaid=1001, file_type="Native", file_version=1,
                evaluation_temperature=0.0,
            )
        )
        assert h1_properties.get_thermal_nuclear_data_file_types("H2O") == {"ACE"}
        assert h1_properties.get_thermal_nuclear_data_file_types("D2O") == {"ACE", "Native"}
        assert h1_properties.get_thermal_nuclear_data_file_versions("H2O", "Native") == set()
        assert h1_properties.get_recommended_thermal_nuclear_data_file_version("D2O", "Native") == 1

    def test_lookup(self, h1_properties: NuclideProperties) -> None:
        assert h1_properties.thermal_nuclear_data_available("H2O", "ACE", 0, Energy(0.0))
        assert not h1_properties.thermal_nuclear_data_available("h2o")
        record = h1_properties.get_thermal_nuclear_data_properties(
            "H2O", "ACE", 0, Energy(1.27e-08), False
        )
        assert record.name == "H2O"
        assert record.evaluation_temperature == Energy(2.5301e-08)
        with pytest.raises(RequestNotSatisfiableError):
            h1_properties.get_thermal_nuclear_data_properties(
                "H2O", "ACE", 0, Energy(1.27e-08), True
            )
        with pytest.raises(InvalidScatteringCenterPropertiesRequest):
            h1_properties.get_thermal_nuclear_data_properties(
                "HinCH2", "ACE", 0, Energy(0.0), False
            )

    def test_evaluation_temps(self, h1_properties: NuclideProperties) -> None:
        assert h1_properties.get_thermal_nuclear_data_evaluation_temps_in_mev(
            "D2O", "ACE", 0
        ) == [Energy(0.0), Energy(2.5301e-08), Energy(2.1543e-07)]
        assert h1_properties.get_adjoint_thermal_nuclear_data_evaluation_temps(
            "H2O", "Native", 1
        ) == []

    def test_constituent_zaid_accepted(self) -> None:
        o16 = NuclideProperties(8016, 15.857510)
        o16.set_thermal_nuclear_data_properties(
            ThermalNuclearDataProperties(
                name="H2O", zaid=1001, zaids=(8016,), file_type="ACE",
                file_version=0, evaluation_temperature=0.0,
            )
        )
        assert o16.get_thermal_nuclear_data_names() == {"H2O"}

    def test_foreign_thermal_rejected(self) -> None:
        u235 = NuclideProperties(92235, 233.0248)
        with pytest.raises(InvalidScatteringCenterPropertiesData):
            u235.set_thermal_nuclear_data_properties(
                ThermalNuclearDataProperties(
                    name="H2O", zaid=1001, file_type="ACE",
                    file_version=0, evaluation_temperature=0.0,
                )
            )

    def test_adjoint_thermal_lookup(self, h1_properties: NuclideProperties) -> None:
        assert h1_properties.get_adjoint_thermal_nuclear_data_file_types("H2O") == {"Native"}
        assert h1_properties.get_adjoint_thermal_nuclear_data_file_versions("H2O", "Native") == {0}
        record = h1_properties.get_adjoint_thermal_nuclear_data_properties(
            "D2O", "Native", 0, Temperature(ROOM_TEMP_K), True
        )
        assert record.name == "D2O"


class TestPhotonuclearData:

    def test_photonuclear(self, h1_properties: NuclideProperties) -> None:
        assert h1_properties.photonuclear_data_available("ACE", 70)
        assert h1_properties.get_photonuclear_data_file_types() == {"ACE"}
        assert h1_properties.get_recommended_photonuclear_data_file_version("ACE") == 70
        assert h1_properties.get_photonuclear_data_properties("ACE", 70).table_name == "1001.70u"
        with pytest.raises(InvalidScatteringCenterPropertiesRequest):
            h1_properties.get_photonuclear_data_properties("ACE", 24)

    def test_adjoint_photonuclear(self, h1_properties: NuclideProperties) -> None:
        h1_properties.set_adjoint_photonuclear_data_properties(
            AdjointPhotonuclearDataProperties(zaid=1001, file_type="Native", file_version=1)
        )
        assert h1_properties.get_adjoint_photonuclear_data_file_versions("Native") == {0, 1}
        assert h1_properties.get_recommended_adjoint_photonuclear_data_file_version("Native") == 1
        assert h1_properties.adjoint_photonuclear_data_available("Native", 1)


def _nuclear_records(nuclide: NuclideProperties) -> list:
    records = []
    for temp in nuclide.get_nuclear_data_evaluation_temps_in_mev("ACE", 0):
        records.append(nuclide.get_nuclear_data_properties("ACE", 0, temp))
        records.append(nuclide.get_adjoint_nuclear_data_properties("Native", 0, temp))
        for name in ("H2O", "D2O"):
            records.append(
                nuclide.get_thermal_nuclear_data_properties(name, "ACE", 0, temp)
            )
            records.append(
                nuclide.get_adjoint_thermal_nuclear_data_properties(name, "Native", 0, temp)
            )
    records.append(nuclide.get_photonuclear_data_properties("ACE", 70))
    records.append(nuclide.get_adjoint_photonuclear_data_properties("Native", 0))
    return records


def _atomic_records(nuclide: NuclideProperties) -> list:
    return [
        nuclide.get_photoatomic_data_properties("ACE", 12),
        nuclide.get_adjoint_photoatomic_data_properties("Native EPR", 0),
        nuclide.get_electroatomic_data_properties("ACE EPR", 14),
        nuclide.get_adjoint_electroatomic_data_properties("Native EPR", 0),
    ]


class TestNuclideCloning:

    def test_clone(self, h1_properties: NuclideProperties) -> None:
        clone = h1_properties.clone()
        assert isinstance(clone, NuclideProperties)
        assert clone is not h1_properties
        assert clone.zaid == h1_properties.zaid
        assert clone.atom_properties is h1_properties.atom_properties
        for original, copied in zip(_nuclear_records(h1_properties), _nuclear_records(clone)):
            assert copied is original
        for original, copied in zip(_atomic_records(h1_properties), _atomic_records(clone)):
            assert copied is original

    def test_clone_of_owning_nuclide_shares_atom(
        self, owning_h1_properties: NuclideProperties
    ) -> None:
        clone = owning_h1_properties.clone()
        assert clone.atom_properties is owning_h1_properties.atom_properties
        record = PhotoatomicDataProperties(zaid=1000, file_type="ACE", file_version=12)
        clone.set_photoatomic_data_properties(record)
        assert owning_h1_properties.get_photoatomic_data_properties("ACE", 12) is record

    def test_clone_nuclear_maps_are_independent(self, h1_properties: NuclideProperties) -> None:
        clone = h1_properties.clone()
        clone.set_nuclear_data_properties(
            NuclearDataProperties(
                zaid=1001, file_type="ACE", file_version=5, evaluation_temperature=0.0
            )
        )
        assert clone.nuclear_data_available("ACE", 5)
        assert not h1_properties.nuclear_data_available("ACE", 5)

    def test_deep_clone(self, h1_properties: NuclideProperties) -> None:
        clone = h1_properties.deep_clone()
        assert isinstance(clone, NuclideProperties)
        assert clone.atom_properties is not h1_properties.atom_properties
        for original, copied in zip(_nuclear_records(h1_properties), _nuclear_records(clone)):
            assert copied == original
            assert copied is not original
        for original, copied in zip(_atomic_records(h1_properties), _atomic_records(clone)):
            assert copied == original
            assert copied is not original

    def test_deep_clone_atom_is_independent(self, h1_properties: NuclideProperties) -> None:
        clone = h1_properties.deep_clone()
        clone.set_photoatomic_data_properties(
            PhotoatomicDataProperties(zaid=1000, file_type="ACE", file_version=84)
        )
        assert not h1_properties.photoatomic_data_available("ACE", 84)

    def test_partial_deep_clone(self, h1_properties: NuclideProperties) -> None:
        clone = h1_properties.partial_deep_clone()
        assert isinstance(clone, NuclideProperties)
        assert clone.atom_properties is h1_properties.atom_properties
        for original, copied in zip(_nuclear_records(h1_properties), _nuclear_records(clone)):
            assert copied == original
            assert copied is not original
        for original, copied in zip(_atomic_records(h1_properties), _atomic_records(clone)):
            assert copied is original

    def test_polymorphic_clone(
        self, h_atom_properties: AtomProperties, h1_properties: NuclideProperties
    ) -> None:
        centers: list[ScatteringCenterProperties] = [h_atom_properties, h1_properties]
        for center in centers:
            assert center.clone().is_nuclide() == center.is_nuclide()
            assert center.deep_clone().is_nuclide() == center.is_nuclide()

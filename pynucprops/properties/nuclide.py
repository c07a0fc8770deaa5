#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Nuclide data-properties registry

:class:`NuclideProperties` tracks the nuclear data tables available for one
nuclide and, through a shared :class:`~pynucprops.properties.atom.AtomProperties`
instance, the atomic data tables of its element.

Categories
----------
=========================  ==========================================  ===========
Category                   Key                                         Container
=========================  ==========================================  ===========
nuclear                    file type → version → temperature           temperature
adjoint nuclear            file type → version → temperature           temperature
thermal nuclear            name → file type → version → temperature    named
adjoint thermal nuclear    name → file type → version → temperature    named
photonuclear               file type → version                         versioned
adjoint photonuclear       file type → version                         versioned
=========================  ==========================================  ===========

Atomic data sharing
-------------------
A nuclide either owns a private :class:`AtomProperties` (created from its
own ZAID) or shares one handed to the constructor.  Atomic-category calls
on the nuclide act on that instance, so every holder observes the same
records.  Many isotopes of an element usually share one instance.

Cloning
-------
* :meth:`NuclideProperties.clone` — shares the atom properties and every
  nuclear record; only the containers are new.
* :meth:`NuclideProperties.deep_clone` — shares nothing.
* :meth:`NuclideProperties.partial_deep_clone` — shares the atom properties
  but clones every nuclear record.
"""

from __future__ import annotations

import logging

from pynucprops.exceptions import InvalidScatteringCenterPropertiesData
from pynucprops.models.quantities import (
    Energy,
    Temperature,
    TemperatureLike,
    ZAIDLike,
)
from pynucprops.models.records import (
    AdjointNuclearDataProperties,
    AdjointPhotonuclearDataProperties,
    AdjointThermalNuclearDataProperties,
    DataProperties,
    FileType,
    NuclearDataProperties,
    PhotonuclearDataProperties,
    ThermalDataProperties,
    ThermalNuclearDataProperties,
)
from pynucprops.properties.atom import (
    AtomicDataInterface,
    AtomProperties,
    check_record_type,
)
from pynucprops.properties.base import ScatteringCenterProperties
from pynucprops.properties.record_maps import (
    NamedTemperatureRecordMap,
    TemperatureRecordMap,
    VersionedRecordMap,
)

logger = logging.getLogger(__name__)


class NuclideProperties(AtomicDataInterface, ScatteringCenterProperties):
    """Nuclear and atomic data tables available for one nuclide

    Parameters
    ----------
    zaid : ZAID | int
        Identifier of the nuclide.
    atomic_weight_ratio : float
        Nuclide mass relative to the neutron rest mass.  Must be strictly
        positive.
    atom_properties : AtomProperties | None, optional
        Atomic data registry to share.  If ``None`` (default) a private
        registry is created for ``zaid.atom()``.  The caller is responsible
        for passing an instance that describes the nuclide's element.
    name : str | None, optional
        Display / cache name.  Defaults to e.g. ``"H1"``.

    Raises
    ------
    InvalidScatteringCenterPropertiesData
        If *atomic_weight_ratio* is ``<= 0``.

    Examples
    --------
    >>> h = AtomProperties(1000, 0.999167)
    >>> h1 = NuclideProperties(1001, 0.999167, atom_properties=h)
    >>> h1.atom_properties is h
    True
    """

    def __init__(
        self,
        zaid: ZAIDLike,
        atomic_weight_ratio: float,
        atom_properties: AtomProperties | None = None,
        name: str | None = None,
    ) -> None:
        super().__init__(zaid, atomic_weight_ratio, name)

        if atom_properties is None:
            atom_properties = AtomProperties(self.zaid.atom(), atomic_weight_ratio)
        elif not isinstance(atom_properties, AtomProperties):
            raise InvalidScatteringCenterPropertiesData(
                f"Expected AtomProperties, got {type(atom_properties).__name__}."
            )
        self._atom_properties = atom_properties

        self._nuclear = TemperatureRecordMap(NuclearDataProperties.category)
        self._adjoint_nuclear = TemperatureRecordMap(
            AdjointNuclearDataProperties.category
        )
        self._thermal_nuclear = NamedTemperatureRecordMap(
            ThermalNuclearDataProperties.category
        )
        self._adjoint_thermal_nuclear = NamedTemperatureRecordMap(
            AdjointThermalNuclearDataProperties.category
        )
        self._photonuclear = VersionedRecordMap(PhotonuclearDataProperties.category)
        self._adjoint_photonuclear = VersionedRecordMap(
            AdjointPhotonuclearDataProperties.category
        )

    _NUCLEAR_MAPS = (
        "_nuclear",
        "_adjoint_nuclear",
        "_thermal_nuclear",
        "_adjoint_thermal_nuclear",
        "_photonuclear",
        "_adjoint_photonuclear",
    )

    @property
    def atom_properties(self) -> AtomProperties:
        """The (possibly shared) atomic data registry"""
        return self._atom_properties

    def _atom_data(self) -> AtomProperties:
        return self._atom_properties

    def is_nuclide(self) -> bool:
        return True

    def _check_nuclide_record(
        self,
        properties: DataProperties,
        record_type: type[DataProperties],
    ) -> None:
        check_record_type(properties, record_type)
        if isinstance(properties, ThermalDataProperties):
            belongs = properties.has_data_for_zaid(self.zaid)
        else:
            belongs = properties.zaid == self.zaid
        if not belongs:
            raise InvalidScatteringCenterPropertiesData(
                f"The {record_type.category} data properties for ZAID "
                f"{properties.zaid} do not provide data for nuclide {self.zaid}."
            )

    # -- nuclear -------------------------------------------------------------

    def set_nuclear_data_properties(self, properties: NuclearDataProperties) -> None:
        self._check_nuclide_record(properties, NuclearDataProperties)
        self._nuclear.set(properties)

    def nuclear_data_available(
        self,
        file_type: FileType | str | None = None,
        version: int | None = None,
        evaluation_temp: TemperatureLike | None = None,
    ) -> bool:
        return self._nuclear.available(file_type, version, evaluation_temp)

    def get_nuclear_data_file_types(self) -> set[FileType]:
        return self._nuclear.file_types()

    def get_nuclear_data_file_versions(self, file_type: FileType | str) -> set[int]:
        return self._nuclear.versions(file_type)

    def get_recommended_nuclear_data_file_version(self, file_type: FileType | str) -> int:
        return self._nuclear.recommended_version(file_type)

    def get_nuclear_data_evaluation_temps_in_mev(
        self, file_type: FileType | str, version: int
    ) -> list[Energy]:
        return self._nuclear.evaluation_temps_in_mev(file_type, version)

    def get_nuclear_data_evaluation_temps(
        self, file_type: FileType | str, version: int
    ) -> list[Temperature]:
        return self._nuclear.evaluation_temps(file_type, version)

    def get_nuclear_data_properties(
        self,
        file_type: FileType | str,
        version: int,
        evaluation_temp: TemperatureLike,
        require_exact_match: bool = True,
    ) -> NuclearDataProperties:
        """Return the nuclear data properties evaluated at *evaluation_temp*

        With ``require_exact_match=False`` the record with the nearest
        evaluation temperature is returned instead of raising
        :class:`~pynucprops.exceptions.RequestNotSatisfiableError`.
        """
        return self._nuclear.get(
            file_type, version, evaluation_temp, require_exact_match
        )

    # -- adjoint nuclear -----------------------------------------------------

    def set_adjoint_nuclear_data_properties(
        self, properties: AdjointNuclearDataProperties
    ) -> None:
        self._check_nuclide_record(properties, AdjointNuclearDataProperties)
        self._adjoint_nuclear.set(properties)

    def adjoint_nuclear_data_available(
        self,
        file_type: FileType | str | None = None,
        version: int | None = None,
        evaluation_temp: TemperatureLike | None = None,
    ) -> bool:
        return self._adjoint_nuclear.available(file_type, version, evaluation_temp)

    def get_adjoint_nuclear_data_file_types(self) -> set[FileType]:
        return self._adjoint_nuclear.file_types()

    def get_adjoint_nuclear_data_file_versions(self, file_type: FileType | str) -> set[int]:
        return self._adjoint_nuclear.versions(file_type)

    def get_recommended_adjoint_nuclear_data_file_version(
        self, file_type: FileType | str
    ) -> int:
        return self._adjoint_nuclear.recommended_version(file_type)

    def get_adjoint_nuclear_data_evaluation_temps_in_mev(
        self, file_type: FileType | str, version: int
    ) -> list[Energy]:
        return self._adjoint_nuclear.evaluation_temps_in_mev(file_type, version)

    def get_adjoint_nuclear_data_evaluation_temps(
        self, file_type: FileType | str, version: int
    ) -> list[Temperature]:
        return self._adjoint_nuclear.evaluation_temps(file_type, version)

    def get_adjoint_nuclear_data_properties(
        self,
        file_type: FileType | str,
        version: int,
        evaluation_temp: TemperatureLike,
        require_exact_match: bool = True,
    ) -> AdjointNuclearDataProperties:
        return self._adjoint_nuclear.get(
            file_type, version, evaluation_temp, require_exact_match
        )

    # -- thermal nuclear -----------------------------------------------------

    def set_thermal_nuclear_data_properties(
        self, properties: ThermalNuclearDataProperties
    ) -> None:
        self._check_nuclide_record(properties, ThermalNuclearDataProperties)
        self._thermal_nuclear.set(properties)

    def thermal_nuclear_data_available(
        self,
        name: str | None = None,
        file_type: FileType | str | None = None,
        version: int | None = None,
        evaluation_temp: TemperatureLike | None = None,
    ) -> bool:
        return self._thermal_nuclear.available(name, file_type, version, evaluation_temp)

    def get_thermal_nuclear_data_names(self) -> set[str]:
        return self._thermal_nuclear.names()

    def get_thermal_nuclear_data_file_types(self, name: str) -> set[FileType]:
        return self._thermal_nuclear.file_types(name)

    def get_thermal_nuclear_data_file_versions(
        self, name: str, file_type: FileType | str
    ) -> set[int]:
        return self._thermal_nuclear.versions(name, file_type)

    def get_recommended_thermal_nuclear_data_file_version(
        self, name: str, file_type: FileType | str
    ) -> int:
        return self._thermal_nuclear.recommended_version(name, file_type)

    def get_thermal_nuclear_data_evaluation_temps_in_mev(
        self, name: str, file_type: FileType | str, version: int
    ) -> list[Energy]:
        return self._thermal_nuclear.evaluation_temps_in_mev(name, file_type, version)

    def get_thermal_nuclear_data_evaluation_temps(
        self, name: str, file_type: FileType | str, version: int
    ) -> list[Temperature]:
        return self._thermal_nuclear.evaluation_temps(name, file_type, version)

    def get_thermal_nuclear_data_properties(
        self,
        name: str,
        file_type: FileType | str,
        version: int,
        evaluation_temp: TemperatureLike,
        require_exact_match: bool = True,
    ) -> ThermalNuclearDataProperties:
        return self._thermal_nuclear.get(
            name, file_type, version, evaluation_temp, require_exact_match
        )

    # -- adjoint thermal nuclear ---------------------------------------------

    def set_adjoint_thermal_nuclear_data_properties(
        self, properties: AdjointThermalNuclearDataProperties
    ) -> None:
        self._check_nuclide_record(properties, AdjointThermalNuclearDataProperties)
        self._adjoint_thermal_nuclear.set(properties)

    def adjoint_thermal_nuclear_data_available(
        self,
        name: str | None = None,
        file_type: FileType | str | None = None,
        version: int | None = None,
        evaluation_temp: TemperatureLike | None = None,
    ) -> bool:
        return self._adjoint_thermal_nuclear.available(
            name, file_type, version, evaluation_temp
        )

    def get_adjoint_thermal_nuclear_data_names(self) -> set[str]:
        return self._adjoint_thermal_nuclear.names()

    def get_adjoint_thermal_nuclear_data_file_types(self, name: str) -> set[FileType]:
        return self._adjoint_thermal_nuclear.file_types(name)

    def get_adjoint_thermal_nuclear_data_file_versions(
        self, name: str, file_type: FileType | str
    ) -> set[int]:
        return self._adjoint_thermal_nuclear.versions(name, file_type)

    def get_recommended_adjoint_thermal_nuclear_data_file_version(
        self, name: str, file_type: FileType | str
    ) -> int:
        return self._adjoint_thermal_nuclear.recommended_version(name, file_type)

    def get_adjoint_thermal_nuclear_data_evaluation_temps_in_mev(
        self, name: str, file_type: FileType | str, version: int
    ) -> list[Energy]:
        return self._adjoint_thermal_nuclear.evaluation_temps_in_mev(
            name, file_type, version
        )

    def get_adjoint_thermal_nuclear_data_evaluation_temps(
        self, name: str, file_type: FileType | str, version: int
    ) -> list[Temperature]:
        return self._adjoint_thermal_nuclear.evaluation_temps(name, file_type, version)

    def get_adjoint_thermal_nuclear_data_properties(
        self,
        name: str,
        file_type: FileType | str,
        version: int,
        evaluation_temp: TemperatureLike,
        require_exact_match: bool = True,
    ) -> AdjointThermalNuclearDataProperties:
        return self._adjoint_thermal_nuclear.get(
            name, file_type, version, evaluation_temp, require_exact_match
        )

    # -- photonuclear --------------------------------------------------------

    def set_photonuclear_data_properties(
        self, properties: PhotonuclearDataProperties
    ) -> None:
        self._check_nuclide_record(properties, PhotonuclearDataProperties)
        self._photonuclear.set(properties)

    def photonuclear_data_available(
        self, file_type: FileType | str | None = None, version: int | None = None
    ) -> bool:
        return self._photonuclear.available(file_type, version)

    def get_photonuclear_data_file_types(self) -> set[FileType]:
        return self._photonuclear.file_types()

    def get_photonuclear_data_file_versions(self, file_type: FileType | str) -> set[int]:
        return self._photonuclear.versions(file_type)

    def get_recommended_photonuclear_data_file_version(
        self, file_type: FileType | str
    ) -> int:
        return self._photonuclear.recommended_version(file_type)

    def get_photonuclear_data_properties(
        self, file_type: FileType | str, version: int
    ) -> PhotonuclearDataProperties:
        return self._photonuclear.get(file_type, version)

    # -- adjoint photonuclear ------------------------------------------------

    def set_adjoint_photonuclear_data_properties(
        self, properties: AdjointPhotonuclearDataProperties
    ) -> None:
        self._check_nuclide_record(properties, AdjointPhotonuclearDataProperties)
        self._adjoint_photonuclear.set(properties)

    def adjoint_photonuclear_data_available(
        self, file_type: FileType | str | None = None, version: int | None = None
    ) -> bool:
        return self._adjoint_photonuclear.available(file_type, version)

    def get_adjoint_photonuclear_data_file_types(self) -> set[FileType]:
        return self._adjoint_photonuclear.file_types()

    def get_adjoint_photonuclear_data_file_versions(
        self, file_type: FileType | str
    ) -> set[int]:
        return self._adjoint_photonuclear.versions(file_type)

    def get_recommended_adjoint_photonuclear_data_file_version(
        self, file_type: FileType | str
    ) -> int:
        return self._adjoint_photonuclear.recommended_version(file_type)

    def get_adjoint_photonuclear_data_properties(
        self, file_type: FileType | str, version: int
    ) -> AdjointPhotonuclearDataProperties:
        return self._adjoint_photonuclear.get(file_type, version)

    # -- cloning -------------------------------------------------------------

    def _copy(
        self,
        atom_properties: AtomProperties,
        clone_records: bool,
    ) -> NuclideProperties:
        other = self.__class__(
            self.zaid,
            self.atomic_weight_ratio,
            atom_properties=atom_properties,
            name=self.name,
        )
        for attr in self._NUCLEAR_MAPS:
            source = getattr(self, attr)
            setattr(other, attr, source.deep_copy() if clone_records else source.copy())
        return other

    def clone(self) -> NuclideProperties:
        """Return a nuclide sharing the atom properties and every record"""
        return self._copy(self._atom_properties, clone_records=False)

    def deep_clone(self) -> NuclideProperties:
        """Return a nuclide that shares nothing with this one"""
        logger.debug("Deep cloning nuclide properties %s.", self.name)
        return self._copy(self._atom_properties.deep_clone(), clone_records=True)

    def partial_deep_clone(self) -> NuclideProperties:
        """Return a nuclide sharing the atom properties but cloning nuclear records"""
        logger.debug("Partially deep cloning nuclide properties %s.", self.name)
        return self._copy(self._atom_properties, clone_records=True)
